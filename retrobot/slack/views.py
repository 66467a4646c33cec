"""Modal payloads for viewing and editing retro instructions."""

from __future__ import annotations

from typing import Any

from retrobot.config.schema import RenderConfig
from retrobot.markdown.format import FlatRenderer, StructuredRenderer


def _plain(text: str) -> dict[str, Any]:
    return {"type": "plain_text", "text": text}


def _mrkdwn_section(text: str) -> dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def build_view_instructions_modal(
    instructions: str | None,
    *,
    structured: bool = False,
    config: RenderConfig | None = None,
) -> dict[str, Any]:
    """Read-only modal showing the team's instructions.

    Flat mode posts each chunk as its own section so no section exceeds
    Slack's text limit.
    """
    if structured:
        blocks = StructuredRenderer(config).render(instructions)
    else:
        chunks = FlatRenderer(config).render(instructions)
        blocks = [_mrkdwn_section(c) for c in chunks]

    return {
        "type": "modal",
        "callback_id": "view_instructions_modal",
        "title": _plain("Retro Instructions"),
        "close": _plain("Close"),
        "blocks": blocks,
    }


def build_edit_instructions_modal(current_instructions: str | None = None) -> dict[str, Any]:
    return {
        "type": "modal",
        "callback_id": "edit_instructions_modal",
        "title": _plain("Edit Retro Instructions"),
        "submit": _plain("Save"),
        "close": _plain("Cancel"),
        "blocks": [
            {
                "type": "input",
                "block_id": "instructions_block",
                "element": {
                    "type": "plain_text_input",
                    "action_id": "instructions_input",
                    "multiline": True,
                    "initial_value": current_instructions or "",
                    "placeholder": _plain("Enter instructions in markdown format..."),
                },
                "label": _plain("Instructions (Markdown)"),
                "hint": _plain(
                    "Use markdown formatting. These instructions will be displayed to your team."
                ),
            },
        ],
    }
