"""Retrospective summary text in Slack mrkdwn."""

from __future__ import annotations

from datetime import date

from retrobot.config.schema import CategoryStyle, RenderConfig
from retrobot.slack.types import ActionItem, DiscussionItem


def _heading(style: CategoryStyle) -> str:
    label = f"{style.emoji} {style.label}" if style.emoji else style.label
    return f"*{label}*"


def _item_line(user: str, content: str, marker: str = "") -> str:
    return f"• {marker}*{user}:* {content}"


def generate_retro_summary(
    discussion_items: list[DiscussionItem],
    action_items: list[ActionItem],
    *,
    completed_on: date,
    config: RenderConfig | None = None,
) -> str:
    """
    Build the summary saved when a retro is finished.

    One section per configured category, in configuration order, then
    action items split into outstanding and completed. Items whose category
    is not configured are left out.
    """
    cfg = config if config is not None else RenderConfig()
    parts = ["*Retrospective Summary*\n\n", f"_Completed on {completed_on.isoformat()}_\n\n"]

    for key, style in cfg.categories.items():
        parts.append(f"{_heading(style)}\n\n")
        items = [i for i in discussion_items if i.category == key]
        if not items:
            parts.append("_No items_\n\n")
            continue
        parts.extend(_item_line(i.user_name, i.content) + "\n" for i in items)
        parts.append("\n")

    parts.append(f"{_heading(cfg.action_items)}\n\n")
    if not action_items:
        parts.append("_No action items_\n\n")
        return "".join(parts)

    outstanding = [i for i in action_items if not i.completed]
    completed = [i for i in action_items if i.completed]
    for title, items, marker in (
        ("Outstanding", outstanding, "☐ "),
        ("Completed", completed, "☑ "),
    ):
        if not items:
            continue
        parts.append(f"*{title}:*\n")
        parts.extend(
            _item_line(i.responsible_user_name, i.content, marker) + "\n" for i in items
        )
        parts.append("\n")

    return "".join(parts)
