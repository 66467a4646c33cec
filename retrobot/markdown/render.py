"""IR to Slack renderers.

Two output targets share the markdown subset:

* ``render_blocks`` maps the block IR onto Block Kit objects (``header`` and
  ``rich_text`` blocks) for surfaces that accept a block list.
* ``markdown_to_mrkdwn`` rewrites raw markdown into a single mrkdwn string for
  surfaces that only take flat text. It works on the raw text, not the IR, and
  keeps the legacy substitutions exactly.
"""

from __future__ import annotations

import re
from typing import Any

from retrobot.config.schema import DEFAULT_EMPTY_NOTICE
from retrobot.markdown.ir import (
    Block,
    Bold,
    BulletList,
    Header,
    InlineSpan,
    Italic,
    Link,
    Paragraph,
    span_text,
)

HEADER_TEXT_LIMIT = 150


# ---------------------------------------------------------------------------
# Structured (Block Kit)
# ---------------------------------------------------------------------------

def render_span(span: InlineSpan) -> dict[str, Any]:
    """Map one inline span to a rich_text element."""
    if isinstance(span, Link):
        return {"type": "link", "url": span.url, "text": span.text}
    element: dict[str, Any] = {"type": "text", "text": span.text}
    if isinstance(span, Bold):
        element["style"] = {"bold": True}
    elif isinstance(span, Italic):
        element["style"] = {"italic": True}
    return element


def _rich_text_section(spans: list[InlineSpan]) -> dict[str, Any]:
    # Slack rejects empty text elements
    return {
        "type": "rich_text_section",
        "elements": [render_span(s) for s in spans if s.text],
    }


def _bold_section(spans: list[InlineSpan]) -> dict[str, Any]:
    section = _rich_text_section(spans)
    for element in section["elements"]:
        element["style"] = {**element.get("style", {}), "bold": True}
    return section


def render_block(block: Block) -> dict[str, Any]:
    if isinstance(block, Header):
        text = span_text(block.spans)
        if len(text) > HEADER_TEXT_LIMIT:
            # Slack rejects the whole payload for an over-long header
            return {"type": "rich_text", "elements": [_bold_section(block.spans)]}
        return {
            "type": "header",
            "text": {"type": "plain_text", "text": text, "emoji": True},
        }
    if isinstance(block, BulletList):
        return {
            "type": "rich_text",
            "elements": [{
                "type": "rich_text_list",
                "style": "bullet",
                "elements": [_rich_text_section(item) for item in block.items],
            }],
        }
    if isinstance(block, Paragraph):
        return {"type": "rich_text", "elements": [_rich_text_section(block.spans)]}
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_blocks(
    blocks: list[Block],
    empty_notice: str = DEFAULT_EMPTY_NOTICE,
) -> list[dict[str, Any]]:
    """Render a block sequence to Block Kit objects, in order.

    An empty sequence yields a single placeholder section so callers always
    have something to post.
    """
    if not blocks:
        return [{"type": "section", "text": {"type": "mrkdwn", "text": empty_notice}}]
    return [render_block(b) for b in blocks]


# ---------------------------------------------------------------------------
# Flat (mrkdwn)
# ---------------------------------------------------------------------------

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
# \r, U+2028 and U+2029 also end a line, so a CRLF header keeps its
# closing * before the \r.
_EOL = "\n\r\u2028\u2029"
_HEADER_RES = [
    (level, re.compile(rf"(?:(?<=[{_EOL}])|\A){'#' * level} ([^{_EOL}]+)(?=[{_EOL}]|\Z)"))
    for level in (3, 2, 1)
]
_LIST_START_RE = re.compile(r"([^\n])\n([-*•] )")
_EXTRA_NEWLINES_RE = re.compile(r"\n{3,}")


def markdown_to_mrkdwn(text: str, max_header_level: int = 3) -> str:
    """Convert markdown to Slack mrkdwn with ordered text substitutions.

    Links become ``<url|text>``, headers up to *max_header_level* become bold
    lines padded with blank lines, a blank line is forced before a bullet that
    follows text, and runs of 3+ newlines collapse to 2. Not a block parser:
    a ``#`` inside a list item is rewritten like any other header line.
    """
    result = _LINK_RE.sub(r"<\2|\1>", text)

    for level, header_re in _HEADER_RES:
        if level <= max_header_level:
            result = header_re.sub(r"\n*\1*\n", result)

    result = _LIST_START_RE.sub(r"\1\n\n\2", result)
    return _EXTRA_NEWLINES_RE.sub("\n\n", result)
