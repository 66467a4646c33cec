"""Markdown subset compiler for Slack instructions."""

from retrobot.markdown.chunk import chunk_lines
from retrobot.markdown.format import (
    BaseRenderer,
    FlatRenderer,
    StructuredRenderer,
    get_renderer,
    instructions_to_blocks,
    instructions_to_chunks,
)
from retrobot.markdown.ir import markdown_to_blocks, parse_inline
from retrobot.markdown.render import markdown_to_mrkdwn, render_blocks

__all__ = [
    "BaseRenderer",
    "FlatRenderer",
    "StructuredRenderer",
    "chunk_lines",
    "get_renderer",
    "instructions_to_blocks",
    "instructions_to_chunks",
    "markdown_to_blocks",
    "markdown_to_mrkdwn",
    "parse_inline",
    "render_blocks",
]
