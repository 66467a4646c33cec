"""Unified entry point for instructions markdown -> Slack output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from loguru import logger

from retrobot.config.schema import RenderConfig, build_config
from retrobot.markdown.chunk import chunk_lines
from retrobot.markdown.ir import markdown_to_blocks
from retrobot.markdown.render import markdown_to_mrkdwn, render_blocks


class BaseRenderer(ABC):
    """Turns instructions text into a list of postable Slack units."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config if config is not None else RenderConfig()

    @abstractmethod
    def render(self, text: str | None) -> list[Any]:
        ...


class StructuredRenderer(BaseRenderer):
    """Block Kit objects built from the parsed block IR."""

    def render(self, text: str | None) -> list[dict[str, Any]]:
        if not text or not text.strip():
            return render_blocks([], self.config.empty_notice)
        blocks = markdown_to_blocks(text, self.config.max_header_level)
        logger.debug(f"Parsed instructions into {len(blocks)} block(s)")
        return render_blocks(blocks, self.config.empty_notice)


class FlatRenderer(BaseRenderer):
    """mrkdwn strings, each within the configured chunk size."""

    def render(self, text: str | None) -> list[str]:
        if not text or not text.strip():
            return [self.config.empty_notice]
        mrkdwn = markdown_to_mrkdwn(text, self.config.max_header_level)
        return chunk_lines(mrkdwn, self.config.max_chunk_size)


_RENDERERS: dict[str, type[BaseRenderer]] = {
    "structured": StructuredRenderer,
    "flat": FlatRenderer,
}


def get_renderer(kind: str, config: RenderConfig | None = None) -> BaseRenderer:
    """Look up a renderer by name ("structured" or "flat")."""
    try:
        renderer_cls = _RENDERERS[kind]
    except KeyError:
        raise ValueError(f"Unknown renderer: {kind!r}") from None
    return renderer_cls(config)


def instructions_to_blocks(
    text: str | None,
    max_header_level: int | None = None,
    config: RenderConfig | None = None,
) -> list[dict[str, Any]]:
    """Convert instructions markdown to a Block Kit block list."""
    cfg = build_config(config, max_header_level=max_header_level)
    return StructuredRenderer(cfg).render(text)


def instructions_to_chunks(
    text: str | None,
    max_chunk_size: int | None = None,
    max_header_level: int | None = None,
    config: RenderConfig | None = None,
) -> list[str]:
    """Convert instructions markdown to mrkdwn chunks for section blocks.

    Raises InvalidConfiguration for a non-positive *max_chunk_size* or a
    header cap outside 1-3.
    """
    cfg = build_config(
        config, max_chunk_size=max_chunk_size, max_header_level=max_header_level,
    )
    return FlatRenderer(cfg).render(text)
