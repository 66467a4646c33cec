"""Configuration schema using Pydantic."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

DEFAULT_MAX_CHUNK_SIZE = 2800  # Slack caps section text at 3000 chars
DEFAULT_MAX_HEADER_LEVEL = 3
DEFAULT_EMPTY_NOTICE = (
    "_No instructions have been set yet. Click 'Edit Instructions' to add some._"
)


class InvalidConfiguration(ValueError):
    """Raised when caller-supplied render options are inconsistent."""


class CategoryStyle(BaseModel):
    """Display label and emoji for one retro category."""
    label: str
    emoji: str = ""


def _default_categories() -> dict[str, CategoryStyle]:
    return {
        "good": CategoryStyle(label="What went well", emoji=":slightly_smiling_face:"),
        "bad": CategoryStyle(label="What could be improved", emoji=":slightly_frowning_face:"),
        "question": CategoryStyle(label="Questions / Discussion topics", emoji=":question:"),
    }


class RenderConfig(BaseModel):
    """Options for the instructions compiler and the views built on it."""
    max_chunk_size: int = Field(default=DEFAULT_MAX_CHUNK_SIZE, gt=0)
    max_header_level: int = Field(default=DEFAULT_MAX_HEADER_LEVEL, ge=1, le=3)
    empty_notice: str = DEFAULT_EMPTY_NOTICE
    categories: dict[str, CategoryStyle] = Field(default_factory=_default_categories)
    action_items: CategoryStyle = Field(
        default_factory=lambda: CategoryStyle(label="Action Items", emoji="🎯")
    )


def build_config(base: RenderConfig | None = None, **overrides: Any) -> RenderConfig:
    """
    Build a validated RenderConfig.

    Overrides set to ``None`` are ignored so callers can forward optional
    keyword arguments untouched. Validation failures surface as
    InvalidConfiguration.
    """
    values = base.model_dump() if base is not None else {}
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return RenderConfig(**values)
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e
