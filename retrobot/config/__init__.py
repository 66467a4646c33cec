"""Configuration module for retrobot."""

from retrobot.config.schema import (
    CategoryStyle,
    InvalidConfiguration,
    RenderConfig,
    build_config,
)

__all__ = ["CategoryStyle", "InvalidConfiguration", "RenderConfig", "build_config"]
