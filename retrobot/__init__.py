"""retrobot - renders team retro instructions for Slack surfaces."""

__version__ = "0.1.0"
