"""Retro records handed to the summary builder by the storage layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DiscussionItem:
    user_name: str
    content: str
    category: str  # key into RenderConfig.categories


@dataclass
class ActionItem:
    responsible_user_name: str
    content: str
    completed: bool = False
