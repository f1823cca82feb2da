"""Rendering-path variants returned by the decision engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommentTemplate(str, Enum):
    """Closed set of comment rendering paths."""
    PINGBACK = "pingback"
    STANDARD = "standard"


@dataclass(frozen=True)
class PingbackComment:
    """One-line attribution with an edit link."""
    template: CommentTemplate = CommentTemplate.PINGBACK


@dataclass(frozen=True)
class StandardComment:
    """Full comment article with avatar, meta and reply link."""
    avatar_size: int
    awaiting_moderation: bool = False
    template: CommentTemplate = CommentTemplate.STANDARD


# Footer class label per number of active footer sidebars
FOOTER_CLASS_LABELS: dict[int, str] = {
    1: "one",
    2: "two",
    3: "three",
}
