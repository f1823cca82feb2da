"""Shared Pydantic data models for the theme.

These models describe the per-request facts the host CMS hands to the
theme. They are frozen: nothing here is mutated during a render pass.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# === Enums ===

class CommentType(str, Enum):
    """Comment types the host knows about."""
    COMMENT = "comment"
    PINGBACK = "pingback"
    TRACKBACK = "trackback"


class ApprovalState(str, Enum):
    """Moderation state of a comment."""
    APPROVED = "approved"
    PENDING = "pending"


# === Comments ===

class CommentRecord(BaseModel):
    """A single comment as supplied by the host comment store.

    ``type`` is a plain string so that unrecognised types are accepted
    and rendered as standard comments.
    """
    id: int
    type: str = CommentType.COMMENT.value
    parent_id: int = 0
    approval: ApprovalState = ApprovalState.APPROVED
    depth: int = Field(default=1, ge=1)

    # Display fields
    author_name: str = ""
    author_url: str = ""
    content: str = ""
    date: Optional[datetime] = None
    permalink: str = ""
    edit_url: Optional[str] = None
    reply_url: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def is_reply(self) -> bool:
        return self.parent_id != 0


# === Sidebars ===

class SidebarActivationSet(BaseModel):
    """Which widget areas currently hold active widgets."""
    flags: dict[str, bool] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def of(cls, *active_ids: str) -> SidebarActivationSet:
        """Build a set where exactly the given ids are active."""
        return cls(flags={sidebar_id: True for sidebar_id in active_ids})

    def is_active(self, sidebar_id: str) -> bool:
        return bool(self.flags.get(sidebar_id, False))

    def active_ids(self, candidates: list[str]) -> list[str]:
        """Return the active ids among candidates, in candidate order."""
        return [c for c in candidates if self.is_active(c)]


# === Posts ===

class PostMeta(BaseModel):
    """The post currently being rendered."""
    id: int = 0
    title: str = ""
    permalink: str = ""
    date: Optional[datetime] = None
    author_name: str = ""
    author_url: str = ""
    content: str = ""
    excerpt: str = ""

    model_config = {"frozen": True}

    @property
    def has_excerpt(self) -> bool:
        return bool(self.excerpt.strip())


# === Render context ===

class RenderContext(BaseModel):
    """Per-request, read-only bundle of facts the theme consumes."""
    current_page: int = Field(default=1, ge=0)
    total_pages: int = Field(default=0, ge=0)
    sidebars: SidebarActivationSet = Field(default_factory=SidebarActivationSet)
    comment: Optional[CommentRecord] = None
    post: Optional[PostMeta] = None
    template: Optional[str] = None
    is_singular: bool = False
    is_home: bool = False
    is_attachment: bool = False
    is_404: bool = False
    author_count: int = Field(default=1, ge=0)
    older_posts_url: str = ""
    newer_posts_url: str = ""
    site_name: str = ""
    home_url: str = "/"

    model_config = {"frozen": True}

    @property
    def is_multi_author(self) -> bool:
        return self.author_count > 1
