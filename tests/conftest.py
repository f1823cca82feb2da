"""Shared test fixtures for the UW-Madison theme."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure the package is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from uwtheme.common.models import (
    ApprovalState,
    CommentRecord,
    PostMeta,
    RenderContext,
    SidebarActivationSet,
)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the sample data directory."""
    return PROJECT_ROOT / "fixtures"


@pytest.fixture
def sample_post() -> PostMeta:
    """A published post with a link in its content."""
    return PostMeta(
        id=42,
        title="Bucky's Big Day",
        permalink="https://news.example.edu/2012/03/buckys-big-day/",
        date=datetime(2012, 3, 5, 15, 7),
        author_name="Jane Editor",
        author_url="https://news.example.edu/author/jane/",
        content='<p>Read the <a href="https://www.wisc.edu/news/">announcement</a>.</p>',
    )


@pytest.fixture
def sample_context(sample_post: PostMeta) -> RenderContext:
    """A singular post view with two footer sidebars active."""
    return RenderContext(
        current_page=1,
        total_pages=3,
        sidebars=SidebarActivationSet.of("sidebar-1", "sidebar-3", "sidebar-5"),
        post=sample_post,
        template="default",
        is_singular=True,
        author_count=1,
        older_posts_url="/page/2/",
        home_url="https://news.example.edu/",
    )


@pytest.fixture
def make_comment():
    """Factory for comment records with sensible display fields."""

    def _make(comment_id: int = 1, **overrides) -> CommentRecord:
        data = {
            "id": comment_id,
            "author_name": "Alex",
            "author_url": "https://alex.example.com",
            "content": "<p>Great news!</p>",
            "date": datetime(2012, 3, 5, 16, 0),
            "permalink": f"https://news.example.edu/p/#comment-{comment_id}",
            "approval": ApprovalState.APPROVED,
        }
        data.update(overrides)
        return CommentRecord(**data)

    return _make
