# Template Engine Module
# Jinja2 templates for comments, navigation, excerpts and the footer

from .renderer import (
    ThemeRenderer,
    format_comment_date,
    format_comment_time,
    load_comments_from_json,
    load_render_context_from_json,
)

__all__ = [
    "ThemeRenderer",
    "format_comment_date",
    "format_comment_time",
    "load_comments_from_json",
    "load_render_context_from_json",
]
