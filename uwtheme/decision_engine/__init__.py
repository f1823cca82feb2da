# Decision Engine Module
# Pure presentational decisions: footer classes, comment variants, excerpts

from .engine import (
    RenderDecisionEngine,
    compute_body_classes,
    compute_excerpt_suffix,
    compute_footer_sidebar_class,
    continue_reading_link,
    footer_class_attribute,
    select_comment_template,
    should_show_pagination_nav,
    truncate_words,
)
from .links import extract_first_link, sanitize_url
from .models import CommentTemplate, PingbackComment, StandardComment

__all__ = [
    "RenderDecisionEngine",
    "compute_body_classes",
    "compute_excerpt_suffix",
    "compute_footer_sidebar_class",
    "continue_reading_link",
    "footer_class_attribute",
    "select_comment_template",
    "should_show_pagination_nav",
    "truncate_words",
    "extract_first_link",
    "sanitize_url",
    "CommentTemplate",
    "PingbackComment",
    "StandardComment",
]
