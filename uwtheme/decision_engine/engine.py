"""Render Decision Engine: presentational decisions for a render pass.

Each decision is a pure function of the RenderContext (or part of it).
RenderDecisionEngine bundles the defaults and lets a child theme swap
any of them for its own implementation when the engine is built.

Usage:
    engine = RenderDecisionEngine()
    engine.footer_sidebar_class(context.sidebars)   # "two"
    engine.comment_template(comment)                # StandardComment(68)

    engine = RenderDecisionEngine(overrides={"pagination_nav": lambda ctx: False})
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any, Callable, Iterable, Optional, Union

from markupsafe import Markup

from uwtheme.common.config import Settings, settings as default_settings
from uwtheme.common.logging import setup_logging
from uwtheme.common.models import (
    ApprovalState,
    CommentRecord,
    CommentType,
    RenderContext,
    SidebarActivationSet,
)

from .links import extract_first_link, sanitize_url
from .models import FOOTER_CLASS_LABELS, PingbackComment, StandardComment

logger = setup_logging(module_name="decision_engine")

CommentVariant = Union[PingbackComment, StandardComment]

FOOTER_SIDEBARS: tuple[str, ...] = tuple(default_settings.theme.footer_sidebars)
EXCLUDED_SINGULAR_TEMPLATES: frozenset[str] = frozenset(
    default_settings.theme.excluded_singular_templates
)
PINGBACK_TYPES = frozenset({CommentType.PINGBACK.value, CommentType.TRACKBACK.value})

CONTINUE_READING_LABEL = Markup('Continue reading <span class="meta-nav">&rarr;</span>')
ELLIPSIS = Markup(" &hellip;")


# --- Footer ---

def compute_footer_sidebar_class(
    activation: SidebarActivationSet,
    slots: Iterable[str] = FOOTER_SIDEBARS,
) -> str:
    """Map the number of active footer sidebars to a class label.

    Zero active slots, or more slots than there are labels, yield "".
    """
    count = len(activation.active_ids(list(slots)))
    return FOOTER_CLASS_LABELS.get(count, "")


def footer_class_attribute(label: str) -> Markup:
    """Render ``class="<label>"`` or nothing for an empty label."""
    if not label:
        return Markup("")
    return Markup('class="{0}"').format(label)


# --- Comments ---

def select_comment_template(
    comment: CommentRecord,
    top_level_avatar: int = 68,
    reply_avatar: int = 39,
) -> CommentVariant:
    """Choose the rendering path for a comment.

    Pingbacks and trackbacks get the one-line variant. Anything else,
    unknown types included, renders as a standard comment.
    """
    if comment.type in PINGBACK_TYPES:
        return PingbackComment()

    return StandardComment(
        avatar_size=reply_avatar if comment.is_reply else top_level_avatar,
        awaiting_moderation=comment.approval == ApprovalState.PENDING,
    )


# --- Body classes ---

def _template_slug(template: Optional[str]) -> str:
    if not template:
        return ""
    path = PurePosixPath(template)
    if path.suffix in (".php", ".html", ".jinja2"):
        return path.stem
    return path.name


def compute_body_classes(
    context: RenderContext,
    excluded_templates: Iterable[str] = EXCLUDED_SINGULAR_TEMPLATES,
) -> set[str]:
    """Classes the theme adds to <body> for this request."""
    classes: set[str] = set()

    if context.author_count == 1:
        classes.add("single-author")

    excluded = {_template_slug(t) for t in excluded_templates}
    if (
        context.is_singular
        and not context.is_home
        and _template_slug(context.template) not in excluded
    ):
        classes.add("singular")

    return classes


# --- Pagination ---

def should_show_pagination_nav(context: RenderContext) -> bool:
    return context.total_pages > 1


# --- Excerpts ---

def continue_reading_link(permalink: str, label: Markup = CONTINUE_READING_LABEL) -> Markup:
    """Return a "Continue reading" link for excerpts."""
    return Markup(' <a href="{0}">{1}</a>').format(sanitize_url(permalink), label)


def compute_excerpt_suffix(
    has_custom_excerpt: bool,
    is_attachment: bool,
    permalink: str = "",
    label: Markup = CONTINUE_READING_LABEL,
) -> Markup:
    """Markup appended to a post excerpt.

    Automatic excerpts end with an ellipsis and the continue-reading
    link. Custom excerpts get the link only outside attachment pages.
    """
    if not has_custom_excerpt:
        return ELLIPSIS + continue_reading_link(permalink, label)
    if not is_attachment:
        return continue_reading_link(permalink, label)
    return Markup("")


def excerpt_length(config: Settings = default_settings) -> int:
    return config.theme.excerpt_length


def truncate_words(text: str, num_words: int) -> tuple[str, bool]:
    """Cut text to num_words words. Returns (text, was_truncated)."""
    words = text.split()
    if len(words) <= num_words:
        return " ".join(words), False
    return " ".join(words[:num_words]), True


# --- Engine ---

class RenderDecisionEngine:
    """Resolves every presentational decision to a default or an override.

    Overrides are keyed by operation name and fixed when the engine is
    built, so a child theme can replace a decision without touching the
    templates that consume it.
    """

    OPERATIONS: tuple[str, ...] = (
        "footer_sidebar_class",
        "comment_template",
        "body_classes",
        "pagination_nav",
        "excerpt_suffix",
        "first_link",
    )

    def __init__(
        self,
        overrides: Optional[dict[str, Callable[..., Any]]] = None,
        config: Settings = default_settings,
    ):
        """Initialize the engine.

        Args:
            overrides: Operation name to replacement callable.
            config: Settings supplying slots, exclusions and avatar sizes.

        Raises:
            ValueError: If an override names an unknown operation.
            TypeError: If an override is not callable.
        """
        self.config = config
        theme = config.theme
        self._footer_slots = tuple(theme.footer_sidebars)
        self._excluded_templates = frozenset(theme.excluded_singular_templates)

        self._operations: dict[str, Callable[..., Any]] = {
            "footer_sidebar_class": lambda activation: compute_footer_sidebar_class(
                activation, self._footer_slots
            ),
            "comment_template": lambda comment: select_comment_template(
                comment, theme.top_level_avatar_size, theme.reply_avatar_size
            ),
            "body_classes": lambda context: compute_body_classes(
                context, self._excluded_templates
            ),
            "pagination_nav": should_show_pagination_nav,
            "excerpt_suffix": compute_excerpt_suffix,
            "first_link": extract_first_link,
        }

        for name, func in (overrides or {}).items():
            if name not in self._operations:
                raise ValueError(
                    f"Unknown operation '{name}'. Expected one of: {', '.join(self.OPERATIONS)}"
                )
            if not callable(func):
                raise TypeError(f"Override for '{name}' must be callable")
            self._operations[name] = func
            logger.info("Using override for %s", name)

    @property
    def operations(self) -> list[str]:
        return list(self.OPERATIONS)

    @property
    def footer_slots(self) -> tuple[str, ...]:
        return self._footer_slots

    def resolve(self, name: str) -> Callable[..., Any]:
        """Return the callable bound to an operation name."""
        try:
            return self._operations[name]
        except KeyError:
            raise ValueError(f"Unknown operation '{name}'") from None

    def footer_sidebar_class(self, activation: SidebarActivationSet) -> str:
        return self._operations["footer_sidebar_class"](activation)

    def comment_template(self, comment: CommentRecord) -> CommentVariant:
        return self._operations["comment_template"](comment)

    def body_classes(self, context: RenderContext) -> set[str]:
        return set(self._operations["body_classes"](context))

    def pagination_nav(self, context: RenderContext) -> bool:
        return bool(self._operations["pagination_nav"](context))

    def excerpt_suffix(
        self, has_custom_excerpt: bool, is_attachment: bool, permalink: str = ""
    ) -> Markup:
        return Markup(
            self._operations["excerpt_suffix"](has_custom_excerpt, is_attachment, permalink)
        )

    def first_link(self, content: str) -> Optional[str]:
        return self._operations["first_link"](content)

    def excerpt_length(self) -> int:
        return excerpt_length(self.config)
