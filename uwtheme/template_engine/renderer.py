"""
Template Renderer for theme fragments.
Turns decision-engine results into markup through Jinja2 templates.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from uwtheme.common.logging import setup_logging
from uwtheme.common.models import CommentRecord, PostMeta, RenderContext
from uwtheme.decision_engine import (
    PingbackComment,
    footer_class_attribute,
    sanitize_url,
    truncate_words,
)
from uwtheme.hooks import HookRegistry
from uwtheme.theme import Theme, register_theme_hooks

logger = setup_logging(module_name="template_engine")

# Host default before the theme's excerpt_length filter runs
DEFAULT_EXCERPT_LENGTH = 55
DEFAULT_EXCERPT_MORE = " [&hellip;]"

FOOTER_AREA_IDS = ("first", "second", "third")


def format_comment_date(value: datetime) -> str:
    """e.g. 'March 5, 2012'"""
    return f"{value:%B} {value.day}, {value.year}"


def format_comment_time(value: datetime) -> str:
    """e.g. '3:07 pm'"""
    hour = value.hour % 12 or 12
    return f"{hour}:{value:%M} {'am' if value.hour < 12 else 'pm'}"


class ThemeRenderer:
    """
    Renders theme fragments using Jinja2 templates.

    Usage:
        renderer = ThemeRenderer()
        html = renderer.render_comment(comment)
        footer = renderer.render_footer(context, widgets={"sidebar-3": [...]})
    """

    def __init__(
        self,
        theme: Optional[Theme] = None,
        hooks: Optional[HookRegistry] = None,
        templates_dir: Optional[Path] = None,
    ):
        """
        Initialize the theme renderer.

        Args:
            theme: Theme whose decisions and settings drive rendering.
            hooks: Host hook registry. A new one is created and the
                   theme's handlers are subscribed when omitted.
            templates_dir: Path to templates directory.
                          Defaults to the configured templates_dir.
        """
        self.theme = theme or Theme()
        if hooks is None:
            hooks = register_theme_hooks(HookRegistry(), self.theme)
        self.hooks = hooks

        if templates_dir is None:
            templates_dir = Path(self.theme.config.templates_dir)

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
            extensions=["jinja2.ext.i18n"],
        )
        self.env.install_gettext_translations(self.theme.translations, newstyle=True)
        self.env.filters["esc_url"] = sanitize_url
        self.env.globals["site"] = self.theme.config.site

    @property
    def engine(self):
        return self.theme.engine

    def render_template(self, name: str, context: dict[str, Any]) -> str:
        """
        Render a single template by name.

        Args:
            name: Template name without extension (e.g., "footer")
            context: Template variables

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template(f"{name}.jinja2")
        return template.render(**context)

    # --- Comments ---

    def _comment_context(self, comment: CommentRecord, max_depth: int) -> dict[str, Any]:
        variant = self.engine.comment_template(comment)
        classes = [comment.type or "comment", f"depth-{comment.depth}"]
        if comment.is_reply:
            classes.append("reply")
        return {
            "comment": comment,
            "variant": variant,
            "classes": " ".join(classes),
            "content": Markup(comment.content),
            "date_text": format_comment_date(comment.date) if comment.date else "",
            "time_text": format_comment_time(comment.date) if comment.date else "",
            "iso_date": comment.date.isoformat() if comment.date else "",
            "show_reply": bool(comment.reply_url) and comment.depth < max_depth,
        }

    def render_comment(
        self,
        comment: CommentRecord,
        max_depth: Optional[int] = None,
        children: str = "",
    ) -> str:
        """
        Render one comment list item.

        Args:
            comment: The comment record
            max_depth: Deepest level that still shows a reply link
            children: Already rendered child list markup

        Returns:
            Rendered <li> markup
        """
        if max_depth is None:
            max_depth = self.theme.config.theme.comment_max_depth

        context = self._comment_context(comment, max_depth)
        context["children"] = Markup(children)
        if isinstance(context["variant"], PingbackComment):
            return self.render_template("pingback", context)
        return self.render_template("comment", context)

    def render_comment_list(
        self,
        comments: Iterable[CommentRecord],
        max_depth: Optional[int] = None,
    ) -> str:
        """
        Render a threaded comment list.

        Replies are nested under their parent. Replies whose parent is
        missing, and comments caught in a parent cycle, are shown at the
        top level. Every comment is rendered exactly once.
        """
        comments = list(comments)
        known_ids = {c.id for c in comments}
        by_parent: dict[int, list[CommentRecord]] = {}
        for c in comments:
            parent = c.parent_id if c.parent_id in known_ids else 0
            by_parent.setdefault(parent, []).append(c)

        rendered: set[int] = set()

        def render_thread(c: CommentRecord) -> str:
            rendered.add(c.id)
            child_items = render_level(c.id)
            children = ""
            if child_items:
                children = '<ul class="children">\n' + "\n".join(child_items) + "\n</ul>"
            return self.render_comment(c, max_depth, children)

        def render_level(parent_id: int) -> list[str]:
            return [render_thread(c) for c in by_parent.get(parent_id, []) if c.id not in rendered]

        items = render_level(0)
        # Unreachable from the root: self-parented or cyclic threads
        items.extend(render_thread(c) for c in comments if c.id not in rendered)
        if not items:
            return ""
        return '<ol class="commentlist">\n' + "\n".join(items) + "\n</ol>"

    # --- Navigation ---

    def render_content_nav(self, context: RenderContext, nav_id: str = "nav-below") -> str:
        """Older/newer posts links, or empty when there is one page."""
        if not self.engine.pagination_nav(context):
            return ""
        return self.render_template(
            "content_nav",
            {
                "nav_id": nav_id,
                "older_posts_url": context.older_posts_url,
                "newer_posts_url": context.newer_posts_url,
            },
        )

    # --- Posts ---

    def render_posted_on(self, post: PostMeta) -> str:
        return self.render_template(
            "posted_on",
            {
                "post": post,
                "date_text": format_comment_date(post.date) if post.date else "",
                "time_text": format_comment_time(post.date) if post.date else "",
                "iso_date": post.date.isoformat() if post.date else "",
            },
        )

    def render_excerpt(self, context: RenderContext) -> str:
        """
        Render the excerpt for the current post.

        Custom excerpts pass through the get_the_excerpt filter. Automatic
        excerpts are cut to the excerpt_length filter's word count and end
        with the excerpt_more filter's suffix.
        """
        post = context.post
        if post is None:
            return ""

        if post.has_excerpt:
            output = self.hooks.apply_filters("get_the_excerpt", escape(post.excerpt), context)
            return str(Markup(output))

        length = self.hooks.apply_filters("excerpt_length", DEFAULT_EXCERPT_LENGTH)
        plain, truncated = truncate_words(Markup(post.content).striptags(), length)
        text = escape(plain)
        if truncated:
            more = self.hooks.apply_filters(
                "excerpt_more", Markup(DEFAULT_EXCERPT_MORE), post.permalink
            )
            text = text + Markup(more)
        return str(text)

    def first_link(self, context: RenderContext) -> Optional[str]:
        """URL of the first link in the current post (link post format)."""
        if context.post is None:
            return None
        return self.engine.first_link(context.post.content)

    # --- Page chrome ---

    def body_class_attribute(self, context: RenderContext, extra: Iterable[str] = ()) -> str:
        """Host classes in caller order, then the theme's classes sorted."""
        classes = self.hooks.apply_filters("body_class", list(extra), context)
        return str(Markup('class="{0}"').format(" ".join(classes)))

    def render_banner(self, site_name: Optional[str] = None) -> str:
        return str(escape(site_name or self.theme.config.site.name))

    def render_search_form(self, home_url: Optional[str] = None) -> str:
        return self.render_template(
            "searchform", {"home_url": home_url or self.theme.config.site.home_url}
        )

    def render_footer_sidebars(
        self,
        context: RenderContext,
        widgets: Optional[dict[str, list[str]]] = None,
    ) -> str:
        """
        Render the footer widget areas.

        Args:
            context: Render context with the active sidebar set
            widgets: Rendered widget markup per sidebar id

        Returns:
            The #supplementary block, or empty when no footer area is active
        """
        widgets = widgets or {}
        slots = self.engine.footer_slots
        active = context.sidebars.active_ids(list(slots))
        if not active:
            return ""

        areas = [
            {
                "id": FOOTER_AREA_IDS[i] if i < len(FOOTER_AREA_IDS) else sidebar_id,
                "widgets": [Markup(w) for w in widgets.get(sidebar_id, [])],
            }
            for i, sidebar_id in enumerate(slots)
            if sidebar_id in active
        ]
        label = self.engine.footer_sidebar_class(context.sidebars)
        return self.render_template(
            "footer_sidebars",
            {"class_attribute": footer_class_attribute(label), "areas": areas},
        )

    def render_footer(
        self,
        context: RenderContext,
        widgets: Optional[dict[str, list[str]]] = None,
        year: Optional[int] = None,
    ) -> str:
        """Close #main and render the colophon, footer scripts and closing tags."""
        site = self.theme.config.site
        footer_sidebars = "" if context.is_404 else self.render_footer_sidebars(context, widgets)
        return self.render_template(
            "footer",
            {
                "footer_sidebars": Markup(footer_sidebars),
                "year": year or date.today().year,
                "footer_scripts": self.theme.scripts.render_tags(site.template_url, in_footer=True),
            },
        )


def load_render_context_from_json(json_path: Path) -> RenderContext:
    """
    Load a render context exported by the host.

    Args:
        json_path: Path to the render context JSON file

    Returns:
        Validated RenderContext
    """
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return RenderContext.model_validate(data)


def load_comments_from_json(json_path: Path) -> list[CommentRecord]:
    """Load the "comments" array from a render context JSON file."""
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [CommentRecord.model_validate(c) for c in data.get("comments", [])]
