"""Theme: setup, widget areas, scripts and filter handlers.

The theme owns a RenderDecisionEngine and exposes the handlers the host
runs on its hooks. ``register_theme_hooks`` subscribes them; a child
theme can remove any handler afterwards and subscribe its own, or pass
``overrides`` to replace individual decisions.

Usage:
    hooks = HookRegistry()
    theme = Theme()
    register_theme_hooks(hooks, theme)
    hooks.do_action("after_setup_theme")
    hooks.do_action("widgets_init")
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from markupsafe import Markup

from uwtheme.common.config import Settings, settings as default_settings
from uwtheme.common.i18n import load_translations
from uwtheme.common.logging import setup_logging
from uwtheme.common.models import RenderContext
from uwtheme.decision_engine import RenderDecisionEngine
from uwtheme.hooks import HookRegistry

from .features import DEFAULT_NAV_MENUS, POST_FORMATS, ThemeFeatures
from .scripts import ScriptAsset, ScriptQueue
from .sidebars import DEFAULT_SIDEBARS, SidebarDefinition, SidebarRegistry

logger = setup_logging(module_name="theme")


class Theme:
    """The UW-Madison theme bound to one host hook registry."""

    def __init__(
        self,
        config: Settings = default_settings,
        overrides: Optional[dict[str, Callable[..., Any]]] = None,
    ):
        self.config = config
        self.engine = RenderDecisionEngine(overrides=overrides, config=config)
        self.translations = load_translations(config)
        self.features = ThemeFeatures(text_domain=config.theme.text_domain)
        self.sidebars = SidebarRegistry()
        self.scripts = ScriptQueue()
        self.script = ScriptAsset(
            handle="uwmadison-theme",
            path="js/uwmadison.js",
            deps=("jquery",),
            version=config.theme.script_version,
            in_footer=True,
        )

    def gettext(self, message: str) -> str:
        return self.translations.gettext(message)

    # --- Actions ---

    def setup(self) -> None:
        """Declare theme supports, menus and post formats (after_setup_theme)."""
        self.features.editor_style = True
        self.features.add_support("automatic-feed-links")
        for menu in DEFAULT_NAV_MENUS:
            self.features.register_nav_menu(menu.location, self.gettext(menu.description))
        self.features.add_support("post-formats", *POST_FORMATS)
        self.features.add_support("post-thumbnails")
        logger.info(
            "Theme setup: %d menus, %d post formats",
            len(self.features.nav_menus),
            len(self.features.post_formats),
        )

    def widgets_init(self) -> None:
        """Register the main, showcase and footer widget areas (widgets_init)."""
        for sidebar in DEFAULT_SIDEBARS:
            self.sidebars.register(
                SidebarDefinition(
                    id=sidebar.id,
                    name=self.gettext(sidebar.name),
                    description=self.gettext(sidebar.description) if sidebar.description else "",
                    footer=sidebar.footer,
                )
            )
        logger.info("Registered %d sidebars", len(self.sidebars))

    def enqueue_scripts(self) -> None:
        """Queue the theme script for the footer (wp_enqueue_scripts)."""
        self.scripts.enqueue(self.script)

    # --- Filters ---

    def filter_excerpt_length(self, length: int) -> int:
        return self.engine.excerpt_length()

    def filter_auto_excerpt_more(self, more: str, permalink: str = "") -> Markup:
        """Replace the automatic "[...]" with an ellipsis and a continue-reading link."""
        return self.engine.excerpt_suffix(False, False, permalink)

    def filter_custom_excerpt_more(self, output: str, context: RenderContext) -> Markup:
        """Add a continue-reading link to hand-written excerpts."""
        post = context.post
        if post is None:
            return Markup(output)
        return Markup(output) + self.engine.excerpt_suffix(
            True, context.is_attachment, post.permalink
        )

    def filter_page_menu_args(self, args: dict[str, Any]) -> dict[str, Any]:
        """Make the fallback page menu show a home link."""
        return {**args, "show_home": True}

    def filter_body_class(self, classes: list[str], context: RenderContext) -> list[str]:
        added = self.engine.body_classes(context)
        return list(classes) + sorted(c for c in added if c not in classes)


def register_theme_hooks(hooks: HookRegistry, theme: Theme) -> HookRegistry:
    """Subscribe the theme's actions and filters to the host registry."""
    hooks.add_action("after_setup_theme", theme.setup)
    hooks.add_action("widgets_init", theme.widgets_init)
    hooks.add_action("wp_enqueue_scripts", theme.enqueue_scripts)

    hooks.add_filter("excerpt_length", theme.filter_excerpt_length)
    hooks.add_filter("excerpt_more", theme.filter_auto_excerpt_more)
    hooks.add_filter("get_the_excerpt", theme.filter_custom_excerpt_more)
    hooks.add_filter("wp_page_menu_args", theme.filter_page_menu_args)
    hooks.add_filter("body_class", theme.filter_body_class)
    return hooks
