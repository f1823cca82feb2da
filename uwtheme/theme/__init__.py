# Theme Module
# Setup, widget areas, scripts and hook handlers for the UW-Madison theme

from .features import DEFAULT_NAV_MENUS, POST_FORMATS, NavMenu, ThemeFeatures
from .scripts import ScriptAsset, ScriptQueue
from .sidebars import DEFAULT_SIDEBARS, SidebarDefinition, SidebarRegistry, format_widget
from .theme import Theme, register_theme_hooks

__all__ = [
    "DEFAULT_NAV_MENUS",
    "POST_FORMATS",
    "NavMenu",
    "ThemeFeatures",
    "ScriptAsset",
    "ScriptQueue",
    "DEFAULT_SIDEBARS",
    "SidebarDefinition",
    "SidebarRegistry",
    "format_widget",
    "Theme",
    "register_theme_hooks",
]
