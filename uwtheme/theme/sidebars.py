"""Sidebar (widget area) definitions and registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from markupsafe import Markup, escape


@dataclass(frozen=True)
class SidebarDefinition:
    """A widget area and the markup wrapped around each widget in it."""
    id: str
    name: str
    description: str = ""
    before_widget: str = '<aside id="%1$s" class="widget %2$s">'
    after_widget: str = "</aside>"
    before_title: str = '<h3 class="widget-title">'
    after_title: str = "</h3>"
    footer: bool = False


_FOOTER_DESCRIPTION = "An optional widget area for your site footer"

DEFAULT_SIDEBARS = (
    SidebarDefinition(id="sidebar-1", name="Main Sidebar"),
    SidebarDefinition(
        id="sidebar-2",
        name="Showcase Sidebar",
        description="The sidebar for the optional Showcase Template",
    ),
    SidebarDefinition(id="sidebar-3", name="Footer Area One", description=_FOOTER_DESCRIPTION, footer=True),
    SidebarDefinition(id="sidebar-4", name="Footer Area Two", description=_FOOTER_DESCRIPTION, footer=True),
    SidebarDefinition(id="sidebar-5", name="Footer Area Three", description=_FOOTER_DESCRIPTION, footer=True),
)


class SidebarRegistry:
    """Registered widget areas, in registration order."""

    def __init__(self):
        self._sidebars: dict[str, SidebarDefinition] = {}

    def __len__(self) -> int:
        return len(self._sidebars)

    def __contains__(self, sidebar_id: object) -> bool:
        return sidebar_id in self._sidebars

    def register(self, sidebar: SidebarDefinition) -> SidebarDefinition:
        if sidebar.id in self._sidebars:
            raise ValueError(f"Sidebar '{sidebar.id}' already registered")
        self._sidebars[sidebar.id] = sidebar
        return sidebar

    def get(self, sidebar_id: str) -> Optional[SidebarDefinition]:
        return self._sidebars.get(sidebar_id)

    def all(self) -> list[SidebarDefinition]:
        return list(self._sidebars.values())

    def footer_ids(self) -> list[str]:
        return [s.id for s in self._sidebars.values() if s.footer]


def format_widget(
    sidebar: SidebarDefinition,
    widget_id: str,
    widget_class: str,
    body: str,
    title: str = "",
) -> Markup:
    """Wrap a rendered widget body in the sidebar's markup.

    ``body`` is trusted markup from the widget; the title is escaped.
    """
    before = sidebar.before_widget.replace("%1$s", str(escape(widget_id))).replace(
        "%2$s", str(escape(widget_class))
    )
    parts = [before]
    if title:
        parts.append(sidebar.before_title + str(escape(title)) + sidebar.after_title)
    parts.append(body)
    parts.append(sidebar.after_widget)
    return Markup("".join(parts))
