"""Theme feature manifest declared during setup."""

from __future__ import annotations

from dataclasses import dataclass, field

POST_FORMATS = ("aside", "link", "gallery", "status", "quote", "image")


@dataclass(frozen=True)
class NavMenu:
    """A navigation menu location."""
    location: str
    description: str


DEFAULT_NAV_MENUS = (
    NavMenu(location="main_menu", description="Main Menu"),
    NavMenu(location="utility_menu", description="Utility Menu"),
)


@dataclass
class ThemeFeatures:
    """Everything the theme asks the host to support."""
    text_domain: str = "uwmadison"
    editor_style: bool = False
    supports: dict[str, tuple[str, ...]] = field(default_factory=dict)
    nav_menus: dict[str, str] = field(default_factory=dict)

    def add_support(self, feature: str, *options: str) -> None:
        self.supports[feature] = tuple(options)

    def supports_feature(self, feature: str) -> bool:
        return feature in self.supports

    def register_nav_menu(self, location: str, description: str) -> None:
        if location in self.nav_menus:
            raise ValueError(f"Nav menu '{location}' already registered")
        self.nav_menus[location] = description

    @property
    def post_formats(self) -> tuple[str, ...]:
        return self.supports.get("post-formats", ())
