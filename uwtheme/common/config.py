"""Theme configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
LANGUAGES_DIR = PROJECT_ROOT / "languages"
FIXTURES_DIR = PROJECT_ROOT / "fixtures"
TEMPLATES_DIR = Path(__file__).parent.parent / "template_engine" / "templates"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class ThemeSettings(BaseModel):
    """Presentation defaults for the theme."""
    text_domain: str = "uwmadison"
    excerpt_length: int = Field(default=40, gt=0)
    footer_sidebars: list[str] = Field(
        default_factory=lambda: ["sidebar-3", "sidebar-4", "sidebar-5"]
    )
    excluded_singular_templates: list[str] = Field(
        default_factory=lambda: ["showcase", "sidebar-page"]
    )
    top_level_avatar_size: int = 68
    reply_avatar_size: int = 39
    comment_max_depth: int = 5
    script_version: str = "1.0.4"


class SiteSettings(BaseModel):
    """Site identity used by the banner and footer."""
    name: str = "UW-Madison"
    home_url: str = "/"
    template_url: str = "/wp-content/themes/uwmadison"
    copyright_holder: str = "University of Wisconsin System"
    copyright_url: str = "http://www.wisconsin.edu"


class Settings(BaseModel):
    """Top-level application settings."""
    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)
    templates_dir: str = str(TEMPLATES_DIR)
    languages_dir: str = str(LANGUAGES_DIR)
    locale: str = "en_US"

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults."""
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        if templates_dir := os.getenv("UWTHEME_TEMPLATES_DIR"):
            data["templates_dir"] = templates_dir
        if locale := os.getenv("UWTHEME_LOCALE"):
            data["locale"] = locale
        return cls(**data)


# Singleton settings instance
settings = Settings.load()
