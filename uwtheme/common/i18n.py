"""Gettext catalogue loading for the theme text domain."""

from __future__ import annotations

import gettext
from pathlib import Path

from .config import Settings, settings as default_settings
from .logging import setup_logging

logger = setup_logging(module_name="i18n")


def load_translations(config: Settings = default_settings) -> gettext.NullTranslations:
    """Load translations for the configured locale.

    Falls back to NullTranslations when no catalogue is compiled for the
    locale, so every msgid renders as written.
    """
    localedir = Path(config.languages_dir)
    translations = gettext.translation(
        config.theme.text_domain,
        localedir=str(localedir),
        languages=[config.locale],
        fallback=True,
    )
    if type(translations) is gettext.NullTranslations:
        logger.debug(
            "No '%s' catalogue for %s in %s", config.theme.text_domain, config.locale, localedir
        )
    return translations
