"""Tests for shared common modules: models, config, logging, i18n."""

import gettext
import logging
from datetime import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from uwtheme.common.config import Settings, ThemeSettings
from uwtheme.common.i18n import load_translations
from uwtheme.common.logging import setup_logging
from uwtheme.common.models import (
    ApprovalState,
    CommentRecord,
    CommentType,
    PostMeta,
    RenderContext,
    SidebarActivationSet,
)


class TestCommentRecord:
    def test_defaults(self):
        comment = CommentRecord(id=7)
        assert comment.type == CommentType.COMMENT.value
        assert comment.parent_id == 0
        assert comment.approval == ApprovalState.APPROVED
        assert comment.depth == 1
        assert comment.is_reply is False

    def test_reply(self):
        comment = CommentRecord(id=8, parent_id=7, depth=2)
        assert comment.is_reply is True

    def test_accepts_unknown_type(self):
        comment = CommentRecord(id=9, type="webmention")
        assert comment.type == "webmention"

    def test_approval_parsed_from_string(self):
        comment = CommentRecord(id=10, approval="pending")
        assert comment.approval == ApprovalState.PENDING

    def test_negative_parent_is_reply(self):
        comment = CommentRecord(id=11, parent_id=-1)
        assert comment.is_reply is True

    def test_frozen(self):
        comment = CommentRecord(id=12)
        with pytest.raises(ValidationError):
            comment.parent_id = 3


class TestSidebarActivationSet:
    def test_missing_ids_are_inactive(self):
        sidebars = SidebarActivationSet(flags={"sidebar-3": True, "sidebar-4": False})
        assert sidebars.is_active("sidebar-3") is True
        assert sidebars.is_active("sidebar-4") is False
        assert sidebars.is_active("sidebar-5") is False

    def test_active_ids_keep_candidate_order(self):
        sidebars = SidebarActivationSet.of("sidebar-5", "sidebar-3")
        assert sidebars.active_ids(["sidebar-3", "sidebar-4", "sidebar-5"]) == [
            "sidebar-3",
            "sidebar-5",
        ]


class TestRenderContext:
    def test_defaults(self):
        context = RenderContext()
        assert context.total_pages == 0
        assert context.comment is None
        assert context.is_multi_author is False

    def test_multi_author(self):
        assert RenderContext(author_count=4).is_multi_author is True

    def test_parses_nested_json_data(self):
        context = RenderContext.model_validate(
            {
                "total_pages": 2,
                "sidebars": {"flags": {"sidebar-3": True}},
                "post": {"title": "Hello", "date": "2012-03-05T15:07:00"},
            }
        )
        assert context.sidebars.is_active("sidebar-3")
        assert context.post.date == datetime(2012, 3, 5, 15, 7)

    def test_post_has_excerpt(self):
        assert PostMeta(excerpt="Summary").has_excerpt is True
        assert PostMeta(excerpt="   ").has_excerpt is False


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.theme.excerpt_length == 40
        assert settings.theme.footer_sidebars == ["sidebar-3", "sidebar-4", "sidebar-5"]
        assert settings.theme.excluded_singular_templates == ["showcase", "sidebar-page"]
        assert settings.theme.text_domain == "uwmadison"

    def test_load_missing_file_uses_defaults(self, tmp_path: Path):
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings.theme.excerpt_length == 40

    def test_load_from_yaml(self, tmp_path: Path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "theme:\n  excerpt_length: 25\n  excluded_singular_templates: [landing]\n"
            "site:\n  name: Test Site\n",
            encoding="utf-8",
        )
        settings = Settings.load(path)
        assert settings.theme.excerpt_length == 25
        assert settings.theme.excluded_singular_templates == ["landing"]
        assert settings.site.name == "Test Site"

    def test_environment_overrides(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("UWTHEME_TEMPLATES_DIR", str(tmp_path))
        monkeypatch.setenv("UWTHEME_LOCALE", "de_DE")
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings.templates_dir == str(tmp_path)
        assert settings.locale == "de_DE"

    def test_excerpt_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            ThemeSettings(excerpt_length=0)


class TestLogging:
    def test_setup_logging_configures_once(self):
        logger = setup_logging(level=logging.DEBUG, module_name="uwtheme.test_once")
        again = setup_logging(module_name="uwtheme.test_once")
        assert logger is again
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("UWTHEME_LOG_LEVEL", "warning")
        logger = setup_logging(module_name="uwtheme.test_env_level")
        assert logger.level == logging.WARNING


class TestTranslations:
    def test_falls_back_to_null_translations(self, tmp_path: Path):
        settings = Settings(languages_dir=str(tmp_path))
        translations = load_translations(settings)
        assert isinstance(translations, gettext.NullTranslations)
        assert translations.gettext("Main Menu") == "Main Menu"
