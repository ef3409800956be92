"""
Configuration and YAML loader tests.
"""

from pathlib import Path

import pytest

from classtabs.config import ENV_PREFIX, Settings, load_settings
from classtabs.utils import load_pages, load_roster


class TestSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in Settings.model_fields:
            monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)
        settings = load_settings(tmp_path / "missing.env")
        assert settings.open_tabs_slot == "openTabs"
        assert settings.classroom_labels_slot == "classroomTabs"
        assert settings.student_labels_slot == "studentProfileTabs"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CLASSTABS_OPEN_TABS_SLOT", "tabs")
        monkeypatch.setenv("CLASSTABS_LOG_LEVEL", "debug")
        settings = load_settings(tmp_path / "missing.env")
        assert settings.open_tabs_slot == "tabs"
        assert settings.log_level == "DEBUG"

    def test_env_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("CLASSTABS_STUDENT_LABELS_SLOT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("CLASSTABS_STUDENT_LABELS_SLOT=students\n", encoding="utf-8")
        settings = load_settings(env_file)
        assert settings.student_labels_slot == "students"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            Settings(log_level="LOUD")


class TestLoaders:

    def test_bundled_pages(self):
        pages = load_pages(Settings().pages_file)
        keys = [page.key for page in pages]
        assert "explore" in keys
        assert "daily-roundup" in keys
        assert {page.key: page.label for page in pages}["explore"] == "Discover"

    def test_bundled_roster(self):
        roster = load_roster(Settings().roster_file)
        assert roster[0].id == "5a"
        assert roster[0].students[0].name == "Alice Wong"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_pages(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_roster(path) == []

    def test_custom_pages(self, tmp_path):
        path = tmp_path / "pages.yaml"
        path.write_text("pages:\n  - key: gradebook\n    label: Gradebook\n", encoding="utf-8")
        pages = load_pages(Path(path))
        assert pages[0].key == "gradebook"
        assert pages[0].icon is None
