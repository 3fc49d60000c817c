"""
Settings loader tests.
"""

import pytest
from pydantic import ValidationError

from hirescript.schemas import ThemePreference
from hirescript.utils import DEFAULT_SETTINGS_PATH, Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HIRESCRIPT_CONTENT_DIR", "HIRESCRIPT_LOG_LEVEL", "HIRESCRIPT_THEME"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.site_title == "Hirescript Academy"
        assert settings.playground_path == "/playground"
        assert settings.theme == ThemePreference.SYSTEM
        assert [t.label for t in settings.tutorials] == ["HTML", "CSS", "JavaScript"]

    def test_project_settings_file(self):
        assert DEFAULT_SETTINGS_PATH.exists()
        settings = load_settings()
        assert settings.editor.font_size == 18
        assert settings.content_dir.is_dir()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "site.yaml"
        path.write_text(
            "site_title: Test Academy\n"
            "theme: dark\n"
            "content_dir: lessons\n"
            "editor:\n  font_size: 14\n"
            "tutorials:\n  - label: Python\n    to: /courses/python\n",
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings.site_title == "Test Academy"
        assert settings.theme == ThemePreference.DARK
        assert settings.editor.font_size == 14
        assert settings.editor.font_family == "cascadia code"
        assert settings.content_dir == (tmp_path / "lessons").resolve()
        assert settings.tutorials[0].course_id == "python"

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "site.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path).site_title == "Hirescript Academy"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = tmp_path / "site.yaml"
        path.write_text("log_level: INFO\ntheme: light\n", encoding="utf-8")
        monkeypatch.setenv("HIRESCRIPT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("HIRESCRIPT_THEME", "dark")
        monkeypatch.setenv("HIRESCRIPT_CONTENT_DIR", str(tmp_path / "elsewhere"))
        settings = load_settings(path)
        assert settings.log_level == "DEBUG"
        assert settings.theme == ThemePreference.DARK
        assert settings.content_dir == tmp_path / "elsewhere"

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "site.yaml"
        path.write_text("editor:\n  font_size: 200\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_settings(path)
