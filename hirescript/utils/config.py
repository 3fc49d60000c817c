"""
Settings loader for Hirescript Academy.

Loads the optional YAML settings file (academy.yaml at the project root)
and applies HIRESCRIPT_* environment overrides, reading .env first.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from hirescript.schemas import EditorOptions, ThemePreference, TutorialEntry


PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_SETTINGS_PATH = PROJECT_ROOT / "academy.yaml"

ENV_OVERRIDES = {
    "HIRESCRIPT_CONTENT_DIR": "content_dir",
    "HIRESCRIPT_LOG_LEVEL": "log_level",
    "HIRESCRIPT_THEME": "theme",
}

DEFAULT_TUTORIALS = [
    TutorialEntry(label="HTML", description="Learn the basic blocks of web development.",
                  to="/courses/html", icon="uil:html5"),
    TutorialEntry(label="CSS", description="Learn the basic of styling your webpage.",
                  to="/courses/css", icon="ri:css3-fill"),
    TutorialEntry(label="JavaScript", description="Learn the basic of javascript to control events.",
                  to="/courses/js", icon="ri:javascript-fill"),
]


class Settings(BaseModel):
    site_title: str = "Hirescript Academy"
    content_dir: Path = PROJECT_ROOT / "content"
    log_level: str = "INFO"
    theme: ThemePreference = ThemePreference.SYSTEM
    playground_path: str = "/playground"
    editor: EditorOptions = Field(default_factory=EditorOptions)
    tutorials: list[TutorialEntry] = Field(default_factory=lambda: list(DEFAULT_TUTORIALS))


def load_settings(path: Path | None = None, env_file: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML and the environment.

    Args:
        path: Settings file; when omitted, academy.yaml is used if present
        env_file: Optional .env file (default: search from the working dir)

    Returns:
        Validated Settings

    Raises:
        FileNotFoundError: If an explicitly given settings file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If a value is invalid
    """
    load_dotenv(env_file)

    data: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
    elif DEFAULT_SETTINGS_PATH.exists():
        path = DEFAULT_SETTINGS_PATH

    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if data.get("content_dir"):
            content_dir = Path(data["content_dir"])
            if not content_dir.is_absolute():
                data["content_dir"] = (path.parent / content_dir).resolve()

    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data[key] = value

    return Settings(**data)
