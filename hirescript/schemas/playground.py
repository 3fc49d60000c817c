"""
Playground schemas for Hirescript Academy.

Defines the closed set of editing languages, the editor lifecycle states,
theme preferences and editor options.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class LanguageId(str, Enum):
    """Editing-language support a buffer should use."""
    MARKUP = "markup"
    STYLES = "styles"
    SCRIPT = "script"
    TYPED_SCRIPT = "typed_script"
    CONFIG = "config"
    GENERIC = "generic"     # fallback arm

    @classmethod
    def from_label(cls, label: Optional[str]) -> "LanguageId":
        """
        Parse a free-form editor label ("html", "scss", "TypeScript", ...).

        Unknown or empty labels parse to GENERIC.
        """
        if not label:
            return cls.GENERIC
        key = label.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return LANGUAGE_LABELS.get(key, cls.GENERIC)

    @property
    def editor_label(self) -> str:
        """Label the editor uses for syntax highlighting."""
        return EDITOR_LABELS[self]


LANGUAGE_LABELS = {
    "html": LanguageId.MARKUP,
    "htm": LanguageId.MARKUP,
    "xml": LanguageId.MARKUP,
    "vue": LanguageId.MARKUP,
    "css": LanguageId.STYLES,
    "scss": LanguageId.STYLES,
    "less": LanguageId.STYLES,
    "javascript": LanguageId.SCRIPT,
    "js": LanguageId.SCRIPT,
    "jsx": LanguageId.SCRIPT,
    "mjs": LanguageId.SCRIPT,
    "typescript": LanguageId.TYPED_SCRIPT,
    "ts": LanguageId.TYPED_SCRIPT,
    "tsx": LanguageId.TYPED_SCRIPT,
    "json": LanguageId.CONFIG,
    "jsonc": LanguageId.CONFIG,
}

EDITOR_LABELS = {
    LanguageId.MARKUP: "html",
    LanguageId.STYLES: "css",
    LanguageId.SCRIPT: "javascript",
    LanguageId.TYPED_SCRIPT: "typescript",
    LanguageId.CONFIG: "json",
    LanguageId.GENERIC: "plaintext",
}


class EditorState(str, Enum):
    UNMOUNTED = "unmounted"
    MOUNTING = "mounting"
    READY = "ready"
    DISPOSED = "disposed"


class ThemePreference(str, Enum):
    DARK = "dark"
    LIGHT = "light"
    SYSTEM = "system"


DARK_EDITOR_THEME = "academy-dark"
LIGHT_EDITOR_THEME = "vs"


class EditorTheme(BaseModel):
    """Editor color theme definition."""
    name: str
    base: str = "vs-dark"
    inherit: bool = True
    colors: dict[str, str] = {}


ACADEMY_DARK = EditorTheme(
    name=DARK_EDITOR_THEME,
    base="vs-dark",
    colors={"editor.background": "#0F111A"},
)


def editor_theme_for(preference: ThemePreference) -> str:
    """Only an explicit dark preference selects the dark editor theme."""
    if preference == ThemePreference.DARK:
        return DARK_EDITOR_THEME
    return LIGHT_EDITOR_THEME


class Diagnostic(BaseModel):
    """A problem reported by a language worker."""
    message: str
    line: int = Field(1, ge=1)
    column: int = Field(1, ge=1)
    severity: str = "error"


class EditorOptions(BaseModel):
    """Visual editor options applied at creation."""
    automatic_layout: bool = True
    semantic_highlighting: bool = True
    copy_with_syntax_highlighting: bool = True
    font_ligatures: bool = True
    font_family: str = "cascadia code"
    font_size: int = Field(18, ge=6, le=72)
    suggest_on_trigger_characters: bool = True
    format_on_paste: bool = True
    format_on_type: bool = True
    quick_suggestions: bool = True
    word_wrap: str = "bounded"
    bracket_pair_guides: bool = True
    indentation_guides: bool = True
    height: int = Field(420, ge=100)


class CodeSnippet(BaseModel):
    """A fenced code block taken from a lesson."""
    code: str
    label: str = ""                  # fence info string, e.g. "css"
    language: LanguageId = LanguageId.GENERIC
