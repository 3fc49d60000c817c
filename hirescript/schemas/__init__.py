"""
Hirescript Schemas - Pydantic models for the academy site.

This module exports all schema classes for:
- Content: lesson tree, sidebar entries, prev/next links, tutorial menu
- Playground: language ids, editor states, themes, editor options
"""

# Content schemas
from .content import (
    LessonNode,
    SidebarEntry,
    PrevNext,
    CourseNavigation,
    TutorialEntry,
)

# Playground schemas
from .playground import (
    LanguageId,
    LANGUAGE_LABELS,
    EditorState,
    ThemePreference,
    EditorTheme,
    ACADEMY_DARK,
    DARK_EDITOR_THEME,
    LIGHT_EDITOR_THEME,
    editor_theme_for,
    Diagnostic,
    EditorOptions,
    CodeSnippet,
)

__all__ = [
    # Content
    'LessonNode',
    'SidebarEntry',
    'PrevNext',
    'CourseNavigation',
    'TutorialEntry',
    # Playground
    'LanguageId',
    'LANGUAGE_LABELS',
    'EditorState',
    'ThemePreference',
    'EditorTheme',
    'ACADEMY_DARK',
    'DARK_EDITOR_THEME',
    'LIGHT_EDITOR_THEME',
    'editor_theme_for',
    'Diagnostic',
    'EditorOptions',
    'CodeSnippet',
]
