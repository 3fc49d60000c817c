"""
Hirescript Playground - Shared code buffer and editor sessions.

This module provides:
- CodeBuffer: single-slot code mailbox between lessons and the playground
- ThemeSignal: observable color-mode preference
- WorkerRouter: language workers, lazily started and cached
- EditorSessionManager: editor lifecycle bound to containers
- MemoryRouter: in-memory route collaborator
"""

from .buffer import CodeBuffer

from .theme import ThemeSignal

from .routing import (
    Router,
    MemoryRouter,
    PLAYGROUND_PATH,
    normalize_path,
    course_id_from_path,
)

from .workers import (
    LanguageWorker,
    GenericWorker,
    MarkupWorker,
    StyleWorker,
    ScriptWorker,
    ConfigWorker,
    WORKER_TABLE,
    WorkerRouter,
)

from .editor import (
    EditorContainer,
    EditorHandle,
    EditorSessionManager,
)

__all__ = [
    # Buffer
    "CodeBuffer",
    # Theme
    "ThemeSignal",
    # Routing
    "Router",
    "MemoryRouter",
    "PLAYGROUND_PATH",
    "normalize_path",
    "course_id_from_path",
    # Workers
    "LanguageWorker",
    "GenericWorker",
    "MarkupWorker",
    "StyleWorker",
    "ScriptWorker",
    "ConfigWorker",
    "WORKER_TABLE",
    "WorkerRouter",
    # Editor
    "EditorContainer",
    "EditorHandle",
    "EditorSessionManager",
]
