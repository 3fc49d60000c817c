"""
Editor sessions - Lifecycle of playground editors bound to containers.

Provides:
- EditorContainer: mount point reporting when the host has attached it
- EditorHandle: one editor instance (UNMOUNTED -> MOUNTING -> READY -> DISPOSED)
- EditorSessionManager: creates handles wired to the buffer, theme and workers

Editor instances do not survive navigation. A new handle is created per
mount and seeded from the shared CodeBuffer; edits are written back to it.
"""

import logging
from typing import Callable, Optional

from hirescript.schemas import (
    Diagnostic,
    EditorOptions,
    EditorState,
    LanguageId,
    ThemePreference,
)

from .buffer import CodeBuffer
from .theme import ThemeSignal
from .workers import LanguageWorker, WorkerRouter


logger = logging.getLogger(__name__)


class EditorContainer:
    """
    Mount point for an editor.

    The host UI calls attach() once the underlying element exists. Hosts
    override mount/unmount/apply_theme to draw the editor.
    """

    def __init__(self, name: str = "editor", attached: bool = False):
        self.name = name
        self._attached = attached
        self._pending: list[Callable[[], None]] = []

    @property
    def is_attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        self._attached = True
        pending, self._pending = self._pending, []
        for callback in pending:
            callback()

    def detach(self) -> None:
        self._attached = False

    def when_attached(self, callback: Callable[[], None]) -> None:
        """Run callback now if attached, otherwise on the next attach()."""
        if self._attached:
            callback()
        else:
            self._pending.append(callback)

    def cancel(self, callback: Callable[[], None]) -> None:
        """Drop a callback still waiting for attach()."""
        if callback in self._pending:
            self._pending.remove(callback)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def mount(self, handle: "EditorHandle") -> None:
        pass

    def unmount(self, handle: "EditorHandle") -> None:
        pass

    def apply_theme(self, theme: str) -> None:
        pass


class EditorHandle:
    """One editor instance. DISPOSED is terminal; create a new handle instead."""

    def __init__(
        self,
        container: EditorContainer,
        language: LanguageId,
        buffer: CodeBuffer,
        theme: ThemeSignal,
        resolve_worker: Callable[[LanguageId], LanguageWorker],
        options: EditorOptions,
    ):
        self.container = container
        self.language = language
        self.options = options
        self.worker: Optional[LanguageWorker] = None
        self.theme: Optional[str] = None
        self._buffer = buffer
        self._theme_signal = theme
        self._resolve_worker = resolve_worker
        self._text = ""
        self._unsubscribe: Optional[Callable[[], None]] = None
        self.state = EditorState.UNMOUNTED

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def _begin_mount(self) -> None:
        self.state = EditorState.MOUNTING
        if not self.container.is_attached:
            logger.debug(f"Container '{self.container.name}' not attached, deferring editor creation")
        self.container.when_attached(self._finish_mount)

    def _finish_mount(self) -> None:
        if self.state != EditorState.MOUNTING:
            return
        self.worker = self._resolve_worker(self.language)
        self._text = self._buffer.get()
        self.theme = self._theme_signal.editor_theme
        self._unsubscribe = self._theme_signal.subscribe(self._on_theme_change)
        self.state = EditorState.READY
        self.container.mount(self)
        self.container.apply_theme(self.theme)
        logger.debug(f"Editor ready in '{self.container.name}' ({self.language.value})")

    def dispose(self) -> None:
        if self.state == EditorState.DISPOSED:
            return
        was_ready = self.state == EditorState.READY
        if self.state == EditorState.MOUNTING:
            self.container.cancel(self._finish_mount)
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        self.state = EditorState.DISPOSED
        if was_ready:
            self.container.unmount(self)

    def _on_theme_change(self, preference: ThemePreference) -> None:
        self.theme = self._theme_signal.editor_theme
        self.container.apply_theme(self.theme)

    @property
    def is_ready(self) -> bool:
        return self.state == EditorState.READY

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def get_text(self) -> str:
        """Current text. While mounting, the text it will be seeded with."""
        if self.state == EditorState.MOUNTING:
            return self._buffer.get()
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the editor text and write it through to the shared buffer."""
        if self.state != EditorState.READY:
            logger.debug(f"Ignoring edit on {self.state.value} editor")
            return
        self._text = text
        self._buffer.set(text)

    def set_language(self, language: LanguageId | str) -> None:
        """Switch language in place, re-resolving the worker."""
        if not isinstance(language, LanguageId):
            language = LanguageId.from_label(language)
        self.language = language
        if self.state == EditorState.READY:
            self.worker = self._resolve_worker(language)

    @property
    def editor_label(self) -> str:
        return self.language.editor_label

    # -------------------------------------------------------------------------
    # Language services
    # -------------------------------------------------------------------------

    def diagnostics(self) -> list[Diagnostic]:
        if not self.worker:
            return []
        return self.worker.diagnose(self.get_text())

    def completions(self, prefix: str) -> list[str]:
        if not self.worker:
            return []
        return self.worker.complete(self.get_text(), prefix)

    def format(self) -> str:
        """Format the text with the worker and keep the result."""
        if not self.worker:
            return self.get_text()
        formatted = self.worker.format(self.get_text())
        if formatted != self._text:
            self.set_text(formatted)
        return formatted

    def __repr__(self):
        return f"<EditorHandle {self.container.name} {self.language.value} {self.state.value}>"


class EditorSessionManager:
    """
    Create editor handles for the playground.

    The worker-resolution hook is registered once per manager, however many
    editors are created.
    """

    def __init__(
        self,
        buffer: CodeBuffer,
        workers: WorkerRouter,
        theme: ThemeSignal,
        options: Optional[EditorOptions] = None,
    ):
        """
        Initialize manager.

        Args:
            buffer: Shared code buffer seeding each new editor
            workers: Router resolving language workers
            theme: Theme preference signal followed by live editors
            options: Editor options applied at creation
        """
        self.buffer = buffer
        self.workers = workers
        self.theme = theme
        self.options = options or EditorOptions()
        self._worker_hook: Optional[Callable[[LanguageId], LanguageWorker]] = None
        self.hook_registrations = 0

    def _ensure_worker_hook(self) -> Callable[[LanguageId], LanguageWorker]:
        if self._worker_hook is None:
            self._worker_hook = self.workers.resolve
            self.hook_registrations += 1
            logger.debug("Registered worker resolution hook")
        return self._worker_hook

    def create(
        self,
        container: EditorContainer,
        language: LanguageId | str = LanguageId.MARKUP,
    ) -> EditorHandle:
        """
        Create an editor in container.

        Returns a handle that is READY when the container is attached and
        MOUNTING otherwise; it finishes mounting on attach.
        """
        if not isinstance(language, LanguageId):
            language = LanguageId.from_label(language)

        handle = EditorHandle(
            container=container,
            language=language,
            buffer=self.buffer,
            theme=self.theme,
            resolve_worker=self._ensure_worker_hook(),
            options=self.options,
        )
        handle._begin_mount()
        return handle
