"""
AppContext - Everything the site shares for one user session.

Built once at start-up and passed to every page, instead of module-level
singletons. The worker router may be shared between contexts.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from hirescript.classroom import ContentLoader, CourseNavigator
from hirescript.playground import (
    CodeBuffer,
    EditorSessionManager,
    MemoryRouter,
    Router,
    ThemeSignal,
    WorkerRouter,
)
from hirescript.schemas import CodeSnippet, CourseNavigation, LanguageId
from hirescript.utils import Settings


logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    router: Router
    buffer: CodeBuffer
    theme: ThemeSignal
    workers: WorkerRouter
    editors: EditorSessionManager
    loader: ContentLoader
    navigator: CourseNavigator
    playground_language: LanguageId = LanguageId.MARKUP

    @classmethod
    def create(
        cls,
        settings: Settings,
        router: Optional[Router] = None,
        workers: Optional[WorkerRouter] = None,
        loader: Optional[ContentLoader] = None,
    ) -> "AppContext":
        """
        Wire up a context.

        Args:
            settings: Loaded site settings
            router: Route collaborator (default: MemoryRouter at "/")
            workers: Shared worker router (default: a new one)
            loader: Content loader (default: one over settings.content_dir)
        """
        router = router or MemoryRouter()
        workers = workers or WorkerRouter()
        loader = loader or ContentLoader(settings.content_dir)
        buffer = CodeBuffer(router, playground_path=settings.playground_path)
        theme = ThemeSignal(settings.theme)
        editors = EditorSessionManager(buffer, workers, theme, settings.editor)
        logger.debug("Application context created")
        return cls(
            settings=settings,
            router=router,
            buffer=buffer,
            theme=theme,
            workers=workers,
            editors=editors,
            loader=loader,
            navigator=CourseNavigator(loader),
        )

    def open_in_playground(self, snippet: CodeSnippet) -> None:
        """Seed the playground with a lesson snippet and go there."""
        self.playground_language = snippet.language
        self.buffer.set(snippet.code, navigate=True)

    def current_navigation(self) -> Optional[CourseNavigation]:
        """Navigation for the current route, or None off course pages."""
        course_id = self.router.course_id
        if course_id is None:
            return None
        return self.navigator.navigation_for(course_id, self.router.current_path)
