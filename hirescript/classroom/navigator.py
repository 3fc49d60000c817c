"""
Navigator - Sidebar flattening and previous/next lesson links.

Provides:
- Sidebar entries for one course, in document order
- Active entry lookup for the current route
- Previous/next targets around the active entry

All derivations are pure functions of (forest, course_id, current_path).
"""

import logging
from typing import Optional, Sequence

from hirescript.schemas import CourseNavigation, LessonNode, PrevNext, SidebarEntry

from .loader import ContentLoader, belongs_to_course


logger = logging.getLogger(__name__)


def _normalize(path: str) -> str:
    return path.rstrip("/") or "/"


# -----------------------------------------------------------------------------
# Derivations
# -----------------------------------------------------------------------------

def sidebar_for(forest: Sequence[LessonNode], course_id: str) -> list[SidebarEntry]:
    """
    Flatten a course's immediate children into sidebar entries.

    Returns an empty list when no root belongs to the course.
    """
    if not course_id:
        return []
    for root in forest:
        if belongs_to_course(root, course_id):
            return [SidebarEntry(label=child.title, to=child.path) for child in root.children]

    logger.debug(f"No course root for '{course_id}', sidebar is empty")
    return []


def active_index_of(sidebar: Sequence[SidebarEntry], current_path: Optional[str]) -> int:
    """Position of the entry linking to current_path, or -1."""
    if not current_path:
        return -1
    wanted = _normalize(current_path)
    for idx, entry in enumerate(sidebar):
        if _normalize(entry.to) == wanted:
            return idx
    return -1


def prev_next(sidebar: Sequence[SidebarEntry], active_index: int) -> PrevNext:
    """Entries on either side of active_index; None at the boundaries."""
    if active_index < 0 or active_index >= len(sidebar):
        return PrevNext()
    prev = sidebar[active_index - 1] if active_index > 0 else None
    next_ = sidebar[active_index + 1] if active_index + 1 < len(sidebar) else None
    return PrevNext(prev=prev, next=next_)


def build_navigation(
    forest: Sequence[LessonNode],
    course_id: str,
    current_path: Optional[str],
) -> CourseNavigation:
    """Full navigation for one course page."""
    sidebar = sidebar_for(forest, course_id)
    active_index = active_index_of(sidebar, current_path)
    return CourseNavigation(
        course_id=course_id,
        sidebar=sidebar,
        active_index=active_index,
        links=prev_next(sidebar, active_index),
    )


# -----------------------------------------------------------------------------
# Navigator
# -----------------------------------------------------------------------------

class CourseNavigator:
    """
    Navigate the courses provided by a ContentLoader.

    Nothing is cached here: every call derives from the loader's current
    forest, so a reloaded collection is picked up immediately.
    """

    def __init__(self, loader: ContentLoader):
        self.loader = loader

    def navigation_for(self, course_id: str, current_path: Optional[str] = None) -> CourseNavigation:
        return build_navigation(self.loader.get_forest(), course_id, current_path)

    def get_sidebar(self, course_id: str) -> list[SidebarEntry]:
        return sidebar_for(self.loader.get_forest(), course_id)

    def get_first_lesson_path(self, course_id: str) -> Optional[str]:
        """Path of the first lesson of a course, if it has any."""
        sidebar = self.get_sidebar(course_id)
        return sidebar[0].to if sidebar else None

    def get_lesson_position(self, course_id: str, current_path: str) -> tuple[int, int]:
        """
        Get lesson position as (current, total).

        Returns (0, total) if lesson not found.
        """
        return self.navigation_for(course_id, current_path).position
