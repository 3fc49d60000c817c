"""
Content schemas for Hirescript Academy.

Defines Pydantic models for the lesson collection and the navigation
derived from it:
- LessonNode: one node of the course/lesson tree
- SidebarEntry: flattened (label, link) pair for the sidebar
- PrevNext / CourseNavigation: adjacent lesson targets for a page
- TutorialEntry: top menu entry for a course
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


# -----------------------------------------------------------------------------
# Lesson tree
# -----------------------------------------------------------------------------


class LessonNode(BaseModel):
    """One node in the course/lesson tree. Immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    title: str
    path: str                          # route path, e.g. "/css/selectors"
    children: tuple["LessonNode", ...] = ()
    order: Optional[int] = None        # front matter ordering field
    description: Optional[str] = None
    body: str = ""                     # raw markdown, rendered by the shell


class SidebarEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    to: str


class PrevNext(BaseModel):
    """Adjacent lessons. None means no link in that direction."""
    model_config = ConfigDict(frozen=True)

    prev: Optional[SidebarEntry] = None
    next: Optional[SidebarEntry] = None


class CourseNavigation(BaseModel):
    """Everything a course page needs to draw its navigation."""
    model_config = ConfigDict(frozen=True)

    course_id: str
    sidebar: list[SidebarEntry]
    active_index: int = -1
    links: PrevNext = Field(default_factory=PrevNext)

    @property
    def position(self) -> tuple[int, int]:
        """Position as (current, total); (0, total) when not found."""
        return (self.active_index + 1, len(self.sidebar))


# -----------------------------------------------------------------------------
# Site menu
# -----------------------------------------------------------------------------


class TutorialEntry(BaseModel):
    label: str
    to: str
    description: str = ""
    icon: Optional[str] = None

    @property
    def course_id(self) -> str:
        """Last path segment of the course link ("/courses/css" -> "css")."""
        return self.to.rstrip("/").rsplit("/", 1)[-1]


LessonNode.model_rebuild()
