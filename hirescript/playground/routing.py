"""
Route collaborator - current path, course parameter and route pushes.

The site uses these routes:
- "/"                     home
- "/courses/<course>"     course landing page
- "/<course>/<lesson>"    lesson page
- "/playground"           code playground
"""

from typing import Optional, Protocol


PLAYGROUND_PATH = "/playground"
COURSES_PREFIX = "/courses/"
RESERVED_SEGMENTS = {"", "playground", "courses"}


def normalize_path(path: Optional[str]) -> str:
    """Ensure a leading slash and drop trailing ones ("css/" -> "/css")."""
    path = (path or "").strip()
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"


def course_id_from_path(path: Optional[str]) -> Optional[str]:
    """Course parameter of a route, or None for non-course pages."""
    path = normalize_path(path)
    if path.startswith(COURSES_PREFIX):
        return path[len(COURSES_PREFIX):].split("/", 1)[0] or None
    first = path.lstrip("/").split("/", 1)[0]
    if first in RESERVED_SEGMENTS:
        return None
    return first


class Router(Protocol):
    """What the core needs from the host's router."""

    @property
    def current_path(self) -> str: ...

    @property
    def course_id(self) -> Optional[str]: ...

    def push(self, path: str) -> None: ...


class MemoryRouter:
    """Router keeping the route in memory, with a history of pushes."""

    def __init__(self, path: str = "/"):
        self._path = normalize_path(path)
        self.history: list[str] = [self._path]

    @property
    def current_path(self) -> str:
        return self._path

    @property
    def course_id(self) -> Optional[str]:
        return course_id_from_path(self._path)

    def push(self, path: str) -> None:
        self._path = normalize_path(path)
        self.history.append(self._path)
