"""
ContentLoader - Load the lesson collection from markdown files.

Reads a content directory laid out as one folder per course:

    content/
      css/
        index.md            course root (title, description)
        01-selectors.md     lesson
        02-box-model.md     lesson

Each file may start with a YAML front matter block (title, order,
description). Document order is the ``order`` field, then the numeric
file-name prefix, then the file name.
"""

import logging
import re
from pathlib import Path
from typing import Optional

import yaml

from hirescript.schemas import LessonNode


logger = logging.getLogger(__name__)

INDEX_FILE = "index.md"
FRONT_MATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)
ORDER_PREFIX_RE = re.compile(r"^(\d+)[.\-_]")
HEADING_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def split_front_matter(text: str, source: str = "<string>") -> tuple[dict, str]:
    """
    Split a markdown document into (front matter dict, body).

    Malformed front matter is logged and treated as empty.
    """
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    body = text[match.end():]
    try:
        meta = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"Malformed front matter in {source}: {e}")
        return {}, body

    if meta is None:
        return {}, body
    if not isinstance(meta, dict):
        logger.warning(f"Front matter in {source} is not a mapping, ignoring")
        return {}, body
    return meta, body


def slug_for(name: str) -> str:
    """File or folder name to route segment ("01-box-model.md" -> "box-model")."""
    stem = name[:-3] if name.endswith(".md") else name
    return ORDER_PREFIX_RE.sub("", stem)


def _prefix_order(name: str) -> Optional[int]:
    match = ORDER_PREFIX_RE.match(name)
    return int(match.group(1)) if match else None


def _coerce_order(value, source: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-integer order {value!r} in {source}")
        return None


def _coerce_description(value, source: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, dict)):
        logger.warning(f"Ignoring non-text description in {source}")
        return None
    return str(value)


def _read_text(file_path: Path) -> Optional[str]:
    try:
        return file_path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        logger.warning(f"Could not read {file_path}: {e}")
        return None


def belongs_to_course(root: LessonNode, course_id: str) -> bool:
    """True when root's first path segment is course_id (trailing slash ignored)."""
    prefix = f"/{course_id}"
    path = root.path.rstrip("/") or "/"
    return path == prefix or path.startswith(prefix + "/")


def _default_title(body: str, slug: str) -> str:
    match = HEADING_RE.search(body)
    if match:
        return match.group(1).strip()
    return slug.replace("-", " ").replace("_", " ").title()


class ContentLoader:
    """
    Load the lesson forest (one root LessonNode per course).

    The forest is read once and cached; content is immutable during a
    session. Call reload() to pick up edits.
    """

    def __init__(self, content_dir: str | Path):
        """
        Initialize loader.

        Args:
            content_dir: Directory holding one sub-folder per course
        """
        self.content_dir = Path(content_dir)
        self._forest: Optional[list[LessonNode]] = None

    # -------------------------------------------------------------------------
    # Query API
    # -------------------------------------------------------------------------

    def get_forest(self) -> list[LessonNode]:
        """Get all course roots in document order."""
        if self._forest is None:
            self._forest = self._load_forest()
        return self._forest

    def reload(self) -> list[LessonNode]:
        """Drop the cached forest and read the content directory again."""
        self._forest = None
        return self.get_forest()

    def get_course(self, course_id: str) -> Optional[LessonNode]:
        """Get a course root by its id (first path segment)."""
        if not course_id:
            return None
        for root in self.get_forest():
            if belongs_to_course(root, course_id):
                return root
        return None

    def get_lesson(self, path: str) -> Optional[LessonNode]:
        """Find any node by route path."""
        wanted = path.rstrip("/") or "/"
        stack = list(reversed(self.get_forest()))
        while stack:
            node = stack.pop()
            if node.path == wanted:
                return node
            stack.extend(reversed(node.children))
        return None

    def get_course_ids(self) -> list[str]:
        return [root.path.lstrip("/") for root in self.get_forest()]

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def _load_forest(self) -> list[LessonNode]:
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory not found: {self.content_dir}")
            return []

        roots = [
            self._load_directory(course_dir, f"/{slug_for(course_dir.name)}")
            for course_dir in self.content_dir.iterdir()
            if course_dir.is_dir() and not course_dir.name.startswith(".")
        ]
        roots = self._sort(roots)
        logger.info(f"Loaded {len(roots)} courses from {self.content_dir}")
        return [node for node, _ in roots]

    def _load_directory(self, directory: Path, path: str) -> tuple[LessonNode, str]:
        """Load a folder as a node whose children are its files and sub-folders."""
        index = directory / INDEX_FILE
        meta, body = {}, ""
        if index.is_file():
            text = _read_text(index)
            if text is not None:
                meta, body = split_front_matter(text, str(index))

        children = []
        for entry in directory.iterdir():
            if entry.name.startswith("."):
                continue
            child_path = f"{path}/{slug_for(entry.name)}"
            if entry.is_dir():
                children.append(self._load_directory(entry, child_path))
            elif entry.suffix == ".md" and entry.name != INDEX_FILE:
                lesson = self._load_file(entry, child_path)
                if lesson is not None:
                    children.append(lesson)

        order = _coerce_order(meta.get("order"), str(index))
        if order is None:
            order = _prefix_order(directory.name)

        node = LessonNode(
            title=str(meta.get("title") or _default_title(body, slug_for(directory.name))),
            path=path,
            children=tuple(child for child, _ in self._sort(children)),
            order=order,
            description=_coerce_description(meta.get("description"), str(index)),
            body=body,
        )
        return node, directory.name

    def _load_file(self, file_path: Path, path: str) -> Optional[tuple[LessonNode, str]]:
        """Load one lesson file. Unreadable files are skipped."""
        text = _read_text(file_path)
        if text is None:
            return None
        meta, body = split_front_matter(text, str(file_path))

        order = _coerce_order(meta.get("order"), str(file_path))
        if order is None:
            order = _prefix_order(file_path.name)

        node = LessonNode(
            title=str(meta.get("title") or _default_title(body, slug_for(file_path.name))),
            path=path,
            order=order,
            description=_coerce_description(meta.get("description"), str(file_path)),
            body=body,
        )
        return node, file_path.name

    @staticmethod
    def _sort(items: list[tuple[LessonNode, str]]) -> list[tuple[LessonNode, str]]:
        """Ordered nodes first (by order), then unordered, ties by file name."""
        return sorted(
            items,
            key=lambda item: (item[0].order is None, item[0].order or 0, item[1]),
        )
