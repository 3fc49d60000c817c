"""Shared fixtures: a small lesson forest, an on-disk content tree, routers."""

from pathlib import Path

import pytest

from hirescript.playground import (
    CodeBuffer,
    EditorSessionManager,
    MemoryRouter,
    ThemeSignal,
    WorkerRouter,
)
from hirescript.schemas import LessonNode


PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def css_forest() -> list[LessonNode]:
    """HTML course with one lesson, CSS course with three."""
    html = LessonNode(
        title="HTML",
        path="/html",
        children=(LessonNode(title="Introduction", path="/html/introduction"),),
    )
    css = LessonNode(
        title="CSS",
        path="/css",
        children=(
            LessonNode(title="Selectors", path="/css/selectors"),
            LessonNode(title="The Box Model", path="/css/box-model"),
            LessonNode(title="Flexbox", path="/css/flexbox"),
        ),
    )
    return [html, css]


def write_lesson(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path) -> Path:
    root = tmp_path / "content"
    write_lesson(root / "css" / "index.md", "---\ntitle: CSS\norder: 2\ndescription: Styling\n---\nAbout CSS.\n")
    write_lesson(root / "css" / "01-selectors.md", "---\ntitle: Selectors\n---\n```css\nh1 { color: red; }\n```\n")
    write_lesson(root / "css" / "02-box-model.md", "---\ntitle: The Box Model\n---\nBoxes.\n")
    write_lesson(root / "css" / "03-flexbox.md", "---\ntitle: Flexbox\n---\nFlex.\n")
    write_lesson(root / "html" / "index.md", "---\ntitle: HTML\norder: 1\n---\n")
    write_lesson(root / "html" / "01-introduction.md", "# Introduction\n\nTags.\n")
    return root


@pytest.fixture
def router() -> MemoryRouter:
    return MemoryRouter("/")


@pytest.fixture
def workers():
    workers = WorkerRouter()
    yield workers
    workers.shutdown()


@pytest.fixture
def buffer(router) -> CodeBuffer:
    return CodeBuffer(router)


@pytest.fixture
def theme() -> ThemeSignal:
    return ThemeSignal("light")


@pytest.fixture
def manager(buffer, workers, theme) -> EditorSessionManager:
    return EditorSessionManager(buffer, workers, theme)
