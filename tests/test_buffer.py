"""
Shared code buffer and routing tests.
"""

import pytest

from hirescript.playground import (
    CodeBuffer,
    MemoryRouter,
    ThemeSignal,
    course_id_from_path,
    normalize_path,
)
from hirescript.schemas import ThemePreference


class TestCodeBuffer:
    """Test the single-slot buffer."""

    def test_empty_initially(self, buffer):
        assert buffer.get() == ""

    @pytest.mark.parametrize("text", [
        "",
        "console.log(1)",
        "héllo wörld 🚀",
        "tab\tnull\x00bell\x07\r\n",
        "<div>\n  <p>multi\nline</p>\n</div>",
    ])
    def test_round_trip(self, buffer, text):
        buffer.set(text)
        assert buffer.get() == text

    def test_last_write_wins(self, buffer):
        buffer.set("first")
        buffer.set("second")
        assert buffer.get() == "second"

    def test_set_without_navigation(self, buffer, router):
        buffer.set("a { }")
        assert router.current_path == "/"
        assert router.history == ["/"]

    def test_set_with_navigation(self, buffer, router):
        buffer.set("console.log(1)", navigate=True)
        assert router.current_path == "/playground"
        assert router.history == ["/", "/playground"]

    def test_text_stored_before_navigation(self):
        seen = []

        class RecordingRouter(MemoryRouter):
            def push(self, path):
                seen.append(buffer.get())
                super().push(path)

        buffer = CodeBuffer(RecordingRouter())
        buffer.set("let x = 1;", navigate=True)
        assert seen == ["let x = 1;"]

    def test_custom_playground_path(self, router):
        buffer = CodeBuffer(router, playground_path="/try")
        buffer.set("x", navigate=True)
        assert router.current_path == "/try"

    def test_navigation_without_router(self):
        buffer = CodeBuffer()
        buffer.set("x", navigate=True)
        assert buffer.get() == "x"

    def test_subscribers(self, buffer):
        seen = []
        unsubscribe = buffer.subscribe(seen.append)
        buffer.set("one")
        unsubscribe()
        buffer.set("two")
        assert seen == ["one"]

    def test_failing_subscriber_does_not_break_set(self, buffer):
        def explode(text):
            raise RuntimeError("boom")

        seen = []
        buffer.subscribe(explode)
        buffer.subscribe(seen.append)
        buffer.set("still stored")
        assert buffer.get() == "still stored"
        assert seen == ["still stored"]

    def test_get_is_the_only_reader(self, buffer):
        buffer.set("<p>hi</p>")
        assert buffer.get() == "<p>hi</p>"
        assert not hasattr(CodeBuffer, "text")


class TestThemeSignal:
    """Test the color-mode preference signal."""

    def test_parses_strings(self):
        assert ThemeSignal("dark").preference == ThemePreference.DARK

    def test_unknown_preference_is_system(self):
        assert ThemeSignal("sepia").preference == ThemePreference.SYSTEM

    def test_editor_theme(self):
        theme = ThemeSignal("light")
        assert theme.editor_theme == "vs"
        theme.set("dark")
        assert theme.editor_theme == "academy-dark"

    def test_notifies_only_on_change(self):
        theme = ThemeSignal("light")
        seen = []
        theme.subscribe(seen.append)
        theme.set("light")
        theme.set(ThemePreference.DARK)
        assert seen == [ThemePreference.DARK]


class TestRouting:
    """Test route helpers and the memory router."""

    @pytest.mark.parametrize("raw,expected", [
        ("", "/"),
        ("/", "/"),
        ("css/", "/css"),
        ("/css/selectors/", "/css/selectors"),
    ])
    def test_normalize_path(self, raw, expected):
        assert normalize_path(raw) == expected

    @pytest.mark.parametrize("path,expected", [
        ("/", None),
        ("/playground", None),
        ("/courses/css", "css"),
        ("/courses/", None),
        ("/css/selectors", "css"),
        ("/js", "js"),
    ])
    def test_course_id_from_path(self, path, expected):
        assert course_id_from_path(path) == expected

    def test_memory_router(self):
        router = MemoryRouter()
        router.push("/css/selectors/")
        assert router.current_path == "/css/selectors"
        assert router.course_id == "css"
