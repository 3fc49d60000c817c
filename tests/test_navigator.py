"""
Navigation tests: sidebar flattening, active entry, previous/next links.
"""

from hirescript.classroom import (
    ContentLoader,
    CourseNavigator,
    active_index_of,
    build_navigation,
    prev_next,
    sidebar_for,
)
from hirescript.schemas import LessonNode, PrevNext, SidebarEntry


class TestSidebarFor:
    """Test flattening a course root into sidebar entries."""

    def test_children_in_document_order(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        assert [e.label for e in sidebar] == ["Selectors", "The Box Model", "Flexbox"]
        assert [e.to for e in sidebar] == ["/css/selectors", "/css/box-model", "/css/flexbox"]

    def test_order_stable_across_calls(self, css_forest):
        assert sidebar_for(css_forest, "css") == sidebar_for(css_forest, "css")

    def test_no_alphabetical_resort(self):
        forest = [LessonNode(title="Z", path="/z", children=(
            LessonNode(title="Zebra", path="/z/zebra"),
            LessonNode(title="Apple", path="/z/apple"),
        ))]
        assert [e.label for e in sidebar_for(forest, "z")] == ["Zebra", "Apple"]

    def test_missing_course_is_empty(self, css_forest):
        assert sidebar_for(css_forest, "nonexistent") == []

    def test_empty_course_id_is_empty(self, css_forest):
        assert sidebar_for(css_forest, "") == []

    def test_empty_forest(self):
        assert sidebar_for([], "css") == []

    def test_root_with_deeper_path_matches(self):
        forest = [LessonNode(title="CSS", path="/css/", children=(
            LessonNode(title="A", path="/css/a"),
        ))]
        assert len(sidebar_for(forest, "css")) == 1

    def test_similar_prefix_does_not_match(self):
        forest = [LessonNode(title="CSS Extra", path="/cssx", children=(
            LessonNode(title="A", path="/cssx/a"),
        ))]
        assert sidebar_for(forest, "css") == []

    def test_only_immediate_children(self):
        forest = [LessonNode(title="CSS", path="/css", children=(
            LessonNode(title="Layout", path="/css/layout", children=(
                LessonNode(title="Grid", path="/css/layout/grid"),
            )),
        ))]
        assert sidebar_for(forest, "css") == [SidebarEntry(label="Layout", to="/css/layout")]


class TestActiveIndex:
    """Test locating the current route in the sidebar."""

    def test_found(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        assert active_index_of(sidebar, "/css/box-model") == 1

    def test_trailing_slash_ignored(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        assert active_index_of(sidebar, "/css/flexbox/") == 2

    def test_not_found(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        assert active_index_of(sidebar, "/css/grid") == -1

    def test_empty_path(self, css_forest):
        assert active_index_of(sidebar_for(css_forest, "css"), "") == -1
        assert active_index_of(sidebar_for(css_forest, "css"), None) == -1


class TestPrevNext:
    """Test previous/next targets at and between the boundaries."""

    def test_middle(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        links = prev_next(sidebar, active_index_of(sidebar, "/css/box-model"))
        assert links.prev == sidebar[0]
        assert links.next == sidebar[2]

    def test_first_has_no_prev(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        assert prev_next(sidebar, 0).prev is None
        assert prev_next(sidebar, 0).next == sidebar[1]

    def test_last_has_no_next(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        links = prev_next(sidebar, len(sidebar) - 1)
        assert links.next is None
        assert links.prev == sidebar[1]

    def test_not_found_has_neither(self, css_forest):
        sidebar = sidebar_for(css_forest, "css")
        assert prev_next(sidebar, -1) == PrevNext(prev=None, next=None)

    def test_single_lesson(self, css_forest):
        sidebar = sidebar_for(css_forest, "html")
        idx = active_index_of(sidebar, "/html/introduction")
        assert idx == 0
        assert prev_next(sidebar, idx) == PrevNext()

    def test_missing_course_any_index(self, css_forest):
        sidebar = sidebar_for(css_forest, "nonexistent")
        for idx in (-1, 0, 1, 5):
            assert prev_next(sidebar, idx) == PrevNext()


class TestBuildNavigation:
    """Test the combined derivation."""

    def test_lesson_page(self, css_forest):
        nav = build_navigation(css_forest, "css", "/css/selectors")
        assert nav.active_index == 0
        assert nav.links.prev is None
        assert nav.links.next.to == "/css/box-model"
        assert nav.position == (1, 3)

    def test_course_landing_page(self, css_forest):
        nav = build_navigation(css_forest, "css", "/courses/css")
        assert len(nav.sidebar) == 3
        assert nav.active_index == -1
        assert nav.links == PrevNext()

    def test_idempotent(self, css_forest):
        first = build_navigation(css_forest, "css", "/css/flexbox")
        second = build_navigation(css_forest, "css", "/css/flexbox")
        assert first == second


class TestCourseNavigator:
    """Test navigation over loaded content."""

    def test_navigation_for(self, content_dir):
        nav = CourseNavigator(ContentLoader(content_dir)).navigation_for("css", "/css/box-model")
        assert [e.label for e in nav.sidebar] == ["Selectors", "The Box Model", "Flexbox"]
        assert nav.links.prev.label == "Selectors"
        assert nav.links.next.label == "Flexbox"

    def test_first_lesson_path(self, content_dir):
        navigator = CourseNavigator(ContentLoader(content_dir))
        assert navigator.get_first_lesson_path("html") == "/html/introduction"
        assert navigator.get_first_lesson_path("nonexistent") is None

    def test_lesson_position(self, content_dir):
        navigator = CourseNavigator(ContentLoader(content_dir))
        assert navigator.get_lesson_position("css", "/css/flexbox") == (3, 3)
        assert navigator.get_lesson_position("css", "/css/missing") == (0, 3)

    def test_reload_picks_up_new_lessons(self, content_dir):
        loader = ContentLoader(content_dir)
        navigator = CourseNavigator(loader)
        assert len(navigator.get_sidebar("css")) == 3
        (content_dir / "css" / "04-grid.md").write_text("# Grid\n", encoding="utf-8")
        loader.reload()
        assert navigator.get_sidebar("css")[-1].label == "Grid"
