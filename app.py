"""
Hirescript Academy - Coding tutorials with an in-browser playground

Streamlit application serving markdown lessons grouped into courses, with
a course sidebar, previous/next links and a code playground.

Usage:
    streamlit run app.py
"""

import logging
from typing import Optional

import streamlit as st

from hirescript.context import AppContext
from hirescript.playground import (
    EditorContainer,
    EditorHandle,
    WorkerRouter,
    course_id_from_path,
    normalize_path,
)
from hirescript.schemas import (
    ACADEMY_DARK,
    CodeSnippet,
    LanguageId,
    ThemePreference,
)
from hirescript.utils import load_settings
from hirescript.viewer import (
    get_navigation_css,
    query_href,
    render_prev_next_html,
    render_sidebar_html,
    split_on_snippets,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

SETTINGS = load_settings()

logging.basicConfig(
    level=SETTINGS.log_level.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=SETTINGS.site_title,
    page_icon="💻",
    layout="wide",
    initial_sidebar_state="expanded",
)

PLAYGROUND_LANGUAGES = [
    LanguageId.MARKUP,
    LanguageId.STYLES,
    LanguageId.SCRIPT,
    LanguageId.TYPED_SCRIPT,
    LanguageId.CONFIG,
    LanguageId.GENERIC,
]


# -----------------------------------------------------------------------------
# Streamlit collaborators
# -----------------------------------------------------------------------------

class QueryParamRouter:
    """Route kept in the ?path= query parameter."""

    @property
    def current_path(self) -> str:
        return normalize_path(st.query_params.get("path", "/"))

    @property
    def course_id(self) -> Optional[str]:
        return course_id_from_path(self.current_path)

    def push(self, path: str) -> None:
        st.query_params["path"] = normalize_path(path)


class StreamlitEditorContainer(EditorContainer):
    """Draws the editor as a text area inside a Streamlit container."""

    def __init__(self, name: str = "playground"):
        super().__init__(name)
        self.element = None
        self.text: Optional[str] = None

    def create_element(self) -> None:
        self.element = st.container()
        self.attach()

    def mount(self, handle: EditorHandle) -> None:
        options = handle.options
        with self.element:
            st.caption(f"{handle.editor_label} · theme: {handle.theme}")
            self.text = st.text_area(
                "Code",
                value=handle.get_text(),
                height=options.height,
                key=f"playground_editor_{st.session_state.editor_seed}",
                label_visibility="collapsed",
            )
        if self.text != handle.get_text():
            handle.set_text(self.text)

    def apply_theme(self, theme: str) -> None:
        if theme != ACADEMY_DARK.name:
            return
        background = ACADEMY_DARK.colors["editor.background"]
        st.markdown(
            f"<style>textarea {{ background-color: {background} !important; "
            f"color: #E0E0E0 !important; font-family: '{SETTINGS.editor.font_family}', monospace; "
            f"font-size: {SETTINGS.editor.font_size}px !important; }}</style>",
            unsafe_allow_html=True,
        )


@st.cache_resource
def get_worker_router() -> WorkerRouter:
    """Language workers are shared by every session of the process."""
    return WorkerRouter()


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "ctx" not in st.session_state:
        st.session_state.ctx = AppContext.create(
            SETTINGS,
            router=QueryParamRouter(),
            workers=get_worker_router(),
        )

    if "editor_seed" not in st.session_state:
        st.session_state.editor_seed = 0

    # Editors never outlive a script run
    previous = st.session_state.pop("editor_handle", None)
    if previous:
        previous.dispose()


def go_to(path: str):
    st.session_state.ctx.router.push(path)


def open_in_playground(snippet: CodeSnippet):
    st.session_state.editor_seed += 1
    st.session_state.ctx.open_in_playground(snippet)


# -----------------------------------------------------------------------------
# Top Menu
# -----------------------------------------------------------------------------

def render_menu():
    """Render the top menu: Home, Tutorials, Playground."""
    ctx = st.session_state.ctx
    st.sidebar.title(f"💻 {ctx.settings.site_title}")

    col1, col2 = st.sidebar.columns(2)
    with col1:
        st.button("Home", on_click=go_to, args=("/",), use_container_width=True)
    with col2:
        st.button("Playground", on_click=go_to, args=(ctx.settings.playground_path,),
                  use_container_width=True)

    with st.sidebar.expander("Tutorials", expanded=ctx.router.current_path == "/"):
        for tutorial in ctx.settings.tutorials:
            st.button(
                tutorial.label,
                key=f"menu_{tutorial.course_id}",
                help=tutorial.description,
                on_click=go_to,
                args=(tutorial.to,),
                use_container_width=True,
            )

    options = [p.value for p in ThemePreference]
    choice = st.sidebar.radio(
        "Color mode",
        options,
        index=options.index(ctx.theme.preference.value),
        horizontal=True,
    )
    ctx.theme.set(choice)


# -----------------------------------------------------------------------------
# Home
# -----------------------------------------------------------------------------

def render_home():
    ctx = st.session_state.ctx
    st.title(ctx.settings.site_title)
    st.markdown("Coding tutorials, one lesson at a time. Pick a course to start.")

    columns = st.columns(3)
    for idx, tutorial in enumerate(ctx.settings.tutorials):
        with columns[idx % 3]:
            with st.container(border=True):
                st.subheader(tutorial.label)
                st.caption(tutorial.description)
                st.button("Start", key=f"start_{tutorial.course_id}", on_click=go_to,
                          args=(tutorial.to,))


# -----------------------------------------------------------------------------
# Course and Lesson Views
# -----------------------------------------------------------------------------

def render_course_sidebar(course_id: str):
    ctx = st.session_state.ctx
    nav = ctx.current_navigation()
    if nav is None:
        return None

    st.sidebar.divider()
    course = ctx.loader.get_course(course_id)
    st.sidebar.subheader(course.title if course else course_id.upper())
    st.sidebar.markdown(get_navigation_css(), unsafe_allow_html=True)
    st.sidebar.markdown(render_sidebar_html(nav.sidebar, nav.active_index), unsafe_allow_html=True)
    return nav


def render_course_page(course_id: str):
    """Course landing page: description and lesson list."""
    ctx = st.session_state.ctx
    course = ctx.loader.get_course(course_id)
    nav = render_course_sidebar(course_id)

    st.title(course.title if course else course_id.upper())
    if course and course.description:
        st.markdown(course.description)

    if not nav or not nav.sidebar:
        st.info("No lessons in this course yet.")
        return

    if course and course.body.strip():
        st.markdown(course.body)

    st.button("Start first lesson", type="primary", on_click=go_to, args=(nav.sidebar[0].to,))


def render_lesson_view(course_id: str):
    """Render a lesson with snippet actions and the prev/next bar."""
    ctx = st.session_state.ctx
    nav = render_course_sidebar(course_id)
    lesson = ctx.loader.get_lesson(ctx.router.current_path)

    if not lesson:
        st.warning(f"Lesson not found: {ctx.router.current_path}")
        return

    pos, total = nav.position if nav else (0, 0)
    if pos:
        st.caption(f"Lesson {pos} of {total}")

    st.title(lesson.title)
    for idx, part in enumerate(split_on_snippets(lesson.body)):
        if isinstance(part, CodeSnippet):
            st.code(part.code, language=part.language.editor_label)
            st.button(
                "Open in playground",
                key=f"snippet_{idx}",
                on_click=open_in_playground,
                args=(part,),
            )
        else:
            st.markdown(part)

    if nav:
        st.markdown(get_navigation_css(), unsafe_allow_html=True)
        st.markdown(render_prev_next_html(nav.links, href_for=query_href), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Playground
# -----------------------------------------------------------------------------

def render_playground():
    """Mount an editor seeded from the shared buffer."""
    ctx = st.session_state.ctx
    st.title("Playground")

    labels = [lang.editor_label for lang in PLAYGROUND_LANGUAGES]
    choice = st.selectbox(
        "Language",
        labels,
        index=PLAYGROUND_LANGUAGES.index(ctx.playground_language),
    )
    ctx.playground_language = PLAYGROUND_LANGUAGES[labels.index(choice)]

    container = StreamlitEditorContainer("playground")
    handle = ctx.editors.create(container, ctx.playground_language)
    container.create_element()
    st.session_state.editor_handle = handle

    col1, col2 = st.columns([1, 5])
    with col1:
        if st.button("Format", use_container_width=True):
            handle.format()
            st.session_state.editor_seed += 1
            st.rerun()

    if not handle.worker or not handle.worker.ready:
        st.caption("Language service starting…")
        return

    problems = handle.diagnostics()
    if problems:
        for problem in problems:
            st.error(f"Line {problem.line}, column {problem.column}: {problem.message}")
    else:
        with col2:
            st.success("No problems found")


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_menu()

    ctx = st.session_state.ctx
    path = ctx.router.current_path
    course_id = ctx.router.course_id

    if path == normalize_path(ctx.settings.playground_path):
        render_playground()
    elif course_id and path.startswith("/courses/"):
        render_course_page(course_id)
    elif course_id:
        render_lesson_view(course_id)
    else:
        render_home()


if __name__ == "__main__":
    main()
