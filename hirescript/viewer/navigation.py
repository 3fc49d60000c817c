"""
Navigation renderer - Sidebar and previous/next bar HTML.

Missing neighbours render as disabled placeholders, never as links.
"""

import html
from typing import Callable, Optional
from urllib.parse import quote

from hirescript.schemas import PrevNext, SidebarEntry


def query_href(path: str) -> str:
    """Link for the query-parameter router used by the Streamlit shell."""
    return f"?path={quote(path, safe='/')}"


def get_navigation_css() -> str:
    """Get CSS styles for sidebar and prev/next display."""
    return """
    <style>
    .course-sidebar {
        list-style: none;
        padding: 0;
        margin: 0;
    }
    .course-sidebar li {
        margin: 0.2em 0;
    }
    .course-sidebar a {
        text-decoration: none;
        color: inherit;
        display: block;
        padding: 0.3em 0.6em;
        border-radius: 6px;
    }
    .course-sidebar a:hover {
        background-color: rgba(100, 100, 100, 0.15);
    }
    .course-sidebar .active a {
        background-color: rgba(25, 118, 210, 0.15);
        color: #1976D2;
        font-weight: 600;
    }
    .prev-next {
        display: flex;
        justify-content: space-between;
        gap: 1em;
        margin: 2em 0 1em 0;
    }
    .nav-link {
        padding: 0.6em 1em;
        border: 1px solid rgba(100, 100, 100, 0.3);
        border-radius: 8px;
        text-decoration: none;
        color: inherit;
        max-width: 45%;
    }
    .nav-link.next {
        margin-left: auto;
        text-align: right;
    }
    .nav-link.disabled {
        opacity: 0.4;
        cursor: not-allowed;
    }
    .nav-link-label {
        font-size: 0.8em;
        opacity: 0.7;
        display: block;
    }
    .sidebar-empty {
        opacity: 0.6;
        font-style: italic;
    }
    </style>
    """


def render_sidebar_html(
    sidebar: list[SidebarEntry],
    active_index: int = -1,
    href_for: Callable[[str], str] = query_href,
) -> str:
    """
    Render the course sidebar.

    Args:
        sidebar: Entries in document order
        active_index: Entry to highlight, -1 for none
        href_for: Turns a route path into a link target

    Returns:
        HTML string for the list
    """
    if not sidebar:
        return '<div class="sidebar-empty">No lessons yet.</div>'

    parts = ['<ul class="course-sidebar">']
    for idx, entry in enumerate(sidebar):
        css_class = ' class="active"' if idx == active_index else ''
        parts.append(
            f'<li{css_class}><a href="{html.escape(href_for(entry.to))}" target="_self">'
            f'{html.escape(entry.label)}</a></li>'
        )
    parts.append('</ul>')
    return ''.join(parts)


def _render_link(
    entry: Optional[SidebarEntry],
    direction: str,
    href_for: Callable[[str], str],
) -> str:
    caption = "Previous" if direction == "prev" else "Next"
    if entry is None:
        return (
            f'<span class="nav-link {direction} disabled" aria-disabled="true">'
            f'<span class="nav-link-label">{caption}</span>&nbsp;</span>'
        )
    return (
        f'<a class="nav-link {direction}" href="{html.escape(href_for(entry.to))}" target="_self">'
        f'<span class="nav-link-label">{caption}</span>{html.escape(entry.label)}</a>'
    )


def render_prev_next_html(
    links: PrevNext,
    href_for: Callable[[str], str] = query_href,
) -> str:
    """Render the previous/next bar under a lesson."""
    parts = ['<div class="prev-next">']
    parts.append(_render_link(links.prev, "prev", href_for))
    parts.append(_render_link(links.next, "next", href_for))
    parts.append('</div>')
    return ''.join(parts)
