"""
Hirescript Viewer - Rendering helpers for the site shell.

This module provides:
- Sidebar and previous/next bar HTML
- Code snippet extraction from lesson markdown
"""

from .navigation import (
    get_navigation_css,
    query_href,
    render_sidebar_html,
    render_prev_next_html,
)

from .snippets import (
    extract_code_snippets,
    split_on_snippets,
)

__all__ = [
    # Navigation
    "get_navigation_css",
    "query_href",
    "render_sidebar_html",
    "render_prev_next_html",
    # Snippets
    "extract_code_snippets",
    "split_on_snippets",
]
