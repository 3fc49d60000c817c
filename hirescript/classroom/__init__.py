"""
Hirescript Classroom - Loading and navigating lessons.

This module provides:
- ContentLoader: Load the lesson forest from markdown files
- CourseNavigator: Sidebar and previous/next links per course
"""

from .loader import (
    ContentLoader,
    split_front_matter,
    slug_for,
    belongs_to_course,
)

from .navigator import (
    CourseNavigator,
    sidebar_for,
    active_index_of,
    prev_next,
    build_navigation,
)

__all__ = [
    # Loader
    "ContentLoader",
    "split_front_matter",
    "slug_for",
    "belongs_to_course",
    # Navigator
    "CourseNavigator",
    "sidebar_for",
    "active_index_of",
    "prev_next",
    "build_navigation",
]
