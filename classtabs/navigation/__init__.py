"""
ClassTabs Navigation - Runtime components for the hierarchical tab strip.

This module provides:
- Tab key model: slugs, key constructors, predicates, parsing
- TabRegistry: open tabs and label maps
- TabPersistence: session-scoped save/restore
- TabNavigator: navigation state machine and URL reconciliation

Streamlit adapters live in classtabs.navigation.session and are imported
by the app only.
"""

from .keys import (
    DEFAULT_PAGE_KEYS,
    InvalidTabKeyError,
    slugify,
    student_slug,
    page_key,
    classroom_key,
    student_key,
    nested_student_key,
    is_closable,
    is_classroom_scoped,
    is_student_scoped,
    title_from_slug,
    parse_segments,
    parse_tab_key,
    key_to_path,
    path_to_key,
)

from .registry import (
    TabRegistry,
    LabelMap,
)

from .persistence import (
    SessionStore,
    InMemoryStore,
    TabPersistence,
)

from .routing import (
    Router,
    InMemoryRouter,
)

from .controller import (
    TabNavigator,
)

__all__ = [
    # Keys
    "DEFAULT_PAGE_KEYS",
    "InvalidTabKeyError",
    "slugify",
    "student_slug",
    "page_key",
    "classroom_key",
    "student_key",
    "nested_student_key",
    "is_closable",
    "is_classroom_scoped",
    "is_student_scoped",
    "title_from_slug",
    "parse_segments",
    "parse_tab_key",
    "key_to_path",
    "path_to_key",
    # Registry
    "TabRegistry",
    "LabelMap",
    # Persistence
    "SessionStore",
    "InMemoryStore",
    "TabPersistence",
    # Routing
    "Router",
    "InMemoryRouter",
    # Controller
    "TabNavigator",
]
