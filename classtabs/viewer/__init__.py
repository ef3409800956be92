"""
ClassTabs Viewer - Rendering components for the tab strip.

This module provides:
- Tab strip rendering with active/drag-over state
- Breadcrumb trail for nested classroom tabs
"""

from .tabstrip import (
    TabChip,
    get_tabstrip_css,
    build_tab_chips,
    render_tab_chip,
    render_tab_strip,
    breadcrumb_trail,
    render_breadcrumbs,
)

__all__ = [
    "TabChip",
    "get_tabstrip_css",
    "build_tab_chips",
    "render_tab_chip",
    "render_tab_strip",
    "breadcrumb_trail",
    "render_breadcrumbs",
]
