"""
Tab strip renderer - HTML for the open-tab strip and breadcrumbs.

Provides:
- Tab strip markup with active and drag-over highlighting
- Breadcrumb trail for classroom and student tabs
"""

import html
from dataclasses import dataclass
from typing import Optional

from classtabs.schemas import HOME, TabKey, TabKind
from classtabs.navigation import TabNavigator, classroom_key, page_key


@dataclass
class TabChip:
    """One rendered tab in the strip."""
    key: TabKey
    label: str
    active: bool
    drag_over: bool
    closable: bool


def get_tabstrip_css() -> str:
    """Get CSS styles for the tab strip and breadcrumbs."""
    return """
    <style>
    .tab-strip {
        display: flex;
        gap: 0.3em;
        border-bottom: 1px solid #e0e0e0;
        margin-bottom: 1em;
        overflow-x: auto;
    }
    .tab-chip {
        padding: 0.45em 0.9em;
        border-radius: 8px 8px 0 0;
        background: #f5f5f5;
        color: #555;
        font-size: 0.9em;
        white-space: nowrap;
    }
    .tab-chip.active {
        background: white;
        color: #1565C0;
        font-weight: 600;
        border: 1px solid #e0e0e0;
        border-bottom-color: white;
    }
    .tab-chip.drag-over {
        outline: 2px dashed #1976D2;
    }
    .tab-close {
        margin-left: 0.5em;
        color: #999;
    }
    .breadcrumbs {
        color: #666;
        font-size: 0.9em;
        margin-bottom: 0.8em;
    }
    .breadcrumbs .crumb-current {
        color: #333;
        font-weight: 600;
    }
    .breadcrumbs .crumb-sep {
        margin: 0 0.4em;
        color: #bbb;
    }
    </style>
    """


def build_tab_chips(navigator: TabNavigator) -> list[TabChip]:
    """Home first, then open tabs in strip order."""
    chips = [TabChip(
        key=HOME,
        label=navigator.tab_label(HOME),
        active=navigator.active_tab == HOME,
        drag_over=False,
        closable=False,
    )]
    for key in navigator.open_tabs:
        chips.append(TabChip(
            key=key,
            label=navigator.tab_label(key),
            active=navigator.active_tab == key,
            drag_over=navigator.drag_over_tab == key,
            closable=True,
        ))
    return chips


def render_tab_chip(chip: TabChip) -> str:
    classes = ["tab-chip"]
    if chip.active:
        classes.append("active")
    if chip.drag_over:
        classes.append("drag-over")
    close = '<span class="tab-close" aria-label="Close tab">×</span>' if chip.closable else ""
    return (
        f'<span class="{" ".join(classes)}" data-tab-item="true" '
        f'data-tab-key="{html.escape(str(chip.key))}">'
        f'{html.escape(chip.label)}{close}</span>'
    )


def render_tab_strip(navigator: TabNavigator) -> str:
    chips = "".join(render_tab_chip(chip) for chip in build_tab_chips(navigator))
    return f'<div class="tab-strip">{chips}</div>'


# -----------------------------------------------------------------------------
# Breadcrumbs
# -----------------------------------------------------------------------------

def breadcrumb_trail(navigator: TabNavigator, key: Optional[TabKey] = None) -> list[tuple[str, TabKey]]:
    """
    Trail of (label, key) pairs from home down to key (default: active tab).

    A student seen inside a class shows the class list and the class above it.
    """
    key = key or navigator.active_tab
    trail = [(navigator.tab_label(HOME), HOME)]
    if key.is_home:
        return trail

    if key.kind == TabKind.CLASS_STUDENT:
        class_tab = classroom_key(key.class_id)
        trail.append((navigator.tab_label(page_key("classroom")), page_key("classroom")))
        trail.append((navigator.class_label(key) or key.class_id, class_tab))
    elif key.kind == TabKind.CLASSROOM:
        trail.append((navigator.tab_label(page_key("classroom")), page_key("classroom")))

    trail.append((navigator.tab_label(key), key))
    return trail


def render_breadcrumbs(trail: list[tuple[str, TabKey]]) -> str:
    parts = []
    for i, (label, _) in enumerate(trail):
        if i == len(trail) - 1:
            parts.append(f'<span class="crumb-current">{html.escape(label)}</span>')
        else:
            parts.append(f'<span class="crumb">{html.escape(label)}</span>')
    sep = '<span class="crumb-sep">›</span>'
    return f'<div class="breadcrumbs">{sep.join(parts)}</div>'
