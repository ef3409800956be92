"""
ClassTabs Schemas - Pydantic models for tab navigation.

This module exports all schema classes for:
- Tabs: tab key variants and the home anchor
- Snapshot: persisted tab registry state
- Pages: sidebar pages and the class roster
"""

# Tab schemas
from .tabs import (
    TabKind,
    TabKey,
    HOME,
    PAGE_PATTERN,
    SEGMENT_PATTERN,
)

# Snapshot schemas
from .snapshot import (
    TabSnapshot,
)

# Page schemas
from .pages import (
    PageInfo,
    RosterStudent,
    RosterClass,
)

__all__ = [
    # Tabs
    'TabKind',
    'TabKey',
    'HOME',
    'PAGE_PATTERN',
    'SEGMENT_PATTERN',
    # Snapshot
    'TabSnapshot',
    # Pages
    'PageInfo',
    'RosterStudent',
    'RosterClass',
]
