"""
Page and roster schemas for ClassTabs.

Defines Pydantic models for the YAML-backed configuration:
- PageInfo: a flat sidebar page (key, label, icon)
- RosterStudent / RosterClass: demo class roster shown in the sidebar
"""

from pydantic import BaseModel, Field
from typing import Optional

from .tabs import PAGE_PATTERN, SEGMENT_PATTERN


class PageInfo(BaseModel):
    """A flat, non-parameterized location such as 'explore'."""
    key: str = Field(..., pattern=PAGE_PATTERN)
    label: str
    icon: Optional[str] = None   # emoji shown next to the label


class RosterStudent(BaseModel):
    id: str = Field(..., pattern=SEGMENT_PATTERN)   # stable identifier, used to disambiguate slugs
    name: str


class RosterClass(BaseModel):
    id: str = Field(..., pattern=SEGMENT_PATTERN)
    name: str
    students: list[RosterStudent] = []
