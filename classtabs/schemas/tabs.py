"""
Tab key schemas for ClassTabs.

Defines the typed vocabulary of navigable locations:
- TabKind: discriminator for the key variants
- TabKey: immutable tagged key (class id + optional student slug, or a page)
- HOME: the permanent anchor tab

Keys travel as path-like strings (router, session storage) and are parsed
into TabKey the moment they enter the navigation layer.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Segment patterns. A segment never contains "/" since keys double as URL paths.
PAGE_PATTERN = r'^[a-z0-9][a-z0-9-]*$'
SEGMENT_PATTERN = r'^[^/]+$'


class TabKind(str, Enum):
    """Variant tag of a TabKey."""
    HOME = "home"
    PAGE = "page"                     # flat location: explore, records, ...
    CLASSROOM = "classroom"           # classroom/{class_id}
    CLASS_STUDENT = "class_student"   # classroom/{class_id}/student/{slug}
    STUDENT = "student"               # student/{slug}


# Which optional fields each kind requires (anything else must be None)
_REQUIRED_FIELDS = {
    TabKind.HOME: (),
    TabKind.PAGE: ("page",),
    TabKind.CLASSROOM: ("class_id",),
    TabKind.CLASS_STUDENT: ("class_id", "student_slug"),
    TabKind.STUDENT: ("student_slug",),
}


class TabKey(BaseModel):
    """
    Identifier of a navigable location.

    Frozen and hashable, so "is this tab already open" is plain set/list
    membership. str(key) gives the wire form, e.g. "classroom/5a/student/alice-wong".
    """
    model_config = ConfigDict(frozen=True)

    kind: TabKind
    page: Optional[str] = Field(default=None, pattern=PAGE_PATTERN)
    class_id: Optional[str] = Field(default=None, pattern=SEGMENT_PATTERN)
    student_slug: Optional[str] = Field(default=None, pattern=SEGMENT_PATTERN)

    @model_validator(mode='after')
    def fields_match_kind(self):
        required = _REQUIRED_FIELDS[self.kind]
        for name in ("page", "class_id", "student_slug"):
            value = getattr(self, name)
            if name in required and not value:
                raise ValueError(f"{self.kind.value} key requires {name}")
            if name not in required and value is not None:
                raise ValueError(f"{self.kind.value} key does not take {name}")
        if self.kind == TabKind.PAGE and self.page == "home":
            raise ValueError("'home' is not a page key, use HOME")
        return self

    @property
    def is_home(self) -> bool:
        return self.kind == TabKind.HOME

    def __str__(self) -> str:
        if self.kind == TabKind.HOME:
            return "home"
        if self.kind == TabKind.PAGE:
            return self.page
        if self.kind == TabKind.CLASSROOM:
            return f"classroom/{self.class_id}"
        if self.kind == TabKind.CLASS_STUDENT:
            return f"classroom/{self.class_id}/student/{self.student_slug}"
        return f"student/{self.student_slug}"


HOME = TabKey(kind=TabKind.HOME)
