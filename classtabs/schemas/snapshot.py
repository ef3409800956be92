"""
Persisted tab state for ClassTabs.

TabSnapshot is the string-keyed form of the tab registry: what gets written
to session storage after every mutation and read back on start-up.
"""

from pydantic import BaseModel


class TabSnapshot(BaseModel):
    open_tabs: list[str] = []                # left-to-right strip order, never "home"
    classroom_labels: dict[str, str] = {}    # classroom-scoped key -> display name
    student_labels: dict[str, str] = {}      # student-scoped key -> display name

    @property
    def is_empty(self) -> bool:
        return not (self.open_tabs or self.classroom_labels or self.student_labels)
