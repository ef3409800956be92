"""
TabRegistry - Ordered open tabs plus the two label maps.

Every mutator builds new containers and swaps them in rather than editing
in place, so anything holding a previous reference (the persistence layer,
the renderer) keeps a consistent snapshot.
"""

import logging
from enum import Enum
from typing import Optional

from classtabs.schemas import TabKey, TabSnapshot

from .keys import InvalidTabKeyError, is_closable, parse_tab_key


logger = logging.getLogger(__name__)


class LabelMap(str, Enum):
    """Selects one of the registry's label maps."""
    CLASSROOM = "classroom"
    STUDENT = "student"


class TabRegistry:
    """
    Open tabs in strip order, and display names for keys that cannot be
    shown as-is (class ids, student slugs).

    Invariants: no duplicates in open_tabs, home is never a member.
    """

    def __init__(
        self,
        open_tabs: Optional[list[TabKey]] = None,
        classroom_labels: Optional[dict[TabKey, str]] = None,
        student_labels: Optional[dict[TabKey, str]] = None,
    ):
        tabs: list[TabKey] = []
        for key in open_tabs or []:
            if is_closable(key) and key not in tabs:
                tabs.append(key)
        self._open_tabs: tuple[TabKey, ...] = tuple(tabs)
        self._labels: dict[LabelMap, dict[TabKey, str]] = {
            LabelMap.CLASSROOM: dict(classroom_labels or {}),
            LabelMap.STUDENT: dict(student_labels or {}),
        }

    @property
    def open_tabs(self) -> tuple[TabKey, ...]:
        return self._open_tabs

    @property
    def classroom_labels(self) -> dict[TabKey, str]:
        return self._labels[LabelMap.CLASSROOM]

    @property
    def student_labels(self) -> dict[TabKey, str]:
        return self._labels[LabelMap.STUDENT]

    def __contains__(self, key: TabKey) -> bool:
        return key in self._open_tabs

    def __len__(self) -> int:
        return len(self._open_tabs)

    # -------------------------------------------------------------------------
    # Open Tabs
    # -------------------------------------------------------------------------

    def insert_or_move(self, key: TabKey) -> tuple[TabKey, ...]:
        """Remove any existing occurrence of key and append it at the end."""
        if not is_closable(key):
            return self._open_tabs
        self._open_tabs = tuple(t for t in self._open_tabs if t != key) + (key,)
        return self._open_tabs

    def replace_active_or_append(self, key: TabKey, current_active: TabKey) -> tuple[TabKey, ...]:
        """
        Overwrite the slot of current_active with key, keeping its position.

        Falls back to overwriting the last slot when current_active is not
        open, and to appending when nothing is open. Any other occurrence
        of key is dropped so the result stays duplicate-free.
        """
        if not is_closable(key):
            return self._open_tabs

        tabs = list(self._open_tabs)
        if not tabs:
            self._open_tabs = (key,)
            return self._open_tabs

        index = tabs.index(current_active) if current_active in tabs else len(tabs) - 1
        tabs[index] = key
        self._open_tabs = tuple(t for i, t in enumerate(tabs) if t != key or i == index)
        return self._open_tabs

    def remove(self, key: TabKey) -> Optional[int]:
        """Remove key; returns the index it occupied, or None if it was not open."""
        if key not in self._open_tabs:
            return None
        index = self._open_tabs.index(key)
        self._open_tabs = self._open_tabs[:index] + self._open_tabs[index + 1:]
        return index

    # -------------------------------------------------------------------------
    # Labels
    # -------------------------------------------------------------------------

    def set_label(self, label_map: LabelMap, key: TabKey, name: str) -> dict[TabKey, str]:
        self._labels[label_map] = {**self._labels[label_map], key: name}
        return self._labels[label_map]

    def delete_label(self, label_map: LabelMap, key: TabKey) -> dict[TabKey, str]:
        current = self._labels[label_map]
        if key in current:
            self._labels[label_map] = {k: v for k, v in current.items() if k != key}
        return self._labels[label_map]

    def get_label(self, label_map: LabelMap, key: TabKey) -> Optional[str]:
        return self._labels[label_map].get(key)

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def snapshot(self) -> TabSnapshot:
        """String-keyed copy of the registry, suitable for storage."""
        return TabSnapshot(
            open_tabs=[str(key) for key in self._open_tabs],
            classroom_labels={str(k): v for k, v in self.classroom_labels.items()},
            student_labels={str(k): v for k, v in self.student_labels.items()},
        )

    @classmethod
    def from_snapshot(cls, snapshot: TabSnapshot) -> "TabRegistry":
        """
        Rebuild a registry from stored state.

        Entries whose key no longer parses are dropped with a warning;
        duplicates and "home" are filtered out by the constructor.
        """
        return cls(
            open_tabs=list(_parse_keys(snapshot.open_tabs, "open tabs")),
            classroom_labels=_parse_label_map(snapshot.classroom_labels, "classroom labels"),
            student_labels=_parse_label_map(snapshot.student_labels, "student labels"),
        )


def _parse_keys(values, source: str):
    for value in values:
        try:
            yield parse_tab_key(value)
        except InvalidTabKeyError as e:
            logger.warning(f"Dropping stored {source} entry: {e}")


def _parse_label_map(values: dict[str, str], source: str) -> dict[TabKey, str]:
    result = {}
    for value, label in values.items():
        try:
            result[parse_tab_key(value)] = label
        except InvalidTabKeyError as e:
            logger.warning(f"Dropping stored {source} entry: {e}")
    return result
