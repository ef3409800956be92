"""
TabPersistence - Save and restore tab state through a session-scoped store.

Three named slots are used:
- open tabs: JSON list of key strings
- classroom labels: JSON list of [key, label] pairs
- student labels: JSON list of [key, label] pairs

Reads are best-effort. A slot that is missing or does not decode to the
expected shape restores as empty; it is logged, never raised.
"""

import json
import logging
from typing import Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from classtabs.config import Settings
from classtabs.schemas import TabSnapshot

from .registry import TabRegistry


logger = logging.getLogger(__name__)

_TAB_LIST = TypeAdapter(list[str])
_LABEL_PAIRS = TypeAdapter(list[tuple[str, str]])


class SessionStore(Protocol):
    """Key/value storage scoped to one browser session."""

    def read(self, name: str) -> Optional[str]: ...

    def write(self, name: str, value: str) -> None: ...


class InMemoryStore:
    """Dict-backed SessionStore, used in tests and as a fallback."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.slots: dict[str, str] = dict(initial or {})

    def read(self, name: str) -> Optional[str]:
        return self.slots.get(name)

    def write(self, name: str, value: str) -> None:
        self.slots[name] = value


class TabPersistence:
    """
    Map a TabRegistry to and from the three storage slots.

    Slot names come from Settings so several apps can share one store.
    """

    def __init__(self, store: SessionStore, settings: Optional[Settings] = None):
        """
        Initialize persistence.

        Args:
            store: Session-scoped key/value store
            settings: Slot names (default: Settings())
        """
        self.store = store
        self.settings = settings or Settings()

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def load_snapshot(self) -> TabSnapshot:
        """Read all three slots; malformed slots come back empty."""
        s = self.settings
        open_tabs = self._read_slot(s.open_tabs_slot, _TAB_LIST) or []
        classroom_pairs = self._read_slot(s.classroom_labels_slot, _LABEL_PAIRS) or []
        student_pairs = self._read_slot(s.student_labels_slot, _LABEL_PAIRS) or []
        return TabSnapshot(
            open_tabs=open_tabs,
            classroom_labels=dict(classroom_pairs),
            student_labels=dict(student_pairs),
        )

    def load(self) -> TabRegistry:
        """Restore a registry, or an empty one if nothing usable is stored."""
        snapshot = self.load_snapshot()
        if snapshot.is_empty:
            return TabRegistry()
        registry = TabRegistry.from_snapshot(snapshot)
        if registry.open_tabs:
            logger.info(f"Restored {len(registry.open_tabs)} open tabs from session")
        return registry

    def _read_slot(self, name: str, adapter: TypeAdapter):
        raw = self.store.read(name)
        if raw is None:
            return None
        try:
            return adapter.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring malformed session slot {name!r}: {e}")
            return None

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def save_snapshot(self, snapshot: TabSnapshot):
        s = self.settings
        self.store.write(s.open_tabs_slot, json.dumps(snapshot.open_tabs))
        self.store.write(
            s.classroom_labels_slot,
            json.dumps([[k, v] for k, v in snapshot.classroom_labels.items()]),
        )
        self.store.write(
            s.student_labels_slot,
            json.dumps([[k, v] for k, v in snapshot.student_labels.items()]),
        )

    def save(self, registry: TabRegistry):
        """Write the registry's current state to all three slots."""
        self.save_snapshot(registry.snapshot())
