"""
TabNavigator - Tab strip state machine and URL synchronization.

Provides:
- navigate: activate a tab, optionally replacing the active tab's slot
- close: remove a tab and pick the neighbour that becomes active
- open_classroom / open_student_profile / open_student_from_class:
  drill-down clicks that register a display label, then replace-navigate
- sync_from_url: additive reconciliation after any URL change
- tab_label: presentable name for any tab

The navigator is the only caller of the router and the only mutator of
the registry. One instance serves one browser session and is handed to
whichever view needs to trigger navigation.
"""

import logging
from typing import Mapping, Optional, Sequence, Union

from classtabs.schemas import HOME, TabKey, TabKind

from .keys import (
    DEFAULT_PAGE_KEYS,
    InvalidTabKeyError,
    classroom_key,
    is_classroom_scoped,
    is_closable,
    is_student_scoped,
    key_to_path,
    nested_student_key,
    parse_segments,
    parse_tab_key,
    student_key,
    title_from_slug,
)
from .persistence import TabPersistence
from .registry import LabelMap, TabRegistry
from .routing import Router


logger = logging.getLogger(__name__)

KeyLike = Union[TabKey, str]


class TabNavigator:
    """
    Owns the active tab, the open-tab registry and the drag-hover marker.

    State is rehydrated from persistence once, at construction, and written
    back after every mutation.
    """

    def __init__(
        self,
        router: Router,
        persistence: TabPersistence,
        page_labels: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize navigator.

        Args:
            router: Router used to change the URL
            persistence: TabPersistence for the session store
            page_labels: Flat page key -> label (default: DEFAULT_PAGE_KEYS, title-cased)
        """
        self.router = router
        self.persistence = persistence
        if page_labels is None:
            page_labels = {page: title_from_slug(page) for page in DEFAULT_PAGE_KEYS}
        self.page_labels = dict(page_labels)
        self.registry: TabRegistry = persistence.load()
        self.active_tab: TabKey = HOME
        self.drag_over_tab: Optional[TabKey] = None

    @property
    def open_tabs(self) -> tuple[TabKey, ...]:
        return self.registry.open_tabs

    @property
    def classroom_labels(self) -> dict[TabKey, str]:
        return self.registry.classroom_labels

    @property
    def student_labels(self) -> dict[TabKey, str]:
        return self.registry.student_labels

    def _persist(self):
        self.persistence.save(self.registry)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def navigate(self, key: KeyLike, replace: bool = False):
        """
        Activate key and point the router at it.

        With replace=True the previously active tab's slot is overwritten
        (drill-down without growing the strip). Otherwise a tab that is not
        yet open is appended; an open one is activated where it is.
        """
        key = _as_key(key)
        previous = self.active_tab
        self.active_tab = key

        if not key.is_home:
            if replace and key not in self.registry:
                self.registry.replace_active_or_append(key, previous)
            elif key not in self.registry:
                self.registry.insert_or_move(key)
            self._persist()

        logger.debug(f"navigate {previous} -> {key} (replace={replace})")
        self.router.push_path(key_to_path(key))

    def close(self, key: KeyLike):
        """
        Close a tab.

        Home and tabs that are not open are ignored. Label entries for the
        closed key are dropped. If the closed tab was active, the tab now
        at its index becomes active, else the one before it, else home.
        """
        key = _as_key(key)
        if not is_closable(key):
            return

        index = self.registry.remove(key)
        if index is None:
            return

        if is_classroom_scoped(key):
            self.registry.delete_label(LabelMap.CLASSROOM, key)
        if is_student_scoped(key):
            self.registry.delete_label(LabelMap.STUDENT, key)
        if self.drag_over_tab == key:
            self.drag_over_tab = None
        self._persist()
        logger.debug(f"closed {key} at index {index}")

        if key == self.active_tab:
            remaining = self.registry.open_tabs
            if index < len(remaining):
                next_key = remaining[index]
            elif index > 0:
                next_key = remaining[index - 1]
            else:
                next_key = HOME
            self.navigate(next_key)

    def open_classroom(self, class_id: str, class_name: str):
        key = classroom_key(class_id)
        self.registry.set_label(LabelMap.CLASSROOM, key, class_name)
        self.navigate(key, replace=True)

    def open_student_profile(self, name: str, student_id: Optional[str] = None):
        key = student_key(name, student_id)
        self.registry.set_label(LabelMap.STUDENT, key, name)
        self.navigate(key, replace=True)

    def open_student_from_class(self, class_id: str, name: str, student_id: Optional[str] = None):
        """
        Open a student in the context of a class.

        The nested key is both classroom- and student-scoped, so it gets an
        entry in both label maps: the student's name, and the class name
        (or the raw class path when the class was never opened by name).
        """
        key = nested_student_key(class_id, name, student_id)
        class_label = self.registry.get_label(LabelMap.CLASSROOM, classroom_key(class_id))
        self.registry.set_label(
            LabelMap.CLASSROOM, key, class_label or f"{class_id}/student/{key.student_slug}"
        )
        self.registry.set_label(LabelMap.STUDENT, key, name)
        self.navigate(key, replace=True)

    def set_drag_over(self, key: Optional[KeyLike]):
        """Mark the tab under the pointer during a drag; None clears it."""
        if key is None:
            self.drag_over_tab = None
            return
        key = _as_key(key)
        self.drag_over_tab = key if key in self.registry else None

    # -------------------------------------------------------------------------
    # URL Reconciliation
    # -------------------------------------------------------------------------

    def sync_from_url(self, segments: Optional[Sequence[str]] = None) -> TabKey:
        """
        Make the registry agree with the current URL.

        Called on every route change, including the first render. Only ever
        adds: the URL's tab becomes active and is appended if missing.
        Unknown URLs activate home and leave the registry alone.

        Returns:
            The now-active tab
        """
        if segments is None:
            segments = self.router.current_path_segments()

        try:
            key = parse_segments(segments)
        except InvalidTabKeyError as e:
            logger.warning(f"Ignoring unroutable URL: {e}")
            key = HOME
        if key.kind == TabKind.PAGE and key.page not in self.page_labels:
            logger.warning(f"Ignoring unknown page {key.page!r}")
            key = HOME

        self.active_tab = key
        if key.is_home:
            return key

        changed = False
        if key not in self.registry:
            self.registry.insert_or_move(key)
            changed = True
        changed = self._backfill_labels(key) or changed
        if changed:
            logger.debug(f"reconciled {key} from URL")
            self._persist()
        return key

    def _backfill_labels(self, key: TabKey) -> bool:
        """Derive labels for a URL-entered key that was never opened by click."""
        added = False
        if is_classroom_scoped(key) and self.registry.get_label(LabelMap.CLASSROOM, key) is None:
            if key.kind == TabKind.CLASSROOM:
                label = key.class_id
            else:
                label = (self.registry.get_label(LabelMap.CLASSROOM, classroom_key(key.class_id))
                         or f"{key.class_id}/student/{key.student_slug}")
            self.registry.set_label(LabelMap.CLASSROOM, key, label)
            added = True
        if is_student_scoped(key) and self.registry.get_label(LabelMap.STUDENT, key) is None:
            self.registry.set_label(LabelMap.STUDENT, key, title_from_slug(key.student_slug))
            added = True
        return added

    # -------------------------------------------------------------------------
    # Presentation
    # -------------------------------------------------------------------------

    def tab_label(self, key: KeyLike) -> str:
        """Display name for a tab; falls back to the raw key when unlabeled."""
        key = _as_key(key)
        if key.is_home:
            return "Home"
        if key.kind == TabKind.PAGE:
            return self.page_labels.get(key.page, title_from_slug(key.page))
        if key.kind == TabKind.CLASSROOM:
            return self.registry.classroom_labels.get(key, str(key))
        return self.registry.student_labels.get(key, str(key))

    def class_label(self, key: KeyLike) -> Optional[str]:
        """Name of the class a classroom-scoped tab belongs to, if known."""
        key = _as_key(key)
        if not is_classroom_scoped(key):
            return None
        return self.registry.get_label(LabelMap.CLASSROOM, classroom_key(key.class_id))


def _as_key(key: KeyLike) -> TabKey:
    if isinstance(key, TabKey):
        return key
    return parse_tab_key(key)
