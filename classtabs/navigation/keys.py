"""
Tab key model - Pure construction, parsing and classification of tab keys.

Provides:
- Slug derivation for display names
- Key constructors for classrooms and students
- Structural predicates (closable, classroom-scoped, student-scoped)
- String/path <-> TabKey conversion

Nothing in this module has side effects.
"""

import re
from typing import Optional, Sequence

from pydantic import ValidationError

from classtabs.schemas import HOME, TabKey, TabKind


# Flat pages offered by the sidebar when no pages file overrides them
DEFAULT_PAGE_KEYS = frozenset({
    "explore",
    "records",
    "daily-roundup",
    "classroom",
    "myschool",
    "teaching",
    "learning",
    "community",
    "inbox",
    "announcements",
    "calendar",
    "forms",
    "settings",
    "profile",
})

_SEPARATOR_RUN = re.compile(r'[\s/]+')

# Slug used when a display name has no usable characters
EMPTY_SLUG = "unnamed"


class InvalidTabKeyError(ValueError):
    """Raised when a string does not describe a well-formed tab key."""


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------

def slugify(name: str) -> str:
    """
    Derive a key segment from a display name.

    Lower-cases and collapses each run of whitespace or '/' into one
    hyphen, so "Alice  Wong" -> "alice-wong" and "AC/DC" -> "ac-dc".
    Names with nothing else in them map to EMPTY_SLUG. Lossy: distinct
    names can collide.
    """
    slug = _SEPARATOR_RUN.sub('-', name.lower())
    if not slug.strip('-'):
        return EMPTY_SLUG
    return slug


def student_slug(name: str, student_id: Optional[str] = None) -> str:
    """Slug for a student, suffixed with the stable id when one is known."""
    slug = slugify(name)
    if student_id:
        slug = f"{slug}-{slugify(str(student_id))}"
    return slug


def page_key(page: str) -> TabKey:
    return TabKey(kind=TabKind.PAGE, page=page)


def classroom_key(class_id: str) -> TabKey:
    return TabKey(kind=TabKind.CLASSROOM, class_id=class_id)


def student_key(name: str, student_id: Optional[str] = None) -> TabKey:
    return TabKey(kind=TabKind.STUDENT, student_slug=student_slug(name, student_id))


def nested_student_key(class_id: str, name: str, student_id: Optional[str] = None) -> TabKey:
    return TabKey(
        kind=TabKind.CLASS_STUDENT,
        class_id=class_id,
        student_slug=student_slug(name, student_id),
    )


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def is_closable(key: TabKey) -> bool:
    """Every tab except home can be closed."""
    return key.kind != TabKind.HOME


def is_classroom_scoped(key: TabKey) -> bool:
    return key.kind in (TabKind.CLASSROOM, TabKind.CLASS_STUDENT)


def is_student_scoped(key: TabKey) -> bool:
    return key.kind in (TabKind.STUDENT, TabKind.CLASS_STUDENT)


def title_from_slug(slug: str) -> str:
    """Best-effort display name for a slug: 'aisha-rahman' -> 'Aisha Rahman'."""
    return ' '.join(part.capitalize() for part in slug.split('-') if part)


# -----------------------------------------------------------------------------
# Wire form
# -----------------------------------------------------------------------------

def parse_segments(segments: Sequence[str]) -> TabKey:
    """
    Parse path segments into a TabKey.

    Empty segments mean home. Raises InvalidTabKeyError for any shape that
    is not one of the known variants.
    """
    parts = [s for s in segments if s]
    try:
        if not parts or parts == ["home"]:
            return HOME
        if len(parts) == 1:
            return page_key(parts[0])
        if parts[0] == "classroom" and len(parts) == 2:
            return classroom_key(parts[1])
        if parts[0] == "classroom" and len(parts) == 4 and parts[2] == "student":
            return TabKey(kind=TabKind.CLASS_STUDENT, class_id=parts[1], student_slug=parts[3])
        if parts[0] == "student" and len(parts) == 2:
            return TabKey(kind=TabKind.STUDENT, student_slug=parts[1])
    except ValidationError as e:
        raise InvalidTabKeyError(f"Malformed tab key {'/'.join(parts)!r}: {e}") from e
    raise InvalidTabKeyError(f"Unknown tab key shape: {'/'.join(parts)!r}")


def parse_tab_key(text: str) -> TabKey:
    """Parse a wire-form key string such as 'classroom/5a'."""
    if not isinstance(text, str):
        raise InvalidTabKeyError(f"Tab key must be a string, got {type(text).__name__}")
    if text and (text.startswith('/') or text.endswith('/') or '//' in text):
        raise InvalidTabKeyError(f"Malformed tab key: {text!r}")
    return parse_segments(text.split('/'))


def key_to_path(key: TabKey) -> str:
    """home -> '/', every other key -> '/' + key."""
    if key.is_home:
        return "/"
    return f"/{key}"


def path_to_key(path: str) -> TabKey:
    """Inverse of key_to_path."""
    return parse_segments(path.strip('/').split('/'))
