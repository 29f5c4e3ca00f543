"""Input validation for task fields.

Each validator returns the normalized value or raises a
:class:`~taskboard.errors.TaskValidationError` subclass. None of them touch
the repository.
"""

import re
from datetime import datetime
from typing import Any

from .errors import EmptyTitle, InvalidDueDate, InvalidPriority, InvalidType, TitleTooLong
from .models import Priority

MAX_TITLE_LEN = 100

# Browser clients trim U+FEFF along with Unicode whitespace.
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def title_length(title: str) -> int:
    """Length in UTF-16 code units, the unit browser clients count in."""
    return len(title.encode("utf-16-le", "surrogatepass")) // 2


def validate_title(title: Any) -> str:
    """Return the trimmed title."""
    if title is None:
        raise EmptyTitle()
    if not isinstance(title, str):
        raise InvalidType("Title must be a string")
    trimmed = _EDGE_SPACE.sub("", title)
    if not trimmed:
        raise EmptyTitle()
    if title_length(trimmed) > MAX_TITLE_LEN:
        raise TitleTooLong(f"Title too long (max {MAX_TITLE_LEN})")
    return trimmed


def _parse_priority(value: str) -> Priority:
    try:
        return Priority(value.lower())
    except ValueError:
        raise InvalidPriority() from None


def validate_priority(priority: Any) -> Priority:
    """Priority for a new task. Missing or empty input means medium."""
    if priority is None or priority == "":
        return Priority.MEDIUM
    if not isinstance(priority, str):
        raise InvalidPriority()
    return _parse_priority(priority)


def require_priority(priority: Any) -> Priority:
    """Priority for an update. Missing input is an error, not medium."""
    if not isinstance(priority, str) or not priority:
        raise InvalidPriority()
    return _parse_priority(priority)


def validate_due_date(value: Any) -> str | None:
    """Return the due date unchanged if it parses, ``None`` if it is empty."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise InvalidDueDate()
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise InvalidDueDate() from None
    return value


def validate_completed(value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidType("completed must be boolean")
    return value
