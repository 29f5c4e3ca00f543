# tests/test_validation.py

from __future__ import annotations

import pytest

from taskboard.errors import EmptyTitle, InvalidDueDate, InvalidPriority, InvalidType, TitleTooLong
from taskboard.models import Priority
from taskboard.validation import (
    require_priority,
    title_length,
    validate_completed,
    validate_due_date,
    validate_priority,
    validate_title,
)


def test_title_is_trimmed() -> None:
    assert validate_title("  Buy milk  ") == "Buy milk"


@pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
def test_title_missing_or_blank_is_rejected(title) -> None:
    with pytest.raises(EmptyTitle) as exc:
        validate_title(title)
    assert exc.value.message == "Title is required"


def test_title_length_boundary() -> None:
    assert validate_title("x" * 100) == "x" * 100
    # surrounding whitespace does not count towards the limit
    assert validate_title("  " + "x" * 100 + "  ") == "x" * 100

    with pytest.raises(TitleTooLong) as exc:
        validate_title("x" * 101)
    assert exc.value.message == "Title too long (max 100)"


def test_title_trims_byte_order_mark() -> None:
    assert validate_title("\ufeff Plan \ufeff") == "Plan"
    with pytest.raises(EmptyTitle):
        validate_title("\ufeff")


def test_title_length_counts_utf16_units() -> None:
    assert title_length("\U0001F600") == 2
    assert validate_title("\U0001F600" * 50) == "\U0001F600" * 50
    with pytest.raises(TitleTooLong):
        validate_title("\U0001F600" * 60)
    # lone surrogates can arrive through JSON escapes
    assert title_length("\ud800x") == 2


def test_title_must_be_a_string() -> None:
    with pytest.raises(InvalidType):
        validate_title(42)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("critical", Priority.CRITICAL),
        ("HIGH", Priority.HIGH),
        ("Medium", Priority.MEDIUM),
        ("low", Priority.LOW),
        (None, Priority.MEDIUM),
        ("", Priority.MEDIUM),
    ],
)
def test_validate_priority(raw, expected) -> None:
    assert validate_priority(raw) is expected


@pytest.mark.parametrize("raw", ["urgent", " high", 3, ["low"]])
def test_validate_priority_rejects_unknown(raw) -> None:
    with pytest.raises(InvalidPriority) as exc:
        validate_priority(raw)
    assert exc.value.message == "Invalid priority"


def test_require_priority_does_not_default() -> None:
    assert require_priority("LOW") is Priority.LOW
    for raw in (None, "", "urgent"):
        with pytest.raises(InvalidPriority):
            require_priority(raw)


@pytest.mark.parametrize(
    "raw",
    ["2025-03-01", "2025-03-01T09:30:00", "2025-03-01T09:30:00.000Z", "2025-03-01T09:30:00+02:00"],
)
def test_due_date_accepts_iso_values_unchanged(raw) -> None:
    assert validate_due_date(raw) == raw


def test_due_date_empty_means_none() -> None:
    assert validate_due_date(None) is None
    assert validate_due_date("") is None


@pytest.mark.parametrize("raw", ["tomorrow", "2025-13-01", "2025-02-30", "   ", 1735689600])
def test_due_date_rejects_garbage(raw) -> None:
    with pytest.raises(InvalidDueDate) as exc:
        validate_due_date(raw)
    assert exc.value.message == "Invalid dueDate"


def test_completed_must_be_a_real_boolean() -> None:
    assert validate_completed(True) is True
    assert validate_completed(False) is False
    for raw in ("yes", "true", 1, 0, None):
        with pytest.raises(InvalidType) as exc:
            validate_completed(raw)
        assert exc.value.message == "completed must be boolean"
