"""Tests for lenient date coercion."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from src.accounting.core.validators import blank_to_none, coerce_utc_date

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (date(2024, 1, 1), date(2024, 1, 1)),
        ("2024-01-01", date(2024, 1, 1)),
        (" 2024-01-01 ", date(2024, 1, 1)),
        ("2024-01-01T00:00:00Z", date(2024, 1, 1)),
        ("2024-01-01T23:59:59.999Z", date(2024, 1, 1)),
        ("2024-01-01T22:00:00-05:00", date(2024, 1, 2)),
        ("2024-01-02T01:00:00+03:00", date(2024, 1, 1)),
        ("2024-01-01T12:00:00", date(2024, 1, 1)),
        (datetime(2024, 1, 1, 23, 0), date(2024, 1, 1)),
        (datetime(2024, 1, 1, 23, 0, tzinfo=timezone(timedelta(hours=-2))), date(2024, 1, 2)),
        (1704067200000, date(2024, 1, 1)),
        (1704067200000.0, date(2024, 1, 1)),
    ],
)
def test_coerces_date_like_values(value, expected):
    assert coerce_utc_date(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "   ", "yesterday", "2024-13-01", "2024-02-30", True, None, [], {}, float("nan"), 10**20],
)
def test_rejects_non_dates(value):
    with pytest.raises(ValueError, match="Invalid date"):
        coerce_utc_date(value)


def test_aware_datetime_at_minimum_is_rejected_not_overflowed():
    value = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1)))

    with pytest.raises(ValueError, match="Invalid date"):
        coerce_utc_date(value)


def test_datetime_subclass_checked_before_date():
    """datetime is a date subclass; it must still be converted to UTC first."""
    value = datetime(2024, 6, 30, 23, 30, tzinfo=timezone(timedelta(hours=-1)))

    assert coerce_utc_date(value) == date(2024, 7, 1)
    assert coerce_utc_date(value.astimezone(UTC)) == date(2024, 7, 1)


@pytest.mark.parametrize(("value", "expected"), [("", None), ("  ", None), ("a", "a"), (0, 0)])
def test_blank_to_none(value, expected):
    assert blank_to_none(value) == expected
