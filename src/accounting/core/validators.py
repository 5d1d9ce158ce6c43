"""Lenient input coercions shared by request schemas."""

from datetime import UTC, date, datetime
from typing import Any

INVALID_DATE = "Invalid date"


def coerce_utc_date(value: Any) -> date:
    """Coerce a date-like value to a calendar date in UTC.

    Accepts ``date``, ``datetime``, ISO-8601 strings (date-only or with a
    time part, ``Z`` or an offset allowed) and epoch milliseconds. Aware
    datetimes are converted to UTC before the date is taken; naive ones are
    read as UTC already.

    Raises:
        ValueError: If the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                value = value.astimezone(UTC)
            except OverflowError as e:
                raise ValueError(INVALID_DATE) from e
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise ValueError(INVALID_DATE)
    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, UTC).date()
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(INVALID_DATE) from e
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(INVALID_DATE)
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(INVALID_DATE) from e
        return coerce_utc_date(parsed)
    raise ValueError(INVALID_DATE)


def blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as an absent value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
