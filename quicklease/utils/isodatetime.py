"""ISO 8601 datetime/date conversion utilities.

This module centralizes all transformations between Python datetime/date objects
and ISO 8601 strings. Dates of birth are stored as YYYY-MM-DD text in SQLite
and token timestamps are unix seconds.
"""

from datetime import datetime, date, UTC


def to_datestring(d: date | None) -> str | None:
    """Convert date to ISO 8601 date string (YYYY-MM-DD)."""
    if d is None:
        return None
    return d.isoformat()


def to_date(date_str: str | None) -> date | None:
    """Convert ISO 8601 date string (YYYY-MM-DD) to date."""
    if date_str is None:
        return None
    return date.fromisoformat(date_str)


def now_unix() -> int:
    """Get current UTC time as integer unix seconds."""
    return int(datetime.now(UTC).timestamp())
