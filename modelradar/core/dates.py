"""Date formatting utilities."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional


# Standard format constant
DATE_FORMAT = "%Y-%m-%d"


def today() -> str:
    """
    Get today's date as YYYY-MM-DD string.

    Returns:
        Date string in YYYY-MM-DD format
    """
    return datetime.now().strftime(DATE_FORMAT)


def now_utc() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values pass through."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_iso(value: Optional[str], default: Optional[datetime] = None) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp ("2024-01-31T12:00:00Z", "2024-01-31T12:00:00.000+00:00").

    Naive timestamps are taken as UTC.

    Args:
        value: Timestamp string to parse
        default: Default value if parsing fails

    Returns:
        Aware datetime or default
    """
    if not value or not isinstance(value, str):
        return default
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return default
    return as_utc(dt)


def days_back(days: int, end: Optional[date] = None) -> list[date]:
    """
    Consecutive calendar days ending on ``end`` (inclusive), oldest first.

    days_back(2, date(2024, 1, 3)) -> [2024-01-01, 2024-01-02, 2024-01-03]
    """
    end = end or date.today()
    return [end - timedelta(days=offset) for offset in range(days, -1, -1)]
