"""Timestamp helpers for repositories."""

from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def next_updated_at(previous: datetime) -> datetime:
    """A timestamp strictly later than previous, normally just "now"."""
    now = utc_now()
    previous = as_utc(previous)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
