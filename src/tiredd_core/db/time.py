# src/tiredd_core/db/time.py
"""Clock helpers for timestamps and session expiry."""

from datetime import UTC, datetime, timedelta


def utcnow() -> datetime:
    """Current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def expiry_from(start: datetime, ttl_minutes: int) -> datetime:
    """Return the instant ``ttl_minutes`` after ``start``."""
    return start + timedelta(minutes=ttl_minutes)
