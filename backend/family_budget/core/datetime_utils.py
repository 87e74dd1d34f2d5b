from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a UTC-naive datetime.

    Timestamps are stored as UTC in timezone-naive DateTime columns; the MySQL
    session time zone is pinned to +00:00 so server-side NOW() agrees.
    """

    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc(dt: datetime) -> datetime:
    """Treat a DB-stored UTC-naive datetime as UTC-aware for API responses."""

    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc)

    return dt.replace(tzinfo=timezone.utc)
