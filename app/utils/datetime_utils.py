"""
Centralized DateTime Utilities
==============================

Post timestamps are persisted to MongoDB as BSON Dates in UTC and rendered
as ISO 8601 strings in API responses.

Functions:
- utc_now(): Returns timezone-aware UTC datetime
- ensure_utc(): Normalize naive/aware datetimes to aware UTC
- to_iso(): Convert datetime object to ISO 8601 string
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    BSON Dates have millisecond precision, so microseconds are truncated here
    to keep the value returned on insert equal to the value read back later.
    """
    now = datetime.now(dt_timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in UTC.
    
    Args:
        dt: datetime object (timezone-aware or naive, naive means UTC)
    
    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00.123Z"), or None if dt is None
    """
    dt = ensure_utc(dt)
    if dt is None:
        return None
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
