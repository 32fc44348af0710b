"""Identifier and timestamp helpers shared by every collection."""
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4


def new_id(prefix: str) -> str:
    """Generate a unique record id such as ``project_3f2a...``"""
    return f"{prefix}_{uuid4().hex}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Current time, nudged forward so it is strictly later than ``previous``.

    SQLite hands back naive datetimes, so a naive ``previous`` is read as UTC.
    """
    now = utcnow()
    if previous is None:
        return now
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now
