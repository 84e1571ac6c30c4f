from __future__ import annotations

from datetime import datetime, timedelta, timezone


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ago(seconds: float) -> datetime:
    """Return a tz-aware UTC datetime `seconds` before now."""
    return now_utc() - timedelta(seconds=seconds)
