"""
Injected wall clock.

Bucketing and status transitions depend on "now"; services receive a Clock so
tests can pin time instead of patching datetime.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(timezone.utc)


def get_clock() -> Clock:
    """FastAPI dependency; override in tests with a fixed clock."""
    return system_clock


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns the same instant."""

    def _clock() -> datetime:
        return moment

    return _clock


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as loaded from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
