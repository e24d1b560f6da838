# File: src/gympilot/utils/datetime.py
"""Timezone-aware datetime utilities for the gym's local time."""

import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

# Schedules are entered as wall-clock text, so comparisons use naive local time
APP_TIMEZONE = ZoneInfo(os.getenv("APP_TIMEZONE", "UTC"))


def now_local() -> datetime:
    """Get current datetime in the gym's timezone."""
    return datetime.now(APP_TIMEZONE)


def now_local_naive() -> datetime:
    """Current local wall-clock time without tzinfo (comparable to session schedules)."""
    return now_local().replace(tzinfo=None)


def today_local() -> date:
    """Get today's date in the gym's timezone."""
    return now_local().date()


def years_between(start: date, end: date) -> int:
    """Whole years elapsed from start to end (age on a given day)."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
