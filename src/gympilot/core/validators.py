# File: src/gympilot/core/validators.py
"""Reusable validation and parsing utilities for gym input."""

import re
from datetime import date, datetime

from gympilot.core.errors import MalformedScheduleError, ValidationError

SCHEDULE_FORMAT = "%d-%m-%Y %H:%M"
DATE_FORMAT = "%d-%m-%Y"
ISO_DATE_FORMAT = "%Y-%m-%d"

_SCHEDULE_RE = re.compile(r"^\d{2}-\d{2}-\d{4} \d{2}:\d{2}$")
_DATE_RE = re.compile(r"^\d{2}-\d{2}-\d{4}$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_schedule(value: str) -> datetime:
    """
    Parse session schedule text.

    Args:
        value: Text in "dd-MM-yyyy HH:mm" form

    Returns:
        Naive datetime

    Raises:
        MalformedScheduleError: If the text doesn't match or isn't a real date
    """
    if not isinstance(value, str) or not _SCHEDULE_RE.fullmatch(value):
        raise MalformedScheduleError(str(value), "dd-MM-yyyy HH:mm")
    try:
        return datetime.strptime(value, SCHEDULE_FORMAT)
    except ValueError as e:
        raise MalformedScheduleError(value, "dd-MM-yyyy HH:mm") from e


def parse_date(value: str) -> date:
    """Parse date-only text in "dd-MM-yyyy" form (notification targeting)."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise MalformedScheduleError(str(value), "dd-MM-yyyy")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise MalformedScheduleError(value, "dd-MM-yyyy") from e


def parse_birth_date(value: date | str | None) -> date | None:
    """
    Parse a birth date given as "yyyy-MM-dd" or "dd-MM-yyyy".

    A missing value stays None; registration rejects it later.

    Raises:
        ValidationError: If the text matches neither format
    """
    if value is None or isinstance(value, date):
        return value

    cleaned = value.strip()
    if _ISO_DATE_RE.match(cleaned):
        fmt = ISO_DATE_FORMAT
    elif _DATE_RE.match(cleaned):
        fmt = DATE_FORMAT
    else:
        raise ValidationError(f"Invalid birth date format: {value}", details={"value": value})

    try:
        return datetime.strptime(cleaned, fmt).date()
    except ValueError as e:
        raise ValidationError(f"Invalid birth date format: {value}", details={"value": value}) from e


def validate_name(
    value: str,
    field_name: str = "Name",
    min_length: int = 1,
    max_length: int = 100,
) -> str:
    """
    Validate a person's name: letters, spaces, apostrophes and hyphens.

    Returns:
        Stripped name

    Raises:
        ValueError: If validation fails
    """
    if not value or not value.strip():
        raise ValueError(f"{field_name} cannot be empty")

    cleaned = value.strip()

    if len(cleaned) < min_length:
        raise ValueError(f"{field_name} must be at least {min_length} characters")

    if len(cleaned) > max_length:
        raise ValueError(f"{field_name} cannot exceed {max_length} characters")

    if not re.match(r"^[^\W\d_]+(?:[ '\-][^\W\d_]+)*$", cleaned):
        raise ValueError(f"{field_name} can only contain letters, spaces, ' and -")

    return cleaned


def validate_amount(value: int, field_name: str = "Amount") -> int:
    """Ensure a money amount is a non-negative whole number."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be a whole number")
    if value < 0:
        raise ValueError(f"{field_name} cannot be negative")
    return value


def validate_notification(value: str, max_length: int = 1000) -> str:
    """Check a notification message. The text is kept exactly as given."""
    if not value or not value.strip():
        raise ValueError("Message cannot be empty")
    if len(value) > max_length:
        raise ValueError(f"Message cannot exceed {max_length} characters")
    return value
