"""Week keys and calendar helpers shared by the weekly plan store.

Week keys are rendered as ``DD-MMM-YYYY`` (``15-Jan-2024``) with a fixed
English month table, so the file names never depend on the process locale.
"""
import re
from datetime import date, datetime, timedelta
from typing import Any, Optional

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                       "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday",
                 "Friday", "Saturday", "Sunday")

WEEK_KEY_RE = re.compile(r"^(\d{2})-([A-Za-z]{3})-(\d{4})$")


def format_week_key(day: date) -> str:
    return f"{day.day:02d}-{MONTH_ABBREVIATIONS[day.month - 1]}-{day.year:04d}"


def parse_week_key(key: str) -> Optional[date]:
    """Inverse of ``format_week_key``; ``None`` for anything malformed."""
    match = WEEK_KEY_RE.match(key)
    if not match:
        return None
    day, month, year = match.groups()
    if month not in MONTH_ABBREVIATIONS:
        return None
    try:
        return date(int(year), MONTH_ABBREVIATIONS.index(month) + 1, int(day))
    except ValueError:
        return None


def get_monday(day: date) -> date:
    if isinstance(day, datetime):
        day = day.date()
    return day - timedelta(days=day.weekday())


def short_month_day(day: date) -> str:
    # "Jan 15", day not padded
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def coerce_date(value: Any) -> Any:
    """Drop the time of day from datetimes and ISO datetime strings.

    Anything else is handed back untouched for pydantic to validate.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return value
    return value
