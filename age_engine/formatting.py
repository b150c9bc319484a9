"""Fixed en-US text for dates and counts.

Month names are spelled out here rather than taken from ``strftime("%B")``
so the output does not change with the host locale.
"""

import datetime

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

TODAY_LABEL: str = "Today!"


def format_long_date(value: datetime.date) -> str:
    """Return *value* as ``Month D, YYYY``, e.g. ``May 15, 2024``."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def format_count(value: int) -> str:
    """Return *value* with comma thousands separators."""
    return f"{value:,}"


def describe_next_birthday(days_until: int, is_today: bool, on: datetime.date) -> str:
    if is_today:
        return TODAY_LABEL
    return f"{days_until} days ({format_long_date(on)})"
