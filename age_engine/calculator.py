"""Calendar arithmetic behind the age form.

All functions here are pure: the caller supplies both the birth date and
"today", so results never depend on the host clock.
"""

import calendar
import datetime
import logging
from typing import Literal

from age_engine.models import AgeResult, NextBirthdayInfo

logger: logging.Logger = logging.getLogger(__name__)

LeapDayRule = Literal["feb28", "mar1"]

DEFAULT_LEAP_DAY_RULE: LeapDayRule = "feb28"


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    return calendar.monthrange(year, month)[1]


def days_in_previous_month(today: datetime.date) -> int:
    """Length of the month immediately before *today*'s month."""
    if today.month == 1:
        return days_in_month(12, today.year - 1)
    return days_in_month(today.month - 1, today.year)


def birthday_in_year(
    birth: datetime.date,
    year: int,
    leap_day_rule: LeapDayRule = DEFAULT_LEAP_DAY_RULE,
) -> datetime.date:
    """Return the date on which *birth*'s birthday falls in *year*.

    A Feb 29 birthday in a non-leap year is observed on Feb 28 or Mar 1
    according to *leap_day_rule*.
    """
    if birth.month == 2 and birth.day == 29 and not is_leap_year(year):
        if leap_day_rule == "feb28":
            return datetime.date(year, 2, 28)
        if leap_day_rule == "mar1":
            return datetime.date(year, 3, 1)
        raise ValueError(f"Unsupported leap day rule: {leap_day_rule!r}")
    return datetime.date(year, birth.month, birth.day)


def calculate_next_birthday(
    birth: datetime.date,
    today: datetime.date,
    *,
    leap_day_rule: LeapDayRule = DEFAULT_LEAP_DAY_RULE,
) -> NextBirthdayInfo:
    """Find the next occurrence of *birth*'s birthday on or after *today*."""
    candidate = birthday_in_year(birth, today.year, leap_day_rule)
    if candidate < today:
        candidate = birthday_in_year(birth, today.year + 1, leap_day_rule)

    days_until = (candidate - today).days
    return NextBirthdayInfo(days_until=days_until, is_today=days_until == 0, date=candidate)


def calculate_total_days(birth: datetime.date, today: datetime.date) -> int:
    """Whole days elapsed from *birth* to *today*."""
    return (today - birth).days


def calculate_age(
    birth: datetime.date,
    today: datetime.date,
    *,
    leap_day_rule: LeapDayRule = DEFAULT_LEAP_DAY_RULE,
) -> AgeResult:
    """Compute the exact age in years, months and days on *today*.

    The components are subtracted field by field. A negative day count
    borrows the length of the month before *today*'s month; when the birth
    day does not exist in that month (born on the 31st, today in March) the
    monthly anniversary falls on that month's last day and the day count is
    simply ``today.day``. A negative month count then borrows a year.

    Raises:
        ValueError: If *birth* is after *today*.
    """
    if birth > today:
        raise ValueError("birth must not be after today.")

    years = today.year - birth.year
    months = today.month - birth.month
    days = today.day - birth.day

    if days < 0:
        months -= 1
        previous = days_in_previous_month(today)
        days = today.day + max(previous - birth.day, 0)

    if months < 0:
        years -= 1
        months += 12

    result = AgeResult(
        years=years,
        months=months,
        days=days,
        next_birthday=calculate_next_birthday(birth, today, leap_day_rule=leap_day_rule),
        total_days=calculate_total_days(birth, today),
    )
    logger.debug("Age computed: %d years, %d months, %d days", years, months, days)
    return result
