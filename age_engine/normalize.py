"""Input shaping applied when the user leaves a form field.

These run before validation and only ever rewrite well-formed short input;
anything else is returned unchanged for the validator to judge.
"""

import datetime


def pad_day(raw: str) -> str:
    """Zero-pad a single-digit day: ``"7"`` becomes ``"07"``."""
    value = raw.strip()
    if len(value) == 1 and value.isdigit():
        return "0" + value
    return raw


def expand_year(raw: str, today: datetime.date) -> str:
    """Expand a two-digit year to four digits.

    Years up to the current two-digit year land in the current century, the
    rest in the previous one: with today in 2024, ``"24"`` becomes ``"2024"``
    and ``"25"`` becomes ``"1925"``.
    """
    value = raw.strip()
    if len(value) != 2 or not value.isdigit():
        return raw

    two_digit = int(value)
    century = today.year // 100 * 100
    if two_digit <= today.year % 100:
        return str(century + two_digit)
    return str(century - 100 + two_digit)
