"""Strands tools exposing the age engine to the chat agent.

Each function is decorated with ``@tool`` so the Strands framework can
expose it to the language model.  Input is checked by the same validator the
form uses, so the model receives the form's own error messages rather than a
Python traceback.
"""

import datetime
import logging

from strands import tool

from age_engine.calculator import calculate_age
from age_engine.config import settings
from age_engine.validation import validate

logger: logging.Logger = logging.getLogger(__name__)

_MAX_DATE_LEN = 10


def _today() -> datetime.date:
    return datetime.date.today()


@tool
def get_current_date() -> str:
    """Get today's date in YYYY-MM-DD format.

    Use this tool to retrieve the current date when you need to know how old
    someone is or how long until their next birthday.

    Returns:
        Today's date as a string in YYYY-MM-DD format.
    """
    today = _today().isoformat()
    logger.debug("get_current_date called, returning %s", today)
    return today


@tool
def calculate_exact_age(birth_date: str) -> dict:
    """Calculate a person's exact age from their birth date as of today.

    Use this tool whenever the user gives a birth date and wants their age,
    the number of days until their next birthday, or how many days they have
    lived.

    Args:
        birth_date: The birth date in YYYY-MM-DD format.

    Returns:
        A dict with ``years``, ``months`` and ``days`` of exact age,
        ``days_until_next_birthday``, ``next_birthday`` (a display string
        such as "42 days (June 1, 2025)" or "Today!"), ``total_days`` and
        ``total_days_formatted``.

    Raises:
        ValueError: If birth_date is not in YYYY-MM-DD format, is not a real
            calendar date, is before the earliest accepted year, or is in
            the future.
    """
    if not isinstance(birth_date, str):
        raise ValueError("birth_date must be a string.")
    if len(birth_date) > _MAX_DATE_LEN:
        raise ValueError(f"birth_date exceeds maximum length of {_MAX_DATE_LEN}.")

    # Log the input length, not the birth date itself.
    logger.debug("calculate_exact_age called with %d-char birth_date", len(birth_date))

    parts = birth_date.split("-")
    if len(parts) != 3 or not all(part.isdigit() for part in parts) or len(parts[0]) != 4:
        raise ValueError("birth_date is not a valid ISO date (YYYY-MM-DD).")

    year, month, day = parts
    today = _today()
    validation = validate(day, month, year, today, min_year=settings.min_birth_year)
    if not validation.is_valid:
        raise ValueError("; ".join(validation.messages.values()))

    result = calculate_age(validation.birth_date, today, leap_day_rule=settings.leap_day_rule)
    return {
        "years": result.years,
        "months": result.months,
        "days": result.days,
        "days_until_next_birthday": result.next_birthday.days_until,
        "next_birthday": result.next_birthday.formatted,
        "total_days": result.total_days,
        "total_days_formatted": result.total_days_formatted,
    }
