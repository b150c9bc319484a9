"""Validation of the raw day/month/year triple entered on the form.

Failures are returned as per-field data on a :class:`ValidationResult`; this
module never raises for bad user input.
"""

import datetime
import logging
import re

from age_engine.models import ErrorKind, FieldError, FormField, ValidationResult

logger: logging.Logger = logging.getLogger(__name__)

MIN_YEAR: int = 1900

RawValue = int | str | None

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_REQUIRED_MESSAGES: dict[FormField, str] = {
    FormField.DAY: "Day is required",
    FormField.MONTH: "Month is required",
    FormField.YEAR: "Year is required",
}


def parse_field(value: RawValue) -> int | None:
    """Read a raw form value as an integer.

    Strings are read like a form's integer parse: leading whitespace and an
    optional sign, then as many digits as follow ("12abc" reads as 12).
    Returns ``None`` when no number can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def validate(
    day: RawValue,
    month: RawValue,
    year: RawValue,
    today: datetime.date,
    *,
    min_year: int = MIN_YEAR,
) -> ValidationResult:
    """Check a birth date entered as separate day, month and year values.

    Args:
        day: Day of month as entered.
        month: Month number (1-12) as entered.
        year: Four-digit year as entered.
        today: The current local calendar date.
        min_year: Earliest accepted birth year.

    Returns:
        A valid result carrying the birth date, or an invalid one carrying
        one error per offending field. When several checks hit the same
        field, the later check's message is kept.
    """
    errors: dict[FormField, FieldError] = {}

    def fail(field: FormField, kind: ErrorKind, message: str) -> None:
        errors[field] = FieldError(kind=kind, message=message)

    d = parse_field(day)
    m = parse_field(month)
    y = parse_field(year)

    # Zero counts as missing, like an empty field.
    if not d:
        fail(FormField.DAY, ErrorKind.MISSING_FIELD, _REQUIRED_MESSAGES[FormField.DAY])
    elif d < 1 or d > 31:
        fail(FormField.DAY, ErrorKind.INVALID_VALUE, "Day must be between 1-31")

    if not m:
        fail(FormField.MONTH, ErrorKind.MISSING_FIELD, _REQUIRED_MESSAGES[FormField.MONTH])
    elif m < 1 or m > 12:
        fail(FormField.MONTH, ErrorKind.INVALID_VALUE, "Invalid month")

    if not y:
        fail(FormField.YEAR, ErrorKind.MISSING_FIELD, _REQUIRED_MESSAGES[FormField.YEAR])
    elif y < min_year:
        fail(FormField.YEAR, ErrorKind.INVALID_VALUE, f"Year must be after {min_year}")
    elif y > today.year:
        fail(FormField.YEAR, ErrorKind.INVALID_VALUE, "Year cannot be in the future")

    birth_date: datetime.date | None = None
    if not errors:
        # A day past the end of the month rolls over into the next one
        # (June 31 reads as July 1) for the future-date check below.
        entered = datetime.date(y, m, 1) + datetime.timedelta(days=d - 1)
        if entered.month == m:
            birth_date = entered
        else:
            fail(FormField.DAY, ErrorKind.INVALID_VALUE, "Invalid date for this month")

        if y == today.year and m == today.month and d > today.day:
            fail(FormField.DAY, ErrorKind.INVALID_VALUE, "Date cannot be in the future")
        elif y == today.year and m > today.month:
            fail(FormField.MONTH, ErrorKind.INVALID_VALUE, "Date cannot be in the future")

        if entered > today:
            fail(FormField.DAY, ErrorKind.INVALID_VALUE, "Birth date cannot be in the future")

    if errors:
        logger.debug("Validation failed for fields: %s", ", ".join(f.value for f in errors))
        return ValidationResult(errors=errors)

    return ValidationResult(birth_date=birth_date)
