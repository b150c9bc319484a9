"""age_engine: exact age, next birthday and days lived from a birth date.

Public API
----------
validate
    Check raw day/month/year input against today's date.
calculate_age
    Exact age in years, months and days, with next birthday and days lived.
calculate_next_birthday, calculate_total_days
    The two parts of ``calculate_age`` on their own.
AgeForm
    Form controller that wires normalization, validation and calculation.

Example
-------
>>> import datetime
>>> from age_engine import calculate_age, validate
>>> today = datetime.date(2024, 5, 15)
>>> checked = validate(15, 5, 2000, today)
>>> calculate_age(checked.birth_date, today).years
24
"""

from age_engine.calculator import calculate_age, calculate_next_birthday, calculate_total_days
from age_engine.form import AgeForm
from age_engine.models import AgeResult, CalendarDate, NextBirthdayInfo, ValidationResult
from age_engine.validation import validate

__all__: list[str] = [
    "AgeForm",
    "AgeResult",
    "CalendarDate",
    "NextBirthdayInfo",
    "ValidationResult",
    "calculate_age",
    "calculate_next_birthday",
    "calculate_total_days",
    "validate",
]
