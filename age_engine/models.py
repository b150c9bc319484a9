"""Value objects passed between the validator, the calculators and the form.

``CalendarDate`` is the standard :class:`datetime.date`: immutable, Gregorian,
and its constructor already refuses days that do not exist in a month.
"""

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from age_engine.formatting import describe_next_birthday, format_count

CalendarDate = datetime.date


class FormField(str, Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class ErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_VALUE = "invalid_value"


class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str


class ValidationResult(BaseModel):
    """Outcome of validating one form submission.

    Exactly one of ``birth_date`` and ``errors`` is meaningful: a valid result
    carries the birth date and no errors, an invalid one carries at most one
    error per field and no date.
    """

    model_config = ConfigDict(frozen=True)

    birth_date: CalendarDate | None = None
    errors: dict[FormField, FieldError] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.birth_date is not None

    @property
    def messages(self) -> dict[str, str]:
        """Error messages keyed by plain field name, e.g. ``{"day": "..."}``."""
        return {field.value: error.message for field, error in self.errors.items()}


class NextBirthdayInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    days_until: int = Field(ge=0)
    is_today: bool
    date: CalendarDate

    @property
    def formatted(self) -> str:
        return describe_next_birthday(self.days_until, self.is_today, self.date)


class AgeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    years: int = Field(ge=0)
    months: int = Field(ge=0, le=11)
    days: int = Field(ge=0, le=30)
    next_birthday: NextBirthdayInfo
    total_days: int = Field(ge=0)

    @property
    def total_days_formatted(self) -> str:
        return format_count(self.total_days)
