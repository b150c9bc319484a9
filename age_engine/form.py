"""Form controller for the age calculator.

:class:`AgeForm` holds what the user has typed and turns the three form
events (leaving a field, submitting, resetting) into explicit method calls.
It is the only place that reads the clock; the validator and calculators
receive "today" from it.
"""

import datetime
import logging
from typing import Callable

from age_engine.calculator import DEFAULT_LEAP_DAY_RULE, LeapDayRule, calculate_age
from age_engine.models import AgeResult, FormField
from age_engine.normalize import expand_year, pad_day
from age_engine.validation import MIN_YEAR, validate

logger: logging.Logger = logging.getLogger(__name__)


class AgeForm:
    def __init__(
        self,
        clock: Callable[[], datetime.date] = datetime.date.today,
        *,
        min_year: int = MIN_YEAR,
        leap_day_rule: LeapDayRule = DEFAULT_LEAP_DAY_RULE,
    ) -> None:
        self._clock = clock
        self.min_year = min_year
        self.leap_day_rule = leap_day_rule
        self.fields: dict[FormField, str] = {field: "" for field in FormField}
        self.errors: dict[FormField, str] = {}
        self.result: AgeResult | None = None

    def set_field(self, field: FormField, raw: str) -> None:
        """Store typed text for *field* and clear any error shown on it."""
        field = FormField(field)
        self.fields[field] = raw
        self.clear_error(field)

    def leave_field(self, field: FormField) -> None:
        """Normalize *field* the way the form does when focus leaves it."""
        field = FormField(field)
        raw = self.fields[field]
        if not raw:
            return
        if field is FormField.DAY:
            self.fields[field] = pad_day(raw)
        elif field is FormField.YEAR:
            self.fields[field] = expand_year(raw, self._clock())

    def clear_error(self, field: FormField) -> None:
        self.errors.pop(FormField(field), None)

    def clear_all_errors(self) -> None:
        self.errors.clear()

    def submit(self) -> AgeResult | None:
        """Validate the current fields and compute the age.

        Returns:
            The computed :class:`AgeResult`, or ``None`` when validation
            failed; the messages are then available on :attr:`errors`.
        """
        self.clear_all_errors()
        today = self._clock()
        validation = validate(
            self.fields[FormField.DAY],
            self.fields[FormField.MONTH],
            self.fields[FormField.YEAR],
            today,
            min_year=self.min_year,
        )
        if not validation.is_valid:
            self.errors = {field: error.message for field, error in validation.errors.items()}
            self.result = None
            logger.info("Submission rejected", extra={"fields": sorted(f.value for f in self.errors)})
            return None

        self.result = calculate_age(validation.birth_date, today, leap_day_rule=self.leap_day_rule)
        logger.info("Submission accepted")
        return self.result

    def reset(self) -> None:
        self.fields = {field: "" for field in FormField}
        self.clear_all_errors()
        self.result = None
