"""Unit tests for age_engine.form.AgeForm."""

import datetime
from unittest.mock import MagicMock

import pytest

from age_engine.form import AgeForm
from age_engine.models import FormField


def _fill(form: AgeForm, day: str, month: str, year: str) -> None:
    for field, raw in ((FormField.DAY, day), (FormField.MONTH, month), (FormField.YEAR, year)):
        form.set_field(field, raw)
        form.leave_field(field)


@pytest.mark.unit
class TestAgeFormSubmit:
    def test_valid_submission_returns_result(self, fixed_clock):
        form = AgeForm(fixed_clock)
        _fill(form, "15", "5", "2000")
        result = form.submit()
        assert result is not None
        assert (result.years, result.months, result.days) == (24, 1, 0)
        assert form.result is result
        assert form.errors == {}

    def test_invalid_submission_stores_errors(self, fixed_clock):
        form = AgeForm(fixed_clock)
        _fill(form, "31", "2", "2023")
        assert form.submit() is None
        assert form.errors == {FormField.DAY: "Invalid date for this month"}
        assert form.result is None

    def test_empty_form_reports_every_field(self, fixed_clock):
        form = AgeForm(fixed_clock)
        assert form.submit() is None
        assert set(form.errors) == set(FormField)

    def test_resubmission_clears_old_errors(self, fixed_clock):
        form = AgeForm(fixed_clock)
        form.submit()
        _fill(form, "15", "5", "2000")
        form.submit()
        assert form.errors == {}

    def test_failed_resubmission_clears_old_result(self, fixed_clock):
        form = AgeForm(fixed_clock)
        _fill(form, "15", "5", "2000")
        form.submit()
        form.set_field(FormField.MONTH, "13")
        form.submit()
        assert form.result is None

    def test_clock_is_read_on_submit(self, today):
        clock = MagicMock(return_value=today)
        form = AgeForm(clock)
        form.set_field(FormField.DAY, "1")
        form.set_field(FormField.MONTH, "1")
        form.set_field(FormField.YEAR, "2000")
        form.submit()
        clock.assert_called_once_with()

    def test_min_year_is_applied(self, fixed_clock):
        form = AgeForm(fixed_clock, min_year=1950)
        _fill(form, "1", "1", "1940")
        form.submit()
        assert form.errors == {FormField.YEAR: "Year must be after 1950"}

    def test_leap_day_rule_is_applied(self):
        form = AgeForm(lambda: datetime.date(2023, 1, 1), leap_day_rule="mar1")
        _fill(form, "29", "2", "2000")
        result = form.submit()
        assert result.next_birthday.date == datetime.date(2023, 3, 1)


@pytest.mark.unit
class TestAgeFormFields:
    def test_leaving_day_pads_single_digit(self, fixed_clock):
        form = AgeForm(fixed_clock)
        form.set_field(FormField.DAY, "5")
        form.leave_field(FormField.DAY)
        assert form.fields[FormField.DAY] == "05"

    def test_leaving_year_expands_two_digits(self, fixed_clock):
        form = AgeForm(fixed_clock)
        form.set_field(FormField.YEAR, "90")
        form.leave_field(FormField.YEAR)
        assert form.fields[FormField.YEAR] == "1990"

    def test_leaving_month_changes_nothing(self, fixed_clock):
        form = AgeForm(fixed_clock)
        form.set_field(FormField.MONTH, "5")
        form.leave_field(FormField.MONTH)
        assert form.fields[FormField.MONTH] == "5"

    def test_leaving_empty_field_is_a_no_op(self, fixed_clock):
        form = AgeForm(fixed_clock)
        form.leave_field(FormField.YEAR)
        assert form.fields[FormField.YEAR] == ""

    def test_field_names_are_accepted_as_strings(self, fixed_clock):
        form = AgeForm(fixed_clock)
        form.set_field("day", "7")
        form.leave_field("day")
        assert form.fields[FormField.DAY] == "07"

    def test_typing_clears_only_that_fields_error(self, fixed_clock):
        form = AgeForm(fixed_clock)
        form.submit()
        form.set_field(FormField.DAY, "1")
        assert FormField.DAY not in form.errors
        assert FormField.MONTH in form.errors
        assert FormField.YEAR in form.errors

    def test_reset_clears_everything(self, fixed_clock):
        form = AgeForm(fixed_clock)
        _fill(form, "15", "5", "2000")
        form.submit()
        form.reset()
        assert form.fields == {FormField.DAY: "", FormField.MONTH: "", FormField.YEAR: ""}
        assert form.errors == {}
        assert form.result is None
