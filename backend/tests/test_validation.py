"""
Tests for tools/validation.py

Invalid requests are rejected before any slot arithmetic runs.
"""

import logging
from datetime import timedelta

import pytest

from study_scheduler.models import UserPreferences
from study_scheduler.tools.validation import (
    SchedulingValidationError,
    SchedulingValidator,
    ValidationResult,
)

from .conftest import at, busy


@pytest.fixture
def validator():
    return SchedulingValidator()


def test_valid_request_passes(validator):
    validator.validate_all(
        title="Essay",
        total_minutes=120,
        sessions_count=2,
        max_sessions_per_day=4,
        work_start_hour=9,
        work_end_hour=22,
        intervals=[busy(at(7, 9), at(7, 10))],
    )


@pytest.mark.parametrize("sessions_count", [0, -1])
def test_zero_session_count_rejected_without_division(schedule, now, sessions_count):
    with pytest.raises(SchedulingValidationError) as exc_info:
        schedule("Essay", 120, now + timedelta(days=1), sessions_count, None, [])

    assert exc_info.value.error_type == "invalid_session_count"


@pytest.mark.parametrize("total_minutes", [0, -30])
def test_non_positive_duration_rejected(schedule, now, total_minutes):
    with pytest.raises(SchedulingValidationError) as exc_info:
        schedule("Essay", total_minutes, now + timedelta(days=1), 1, None, [])

    assert exc_info.value.error_type == "invalid_duration"


def test_zero_daily_cap_rejected(schedule, now):
    with pytest.raises(SchedulingValidationError) as exc_info:
        schedule("Essay", 60, now + timedelta(days=1), 1, None, [], max_sessions_per_day=0)

    assert exc_info.value.error_type == "invalid_daily_cap"


@pytest.mark.parametrize("start_hour,end_hour", [(22, 9), (9, 9), (-1, 10), (9, 25), (24, 24)])
def test_inconsistent_work_hours_rejected(schedule, now, start_hour, end_hour):
    prefs = UserPreferences(work_start_hour=start_hour, work_end_hour=end_hour)

    with pytest.raises(SchedulingValidationError) as exc_info:
        schedule("Essay", 60, now + timedelta(days=1), 1, None, [], preferences=prefs)

    assert exc_info.value.error_type == "invalid_work_hours"


def test_full_day_work_hours_accepted(validator):
    assert validator.validate_work_hours(0, 24).is_valid


def test_reversed_busy_interval_rejected(schedule, now):
    backwards = busy(at(7, 12), at(7, 11), title="Broken import")

    with pytest.raises(SchedulingValidationError) as exc_info:
        schedule("Essay", 60, now + timedelta(days=1), 1, None, [backwards])

    assert exc_info.value.error_type == "invalid_interval"
    assert "Broken import" in str(exc_info.value)


def test_blank_title_rejected(schedule, now):
    with pytest.raises(SchedulingValidationError) as exc_info:
        schedule("   ", 60, now + timedelta(days=1), 1, None, [])

    assert exc_info.value.error_type == "empty_title"


def test_validation_error_is_a_value_error():
    assert issubclass(SchedulingValidationError, ValueError)


def test_validation_result_raise_for_error():
    ValidationResult(is_valid=True).raise_for_error()

    with pytest.raises(SchedulingValidationError, match="nope"):
        ValidationResult(is_valid=False, error_type="x", message="nope").raise_for_error()


def test_long_session_is_logged(validator, caplog):
    caplog.set_level(logging.WARNING, logger="study_scheduler")
    validator.check_session_length(SchedulingValidator.LONG_SESSION_THRESHOLD, 9, 22)

    assert "Long session: 240 minutes" in caplog.text


def test_session_longer_than_work_window_is_logged_once(validator, caplog):
    caplog.set_level(logging.WARNING, logger="study_scheduler")
    validator.check_session_length(360, 9, 14)

    assert "longer than the 300 min work window" in caplog.text
    assert "Long session" not in caplog.text
