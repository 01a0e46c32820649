"""Tools for slot search, overlap checks, validation, and timezone handling."""

from .overlap import overlaps, has_overlap
from .scheduler import (
    schedule_task,
    reschedule_task,
    score_slot,
    session_duration_minutes,
    blocking_intervals,
    build_deadline_marker,
)
from .timezone import TimezoneManager
from .validation import SchedulingValidator, SchedulingValidationError

__all__ = [
    "overlaps",
    "has_overlap",
    "schedule_task",
    "reschedule_task",
    "score_slot",
    "session_duration_minutes",
    "blocking_intervals",
    "build_deadline_marker",
    "TimezoneManager",
    "SchedulingValidator",
    "SchedulingValidationError"
]
