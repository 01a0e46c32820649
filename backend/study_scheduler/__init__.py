"""Study Session Scheduler - places study sessions into free calendar time."""

from .models import (
    BusyInterval,
    EventType,
    Priority,
    ScheduleResult,
    SessionInterval,
    TaskDescriptor,
    UserPreferences,
)
from .tools import overlaps, schedule_task, reschedule_task, SchedulingValidationError

__version__ = "1.0.0"

__all__ = [
    "BusyInterval",
    "EventType",
    "Priority",
    "ScheduleResult",
    "SessionInterval",
    "TaskDescriptor",
    "UserPreferences",
    "overlaps",
    "schedule_task",
    "reschedule_task",
    "SchedulingValidationError"
]
