from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .models import BusyInterval, SessionInterval, TaskDescriptor, UserPreferences, ScheduleResult
from .utils.time_utils import format_session_window


class ScheduleRequest(BaseModel):
    title: str
    total_duration_minutes: int = 60
    deadline: Optional[datetime] = None
    sessions_count: int = 1
    location: Optional[str] = None
    existing_events: List[BusyInterval] = Field(default_factory=list)
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    max_sessions_per_day: Optional[int] = None
    min_start_date: Optional[datetime] = None
    timezone: Optional[str] = None


class RescheduleRequest(BaseModel):
    task: TaskDescriptor
    existing_events: List[BusyInterval] = Field(default_factory=list)
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    deadline: Optional[datetime] = None
    min_start_date: Optional[datetime] = None
    location: Optional[str] = None
    timezone: Optional[str] = None


class ScheduleResponse(BaseModel):
    task: TaskDescriptor
    events: List[SessionInterval]
    deadline_marker: Optional[BusyInterval] = None
    requested: int
    scheduled: int
    partial: bool
    summary: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ScheduleResult) -> "ScheduleResponse":
        return cls(
            task=result.task,
            events=result.events,
            deadline_marker=result.deadline_marker,
            requested=result.task.sessions,
            scheduled=len(result.events),
            partial=result.is_partial,
            summary=[f"{e.title}: {format_session_window(e.start, e.end)}" for e in result.events],
        )
