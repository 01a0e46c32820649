from datetime import datetime
from enum import Enum
from typing import List, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field

from .utils.config import settings


def new_id() -> str:
    return str(uuid.uuid4())


class EventType(str, Enum):
    FIXED = "FIXED"  # Classes, meetings
    TASK_SESSION = "TASK_SESSION"  # Generated study blocks
    DEADLINE = "DEADLINE"  # Assignment due dates


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class BusyInterval(BaseModel):
    """An occupied half-open range [start, end) on the calendar."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
    location: Optional[str] = None
    id: str = Field(default_factory=new_id)
    title: str = ""
    type: EventType = EventType.FIXED
    description: Optional[str] = None
    task_id: Optional[str] = None
    color: Optional[str] = None
    is_completed: bool = False


class SessionInterval(BusyInterval):
    """A study session placed by the scheduler, labelled k of N."""

    type: EventType = EventType.TASK_SESSION
    task_id: str
    position: int
    total: int
    color: Optional[str] = "#00843D"

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)


class TaskDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    title: str
    total_duration_minutes: int
    deadline: datetime
    sessions: int
    max_sessions_per_day: int = 4
    priority: Priority = Priority.MEDIUM
    generated_events: List[str] = Field(default_factory=list)
    is_completed: bool = False


class UserPreferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    work_start_hour: int = Field(default_factory=lambda: settings.default_work_start_hour)
    work_end_hour: int = Field(default_factory=lambda: settings.default_work_end_hour)
    preferred_location: str = Field(default_factory=lambda: settings.default_preferred_location)


class ScheduleResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    task: TaskDescriptor
    events: List[SessionInterval]
    deadline_marker: Optional[BusyInterval] = None

    @property
    def is_partial(self) -> bool:
        return len(self.events) < self.task.sessions
