from datetime import datetime
from functools import partial

import pytest
import pytz

from study_scheduler.models import BusyInterval, UserPreferences
from study_scheduler.tools.scheduler import schedule_task
from study_scheduler.utils.debug_events import debug_emitter

UTC = pytz.UTC


def at(day: int, hour: int, minute: int = 0) -> datetime:
    """A UTC instant in the week of Monday 2030-01-07."""
    return datetime(2030, 1, day, hour, minute, tzinfo=UTC)


def busy(start: datetime, end: datetime, location=None, **kwargs) -> BusyInterval:
    return BusyInterval(start=start, end=end, location=location, **kwargs)


@pytest.fixture
def now() -> datetime:
    # Monday 08:00, one hour before the default work day starts
    return at(7, 8)


@pytest.fixture
def prefs() -> UserPreferences:
    return UserPreferences(work_start_hour=9, work_end_hour=22, preferred_location="Hesburgh Library")


@pytest.fixture
def schedule(now, prefs):
    """schedule_task with a frozen clock, UTC calendar days and default preferences."""
    return partial(schedule_task, now=now, timezone="UTC", preferences=prefs)


@pytest.fixture(autouse=True)
def clean_debug_history():
    debug_emitter.clear()
    yield
    debug_emitter.clear()
