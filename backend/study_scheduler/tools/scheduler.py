"""
Study Session Scheduler

Places the sessions of a task into free calendar time before its deadline:
1. Enumerate candidate start times on a fixed grid inside work hours
2. Score each candidate (earlier is better, next to a same-location commitment is much better)
3. Greedily accept the best candidates under the session count and daily cap
"""

from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, NamedTuple
import math

from dateutil.relativedelta import relativedelta

from ..models import (
    BusyInterval,
    EventType,
    Priority,
    ScheduleResult,
    SessionInterval,
    TaskDescriptor,
    UserPreferences,
    new_id,
)
from ..utils.config import Settings, settings
from ..utils.debug_events import emit_candidate_search, emit_schedule_request, emit_selection
from ..utils.logger import logger
from ..utils.time_utils import format_session_window
from .overlap import has_overlap
from .timezone import TimezoneManager
from .validation import SchedulingValidator


class CandidateSlot(NamedTuple):
    start: datetime
    end: datetime
    score: float


class _Busy(NamedTuple):
    start: datetime
    end: datetime
    location: Optional[str]


def session_duration_minutes(total_minutes: int, sessions_count: int, min_session_minutes: Optional[int] = None) -> int:
    if min_session_minutes is None:
        min_session_minutes = settings.min_session_minutes
    return max(min_session_minutes, math.ceil(total_minutes / sessions_count))


def blocking_intervals(events: Sequence[BusyInterval]) -> List[BusyInterval]:
    """Drop deadline markers; they are display-only and must not block sessions."""
    return [event for event in events if event.type != EventType.DEADLINE]


def build_deadline_marker(task: TaskDescriptor, config: Optional[Settings] = None) -> BusyInterval:
    config = config or settings
    return BusyInterval(
        title=f"DUE: {task.title}",
        start=task.deadline,
        end=task.deadline + timedelta(minutes=config.deadline_marker_minutes),
        type=EventType.DEADLINE,
        color="#ef4444",
        task_id=task.id,
    )


def _round_up(dt: datetime, step_minutes: int, tz) -> datetime:
    # An exactly aligned floor is searched from itself, not from the next step
    floored = dt.replace(second=0, microsecond=0)
    remainder = floored.minute % step_minutes
    if remainder == 0 and floored == dt:
        return dt
    return TimezoneManager.add_minutes(floored, step_minutes - remainder, tz)


def _is_near_same_location(
    start: datetime,
    end: datetime,
    location: Optional[str],
    busy: Sequence[_Busy],
    gap_tolerance_minutes: int
) -> bool:
    if not location:
        return False

    for interval in busy:
        if interval.location != location:
            continue

        # Existing commitment ends shortly before this slot starts
        gap_after = (start - interval.end).total_seconds() / 60
        if 0 <= gap_after <= gap_tolerance_minutes:
            return True

        # Existing commitment starts shortly after this slot ends
        gap_before = (interval.start - end).total_seconds() / 60
        if 0 <= gap_before <= gap_tolerance_minutes:
            return True

    return False


def score_slot(
    start: datetime,
    end: datetime,
    location: Optional[str],
    busy: Sequence,
    now: datetime,
    config: Optional[Settings] = None
) -> float:
    """
    Score a candidate slot. Higher is better.

    Args:
        start: Slot start
        end: Slot end
        location: Location of the task sessions
        busy: Existing busy intervals (anything with start, end and location)
        now: Reference time for the earliness preference
        config: Scoring weights, defaults to the global settings

    Returns:
        earliness_base_score minus hours from now, plus location_bonus_score
        when the slot sits next to a same-location commitment
    """
    config = config or settings

    hours_from_now = (start - now).total_seconds() / 3600
    score = config.earliness_base_score - hours_from_now

    if _is_near_same_location(start, end, location, busy, config.location_gap_minutes):
        score += config.location_bonus_score

    return score


def _find_candidate_slots(
    floor: datetime,
    horizon: datetime,
    deadline: datetime,
    duration_minutes: int,
    busy: Sequence[_Busy],
    preferences: UserPreferences,
    location: Optional[str],
    now: datetime,
    tz,
    config: Settings
) -> List[CandidateSlot]:
    candidates = []
    conflicts = 0

    iterator = _round_up(floor, config.slot_step_minutes, tz)

    while iterator < horizon:
        hour = iterator.hour
        if hour < preferences.work_start_hour or hour >= preferences.work_end_hour:
            if hour >= preferences.work_end_hour:
                iterator = TimezoneManager.at_hour(iterator.date() + timedelta(days=1), preferences.work_start_hour, tz)
            else:
                iterator = TimezoneManager.at_hour(iterator.date(), preferences.work_start_hour, tz)
            continue

        start = iterator
        end = TimezoneManager.add_minutes(start, duration_minutes, tz)

        if end > deadline:
            break

        if has_overlap(start, end, busy):
            conflicts += 1
        else:
            score = score_slot(start, end, location, busy, now, config)
            candidates.append(CandidateSlot(start, end, score))

        iterator = TimezoneManager.add_minutes(iterator, config.slot_step_minutes, tz)

    logger.info(f"Found {len(candidates)} candidate slots ({conflicts} rejected for conflicts)")
    emit_candidate_search({
        "search_floor": floor.isoformat(),
        "horizon": horizon.isoformat(),
        "duration_minutes": duration_minutes,
        "candidates": len(candidates),
        "conflicts": conflicts,
    })

    return candidates


def _select_slots(
    candidates: Sequence[CandidateSlot],
    sessions_count: int,
    max_sessions_per_day: int,
    tz
) -> List[CandidateSlot]:
    # sorted() is stable, so equal scores keep chronological order
    ranked = sorted(candidates, key=lambda slot: slot.score, reverse=True)

    selected: List[CandidateSlot] = []
    daily_counts: Counter = Counter()

    for slot in ranked:
        if len(selected) >= sessions_count:
            break

        day = TimezoneManager.day_key(slot.start, tz)
        if daily_counts[day] >= max_sessions_per_day:
            logger.debug(f"Skipped {format_session_window(slot.start, slot.end)}: daily cap of {max_sessions_per_day} reached")
            continue

        if has_overlap(slot.start, slot.end, selected):
            logger.debug(f"Skipped {format_session_window(slot.start, slot.end)}: overlaps a selected session")
            continue

        selected.append(slot)
        daily_counts[day] += 1
        logger.debug(f"Selected {format_session_window(slot.start, slot.end)} (score {slot.score:.2f})")

    selected.sort(key=lambda slot: slot.start)
    return selected


def schedule_task(
    title: str,
    total_minutes: int,
    deadline: datetime,
    sessions_count: int,
    location: Optional[str],
    busy_intervals: Sequence[BusyInterval],
    preferences: Optional[UserPreferences] = None,
    max_sessions_per_day: Optional[int] = None,
    min_start: Optional[datetime] = None,
    *,
    now: Optional[datetime] = None,
    timezone: Optional[str] = None,
    priority: Priority = Priority.MEDIUM,
    config: Optional[Settings] = None
) -> ScheduleResult:
    """
    Split a task into sessions and place them into free time before the deadline.

    Args:
        title: Task title, used to label sessions "title (k/N)"
        total_minutes: Total work time for the task
        deadline: Every session ends at or before this instant
        sessions_count: Number of sessions requested
        location: Where the sessions happen; empty falls back to the preferred location
        busy_intervals: Snapshot of occupied time, never modified
        preferences: Work hours and preferred location
        max_sessions_per_day: Daily cap on placed sessions
        min_start: Earliest allowed start; earlier values are raised to now
        now: Reference time (injectable for reproducible scores)
        timezone: Zone for work hours and calendar days, naive datetimes are read in it
        priority: Priority recorded on the task descriptor
        config: Settings overriding step size, horizon and scoring weights

    Returns:
        ScheduleResult with the task descriptor and chronologically ordered sessions.
        Fewer sessions than requested means the search space ran out.

    Raises:
        SchedulingValidationError: for non-positive durations, counts or caps,
            or inconsistent work hours
    """
    config = config or settings
    preferences = preferences or UserPreferences()
    if max_sessions_per_day is None:
        max_sessions_per_day = config.default_max_sessions_per_day

    SchedulingValidator().validate_all(
        title=title,
        total_minutes=total_minutes,
        sessions_count=sessions_count,
        max_sessions_per_day=max_sessions_per_day,
        work_start_hour=preferences.work_start_hour,
        work_end_hour=preferences.work_end_hour,
        intervals=busy_intervals,
    )

    tz = TimezoneManager.get_zone(timezone)
    now = TimezoneManager.localize(now, tz) if now else TimezoneManager.now(tz)
    deadline = TimezoneManager.localize(deadline, tz)
    location = location or preferences.preferred_location

    busy = [
        _Busy(
            TimezoneManager.localize(interval.start, tz),
            TimezoneManager.localize(interval.end, tz),
            interval.location,
        )
        for interval in busy_intervals
    ]

    duration = session_duration_minutes(total_minutes, sessions_count, config.min_session_minutes)
    SchedulingValidator().check_session_length(duration, preferences.work_start_hour, preferences.work_end_hour)

    # Never propose a slot in the past
    floor = now
    if min_start is not None:
        floor = max(now, TimezoneManager.localize(min_start, tz))

    horizon = min(deadline, tz.normalize(floor + relativedelta(months=config.search_horizon_months)))

    logger.info(
        f"Scheduling '{title}': {sessions_count} x {duration} min at {location} "
        f"between {floor.isoformat()} and {deadline.isoformat()}"
    )
    emit_schedule_request({
        "title": title,
        "total_minutes": total_minutes,
        "sessions_count": sessions_count,
        "session_minutes": duration,
        "max_sessions_per_day": max_sessions_per_day,
        "location": location,
        "work_hours": [preferences.work_start_hour, preferences.work_end_hour],
        "deadline": deadline.isoformat(),
        "busy_intervals": len(busy),
        "timezone": str(tz),
    })

    candidates = _find_candidate_slots(
        floor=floor,
        horizon=horizon,
        deadline=deadline,
        duration_minutes=duration,
        busy=busy,
        preferences=preferences,
        location=location,
        now=now,
        tz=tz,
        config=config,
    )
    selected = _select_slots(candidates, sessions_count, max_sessions_per_day, tz)

    task_id = new_id()
    sessions = [
        SessionInterval(
            title=f"{title} ({position}/{sessions_count})",
            start=slot.start,
            end=slot.end,
            task_id=task_id,
            location=location,
            position=position,
            total=sessions_count,
        )
        for position, slot in enumerate(selected, start=1)
    ]

    task = TaskDescriptor(
        id=task_id,
        title=title,
        total_duration_minutes=total_minutes,
        deadline=deadline,
        sessions=sessions_count,
        max_sessions_per_day=max_sessions_per_day,
        priority=priority,
        generated_events=[session.id for session in sessions],
    )

    if len(sessions) < sessions_count:
        logger.warning(f"Only placed {len(sessions)} of {sessions_count} sessions for '{title}' before the deadline")
    else:
        logger.info(f"Placed all {sessions_count} sessions for '{title}'")

    emit_selection(task_id, [format_session_window(s.start, s.end) for s in sessions], sessions_count)

    return ScheduleResult(task=task, events=sessions, deadline_marker=build_deadline_marker(task, config))


def reschedule_task(
    task: TaskDescriptor,
    busy_intervals: Sequence[BusyInterval],
    preferences: Optional[UserPreferences] = None,
    deadline: Optional[datetime] = None,
    min_start: Optional[datetime] = None,
    location: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
    timezone: Optional[str] = None,
    config: Optional[Settings] = None
) -> ScheduleResult:
    """
    Schedule a task again from scratch, ignoring the sessions it already owns.

    The result carries a new task id; the caller replaces the old task and its events.
    """
    remaining = [interval for interval in busy_intervals if interval.task_id != task.id]
    logger.info(f"Rescheduling '{task.title}' ({len(busy_intervals) - len(remaining)} old entries released)")

    return schedule_task(
        title=task.title,
        total_minutes=task.total_duration_minutes,
        deadline=deadline or task.deadline,
        sessions_count=task.sessions,
        location=location,
        busy_intervals=remaining,
        preferences=preferences,
        max_sessions_per_day=task.max_sessions_per_day,
        min_start=min_start,
        now=now,
        timezone=timezone,
        priority=task.priority,
        config=config,
    )
