from typing import Optional, Iterable

from ..utils.logger import logger


class SchedulingValidationError(ValueError):
    def __init__(self, error_type: str, message: str):
        super().__init__(message)
        self.error_type = error_type
        self.message = message


class ValidationResult:
    def __init__(self, is_valid: bool, error_type: Optional[str] = None, message: Optional[str] = None):
        self.is_valid = is_valid
        self.error_type = error_type
        self.message = message
    
    def raise_for_error(self):
        if not self.is_valid:
            raise SchedulingValidationError(self.error_type, self.message)


class SchedulingValidator:
    # Sessions at or above this many minutes are logged as unusually long
    LONG_SESSION_THRESHOLD = 240
    
    def validate_title(self, title: str) -> ValidationResult:
        if not title or not title.strip():
            return ValidationResult(
                is_valid=False,
                error_type="empty_title",
                message="A task needs a title before it can be scheduled."
            )
        return ValidationResult(is_valid=True)
    
    def validate_duration(self, total_minutes: int) -> ValidationResult:
        if total_minutes is None or total_minutes <= 0:
            return ValidationResult(
                is_valid=False,
                error_type="invalid_duration",
                message=f"Total duration must be a positive number of minutes, got {total_minutes}."
            )
        return ValidationResult(is_valid=True)
    
    def validate_session_count(self, sessions_count: int) -> ValidationResult:
        if sessions_count is None or sessions_count < 1:
            return ValidationResult(
                is_valid=False,
                error_type="invalid_session_count",
                message=f"At least one session is required, got {sessions_count}."
            )
        return ValidationResult(is_valid=True)
    
    def validate_daily_cap(self, max_sessions_per_day: int) -> ValidationResult:
        if max_sessions_per_day is None or max_sessions_per_day < 1:
            return ValidationResult(
                is_valid=False,
                error_type="invalid_daily_cap",
                message=f"Max sessions per day must be at least 1, got {max_sessions_per_day}."
            )
        return ValidationResult(is_valid=True)
    
    def validate_work_hours(self, start_hour: int, end_hour: int) -> ValidationResult:
        if not (0 <= start_hour <= 23) or not (0 < end_hour <= 24) or start_hour >= end_hour:
            logger.warning(f"Rejected work hours [{start_hour}, {end_hour})")
            return ValidationResult(
                is_valid=False,
                error_type="invalid_work_hours",
                message=f"Work hours must satisfy 0 <= start < end <= 24, got [{start_hour}, {end_hour})."
            )
        return ValidationResult(is_valid=True)
    
    def validate_intervals(self, intervals: Iterable) -> ValidationResult:
        for interval in intervals:
            if interval.end < interval.start:
                return ValidationResult(
                    is_valid=False,
                    error_type="invalid_interval",
                    message=f"Busy interval '{interval.title or interval.id}' ends before it starts."
                )
        return ValidationResult(is_valid=True)
    
    def check_session_length(self, session_minutes: int, start_hour: int, end_hour: int):
        window_minutes = (end_hour - start_hour) * 60
        if session_minutes > window_minutes:
            logger.warning(f"Session of {session_minutes} min is longer than the {window_minutes} min work window")
        elif session_minutes >= self.LONG_SESSION_THRESHOLD:
            logger.warning(f"Long session: {session_minutes} minutes per session")
    
    def validate_all(
        self,
        title: str,
        total_minutes: int,
        sessions_count: int,
        max_sessions_per_day: int,
        work_start_hour: int,
        work_end_hour: int,
        intervals: Iterable
    ):
        """Run every check in order and raise SchedulingValidationError on the first failure."""
        results = [
            self.validate_title(title),
            self.validate_duration(total_minutes),
            self.validate_session_count(sessions_count),
            self.validate_daily_cap(max_sessions_per_day),
            self.validate_work_hours(work_start_hour, work_end_hour),
            self.validate_intervals(intervals),
        ]
        
        for result in results:
            if not result.is_valid:
                logger.warning(f"Scheduling request rejected: {result.error_type}")
                result.raise_for_error()
