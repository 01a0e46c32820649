"""
Time utility functions for presenting scheduled study sessions.

This module provides a consistent interface for time display throughout the application:
- Internal storage: timezone-aware datetimes
- User display: 12-hour format (h:MM AM/PM) and short dates (Mon, Oct 19)
- Logs and debug events: compact session windows
"""

from datetime import datetime


class TimeFormat:
    """
    Utility class for turning session datetimes into user-facing strings.
    """
    
    @staticmethod
    def to_12hr_display(dt: datetime) -> str:
        """
        Convert a datetime to a user-friendly 12-hour time.
        
        Args:
            dt: Datetime to format
        
        Returns:
            12-hour format for display (h:MM AM/PM or h AM/PM)
        
        Examples:
            15:00 → "3 PM"
            15:30 → "3:30 PM"
            09:15 → "9:15 AM"
        """
        am_pm = "AM" if dt.hour < 12 else "PM"
        hour_12 = dt.hour % 12
        if hour_12 == 0:
            hour_12 = 12
        
        # Hide :00 for cleaner look
        if dt.minute == 0:
            return f"{hour_12} {am_pm}"
        return f"{hour_12}:{dt.minute:02d} {am_pm}"
    
    @staticmethod
    def to_short_date(dt: datetime) -> str:
        """Short weekday/month/day label, e.g. "Mon, Oct 19"."""
        return f"{dt.strftime('%a, %b')} {dt.day}"
    
    @staticmethod
    def format_window(start: datetime, end: datetime) -> str:
        """
        Format a session window for display.
        
        Examples:
            (Mon 14:00, Mon 15:00) → "Mon, Oct 19 2 PM - 3 PM"
            (Mon 23:00, Tue 00:30) → "Mon, Oct 19 11 PM - Tue, Oct 20 12:30 AM"
        """
        start_part = f"{TimeFormat.to_short_date(start)} {TimeFormat.to_12hr_display(start)}"
        if start.date() == end.date():
            return f"{start_part} - {TimeFormat.to_12hr_display(end)}"
        return f"{start_part} - {TimeFormat.to_short_date(end)} {TimeFormat.to_12hr_display(end)}"


# Convenience functions for common use cases

def format_session_window(start: datetime, end: datetime) -> str:
    """Shorthand for TimeFormat.format_window()"""
    return TimeFormat.format_window(start, end)
