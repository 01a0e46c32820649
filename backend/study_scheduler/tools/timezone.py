import pytz
from typing import Optional
from datetime import datetime, date, time, timedelta

from ..utils.config import settings
from ..utils.logger import logger


class TimezoneManager:
    TIMEZONE_ABBREV = {
        'PST': 'America/Los_Angeles',
        'PDT': 'America/Los_Angeles',
        'EST': 'America/New_York',
        'EDT': 'America/New_York',
        'CST': 'America/Chicago',
        'CDT': 'America/Chicago',
        'MST': 'America/Denver',
        'MDT': 'America/Denver',
        'GMT': 'GMT',
        'UTC': 'UTC',
        'IST': 'Asia/Kolkata',
    }
    
    @staticmethod
    def get_zone(timezone: Optional[str] = None):
        name = timezone or settings.default_timezone
        name = TimezoneManager.TIMEZONE_ABBREV.get(name.upper(), name)
        try:
            return pytz.timezone(name)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone '{name}', falling back to {settings.default_timezone}")
            return pytz.timezone(settings.default_timezone)
    
    @staticmethod
    def localize(dt: datetime, tz) -> datetime:
        """Naive datetimes are read as wall-clock time in tz; aware ones are converted."""
        if dt.tzinfo is None:
            return tz.normalize(tz.localize(dt))
        return dt.astimezone(tz)
    
    @staticmethod
    def now(tz) -> datetime:
        return datetime.now(tz)
    
    @staticmethod
    def add_minutes(dt: datetime, minutes: float, tz) -> datetime:
        return tz.normalize(dt + timedelta(minutes=minutes))
    
    @staticmethod
    def at_hour(day: date, hour: int, tz) -> datetime:
        naive = datetime.combine(day, time(hour=hour))
        try:
            return tz.localize(naive, is_dst=None)
        except pytz.AmbiguousTimeError:
            # Clocks fall back: the hour happens twice, start at its first occurrence
            return tz.localize(naive, is_dst=True)
        except pytz.NonExistentTimeError:
            # Clocks spring forward: the hour is skipped, land just after the gap
            return tz.normalize(tz.localize(naive, is_dst=False))
    
    @staticmethod
    def day_key(dt: datetime, tz) -> date:
        return dt.astimezone(tz).date()
