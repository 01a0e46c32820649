"""
Overlap Detection

Intervals are half-open [start, end): two intervals that only touch at an
endpoint do not overlap, so back-to-back sessions are allowed.
"""

from datetime import datetime
from typing import Iterable, Protocol


class Interval(Protocol):
    start: datetime
    end: datetime


def overlaps(a: Interval, b: Interval) -> bool:
    return a.start < b.end and b.start < a.end


def has_overlap(start: datetime, end: datetime, intervals: Iterable[Interval]) -> bool:
    """
    Check whether [start, end) intersects any of the given intervals.

    Args:
        start: start of the range to check
        end: end of the range to check
        intervals: busy intervals or already selected sessions

    Returns:
        bool: True if at least one interval overlaps
    """
    return any(start < interval.end and interval.start < end for interval in intervals)
