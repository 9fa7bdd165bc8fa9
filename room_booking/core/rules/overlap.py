"""
Interval overlap rule used to prevent double-booking.
"""

from datetime import datetime


def overlaps(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """
    Return True if the half-open intervals [start_a, end_a) and
    [start_b, end_b) intersect.

    Back-to-back intervals (end_a == start_b) do not overlap. Both intervals
    are assumed well-formed (start < end).
    """
    return start_a < end_b and end_a > start_b
