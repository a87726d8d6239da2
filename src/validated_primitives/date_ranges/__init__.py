"""
Date Ranges - Bounded Date and Time Intervals.

Ranges are validated value objects themselves (DateRange.try_create,
TimeRange.try_create) and are shared by reference with the selections that
depend on them.
"""

from validated_primitives.date_ranges.date_range import DateRange
from validated_primitives.date_ranges.time_range import TimeRange

__all__ = ["DateRange", "TimeRange"]
