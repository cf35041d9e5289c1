"""
Interval boundary computation and iteration.
"""

from calendar_intervals.core.grouping import Grouping
from calendar_intervals.core.boundaries import BOUNDARY_RULES
from calendar_intervals.core.walker import (
    TimeIntervalTuple,
    walk_intervals,
    walk_utc_intervals,
)

__all__ = [
    "Grouping",
    "BOUNDARY_RULES",
    "TimeIntervalTuple",
    "walk_intervals",
    "walk_utc_intervals",
]
