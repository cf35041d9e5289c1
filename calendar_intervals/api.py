# calendar_intervals/api.py
"""
Stateless entry points. Output is always UTC.

- ``offset_west_seconds`` shifts the interval boundaries (begin of a day,
  week, month) towards the west, e.g. ``-7200`` gives days starting at
  CEST midnight, ``25200`` days starting at PDT midnight.
- ``end_precision`` is how long before the next boundary an interval ends.
- ``extend_begin``: first interval starts on the boundary **before** ``begin``,
  otherwise on the boundary after it.
- ``extend_end``: last interval ends on the boundary **after** ``end``,
  otherwise before it.
"""
from __future__ import annotations

from typing import List, Union

from calendar_intervals.core.grouping import Grouping
from calendar_intervals.core.walker import TimeIntervalTuple, walk_utc_intervals
from calendar_intervals.generator import DEFAULT_PRECISION
from calendar_intervals.utils.datetime_utils import InstantLike, PrecisionLike


def get_utc_intervals_opts(
    begin: InstantLike,
    end: InstantLike,
    grouping: Union[Grouping, str],
    offset_west_seconds: int,
    end_precision: PrecisionLike,
    extend_begin: bool,
    extend_end: bool,
) -> List[TimeIntervalTuple]:
    return walk_utc_intervals(
        begin,
        end,
        grouping,
        offset_west_seconds,
        end_precision,
        extend_begin,
        extend_end,
    )


def get_extended_utc_intervals_with_defaults(
    begin: InstantLike,
    end: InstantLike,
    grouping: Union[Grouping, str],
    offset_west_seconds: int,
) -> List[TimeIntervalTuple]:
    """
    Extended on both sides, 1ms precision.
    """
    return walk_utc_intervals(
        begin,
        end,
        grouping,
        offset_west_seconds,
        DEFAULT_PRECISION,
        True,
        True,
    )


# aliases
get_extended_utc_intervals = get_extended_utc_intervals_with_defaults
generate_intervals = get_utc_intervals_opts
generate_intervals_with_defaults = get_extended_utc_intervals_with_defaults
