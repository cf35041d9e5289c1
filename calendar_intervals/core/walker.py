# calendar_intervals/core/walker.py
from __future__ import annotations

from datetime import tzinfo
from typing import List, Tuple

import pandas as pd

from calendar_intervals.core.boundaries import BOUNDARY_RULES
from calendar_intervals.core.grouping import Grouping
from calendar_intervals.utils.datetime_utils import DateTimeUtils as dt
from calendar_intervals.utils.logger import logs

TimeIntervalTuple = Tuple[pd.Timestamp, pd.Timestamp]


def walk_intervals(
    begin: pd.Timestamp,
    end: pd.Timestamp,
    grouping: Grouping,
    precision: pd.Timedelta,
    local_tz: tzinfo,
    output_tz: tzinfo,
    extend_begin: bool,
    extend_end: bool,
) -> List[TimeIntervalTuple]:
    """
    Walk calendar boundaries from ``begin`` until ``end`` is passed.

    Contract
    --------
    - begin >= end → []
    - boundaries computed in ``local_tz``, returned in ``output_tz``
    - interval[i+1].begin == interval[i].end + precision
    - extend_end=True keeps the pending interval that encloses ``end``
    """
    if begin >= end:
        return []

    initial_fn, next_fn = BOUNDARY_RULES[grouping]

    intervals: List[TimeIntervalTuple] = []
    cur_begin, cur_end = initial_fn(dt.localize(begin, local_tz), precision, extend_begin)

    while cur_end < end:
        intervals.append((cur_begin, cur_end))
        cur_begin, cur_end = next_fn(cur_begin, precision)

    if extend_end:
        intervals.append((cur_begin, cur_end))

    logs.debug(
        f"[Intervals] {grouping.value} {begin} -> {end} "
        f"precision={precision} n={len(intervals)}"
    )

    return [(dt.localize(b, output_tz), dt.localize(e, output_tz)) for b, e in intervals]


def walk_utc_intervals(
    begin,
    end,
    grouping,
    offset_west_seconds: int,
    precision,
    extend_begin: bool,
    extend_end: bool,
) -> List[TimeIntervalTuple]:
    """
    把调用方输入统一后交给 walk_intervals，输出固定为 UTC。
    """
    return walk_intervals(
        dt.parse(begin),
        dt.parse(end),
        Grouping.parse(grouping),
        dt.to_timedelta(precision),
        dt.fixed_offset(offset_west_seconds),
        dt.UTC,
        extend_begin,
        extend_end,
    )
