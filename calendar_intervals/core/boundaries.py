# calendar_intervals/core/boundaries.py
"""
Interval boundary rules.

Every rule works on instants already localized into the fixed-offset
reference, so "midnight" and "first of month" mean local calendar fields.

Two operations per grouping:

    initial(begin, precision, extend_begin) -> (b0, e0)
    next(cur_begin, precision)              -> (b1, e1)

with e = next_boundary - precision.
"""
from __future__ import annotations

from typing import Callable, Dict, Tuple

import pandas as pd

from calendar_intervals.core.grouping import Grouping
from calendar_intervals.utils.datetime_utils import DateTimeUtils as dt

BoundaryPair = Tuple[pd.Timestamp, pd.Timestamp]
InitialFn = Callable[[pd.Timestamp, pd.Timedelta, bool], BoundaryPair]
NextFn = Callable[[pd.Timestamp, pd.Timedelta], BoundaryPair]

ONE_DAY = pd.Timedelta(hours=24)
ONE_WEEK = pd.Timedelta(days=7)


# =============================================================================
# PER DAY
# =============================================================================
def initial_day(begin: pd.Timestamp, precision: pd.Timedelta, extend_begin: bool) -> BoundaryPair:
    init_begin = dt.midnight(begin)
    if not extend_begin:
        init_begin = init_begin + ONE_DAY
    return init_begin, init_begin + ONE_DAY - precision


def next_day(cur_begin: pd.Timestamp, precision: pd.Timedelta) -> BoundaryPair:
    cur_begin = cur_begin + ONE_DAY
    return cur_begin, cur_begin + ONE_DAY - precision


# =============================================================================
# PER WEEK (Monday = 0)
# =============================================================================
def initial_week(begin: pd.Timestamp, precision: pd.Timedelta, extend_begin: bool) -> BoundaryPair:
    days_since_monday = begin.weekday()
    midnight = dt.midnight(begin)
    if extend_begin:
        init_begin = midnight - pd.Timedelta(days=days_since_monday)
    else:
        init_begin = midnight + pd.Timedelta(days=7 - days_since_monday)
    return init_begin, init_begin + ONE_WEEK - precision


def next_week(cur_begin: pd.Timestamp, precision: pd.Timedelta) -> BoundaryPair:
    cur_begin = cur_begin + ONE_WEEK
    return cur_begin, cur_begin + ONE_WEEK - precision


# =============================================================================
# PER MONTH
# =============================================================================
# months are 28-31 days: always step through year/month fields
def initial_month(begin: pd.Timestamp, precision: pd.Timedelta, extend_begin: bool) -> BoundaryPair:
    if extend_begin:
        init_begin = dt.month_start(begin.year, begin.month, begin.tzinfo)
    else:
        init_begin = dt.next_month_start(begin)
    return init_begin, dt.next_month_start(init_begin) - precision


def next_month(cur_begin: pd.Timestamp, precision: pd.Timedelta) -> BoundaryPair:
    cur_begin = dt.next_month_start(cur_begin)
    return cur_begin, dt.next_month_start(cur_begin) - precision


BOUNDARY_RULES: Dict[Grouping, Tuple[InitialFn, NextFn]] = {
    Grouping.PER_DAY: (initial_day, next_day),
    Grouping.PER_WEEK: (initial_week, next_week),
    Grouping.PER_MONTH: (initial_month, next_month),
}
