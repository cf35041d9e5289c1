"""
Randomized invariants over get_utc_intervals_opts.

Each case draws begin/end/grouping/offset/precision/flags from a seeded RNG
and checks contiguity, alignment in the local reference, and enclosure.
"""
import random

import pandas as pd
import pytest

from calendar_intervals import Grouping, get_utc_intervals_opts
from calendar_intervals.utils.datetime_utils import DateTimeUtils as dt

PRECISIONS = [pd.Timedelta(milliseconds=1), pd.Timedelta(microseconds=1), pd.Timedelta(nanoseconds=1)]


def random_time(rng: random.Random, start_year: int) -> pd.Timestamp:
    return pd.Timestamp(
        year=start_year + rng.randrange(0, 100),
        month=rng.randint(1, 12),
        day=rng.randint(1, 28),
        hour=rng.randrange(0, 24),
        minute=rng.randrange(0, 60),
        second=rng.randrange(0, 60),
        tz="UTC",
    )


def _case(seed: int):
    rng = random.Random(seed)
    begin = random_time(rng, 1970)
    end = begin + pd.Timedelta(seconds=rng.randrange(0, 400 * 86_400))
    return dict(
        begin=begin,
        end=end,
        grouping=rng.choice(list(Grouping)),
        offset_west_seconds=rng.randrange(-14 * 3600, 14 * 3600, 900),
        end_precision=rng.choice(PRECISIONS),
        extend_begin=rng.random() < 0.5,
        extend_end=rng.random() < 0.5,
    )


@pytest.mark.parametrize("seed", range(150))
def test_random_invariants(seed):
    case = _case(seed)
    intervals = get_utc_intervals_opts(**case)

    begin, end = case["begin"], case["end"]
    precision = case["end_precision"]
    local_tz = dt.fixed_offset(case["offset_west_seconds"])

    if not intervals:
        return

    # 严格递增 + 连续（差一个 precision）
    for b, e in intervals:
        assert b < e
    for (_, e0), (b1, _) in zip(intervals, intervals[1:]):
        assert b1 == e0 + precision

    # local 对齐
    for b, e in intervals:
        lb = b.tz_convert(local_tz)
        nxt = (e + precision).tz_convert(local_tz)
        assert lb == lb.normalize()
        assert nxt == nxt.normalize()
        if case["grouping"] is Grouping.PER_WEEK:
            assert lb.weekday() == 0
            assert nxt.weekday() == 0
        if case["grouping"] is Grouping.PER_MONTH:
            assert lb.day == 1
            assert nxt.day == 1

    # enclosure
    if case["extend_begin"]:
        assert intervals[0][0] <= begin
    else:
        assert intervals[0][0] >= begin
    if case["extend_end"]:
        assert intervals[-1][1] >= end
    else:
        assert intervals[-1][1] < end


@pytest.mark.parametrize("seed", range(50))
def test_random_inverted_span_is_empty(seed):
    case = _case(seed)
    case["begin"], case["end"] = case["end"], case["begin"]

    assert get_utc_intervals_opts(**case) == []


@pytest.mark.parametrize("seed", range(50))
def test_random_extended_span_is_never_empty(seed):
    case = _case(seed)
    case.update(extend_begin=True, extend_end=True)
    case["end"] = case["begin"] + case["end_precision"]

    intervals = get_utc_intervals_opts(**case)

    assert len(intervals) == 1
    b, e = intervals[0]
    assert b <= case["begin"] and case["end"] <= e
