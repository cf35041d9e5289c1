# calendar_intervals/generator.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Union

import pandas as pd

from calendar_intervals.core.grouping import Grouping
from calendar_intervals.core.walker import TimeIntervalTuple, walk_intervals
from calendar_intervals.utils.datetime_utils import DateTimeUtils as dt, InstantLike, PrecisionLike

DEFAULT_PRECISION = pd.Timedelta(milliseconds=1)


@dataclass(frozen=True)
class IntervalGenerator:
    """
    Immutable interval generator.

    - with_* / without_* 返回新实例，原实例不变
    - get_intervals() 输出永远是 UTC

    >>> gen = IntervalGenerator().with_grouping(Grouping.PER_WEEK).with_offset_west_secs(-7200)
    >>> gen.get_intervals("2022-10-04T08:23:45Z", "2022-10-18T08:23:45Z")  # doctest: +SKIP
    """

    grouping: Grouping = Grouping.PER_DAY
    end_precision: pd.Timedelta = field(default=DEFAULT_PRECISION)
    offset_west_seconds: int = 0
    extend_begin: bool = True
    extend_end: bool = True

    def __post_init__(self):
        # normalize + validate early; frozen → object.__setattr__
        object.__setattr__(self, "grouping", Grouping.parse(self.grouping))
        object.__setattr__(self, "end_precision", dt.to_timedelta(self.end_precision))
        dt.fixed_offset(self.offset_west_seconds)

    @classmethod
    def from_config(cls, cfg) -> "IntervalGenerator":
        """
        cfg: calendar_intervals.config.generator_config.GeneratorConfig
        """
        return cls(
            grouping=cfg.grouping,
            end_precision=cfg.precision,
            offset_west_seconds=cfg.offset_west_seconds,
            extend_begin=cfg.extend_begin,
            extend_end=cfg.extend_end,
        )

    # ---------- builder ----------
    def with_grouping(self, grouping: Union[Grouping, str]) -> "IntervalGenerator":
        return replace(self, grouping=grouping)

    def with_precision(self, precision: PrecisionLike) -> "IntervalGenerator":
        return replace(self, end_precision=precision)

    def with_offset_west_secs(self, offset_west_secs: int) -> "IntervalGenerator":
        return replace(self, offset_west_seconds=offset_west_secs)

    def without_extended_begin(self) -> "IntervalGenerator":
        return replace(self, extend_begin=False)

    def without_extended_end(self) -> "IntervalGenerator":
        return replace(self, extend_end=False)

    def without_extension(self) -> "IntervalGenerator":
        return replace(self, extend_begin=False, extend_end=False)

    # ---------- terminal ----------
    def get_intervals(self, begin: InstantLike, end: InstantLike) -> List[TimeIntervalTuple]:
        return walk_intervals(
            dt.parse(begin),
            dt.parse(end),
            self.grouping,
            self.end_precision,
            dt.fixed_offset(self.offset_west_seconds),
            dt.UTC,
            self.extend_begin,
            self.extend_end,
        )

    generate = get_intervals
