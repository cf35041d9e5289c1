#!filepath: calendar_intervals/utils/datetime_utils.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union

import numpy as np
import pandas as pd

from calendar_intervals.utils.errors import UserInputError

InstantLike = Union[pd.Timestamp, datetime, np.datetime64, str, int]
PrecisionLike = Union[pd.Timedelta, timedelta, np.timedelta64, str]


class DateTimeUtils:
    """
    Instant / Duration / FixedOffset 的统一入口
    ---------------------------------------
    - 所有 instant 统一为 tz-aware pd.Timestamp（纳秒精度）
    - naive 输入按 UTC 语义处理
    - offset 以 "seconds west of UTC" 表示（CEST = -7200, PDT = 25200）
    ---------------------------------------
    """

    UTC = timezone.utc
    SECONDS_PER_DAY = 86_400

    # ================================================================
    # parse() 把调用方的 instant 统一成 tz-aware Timestamp
    # ================================================================
    @classmethod
    def parse(cls, ts: InstantLike, unit: Optional[str] = None) -> pd.Timestamp:
        """
        输入可能为：
            pd.Timestamp / datetime       (aware 或 naive)
            np.datetime64                 (naive, UTC)
            "2022-10-29T08:23:45.000000Z" (RFC 3339 / ISO 8601)
            1667031825                    (epoch seconds / ms / us / ns)

        整数 epoch 默认按位数猜单位：<=10 位为秒，<=13 位为毫秒，<=16 位为微秒，
        其余为纳秒。1970-04-27 之前的毫秒 epoch 只有 <=10 位，会被当成秒，
        这种情况需显式传 unit="ms"。
        """
        if isinstance(ts, bool):
            raise TypeError(f"Unsupported instant type: {type(ts)}")

        if isinstance(ts, (pd.Timestamp, datetime, np.datetime64)):
            out = pd.Timestamp(ts)

        elif isinstance(ts, int) and unit is not None:
            out = pd.Timestamp(ts, unit=unit)

        elif isinstance(ts, int):
            digits = len(str(abs(ts)))
            if digits <= 10:
                out = pd.Timestamp(ts, unit="s")
            elif digits <= 13:
                out = pd.Timestamp(ts, unit="ms")
            elif digits <= 16:
                out = pd.Timestamp(ts, unit="us")
            else:
                out = pd.Timestamp(ts, unit="ns")

        elif isinstance(ts, str):
            out = pd.Timestamp(ts.strip())

        else:
            raise TypeError(f"Unsupported instant type: {type(ts)}")

        if out is pd.NaT:
            raise ValueError(f"Instant is NaT: {ts!r}")

        if out.tzinfo is None:
            return out.tz_localize(cls.UTC)
        return out

    # ---------------------------------------------------------------
    # fixed offset
    # ---------------------------------------------------------------
    @classmethod
    def fixed_offset(cls, offset_west_seconds: int) -> tzinfo:
        """
        Positive values are west of UTC (behind it), negative values east.
        """
        if isinstance(offset_west_seconds, bool) or not isinstance(offset_west_seconds, int):
            raise UserInputError(
                f"offset_west_seconds must be an int, got {type(offset_west_seconds).__name__}"
            )
        if abs(offset_west_seconds) >= cls.SECONDS_PER_DAY:
            raise UserInputError(
                f"offset_west_seconds out of range (|x| < {cls.SECONDS_PER_DAY}): {offset_west_seconds}"
            )
        return timezone(timedelta(seconds=-offset_west_seconds))

    @classmethod
    def localize(cls, ts: pd.Timestamp, tz: tzinfo) -> pd.Timestamp:
        return cls.parse(ts).tz_convert(tz)

    # ---------------------------------------------------------------
    # precision
    # ---------------------------------------------------------------
    @classmethod
    def to_timedelta(cls, precision: PrecisionLike) -> pd.Timedelta:
        """
        "1ms" / "1us" / "1ns" / timedelta(milliseconds=1) / pd.Timedelta(1, "ns")
        整数不接受（单位不明确）。
        """
        if isinstance(precision, (bool, int, float)):
            raise UserInputError(
                f"precision needs an explicit unit, got {precision!r}; use e.g. '1ms'"
            )
        if not isinstance(precision, (pd.Timedelta, timedelta, np.timedelta64, str)):
            raise UserInputError(f"Unsupported precision type: {type(precision).__name__}")

        try:
            out = pd.Timedelta(precision)
        except ValueError as e:
            raise UserInputError(f"Invalid precision: {precision!r}") from e

        if out is pd.NaT:
            raise UserInputError(f"Invalid precision: {precision!r}")
        return out

    # ---------------------------------------------------------------
    # calendar fields
    # ---------------------------------------------------------------
    @classmethod
    def midnight(cls, ts: pd.Timestamp) -> pd.Timestamp:
        return ts.normalize()

    @classmethod
    def month_start(cls, year: int, month: int, tz: tzinfo) -> pd.Timestamp:
        return pd.Timestamp(datetime(year, month, 1, tzinfo=tz))

    @classmethod
    def next_month_start(cls, ts: pd.Timestamp) -> pd.Timestamp:
        # 12 月 → 次年 1 月
        if ts.month == 12:
            return cls.month_start(ts.year + 1, 1, ts.tzinfo)
        return cls.month_start(ts.year, ts.month + 1, ts.tzinfo)
