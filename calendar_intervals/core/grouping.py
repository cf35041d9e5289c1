# calendar_intervals/core/grouping.py
from __future__ import annotations

from enum import Enum
from typing import Union

from calendar_intervals.utils.errors import UserInputError


class Grouping(str, Enum):
    """
    Interval 的分组粒度。

    - PER_DAY   : 本地 00:00 → 次日 00:00 - precision
    - PER_WEEK  : 周一 00:00 → 下周一 00:00 - precision
    - PER_MONTH : 每月 1 日 00:00 → 下月 1 日 00:00 - precision
    """

    PER_DAY = "per_day"
    PER_WEEK = "per_week"
    PER_MONTH = "per_month"

    @classmethod
    def parse(cls, value: Union["Grouping", str]) -> "Grouping":
        """
        "per_day" / "per-day" / "PerDay" / "day" / "DAILY" → Grouping.PER_DAY
        """
        if isinstance(value, Grouping):
            return value
        if not isinstance(value, str):
            raise UserInputError(f"Unsupported grouping type: {type(value).__name__}")

        key = value.strip().lower().replace("-", "_")
        if key in _ALIASES:
            return _ALIASES[key]
        raise UserInputError(
            f"Unknown grouping: {value!r} (expected one of {[g.value for g in cls]})"
        )


_ALIASES = {
    "per_day": Grouping.PER_DAY,
    "perday": Grouping.PER_DAY,
    "day": Grouping.PER_DAY,
    "daily": Grouping.PER_DAY,
    "per_week": Grouping.PER_WEEK,
    "perweek": Grouping.PER_WEEK,
    "week": Grouping.PER_WEEK,
    "weekly": Grouping.PER_WEEK,
    "per_month": Grouping.PER_MONTH,
    "permonth": Grouping.PER_MONTH,
    "month": Grouping.PER_MONTH,
    "monthly": Grouping.PER_MONTH,
}
