#!filepath: calendar_intervals/config/generator_config.py
from pydantic import BaseModel, field_validator

from calendar_intervals.core.grouping import Grouping
from calendar_intervals.utils.datetime_utils import DateTimeUtils
from calendar_intervals.utils.errors import UserInputError


class GeneratorConfig(BaseModel):
    """
    IntervalGenerator 的默认参数（YAML: generator 段）
    UserInputError → ValueError，让 pydantic 汇总成 ValidationError
    """

    grouping: Grouping = Grouping.PER_DAY
    precision: str = "1ms"
    offset_west_seconds: int = 0
    extend_begin: bool = True
    extend_end: bool = True

    @field_validator("grouping", mode="before")
    @classmethod
    def _parse_grouping(cls, v):
        try:
            return Grouping.parse(v)
        except UserInputError as e:
            raise ValueError(str(e)) from e

    @field_validator("precision")
    @classmethod
    def _check_precision(cls, v: str) -> str:
        try:
            DateTimeUtils.to_timedelta(v)
        except UserInputError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("offset_west_seconds")
    @classmethod
    def _check_offset(cls, v: int) -> int:
        try:
            DateTimeUtils.fixed_offset(v)
        except UserInputError as e:
            raise ValueError(str(e)) from e
        return v
