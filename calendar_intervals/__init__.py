#!filepath: calendar_intervals/__init__.py
"""
Calendar-aligned time intervals (per day / per week / per month).
"""

__version__ = "0.1.0"

from .utils.logger import Logging, logs, init_logging
from .utils.errors import UserInputError
from .utils.datetime_utils import DateTimeUtils
from .core.grouping import Grouping
from .core.walker import TimeIntervalTuple
from .generator import IntervalGenerator
from .api import (
    get_utc_intervals_opts,
    get_extended_utc_intervals_with_defaults,
    get_extended_utc_intervals,
    generate_intervals,
    generate_intervals_with_defaults,
)
from .config.app_config import AppConfig

datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging", "init_logging",
    "UserInputError",
    "datetime_utils",
    "Grouping",
    "TimeIntervalTuple",
    "IntervalGenerator",
    "get_utc_intervals_opts",
    "get_extended_utc_intervals_with_defaults",
    "get_extended_utc_intervals",
    "generate_intervals",
    "generate_intervals_with_defaults",
    "AppConfig",
]
