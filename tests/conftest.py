# tests/conftest.py
from __future__ import annotations

import pandas as pd
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def window() -> tuple[pd.Timestamp, pd.Timestamp]:
    """
    2022-10-29 (Sat) 08:23:45Z → 2022-11-01 (Tue) 08:23:45Z
    """
    return (
        pd.Timestamp("2022-10-29T08:23:45.000000Z"),
        pd.Timestamp("2022-11-01T08:23:45.000000Z"),
    )
