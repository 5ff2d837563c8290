from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# taitime Imports
from taitime.common.behavioral_config import BehavioralConfig
from taitime.leapseconds import LeapSecondTable, clearLeapSecondTables

# Local Imports
from . import TEST_SEED


@pytest.fixture(autouse=True)
def _resetSharedState() -> None:
    """Automatically reset the shared config and leap second tables after each test.

    Note:
        Tests that register leap seconds on the shared table, or change config values, would
        otherwise leak into whichever test runs next.
    """
    yield
    BehavioralConfig.resetConfig()
    clearLeapSecondTables()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="leap_table")
def getLeapTable() -> LeapSecondTable:
    """Create a small, non-shared :class:`.LeapSecondTable` seeded with :data:`.TEST_SEED`."""
    return LeapSecondTable(TEST_SEED)
