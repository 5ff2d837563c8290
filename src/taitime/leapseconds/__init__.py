"""Leap second table package.

The leap second table bridges the continuous atomic time scale and UTC. It is seeded from the
historical record published by the IERS in Bulletin C and may be extended at runtime with
:func:`.registerLeapSecond` by long-running programs that learn of newly announced leap seconds.
"""

# Standard Library Imports
import datetime
from dataclasses import dataclass

LAST_KNOWN_BULLETIN_C: int = 68
"""int: last issue of IERS Bulletin C that the packaged leap second data reflects."""

LAST_KNOWN_BULLETIN_C_DATE: datetime.date = datetime.date(2024, 7, 4)
"""datetime.date: release date of :data:`.LAST_KNOWN_BULLETIN_C`."""

UP_TO_DATE_UNTIL: datetime.date = datetime.date(2025, 1, 1)
"""datetime.date: date on which the packaged leap second data may become stale."""


@dataclass(frozen=True)
class LeapSecond:
    """Data class to define a single entry of the leap second table."""

    unix_utc: int
    """int: UNIX time (UTC seconds since 1970-01-01) at which this correction takes effect."""

    cumulative_correction: int
    """int: total TAI - UTC skew in whole seconds, including this leap second."""


class LeapSecondError(Exception):
    """Base exception for leap second table consistency conflicts."""


class DuplicateLeapSecondError(LeapSecondError):
    """Exception that occurs when a known leap second is registered with a different correction."""


class LeapSecondBeforeFloorError(LeapSecondError):
    """Exception that occurs when a leap second predates the earliest historical leap second."""


class HistoricalFloorError(LeapSecondError, RuntimeError):
    """Error thrown when a removal would make the table forget a published leap second.

    This is a programming error and should not be retried.
    """


def isTableCurrent(on_date: datetime.date) -> bool:
    """Return whether the packaged leap second data is known to be complete on `on_date`.

    Args:
        on_date (``datetime.date``): date to check.

    Returns:
        ``bool``: ``False`` once :data:`.UP_TO_DATE_UNTIL` has passed.
    """
    return on_date < UP_TO_DATE_UNTIL


# Local Imports
# forward-facing API import
from .getter import (  # noqa: E402, F401
    clearLeapSecondTables,
    getLeapSecondTable,
    registerLeapSecond,
    removeLeapSecond,
)
from .table import LeapSecondTable  # noqa: E402, F401
