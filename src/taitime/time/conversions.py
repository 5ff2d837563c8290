"""Helper functions that convert between atomic time and host UTC time representations.

Host systems count UTC seconds since 1970-01-01 with no room for leap seconds. Moving between
that count and :class:`.TAI` shifts by the fixed 1958 to 1970 epoch offset and applies the
cumulative correction from a :class:`.LeapSecondTable`. The correction is always selected on the
UTC timeline, because the table records the UTC instants at which each correction took effect.

Every function takes an optional `table`. When omitted, the shared table returned by
:func:`.getLeapSecondTable` is used, so a long-running program only has to keep that one table
current with :func:`.registerLeapSecond`.
"""

from __future__ import annotations

# Standard Library Imports
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING

# Local Imports
from ..leapseconds import getLeapSecondTable
from .constants import DAY, HOUR, MINUTE, NANOSECOND, NANOSECONDS_PER_SECOND, UNIX_EPOCH_DAYS, UNIX_EPOCH_SKEW
from .gregorian import civilFromDays, daysFromCivil
from .tai import TAI

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ..leapseconds.table import LeapSecondTable


def _resolveTable(table: LeapSecondTable | None) -> LeapSecondTable:
    if table is None:
        return getLeapSecondTable()
    return table


def toUnix(tai: TAI, table: LeapSecondTable | None = None) -> tuple[int, int]:
    """Convert a :class:`.TAI` moment to UNIX time in the UTC time system.

    Args:
        tai (:class:`.TAI`): atomic time moment to convert.
        table (:class:`.LeapSecondTable`, optional): leap seconds to apply. Defaults to the
            shared table.

    Note:
        A moment inside an inserted leap second (23:59:60 UTC) has no UNIX representation and
        maps to the following second.

    Returns:
        ``tuple``: whole UTC seconds since 1970-01-01 and nanoseconds into that second. The
        attoseconds below nanosecond resolution are truncated.
    """
    atomic_unix = tai.sec - UNIX_EPOCH_SKEW
    seconds = atomic_unix - _resolveTable(table).lookupCorrectionFromAtomic(atomic_unix)
    return seconds, tai.asec // NANOSECOND


def fromUnix(seconds: int, nanoseconds: int = 0, table: LeapSecondTable | None = None) -> TAI:
    """Convert UNIX time in the UTC time system to a :class:`.TAI` moment.

    Args:
        seconds (``int``): whole UTC seconds since 1970-01-01.
        nanoseconds (``int``, optional): nanoseconds into that second, values outside
            ``[0, 1e9)`` carry into `seconds`. Defaults to ``0``.
        table (:class:`.LeapSecondTable`, optional): leap seconds to apply. Defaults to the
            shared table.

    Returns:
        :class:`.TAI`: corresponding atomic time moment.
    """
    # Carry first, the correction depends on the whole UTC second
    seconds, nanoseconds = divmod(seconds * NANOSECONDS_PER_SECOND + nanoseconds, NANOSECONDS_PER_SECOND)
    correction = _resolveTable(table).lookupCorrection(seconds)
    return TAI(seconds + UNIX_EPOCH_SKEW + correction, nanoseconds * NANOSECOND)


def toDatetime(tai: TAI, table: LeapSecondTable | None = None) -> datetime:
    """Convert a :class:`.TAI` moment to a UTC ``datetime``.

    Args:
        tai (:class:`.TAI`): atomic time moment to convert.
        table (:class:`.LeapSecondTable`, optional): leap seconds to apply. Defaults to the
            shared table.

    Raises:
        ValueError: if the moment is outside of the years ``datetime`` supports.

    Returns:
        ``datetime``: timezone-aware UTC ``datetime``, truncated to microseconds.
    """
    seconds, nanoseconds = toUnix(tai, table=table)
    days, seconds_of_day = divmod(seconds, DAY)
    year, month, day = civilFromDays(days + UNIX_EPOCH_DAYS)
    hour, seconds_of_hour = divmod(seconds_of_day, HOUR)
    minute, second = divmod(seconds_of_hour, MINUTE)
    return datetime(year, month, day, hour, minute, second, nanoseconds // 1000, tzinfo=timezone.utc)


def fromDatetime(date_time: datetime, table: LeapSecondTable | None = None) -> TAI:
    """Convert a ``datetime`` to a :class:`.TAI` moment.

    Args:
        date_time (``datetime``): ``datetime`` to convert. Naive values are taken to be UTC.
        table (:class:`.LeapSecondTable`, optional): leap seconds to apply. Defaults to the
            shared table.

    Returns:
        :class:`.TAI`: corresponding atomic time moment.
    """
    if date_time.tzinfo is not None:
        date_time = date_time.astimezone(timezone.utc)

    days = daysFromCivil(date_time.year, date_time.month, date_time.day) - UNIX_EPOCH_DAYS
    seconds = days * DAY + date_time.hour * HOUR + date_time.minute * MINUTE + date_time.second
    return fromUnix(seconds, date_time.microsecond * 1000, table=table)


def now(table: LeapSecondTable | None = None) -> TAI:
    """Return the current :class:`.TAI` moment from the host clock.

    The result is only as accurate as `table`: each leap second missing from it skews the result
    by one second.
    """
    seconds, nanoseconds = divmod(time.time_ns(), NANOSECONDS_PER_SECOND)
    return fromUnix(seconds, nanoseconds, table=table)
