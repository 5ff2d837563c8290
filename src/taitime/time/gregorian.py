"""Closed-form arithmetic on the proleptic Gregorian calendar.

Day counts are signed integers relative to the atomic time epoch, 1958-01-01, which is day ``0``.
The conversions use Howard Hinnant's era algorithm: the year is shifted to begin on March 1st so
that February's variable length falls at the end of the year, and 400-year eras absorb the
century leap rules. Both directions are O(1) and exact for any integer year, including year
``0`` and negative years, so there are no loops and no floating point values anywhere.

Years are numbered astronomically by default (year ``0`` is 1 BC, year ``-1`` is 2 BC). Setting
``StrictGregorian = True`` in the ``[calendar]`` config section, or passing ``strict=True``, makes
the leap year predicate reject years before 1 AD with :class:`.InvalidYearError`.

References:
    Howard Hinnant, "chrono-Compatible Low-Level Date Algorithms",
    http://howardhinnant.github.io/date_algorithms.html
"""

from __future__ import annotations

# Standard Library Imports
from enum import IntEnum
from typing import TYPE_CHECKING

# Third Party Imports
import numpy as np

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import InvalidDateError, InvalidYearError
from .constants import DAY, EPOCH_DAY_OFFSET, ERA_DAYS

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy.typing import ArrayLike


class Month(IntEnum):
    """Months of the Gregorian year, January is ``1``."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    """Days of the week as returned by :func:`.weekdayFromDays`, Monday is ``0``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# Indexed by month directly, index zero is not a month
DAYS_PER_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_PER_LEAP_MONTH: tuple[int, ...] = (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

EPOCH_WEEKDAY: Weekday = Weekday.WEDNESDAY
"""Weekday: 1958-01-01 was a Wednesday."""


def _isStrict(strict: bool | None) -> bool:
    """Resolve the year policy, falling back to the ``[calendar]`` config section."""
    if strict is None:
        return BehavioralConfig.getConfig().calendar.StrictGregorian
    return strict


def isLeapYear(year: int, strict: bool | None = None) -> bool:
    """Determine whether `year` is a Gregorian leap year.

    Every year exactly divisible by four is a leap year, except years exactly divisible by 100,
    which are leap years only if they are also exactly divisible by 400. So 1700, 1800 and 1900
    are not leap years, but 1600 and 2000 are.

    Args:
        year (``int``): astronomically numbered year.
        strict (``bool``, optional): reject years before 1 AD. Defaults to ``None``, which uses the
            ``StrictGregorian`` config value.

    Raises:
        InvalidYearError: if `strict` applies and `year` is less than ``1``.

    Returns:
        ``bool``: whether `year` has a February 29th.
    """
    if _isStrict(strict) and year < 1:
        raise InvalidYearError(f"Year {year} is not part of the strict Gregorian calendar")

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def daysInMonth(month: int, year: int, strict: bool | None = None) -> int:
    """Return the number of days in `month` of `year`.

    Raises:
        InvalidDateError: if `month` isn't in [1, 12].
        InvalidYearError: see :func:`.isLeapYear`.
    """
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be an integer (1-12), not {month}")

    if isLeapYear(year, strict=strict):
        return DAYS_PER_LEAP_MONTH[month]
    return DAYS_PER_MONTH[month]


def validateDate(year: int, month: int, day: int, strict: bool | None = None) -> None:
    """Ensure that `year`, `month`, `day` name a real calendar date.

    Raises:
        InvalidDateError: if `month` or `day` are out of range for `year`.
        InvalidYearError: see :func:`.isLeapYear`.
    """
    last_day = daysInMonth(month, year, strict=strict)
    if not 1 <= day <= last_day:
        raise InvalidDateError(f"Day must be an integer (1-{last_day}) for {year:04d}-{month:02d}, not {day}")


def daysFromCivil(year: int, month: int, day: int) -> int:
    """Return the signed number of days from the epoch to the given civil date.

    Args:
        year (``int``): astronomically numbered year.
        month (``int``): month of the year, [1, 12].
        day (``int``): day of the month, [1, 31].

    Note:
        Fields are not validated, see :func:`.validateDate`. Out of range values produce a day
        count, but it won't round trip through :func:`.civilFromDays`.

    Returns:
        ``int``: days since 1958-01-01, negative before the epoch.
    """
    # Shift to a March-based year so leap days fall at year end
    if month <= 2:
        year -= 1
    era, year_of_era = divmod(year, 400)
    march_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * march_month + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * ERA_DAYS + day_of_era - EPOCH_DAY_OFFSET


def civilFromDays(days: int) -> tuple[int, int, int]:
    """Return the civil ``(year, month, day)`` that is `days` days from the epoch.

    This is the exact inverse of :func:`.daysFromCivil`.

    Args:
        days (``int``): signed days since 1958-01-01.

    Returns:
        ``tuple``: astronomically numbered year, month [1, 12], and day [1, 31].
    """
    era, day_of_era = divmod(days + EPOCH_DAY_OFFSET, ERA_DAYS)
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    march_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * march_month + 2) // 5 + 1
    month = march_month + 3 if march_month < 10 else march_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return year, month, day


def weekdayFromDays(days: int) -> int:
    """Return the day of the week for `days` since the epoch, Monday is ``0``."""
    return (days + EPOCH_WEEKDAY) % 7


def dayOfYear(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day of the year, January 1st is ``1``."""
    return daysFromCivil(year, month, day) - daysFromCivil(year, 1, 1) + 1


def daysFromSeconds(seconds: int) -> int:
    """Return the whole day containing `seconds` since the epoch, rounding toward -inf."""
    return seconds // DAY


def secondsFromDays(days: int) -> int:
    """Return the number of seconds since the epoch at the start of day `days`."""
    return days * DAY


def daysFromCivilArray(years: ArrayLike, months: ArrayLike, days: ArrayLike) -> np.ndarray:
    """Vectorized :func:`.daysFromCivil` over arrays of civil dates.

    Args:
        years (``ArrayLike``): astronomically numbered years.
        months (``ArrayLike``): months of the year, [1, 12].
        days (``ArrayLike``): days of the month, [1, 31].

    Returns:
        ``np.ndarray``: ``int64`` days since the epoch, broadcast to the inputs' shape.
    """
    years = np.asarray(years, dtype=np.int64)
    months = np.asarray(months, dtype=np.int64)
    days = np.asarray(days, dtype=np.int64)

    years = years - (months <= 2)
    era = np.floor_divide(years, 400)
    year_of_era = years - era * 400
    march_month = np.where(months > 2, months - 3, months + 9)
    day_of_year = np.floor_divide(153 * march_month + 2, 5) + days - 1
    day_of_era = (
        year_of_era * 365
        + np.floor_divide(year_of_era, 4)
        - np.floor_divide(year_of_era, 100)
        + day_of_year
    )
    return era * ERA_DAYS + day_of_era - EPOCH_DAY_OFFSET


def civilFromDaysArray(days: ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vectorized :func:`.civilFromDays` over an array of day counts.

    Args:
        days (``ArrayLike``): signed days since 1958-01-01.

    Returns:
        ``tuple``: ``int64`` arrays of years, months, and days.
    """
    shifted = np.asarray(days, dtype=np.int64) + EPOCH_DAY_OFFSET
    era = np.floor_divide(shifted, ERA_DAYS)
    day_of_era = shifted - era * ERA_DAYS
    year_of_era = np.floor_divide(
        day_of_era
        - np.floor_divide(day_of_era, 1460)
        + np.floor_divide(day_of_era, 36524)
        - np.floor_divide(day_of_era, 146096),
        365,
    )
    day_of_year = day_of_era - (
        365 * year_of_era + np.floor_divide(year_of_era, 4) - np.floor_divide(year_of_era, 100)
    )
    march_month = np.floor_divide(5 * day_of_year + 2, 153)
    day = day_of_year - np.floor_divide(153 * march_month + 2, 5) + 1
    month = np.where(march_month < 10, march_month + 3, march_month - 9)
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day
