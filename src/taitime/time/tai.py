"""Defines :class:`.TAI` & :class:`.Gregorian` classes and supporting functions.

A :class:`.TAI` value is a point on the continuous atomic time scale: whole seconds since the
1958-01-01T00:00:00 epoch plus an attosecond fraction in ``[0, 10**18)``. It never repeats and is
never skewed by leap seconds, so arithmetic on it is plain integer arithmetic.

A :class:`.Gregorian` value is the civil calendar decomposition of a :class:`.TAI` value. Every
field is compared exactly, so two :class:`.Gregorian` objects are equal only if they were built
from the same instant (or by hand with identical fields).

.. code-block:: python

    epoch = TAI()
    assert epoch.toGregorian() == Gregorian(1958, 1, 1)

    later = epoch.add(1, -ATTOSECONDS_PER_SECOND // 2)
    assert later == TAI(0, ATTOSECONDS_PER_SECOND // 2)
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass

# Local Imports
from ..common.exceptions import InvalidDateError
from .constants import (
    ATTOSECONDS_PER_SECOND,
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
)
from .gregorian import (
    civilFromDays,
    dayOfYear,
    daysFromCivil,
    daysFromSeconds,
    secondsFromDays,
    validateDate,
    weekdayFromDays,
)


@dataclass(frozen=True)
class Gregorian:
    """Civil date and time of day on the proleptic Gregorian calendar, in UTC.

    Only :meth:`.TAI.toGregorian` is guaranteed to produce canonical field values. Objects built
    by hand are validated when converted with :meth:`.TAI.fromGregorian`.
    """

    year: int
    """int: astronomically numbered year, year ``0`` is 1 BC."""

    month: int
    """int: month of the year, [1, 12]."""

    day: int
    """int: day of the month, [1, 31] depending on `month` and `year`."""

    hour: int = 0
    """int: hour of the day, [0, 23]."""

    minute: int = 0
    """int: minute of the hour, [0, 59]."""

    second: int = 0
    """int: second of the minute, [0, 59]."""

    asec: int = 0
    """int: attoseconds into the second, [0, 10**18)."""

    @property
    def days(self) -> int:
        """``int``: days from the epoch to this date."""
        return daysFromCivil(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """``int``: day of the week, Monday is ``0``."""
        return weekdayFromDays(self.days)

    @property
    def day_of_year(self) -> int:
        """``int``: ordinal day of the year, January 1st is ``1``."""
        return dayOfYear(self.year, self.month, self.day)

    def validate(self) -> None:
        """Ensure all fields are in their canonical ranges.

        Raises:
            InvalidDateError: if any field is out of range.
            InvalidYearError: if `year` is rejected by the configured calendar policy.
        """
        validateDate(self.year, self.month, self.day)
        if not 0 <= self.hour < 24:
            raise InvalidDateError(f"Hour must be an integer (0-23), not {self.hour}")
        if not 0 <= self.minute < 60:
            raise InvalidDateError(f"Minute must be an integer (0-59), not {self.minute}")
        if not 0 <= self.second < 60:
            raise InvalidDateError(f"Second must be an integer (0-59), not {self.second}")
        if not 0 <= self.asec < ATTOSECONDS_PER_SECOND:
            raise InvalidDateError(f"Attoseconds must be an integer in [0, 1e18), not {self.asec}")


@dataclass(frozen=True, order=True)
class TAI:
    """International atomic time moment.

    The zero value represents the atomic time epoch of 1958-01-01T00:00:00. Construction always
    normalizes, carrying any attosecond overflow into :attr:`.sec` and borrowing whole seconds to
    make a negative fraction positive, so ``0 <= asec < 10**18`` holds for every instance.
    Ordering is lexicographic on ``(sec, asec)``.
    """

    sec: int = 0
    """int: whole seconds since the epoch, negative before it."""

    asec: int = 0
    """int: attoseconds of fractional time, [0, 10**18)."""

    def __post_init__(self):
        """Normalize the attosecond fraction into ``[0, 10**18)``."""
        carry, asec = divmod(self.asec, ATTOSECONDS_PER_SECOND)
        object.__setattr__(self, "sec", self.sec + carry)
        object.__setattr__(self, "asec", asec)

    def compare(self, other: TAI) -> int:
        """Return ``-1`` if this is before `other`, ``0`` if equal, and ``1`` if after."""
        if self < other:
            return -1
        if self > other:
            return 1
        return 0

    def before(self, other: TAI) -> bool:
        """Return whether this moment is strictly before `other`."""
        return self < other

    def after(self, other: TAI) -> bool:
        """Return whether this moment is strictly after `other`."""
        return self > other

    def add(self, sec: int, asec: int = 0) -> TAI:
        """Return this moment offset by `sec` seconds and `asec` attoseconds.

        Either offset may be negative, and `asec` may span any number of whole seconds.
        """
        return TAI(self.sec + sec, self.asec + asec)

    def addHMS(self, hours: int, minutes: int, seconds: int) -> TAI:
        """Return this moment offset by the given hours, minutes, and seconds."""
        return self.add(hours * HOUR + minutes * MINUTE + seconds)

    def addMilliseconds(self, msec: int) -> TAI:
        """Return this moment offset by `msec` milliseconds."""
        return self.add(0, msec * MILLISECOND)

    def addMicroseconds(self, usec: int) -> TAI:
        """Return this moment offset by `usec` microseconds."""
        return self.add(0, usec * MICROSECOND)

    def addNanoseconds(self, nsec: int) -> TAI:
        """Return this moment offset by `nsec` nanoseconds."""
        return self.add(0, nsec * NANOSECOND)

    @property
    def days(self) -> int:
        """``int``: whole days since the epoch, rounded toward -inf."""
        return daysFromSeconds(self.sec)

    def toGregorian(self) -> Gregorian:
        """Convert this moment to its civil calendar date and time.

        Pre-epoch moments decompose into non-negative hour, minute, and second fields because
        the split into whole days uses floor division.

        Returns:
            :class:`.Gregorian`: canonical civil decomposition.
        """
        days, seconds_of_day = divmod(self.sec, DAY)
        year, month, day = civilFromDays(days)
        hour, seconds_of_hour = divmod(seconds_of_day, HOUR)
        minute, second = divmod(seconds_of_hour, MINUTE)
        return Gregorian(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            asec=self.asec,
        )

    @classmethod
    def fromGregorian(cls, gregorian: Gregorian) -> TAI:
        """Convert a civil calendar date and time to a :class:`.TAI` moment.

        Args:
            gregorian (:class:`.Gregorian`): civil date and time to convert.

        Raises:
            InvalidDateError: if any field of `gregorian` is out of range.
            InvalidYearError: if the year is rejected by the configured calendar policy.

        Returns:
            :class:`.TAI`: corresponding atomic time moment.
        """
        gregorian.validate()
        seconds = secondsFromDays(gregorian.days)
        seconds += gregorian.hour * HOUR + gregorian.minute * MINUTE + gregorian.second
        return cls(seconds, gregorian.asec)

    @classmethod
    def date(cls, year: int, month: int, day: int) -> TAI:
        """Return the moment at midnight starting the given civil date."""
        return cls.fromGregorian(Gregorian(year, month, day))


def normalize(sec: int, asec: int) -> TAI:
    """Build a :class:`.TAI` from raw, possibly unnormalized, components.

    Args:
        sec (``int``): whole seconds since the epoch.
        asec (``int``): attoseconds, any sign or magnitude.

    Returns:
        :class:`.TAI`: equivalent moment with ``0 <= asec < 10**18``.
    """
    return TAI(sec, asec)
