from __future__ import annotations

# Third Party Imports
import numpy as np
import pytest

# taitime Imports
from taitime.common.behavioral_config import BehavioralConfig
from taitime.common.exceptions import InvalidDateError, InvalidYearError
from taitime.time.gregorian import (
    Month,
    Weekday,
    civilFromDays,
    civilFromDaysArray,
    dayOfYear,
    daysFromCivil,
    daysFromCivilArray,
    daysFromSeconds,
    daysInMonth,
    isLeapYear,
    secondsFromDays,
    validateDate,
    weekdayFromDays,
)

LEAP_YEARS: tuple[tuple[int, bool], ...] = (
    (1700, False),
    (1800, False),
    (1900, False),
    (2000, True),
    (2004, True),
    (1, False),
    (2, False),
    (3, False),
    (4, True),
)

ASTRONOMICAL_LEAP_YEARS: tuple[tuple[int, bool], ...] = (
    (0, True),
    (-1, False),
    (-4, True),
    (-100, False),
    (-400, True),
    (-4716, True),
)

KNOWN_DAYS: tuple[tuple[tuple[int, int, int], int], ...] = (
    ((1958, 1, 1), 0),
    ((1957, 12, 31), -1),
    ((1970, 1, 1), 4383),
    ((2000, 3, 1), 15400),
    ((1582, 10, 15), -137044),
    ((1582, 10, 4), -137055),
    ((0, 3, 1), -715085),
)

KNOWN_WEEKDAYS: tuple[tuple[tuple[int, int, int], Weekday], ...] = (
    ((1958, 1, 1), Weekday.WEDNESDAY),
    ((1970, 1, 1), Weekday.THURSDAY),
    ((2000, 1, 1), Weekday.SATURDAY),
    ((1582, 10, 15), Weekday.FRIDAY),
    ((1957, 12, 29), Weekday.SUNDAY),
    ((1957, 12, 30), Weekday.MONDAY),
)


MONTH_LENGTHS: np.ndarray = np.array([0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64)


@pytest.mark.parametrize(("year", "expected"), LEAP_YEARS)
def testIsLeapYear(year: int, expected: bool):
    """Test the Gregorian century rules for positive years, in both calendar policies."""
    assert isLeapYear(year) is expected
    assert isLeapYear(year, strict=True) is expected


@pytest.mark.parametrize(("year", "expected"), ASTRONOMICAL_LEAP_YEARS)
def testIsLeapYearAstronomical(year: int, expected: bool):
    """Test that year zero & negative years follow the same rules by default."""
    assert isLeapYear(year) is expected
    assert isLeapYear(year, strict=False) is expected


@pytest.mark.parametrize("year", [0, -1, -400])
def testIsLeapYearStrict(year: int):
    """Test that the strict calendar policy rejects years before 1 AD."""
    with pytest.raises(InvalidYearError):
        isLeapYear(year, strict=True)


def testStrictPolicyFromConfig():
    """Test that the calendar policy is read from the config when not given."""
    BehavioralConfig.getConfig().calendar.StrictGregorian = True
    assert isLeapYear(1) is False
    with pytest.raises(InvalidYearError):
        isLeapYear(0)
    with pytest.raises(InvalidYearError):
        daysInMonth(Month.FEBRUARY, -1)

    # Explicit argument wins over the config
    assert isLeapYear(0, strict=False) is True


def testDaysInMonth():
    """Test month lengths, including leap Februaries."""
    assert daysInMonth(Month.FEBRUARY, 2000) == 29
    assert daysInMonth(Month.FEBRUARY, 1900) == 28
    assert daysInMonth(Month.FEBRUARY, 0) == 29
    assert daysInMonth(Month.APRIL, 2021) == 30
    assert daysInMonth(Month.DECEMBER, 2021) == 31
    assert sum(daysInMonth(month, 2023) for month in Month) == 365
    assert sum(daysInMonth(month, 2024) for month in Month) == 366

    for bad_month in (0, 13, -1):
        with pytest.raises(InvalidDateError):
            daysInMonth(bad_month, 2021)


def testValidateDate():
    """Test validation of civil dates."""
    validateDate(2020, 2, 29)
    validateDate(-4716, 1, 1)
    with pytest.raises(InvalidDateError):
        validateDate(2021, 2, 29)
    with pytest.raises(InvalidDateError):
        validateDate(2021, 4, 31)
    with pytest.raises(InvalidDateError):
        validateDate(2021, 1, 0)
    with pytest.raises(InvalidYearError):
        validateDate(0, 1, 1, strict=True)


@pytest.mark.parametrize(("civil", "days"), KNOWN_DAYS)
def testKnownDays(civil: tuple[int, int, int], days: int):
    """Test day counts against independently known values."""
    assert daysFromCivil(*civil) == days
    assert civilFromDays(days) == civil


@pytest.mark.parametrize(("civil", "weekday"), KNOWN_WEEKDAYS)
def testWeekday(civil: tuple[int, int, int], weekday: Weekday):
    """Test that day of the week uses floor modulo on both sides of the epoch."""
    assert weekdayFromDays(daysFromCivil(*civil)) == weekday


def testWeekdayRange():
    """Test that weekdays cycle through [0, 6] far from the epoch."""
    for start in (-(10**12), -7, 0, 10**12):
        weekdays = [weekdayFromDays(start + offset) for offset in range(14)]
        assert all(0 <= weekday <= 6 for weekday in weekdays)
        assert weekdays[:7] == weekdays[7:]
        assert sorted(weekdays[:7]) == list(range(7))


def testDayOfYear():
    """Test ordinal days of the year."""
    assert dayOfYear(2021, 1, 1) == 1
    assert dayOfYear(2000, 3, 1) == 61
    assert dayOfYear(1999, 3, 1) == 60
    assert dayOfYear(2000, 12, 31) == 366
    assert dayOfYear(1999, 12, 31) == 365
    assert dayOfYear(-1, 12, 31) == 365
    assert dayOfYear(0, 12, 31) == 366


def testSecondsAndDays():
    """Test floor conversion between whole seconds and whole days."""
    assert daysFromSeconds(0) == 0
    assert daysFromSeconds(86399) == 0
    assert daysFromSeconds(86400) == 1
    assert daysFromSeconds(-1) == -1
    assert daysFromSeconds(-86400) == -1
    assert daysFromSeconds(-86401) == -2
    assert secondsFromDays(-2) == -172800


def testRoundTripAcrossEras():
    """Test every date of the three eras surrounding the epoch, one day at a time."""
    first = daysFromCivil(1600, 1, 1)
    last = daysFromCivil(2400, 1, 1)
    year, month, day = civilFromDays(first)
    assert (year, month, day) == (1600, 1, 1)
    for days in range(first, last):
        civil = civilFromDays(days)
        assert daysFromCivil(*civil) == days
        assert civil[2] <= daysInMonth(civil[1], civil[0])


def _validDates(first_year: int, last_year: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Enumerate every valid date of years [`first_year`, `last_year`) in calendar order."""
    year_grid, month_grid, day_grid = np.meshgrid(
        np.arange(first_year, last_year, dtype=np.int64),
        np.arange(1, 13, dtype=np.int64),
        np.arange(1, 32, dtype=np.int64),
        indexing="ij",
    )
    is_leap = (year_grid % 4 == 0) & ((year_grid % 100 != 0) | (year_grid % 400 == 0))
    month_lengths = MONTH_LENGTHS[month_grid] + ((month_grid == 2) & is_leap)
    valid = day_grid <= month_lengths
    return year_grid[valid], month_grid[valid], day_grid[valid]


def testRoundTripProleptic():
    """Test every valid date from -4716 to 10000 round trips exactly."""
    previous_last = daysFromCivil(-4716, 1, 1) - 1
    for first_year in range(-4716, 10001, 1000):
        years_in, months_in, days_in = _validDates(first_year, min(first_year + 1000, 10001))

        day_counts = daysFromCivilArray(years_in, months_in, days_in)
        # Valid dates in calendar order are consecutive days
        assert day_counts[0] == previous_last + 1
        assert np.all(np.diff(day_counts) == 1)
        previous_last = day_counts[-1]

        years_out, months_out, days_out = civilFromDaysArray(day_counts)
        assert np.array_equal(years_out, years_in)
        assert np.array_equal(months_out, months_in)
        assert np.array_equal(days_out, days_in)

    assert previous_last == daysFromCivil(10000, 12, 31)


def testArrayMatchesScalar():
    """Test that the numpy variants agree with the scalar functions."""
    sample = np.arange(-2_000_000, 2_000_000, 7919, dtype=np.int64)
    years, months, days = civilFromDaysArray(sample)
    for index, day_count in enumerate(sample.tolist()):
        assert civilFromDays(day_count) == (int(years[index]), int(months[index]), int(days[index]))

    assert np.array_equal(daysFromCivilArray(years, months, days), sample)


@pytest.mark.parametrize("year", [-(10**10), -292277026596, 292277026596, 10**10])
def testDistantYears(year: int):
    """Test exact conversion billions of years from the epoch."""
    for month, day in ((1, 1), (2, 28), (3, 1), (12, 31)):
        days = daysFromCivil(year, month, day)
        assert civilFromDays(days) == (year, month, day)
        assert civilFromDays(days + 1) != (year, month, day)
