"""Module defining the infrastructure used to retrieve historical leap seconds from various sources."""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path

# Local Imports
from ..common.logger import taitimeLogDebug
from ..common.utilities import loadDatFile
from ..time.constants import DAY, UNIX_EPOCH_DAYS
from ..time.gregorian import daysFromCivil
from . import LeapSecond


class LeapSecondLoader(ABC):
    """Abstract class defining how the historical leap second seed should be loaded."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (str): Specifies where the leap second content to load is located.
        """
        self._location: str = location
        self._leap_seconds: list[LeapSecond] = []
        self._is_loaded: bool = False

    @property
    def location(self) -> str:
        """``str``: where this loader reads leap seconds from."""
        return self._location

    def getLeapSeconds(self) -> list[LeapSecond]:
        """Return the historical leap seconds, loading them first if necessary.

        Returns:
            ``list``: :class:`.LeapSecond` entries in the order they were loaded.
        """
        if not self._is_loaded:
            self.load()

        return list(self._leap_seconds)

    @abstractmethod
    def load(self):
        """Load the leap second content into local memory.

        A concrete implementation of this method should set the :attr:`._is_loaded` to ``True``.
        """
        raise NotImplementedError


class DotDatLeapSecondLoader(LeapSecondLoader, ABC):
    """Abstract interface defining how to properly load a '.dat' leap second data file.

    Each row holds five integers: the year, month, and day the correction takes effect at
    00:00:00 UTC, the matching UNIX time, and the cumulative TAI - UTC correction in seconds.
    """

    def _parseDatData(self, raw_data: list[list[int]]):
        """Loads the specified `raw_data` into local memory.

        Args:
            raw_data (list[list[int]]): leap second data file contents parsed using
                :meth:`.loadDatFile()`.

        Raises:
            ValueError: if a row is malformed or its date doesn't match its UNIX time.
        """
        leap_seconds = []
        for row in raw_data:
            if len(row) != 5:
                err = f"Leap second rows have five columns, got {len(row)}: {row}"
                raise ValueError(err)

            year, month, day, unix_utc, correction = row
            expected = (daysFromCivil(year, month, day) - UNIX_EPOCH_DAYS) * DAY
            if expected != unix_utc:
                err = f"Leap second date {year:04d}-{month:02d}-{day:02d} is UNIX time {expected}, not {unix_utc}"
                raise ValueError(err)

            leap_seconds.append(LeapSecond(unix_utc=unix_utc, cumulative_correction=correction))

        self._leap_seconds = leap_seconds
        self._is_loaded = True
        taitimeLogDebug(f"Loaded {len(leap_seconds)} leap seconds from {self._location}")


class ModuleDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Concrete class defining how leap seconds should be loaded as a Python module resource."""

    LEAP_SECOND_MODULE: str = "taitime.data.leapseconds"
    """``str``: defines leap second data module location."""

    def load(self) -> None:
        """Loads the leap second resources."""
        res = resources.files(self.LEAP_SECOND_MODULE).joinpath(self._location)
        with resources.as_file(res) as file_resource:
            raw_data = loadDatFile(file_resource)
        self._parseDatData(raw_data)


class LocalDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Concrete class defining how leap seconds should be loaded as a local '.dat' file."""

    def __init__(self, location: str) -> None:
        """Initializes the loader.

        Args:
            location (str): Path to the leap second '.dat' file.
        """
        super().__init__(location)
        self._path = Path(self._location)

    def load(self) -> None:
        """Load the leap second content into local memory."""
        raw_data = loadDatFile(self._path)
        self._parseDatData(raw_data)
