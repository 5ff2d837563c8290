"""Module defining how to retrieve shared leap second tables.

Each distinct ``(loader_name, loader_location)`` pair gets one :class:`.LeapSecondTable`, seeded
once from its loader and shared by every caller that asks for it. Conversion functions accept a
table explicitly, and fall back to :func:`.getLeapSecondTable` when none is given.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from collections import namedtuple
from threading import Lock
from typing import TYPE_CHECKING

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.logger import taitimeLogWarning
from . import UP_TO_DATE_UNTIL, isTableCurrent
from .loaders import LocalDotDatLeapSecondLoader, ModuleDotDatLeapSecondLoader
from .table import LeapSecondTable

if TYPE_CHECKING:
    # Local Imports
    from .loaders import LeapSecondLoader


LoaderTag = namedtuple("LoaderTag", ("loader_name", "loader_location"))
"""NamedTuple: Tag used to identify different :class:`.LeapSecondTable`'s."""

_LOADER_MAP: dict[str, type[LeapSecondLoader]] = {
    "ModuleDotDatLeapSecondLoader": ModuleDotDatLeapSecondLoader,
    "LocalDotDatLeapSecondLoader": LocalDotDatLeapSecondLoader,
}
"""dict[str, type[LeapSecondLoader]]: Maps loader class names to loader class references."""

_LEAP_SECOND_TABLES: dict[LoaderTag, LeapSecondTable] = {}
"""dict[LoaderTag, LeapSecondTable]: Stores seeded tables based on tag."""

_TABLES_LOCK = Lock()
"""Lock: serializes seeding new tables, lookups of seeded tables never take it."""


def getLeapSecondTable(
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> LeapSecondTable:
    """Return the shared :class:`.LeapSecondTable` seeded by `loader_name` from `loader_location`.

    Args:
        loader_name (str, optional): Name of the concrete :class:`.LeapSecondLoader` to use.
            Defaults to the ``[leap_seconds]`` config value.
        loader_location (str, optional): Location that the specified :class:`.LeapSecondLoader`
            will load leap seconds from. Defaults to the ``[leap_seconds]`` config value.

    Raises:
        ValueError: if `loader_name` isn't a known loader.

    Returns:
        :class:`.LeapSecondTable`: the same object for every call with the same loader.
    """
    behave_config = BehavioralConfig.getConfig()
    if loader_name is None:
        loader_name = behave_config.leap_seconds.LoaderName

    if loader_location is None:
        loader_location = behave_config.leap_seconds.LoaderLocation

    tag = LoaderTag(loader_name, loader_location)
    # Seeded tables are read without the lock, only seeding is serialized
    table = _LEAP_SECOND_TABLES.get(tag)
    if table is not None:
        return table

    with _TABLES_LOCK:
        table = _LEAP_SECOND_TABLES.get(tag)
        if table is None:
            try:
                loader = _LOADER_MAP[loader_name](loader_location)
            except KeyError:
                err = f"Specified loader '{loader_name}' is undefined"
                raise ValueError(err)  # noqa: B904

            table = LeapSecondTable(loader.getLeapSeconds())
            _LEAP_SECOND_TABLES[tag] = table
            if not isTableCurrent(datetime.date.today()):
                taitimeLogWarning(
                    f"Leap second data is only known to be complete until {UP_TO_DATE_UNTIL}, "
                    "register newer leap seconds to keep UTC conversions accurate",
                )

    return table


def registerLeapSecond(
    unix_utc: int,
    cumulative_correction: int,
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> None:
    """Insert a new leap second into a shared table.

    See Also:
        :meth:`.LeapSecondTable.registerLeapSecond`
    """
    getLeapSecondTable(loader_name, loader_location).registerLeapSecond(unix_utc, cumulative_correction)


def removeLeapSecond(
    unix_utc: int,
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> bool:
    """Remove a leap second from a shared table.

    See Also:
        :meth:`.LeapSecondTable.removeLeapSecond`
    """
    return getLeapSecondTable(loader_name, loader_location).removeLeapSecond(unix_utc)


def clearLeapSecondTables() -> None:
    """Drop every shared table so the next request re-seeds from its loader."""
    with _TABLES_LOCK:
        _LEAP_SECOND_TABLES.clear()
