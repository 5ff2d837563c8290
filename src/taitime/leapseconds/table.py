"""Defines the :class:`.LeapSecondTable`, a concurrently readable registry of leap seconds.

Readers never block. The table's contents live in one immutable snapshot, and a lookup reads the
snapshot reference exactly once, so it always scans a complete, sorted table. Writers serialize on
a lock, build a new snapshot from the current one, and publish it with a single assignment. A
lookup that began before a write completes against the old snapshot, and every lookup that begins
after it sees the new one.
"""

from __future__ import annotations

# Standard Library Imports
from bisect import bisect_left
from itertools import accumulate
from threading import Lock
from typing import TYPE_CHECKING, NamedTuple

# Local Imports
from ..common.logger import taitimeLogInfo, taitimeLogWarning
from . import (
    DuplicateLeapSecondError,
    HistoricalFloorError,
    LeapSecond,
    LeapSecondBeforeFloorError,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable, Iterator


class _Snapshot(NamedTuple):
    """Immutable contents of a :class:`.LeapSecondTable` at one point in time."""

    instants: tuple[int, ...]
    atomic_floors: tuple[int, ...]
    entries: tuple[LeapSecond, ...]


def _makeSnapshot(entries: tuple[LeapSecond, ...]) -> _Snapshot:
    # Suffix minimum of `unix_utc + cumulative_correction`, non-decreasing even if corrections aren't
    atomic_instants = (entry.unix_utc + entry.cumulative_correction for entry in reversed(entries))
    atomic_floors = tuple(accumulate(atomic_instants, min))[::-1]
    return _Snapshot(tuple(entry.unix_utc for entry in entries), atomic_floors, entries)


class LeapSecondTable:
    """Ordered registry of cumulative TAI - UTC corrections.

    Entries are strictly ascending by :attr:`.LeapSecond.unix_utc`. The entries the table is
    constructed with form its historical floor: nothing may be registered before the earliest of
    them, and none of them may be removed.
    """

    def __init__(self, seed: Iterable[LeapSecond | tuple[int, int]] = ()):
        """Initialize the table with its historical seed.

        Args:
            seed (``Iterable``): historical :class:`.LeapSecond` entries, or
                ``(unix_utc, cumulative_correction)`` pairs, in any order.

        Raises:
            ValueError: if `seed` lists the same instant more than once.
        """
        entries = sorted(
            (entry if isinstance(entry, LeapSecond) else LeapSecond(*entry) for entry in seed),
            key=lambda entry: entry.unix_utc,
        )
        for previous, current in zip(entries, entries[1:]):
            if previous.unix_utc == current.unix_utc:
                raise ValueError(f"Seed lists leap second at {current.unix_utc} more than once")

        self._seed: tuple[LeapSecond, ...] = tuple(entries)
        self._seed_instants: frozenset[int] = frozenset(entry.unix_utc for entry in entries)
        self._snapshot: _Snapshot = _makeSnapshot(self._seed)
        self._write_lock = Lock()

    @property
    def entries(self) -> tuple[LeapSecond, ...]:
        """``tuple``: current entries, ascending by instant."""
        return self._snapshot.entries

    @property
    def seed(self) -> tuple[LeapSecond, ...]:
        """``tuple``: historical entries this table was constructed with."""
        return self._seed

    @property
    def floor(self) -> int | None:
        """``int | None``: earliest seeded instant, ``None`` for an unseeded table."""
        if not self._seed:
            return None
        return self._seed[0].unix_utc

    @property
    def latest(self) -> LeapSecond | None:
        """``LeapSecond | None``: most recent entry, ``None`` for an empty table."""
        entries = self._snapshot.entries
        return entries[-1] if entries else None

    def __len__(self) -> int:
        """Return the number of entries currently in the table."""
        return len(self._snapshot.entries)

    def __iter__(self) -> Iterator[LeapSecond]:
        """Iterate over a consistent snapshot of the entries."""
        return iter(self._snapshot.entries)

    def __contains__(self, entry: object) -> bool:
        """Return whether `entry` is one of the current entries."""
        return entry in self._snapshot.entries

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.LeapSecondTable`."""
        return f"LeapSecondTable(entries={len(self)}, seeded={len(self._seed)})"

    def lookupCorrection(self, unix_utc: int) -> int:
        """Return the TAI - UTC correction in effect at UTC instant `unix_utc`.

        Args:
            unix_utc (``int``): UNIX time, in UTC seconds since 1970-01-01.

        Returns:
            ``int``: cumulative correction of the latest entry strictly before `unix_utc`, or
            ``0`` if there isn't one.
        """
        snapshot = self._snapshot
        index = bisect_left(snapshot.instants, unix_utc)
        if index == 0:
            return 0
        return snapshot.entries[index - 1].cumulative_correction

    def lookupCorrectionFromAtomic(self, atomic_unix: int) -> int:
        """Return the correction `c` such that ``atomic_unix - c`` is the matching UTC instant.

        This inverts :meth:`.lookupCorrection`. The correction is still selected on the UTC
        timeline: the latest entry whose instant is strictly before ``atomic_unix - c``.

        Note:
            The inverse is exact only while corrections never decrease. An entry that lowers the
            correction by ``d`` seconds maps ``d`` UTC seconds before it onto the same atomic
            seconds as the ``d`` UTC seconds after it; those atomic seconds resolve to the later
            UTC second.

        Args:
            atomic_unix (``int``): atomic seconds since 1970-01-01, i.e. UTC plus the correction.

        Returns:
            ``int``: correction to subtract, ``0`` if `atomic_unix` precedes every entry.
        """
        snapshot = self._snapshot
        index = bisect_left(snapshot.atomic_floors, atomic_unix)
        if index == 0:
            return 0
        return snapshot.entries[index - 1].cumulative_correction

    def registerLeapSecond(self, unix_utc: int, cumulative_correction: int) -> None:
        """Insert a new leap second into the table.

        `unix_utc` need not be the most recent leap second, and the correction need not change
        by exactly one second.

        Args:
            unix_utc (``int``): UNIX time at which the new correction takes effect.
            cumulative_correction (``int``): total TAI - UTC skew from `unix_utc` onwards.

        Raises:
            DuplicateLeapSecondError: if `unix_utc` is already in the table with a different
                correction. The table is left unchanged.
            LeapSecondBeforeFloorError: if `unix_utc` predates the earliest historical leap
                second.
        """
        with self._write_lock:
            snapshot = self._snapshot
            index = bisect_left(snapshot.instants, unix_utc)
            if index < len(snapshot.instants) and snapshot.instants[index] == unix_utc:
                existing = snapshot.entries[index]
                if existing.cumulative_correction == cumulative_correction:
                    return
                raise DuplicateLeapSecondError(
                    f"{unix_utc} is already a leap second with correction "
                    f"{existing.cumulative_correction}, not {cumulative_correction}",
                )

            floor = self.floor
            if floor is not None and unix_utc < floor:
                raise LeapSecondBeforeFloorError(
                    f"{unix_utc} predates the earliest historical leap second at {floor}",
                )

            new_entry = LeapSecond(unix_utc, cumulative_correction)
            previous = snapshot.entries[index - 1] if index > 0 else None
            following = snapshot.entries[index] if index < len(snapshot.entries) else None
            if (previous is not None and previous.cumulative_correction > cumulative_correction) or (
                following is not None and following.cumulative_correction < cumulative_correction
            ):
                taitimeLogWarning(
                    f"Leap second at {unix_utc} makes cumulative corrections non-monotonic, "
                    "UTC seconds it overlaps won't round trip through atomic time",
                )

            entries = snapshot.entries[:index] + (new_entry,) + snapshot.entries[index:]
            self._snapshot = _makeSnapshot(entries)

        taitimeLogInfo(f"Registered leap second at {unix_utc}, TAI - UTC = {cumulative_correction}s")

    def removeLeapSecond(self, unix_utc: int) -> bool:
        """Remove a leap second from the table.

        Args:
            unix_utc (``int``): UNIX time of the entry to remove.

        Raises:
            HistoricalFloorError: if the entry is part of the historical seed. The table is left
                unchanged.

        Returns:
            ``bool``: whether an entry was removed, ``False`` if `unix_utc` isn't a leap second.
        """
        with self._write_lock:
            snapshot = self._snapshot
            index = bisect_left(snapshot.instants, unix_utc)
            if index == len(snapshot.instants) or snapshot.instants[index] != unix_utc:
                return False

            if unix_utc in self._seed_instants:
                raise HistoricalFloorError(
                    f"Removing {unix_utc} would drop a leap second announced by the IERS",
                )

            entries = snapshot.entries[:index] + snapshot.entries[index + 1 :]
            self._snapshot = _makeSnapshot(entries)

        taitimeLogInfo(f"Removed leap second at {unix_utc}")
        return True
