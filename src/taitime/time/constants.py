"""Unit and epoch constants for atomic time.

Whole units are SI seconds; fractional units are attoseconds.
"""

from __future__ import annotations

# Whole-second units
SECOND: int = 1
MINUTE: int = 60 * SECOND
HOUR: int = 60 * MINUTE
DAY: int = 24 * HOUR

# Fractional units, in attoseconds
ATTOSECOND: int = 1
FEMTOSECOND: int = 10**3 * ATTOSECOND
PICOSECOND: int = 10**6 * ATTOSECOND
NANOSECOND: int = 10**9 * ATTOSECOND
MICROSECOND: int = 10**12 * ATTOSECOND
MILLISECOND: int = 10**15 * ATTOSECOND

ATTOSECONDS_PER_SECOND: int = 10**18
"""``int``: number of attoseconds in one whole second."""

NANOSECONDS_PER_SECOND: int = 10**9
"""``int``: number of nanoseconds in one whole second, the host clock resolution."""

EPOCH_YEAR: int = 1958
"""``int``: atomic time epoch is 1958-01-01T00:00:00."""

UNIX_EPOCH_DAYS: int = 4383
"""``int``: days from 1958-01-01 to 1970-01-01, twelve years including 1960, 1964 & 1968."""

UNIX_EPOCH_SKEW: int = UNIX_EPOCH_DAYS * DAY
"""``int``: seconds to add to a UNIX timestamp to shift it onto the atomic time epoch."""

ERA_DAYS: int = 146097
"""``int``: days in one 400-year Gregorian era."""

EPOCH_DAY_OFFSET: int = 719468 - UNIX_EPOCH_DAYS
"""``int``: days from 0000-03-01 to the epoch, 719468 being the span from 0000-03-01 to 1970-01-01."""
