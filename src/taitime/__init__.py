"""Main Module Documentation.

International Atomic Time (TAI) for Python. TAI is continuous, never repeats, and isn't skewed by
leap seconds. :class:`.TAI` moments carry whole seconds since 1958-01-01 plus attoseconds, convert
exactly to and from the proleptic Gregorian calendar over hundreds of billions of years, and convert
to and from host UTC time through a thread-safe :class:`.LeapSecondTable`.
"""

from __future__ import annotations

__version__ = "1.0.0"

# Local Imports
# forward-facing API import
from .leapseconds import (  # noqa: F401
    LeapSecond,
    LeapSecondTable,
    getLeapSecondTable,
    registerLeapSecond,
    removeLeapSecond,
)
from .time.conversions import fromDatetime, fromUnix, now, toDatetime, toUnix  # noqa: F401
from .time.tai import TAI, Gregorian, normalize  # noqa: F401
