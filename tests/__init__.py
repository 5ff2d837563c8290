"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_LEAP_SECONDS = Path("dat/leapseconds.dat")

# Seed used for tables built directly in tests, in (unix_utc, cumulative_correction) form
TEST_SEED: tuple[tuple[int, int], ...] = (
    (63072000, 10),  # 1972-01-01
    (78796800, 11),  # 1972-07-01
    (94694400, 12),  # 1973-01-01
    (1435708800, 36),  # 2015-07-01
    (1483228800, 37),  # 2017-01-01
)
