"""Contains the custom-defined calendar exceptions used in taitime.

Leap second table exceptions live beside the table in :mod:`taitime.leapseconds`.
"""

from __future__ import annotations


class InvalidYearError(ValueError):
    """Exception indicating a year outside of the configured calendar's valid range."""


class InvalidDateError(ValueError):
    """Exception indicating calendar fields that are not a canonical civil date and time."""
