"""Contains the atomic time value, Gregorian calendar arithmetic, and UTC boundary conversions.

Everything in this package is exact integer arithmetic. :class:`.TAI` holds whole seconds since
the 1958-01-01 atomic time epoch plus attoseconds, and :class:`.Gregorian` is its civil calendar
decomposition. Only :mod:`.conversions` consults the leap second table.
"""
