"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Local Imports
from .logger import taitimeLogError

COMMENT_PREFIX: str = "#"


def loadDatFile(file_name, delim=None):
    """Load the corresponding dat file.

    Note:
        Assumes all data is representable by ``int``. Everything after a ``#`` is a comment, and
        lines that are blank once comments are removed are skipped.

    Args:
        file_name (``str``): name of dat file to load
        delim (``str``, optional): delimiter character to separate data on same line. Defaults to
            ``None``, which removes all whitespace between values.

    Raises:
        ``FileNotFoundError``: helps with debugging bad filenames
        ``ValueError``: a value isn't convertible to ``int``, the message ends with the
            ``file:line`` location
        ``IOError``: dat file has no data rows

    Returns:
        ``list``: nested list of integer values of each row
    """
    try:
        with open(file_name, encoding="utf-8") as data_file:
            lines = data_file.readlines()
    except FileNotFoundError:
        taitimeLogError(f"Could not find DAT file: {file_name}")
        raise

    data = []
    for line_number, line in enumerate(lines, start=1):
        content = line.split(COMMENT_PREFIX, 1)[0].strip()
        if not content:
            continue

        try:
            data.append([int(value) for value in content.split(sep=delim)])
        except ValueError as err:
            msg = f"Parsing error reading DAT file: {file_name}:{line_number}"
            taitimeLogError(msg)
            raise ValueError(msg) from err

    if not data:
        msg = f"Empty DAT file: {file_name}"
        taitimeLogError(msg)
        raise OSError(msg)

    return data
