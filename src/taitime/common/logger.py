"""Defines the :class:`.Logger` class and the one-line ``taitimeLog*()`` helpers.

Every record is stamped in UTC, because local wall clock time is ambiguous across daylight saving
changes and makes no sense next to the atomic and UTC instants this library logs about.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from .behavioral_config import BehavioralConfig

LOGGER_NAME: str = "taitime"
"""``str``: name of the top-level logger every module in this package logs to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"


class UTCFormatter(logging.Formatter):
    """Formatter writing ISO 8601 UTC time stamps, e.g. ``2017-01-01T00:00:36.000Z``."""

    converter = time.gmtime
    default_time_format = "%Y-%m-%dT%H:%M:%S"
    default_msec_format = "%s.%03dZ"


def logFileName(name: str, stamp: datetime | None = None) -> str:
    """Return a file name for the log of `name`, unique to the second it was created.

    Args:
        name (``str``): name of the logger writing to the file.
        stamp (``datetime``, optional): creation time. Defaults to now. Naive values are taken
            to be UTC.

    Returns:
        ``str``: path-safe file name, e.g. ``taitime_20170101T000036Z.log``.
    """
    if stamp is None:
        stamp = datetime.now(timezone.utc)
    elif stamp.tzinfo is not None:
        stamp = stamp.astimezone(timezone.utc)
    return f"{name}_{stamp:%Y%m%dT%H%M%SZ}.log"


class Logger:
    """Extended logger wraps the standard Python logging package.

    Unset arguments fall back to the ``[logging]`` config section. A logger that already has a
    handler is left as is, unless multiple handlers are allowed.
    """

    def __init__(self, name=LOGGER_NAME, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``, optional): name of the wrapped logger. Defaults to :data:`.LOGGER_NAME`.
            level (``int``, optional): lowest level of published log messages.
            path (``str``, optional): directory to write log files in, or ``"stdout"``.
            allow_multiple_handlers (``bool``, optional): whether another handler may be attached
                to a logger that already has one.
        """
        config = BehavioralConfig.getConfig().logging
        if level is None:
            level = config.Level
        if path is None:
            path = config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.filename = None
        self.logger = logging.getLogger(name)
        if self.logger.handlers and not allow_multiple_handlers:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)
        else:
            handler = self._fileHandler(name, Path(path))

        handler.setFormatter(UTCFormatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def _fileHandler(self, name: str, directory: Path) -> RotatingFileHandler:
        """Create a rotating handler for a new log file in `directory`, creating it if needed."""
        if not directory.exists():
            self.logger.info(f"Path did not exist: {str(directory)!r}. Creating path...")
            directory.mkdir(parents=True)

        self.filename = str(directory / logFileName(name))
        config = BehavioralConfig.getConfig().logging
        return RotatingFileHandler(
            self.filename,
            maxBytes=config.MaxFileSize,
            backupCount=config.MaxFileCount,
        )

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _taitimeLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.
    Records are attributed to the module that called the one-liner, not to this one.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(LOGGER_NAME).log(level, message, stacklevel=3)


def taitimeLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _taitimeLog(message, level=logging.CRITICAL)


def taitimeLogError(message: str):
    """Log an ERROR message to the top-level log record."""
    _taitimeLog(message, level=logging.ERROR)


def taitimeLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _taitimeLog(message, level=logging.WARNING)


def taitimeLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _taitimeLog(message, level=logging.INFO)


def taitimeLogDebug(message: str):
    """Log a DEBUG message to the top-level log record.

    See Also:
        :func:`._taitimeLog`
    """
    _taitimeLog(message, level=logging.DEBUG)
