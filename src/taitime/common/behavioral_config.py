"""Defines a global set of configurations that define how the library operates.

The shared :class:`.BehavioralConfig` is read once, on first use, from the file named by the
``TAITIME_CONFIG`` environment variable if it is set, and from the packaged
``default_behavior.config`` otherwise. Options missing from the file keep their defaults.
"""

from __future__ import annotations

# Standard Library Imports
import os
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final


class SubConfig:
    """Class that represents a section in the configuration.

    Enforce improved config convention:
        `BehavioralConfig.section.value` rather than something like `BehavioralConfig["section"]["value"]`.
    """

    def __init__(self, section: str):
        """Instantiate a `SubConfig` object.

        Args:
            section (``str``): name of section that this SubConfig object represents
        """
        if not isinstance(section, str):
            raise TypeError("Config section must be a string")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set the field for this `SubConfig`, but raise an error if the field was already set.

        Args:
            name (``str``): name of field to set
            value (``any``): value to set the field to
        """
        if hasattr(self, name):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{getattr(self, name)!r}",
            )
        setattr(self, name, value)

    def __repr__(self) -> str:
        """Return a string representation of this `SubConfig`."""
        options = ", ".join(f"{key}={value!r}" for key, value in vars(self).items() if key != "section")
        return f"SubConfig({self.section!r}, {options})"


class CustomConfigParser(ConfigParser):
    """Perform custom parsing operations on our custom config convention."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return a logging level given by name, in any case, or by number."""
        got = self.get(section, option).strip()
        if got.isdigit():
            return int(got)

        return self.LOGGING_LEVELS.get(got.upper(), NOTSET)


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    CONFIG_ENV_VAR: Final[str] = "TAITIME_CONFIG"
    """``str``: environment variable naming a config file to use instead of the packaged one."""

    DEFAULT_SECTIONS: Final[dict[str, dict[str, Any]]] = {
        "logging": {
            "OutputLocation": "stdout",
            "Level": INFO,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "leap_seconds": {
            "LoaderName": "ModuleDotDatLeapSecondLoader",
            "LoaderLocation": "leapseconds.dat",
        },
        "calendar": {
            "StrictGregorian": False,
        },
    }

    ITEM_TYPES: Final[dict[str, dict[str, str]]] = {
        "logging": {
            "OutputLocation": "get",
            "Level": "getlogginglevel",
            "MaxFileSize": "getint",
            "MaxFileCount": "getint",
            "AllowMultipleHandlers": "getboolean",
        },
        "leap_seconds": {
            "LoaderName": "get",
            "LoaderLocation": "get",
        },
        "calendar": {
            "StrictGregorian": "getboolean",
        },
    }
    """dict: name of the :class:`.CustomConfigParser` getter that parses each option."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Initialize the configuration object.

        Args:
            config_file_path (``str``, optional): config file to read. Defaults to ``None``, which
                reads the packaged defaults. A path that doesn't exist also yields the defaults.
        """
        self._parser = CustomConfigParser()

        if config_file_path is None:
            res = resources.files("taitime.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with resources.as_file(res) as res_filepath, open(res_filepath, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, section_config in self.DEFAULT_SECTIONS.items():
            sub = SubConfig(section)
            for key, value in section_config.items():
                getter_name = self.ITEM_TYPES.get(section, {}).get(key)
                if getter_name is None:
                    raise KeyError(
                        f"Configuration item '{section}::{key}' lacks a type classification.",
                    )

                try:
                    value = getattr(self._parser, getter_name)(section, key)  # noqa: PLW2901
                except ConfigError:
                    # Use default
                    pass
                finally:
                    sub.setonce(key, value)

            # Set this config object's `SubConfig`
            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config.

        Args:
            config_file_path (``str``, optional): config file to read if the shared config
                doesn't exist yet. Defaults to the ``TAITIME_CONFIG`` environment variable.
        """
        if cls.__shared_inst is None:
            if not config_file_path:
                config_file_path = os.environ.get(cls.CONFIG_ENV_VAR) or None

            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path)

        return cls.__shared_inst

    @classmethod
    def resetConfig(cls) -> None:
        """Drop the shared config, so the next :meth:`.getConfig` reads it again."""
        cls.__shared_inst = None
