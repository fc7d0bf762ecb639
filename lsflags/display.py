"""The flag choosing which file system entries are displayed."""

from __future__ import annotations

import enum
from typing import Optional

from lsflags.core import ArgMatches, Config, Configurable, FlagError


class Display(Configurable, enum.Enum):
    """Which entries to show: all, all but ``.`` and ``..``, directories only, or visible ones."""

    ALL = "all"
    ALMOST_ALL = "almost-all"
    DIRECTORY_ONLY = "directory-only"
    VISIBLE_ONLY = "visible-only"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Display"]:
        if matches.is_present("directory-only"):
            return cls.DIRECTORY_ONLY
        if matches.is_present("almost-all"):
            return cls.ALMOST_ALL
        if matches.is_present("all"):
            return cls.ALL
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["Display"]:
        display = config.display
        if isinstance(display, str) and not isinstance(display, Display):
            try:
                return cls(display)
            except ValueError:
                raise FlagError(
                    "Display can only be one of all, almost-all, directory-only or "
                    f"visible-only, but got {display}."
                ) from None
        return display

    @classmethod
    def default(cls) -> "Display":
        return cls.VISIBLE_ONLY