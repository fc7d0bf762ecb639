"""The flag choosing how file sizes are shown."""

from __future__ import annotations

import enum
from typing import Optional

from lsflags.core import ArgMatches, Config, Configurable, FlagError


class SizeFlag(Configurable, enum.Enum):
    """Which units to show file sizes in."""

    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"

    @classmethod
    def from_str(cls, value: str) -> "SizeFlag":
        """The flag named by ``value``; raises FlagError for any other name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(
                f"Size can only be one of default, short or bytes, but got {value}."
            ) from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["SizeFlag"]:
        if matches.is_present("classic"):
            return cls.BYTES
        if matches.occurrences_of("size") > 0:
            value = matches.last_value("size")
            if value is not None:
                return cls.from_str(value)
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SizeFlag"]:
        if config.classic is True:
            return cls.BYTES
        size = config.size
        if isinstance(size, str) and not isinstance(size, SizeFlag):
            return cls.from_str(size)
        return size

    @classmethod
    def default(cls) -> "SizeFlag":
        return cls.DEFAULT