"""Options controlling recursion into directories."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from lsflags.core import ArgMatches, Config, FlagError

MAX_DEPTH = 2**64 - 1
_DEPTH_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Recursion:
    """Whether to recurse into directories, and how deep."""

    enabled: bool = False
    depth: int = MAX_DEPTH

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Recursion":
        """Both settings from the command line, configuration or defaults.

        Raises FlagError if the depth given on the command line is not a number.
        """
        enabled = cls.enabled_from(matches, config)
        depth = cls.depth_from(matches, config)
        return cls(enabled=enabled, depth=depth)

    @classmethod
    def enabled_from(cls, matches: ArgMatches, config: Config) -> bool:
        value = cls.enabled_from_arg_matches(matches)
        if value is not None:
            return value
        if config.recursion is not None and config.recursion.enabled is not None:
            return config.recursion.enabled
        return False

    @classmethod
    def enabled_from_arg_matches(cls, matches: ArgMatches) -> Optional[bool]:
        return True if matches.is_present("recursive") else None

    @classmethod
    def depth_from(cls, matches: ArgMatches, config: Config) -> int:
        value = cls.depth_from_arg_matches(matches)
        if value is not None:
            return value
        if config.recursion is not None and config.recursion.depth is not None:
            return config.recursion.depth
        return MAX_DEPTH

    @classmethod
    def depth_from_arg_matches(cls, matches: ArgMatches) -> Optional[int]:
        """The last depth given on the command line, or None if none was given."""
        value = matches.last_value("depth")
        if value is None:
            return None
        if _DEPTH_PATTERN.fullmatch(value):
            depth = int(value)
            if depth <= MAX_DEPTH:
                return depth
        raise FlagError("The argument '--depth' requires a valid positive number.")