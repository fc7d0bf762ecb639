"""Command-line matches, configuration values and the simple flags built from them."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union


class FlagError(ValueError):
    """Raised when a flag value from the command line or configuration is invalid."""


Occurrence = Union[str, Sequence[str]]


class ArgMatches:
    """The arguments given on a command line, keyed by argument name.

    ``flags`` names switches that take no value; a name may repeat.
    ``options`` maps an argument name to its occurrences, each occurrence being
    either one value or a sequence of values given together.
    """

    def __init__(
        self,
        flags: Iterable[str] = (),
        options: Optional[Mapping[str, Union[Occurrence, Sequence[Occurrence]]]] = None,
    ) -> None:
        self._flags = Counter(flags)
        self._options: dict[str, list[tuple[str, ...]]] = {}
        for name, occurrences in (options or {}).items():
            if isinstance(occurrences, str):
                occurrences = [occurrences]
            self._options[name] = [
                (occurrence,) if isinstance(occurrence, str) else tuple(occurrence)
                for occurrence in occurrences
            ]

    def is_present(self, name: str) -> bool:
        """Whether the argument was given at least once."""
        return self.occurrences_of(name) > 0

    def occurrences_of(self, name: str) -> int:
        """How many times the argument was given."""
        return self._flags[name] + len(self._options.get(name, ()))

    def values_of(self, name: str) -> list[str]:
        """All values given to the argument, in order; empty if it was not given."""
        return [value for occurrence in self._options.get(name, ()) for value in occurrence]

    def last_value(self, name: str) -> Optional[str]:
        """The last value given to the argument, or None."""
        values = self.values_of(name)
        return values[-1] if values else None

    def __repr__(self) -> str:
        return f"ArgMatches(flags={dict(self._flags)!r}, options={self._options!r})"


@dataclass
class ColorConfig:
    """The ``color`` section of a configuration file."""

    when: Any = None
    theme: Any = None


@dataclass
class IconsConfig:
    """The ``icons`` section of a configuration file."""

    when: Any = None
    theme: Any = None
    separator: Optional[str] = None


@dataclass
class SortingConfig:
    """The ``sorting`` section of a configuration file."""

    column: Any = None
    reverse: Optional[bool] = None
    dir_grouping: Any = None


@dataclass
class RecursionConfig:
    """The ``recursion`` section of a configuration file."""

    enabled: Optional[bool] = None
    depth: Optional[int] = None


@dataclass
class Config:
    """Values read from a configuration file; None means the key was not set."""

    classic: Optional[bool] = None
    blocks: Optional[list[str]] = None
    color: Optional[ColorConfig] = None
    date: Optional[str] = None
    dereference: Optional[bool] = None
    display: Any = None
    icons: Optional[IconsConfig] = None
    ignore_globs: Optional[list[str]] = None
    indicators: Optional[bool] = None
    layout: Any = None
    recursion: Optional[RecursionConfig] = None
    size: Any = None
    sorting: Optional[SortingConfig] = None
    no_symlink: Optional[bool] = None
    total_size: Optional[bool] = None
    symlink_arrow: Optional[str] = None

    @classmethod
    def with_none(cls) -> "Config":
        """A configuration in which no key is set."""
        return cls()


def _print_error(message: str) -> None:
    try:
        print(f"lsflags: {message}\n", file=sys.stderr)
    except OSError:
        raise SystemExit(0)


class Configurable:
    """A flag whose value comes from the command line, the environment, a config or a default."""

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config):
        """The first value found in arguments, environment, config, else the default."""
        value = cls.from_arg_matches(matches)
        if value is not None:
            return value
        value = cls.from_environment()
        if value is not None:
            return value
        value = cls.from_config(config)
        if value is not None:
            return value
        return cls.default()

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches):
        """The value given on the command line, or None."""
        return None

    @classmethod
    def from_config(cls, config: Config):
        """The value set in the configuration, or None."""
        return None

    @classmethod
    def from_environment(cls):
        """The value set through the environment, or None."""
        return None

    @classmethod
    def default(cls):
        """The value used when nothing else sets one."""
        return cls()


@dataclass(frozen=True)
class Dereference(Configurable):
    """Whether to dereference symbolic links."""

    value: bool = False

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Dereference"]:
        return cls(True) if matches.is_present("dereference") else None

    @classmethod
    def from_config(cls, config: Config) -> Optional["Dereference"]:
        return None if config.dereference is None else cls(config.dereference)


@dataclass(frozen=True)
class Indicators(Configurable):
    """Whether to print file type indicators."""

    value: bool = False

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Indicators"]:
        return cls(True) if matches.is_present("indicators") else None

    @classmethod
    def from_config(cls, config: Config) -> Optional["Indicators"]:
        return None if config.indicators is None else cls(config.indicators)


@dataclass(frozen=True)
class NoSymlink(Configurable):
    """Whether not to follow symbolic links."""

    value: bool = False

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["NoSymlink"]:
        return cls(True) if matches.is_present("no-symlink") else None

    @classmethod
    def from_config(cls, config: Config) -> Optional["NoSymlink"]:
        return None if config.no_symlink is None else cls(config.no_symlink)


@dataclass(frozen=True)
class TotalSize(Configurable):
    """Whether to show the total size of directories."""

    value: bool = False

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["TotalSize"]:
        return cls(True) if matches.is_present("total-size") else None

    @classmethod
    def from_config(cls, config: Config) -> Optional["TotalSize"]:
        return None if config.total_size is None else cls(config.total_size)


@dataclass(frozen=True)
class SymlinkArrow(Configurable):
    """The arrow shown between a symbolic link and its target."""

    arrow: str = "\u21d2"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> None:
        """The arrow cannot be set on the command line."""
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SymlinkArrow"]:
        return None if config.symlink_arrow is None else cls(str(config.symlink_arrow))

    @classmethod
    def default(cls) -> "SymlinkArrow":
        return cls("\u21d2")

    def __str__(self) -> str:
        return self.arrow