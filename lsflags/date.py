"""The flag choosing how time stamps are displayed."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from lsflags.core import ArgMatches, Config, Configurable, FlagError, _print_error

_PLAIN_SPECIFIERS = frozenset("AaBbCcDdeFfGgHhIjklMmnPpRrSsTtUuVvWwXxYyZz+%")
_PADDABLE_SPECIFIERS = frozenset("CdefGgHIjklMmSsUuVWwYy")


def _next_char(chars: Iterator[str]) -> str:
    char = next(chars, None)
    if char is None:
        raise FlagError("missing format specifier")
    return char


def validate_time_format(value: str) -> None:
    """Check every ``%`` specifier in a time format, raising FlagError on a bad one."""
    chars = iter(value)
    for char in chars:
        if char != "%":
            continue
        spec = _next_char(chars)
        if spec == ".":
            width = _next_char(chars)
            if width == "f":
                continue
            if width in "369":
                last = _next_char(chars)
                if last != "f":
                    raise FlagError(f"invalid format specifier: %.{width}{last}")
                continue
            raise FlagError(f"invalid format specifier: %.{width}")
        if spec in ":#":
            last = _next_char(chars)
            if last != "z":
                raise FlagError(f"invalid format specifier: %{spec}{last}")
        elif spec in "-_0":
            last = _next_char(chars)
            if last not in _PADDABLE_SPECIFIERS:
                raise FlagError(f"invalid format specifier: %{spec}{last}")
        elif spec in _PLAIN_SPECIFIERS:
            continue
        elif spec in "369":
            last = _next_char(chars)
            if last != "f":
                raise FlagError(f"invalid format specifier: %{spec}{last}")
        else:
            raise FlagError(f"invalid format specifier: %{spec}")


class DateKind(enum.Enum):
    """The kinds of time stamp display."""

    DATE = "date"
    RELATIVE = "relative"
    ISO = "iso"
    FORMATTED = "formatted"


@dataclass(frozen=True)
class DateFlag(Configurable):
    """Which kind of time stamp to display; ``format`` is set for FORMATTED only."""

    kind: DateKind = DateKind.DATE
    format: Optional[str] = None

    @classmethod
    def from_format_string(cls, value: str) -> Optional["DateFlag"]:
        """A FORMATTED flag from a ``+``-prefixed format, or None after reporting it."""
        try:
            validate_time_format(value)
        except FlagError:
            _print_error(f"Not a valid date format: {value}.")
            return None
        return cls(DateKind.FORMATTED, value[1:])

    @classmethod
    def from_str(cls, value: str) -> Optional["DateFlag"]:
        """A flag from a configuration value, or None after reporting a bad one."""
        if value == "date":
            return cls(DateKind.DATE)
        if value == "relative":
            return cls(DateKind.RELATIVE)
        if value.startswith("+"):
            return cls.from_format_string(value)
        _print_error(f"Not a valid date value: {value}.")
        return None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["DateFlag"]:
        if matches.is_present("classic"):
            return cls(DateKind.DATE)
        if matches.occurrences_of("date") == 0:
            return None
        value = matches.last_value("date")
        if value == "date":
            return cls(DateKind.DATE)
        if value == "relative":
            return cls(DateKind.RELATIVE)
        if value is not None and value.startswith("+"):
            validate_time_format(value)
            return cls(DateKind.FORMATTED, value[1:])
        raise FlagError(f"Not a valid date value: {value}.")

    @classmethod
    def from_config(cls, config: Config) -> Optional["DateFlag"]:
        if config.classic is True:
            return cls(DateKind.DATE)
        if config.date is None:
            return None
        return cls.from_str(config.date)

    @classmethod
    def from_environment(cls) -> Optional["DateFlag"]:
        """A flag from the TIME_STYLE environment variable, or None."""
        value = os.environ.get("TIME_STYLE")
        if value is None:
            return None
        if value == "full-iso":
            return cls(DateKind.FORMATTED, "%F %T.%f %z")
        if value == "long-iso":
            return cls(DateKind.FORMATTED, "%F %R")
        if value == "iso":
            return cls(DateKind.ISO)
        if value.startswith("+"):
            return cls.from_format_string(value)
        _print_error(f"Not a valid date value: {value}.")
        return None

    @classmethod
    def default(cls) -> "DateFlag":
        return cls(DateKind.DATE)