"""Flags choosing when to show icons, which icon theme to use and what follows an icon."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from lsflags.core import ArgMatches, Config, Configurable, FlagError


class IconOption(Configurable, enum.Enum):
    """When to show icons in the output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def _parse(cls, value: str) -> "IconOption":
        try:
            return cls(value)
        except ValueError:
            raise FlagError(
                f"Icon can only be one of always, auto or never, but got {value}."
            ) from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["IconOption"]:
        if matches.is_present("classic"):
            return cls.NEVER
        if matches.occurrences_of("icon") == 0:
            return None
        value = matches.last_value("icon")
        if value is None:
            raise FlagError("Bad icon args: no value given to --icon.")
        return cls._parse(value)

    @classmethod
    def from_config(cls, config: Config) -> Optional["IconOption"]:
        if config.classic is True:
            return cls.NEVER
        if config.icons is None or config.icons.when is None:
            return None
        when = config.icons.when
        if isinstance(when, str) and not isinstance(when, IconOption):
            return cls._parse(when)
        return when

    @classmethod
    def default(cls) -> "IconOption":
        return cls.AUTO


class IconTheme(Configurable, enum.Enum):
    """Which set of icons to use."""

    UNICODE = "unicode"
    FANCY = "fancy"

    @classmethod
    def _parse(cls, value: str) -> "IconTheme":
        try:
            return cls(value)
        except ValueError:
            raise FlagError(
                f"Icon theme can only be one of fancy or unicode, but got {value}."
            ) from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["IconTheme"]:
        if matches.occurrences_of("icon-theme") == 0:
            return None
        value = matches.last_value("icon-theme")
        if value is None:
            raise FlagError("Bad icon-theme args: no value given to --icon-theme.")
        return cls._parse(value)

    @classmethod
    def from_config(cls, config: Config) -> Optional["IconTheme"]:
        if config.icons is None or config.icons.theme is None:
            return None
        theme = config.icons.theme
        if isinstance(theme, str) and not isinstance(theme, IconTheme):
            return cls._parse(theme)
        return theme

    @classmethod
    def default(cls) -> "IconTheme":
        return cls.FANCY


@dataclass(frozen=True)
class IconSeparator(Configurable):
    """The text placed between an icon and a file name."""

    value: str = " "

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> None:
        """The separator cannot be set on the command line."""
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["IconSeparator"]:
        if config.icons is None or config.icons.separator is None:
            return None
        return cls(config.icons.separator)

    @classmethod
    def default(cls) -> "IconSeparator":
        return cls(" ")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IconFlags:
    """When to use icons, which theme to use and the separator after an icon."""

    when: IconOption = IconOption.AUTO
    theme: IconTheme = IconTheme.FANCY
    separator: IconSeparator = field(default_factory=IconSeparator)

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "IconFlags":
        """All three settings from the command line, environment, configuration or defaults."""
        return cls(
            when=IconOption.configure_from(matches, config),
            theme=IconTheme.configure_from(matches, config),
            separator=IconSeparator.configure_from(matches, config),
        )