"""Flags choosing when to use colours and which colour theme to apply."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Optional

from lsflags.core import ArgMatches, Config, Configurable, FlagError, _print_error


class ColorOption(Configurable, enum.Enum):
    """When to use colour in the output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def from_str(cls, value: str) -> Optional["ColorOption"]:
        """The option named by ``value``, or None after reporting a bad one."""
        try:
            return cls(value)
        except ValueError:
            _print_error(
                f"Config color.when could only be one of auto, always and never, got {value}."
            )
            return None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["ColorOption"]:
        if matches.is_present("classic"):
            return cls.NEVER
        if matches.occurrences_of("color") == 0:
            return None
        value = matches.last_value("color")
        if value is None:
            raise FlagError("Bad color args: no value given to --color.")
        return cls.from_str(value)

    @classmethod
    def from_config(cls, config: Config) -> Optional["ColorOption"]:
        if config.classic is True:
            return cls.NEVER
        if config.color is None or config.color.when is None:
            return None
        when = config.color.when
        if isinstance(when, str) and not isinstance(when, ColorOption):
            return cls.from_str(when)
        return when

    @classmethod
    def from_environment(cls) -> Optional["ColorOption"]:
        """NEVER when NO_COLOR is set, otherwise None."""
        return cls.NEVER if "NO_COLOR" in os.environ else None

    @classmethod
    def default(cls) -> "ColorOption":
        return cls.AUTO


class ThemeKind(enum.Enum):
    """The kinds of colour theme."""

    NO_COLOR = "no-color"
    DEFAULT = "default"
    NO_LSCOLORS = "no-lscolors"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ThemeOption:
    """Which colour theme to use; ``path`` names the theme file for CUSTOM only."""

    kind: ThemeKind = ThemeKind.DEFAULT
    path: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "ThemeOption":
        """``default`` or the path of a theme file."""
        if value == "default":
            return cls(ThemeKind.DEFAULT)
        return cls(ThemeKind.CUSTOM, value)

    @classmethod
    def from_config(cls, config: Config) -> "ThemeOption":
        """The theme set in the configuration, NO_COLOR in classic mode, else DEFAULT."""
        if config.classic is True:
            return cls(ThemeKind.NO_COLOR)
        if config.color is not None and config.color.theme is not None:
            theme = config.color.theme
            if isinstance(theme, str):
                return cls.parse(theme)
            return theme
        return cls()


@dataclass(frozen=True)
class Color:
    """When to use colour and which theme to use."""

    when: ColorOption = ColorOption.AUTO
    theme: ThemeOption = field(default_factory=ThemeOption)

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Color":
        """Both settings from the command line, environment, configuration or defaults."""
        return cls(
            when=ColorOption.configure_from(matches, config),
            theme=ThemeOption.from_config(config),
        )