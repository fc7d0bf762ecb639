"""Flags choosing how a listing is sorted."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from lsflags.core import ArgMatches, Config, Configurable, FlagError


class SortColumn(Configurable, enum.Enum):
    """Which column entries are sorted by."""

    EXTENSION = "extension"
    NAME = "name"
    TIME = "time"
    SIZE = "size"
    VERSION = "version"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["SortColumn"]:
        """The column chosen by a sort switch or ``--sort``, or None."""
        sort = matches.last_value("sort")
        if matches.is_present("timesort") or sort == "time":
            return cls.TIME
        if matches.is_present("sizesort") or sort == "size":
            return cls.SIZE
        if matches.is_present("extensionsort") or sort == "extension":
            return cls.EXTENSION
        if matches.is_present("versionsort") or sort == "version":
            return cls.VERSION
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SortColumn"]:
        if config.sorting is None or config.sorting.column is None:
            return None
        column = config.sorting.column
        if isinstance(column, str) and not isinstance(column, SortColumn):
            try:
                return cls(column)
            except ValueError:
                raise FlagError(
                    "Sort column can only be one of extension, name, time, size or "
                    f"version, but got {column}."
                ) from None
        return column

    @classmethod
    def default(cls) -> "SortColumn":
        return cls.NAME


class SortOrder(Configurable, enum.Enum):
    """Whether the sort order is reversed."""

    DEFAULT = "default"
    REVERSE = "reverse"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["SortOrder"]:
        return cls.REVERSE if matches.is_present("reverse") else None

    @classmethod
    def from_config(cls, config: Config) -> Optional["SortOrder"]:
        """REVERSE or DEFAULT from ``sorting.reverse``, or None if it is not set."""
        if config.sorting is None or config.sorting.reverse is None:
            return None
        return cls.REVERSE if config.sorting.reverse else cls.DEFAULT

    @classmethod
    def default(cls) -> "SortOrder":
        return cls.DEFAULT


class DirGrouping(Configurable, enum.Enum):
    """Where directories are placed relative to other entries."""

    NONE = "none"
    FIRST = "first"
    LAST = "last"

    @classmethod
    def from_str(cls, value: str) -> "DirGrouping":
        """The grouping named by ``value``; raises FlagError for any other name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(
                f"Group Dir can only be one of first, last or none, but got {value}."
            ) from None

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["DirGrouping"]:
        if matches.is_present("classic"):
            return cls.NONE
        if matches.occurrences_of("group-dirs") > 0:
            value = matches.last_value("group-dirs")
            if value is not None:
                return cls.from_str(value)
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["DirGrouping"]:
        if config.classic is True:
            return cls.NONE
        if config.sorting is None or config.sorting.dir_grouping is None:
            return None
        grouping = config.sorting.dir_grouping
        if isinstance(grouping, str) and not isinstance(grouping, DirGrouping):
            return cls.from_str(grouping)
        return grouping

    @classmethod
    def default(cls) -> "DirGrouping":
        return cls.NONE


@dataclass(frozen=True)
class Sorting:
    """The sort column, the sort order and the placement of directories."""

    column: SortColumn = SortColumn.NAME
    order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Sorting":
        """All three settings from the command line, environment, configuration or defaults."""
        return cls(
            column=SortColumn.configure_from(matches, config),
            order=SortOrder.configure_from(matches, config),
            dir_grouping=DirGrouping.configure_from(matches, config),
        )