"""The flag choosing the output layout."""

from __future__ import annotations

import enum
from typing import Optional

from lsflags.blocks import _block_values
from lsflags.core import ArgMatches, Config, Configurable, FlagError


class Layout(Configurable, enum.Enum):
    """How entries are laid out: a grid, a tree or one per line."""

    GRID = "grid"
    TREE = "tree"
    ONELINE = "oneline"

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Layout"]:
        """TREE for ``tree``; ONELINE for ``long``, ``oneline``, ``inode`` or several blocks."""
        if matches.is_present("tree"):
            return cls.TREE
        if (
            matches.is_present("long")
            or matches.is_present("oneline")
            or matches.is_present("inode")
            or len(_block_values(matches)) > 1
        ):
            return cls.ONELINE
        return None

    @classmethod
    def from_config(cls, config: Config) -> Optional["Layout"]:
        layout = config.layout
        if isinstance(layout, str) and not isinstance(layout, Layout):
            try:
                return cls(layout)
            except ValueError:
                raise FlagError(
                    f"Layout can only be one of grid, tree or oneline, but got {layout}."
                ) from None
        return layout

    @classmethod
    def default(cls) -> "Layout":
        return cls.GRID