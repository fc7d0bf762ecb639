"""The blocks of data shown for each file, and how they are chosen."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from lsflags.core import ArgMatches, Config, FlagError, _print_error


def _block_values(matches: ArgMatches) -> list[str]:
    """The values given to ``--blocks``, with comma-separated lists split apart."""
    return [
        part
        for value in matches.values_of("blocks")
        for part in value.split(",")
    ]


class Block(enum.Enum):
    """One column of data to show for a file."""

    PERMISSION = "permission"
    USER = "user"
    GROUP = "group"
    SIZE = "size"
    SIZE_VALUE = "size_value"
    DATE = "date"
    NAME = "name"
    INODE = "inode"
    LINKS = "links"
    COUNT = "count"

    @classmethod
    def from_str(cls, value: str) -> "Block":
        """The block named by ``value``; raises FlagError for an unknown name."""
        try:
            return cls(value)
        except ValueError:
            raise FlagError(f"Not a valid block name: {value}") from None


@dataclass
class Blocks:
    """The ordered blocks to show for each file."""

    blocks: list[Block] = field(default_factory=lambda: [Block.NAME])

    def __post_init__(self) -> None:
        self.blocks = list(self.blocks)

    @classmethod
    def configure_from(cls, matches: ArgMatches, config: Config) -> "Blocks":
        """Blocks from the command line, else the configuration in long mode, else a default.

        Without ``long`` the default is just the name; with it, the long format.
        ``inode`` and ``count`` prepend their block when it is not already there.
        Raises FlagError on an unknown block name on the command line.
        """
        long_mode = matches.is_present("long")
        result = cls.long() if long_mode else cls.default()

        if long_mode and not matches.is_present("ignore-config"):
            from_config = cls.from_config(config)
            if from_config is not None:
                result = from_config

        from_args = cls.from_arg_matches(matches)
        if from_args is not None:
            result = from_args

        if matches.is_present("inode"):
            result.optional_prepend_inode()
        if matches.is_present("count"):
            result.count_files_dirs()
        return result

    @classmethod
    def from_arg_matches(cls, matches: ArgMatches) -> Optional["Blocks"]:
        """The blocks given with ``--blocks``, or None if it was not given.

        Raises FlagError on an unknown block name.
        """
        if matches.occurrences_of("blocks") == 0:
            return None
        values = _block_values(matches)
        if not values:
            return None
        return cls([Block.from_str(value) for value in values])

    @classmethod
    def from_config(cls, config: Config) -> Optional["Blocks"]:
        """The blocks listed in the configuration; unknown names are reported and skipped.

        Returns None when no blocks are listed or none of them is valid.
        """
        if config.blocks is None:
            return None
        blocks: list[Block] = []
        for value in config.blocks:
            if isinstance(value, Block):
                blocks.append(value)
                continue
            try:
                blocks.append(Block.from_str(value))
            except FlagError as err:
                _print_error(f"{err}.")
        return cls(blocks) if blocks else None

    @classmethod
    def long(cls) -> "Blocks":
        """The blocks of the long format."""
        return cls(
            [
                Block.PERMISSION,
                Block.USER,
                Block.GROUP,
                Block.SIZE,
                Block.DATE,
                Block.NAME,
            ]
        )

    @classmethod
    def default(cls) -> "Blocks":
        """Just the file name."""
        return cls([Block.NAME])

    def count_files_dirs(self) -> None:
        """Prepend a COUNT block unless one is already present."""
        if Block.COUNT not in self.blocks:
            self.blocks.insert(0, Block.COUNT)

    def contains_inode(self) -> bool:
        """Whether an INODE block is present."""
        return Block.INODE in self.blocks

    def optional_prepend_inode(self) -> None:
        """Prepend an INODE block unless one is already present."""
        if not self.contains_inode():
            self.blocks.insert(0, Block.INODE)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __contains__(self, block: object) -> bool:
        return block in self.blocks