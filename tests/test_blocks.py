import pytest

from lsflags.blocks import Block, Blocks
from lsflags.core import ArgMatches, Config, FlagError


def _configure(flags=(), options=None, config=None):
    matches = ArgMatches(flags=flags, options=options)
    return Blocks.configure_from(matches, config or Config.with_none())


def test_configure_from_count():
    assert _configure(flags=["count"]) == Blocks([Block.COUNT, Block.NAME])


def test_configure_from_count_and_inode():
    assert _configure(flags=["count", "inode"]) == Blocks(
        [Block.COUNT, Block.INODE, Block.NAME]
    )


def test_configure_from_without_long():
    assert _configure() == Blocks.default()
    assert _configure().blocks == [Block.NAME]


def test_configure_from_with_long():
    assert _configure(flags=["long"]) == Blocks.long()


def test_long_blocks():
    assert Blocks.long().blocks == [
        Block.PERMISSION,
        Block.USER,
        Block.GROUP,
        Block.SIZE,
        Block.DATE,
        Block.NAME,
    ]


def test_configure_from_with_blocks_and_without_long():
    assert _configure(options={"blocks": "permission"}) == Blocks([Block.PERMISSION])


def test_configure_from_with_blocks_and_long():
    result = _configure(flags=["long"], options={"blocks": "permission"})
    assert result == Blocks([Block.PERMISSION])


def test_configure_from_with_inode():
    assert _configure(flags=["inode"]) == Blocks([Block.INODE, Block.NAME])


def test_configure_from_prepend_inode_without_long():
    result = _configure(flags=["inode"], options={"blocks": "permission"})
    assert result == Blocks([Block.INODE, Block.PERMISSION])


def test_configure_from_prepend_inode_with_long():
    result = _configure(flags=["long", "inode"], options={"blocks": "permission"})
    assert result == Blocks([Block.INODE, Block.PERMISSION])


def test_configure_from_ignore_prepend_inode_without_long():
    result = _configure(flags=["inode"], options={"blocks": "permission,inode"})
    assert result == Blocks([Block.PERMISSION, Block.INODE])


def test_configure_from_ignore_prepend_inode_with_long():
    result = _configure(flags=["long", "inode"], options={"blocks": "permission,inode"})
    assert result == Blocks([Block.PERMISSION, Block.INODE])


def test_configure_from_long_uses_config():
    config = Config(blocks=["name", "size"])
    assert _configure(flags=["long"], config=config) == Blocks([Block.NAME, Block.SIZE])


def test_configure_from_without_long_ignores_config():
    config = Config(blocks=["name", "size"])
    assert _configure(config=config) == Blocks([Block.NAME])


def test_configure_from_long_ignore_config():
    config = Config(blocks=["name", "size"])
    assert _configure(flags=["long", "ignore-config"], config=config) == Blocks.long()


def test_configure_from_invalid_block_raises():
    with pytest.raises(FlagError, match="Not a valid block name: foo"):
        _configure(options={"blocks": "permission,foo"})


def test_from_arg_matches_none():
    assert Blocks.from_arg_matches(ArgMatches()) is None


def test_from_arg_matches_one():
    matches = ArgMatches(options={"blocks": "permission"})
    assert Blocks.from_arg_matches(matches) == Blocks([Block.PERMISSION])


def test_from_arg_matches_multi_occurences():
    matches = ArgMatches(options={"blocks": ["permission", "name"]})
    assert Blocks.from_arg_matches(matches) == Blocks([Block.PERMISSION, Block.NAME])


def test_from_arg_matches_multi_values():
    matches = ArgMatches(options={"blocks": "permission,name"})
    assert Blocks.from_arg_matches(matches) == Blocks([Block.PERMISSION, Block.NAME])


def test_from_arg_matches_reversed_default():
    matches = ArgMatches(options={"blocks": "name,date,size,group,user,permission"})
    assert Blocks.from_arg_matches(matches) == Blocks(
        [
            Block.NAME,
            Block.DATE,
            Block.SIZE,
            Block.GROUP,
            Block.USER,
            Block.PERMISSION,
        ]
    )


def test_from_arg_matches_every_second_one():
    matches = ArgMatches(options={"blocks": "permission,group,date"})
    assert Blocks.from_arg_matches(matches) == Blocks(
        [Block.PERMISSION, Block.GROUP, Block.DATE]
    )


def test_from_config_none():
    assert Blocks.from_config(Config.with_none()) is None


def test_from_config_one():
    config = Config(blocks=["permission"])
    assert Blocks.from_config(config) == Blocks([Block.PERMISSION])


def test_from_config_reversed_default():
    config = Config(blocks=["name", "date", "size", "group", "user", "permission"])
    assert Blocks.from_config(config) == Blocks(
        [
            Block.NAME,
            Block.DATE,
            Block.SIZE,
            Block.GROUP,
            Block.USER,
            Block.PERMISSION,
        ]
    )


def test_from_config_every_second_one():
    config = Config(blocks=["permission", "group", "date"])
    assert Blocks.from_config(config) == Blocks(
        [Block.PERMISSION, Block.GROUP, Block.DATE]
    )


def test_from_config_invalid_is_ignored(capsys):
    config = Config(blocks=["permission", "foo", "date"])
    assert Blocks.from_config(config) == Blocks([Block.PERMISSION, Block.DATE])
    assert "Not a valid block name: foo." in capsys.readouterr().err


def test_from_config_all_invalid_is_none():
    assert Blocks.from_config(Config(blocks=["foo"])) is None


def test_count_files_dirs_is_idempotent():
    blocks = Blocks([Block.NAME])
    blocks.count_files_dirs()
    blocks.count_files_dirs()
    assert blocks.blocks == [Block.COUNT, Block.NAME]


def test_optional_prepend_inode():
    blocks = Blocks([Block.NAME])
    assert not blocks.contains_inode()
    blocks.optional_prepend_inode()
    blocks.optional_prepend_inode()
    assert blocks.contains_inode()
    assert blocks.blocks == [Block.INODE, Block.NAME]


def test_block_err():
    with pytest.raises(FlagError) as info:
        Block.from_str("foo")
    assert str(info.value) == "Not a valid block name: foo"


@pytest.mark.parametrize(
    ("name", "block"),
    [
        ("permission", Block.PERMISSION),
        ("user", Block.USER),
        ("group", Block.GROUP),
        ("size", Block.SIZE),
        ("size_value", Block.SIZE_VALUE),
        ("date", Block.DATE),
        ("name", Block.NAME),
        ("inode", Block.INODE),
        ("links", Block.LINKS),
        ("count", Block.COUNT),
    ],
)
def test_block_from_str(name, block):
    assert Block.from_str(name) is block