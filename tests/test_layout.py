import pytest

from lsflags.core import ArgMatches, Config, FlagError
from lsflags.layout import Layout


def test_from_arg_matches_none():
    assert Layout.from_arg_matches(ArgMatches()) is None


def test_from_arg_matches_tree():
    assert Layout.from_arg_matches(ArgMatches(flags=["tree"])) is Layout.TREE


def test_from_arg_matches_oneline():
    assert Layout.from_arg_matches(ArgMatches(flags=["oneline"])) is Layout.ONELINE


def test_from_arg_matches_oneline_through_long():
    assert Layout.from_arg_matches(ArgMatches(flags=["long"])) is Layout.ONELINE


def test_from_arg_matches_oneline_through_inode():
    assert Layout.from_arg_matches(ArgMatches(flags=["inode"])) is Layout.ONELINE


def test_from_arg_matches_oneline_through_blocks():
    matches = ArgMatches(options={"blocks": "permission,name"})
    assert Layout.from_arg_matches(matches) is Layout.ONELINE


def test_from_arg_matches_single_block_is_none():
    matches = ArgMatches(options={"blocks": "name"})
    assert Layout.from_arg_matches(matches) is None


def test_from_arg_matches_tree_wins_over_long():
    matches = ArgMatches(flags=["long", "tree"])
    assert Layout.from_arg_matches(matches) is Layout.TREE


def test_from_config_none():
    assert Layout.from_config(Config.with_none()) is None


def test_from_config_tree():
    assert Layout.from_config(Config(layout=Layout.TREE)) is Layout.TREE


def test_from_config_oneline():
    assert Layout.from_config(Config(layout=Layout.ONELINE)) is Layout.ONELINE


def test_from_config_grid():
    assert Layout.from_config(Config(layout=Layout.GRID)) is Layout.GRID


def test_from_config_string():
    assert Layout.from_config(Config(layout="tree")) is Layout.TREE


def test_from_config_bad_string():
    with pytest.raises(FlagError):
        Layout.from_config(Config(layout="spiral"))


def test_default_is_grid():
    assert Layout.configure_from(ArgMatches(), Config.with_none()) is Layout.GRID


def test_args_take_precedence_over_config():
    result = Layout.configure_from(ArgMatches(flags=["tree"]), Config(layout=Layout.GRID))
    assert result is Layout.TREE