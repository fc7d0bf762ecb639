import pytest

from lsflags.icon import FileType, Icons, Theme
from lsflags.icon_table import default_icons_by_extension, default_icons_by_name


def test_get_no_icon():
    icons = Icons(Theme.NO_ICON, " ")
    assert icons.get("file.txt", FileType.FILE) == ""


def test_get_no_icon_directory():
    icons = Icons(Theme.NO_ICON, " ")
    assert icons.get("dir", FileType.DIRECTORY) == ""


def test_get_default_file_icon():
    icons = Icons(Theme.FANCY, " ")
    assert icons.get("file", FileType.FILE) == "\uf016 "


def test_get_default_file_icon_unicode():
    icons = Icons(Theme.UNICODE, " ")
    assert icons.get("file", FileType.FILE) == "\U0001f5cb "


def test_get_directory_icon():
    icons = Icons(Theme.FANCY, " ")
    assert icons.get("tmpdir", FileType.DIRECTORY) == "\uf115 "


def test_get_directory_icon_unicode():
    icons = Icons(Theme.UNICODE, " ")
    assert icons.get("tmpdir", FileType.DIRECTORY) == "\U0001f5c1 "


def test_get_directory_icon_with_ext():
    icons = Icons(Theme.FANCY, " ")
    assert icons.get("folder.txt", FileType.DIRECTORY) == "\uf115 "


def test_get_icon_by_name():
    icons = Icons(Theme.FANCY, " ")
    for file_name, file_icon in default_icons_by_name().items():
        assert icons.get(file_name, FileType.FILE) == f"{file_icon} "


def test_get_icon_by_extension():
    icons = Icons(Theme.FANCY, " ")
    for ext, file_icon in default_icons_by_extension().items():
        assert icons.get(f"file.{ext}", FileType.FILE) == f"{file_icon} "


def test_name_lookup_is_case_insensitive():
    icons = Icons(Theme.FANCY, " ")
    assert icons.get("Dockerfile", FileType.FILE) == "\uf308 "


def test_extension_lookup_is_case_insensitive():
    icons = Icons(Theme.FANCY, " ")
    assert icons.get("README.MD", FileType.FILE) == "\uf48a "


def test_dotfile_without_known_name_uses_default():
    icons = Icons(Theme.FANCY, " ")
    assert icons.get(".rs", FileType.FILE) == "\uf016 "


def test_unicode_theme_ignores_extensions():
    icons = Icons(Theme.UNICODE, " ")
    assert icons.get("file.txt", FileType.FILE) == "\U0001f5cb "


def test_custom_separator():
    icons = Icons(Theme.FANCY, " |")
    assert icons.get("file.rs", FileType.FILE) == "\ue7a8 |"


@pytest.mark.parametrize(
    "file_type, expected",
    [
        (FileType.SYMLINK_DIR, "\uf482"),
        (FileType.SYMLINK_FILE, "\uf481"),
        (FileType.SOCKET, "\uf6a7"),
        (FileType.PIPE, "\uf731"),
        (FileType.CHAR_DEVICE, "\ue601"),
        (FileType.BLOCK_DEVICE, "\ufc29"),
        (FileType.SPECIAL, "\uf2dc"),
    ],
)
@pytest.mark.parametrize("theme", [Theme.FANCY, Theme.UNICODE])
def test_special_file_types(theme, file_type, expected):
    icons = Icons(theme, " ")
    assert icons.get("file.txt", file_type) == f"{expected} "