"""Choosing the icon shown in front of a file name."""

from __future__ import annotations

import enum
from typing import Optional

from lsflags.icon_table import default_icons_by_extension, default_icons_by_name


class Theme(enum.Enum):
    """The icon theme: none, glyphs from a patched font, or plain unicode symbols."""

    NO_ICON = "no-icon"
    FANCY = "fancy"
    UNICODE = "unicode"


class FileType(enum.Enum):
    """The kinds of file system node an icon can be chosen for."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK_DIR = "symlink-dir"
    SYMLINK_FILE = "symlink-file"
    SOCKET = "socket"
    PIPE = "pipe"
    CHAR_DEVICE = "char-device"
    BLOCK_DEVICE = "block-device"
    SPECIAL = "special"


_TYPE_ICONS = {
    FileType.SYMLINK_DIR: "\uf482",
    FileType.SYMLINK_FILE: "\uf481",
    FileType.SOCKET: "\uf6a7",
    FileType.PIPE: "\uf731",
    FileType.CHAR_DEVICE: "\ue601",
    FileType.BLOCK_DEVICE: "\ufc29",
    FileType.SPECIAL: "\uf2dc",
}


def _extension(file_name: str) -> Optional[str]:
    """The text after the last dot, unless the only dot leads the name."""
    if file_name == "..":
        return None
    stem, dot, extension = file_name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


class Icons:
    """Icon lookup for one theme, appending a separator to every icon."""

    def __init__(self, theme: Theme, icon_separator: str = " ") -> None:
        self.display_icons = theme in (Theme.FANCY, Theme.UNICODE)
        if theme is Theme.FANCY:
            self.icons_by_name = default_icons_by_name()
            self.icons_by_extension = default_icons_by_extension()
            self.default_file_icon = "\uf016"
            self.default_folder_icon = "\uf115"
        else:
            self.icons_by_name = {}
            self.icons_by_extension = {}
            self.default_file_icon = "\U0001f5cb"
            self.default_folder_icon = "\U0001f5c1"
        self.icon_separator = icon_separator

    def get(self, file_name: str, file_type: FileType = FileType.FILE) -> str:
        """The icon and separator for a file, or an empty string when icons are off."""
        if not self.display_icons:
            return ""
        if file_type is FileType.DIRECTORY:
            icon = self.default_folder_icon
        elif file_type in _TYPE_ICONS:
            icon = _TYPE_ICONS[file_type]
        else:
            icon = self.icons_by_name.get(file_name.lower())
            if icon is None:
                extension = _extension(file_name)
                if extension is not None:
                    icon = self.icons_by_extension.get(extension.lower())
            if icon is None:
                icon = self.default_file_icon
        return f"{icon}{self.icon_separator}"