"""Resolution of listing options from arguments, configuration, environment and defaults, and file icons."""

__version__ = "0.1.0"

__all__ = [
    "blocks",
    "color",
    "core",
    "date",
    "display",
    "icon",
    "icon_flags",
    "icon_table",
    "layout",
    "recursion",
    "size",
    "sorting",
]