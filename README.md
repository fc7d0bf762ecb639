# lsflags

`lsflags` works out the settings of a directory listing tool. A setting can come from
parsed command-line arguments, from configuration values, from an environment variable or
from a built-in default. The package also picks the icon shown next to each file name.

## Inputs

- `lsflags.core.ArgMatches` holds an already parsed command line. `flags` names switches
  (a name may repeat); `options` maps an argument name to its occurrences, each a single
  value or a sequence of values given together.

  ```python
  from lsflags.core import ArgMatches

  matches = ArgMatches(
      flags=["long", "inode"],
      options={"blocks": ["permission,name"], "date": ["relative"]},
  )
  matches.is_present("long")       # True
  matches.last_value("date")       # "relative"
  ```

- `lsflags.core.Config` holds configuration values, with `ColorConfig`, `IconsConfig`,
  `SortingConfig` and `RecursionConfig` for its sections. A field left as `None` is unset;
  `Config.with_none()` sets nothing.

## Precedence

Flags built on `Configurable` are resolved by `configure_from(matches, config)`, which
uses the first source that gives a value:

1. the command line (`from_arg_matches`)
2. the environment (`from_environment`): `NO_COLOR` for `ColorOption`, `TIME_STYLE` for
   `DateFlag`
3. the configuration (`from_config`)
4. the default (`default`)

Some settings follow their own rules:

- `Blocks.configure_from`: `--blocks` wins; otherwise, with `long`, the configured blocks
  (unless `ignore-config` is given) or the long format; otherwise just the name. `inode`
  and `count` prepend their block if it is not already there.
- `Recursion.configure_from`: command line, then configuration, then disabled with an
  unbounded depth.
- `ThemeOption.from_config`: the configured theme, `NO_COLOR` in classic mode, else
  `DEFAULT`.

`classic` on the command line turns colour and icons off, shows sizes in bytes, uses plain
dates and stops grouping directories. In the configuration it does the same and also
selects the `NO_COLOR` theme.

## Example

```python
from lsflags.core import ArgMatches, Config
from lsflags.blocks import Blocks
from lsflags.date import DateFlag
from lsflags.layout import Layout
from lsflags.recursion import Recursion
from lsflags.sorting import Sorting

matches = ArgMatches(flags=["long"], options={"depth": ["2"]})
config = Config.with_none()

Blocks.configure_from(matches, config)     # the long-format blocks
Layout.configure_from(matches, config)     # Layout.ONELINE
DateFlag.configure_from(matches, config)   # DateFlag(kind=DateKind.DATE) unless TIME_STYLE is set
Sorting.configure_from(matches, config)
Recursion.configure_from(matches, config)  # Recursion(enabled=False, depth=2)
```

## Errors

`lsflags.core.FlagError` (a `ValueError`) is raised for a bad `--depth`, an unknown block
name on the command line, an invalid `+FORMAT` date on the command line, and an unknown
size, directory grouping, icon, layout, display or sort column name. Some bad values are
instead reported on standard error and ignored: an unknown `color.when`, a bad configured
or `TIME_STYLE` date, and unknown names in the configured blocks.

## Modules

| Module       | What it provides                                                        |
|--------------|-------------------------------------------------------------------------|
| `core`       | `ArgMatches`, `Config`, `Configurable`, `FlagError`, `Dereference`, `Indicators`, `NoSymlink`, `TotalSize`, `SymlinkArrow` |
| `blocks`     | `Block`, `Blocks`: which columns to show                                |
| `color`      | `ColorOption`, `ThemeOption`, `ThemeKind`, `Color`                      |
| `date`       | `DateFlag`, `DateKind`, `validate_time_format`                          |
| `display`    | `Display`: which entries to show                                        |
| `icon_flags` | `IconOption`, `IconTheme`, `IconSeparator`, `IconFlags`                 |
| `icon`       | `Icons`, `Theme`, `FileType`: choosing an icon                          |
| `icon_table` | `default_icons_by_name`, `default_icons_by_extension`                   |
| `layout`     | `Layout`: grid, tree or one entry per line                              |
| `recursion`  | `Recursion`: whether to recurse and how deep                            |
| `size`       | `SizeFlag`: default, short or bytes                                     |
| `sorting`    | `SortColumn`, `SortOrder`, `DirGrouping`, `Sorting`                     |

## Icons

```python
from lsflags.icon import FileType, Icons, Theme

icons = Icons(Theme.FANCY, " ")
icons.get("main.rs")                      # "\ue7a8 "
icons.get("src", FileType.DIRECTORY)      # "\uf115 "
Icons(Theme.NO_ICON).get("main.rs")       # ""
```

Directories get the folder glyph; symbolic links, sockets, pipes, devices and special
files get a glyph for their type. Other files are looked up by lower-cased name, then by
lower-cased extension, and fall back to the default file glyph. The unicode theme has no
name or extension tables, so plain files and directories get the generic unicode glyphs.

## What it does not do

The package does not parse a command line, read a configuration file, list directories or
print anything beyond error reports. It has no command. It does not build or apply glob
patterns for hiding entries.

## Tests

```
pip install -e .[test]
pytest
```