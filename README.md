# ftls

`ftls` is a small directory lister in the spirit of `ls`. It takes a handful of
flags and a list of directories and prints the entries of each one. If no
directory is given, it lists the current one.

It runs on POSIX systems only, since it looks up owner and group names through
the `pwd` and `grp` modules.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
ftls [-lRart] [directory ...]
```

Any argument that starts with `-` is read as a group of flags. Flags can be
combined, as in `-la`, or given separately, and they can appear anywhere on
the command line; letters other than the ones below are ignored. Every other
argument is a directory to list. Slashes at the start and end of a directory
argument are stripped before it is opened, so `src/` is listed as `src`.

| Flag | Effect |
|------|--------|
| `-l` | Long format, one entry per line: permissions, link count, owner, group, size, modification time (month, day and time of day), and name. Symbolic links show `-> target`. Each directory listing starts with `name:` and a `total` line giving the sum of the entries' allocated blocks divided by two. Unknown owners or groups are shown as `?`. |
| `-R` | Recurse into subdirectories (symbolic links are not followed). Each directory listing starts with `name:`. Subdirectories that cannot be opened are skipped. |
| `-a` | Show entries whose names start with `.`, including `.` and `..`. |
| `-r` | Reverse the sort order. |
| `-t` | Sort by modification time, newest first. Entries with the same time are sorted by name. |

Without `-l`, the names of a directory are printed on one line, each followed
by two spaces, and the line ends with a newline.

Entries are sorted by name without regard to case. A single leading dot is
ignored when comparing names, so `.bashrc` sorts next to `bashrc`. The `.` and
`..` entries keep their dots.

If a directory cannot be opened, `ftls` prints
`ls: cannot access '<argument>': No such file or directory` (with no trailing
newline) and goes on to the next argument. The command always exits with
status 0.

### Examples

```
ftls
ftls -la src
ftls -Rt src docs
ftls -l -r .
```

## Library use

The parts that make up the command can also be called from Python:

```python
import sys

from ftls.cli import list_dir
from ftls.options import parse_flags

flags = parse_flags(["-la"])
list_dir(".", flags, sys.stdout)
```

- `ftls.options.parse_flags` builds a `Flags` object from a list of arguments.
- `ftls.entries.read_entries` returns the `Entry` objects of a directory,
  `.` and `..` included; `total_blocks` sums their allocated blocks.
- `ftls.sorting.order_entries` sorts a directory's entries the way the command
  does; `sort_by_name` and `sort_by_time` are the two orderings it uses.
- `ftls.printer` holds the functions that format each field of a long
  listing (`format_permissions`, `format_size`, `format_mtime`,
  `format_owner_group`) and `format_entry`, which renders a whole entry.
- `ftls.cli.list_dir` lists one directory and raises `OSError` if it cannot be
  opened; `list_paths` lists every non-option argument.

## Limitations

- Only directories can be listed. A path to a regular file is reported as
  not accessible.
- Because slashes at both ends of an argument are stripped, an absolute path
  such as `/tmp` is opened as the relative path `tmp`.
- Long format columns are not aligned to the widest entry; sizes are padded
  to eight characters only.