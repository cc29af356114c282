"""Directory listing driver and command entry point."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from ftls.entries import is_visible, read_entries, total_blocks
from ftls.options import Flags, parse_flags
from ftls.printer import format_entry
from ftls.sorting import order_entries


def _list_subdirectories(entries, dirname: str, flags: Flags, out: TextIO) -> None:
    for entry in entries:
        if (
            entry.is_dir
            and is_visible(entry.name, flags)
            and entry.name not in (".", "..")
        ):
            out.write("\n")
            try:
                list_dir(f"{dirname}/{entry.name}", flags, out)
            except OSError:
                pass


def list_dir(dirname: str, flags: Flags, out: TextIO) -> None:
    """Write the listing of one directory; raise OSError if it cannot be read."""
    entries = order_entries(read_entries(dirname), dirname, flags)
    if flags.long_format:
        out.write(f"{dirname}:\ntotal {total_blocks(dirname, flags) // 2}\n")
    elif flags.recursive:
        out.write(f"{dirname}:\n")
    for entry in entries:
        text = format_entry(dirname, entry, flags)
        if text:
            out.write(text)
    if not flags.long_format:
        out.write("\n")
    if flags.recursive:
        _list_subdirectories(entries, dirname, flags, out)


def list_paths(argv: Sequence[str], flags: Flags, out: TextIO) -> None:
    """List every non-option argument, or the current directory if none."""
    listed = False
    for arg in argv:
        if arg.startswith("-"):
            continue
        try:
            list_dir(arg.strip("/"), flags, out)
        except OSError:
            out.write(f"ls: cannot access '{arg}': No such file or directory")
        listed = True
    if not listed:
        try:
            list_dir(".", flags, out)
        except OSError:
            out.write("ls: cannot access '.': No such file or directory")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the listing command."""
    if argv is None:
        argv = sys.argv[1:]
    flags = parse_flags(argv)
    list_paths(argv, flags, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())