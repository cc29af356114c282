"""Reading directory entries and counting their blocks."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ftls.options import Flags


@dataclass(frozen=True)
class Entry:
    """A name found in a directory and whether it is itself a directory."""

    name: str
    is_dir: bool


def read_entries(dirname: str) -> list[Entry]:
    """Return all entries of ``dirname``, including ``.`` and ``..``.

    Raises OSError if the directory cannot be opened.
    """
    with os.scandir(dirname) as it:
        found = [Entry(e.name, e.is_dir(follow_symlinks=False)) for e in it]
    return [Entry(".", True), Entry("..", True), *found]


def is_visible(name: str, flags: Flags) -> bool:
    """Tell whether an entry is shown under the given flags."""
    return flags.show_all or not name.startswith(".")


def total_blocks(dirname: str, flags: Flags) -> int:
    """Sum the allocated blocks of the visible entries of ``dirname``.

    Returns 0 when the directory cannot be read.
    """
    try:
        names = [".", "..", *os.listdir(dirname)]
    except OSError:
        return 0
    total = 0
    for name in names:
        if not is_visible(name, flags):
            continue
        try:
            st = os.lstat(f"{dirname}/{name}")
        except OSError:
            continue
        total += getattr(st, "st_blocks", 0)
    return total