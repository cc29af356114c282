"""Ordering of directory entries by name and by modification time."""

from __future__ import annotations

import os
from functools import cmp_to_key
from typing import Iterable

from ftls.entries import Entry
from ftls.options import Flags


def sort_name(name: str) -> str:
    """Name used for sorting: one leading dot dropped, except for . and ..."""
    if name not in (".", "..") and name.startswith("."):
        return name[1:]
    return name


def _name_key(name: str) -> str:
    return sort_name(name).lower()


def sort_by_name(entries: Iterable[Entry]) -> list[Entry]:
    """Sort entries case-insensitively by name, ignoring a leading dot."""
    return sorted(entries, key=lambda e: _name_key(e.name))


def _mtime_ns(path: str) -> int | None:
    try:
        return os.lstat(path).st_mtime_ns
    except OSError:
        return None


def sort_by_time(entries: Iterable[Entry], dirname: str) -> list[Entry]:
    """Sort entries newest first; equal times fall back to name order."""
    entries = list(entries)
    times = {e.name: _mtime_ns(f"{dirname}/{e.name}") for e in entries}

    def compare(a: Entry, b: Entry) -> int:
        ta, tb = times[a.name], times[b.name]
        if ta is None or tb is None:
            return 0
        if ta != tb:
            return -1 if ta > tb else 1
        ka, kb = _name_key(a.name), _name_key(b.name)
        return (ka > kb) - (ka < kb)

    return sorted(entries, key=cmp_to_key(compare))


def order_entries(entries: Iterable[Entry], dirname: str, flags: Flags) -> list[Entry]:
    """Apply name order, then time order and reversal as the flags ask."""
    ordered = sort_by_name(entries)
    if flags.by_time:
        ordered = sort_by_time(ordered, dirname)
    if flags.reverse:
        ordered.reverse()
    return ordered