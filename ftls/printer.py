"""Formatting of single directory entries."""

from __future__ import annotations

import grp
import os
import pwd
import stat
import time

from ftls.entries import Entry, is_visible
from ftls.options import Flags

_TYPE_CHARS = (
    (stat.S_ISDIR, "d"),
    (stat.S_ISLNK, "l"),
    (stat.S_ISCHR, "c"),
    (stat.S_ISBLK, "b"),
    (stat.S_ISFIFO, "p"),
    (stat.S_ISSOCK, "s"),
)

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def format_permissions(mode: int) -> str:
    """Render a file mode as the ten-character type and permission string."""
    kind = next((char for test, char in _TYPE_CHARS if test(mode)), "-")
    bits = "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)
    return kind + bits


def format_size(size: int) -> str:
    """Right-align a size with one space per missing digit below eight."""
    width = max(size, 1)
    padding = ""
    while width < 9999999:
        padding += " "
        width *= 10
    return f"{padding}{size}"


def format_mtime(mtime: float) -> str:
    """Render a timestamp as month, day and time of day."""
    return time.ctime(mtime)[4:16]


def format_owner_group(uid: int, gid: int) -> str:
    """Return owner and group names, with ``?`` for unknown ids."""
    try:
        owner = pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        owner = "?"
    try:
        group = grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        group = "?"
    return f"{owner} {group}"


def format_entry(parent: str, entry: Entry, flags: Flags) -> str | None:
    """Render one entry, or return None when it is hidden or cannot be read."""
    if not is_visible(entry.name, flags):
        return None
    if not flags.long_format:
        return f"{entry.name}  "
    path = f"{parent}/{entry.name}"
    try:
        st = os.lstat(path)
    except OSError:
        return None
    line = (
        f"{format_permissions(st.st_mode)} "
        f"{st.st_nlink} "
        f"{format_owner_group(st.st_uid, st.st_gid)} "
        f"{format_size(st.st_size)} "
        f"{format_mtime(st.st_mtime)} "
        f"{entry.name}"
    )
    if stat.S_ISLNK(st.st_mode):
        try:
            target = os.readlink(path)
        except OSError:
            target = ""
        if target:
            line += f" -> {target}"
    return line + "\n"