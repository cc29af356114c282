"""Command-line option flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass
class Flags:
    """Listing options selected on the command line."""

    long_format: bool = False
    recursive: bool = False
    show_all: bool = False
    reverse: bool = False
    by_time: bool = False

    def update_from(self, arg: str) -> None:
        """Turn on every option whose letter appears in ``arg``."""
        if "l" in arg:
            self.long_format = True
        if "R" in arg:
            self.recursive = True
        if "a" in arg:
            self.show_all = True
        if "r" in arg:
            self.reverse = True
        if "t" in arg:
            self.by_time = True


def parse_flags(argv: Iterable[str]) -> Flags:
    """Collect flags from every argument that starts with a dash."""
    flags = Flags()
    for arg in argv:
        if arg.startswith("-"):
            flags.update_from(arg)
    return flags