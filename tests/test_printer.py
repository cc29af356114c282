import os
import pwd
import stat
import time

from ftls.entries import Entry
from ftls.options import Flags
from ftls.printer import (
    format_entry,
    format_mtime,
    format_owner_group,
    format_permissions,
    format_size,
)


def test_permissions_directory():
    assert format_permissions(stat.S_IFDIR | 0o755) == "drwxr-xr-x"


def test_permissions_regular_file():
    assert format_permissions(stat.S_IFREG | 0o644) == "-rw-r--r--"


def test_permissions_type_characters():
    assert format_permissions(stat.S_IFLNK | 0o777)[0] == "l"
    assert format_permissions(stat.S_IFIFO)[0] == "p"
    assert format_permissions(stat.S_IFSOCK)[0] == "s"
    assert format_permissions(stat.S_IFCHR)[0] == "c"
    assert format_permissions(stat.S_IFBLK)[0] == "b"


def test_permissions_always_ten_chars():
    for mode in (0, stat.S_IFREG | 0o7777, stat.S_IFDIR):
        assert len(format_permissions(mode)) == 10


def test_size_ends_with_value_after_spaces():
    for size in (0, 7, 123, 45678):
        text = format_size(size)
        assert text.endswith(str(size))
        assert text[: -len(str(size))].strip() == ""


def test_size_width_matches_digit_count():
    assert len(format_size(1)) == len(format_size(9))
    assert len(format_size(10)) == len(format_size(99))
    assert len(format_size(0)) == len(format_size(1))


def test_size_large_has_no_padding():
    assert format_size(12345678) == "12345678"


def test_mtime_format():
    stamp = time.mktime((2021, 3, 5, 14, 7, 0, 0, 0, -1))
    assert format_mtime(stamp) == "Mar  5 14:07"


def test_owner_group_unknown_ids():
    assert format_owner_group(2**31 - 7, 2**31 - 7) == "? ?"


def test_owner_group_current_user():
    owner = format_owner_group(os.getuid(), os.getgid()).split()[0]
    assert owner == pwd.getpwuid(os.getuid()).pw_name


def test_hidden_entry_skipped(tmp_path):
    (tmp_path / ".h").write_text("x")
    assert format_entry(str(tmp_path), Entry(".h", False), Flags()) is None


def test_short_entry(tmp_path):
    assert format_entry(str(tmp_path), Entry("name", False), Flags()) == "name  "


def test_long_entry(tmp_path):
    target = tmp_path / "data"
    target.write_text("hello")
    os.chmod(target, 0o640)
    line = format_entry(str(tmp_path), Entry("data", False), Flags(long_format=True))
    assert line.startswith("-rw-r----- 1 ")
    assert line.endswith(" data\n")


def test_long_symlink_shows_target(tmp_path):
    os.symlink("somewhere", tmp_path / "link")
    line = format_entry(str(tmp_path), Entry("link", False), Flags(long_format=True))
    assert line.startswith("l")
    assert line.endswith("link -> somewhere\n")


def test_long_missing_entry(tmp_path):
    flags = Flags(long_format=True)
    assert format_entry(str(tmp_path), Entry("gone", False), flags) is None