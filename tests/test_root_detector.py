#!/usr/bin/env python3
"""
Tests for POSIX and Windows root detection.
"""

import pytest

from pathparts import RootInfo, detect_posix_root, detect_win32_root, posix, win32


class TestPosixRoot:
    """Tests for the leading-slash rule."""

    def test_no_root(self):
        assert detect_posix_root("usr/bin") == RootInfo(length=0, root="", is_absolute=False)

    def test_single_slash(self):
        assert detect_posix_root("/usr") == RootInfo(length=1, root="/", is_absolute=True)

    def test_slash_run_is_consumed_but_written_once(self):
        info = detect_posix_root("///usr")
        assert info.length == 3
        assert info.root == "/"
        assert info.is_absolute

    def test_backslash_is_not_a_separator(self):
        assert detect_posix_root("\\usr") == RootInfo()

    def test_empty(self):
        assert detect_posix_root("") == RootInfo()


class TestWin32UncRoot:
    """Tests for \\\\server\\share roots."""

    def test_share_with_trailing_separator(self):
        info = detect_win32_root("\\\\server\\share\\dir\\file")
        assert info.root == "\\\\server\\share\\"
        assert info.length == len("\\\\server\\share\\")
        assert info.is_absolute

    def test_share_without_trailing_separator(self):
        info = detect_win32_root("\\\\server\\share")
        assert info.root == "\\\\server\\share"
        assert info.length == len("\\\\server\\share")

    def test_forward_slashes(self):
        assert detect_win32_root("//server/share/x").root == "//server/share/"

    def test_redundant_separators_after_share(self):
        info = detect_win32_root("\\\\server\\share\\\\\\file")
        assert info.root == "\\\\server\\share\\"
        assert info.length == len("\\\\server\\share\\\\\\")

    def test_device_namespace_prefix(self):
        assert detect_win32_root("\\\\?\\UNC\\server\\share").root == "\\\\?\\UNC\\"

    @pytest.mark.parametrize("path", ["\\\\server", "\\\\server\\", "\\\\\\server\\share"])
    def test_incomplete_unc_falls_back_to_separator_root(self, path):
        info = detect_win32_root(path)
        assert info.root == "\\"
        assert info.is_absolute


class TestWin32DriveRoot:
    """Tests for drive letter roots."""

    def test_absolute_drive(self):
        assert detect_win32_root("C:\\Windows") == RootInfo(length=3, root="C:\\", is_absolute=True)

    def test_drive_relative(self):
        assert detect_win32_root("C:Windows") == RootInfo(length=2, root="C:", is_absolute=False)

    def test_bare_drive(self):
        assert detect_win32_root("c:") == RootInfo(length=2, root="c:", is_absolute=False)

    def test_drive_with_separator_run(self):
        info = detect_win32_root("D:\\\\\\data")
        assert info.root == "D:\\"
        assert info.length == 5

    @pytest.mark.parametrize("path", ["1:\\foo", "file:stream", ":\\foo", "\u00e9:\\foo"])
    def test_non_drive_prefixes(self, path):
        assert detect_win32_root(path) == RootInfo()


class TestWin32SeparatorRoot:
    """Tests for paths starting with a separator but no drive or share."""

    def test_backslash(self):
        assert detect_win32_root("\\foo") == RootInfo(length=1, root="\\", is_absolute=True)

    def test_forward_slash(self):
        assert detect_win32_root("/foo/bar") == RootInfo(length=1, root="/", is_absolute=True)

    def test_run_collapses(self):
        info = detect_win32_root("\\\\")
        assert info.root == "\\"
        assert info.length == 2


def test_dialect_selection_governs_root_rules():
    assert posix.detect_root("/foo").root == "/"
    assert win32.detect_root("/foo").root == "/"
    assert posix.detect_root("C:\\foo").root == ""
    assert win32.detect_root("C:\\foo").root == "C:\\"
