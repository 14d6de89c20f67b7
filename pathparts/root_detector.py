#!/usr/bin/env python3
"""
Root detection for POSIX and Windows paths.

The root is the part of a path that cannot be relocated:
- POSIX: a run of leading "/" characters (normalized to a single "/")
- Windows: a UNC share ("\\\\server\\share\\"), a drive ("C:\\" or the
  drive-relative "C:"), or a leading separator run (normalized to one char)

Detectors only report where the root ends and how it should be written;
splitting the rest of the path is the parser's job.
"""

from .parsed_path import RootInfo

POSIX_SEPARATORS = "/"
WIN32_SEPARATORS = "\\/"


def _separator_run_end(path: str, start: int, separators: str) -> int:
    """Return the index just past the run of separators beginning at start."""
    end = start
    while end < len(path) and path[end] in separators:
        end += 1
    return end


def _segment_end(path: str, start: int, separators: str) -> int:
    """Return the index of the next separator at or after start (or len(path))."""
    end = start
    while end < len(path) and path[end] not in separators:
        end += 1
    return end


def _is_drive_letter(char: str) -> bool:
    return ("A" <= char <= "Z") or ("a" <= char <= "z")


def detect_posix_root(path: str) -> RootInfo:
    """
    Detect the root of a POSIX path.

    Examples:
        >>> detect_posix_root("///foo")
        RootInfo(length=3, root='/', is_absolute=True)
        >>> detect_posix_root("foo")
        RootInfo(length=0, root='', is_absolute=False)
    """
    length = _separator_run_end(path, 0, POSIX_SEPARATORS)
    if length == 0:
        return RootInfo()
    return RootInfo(length=length, root="/", is_absolute=True)


def _detect_unc_root(path: str) -> RootInfo:
    """Match \\\\host\\share[\\]; return an empty RootInfo when the path is not UNC."""
    host_end = _segment_end(path, 2, WIN32_SEPARATORS)
    if host_end == 2 or host_end == len(path):
        return RootInfo()

    share_start = _separator_run_end(path, host_end, WIN32_SEPARATORS)
    if share_start == len(path):
        return RootInfo()

    share_end = _segment_end(path, share_start, WIN32_SEPARATORS)
    if share_end == len(path):
        # \\server\share with nothing after it: the whole path is the root
        return RootInfo(length=share_end, root=path, is_absolute=True)

    return RootInfo(
        length=_separator_run_end(path, share_end, WIN32_SEPARATORS),
        root=path[:share_end + 1],
        is_absolute=True,
    )


def detect_win32_root(path: str) -> RootInfo:
    """
    Detect the root of a Windows path.

    Rules are tried in order: UNC share, drive letter, leading separator.
    Both "\\" and "/" count as separators.

    Examples:
        >>> detect_win32_root("C:/Windows").root
        'C:/'
        >>> detect_win32_root("C:").is_absolute
        False
    """
    if not path:
        return RootInfo()

    first = path[0]
    if first in WIN32_SEPARATORS:
        if len(path) > 1 and path[1] in WIN32_SEPARATORS:
            unc = _detect_unc_root(path)
            if unc.length:
                return unc
        return RootInfo(
            length=_separator_run_end(path, 0, WIN32_SEPARATORS),
            root=first,
            is_absolute=True,
        )

    if len(path) > 1 and path[1] == ":" and _is_drive_letter(first):
        if len(path) > 2 and path[2] in WIN32_SEPARATORS:
            return RootInfo(
                length=_separator_run_end(path, 2, WIN32_SEPARATORS),
                root=path[:3],
                is_absolute=True,
            )
        return RootInfo(length=2, root=path[:2], is_absolute=False)

    return RootInfo()
