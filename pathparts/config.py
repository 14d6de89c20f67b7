#!/usr/bin/env python3
"""
Dialect configuration values.

A dialect is nothing more than a separator set plus a root detection rule.
The parser, formatter and derived utilities take one of these values and
run the same algorithm for both POSIX and Windows paths.
"""

from dataclasses import dataclass
from typing import Callable

from .parsed_path import RootInfo
from .root_detector import (
    POSIX_SEPARATORS,
    WIN32_SEPARATORS,
    detect_posix_root,
    detect_win32_root,
)


@dataclass(frozen=True)
class DialectConfig:
    """
    Immutable description of a path dialect.

    Attributes:
        name: Dialect identifier ("posix" or "win32").
        sep: Separator written by format/join/normalize.
        separators: Every character recognized as a separator when reading.
        delimiter: Character separating entries in PATH-style lists.
        case_sensitive: Whether path comparison respects case (used by relative).
        has_devices: Whether roots can name a drive or share (used by resolve).
        detect_root: Root detection rule for the dialect.
    """
    name: str
    sep: str
    separators: str
    delimiter: str
    case_sensitive: bool
    has_devices: bool
    detect_root: Callable[[str], RootInfo]

    def is_separator(self, char: str) -> bool:
        return char in self.separators


POSIX_CONFIG = DialectConfig(
    name="posix",
    sep="/",
    separators=POSIX_SEPARATORS,
    delimiter=":",
    case_sensitive=True,
    has_devices=False,
    detect_root=detect_posix_root,
)

WIN32_CONFIG = DialectConfig(
    name="win32",
    sep="\\",
    separators=WIN32_SEPARATORS,
    delimiter=";",
    case_sensitive=False,
    has_devices=True,
    detect_root=detect_win32_root,
)
