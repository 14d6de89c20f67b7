#!/usr/bin/env python3
"""
Path parser module splitting a path string into its components.

Splits a path into:
- root (drive, UNC share, leading separator, or empty)
- dir (root plus directory segments, last separator removed)
- base (final segment, trailing separators ignored)
- ext / name (base split at its last meaningful dot)

Only trailing separator runs are dropped; redundant runs inside dir are kept
so that format() rebuilds the original string.
"""

from typing import Tuple

from .config import DialectConfig
from .errors import require_string
from .parsed_path import ParsedPath


def split_extension(base: str) -> Tuple[str, str]:
    """
    Split a base name into (name, ext).

    The extension starts at the last dot, unless everything before that dot
    is dots (or nothing), so ".", "..", ".bashrc" and "..foo" have no extension.

    Example:
        >>> split_extension("archive.tar.gz")
        ('archive.tar', '.gz')
        >>> split_extension(".bashrc")
        ('.bashrc', '')
    """
    dot = base.rfind(".")
    if dot == -1 or not base[:dot].strip("."):
        return base, ""
    return base[:dot], base[dot:]


def parse_path(path: str, config: DialectConfig) -> ParsedPath:
    """
    Parse a path string into a ParsedPath.

    Args:
        path: Path text in the dialect described by config.
        config: Dialect configuration (separators and root rule).

    Returns:
        ParsedPath whose fields are all "" for empty input.
    """
    require_string(path)
    if not path:
        return ParsedPath()

    root_info = config.detect_root(path)
    root = root_info.root
    root_end = root_info.length

    # End of the last meaningful segment, ignoring trailing separators
    end = len(path)
    while end > root_end and config.is_separator(path[end - 1]):
        end -= 1

    start = end
    while start > root_end and not config.is_separator(path[start - 1]):
        start -= 1

    base = path[start:end]
    name, ext = split_extension(base)

    if start > root_end:
        # Drop the single separator in front of base, keep anything before it
        dir_ = path[:start - 1]
    else:
        dir_ = root

    return ParsedPath(root=root, dir=dir_, base=base, ext=ext, name=name)
