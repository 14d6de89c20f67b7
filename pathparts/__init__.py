"""
Cross-platform path parsing and formatting.

This package contains:
- root_detector: Root prefix rules for POSIX and Windows paths
- path_parser: Splitting a path into root/dir/base/ext/name
- path_formatter: Rebuilding a path from those components
- dialect: The posix and win32 dialects (plus derived utilities)
- report: Corpus parse reports with round-trip checks
- excel_writer: Workbook output for reports

Usage:
    from pathparts import posix, win32
    posix.parse("/home/user/file.txt")
    win32.format({"root": "C:\\\\", "name": "index", "ext": ".html"})
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .errors import InvalidArgumentError, PathPartsError
from .parsed_path import ParsedPath, RootInfo
from .config import DialectConfig, POSIX_CONFIG, WIN32_CONFIG
from .root_detector import detect_posix_root, detect_win32_root
from .path_parser import parse_path, split_extension
from .path_formatter import format_path
from .dialect import PathDialect, DIALECTS, default, get_dialect, posix, win32

__all__ = [
    'InvalidArgumentError',
    'PathPartsError',
    'ParsedPath',
    'RootInfo',
    'DialectConfig',
    'POSIX_CONFIG',
    'WIN32_CONFIG',
    'detect_posix_root',
    'detect_win32_root',
    'parse_path',
    'split_extension',
    'format_path',
    'PathDialect',
    'DIALECTS',
    'default',
    'get_dialect',
    'posix',
    'win32',
]
