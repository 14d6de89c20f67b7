#!/usr/bin/env python3
"""
Path dialects: one generic implementation, two configurations.

`posix` and `win32` are instances of the same PathDialect class. Each holds
nothing but an immutable DialectConfig, so both are safe to share across
threads. `default` is whichever of the two matches the host platform.
"""

import os
from typing import Iterable, Iterator, List, Optional

from .config import POSIX_CONFIG, WIN32_CONFIG, DialectConfig
from .errors import require_string
from .parsed_path import ParsedPath, RootInfo
from .path_formatter import PathParts, format_path
from .path_parser import parse_path


class PathDialect:
    """Path manipulation for a single dialect (separator set + root rule)."""

    def __init__(self, config: DialectConfig):
        self.config = config

    def __repr__(self) -> str:
        return f"PathDialect({self.config.name!r})"

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def sep(self) -> str:
        return self.config.sep

    @property
    def delimiter(self) -> str:
        return self.config.delimiter

    # ------------------------------------------------------------------
    # Core: root detection, parse, format
    # ------------------------------------------------------------------

    def detect_root(self, path: str) -> RootInfo:
        """Return the root prefix of path (length, normalized text, absoluteness)."""
        return self.config.detect_root(require_string(path))

    def parse(self, path: str) -> ParsedPath:
        """Split path into root, dir, base, ext and name."""
        return parse_path(path, self.config)

    def format(self, parts: PathParts) -> str:
        """Rebuild a path from a ParsedPath or a mapping of its fields."""
        return format_path(parts, self.config)

    # ------------------------------------------------------------------
    # Derived utilities
    # ------------------------------------------------------------------

    def dirname(self, path: str) -> str:
        return self.parse(path).dir or "."

    def basename(self, path: str, suffix: str = "") -> str:
        """
        Return the final segment of path.

        Args:
            path: Path to inspect.
            suffix: Optional suffix (e.g. ".html") stripped from the result,
                unless the result would become empty.
        """
        require_string(suffix, "suffix")
        base = self.parse(path).base
        if suffix and base != suffix and base.endswith(suffix):
            return base[:-len(suffix)]
        return base

    def extname(self, path: str) -> str:
        return self.parse(path).ext

    def is_absolute(self, path: str) -> bool:
        return self.detect_root(path).is_absolute

    def normalize(self, path: str) -> str:
        """
        Collapse redundant separators and resolve "." and ".." segments.

        A trailing separator is kept. ".." segments that would climb above an
        absolute root are dropped; relative paths keep them.

        Example:
            >>> posix.normalize("/foo/bar//baz/asdf/quux/..")
            '/foo/bar/baz/asdf'
        """
        require_string(path)
        if not path:
            return "."

        root_info = self.config.detect_root(path)
        root = self._normalize_root(root_info.root)
        if root_info.is_absolute and not self.config.is_separator(root[-1]):
            root += self.sep
        tail = path[root_info.length:]

        segments = self._collapse(self._split(tail), allow_above_root=not root_info.is_absolute)
        normalized = self.sep.join(segments)

        if not normalized and not root_info.is_absolute:
            normalized = "."
        if normalized and tail and self.config.is_separator(tail[-1]):
            normalized += self.sep

        return root + normalized

    def join(self, *paths: str) -> str:
        """Join non-empty segments with the separator and normalize the result."""
        for path in paths:
            require_string(path)

        joined = self.sep.join(path for path in paths if path)
        if not joined:
            return "."
        return self.normalize(joined)

    def resolve(self, *paths: str, cwd: Optional[str] = None) -> str:
        """
        Resolve a sequence of paths into an absolute path.

        Segments are consumed right to left until an absolute path is formed;
        cwd (defaulting to os.getcwd()) is used when none of them is absolute.
        On win32, segments rooted on a different drive or share than the first
        one seen are skipped.

        Args:
            *paths: Path segments, later ones take precedence.
            cwd: Directory to resolve against instead of the process cwd.

        Returns:
            Normalized path without a trailing separator (except a bare root).
        """
        for path in paths:
            require_string(path)
        if cwd is not None:
            require_string(cwd, "cwd")

        device = ""
        tail = ""
        absolute = False

        for path in self._resolve_candidates(paths, cwd):
            if not path:
                continue

            root_info = self.config.detect_root(path)
            path_device = self._normalize_root(root_info.root).rstrip(self.sep)

            if path_device:
                if device and path_device.lower() != device.lower():
                    continue
                if not device:
                    device = path_device

            if absolute:
                if device:
                    break
                continue

            tail = path[root_info.length:] + self.sep + tail
            absolute = root_info.is_absolute

            if absolute and (device or not self.config.has_devices):
                break

        if device and not absolute:
            # drive-relative with no cwd on that drive: anchor at the drive root
            absolute = True

        normalized = self.sep.join(self._collapse(self._split(tail), allow_above_root=not absolute))

        if absolute:
            return device + self.sep + normalized
        return normalized or "."

    def relative(self, from_path: str, to_path: str, cwd: Optional[str] = None) -> str:
        """
        Return the relative path leading from from_path to to_path.

        Both arguments are resolved first. Returns "" when they are the same
        location. On win32, paths on different devices cannot be related and
        the resolved to_path is returned as is.
        """
        require_string(from_path, "from")
        require_string(to_path, "to")
        if from_path == to_path:
            return ""

        from_resolved = self.resolve(from_path, cwd=cwd)
        to_resolved = self.resolve(to_path, cwd=cwd)
        if self._compare_key(from_resolved) == self._compare_key(to_resolved):
            return ""

        from_root = self.config.detect_root(from_resolved)
        to_root = self.config.detect_root(to_resolved)
        if self._compare_key(from_root.root) != self._compare_key(to_root.root):
            return to_resolved

        from_parts = [part for part in self._split(from_resolved[from_root.length:]) if part]
        to_parts = [part for part in self._split(to_resolved[to_root.length:]) if part]

        common = 0
        while (
            common < len(from_parts)
            and common < len(to_parts)
            and self._compare_key(from_parts[common]) == self._compare_key(to_parts[common])
        ):
            common += 1

        return self.sep.join([".."] * (len(from_parts) - common) + to_parts[common:])

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _normalize_root(self, root: str) -> str:
        """Rewrite every accepted separator in a root to the canonical one."""
        for char in self.config.separators:
            if char != self.sep:
                root = root.replace(char, self.sep)
        return root

    def _split(self, text: str) -> List[str]:
        return self._normalize_root(text).split(self.sep)

    def _compare_key(self, text: str) -> str:
        return text if self.config.case_sensitive else text.lower()

    @staticmethod
    def _collapse(segments: Iterable[str], allow_above_root: bool) -> List[str]:
        """Drop empty and "." segments and fold ".." into its parent."""
        collapsed: List[str] = []
        for segment in segments:
            if not segment or segment == ".":
                continue
            if segment == "..":
                if collapsed and collapsed[-1] != "..":
                    collapsed.pop()
                elif allow_above_root:
                    collapsed.append(segment)
                continue
            collapsed.append(segment)
        return collapsed

    @staticmethod
    def _resolve_candidates(paths: Iterable[str], cwd: Optional[str]) -> Iterator[str]:
        yield from reversed(list(paths))
        yield os.getcwd() if cwd is None else cwd


posix = PathDialect(POSIX_CONFIG)
win32 = PathDialect(WIN32_CONFIG)

DIALECTS = {
    "posix": posix,
    "win32": win32,
}

default = win32 if os.name == "nt" else posix


def get_dialect(name: str) -> PathDialect:
    """
    Look up a dialect by name ("posix", "win32" or "default").

    Raises:
        ValueError: If the name is unknown.
    """
    if name == "default":
        return default
    try:
        return DIALECTS[name]
    except KeyError:
        raise ValueError(f"Unknown path dialect '{name}'. Expected one of: default, {', '.join(DIALECTS)}") from None
