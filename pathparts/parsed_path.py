#!/usr/bin/env python3
"""
Value types produced by root detection and parsing.
"""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class RootInfo:
    """
    Root prefix detected at the start of a path.

    Attributes:
        length: Raw characters consumed by the root, including redundant separators.
        root: Normalized root text as it appears in ParsedPath.root.
        is_absolute: Whether the root anchors the path absolutely.
    """
    length: int = 0
    root: str = ""
    is_absolute: bool = False


@dataclass(frozen=True)
class ParsedPath:
    """Structured result of parsing a path into root, dir, base, ext and name."""
    root: str = ""
    dir: str = ""
    base: str = ""
    ext: str = ""
    name: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
