#!/usr/bin/env python3
"""
Rebuild a path string from its components.

format_path is the inverse of parse_path: it concatenates fields following a
fixed precedence table and performs no validation of their contents.
"""

from collections.abc import Mapping
from typing import Any, Union

from .config import DialectConfig
from .errors import InvalidArgumentError
from .parsed_path import ParsedPath

PathParts = Union[ParsedPath, Mapping]

_FIELDS = ("root", "dir", "base", "ext", "name")


def _read_fields(parts: Any) -> dict:
    """Return the recognized fields as strings, "" for missing or None values."""
    if isinstance(parts, ParsedPath):
        return parts.to_dict()
    if not isinstance(parts, Mapping):
        raise InvalidArgumentError("pathObject", "Mapping or ParsedPath", parts)

    fields = {}
    for field in _FIELDS:
        value = parts.get(field)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise InvalidArgumentError(f"pathObject.{field}", "str", value)
        fields[field] = value
    return fields


def format_path(parts: PathParts, config: DialectConfig) -> str:
    """
    Build a path from root/dir/base/ext/name.

    Precedence:
    - dir wins over root
    - base wins over name + ext
    - sep is placed between dir and base unless dir is a root on its own
      (the root field, or a complete root ending in a separator such as "/")

    Example:
        >>> format_path({"dir": "some/dir", "name": "index", "ext": ".html"}, POSIX_CONFIG)
        'some/dir/index.html'
        >>> format_path({"root": "/", "base": "etc"}, POSIX_CONFIG)
        '/etc'
    """
    fields = _read_fields(parts)

    directory = fields["dir"] or fields["root"]
    base = fields["base"] or fields["name"] + fields["ext"]

    if not directory:
        return base
    if directory == fields["root"] or _is_bare_root(directory, config):
        return directory + base
    return directory + config.sep + base


def _is_bare_root(directory: str, config: DialectConfig) -> bool:
    """True when directory is nothing but a root that already ends in a separator."""
    if not config.is_separator(directory[-1]):
        return False
    return config.detect_root(directory).length == len(directory)
