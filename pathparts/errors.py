#!/usr/bin/env python3
"""
Exceptions raised by pathparts.

Path text itself is never rejected: any string is a valid path. The only
failure mode is handing the API something that is not a string (or, for
format, not a mapping of strings).
"""

from typing import Any


class PathPartsError(Exception):
    """Base class for pathparts errors."""


class InvalidArgumentError(PathPartsError, TypeError):
    """Raised when an argument has the wrong type."""

    def __init__(self, argument: str, expected: str, received: Any):
        self.argument = argument
        self.expected = expected
        self.received_type = type(received).__name__
        super().__init__(
            f'The "{argument}" argument must be of type {expected}. '
            f"Received type {self.received_type}"
        )


def require_string(value: Any, argument: str = "path") -> str:
    """Return value unchanged if it is a str, raise InvalidArgumentError otherwise."""
    if not isinstance(value, str):
        raise InvalidArgumentError(argument, "str", value)
    return value
