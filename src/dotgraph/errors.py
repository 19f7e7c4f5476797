"""Exceptions raised while parsing and querying graphs."""

from __future__ import annotations


class DotSyntaxError(ValueError):
    """A mandatory grammar element did not match. Parsing is aborted."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        self.message = message
        self.line = line
        self.column = column
        if line:
            super().__init__(f"line {line}, column {column}: {message}")
        else:
            super().__init__(message)


class AttributeNotFoundError(LookupError):
    """The requested vertex/edge attribute was never set."""


class CoercionError(ValueError):
    """An attribute value is not numeric where a number is required."""
