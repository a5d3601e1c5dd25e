"""Exception hierarchy raised by the notation parser and the JSON codec."""
from __future__ import annotations


class BemError(Exception):
    """Base class for every error raised by :mod:`bem`."""


class NotationSyntaxError(BemError):
    """Raised when notation text does not match the grammar.

    Parameters
    ----------
    reason:
        Human readable description of what went wrong.
    line, column:
        1-based position of the offending fragment.
    fragment:
        The source text around the position, with a caret under the column.
    """

    def __init__(self, reason: str, *, line: int, column: int, fragment: str = "") -> None:
        self.reason = reason
        self.line = line
        self.column = column
        self.fragment = fragment
        super().__init__(f"{reason} (line {line}, column {column})")


class StructuralError(BemError):
    """Raised when the parse tree holds a node the model builder does not know."""


class SerializationError(BemError):
    """Raised when a block cannot be rendered to JSON text."""


class DeserializationError(BemError):
    """Raised when JSON text is malformed or does not describe a block."""

    def __init__(self, reason: str, *, field: str | None = None) -> None:
        self.reason = reason
        self.field = field
        message = f"{field}: {reason}" if field else reason
        super().__init__(message)


__all__ = [
    "BemError",
    "DeserializationError",
    "NotationSyntaxError",
    "SerializationError",
    "StructuralError",
]
