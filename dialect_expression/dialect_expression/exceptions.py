"""Exceptions raised by dialect_expression."""

from __future__ import annotations


class ExpressionError(Exception):
    """Base exception for all dialect_expression errors."""


class MissingKeyError(ExpressionError, KeyError):
    """A container key was read before it was set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The key '{name}' does not exist in the container.")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class UnrecognizedPlatformError(ExpressionError, ValueError):
    """A database platform does not map to any known driver family."""
