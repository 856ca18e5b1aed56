from __future__ import annotations


class Connect4Error(Exception):
    """Base class for everything the engine raises on purpose."""


class IllegalMoveError(Connect4Error, ValueError):
    """A move that references a full or non-existent column, or is played out of turn."""

    def __init__(self, message: str, column: int | None = None) -> None:
        super().__init__(message)
        self.column = column


class ColumnFullError(IllegalMoveError):
    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column + 1} is full.", column)


class InvalidInvocationError(Connect4Error, RuntimeError):
    """The caller asked for something that is only valid in another game phase."""
