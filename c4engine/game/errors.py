"""
errors.py - Exceptions raised by the Connect Four engine

All of them derive from EngineError so front ends can catch one type and
re-prompt. None of them leave the board or game state modified.
"""


class EngineError(Exception):
    """Base class for recoverable engine errors."""


class InvalidColumnError(EngineError, ValueError):
    """The column is not an integer in [0, cols)."""

    def __init__(self, column, cols: int):
        super().__init__(f"Column {column!r} is not a column index (0-{cols - 1})")
        self.column = column
        self.cols = cols


class ColumnFullError(EngineError):
    """The column has no empty cell left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class GameOverError(EngineError):
    """A move was attempted after the game finished."""

    def __init__(self, result):
        super().__init__(f"Game is already over ({result.name})")
        self.result = result


class NothingToUndoError(EngineError):
    """undo_move() was called on a board with no moves."""

    def __init__(self):
        super().__init__("No moves to undo")
