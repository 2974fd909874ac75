"""
board.py - Board representation for Connect Four

This module implements the Board class which holds the grid, drops pieces under
gravity and undoes them in strict LIFO order. Win detection lives in
win_detector.py and turn management in rules.py; the board itself only knows
about cells.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

import numpy as np

from c4engine.debug import debug, DebugLevel
from c4engine.game.errors import ColumnFullError, InvalidColumnError, NothingToUndoError
from c4engine.utils import ROWS, COLS, Player, Position, is_column_index, render_board_ascii


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the top of the board. Pieces are always gravity packed: an occupied
    cell has only occupied cells below it. The only way to clear a cell is
    undo_move(), which removes the most recent drop.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """Initialize an empty board."""
        if rows < 1 or cols < 1:
            raise ValueError(f"Board needs at least one row and column, got {rows}x{cols}")
        debug.debug(f"Initializing new {rows}x{cols} Board", "board")
        self.rows = rows
        self.cols = cols
        self.reset()

    @classmethod
    def from_moves(cls, columns: Iterable[int], rows: int = ROWS, cols: int = COLS) -> 'Board':
        """
        Build a board by dropping pieces into the given columns, alternating
        players and starting with Player.FIRST.
        """
        board = cls(rows, cols)
        player = Player.FIRST
        for column in columns:
            board.drop(column, player)
            player = player.other()
        return board

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.zeros((self.rows, self.cols), dtype=int)
        self.moves_made: List[Position] = []

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same state
        """
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        new_board.moves_made = list(self.moves_made)
        return new_board

    @property
    def last_move(self) -> Optional[Position]:
        """The (row, column) of the most recent drop, or None on an empty board."""
        return self.moves_made[-1] if self.moves_made else None

    def _check_column(self, column: int):
        if not is_column_index(column, self.cols):
            debug.debug(f"Invalid column {column!r}", "board")
            raise InvalidColumnError(column, self.cols)

    def cell(self, row: int, column: int) -> Player:
        """Return the occupant of a cell (Player.EMPTY when empty)."""
        return Player(int(self.grid[row, column]))

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into this column would land.

        Args:
            column: The column to inspect (0-indexed)

        Returns:
            The highest-index empty row in the column, or None if it is full
        """
        self._check_column(column)
        empty = Player.EMPTY.value
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == empty:
                return row
        return None

    def is_valid_move(self, column: int) -> bool:
        """True if the column is on the board and has room."""
        return 0 <= column < self.cols and self.grid[0, column] == Player.EMPTY.value

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns that still accept a piece.

        Returns:
            List of valid column indices in ascending order
        """
        return [col for col in range(self.cols) if self.grid[0, col] == Player.EMPTY.value]

    def drop(self, column: int, player: Player) -> int:
        """
        Place a piece for player in the specified column.

        Args:
            column: The column to place a piece (0-indexed)
            player: Player.FIRST or Player.SECOND

        Returns:
            The row the piece landed in

        Raises:
            InvalidColumnError: column is off the board
            ColumnFullError: column has no room; the board is unchanged
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot drop an empty piece")

        row = self.lowest_empty_row(column)
        if row is None:
            debug.debug(f"Column {column} is full", "board")
            raise ColumnFullError(column)

        self.grid[row, column] = player.value
        self.moves_made.append((row, column))
        if debug.is_enabled_for(DebugLevel.TRACE, "board"):
            debug.trace(f"{player!r} placed at ({row}, {column})", "board")
        return row

    def undo_move(self) -> Position:
        """
        Remove the most recently dropped piece.

        Returns:
            The (row, column) that was cleared

        Raises:
            NothingToUndoError: the board is empty
        """
        if not self.moves_made:
            raise NothingToUndoError()

        row, column = self.moves_made.pop()
        self.grid[row, column] = Player.EMPTY.value
        if debug.is_enabled_for(DebugLevel.TRACE, "board"):
            debug.trace(f"Undid ({row}, {column})", "board")
        return row, column

    @contextmanager
    def hypothetical(self, column: int, player: Player) -> Iterator[int]:
        """
        Drop a piece for the duration of a with-block and undo it on exit.

        Yields:
            The row the piece landed in
        """
        row = self.drop(column, player)
        try:
            yield row
        finally:
            self.undo_move()

    def is_full(self) -> bool:
        """True when the top row has no empty cell."""
        return bool(np.all(self.grid[0] != Player.EMPTY.value))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array representing the board (a copy)
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, moves={len(self.moves_made)})"
