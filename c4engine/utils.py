"""
utils.py - Constants, enumerations and small helpers for the Connect Four engine

This module provides the board dimensions, the player and result enumerations,
line directions, the center-first column ordering and ASCII rendering shared by
the game, search and interface layers.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
DEFAULT_SEARCH_DEPTH = 4
WIN_SCORE = 1000

Position = Tuple[int, int]
WinningLine = List[Position]


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    FIRST = 1
    SECOND = 2

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.FIRST:
            return Player.SECOND
        elif self == Player.SECOND:
            return Player.FIRST
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.FIRST:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    FIRST_WIN = auto()
    SECOND_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        if player == Player.FIRST:
            return cls.FIRST_WIN
        if player == Player.SECOND:
            return cls.SECOND_WIN
        raise ValueError(f"No win result for {player!r}")


class Direction(Enum):
    """Line directions scanned by the win detector, in scan order."""
    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)
    DIAGONAL = (1, 1)       # Top-left to bottom-right
    ANTI_DIAGONAL = (1, -1)  # Top-right to bottom-left


def column_order(cols: int = COLS) -> List[int]:
    """
    Columns ordered center first, then alternating outward, left before right.

    For a 7-column board this is [3, 2, 4, 1, 5, 0, 6].
    """
    center = cols // 2
    return sorted(range(cols), key=lambda c: (abs(c - center), c))


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Number of rows on the board
        cols: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def is_column_index(value, cols: int = COLS) -> bool:
    """True if value is an integer (not a bool) in [0, cols)."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return 0 <= value < cols


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The board grid

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"
    result = [border]

    for row in range(rows):
        cells = [str(Player(int(grid[row, col]))) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")

    result.append(border)
    result.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")

    return "\n".join(result)
