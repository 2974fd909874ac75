"""
win_detector.py - Line-of-four detection for Connect Four

Only lines through the cell that was just filled are examined, so each check
touches at most 4 directions x 6 cells regardless of board size.
"""

from typing import List, Optional

from c4engine.debug import debug, DebugLevel
from c4engine.game.board import Board
from c4engine.utils import CONNECT_N, Direction, Player, Position, WinningLine, is_valid_position


def _walk(board: Board, row: int, col: int, dr: int, dc: int, value: int) -> List[Position]:
    """Collect contiguous cells holding value, stepping (dr, dc) from (row, col)."""
    cells = []
    for step in range(1, CONNECT_N):
        r, c = row + dr * step, col + dc * step
        if not is_valid_position(r, c, board.rows, board.cols) or board.grid[r, c] != value:
            break
        cells.append((r, c))
    return cells


def check_win(board: Board, row: int, col: int, player: Player) -> Optional[WinningLine]:
    """
    Check whether the piece at (row, col) completes a line for player.

    Directions are tried in the order horizontal, vertical, diagonal,
    anti-diagonal and the first one with a run of at least four wins. The run
    is ordered from the far end of the positive walk back through the placed
    cell, and only its first four cells are returned.

    Args:
        board: The board after the drop
        row: Row of the placed piece
        col: Column of the placed piece
        player: Owner of the placed piece

    Returns:
        The four winning positions, or None if no line is made
    """
    value = player.value
    if board.grid[row, col] != value:
        return None

    for direction in Direction:
        dr, dc = direction.value
        forward = _walk(board, row, col, dr, dc, value)
        backward = _walk(board, row, col, -dr, -dc, value)
        run = forward[::-1] + [(row, col)] + backward
        if len(run) >= CONNECT_N:
            line = run[:CONNECT_N]
            if debug.is_enabled_for(DebugLevel.TRACE, "win"):
                debug.trace(f"{player!r} connects {direction.name.lower()} at {line}", "win")
            return line

    return None


def is_winning_move(board: Board, row: int, col: int) -> bool:
    """True if the occupant of (row, col) has a line of four through it."""
    occupant = board.cell(row, col)
    if occupant == Player.EMPTY:
        return False
    return check_win(board, row, col, occupant) is not None
