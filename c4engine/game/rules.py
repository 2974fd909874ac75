"""
rules.py - Turn handling for Connect Four

This module provides:
1. The match state machine: new_game(), apply_move() and computer_move()
2. ConnectFourGame, a session object used by front ends to play several
   matches in a row, either two humans or a human against the computer
"""

from typing import Dict, List, Optional

from c4engine.ai.minimax import select_move
from c4engine.debug import debug
from c4engine.game.board import Board
from c4engine.game.errors import ColumnFullError, GameOverError, InvalidColumnError
from c4engine.game.state import GameState
from c4engine.game.win_detector import check_win
from c4engine.utils import ROWS, COLS, DEFAULT_SEARCH_DEPTH, GameResult, Player, is_column_index

GAME_MODES = ("pvp", "ai")


def new_game(rows: int = ROWS, cols: int = COLS) -> GameState:
    """Start a match on an empty board with Player.FIRST to move."""
    debug.debug(f"Starting new {rows}x{cols} game", "game")
    return GameState(Board(rows, cols), Player.FIRST)


def apply_move(state: GameState, column: int) -> None:
    """
    Drop the active player's piece into column and advance the game.

    Args:
        state: The match to update
        column: Column to place a piece (0-indexed)

    Raises:
        GameOverError: the match already has a result
        InvalidColumnError: column is off the board
        ColumnFullError: column has no room

    The state is untouched when an error is raised.
    """
    if state.is_game_over():
        debug.debug(f"Rejected column {column}: game is over ({state.result.name})", "game")
        raise GameOverError(state.result)

    board = state.board
    if not is_column_index(column, board.cols):
        debug.debug(f"Rejected column {column!r}: not a column index", "game")
        raise InvalidColumnError(column, board.cols)
    if not board.is_valid_move(column):
        debug.debug(f"Rejected column {column}: full", "game")
        raise ColumnFullError(column)

    player = state.active_player
    row = board.drop(column, player)
    debug.debug(f"{player!r} plays column {column} (row {row})", "game")

    line = check_win(board, row, column, player)
    if line is not None:
        state.finish(GameResult.win_for(player), line)
        debug.info(f"{player!r} wins with {line}", "game")
    elif board.is_full():
        state.finish(GameResult.DRAW)
        debug.info("Game ends in a draw", "game")
    else:
        state.pass_turn()


def computer_move(state: GameState, depth: int = DEFAULT_SEARCH_DEPTH) -> int:
    """
    Choose a column for the active player with the minimax search.

    The caller applies the returned column with apply_move(). Calling this on a
    finished game is a programming error.
    """
    if state.is_game_over():
        raise AssertionError(f"computer_move called on a finished game ({state.result.name})")
    return select_move(state.board, depth, state.active_player)


class ConnectFourGame:
    """
    High-level Connect Four session manager.

    Keeps the current match, the game mode and a win tally for the session. In
    "ai" mode the computer plays Player.SECOND. The tally lives only as long as
    the session.
    """

    def __init__(self, mode: str = "ai", depth: int = DEFAULT_SEARCH_DEPTH,
                 rows: int = ROWS, cols: int = COLS):
        """
        Initialize a new session.

        Args:
            mode: "ai" for human vs computer, "pvp" for two humans
            depth: Search depth used for computer moves
            rows: Board rows
            cols: Board columns
        """
        if mode not in GAME_MODES:
            raise ValueError(f"Unknown game mode {mode!r}, expected one of {GAME_MODES}")
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        debug.debug(f"Initializing ConnectFourGame (mode={mode}, depth={depth})", "game")
        self.mode = mode
        self.depth = depth
        self.rows = rows
        self.cols = cols
        self.computer_player = Player.SECOND
        self.scores: Dict[Player, int] = {Player.FIRST: 0, Player.SECOND: 0}
        self.state = new_game(rows, cols)

    def reset(self) -> None:
        """Start a new match, keeping the session tally."""
        debug.debug("Resetting game", "game")
        self.state = new_game(self.rows, self.cols)

    def switch_mode(self, mode: str) -> None:
        """Change mode, start a new match and clear the tally."""
        if mode not in GAME_MODES:
            raise ValueError(f"Unknown game mode {mode!r}, expected one of {GAME_MODES}")
        self.mode = mode
        self.scores = {Player.FIRST: 0, Player.SECOND: 0}
        self.reset()

    def make_move(self, column: int) -> None:
        """
        Play column for whoever is to move.

        Raises:
            EngineError: the move was rejected; nothing changed
        """
        apply_move(self.state, column)
        winner = self.state.winner
        if winner is not None:
            self.scores[winner] += 1

    def is_computer_turn(self) -> bool:
        return (self.mode == "ai" and not self.is_game_over()
                and self.state.active_player == self.computer_player)

    def play_computer_turn(self) -> int:
        """
        Let the computer choose and play its move.

        Returns:
            The column the computer played
        """
        if not self.is_computer_turn():
            raise AssertionError("It is not the computer's turn")
        column = computer_move(self.state, self.depth)
        self.make_move(column)
        return column

    def get_board(self) -> Board:
        return self.state.board

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    def get_winner(self) -> Optional[Player]:
        return self.state.winner

    def get_current_player(self) -> Player:
        return self.state.active_player

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self.state.board.get_valid_moves()

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            String representation of the board
        """
        return self.state.board.render()
