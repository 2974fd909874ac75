"""
state.py - Per-match game state for Connect Four
"""

from typing import Optional

import numpy as np

from c4engine.game.board import Board
from c4engine.game.errors import GameOverError
from c4engine.utils import GameResult, Player, WinningLine


class GameState:
    """
    Board, side to move and outcome of one match.

    The fields are read-only properties. Only the functions in rules.py advance
    a GameState, through pass_turn() and finish(), and both refuse to touch a
    state whose result is no longer IN_PROGRESS.
    """

    def __init__(self, board: Board, active_player: Player = Player.FIRST):
        self._board = board
        self._active_player = active_player
        self._result = GameResult.IN_PROGRESS
        self._winning_line: WinningLine = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def active_player(self) -> Player:
        return self._active_player

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def winning_line(self) -> WinningLine:
        """The four winning cells, empty unless the game was won."""
        return list(self._winning_line)

    def is_game_over(self) -> bool:
        return self._result.is_game_over()

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None if no winner yet or draw."""
        if self._result == GameResult.FIRST_WIN:
            return Player.FIRST
        if self._result == GameResult.SECOND_WIN:
            return Player.SECOND
        return None

    def pass_turn(self) -> None:
        """Hand the move to the other player."""
        if self.is_game_over():
            raise GameOverError(self._result)
        self._active_player = self._active_player.other()

    def finish(self, result: GameResult, winning_line: Optional[WinningLine] = None) -> None:
        """Record the outcome; the state is frozen afterwards."""
        if self.is_game_over():
            raise GameOverError(self._result)
        if not result.is_game_over():
            raise ValueError("finish() needs a final result")
        self._result = result
        self._winning_line = list(winning_line or [])

    def get_board_state(self) -> np.ndarray:
        """Snapshot of the grid; changes to it do not affect the game."""
        return self._board.get_state()

    def __repr__(self) -> str:
        return (f"GameState(active_player={self._active_player.name}, "
                f"result={self._result.name}, moves={len(self._board.moves_made)})")
