"""
minimax.py - Computer move selection for Connect Four

This module provides a MinimaxPlayer class that picks a column by scoring every
legal move with the alpha-beta search in search.py.

Ties are broken by scan order: columns are tried center first and a later column
only replaces the current best when it scores strictly higher, so equal scores
resolve toward the center.
"""

import math
import time
from typing import Dict

from c4engine.ai.search import AlphaBetaSearch
from c4engine.debug import debug
from c4engine.game.board import Board
from c4engine.utils import DEFAULT_SEARCH_DEPTH, Player, column_order


class MinimaxPlayer:
    """
    A Connect Four player that uses the minimax algorithm with alpha-beta pruning.

    Each candidate move is placed on the board and the opponent's best reply is
    searched to the configured depth.
    """

    def __init__(self, depth: int = DEFAULT_SEARCH_DEPTH):
        """
        Initialize the minimax player.

        Args:
            depth: Plies searched after the candidate move
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.nodes_evaluated = 0  # For performance tracking

    def score_moves(self, board: Board, player: Player) -> Dict[int, int]:
        """
        Score every legal column for player.

        Args:
            board: The current board; left unchanged
            player: The side choosing a move

        Returns:
            Mapping of column to score, in scan order
        """
        engine = AlphaBetaSearch(player)
        scores = {}

        for column in column_order(board.cols):
            if not board.is_valid_move(column):
                continue
            with board.hypothetical(column, player):
                # Fresh window per root column so every score is exact
                scores[column] = engine.search(board, self.depth, -math.inf, math.inf, False)

        self.nodes_evaluated = engine.nodes_evaluated
        return scores

    def get_move(self, board: Board, player: Player) -> int:
        """
        Get the best move for player.

        Args:
            board: The current game board
            player: The side choosing a move

        Returns:
            The column index of the best move; the center column if the board
            has no legal move
        """
        # The debug timers are process-wide; keep this clock local to the call
        start = time.perf_counter()
        scores = self.score_moves(board, player)
        best_column = best_move(scores, board.cols // 2)

        elapsed = time.perf_counter() - start
        debug.debug(
            f"{player!r} picks column {best_column} (score {scores.get(best_column)}, "
            f"{self.nodes_evaluated} nodes, depth {self.depth}, {elapsed:.3f}s)",
            "search"
        )
        return best_column


def best_move(scores: Dict[int, int], default: int) -> int:
    """
    Column with the strictly greatest score, earliest in scan order on ties.

    Args:
        scores: Column scores in scan order, as returned by score_moves()
        default: Column returned when scores is empty
    """
    best_score = -math.inf
    best_column = default
    for column, score in scores.items():
        if score > best_score:
            best_score = score
            best_column = column
    return best_column


def select_move(board: Board, search_depth: int = DEFAULT_SEARCH_DEPTH,
                player: Player = Player.SECOND) -> int:
    """Pick the column player should drop into on board."""
    return MinimaxPlayer(search_depth).get_move(board, player)
