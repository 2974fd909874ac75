"""
search.py - Minimax search with alpha-beta pruning for Connect Four

Positions are scored only by their outcome: a win for the maximizing side is
worth WIN_SCORE minus the number of plies it took, a loss the negation, and
anything else (draws and unresolved positions at the horizon) is 0. There is
no positional evaluation of non-terminal leaves.

The board is mutated in place. Every hypothetical drop is undone before the
call that made it returns.
"""

import math
from typing import Dict, List

from c4engine.debug import debug, DebugLevel
from c4engine.game.board import Board
from c4engine.game.win_detector import check_win
from c4engine.utils import WIN_SCORE, Player, column_order


class AlphaBetaSearch:
    """
    Depth-bounded minimax search from the point of view of one player.

    Columns are scanned center first at every node, which both tightens the
    alpha-beta window early and makes the scan order deterministic.
    """

    def __init__(self, player: Player):
        """
        Args:
            player: The maximizing side
        """
        if player == Player.EMPTY:
            raise ValueError("The maximizing side must be a real player")
        self.player = player
        self.nodes_evaluated = 0
        self._orders: Dict[int, List[int]] = {}

    def _order(self, cols: int) -> List[int]:
        if cols not in self._orders:
            self._orders[cols] = column_order(cols)
        return self._orders[cols]

    def search(self, board: Board, depth: int, alpha: float, beta: float,
               maximizing: bool, ply: int = 1) -> int:
        """
        Score the position reached by the board's most recent drop.

        Args:
            board: Board to search; restored to its original state on return
            depth: Remaining plies to explore
            alpha: Best score the maximizer can already guarantee
            beta: Best score the minimizer can already guarantee
            maximizing: True if the maximizing side is to move
            ply: Pieces placed since the search root, the root move included

        Returns:
            The minimax score of the position
        """
        self.nodes_evaluated += 1

        last = board.last_move
        if last is not None:
            row, col = last
            mover = board.cell(row, col)
            if check_win(board, row, col, mover) is not None:
                if mover == self.player:
                    return WIN_SCORE - ply
                return -WIN_SCORE + ply

        if board.is_full():
            return 0

        # Horizon reached with no result
        if depth == 0:
            return 0

        to_move = self.player if maximizing else self.player.other()
        tracing = debug.is_enabled_for(DebugLevel.TRACE, "search")

        if maximizing:
            best = -math.inf
            for column in self._order(board.cols):
                if not board.is_valid_move(column):
                    continue
                with board.hypothetical(column, to_move):
                    score = self.search(board, depth - 1, alpha, beta, False, ply + 1)
                best = max(best, score)
                alpha = max(alpha, score)

                # Beta cutoff
                if beta <= alpha:
                    if tracing:
                        debug.trace(f"ply {ply}: beta cutoff after column {column}", "search")
                    break
        else:
            best = math.inf
            for column in self._order(board.cols):
                if not board.is_valid_move(column):
                    continue
                with board.hypothetical(column, to_move):
                    score = self.search(board, depth - 1, alpha, beta, True, ply + 1)
                best = min(best, score)
                beta = min(beta, score)

                # Alpha cutoff
                if beta <= alpha:
                    if tracing:
                        debug.trace(f"ply {ply}: alpha cutoff after column {column}", "search")
                    break

        return best


def search(board: Board, depth: int, alpha: float, beta: float,
           maximizing: bool, player: Player, ply: int = 1) -> int:
    """
    Run a single minimax search for player (the maximizing side).

    See AlphaBetaSearch.search for the meaning of the arguments.
    """
    if depth < 0:
        raise ValueError(f"Search depth must be non-negative, got {depth}")
    return AlphaBetaSearch(player).search(board, depth, alpha, beta, maximizing, ply)
