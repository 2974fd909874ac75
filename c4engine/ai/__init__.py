"""
c4engine/ai/__init__.py - Computer opponent for Connect Four

search holds the alpha-beta minimax search; minimax wraps it with
center-first move ordering and tie-breaking.
"""

__all__ = ['AlphaBetaSearch', 'MinimaxPlayer', 'search', 'select_move']

from c4engine.ai.search import AlphaBetaSearch, search
from c4engine.ai.minimax import MinimaxPlayer, select_move
