"""
c4engine - Connect Four game engine with a minimax computer opponent

This package provides the board model, win detection, an alpha-beta minimax
search that picks the computer's move, and the turn state machine that ties
them together for one match. Front ends (the CLI and the Gymnasium
environment) call into it and render its results.
"""

from c4engine.game.rules import new_game, apply_move, computer_move

# Version number
__version__ = '0.1.0'

__all__ = ['new_game', 'apply_move', 'computer_move', '__version__']
