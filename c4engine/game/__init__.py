"""
c4engine.game - Core game mechanics for Connect Four

This package contains the board representation, win detection and
the match state machine. rules and env are imported directly by callers
to avoid a circular import with c4engine.ai.
"""

from c4engine.game.board import Board
from c4engine.game.errors import (EngineError, InvalidColumnError, ColumnFullError,
                                  GameOverError, NothingToUndoError)

__all__ = ['Board', 'EngineError', 'InvalidColumnError', 'ColumnFullError',
           'GameOverError', 'NothingToUndoError']
