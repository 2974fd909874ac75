"""
env.py - Gymnasium environment for playing Connect Four against the engine

The agent always plays Player.FIRST. After each legal agent move the minimax
computer answers as Player.SECOND, so one step covers a full round.
"""

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from c4engine.debug import debug
from c4engine.game.rules import new_game, apply_move, computer_move
from c4engine.utils import ROWS, COLS, DEFAULT_SEARCH_DEPTH, GameResult


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the raw grid (0 empty, 1 agent, 2 computer). An illegal
    action leaves the game unchanged and ends the episode as truncated.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, depth: int = DEFAULT_SEARCH_DEPTH,
                 rows: int = ROWS, cols: int = COLS):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: "ascii", "human" or None
            depth: Search depth of the computer opponent
            rows: Board rows
            cols: Board columns
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode {render_mode!r}")
        debug.debug("Initializing ConnectFourEnv", "env")

        self.rows = rows
        self.cols = cols
        self.depth = depth
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(cols)
        self.observation_space = spaces.Box(low=0, high=2, shape=(rows, cols), dtype=np.int8)

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.0
        self.reward_invalid_move = -0.5

        self.state = new_game(rows, cols)
        self._computer_column: Optional[int] = None

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment to an empty board.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.state = new_game(self.rows, self.cols)
        self._computer_column = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Play the agent's column, then the computer's reply.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        action = int(action)
        debug.debug(f"Environment step with action {action}", "env")

        if self.state.is_game_over() or not self.state.board.is_valid_move(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self._computer_column = None
        apply_move(self.state, action)

        if not self.state.is_game_over():
            self._computer_column = computer_move(self.state, self.depth)
            apply_move(self.state, self._computer_column)

        reward = 0.0
        terminated = self.state.is_game_over()
        if self.state.result == GameResult.FIRST_WIN:
            reward = self.reward_win
        elif self.state.result == GameResult.SECOND_WIN:
            reward = self.reward_lose
        elif self.state.result == GameResult.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode over: {self.state.result.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.

        Returns:
            The ASCII board for "ascii", otherwise None
        """
        if self.render_mode == "ascii":
            return self.state.board.render()
        if self.render_mode == "human":
            print(self.state.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.state.board.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = [] if self.state.is_game_over() else self.state.board.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'current_player': self.state.active_player.value,
            'game_result': self.state.result.name,
            'moves_made': len(self.state.board.moves_made),
            'winning_line': list(self.state.winning_line),
            'last_move': self.state.board.last_move,
            'computer_move': self._computer_column,
        }
