import unittest

import numpy as np

from c4engine.game.env import ConnectFourEnv
from c4engine.utils import COLS, ROWS


class TestConnectFourEnv(unittest.TestCase):
    def test_reset(self):
        env = ConnectFourEnv(depth=1)
        observation, info = env.reset(seed=0)
        self.assertEqual(observation.shape, (ROWS, COLS))
        self.assertEqual(observation.dtype, np.int8)
        self.assertTrue(np.all(observation == 0))
        self.assertEqual(info['valid_moves'], list(range(COLS)))
        self.assertTrue(env.observation_space.contains(observation))

    def test_step_plays_both_sides(self):
        env = ConnectFourEnv(depth=2)
        env.reset()
        observation, reward, terminated, truncated, info = env.step(0)
        self.assertEqual(observation[ROWS - 1, 0], 1)
        self.assertEqual(int(np.sum(observation == 2)), 1)
        self.assertEqual(reward, 0.0)
        self.assertFalse(terminated or truncated)
        self.assertIn(info['computer_move'], range(COLS))
        self.assertEqual(info['moves_made'], 2)

    def test_invalid_action_truncates_without_change(self):
        env = ConnectFourEnv(depth=1)
        env.reset()
        observation, reward, terminated, truncated, info = env.step(COLS)
        self.assertEqual(reward, env.reward_invalid_move)
        self.assertFalse(terminated)
        self.assertTrue(truncated)
        self.assertTrue(info['invalid_move'])
        self.assertTrue(np.all(observation == 0))

    def test_agent_wins(self):
        # A depth-0 computer only sees its own immediate wins, so it keeps
        # playing the center and never blocks column 0.
        env = ConnectFourEnv(depth=0)
        env.reset()
        for _ in range(3):
            _, reward, terminated, _, info = env.step(0)
            self.assertFalse(terminated)
            self.assertEqual(info['computer_move'], 3)
        _, reward, terminated, truncated, info = env.step(0)
        self.assertTrue(terminated)
        self.assertFalse(truncated)
        self.assertEqual(reward, env.reward_win)
        self.assertEqual(info['game_result'], 'FIRST_WIN')
        self.assertIsNone(info['computer_move'])
        self.assertEqual(info['winning_line'], [(5, 0), (4, 0), (3, 0), (2, 0)])
        self.assertEqual(info['valid_moves'], [])

        _, reward, _, truncated, info = env.step(1)
        self.assertTrue(truncated)
        self.assertTrue(info['invalid_move'])

    def test_agent_loses(self):
        env = ConnectFourEnv(depth=0)
        env.reset()
        for column in (0, 1, 0):
            _, _, terminated, _, _ = env.step(column)
            self.assertFalse(terminated)
        _, reward, terminated, _, info = env.step(1)
        self.assertTrue(terminated)
        self.assertEqual(reward, env.reward_lose)
        self.assertEqual(info['game_result'], 'SECOND_WIN')
        self.assertEqual(info['computer_move'], 3)

    def test_ascii_render(self):
        env = ConnectFourEnv(render_mode="ascii", depth=1)
        env.reset()
        env.step(3)
        frame = env.render()
        self.assertIn("X", frame)
        self.assertIn("O", frame)

    def test_unknown_render_mode(self):
        with self.assertRaises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")


if __name__ == '__main__':
    unittest.main()
