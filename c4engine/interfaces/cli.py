"""
cli.py - Command-line interface for the Connect Four engine

This module provides a CLI for playing against the computer (or another
person), analyzing a position and benchmarking the move search.
"""

import argparse
import random
import sys
import time
from typing import Dict, List, Optional, Tuple

from c4engine.ai.minimax import MinimaxPlayer, best_move
from c4engine.debug import debug, DebugLevel
from c4engine.game.board import Board
from c4engine.game.errors import EngineError
from c4engine.game.rules import ConnectFourGame, GAME_MODES
from c4engine.game.win_detector import is_winning_move
from c4engine.utils import COLS, DEFAULT_SEARCH_DEPTH, Player

QUIT = -1
RESTART = -2


def parse_moves(moves: str) -> List[int]:
    """Parse a comma-separated list of columns such as "3,3,4"."""
    if not moves.strip():
        return []
    try:
        return [int(part) for part in moves.split(',')]
    except ValueError:
        raise ValueError(f"Moves must be comma-separated column numbers, got {moves!r}")


class SimpleCLI:
    """Simple command-line interface for the Connect Four engine."""

    def __init__(self):
        """Initialize the CLI."""
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four engine CLI')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (ignored with --debug)')
        parser.add_argument('--log-file', default=None, help='Also write log records to this file')
        parser.add_argument('--debug-components', default=None,
                            help='Comma-separated components to log, e.g. search,game')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--mode', choices=GAME_MODES, default='ai',
                                 help='ai: you against the computer, pvp: two players')
        play_parser.add_argument('--depth', type=int, default=DEFAULT_SEARCH_DEPTH,
                                 help='Computer search depth')
        play_parser.add_argument('--delay', type=float, default=0.5,
                                 help='Seconds to pause before the computer moves')

        analyze_parser = subparsers.add_parser('analyze', help='Score the moves of a position')
        analyze_parser.add_argument('--moves', default='',
                                    help='Comma-separated columns played so far, e.g. 3,3,4')
        analyze_parser.add_argument('--depth', type=int, default=DEFAULT_SEARCH_DEPTH,
                                    help='Search depth')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark move selection')
        benchmark_parser.add_argument('--iterations', type=int, default=20,
                                      help='Number of positions to search')
        benchmark_parser.add_argument('--depth', type=int, default=DEFAULT_SEARCH_DEPTH,
                                      help='Search depth')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Random seed for position generation')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)
        if self.args.debug_components:
            debug.configure(components=self.args.debug_components.split(','))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        depth = getattr(self.args, 'depth', DEFAULT_SEARCH_DEPTH)
        if depth < 0:
            print("Depth must be non-negative.")
            return 2

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'analyze':
            try:
                moves = parse_moves(self.args.moves)
                self.analyze(moves, depth)
            except (ValueError, EngineError) as e:
                print(f"Error loading position: {e}")
                return 1
        elif self.args.command == 'benchmark':
            self.benchmark(self.args.iterations, depth, self.args.seed)
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self) -> None:
        """Play Connect Four interactively."""
        self.game = ConnectFourGame(mode=self.args.mode, depth=self.args.depth)
        print("Starting a new Connect Four game!")
        print(f"Enter column number (0-{COLS - 1}) to make a move.")
        print("Other commands: 'q' to quit, 'r' to restart.")
        print(self.game.render())

        while True:
            while not self.game.is_game_over():
                if self.game.is_computer_turn():
                    print("Computer is thinking...")
                    time.sleep(self.args.delay)
                    column = self.game.play_computer_turn()
                    print(f"Computer plays column {column}")
                    print(self.game.render())
                    continue

                move = self.get_human_move()
                if move is None:
                    continue
                if move == QUIT:
                    print("Quitting game.")
                    return
                if move == RESTART:
                    self.game.reset()
                    print("Game restarted.")
                    print(self.game.render())
                    continue

                try:
                    self.game.make_move(move)
                except EngineError as e:
                    print(f"Invalid move: {e}")
                    continue
                print(self.game.render())

            self.announce_result()
            again = input("Play again? (y/n): ").strip().lower()
            if again != 'y':
                return
            self.game.reset()
            print(self.game.render())

    def announce_result(self) -> None:
        print("Game over!")
        winner = self.game.get_winner()
        if winner is None:
            print("It's a draw!")
        elif self.game.mode == 'ai':
            if winner == self.game.computer_player:
                print("Computer wins! Better luck next time.")
            else:
                print("You win! Congratulations!")
        else:
            print(f"Player {winner} wins!")
        if winner is not None:
            print(f"Winning line: {self.game.state.winning_line}")
        print(f"Score - X: {self.game.scores[Player.FIRST]}  O: {self.game.scores[Player.SECOND]}")

    def get_human_move(self) -> Optional[int]:
        """
        Get a move from human player input.

        Returns:
            Column index, or special command code, or None if invalid input
        """
        player = self.game.get_current_player()
        user_input = input(f"Player {player} move (columns 0-{COLS - 1}, q/r): ").strip().lower()

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or special command.")
            return None

        # Negative numbers would collide with the command codes
        if move < 0:
            print(f"Column must be between 0 and {COLS - 1}.")
            return None
        return move

    def analyze(self, moves: List[int], depth: int) -> Tuple[int, Dict[int, int]]:
        """
        Replay moves and score every reply for the side to move.

        Returns:
            The chosen column and the score of each legal column
        """
        board = Board.from_moves(moves)
        player = Player.FIRST if len(moves) % 2 == 0 else Player.SECOND

        print("Position:")
        print(board.render())
        if not board.get_valid_moves():
            print("Board is full")
            return board.cols // 2, {}

        engine = MinimaxPlayer(depth)
        scores = engine.score_moves(board, player)
        column = best_move(scores, board.cols // 2)

        print(f"\nPlayer {player} to move, depth {depth}")
        for col in sorted(scores):
            print(f"  column {col}: {scores[col]:+d}")
        print(f"Best move: column {column} ({engine.nodes_evaluated} nodes searched)")
        return column, scores

    def benchmark(self, iterations: int, depth: int, seed: Optional[int] = None) -> List[float]:
        """Time move selection on random mid-game positions."""
        print(f"Running benchmark with {iterations} positions at depth {depth}...")
        rng = random.Random(seed)
        engine = MinimaxPlayer(depth)
        timings = []
        total_nodes = 0

        for _ in range(iterations):
            board, player = self._random_position(rng)
            if not board.get_valid_moves():
                continue
            debug.start_timer("benchmark_move")
            engine.get_move(board, player)
            elapsed = debug.end_timer("benchmark_move", "cli")
            if elapsed is not None:
                timings.append(elapsed)
            total_nodes += engine.nodes_evaluated

        if not timings:
            print("No positions searched.")
            return timings

        total = sum(timings)
        print(f"Searched {len(timings)} positions: {total:.3f} seconds total, "
              f"{total / len(timings) * 1000:.1f} ms per move, "
              f"{total_nodes / len(timings):.0f} nodes per move")
        return timings

    def _random_position(self, rng: random.Random) -> Tuple[Board, Player]:
        """Play random legal moves, stopping before any move that would win."""
        board = Board()
        player = Player.FIRST
        for _ in range(rng.randint(0, 16)):
            valid = board.get_valid_moves()
            column = rng.choice(valid)
            row = board.drop(column, player)
            if is_winning_move(board, row, column):
                board.undo_move()
                break
            player = player.other()
        return board, player


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
