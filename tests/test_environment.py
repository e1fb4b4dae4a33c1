"""
Tests for the game state, the intent dispatcher and the game environment.

Tests cover intent dispatch, failure on unhandled intents, seeding, game termination
and integration between the TwentyFortyEight class and the core engine.
"""

from dataclasses import dataclass
from unittest import TestCase, main

import numpy as np

from tilemerge.config import GameConfig
from tilemerge.core.board import Board
from tilemerge.core.direction import Direction
from tilemerge.core.exceptions import UnrecognizedDirection, UnrecognizedIntent
from tilemerge.envs.state import GameState, Intent, MoveDirection, update_state
from tilemerge.envs.twentyfortyeight import TwentyFortyEight
from tilemerge.utils.grid import board_from_array

FULL_GRID = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])


@dataclass(frozen=True)
class Undo(Intent):
    """An intent the dispatcher does not implement."""


class TestDirection(TestCase):
    """Test direction parsing."""

    def test_parse_names(self):
        """Values and names, in any case, map to directions."""
        self.assertIs(Direction.parse('up'), Direction.UP)
        self.assertIs(Direction.parse('LEFT'), Direction.LEFT)
        self.assertIs(Direction.parse(' Down '), Direction.DOWN)
        self.assertIs(Direction.parse(Direction.RIGHT), Direction.RIGHT)

    def test_parse_unknown(self):
        """Unknown names and non-strings raise."""
        for value in ('north', '', 3, None):
            with self.assertRaises(UnrecognizedDirection):
                Direction.parse(value)


class TestDispatcher(TestCase):
    """Test update_state."""

    def test_move_intent_replaces_board(self):
        """A move intent replaces the board and counts the move."""
        state = GameState(Board.from_mapping({(0, 0): 2, (0, 1): 2}))
        next_state = update_state(state, MoveDirection(Direction.UP), rng=np.random.default_rng(0))

        self.assertEqual(next_state.moves, 1)
        self.assertEqual(next_state.board.value_at(0, 0), 4)
        self.assertEqual(len(next_state.board), 2)

        # ##>: Original state untouched.
        self.assertEqual(state.moves, 0)
        self.assertEqual(len(state.board), 2)
        self.assertEqual(state.board.value_at(0, 0), 2)

    def test_move_intent_accepts_names(self):
        """MoveDirection parses direction names."""
        self.assertIs(MoveDirection('right').direction, Direction.RIGHT)
        with self.assertRaises(UnrecognizedDirection):
            MoveDirection('sideways')

    def test_unhandled_intent_raises(self):
        """Any other intent kind fails and names the intent."""
        with self.assertRaises(UnrecognizedIntent) as context:
            update_state(GameState(), Undo())
        self.assertIn('Undo', str(context.exception))

    def test_non_intent_raises(self):
        """Raw values are not intents."""
        with self.assertRaises(UnrecognizedIntent):
            update_state(GameState(), 'up')


class TestEnvironmentInterface(TestCase):
    """Test TwentyFortyEight class API and state management."""

    def setUp(self):
        """Initialize fresh environment before each test."""
        self.env = TwentyFortyEight()

    def test_reset_state_initialization(self):
        """Reset deals exactly 2 tiles of value 2 or 4."""
        board = self.env.reset()

        # ##>: Exactly 2 tiles after reset.
        self.assertEqual(len(board), 2)
        self.assertTrue(all(tile.value in (2, 4) for tile in board))

        # ##>: State restarts.
        self.assertEqual(self.env.state.moves, 0)
        self.assertFalse(self.env.is_finished)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        board1 = self.env.reset(seed=42)
        board2 = self.env.reset(seed=42)
        self.assertEqual(board1, board2)

    def test_config_seed_reproducibility(self):
        """Two environments with the same seeded config play the same game."""
        first = TwentyFortyEight(GameConfig(seed=7))
        second = TwentyFortyEight(GameConfig(seed=7))
        for direction in ('up', 'left', 'down', 'right'):
            first.step(direction)
            second.step(direction)
        self.assertEqual(first.board, second.board)

    def test_step_return_signature(self):
        """Step returns (board, done)."""
        board, done = self.env.step(Direction.LEFT)
        self.assertIsInstance(board, Board)
        self.assertIsInstance(done, bool)
        self.assertEqual(self.env.state.moves, 1)

    def test_observation_matches_board(self):
        """Observation is the dense grid of the current board."""
        obs = self.env.observation
        self.assertEqual(obs.shape, (4, 4))
        self.assertEqual(np.count_nonzero(obs), len(self.env.board))

    def test_custom_config(self):
        """Size, initial tiles and spawn values follow the configuration."""
        env = TwentyFortyEight(GameConfig(size=3, initial_tiles=4, spawn_values=(8,), seed=1))
        self.assertEqual(env.board.size, 3)
        self.assertEqual(len(env.board), 4)
        self.assertTrue(all(tile.value == 8 for tile in env.board))

    def test_unhandled_intent_keeps_state(self):
        """A failing dispatch leaves the current state in place."""
        before = self.env.state
        with self.assertRaises(UnrecognizedIntent):
            self.env.dispatch(Undo())
        self.assertIs(self.env.state, before)

    def test_render(self):
        """Rendering has one line per row."""
        self.assertEqual(len(self.env.render().splitlines()), 4)


class TestGameTermination(TestCase):
    """Test game over detection through the environment."""

    def test_full_board_no_merges_is_finished(self):
        """Game ends when board full and no equal neighbours."""
        env = TwentyFortyEight()
        env._state = GameState(board_from_array(FULL_GRID))
        self.assertTrue(env.is_finished)
        self.assertEqual(env.legal_directions(), [])

        # ##>: Moving anyway keeps the same board.
        board, done = env.step('up')
        self.assertEqual(board, board_from_array(FULL_GRID))
        self.assertTrue(done)

    def test_game_reaches_termination(self):
        """Game eventually terminates when playing legal moves."""
        env = TwentyFortyEight(GameConfig(seed=42))

        max_steps = 5000
        for step in range(max_steps):
            legal = env.legal_directions()
            if not legal:
                break
            _, done = env.step(legal[step % len(legal)])
            if done:
                break

        self.assertTrue(env.is_finished)
        self.assertEqual(len(env.board), 16)


if __name__ == '__main__':
    main()
