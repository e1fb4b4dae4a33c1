"""Sliding tile game environment keeping a game state between moves."""

import logging

from numpy import ndarray
from numpy.random import default_rng

from tilemerge.config import GameConfig
from tilemerge.core.board import Board
from tilemerge.core.direction import Direction
from tilemerge.core.gamemove import is_done, legal_directions
from tilemerge.core.spawn import fill_cells
from tilemerge.envs.state import GameState, Intent, MoveDirection, update_state
from tilemerge.utils.grid import board_to_array, render

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    Sliding tile game environment.

    This class holds the current ``GameState`` and a random generator, deals the initial tiles
    and forwards every move to the intent dispatcher.
    """

    # ##: All Actions.
    ACTIONS = {
        'left': Direction.LEFT,
        'up': Direction.UP,
        'right': Direction.RIGHT,
        'down': Direction.DOWN,
    }

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the game.

        Parameters
        ----------
        config : GameConfig, optional
            Grid size, number of initial tiles, spawn values and seed (default is ``GameConfig()``).
        """
        self.config = config if config is not None else GameConfig()
        self.size = self.config.size
        self._rng = default_rng(self.config.seed)
        self._state = GameState(Board(size=self.size))

        self.reset(seed=self.config.seed)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        """The current board."""
        return self._state.board

    @property
    def observation(self) -> ndarray:
        """
        Get the current board as a dense grid.

        Returns
        -------
        ndarray
            Array of shape (size, size) indexed as ``grid[y, x]``, zero for empty cells.
        """
        return board_to_array(self._state.board)

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the board is full and no direction changes it, False otherwise.
        """
        return is_done(self._state.board)

    def legal_directions(self) -> list[Direction]:
        return legal_directions(self._state.board)

    def reset(self, seed: int | None = None) -> Board:
        """
        Start a new game on an empty board with ``config.initial_tiles`` random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the environment generator; the current generator is kept when None.

        Returns
        -------
        Board
            The new board.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        board = fill_cells(
            Board(size=self.size), self.config.initial_tiles, rng=self._rng, values=self.config.spawn_values
        )
        self._state = GameState(board)
        _logger.debug('New game with %d tiles', len(board))
        return board

    def dispatch(self, intent: Intent) -> GameState:
        """
        Apply an intent to the current state.

        Parameters
        ----------
        intent : Intent
            What the player asked for.

        Returns
        -------
        GameState
            The new current state.

        Raises
        ------
        UnrecognizedIntent
            If the dispatcher does not handle this kind of intent; the state is left unchanged.
        """
        self._state = update_state(self._state, intent, self._rng, self.config.spawn_values)
        return self._state

    def step(self, direction: Direction | str) -> tuple[Board, bool]:
        """
        Slide the board in a direction.

        Parameters
        ----------
        direction : Direction | str
            The direction, or its name (``'up'``, ``'LEFT'``...).

        Returns
        -------
        tuple[Board, bool]
            A tuple containing:
            - The updated board (Board)
            - Whether the game has finished after this move (bool)

        Notes
        -----
        A move that changes nothing still spawns a tile when a cell is free.
        """
        state = self.dispatch(MoveDirection(direction))
        return state.board, self.is_finished

    def render(self) -> str:
        """Text rendering of the current board."""
        return render(self._state.board)
