"""
Game state and intent dispatcher.

The surrounding game turns user input into intents; ``update_state`` maps each intent to the next
state. Moving in a direction is the only intent handled here.
"""

import logging
from dataclasses import dataclass, field, replace

from numpy.random import Generator

from tilemerge.core.board import Board
from tilemerge.core.direction import Direction
from tilemerge.core.exceptions import UnrecognizedIntent
from tilemerge.core.gameboard import move_direction
from tilemerge.core.spawn import SPAWN_VALUES

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """
    Everything the game keeps between two intents.

    The engine only reads and replaces ``board``; ``moves`` counts the intents applied so far.
    """

    board: Board = field(default_factory=Board)
    moves: int = 0


class Intent:
    """Base class of the intents sent by the surrounding game."""


@dataclass(frozen=True)
class MoveDirection(Intent):
    """Slide every tile of the board in ``direction``."""

    direction: Direction

    def __post_init__(self):
        object.__setattr__(self, 'direction', Direction.parse(self.direction))


def update_state(
    state: GameState, intent: Intent, rng: Generator | None = None, values: tuple[int, ...] = SPAWN_VALUES
) -> GameState:
    """
    Apply an intent to the game state.

    Parameters
    ----------
    state : GameState
        The current state.
    intent : Intent
        What the player asked for.
    rng : Generator, optional
        Source of randomness for the spawn (default is the module-level generator).
    values : tuple[int, ...], optional
        Candidate values of the spawned tile (default is ``(2, 4)``).

    Returns
    -------
    GameState
        A new state; ``state`` itself is left untouched.

    Raises
    ------
    UnrecognizedIntent
        If the intent is of any kind other than ``MoveDirection``.
    """
    if isinstance(intent, MoveDirection):
        _logger.debug('Dispatching move %s', intent.direction.value)
        board = move_direction(state.board, intent.direction, rng, values)
        return replace(state, board=board, moves=state.moves + 1)

    raise UnrecognizedIntent(f'Unrecognized intent: {intent!r}')
