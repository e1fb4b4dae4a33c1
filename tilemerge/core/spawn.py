"""
Random tile spawning: after every move a new low-value tile appears on an empty cell.

The randomness source is a ``numpy.random.Generator`` given by the caller. Any object exposing a
compatible ``choice`` method can replace it, which keeps the spawner deterministic under test.
"""

import logging

from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.board import Board, Position, Tile, all_positions

# ##>: Values of a spawned tile, each drawn with the same probability.
SPAWN_VALUES: tuple[int, ...] = (2, 4)

# ##>: Module-level generator used when the caller does not provide one.
_GENERATOR = default_rng(PCG64DXSM())

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def free_positions(board: Board) -> list[Position]:
    """
    List the empty cells of a board.

    Parameters
    ----------
    board : Board
        The board to inspect.

    Returns
    -------
    list[Position]
        Every position of the full grid not occupied by a tile, column by column.
    """
    occupied = board.positions
    return [position for position in all_positions(board.size) if position not in occupied]


def random_open_position(board: Board, rng: Generator | None = None) -> Position | None:
    """
    Pick one empty cell uniformly at random.

    Parameters
    ----------
    board : Board
        The board to inspect.
    rng : Generator, optional
        Source of randomness (default is the module-level generator).

    Returns
    -------
    Position or None
        The chosen cell, None when the board is full.
    """
    rng = rng if rng is not None else _GENERATOR
    free = free_positions(board)
    if not free:
        return None
    return free[int(rng.choice(len(free)))]


def random_tile_value(rng: Generator | None = None, values: tuple[int, ...] = SPAWN_VALUES) -> int:
    """Draw the value of a new tile, uniformly over ``values``."""
    rng = rng if rng is not None else _GENERATOR
    return int(rng.choice(values))


def insert_new_random_tile(
    board: Board, rng: Generator | None = None, values: tuple[int, ...] = SPAWN_VALUES
) -> Board:
    """
    Add one tile on a random empty cell.

    Parameters
    ----------
    board : Board
        The board after a move.
    rng : Generator, optional
        Source of randomness (default is the module-level generator).
    values : tuple[int, ...], optional
        Candidate values of the new tile (default is ``(2, 4)``).

    Returns
    -------
    Board
        A new board holding one more tile, or the same board when no cell is free.

    Notes
    -----
    - The cell is drawn first, then the value.
    - A full board is not an error: nothing spawns.
    """
    rng = rng if rng is not None else _GENERATOR
    position = random_open_position(board, rng)
    if position is None:
        _logger.debug('No free cell, nothing spawned')
        return board

    tile = Tile(position, random_tile_value(rng, values))
    _logger.debug('Spawned %d at (%d, %d)', tile.value, position.x, position.y)
    return board.with_tile(tile)


def fill_cells(
    board: Board,
    number_tile: int,
    seed: int | None = None,
    rng: Generator | None = None,
    values: tuple[int, ...] = SPAWN_VALUES,
) -> Board:
    """
    Spawn several tiles, one after the other.

    Parameters
    ----------
    board : Board
        The board to fill.
    number_tile : int
        Number of new tiles to add.
    seed : int, optional
        Seed of a fresh generator, ignored when ``rng`` is given.
    rng : Generator, optional
        Source of randomness (default is the module-level generator).
    values : tuple[int, ...], optional
        Candidate values of the new tiles (default is ``(2, 4)``).

    Returns
    -------
    Board
        The board with up to ``number_tile`` new tiles; fewer when it fills up.
    """
    if rng is None:
        rng = default_rng(seed) if seed is not None else _GENERATOR
    for _ in range(number_tile):
        board = insert_new_random_tile(board, rng, values)
    return board
