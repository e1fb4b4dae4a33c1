"""
Core functionality of the sliding tile game: slide every line of the board, merge tiles and spawn a new one.

A move is computed line by line. Tiles are grouped into lines perpendicular to the slide axis, each line
is ordered by priority, merged once, then packed against the edge the tiles travel towards.
"""

import logging

from numpy.random import Generator

from tilemerge.core.board import BOARD_SIZE, Board, Tile
from tilemerge.core.direction import Direction
from tilemerge.core.exceptions import UnrecognizedDirection
from tilemerge.core.spawn import SPAWN_VALUES, insert_new_random_tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def _check_direction(direction: Direction) -> Direction:
    if not isinstance(direction, Direction):
        raise UnrecognizedDirection(f'Unrecognized direction: {direction!r}')
    return direction


def group_by_direction(direction: Direction, board: Board) -> dict[int, list[Tile]]:
    """
    Partition the board into independent lines.

    Parameters
    ----------
    direction : Direction
        The slide direction.
    board : Board
        The board to partition.

    Returns
    -------
    dict[int, list[Tile]]
        Tiles keyed by their coordinate on the axis perpendicular to the slide: ``x`` for
        vertical slides, ``y`` for horizontal ones. Order inside a line is irrelevant.
    """
    direction = _check_direction(direction)
    lines: dict[int, list[Tile]] = {}
    for tile in board:
        key = tile.position.x if direction.is_vertical else tile.position.y
        lines.setdefault(key, []).append(tile)
    return lines


def sort_tiles_by_priority(direction: Direction, tiles: list[Tile]) -> list[Tile]:
    """
    Order the tiles of a line for merging.

    Parameters
    ----------
    direction : Direction
        The slide direction.
    tiles : list[Tile]
        Tiles of one line.

    Returns
    -------
    list[Tile]
        UP: descending y, DOWN: ascending y, LEFT: descending x, RIGHT: ascending x.
        The tile nearest the destination edge ends up last.
    """
    direction = _check_direction(direction)
    if direction is Direction.UP:
        return sorted(tiles, key=lambda tile: tile.position.y, reverse=True)
    if direction is Direction.DOWN:
        return sorted(tiles, key=lambda tile: tile.position.y)
    if direction is Direction.LEFT:
        return sorted(tiles, key=lambda tile: tile.position.x, reverse=True)
    return sorted(tiles, key=lambda tile: tile.position.x)


def join_first(tiles: list[Tile]) -> list[Tile]:
    """
    Merge the first pair of consecutive equal tiles of an ordered line.

    Parameters
    ----------
    tiles : list[Tile]
        A line ordered by ``sort_tiles_by_priority``.

    Returns
    -------
    list[Tile]
        The line with its first equal pair replaced by one tile of twice the value, placed at the
        position of the second tile of the pair. Unchanged when no two consecutive tiles are equal.

    Notes
    -----
    - Only one merge happens per call: ``[2, 2, 2]`` becomes ``[4, 2]`` and ``[2, 2, 4, 4]`` becomes
      ``[4, 4, 4]``.
    - The first run of equal values is the first pair of equal neighbours.
    """
    for index in range(len(tiles) - 1):
        first, second = tiles[index], tiles[index + 1]
        if first.value == second.value:
            merged = Tile(second.position, first.value + second.value)
            return [*tiles[:index], merged, *tiles[index + 2 :]]
    return list(tiles)


def stack_tiles(direction: Direction, tiles: list[Tile], size: int = BOARD_SIZE) -> list[Tile]:
    """
    Pack the tiles of a merged line against the edge they travel towards.

    Parameters
    ----------
    direction : Direction
        The slide direction.
    tiles : list[Tile]
        A line ordered by priority, after merging.
    size : int, optional
        Width and height of the grid (default is 4).

    Returns
    -------
    list[Tile]
        The reversed line, the i-th tile moved to coordinate ``i`` (UP, LEFT) or ``size - 1 - i``
        (DOWN, RIGHT) along the slide axis. The line coordinate is kept.
    """
    direction = _check_direction(direction)
    stacked = []
    for index, tile in enumerate(reversed(tiles)):
        coordinate = index if direction.towards_origin else size - 1 - index
        if direction.is_vertical:
            stacked.append(tile.moved_to(tile.position.x, coordinate))
        else:
            stacked.append(tile.moved_to(coordinate, tile.position.y))
    return stacked


def slide_board(board: Board, direction: Direction) -> Board:
    """
    Slide and merge every line of the board, without spawning a new tile.

    Parameters
    ----------
    board : Board
        The current board.
    direction : Direction
        The slide direction.

    Returns
    -------
    Board
        The board after sliding.
    """
    moved: list[Tile] = []
    for tiles in group_by_direction(direction, board).values():
        ordered = sort_tiles_by_priority(direction, tiles)
        moved.extend(stack_tiles(direction, join_first(ordered), board.size))
    return Board(moved, board.size)


def move_direction(
    board: Board, direction: Direction, rng: Generator | None = None, values: tuple[int, ...] = SPAWN_VALUES
) -> Board:
    """
    Compute the board resulting from sliding every tile in one direction.

    Parameters
    ----------
    board : Board
        The current board.
    direction : Direction
        The slide direction.
    rng : Generator, optional
        Source of randomness for the spawn (default is the module-level generator).
    values : tuple[int, ...], optional
        Candidate values of the spawned tile (default is ``(2, 4)``).

    Returns
    -------
    Board
        The board after sliding, merging and spawning one tile.

    Notes
    -----
    - A slide that changes nothing still spawns a tile.
    - On a full board without merges nothing spawns and the board is returned as is.
    """
    slid = slide_board(board, direction)
    _logger.debug('Slid %s: %d tiles -> %d tiles', direction.value, len(board), len(slid))
    return insert_new_random_tile(slid, rng, values)
