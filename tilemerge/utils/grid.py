"""
Provides conversions between boards and dense numpy grids, where empty cells hold zero.
"""

from __future__ import annotations

from numpy import int64, ndarray, zeros

from tilemerge.core.board import Board, Position, Tile
from tilemerge.core.exceptions import InvariantViolation


def board_to_array(board: Board) -> ndarray:
    """
    Convert a board into a dense grid.

    Parameters
    ----------
    board : Board
        The board to convert.

    Returns
    -------
    ndarray
        Array of shape (size, size) indexed as ``grid[y, x]``; empty cells are 0.

    Example
    -------
    >>> board_to_array(Board.from_mapping({(1, 0): 2}, size=2))
    array([[0, 2],
           [0, 0]])
    """
    grid = zeros((board.size, board.size), dtype=int64)
    for tile in board:
        grid[tile.position.y, tile.position.x] = tile.value
    return grid


def board_from_array(grid: ndarray) -> Board:
    """
    Convert a dense grid into a board.

    Parameters
    ----------
    grid : ndarray
        Square array indexed as ``grid[y, x]``; zero marks an empty cell.

    Returns
    -------
    Board
        The board holding one tile per non-zero cell.

    Raises
    ------
    InvariantViolation
        If the grid is not square or a non-zero cell is not a valid tile value.
    """
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise InvariantViolation(f'Expected a square grid, got shape {grid.shape}')

    tiles = [
        Tile(Position(int(x), int(y)), int(grid[y, x]))
        for y, x in zip(*grid.nonzero())
    ]
    return Board(tiles, int(grid.shape[0]))


def render(board: Board) -> str:
    """Tab separated text grid, one row per line, dots for empty cells."""
    rows = board_to_array(board).tolist()
    return '\n'.join(' \t'.join(str(value) if value else '.' for value in row) for row in rows)
