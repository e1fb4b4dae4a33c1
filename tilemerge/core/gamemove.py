"""
Game move utilities for the sliding tile game, providing functions for determining legal
and illegal directions.
"""

from tilemerge.core.board import Board
from tilemerge.core.direction import Direction
from tilemerge.core.gameboard import slide_board


def can_move(board: Board, direction: Direction) -> bool:
    """
    Check if sliding in a direction changes the board.

    Parameters
    ----------
    board : Board
        The game board to check.
    direction : Direction
        The direction to try.

    Returns
    -------
    bool
        True if at least one tile moves or merges, False otherwise.
    """
    return slide_board(board, direction).tiles != board.tiles


def legal_directions(board: Board) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : Board
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions, in declaration order of ``Direction``.

    Notes
    -----
    ``move_direction`` does not consult this list: an illegal slide still spawns a tile.
    """
    return [direction for direction in Direction if can_move(board, direction)]


def illegal_directions(board: Board) -> list[Direction]:
    """Directions that leave the board unchanged."""
    return [direction for direction in Direction if not can_move(board, direction)]


def is_done(board: Board) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : Board
        The current game board.

    Returns
    -------
    bool
        True when the board is full and no direction changes it, i.e. no line holds two equal
        neighbours.
    """
    return board.is_full and not legal_directions(board)
