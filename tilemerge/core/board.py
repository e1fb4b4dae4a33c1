"""
Board model for the sliding tile game: positions, tiles and boards with their invariants.

Every value defined here is immutable. A ``Board`` checks its invariants when it is built, so any
board object that exists is a valid one and transformations always produce new boards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Iterator, Mapping

from tilemerge.core.exceptions import InvariantViolation

# ##>: Width and height of the square grid.
BOARD_SIZE = 4


@dataclass(frozen=True, order=True)
class Position:
    """A cell of the grid, ``x`` being the column and ``y`` the row (0 is the top/left edge)."""

    x: int
    y: int

    def __post_init__(self):
        for name, coordinate in (('x', self.x), ('y', self.y)):
            if isinstance(coordinate, bool) or not isinstance(coordinate, int):
                raise InvariantViolation(f'Position.{name} must be an int, got {coordinate!r}')

    def in_bounds(self, size: int = BOARD_SIZE) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size


def is_tile_value(value: object) -> bool:
    """
    Check whether a value can be carried by a tile.

    Parameters
    ----------
    value : object
        Candidate tile value.

    Returns
    -------
    bool
        True for powers of two greater or equal to 2, False otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Tile:
    """A numbered tile sitting on one position of the board."""

    position: Position
    value: int

    def __post_init__(self):
        if not isinstance(self.position, Position):
            raise InvariantViolation(f'Tile.position must be a Position, got {self.position!r}')
        if not is_tile_value(self.value):
            raise InvariantViolation(f'Tile value must be a power of two >= 2, got {self.value!r}')

    def moved_to(self, x: int, y: int) -> Tile:
        """Return a copy of this tile placed at ``(x, y)``."""
        return Tile(Position(x, y), self.value)


@lru_cache(maxsize=None)
def all_positions(size: int = BOARD_SIZE) -> tuple[Position, ...]:
    """
    Enumerate every cell of a ``size`` x ``size`` grid, column by column.

    Parameters
    ----------
    size : int, optional
        Width and height of the grid (default is 4).

    Returns
    -------
    tuple[Position, ...]
        The ``size ** 2`` positions of the grid.
    """
    return tuple(Position(x, y) for x in range(size) for y in range(size))


def validate_board(tiles: Iterable[Tile], size: int = BOARD_SIZE) -> tuple[Tile, ...]:
    """
    Check the board invariants on a collection of tiles.

    Parameters
    ----------
    tiles : Iterable[Tile]
        Candidate content of a board.
    size : int, optional
        Width and height of the grid (default is 4).

    Returns
    -------
    tuple[Tile, ...]
        The validated tiles.

    Raises
    ------
    InvariantViolation
        If an element is not a tile, a tile lies outside the grid, two tiles share a position,
        or there are more tiles than cells.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvariantViolation(f'Board size must be a positive int, got {size!r}')

    tiles = tuple(tiles)
    if len(tiles) > size * size:
        raise InvariantViolation(f'Board holds {len(tiles)} tiles but only has {size * size} cells')

    seen: set[Position] = set()
    for tile in tiles:
        if not isinstance(tile, Tile):
            raise InvariantViolation(f'Board elements must be tiles, got {tile!r}')
        if not tile.position.in_bounds(size):
            raise InvariantViolation(f'Tile {tile} lies outside the {size}x{size} grid')
        if tile.position in seen:
            raise InvariantViolation(f'Two tiles share position ({tile.position.x}, {tile.position.y})')
        seen.add(tile.position)
    return tiles


@dataclass(frozen=True)
class Board:
    """
    Unordered collection of tiles on a square grid.

    Parameters
    ----------
    tiles : Iterable[Tile]
        Tiles on the board. Stored as a frozenset once validated.
    size : int, optional
        Width and height of the grid (default is 4).
    """

    tiles: frozenset[Tile] = field(default_factory=frozenset)
    size: int = BOARD_SIZE

    def __post_init__(self):
        # ##>: Validate before the frozenset conversion, which would hide exact duplicates.
        object.__setattr__(self, 'tiles', frozenset(validate_board(self.tiles, self.size)))

    @classmethod
    def from_mapping(cls, cells: Mapping[tuple[int, int], int], size: int = BOARD_SIZE) -> Board:
        """
        Build a board from a ``{(x, y): value}`` mapping.

        Parameters
        ----------
        cells : Mapping[tuple[int, int], int]
            Value of each occupied cell.
        size : int, optional
            Width and height of the grid (default is 4).

        Returns
        -------
        Board
            The corresponding board.
        """
        return cls(frozenset(Tile(Position(x, y), value) for (x, y), value in cells.items()), size)

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        # ##>: Row by row, for reproducible iteration over the underlying set.
        return iter(sorted(self.tiles, key=lambda tile: (tile.position.y, tile.position.x)))

    @property
    def positions(self) -> frozenset[Position]:
        """Occupied positions."""
        return frozenset(tile.position for tile in self.tiles)

    @property
    def total(self) -> int:
        """Sum of all tile values."""
        return sum(tile.value for tile in self.tiles)

    @property
    def max_value(self) -> int:
        """Highest tile value, 0 for an empty board."""
        return max((tile.value for tile in self.tiles), default=0)

    @property
    def is_full(self) -> bool:
        return len(self.tiles) == self.size * self.size

    def value_at(self, x: int, y: int) -> int | None:
        """Value of the tile at ``(x, y)``, None if the cell is empty."""
        target = Position(x, y)
        for tile in self.tiles:
            if tile.position == target:
                return tile.value
        return None

    def to_mapping(self) -> dict[tuple[int, int], int]:
        """Inverse of ``from_mapping``."""
        return {(tile.position.x, tile.position.y): tile.value for tile in self}

    def with_tile(self, tile: Tile) -> Board:
        """Return a new board with one more tile."""
        return Board((*self.tiles, tile), self.size)
