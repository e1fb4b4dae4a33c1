"""Slide directions and the axis bookkeeping attached to them."""

from enum import Enum

from tilemerge.core.exceptions import UnrecognizedDirection


class Direction(str, Enum):
    """
    Direction in which every tile of the board slides.

    UP and LEFT pack tiles towards coordinate 0, DOWN and RIGHT towards ``size - 1``.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, value: 'Direction | str') -> 'Direction':
        """
        Convert a direction or a direction name (case-insensitive) into a ``Direction``.

        Parameters
        ----------
        value : Direction | str
            A direction member, its value (``'up'``) or its name (``'UP'``).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        UnrecognizedDirection
            If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnrecognizedDirection(f'Unrecognized direction: {value!r}')

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def towards_origin(self) -> bool:
        """True when tiles pack against coordinate 0."""
        return self in (Direction.UP, Direction.LEFT)
