"""
Configuration of a sliding tile game.
"""

from dataclasses import dataclass

from tilemerge.core.board import BOARD_SIZE
from tilemerge.core.spawn import SPAWN_VALUES


@dataclass(frozen=True)
class GameConfig:
    """
    Settings of a game environment.

    Attributes are read once, when the environment is created.
    """

    size: int = BOARD_SIZE  # Width and height of the grid
    initial_tiles: int = 2  # Tiles dealt on reset
    spawn_values: tuple[int, ...] = SPAWN_VALUES  # Drawn uniformly on each spawn
    seed: int | None = None  # Seed of the environment generator, None for fresh entropy
