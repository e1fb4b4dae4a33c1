# -*- coding: utf-8 -*-
"""
Move/merge engine of a sliding tile puzzle game (2048-style).

- core: board model, move pipeline, spawner and legal move detection.
- envs: game state, intent dispatcher and game environment.
- utils: conversions between boards and numpy grids.
"""

from tilemerge.config import GameConfig
from tilemerge.core import Board, Direction, Position, Tile, move_direction
from tilemerge.envs import GameState, MoveDirection, TwentyFortyEight, update_state

__all__ = [
    "Board",
    "Direction",
    "GameConfig",
    "GameState",
    "MoveDirection",
    "Position",
    "Tile",
    "TwentyFortyEight",
    "move_direction",
    "update_state",
]
