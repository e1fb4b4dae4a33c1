# -*- coding: utf-8 -*-
"""
This module provides the move/merge engine of the sliding tile game.

It includes the immutable board model, directional grouping and priority sorting of lines, the
single-merge engine, line stacking, random tile spawning, the move orchestrator and legal move
detection.
"""

from .board import BOARD_SIZE, Board, Position, Tile, all_positions, is_tile_value, validate_board
from .direction import Direction
from .exceptions import InvariantViolation, TileMergeError, UnrecognizedDirection, UnrecognizedIntent
from .gameboard import (
    group_by_direction,
    join_first,
    move_direction,
    slide_board,
    sort_tiles_by_priority,
    stack_tiles,
)
from .gamemove import can_move, illegal_directions, is_done, legal_directions
from .spawn import (
    SPAWN_VALUES,
    fill_cells,
    free_positions,
    insert_new_random_tile,
    random_open_position,
    random_tile_value,
)

__all__ = [
    "BOARD_SIZE",
    "SPAWN_VALUES",
    "Board",
    "Position",
    "Tile",
    "Direction",
    "TileMergeError",
    "InvariantViolation",
    "UnrecognizedDirection",
    "UnrecognizedIntent",
    "all_positions",
    "is_tile_value",
    "validate_board",
    "group_by_direction",
    "sort_tiles_by_priority",
    "join_first",
    "stack_tiles",
    "slide_board",
    "move_direction",
    "free_positions",
    "random_open_position",
    "random_tile_value",
    "insert_new_random_tile",
    "fill_cells",
    "can_move",
    "legal_directions",
    "illegal_directions",
    "is_done",
]
