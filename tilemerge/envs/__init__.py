# -*- coding: utf-8 -*-
"""
Python implementation of the sliding tile game around the move/merge engine.

This module provides the `GameState` value with its intent dispatcher, and the `TwentyFortyEight` class
that keeps a state between moves.
"""

from .state import GameState, Intent, MoveDirection, update_state
from .twentyfortyeight import TwentyFortyEight

__all__ = ["GameState", "Intent", "MoveDirection", "update_state", "TwentyFortyEight"]
