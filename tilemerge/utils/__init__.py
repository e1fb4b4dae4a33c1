# -*- coding: utf-8 -*-
"""
This module provides utilities for converting boards to and from numpy grids and for rendering them as text.
"""

from .grid import board_from_array, board_to_array, render

__all__ = ["board_to_array", "board_from_array", "render"]
