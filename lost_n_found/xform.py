"""
Helpers for moving between the two coordinate spaces.

Grid space is the plain 2D array of cells with its origin at zero. Surface
space is the character-cell display the grid is drawn on. Each grid cell
takes a 3x2 block of surface cells, laid out like this:

     ___ ___ ___
    |   |   |   |
    |___|___|___|
    |   |   |   |
    |___|___|___|

and the whole grid may sit anywhere on the surface, given by the position
of its top-left border corner (left, top).
"""

import pygame

from .settings import (
    CELL_SURFACE_HEIGHT,
    CELL_SURFACE_STRIDE_X,
    CELL_SURFACE_STRIDE_Y,
    CELL_SURFACE_WIDTH,
)


def grid_to_surface(x, y, left, top):
    """Returns the surface rectangle covered by grid cell (x, y)."""
    # +1 skips the leading border, then one stride per cell
    surface_left = left + 1 + CELL_SURFACE_STRIDE_X * x
    surface_top = top + 1 + CELL_SURFACE_STRIDE_Y * y
    return pygame.Rect(surface_left, surface_top, CELL_SURFACE_WIDTH, CELL_SURFACE_HEIGHT)


def surface_to_grid(px, py, left, top):
    """Maps a surface point back to the grid cell under it.

    Points on the leading border or above/left of the grid land on
    negative indices, which the grid treats as a miss.
    """
    rel_x = px - left - 1
    rel_y = py - top - 1
    return rel_x // CELL_SURFACE_STRIDE_X, rel_y // CELL_SURFACE_STRIDE_Y


def surface_size(width, height):
    """Surface footprint (columns, rows) of a grid, borders included."""
    return CELL_SURFACE_STRIDE_X * width + 1, CELL_SURFACE_STRIDE_Y * height + 1


def grid_origin(width, height, surface_cols, surface_rows):
    """Top-left corner that centres a width x height grid on the surface."""
    cols, rows = surface_size(width, height)
    return max(0, (surface_cols - cols) // 2), max(0, (surface_rows - rows) // 2)
