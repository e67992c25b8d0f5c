"""
Pointer-to-cell mapping.

The board is drawn centered on a rendering surface with square cells
of ``cell_size``. Surface positions have their origin at the top-left
corner with y pointing down, and row 0 is the top row of the board.
"""
import math
from typing import Optional, Tuple

from .errors import InvalidConfiguration
from .grid import GridCoordinate


Vec2 = Tuple[float, float]


def _check_layout(board_height: int, board_width: int, cell_size: float) -> None:
    if board_height < 1 or board_width < 1:
        raise InvalidConfiguration("Board dimensions must be positive")
    if cell_size <= 0:
        raise InvalidConfiguration(f"Cell size must be positive, got {cell_size}")


def map_pointer(
    pointer_pos: Optional[Vec2],
    surface_size: Vec2,
    board_height: int,
    board_width: int,
    cell_size: float,
) -> Optional[GridCoordinate]:
    """
    Convert a pointer position into the grid cell under it.

    The position is shifted so the surface center is the origin, scaled
    to cell units relative to the board's top-left cell, and rounded
    half-up. The result is not clamped: a pointer over the surface but
    off the board yields a coordinate outside the board.

    Args:
        pointer_pos: (x, y) surface position, or None when the pointer is
            not over the surface.
        surface_size: (width, height) of the surface.
        board_height: Number of board rows.
        board_width: Number of board columns.
        cell_size: Edge length of one cell in surface units.

    Returns:
        The coordinate under the pointer, or None if there is no pointer.

    Raises:
        InvalidConfiguration: If the board layout is unusable.
    """
    _check_layout(board_height, board_width, cell_size)
    if pointer_pos is None:
        return None

    x, y = pointer_pos
    surface_width, surface_height = surface_size
    centered_x = x - surface_width / 2
    centered_y = y - surface_height / 2

    col = centered_x / cell_size + (board_width - 1) / 2
    row = centered_y / cell_size + (board_height - 1) / 2
    return GridCoordinate(math.floor(row + 0.5), math.floor(col + 0.5))


def cell_center(
    coord: Tuple[int, int],
    surface_size: Vec2,
    board_height: int,
    board_width: int,
    cell_size: float,
) -> Vec2:
    """
    Get the surface position at the center of a cell.

    Inverse of ``map_pointer`` for cell centers.

    Returns:
        (x, y) surface position.
    """
    _check_layout(board_height, board_width, cell_size)
    row, col = coord
    surface_width, surface_height = surface_size
    x = surface_width / 2 + (col - (board_width - 1) / 2) * cell_size
    y = surface_height / 2 + (row - (board_height - 1) / 2) * cell_size
    return x, y
