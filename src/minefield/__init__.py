"""
Minesweeper board model.

Provides board generation, clue derivation, the reveal mask, and
pointer-to-cell mapping, independent of any rendering engine.
"""
from .errors import InvalidConfiguration
from .grid import Grid, GridCoordinate
from .cell import CellKind, CellValue, MaskState, EMPTY, MINE
from .board import (
    Board,
    BoardConfig,
    Mask,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .generator import (
    generate,
    generate_from_config,
    place_mines,
    derive_clues,
    board_from_mines,
    count_adjacent_mines,
    make_rng,
)
from .pointer import map_pointer, cell_center
from .render import render_board, render_mask
from .session import Game

__all__ = [
    "InvalidConfiguration",
    "Grid",
    "GridCoordinate",
    "CellKind",
    "CellValue",
    "MaskState",
    "EMPTY",
    "MINE",
    "Board",
    "BoardConfig",
    "Mask",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "generate",
    "generate_from_config",
    "place_mines",
    "derive_clues",
    "board_from_mines",
    "count_adjacent_mines",
    "make_rng",
    "map_pointer",
    "cell_center",
    "render_board",
    "render_mask",
    "Game",
]
