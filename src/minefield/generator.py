"""
Board generation for Minesweeper.

Places mines uniformly at random without replacement, then derives
clue counts from mine adjacency.
"""
from typing import Iterable, Tuple, Union

import numpy as np

from .board import Board, BoardConfig
from .cell import EMPTY, MINE, CellValue
from .errors import InvalidConfiguration
from .grid import Grid


RandomSource = Union[None, int, np.random.Generator]


# ============================================================================
# Random Source
# ============================================================================

def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Normalize a random source.

    Args:
        rng: An existing generator (used as is), an integer seed, or
            None for fresh OS entropy.

    Returns:
        A numpy random generator.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


# ============================================================================
# Mine Placement (Low-level)
# ============================================================================

def _empty_grid(height: int, width: int) -> Grid[CellValue]:
    return Grid(height, width, EMPTY)


def place_mines(
    height: int,
    width: int,
    mine_count: int,
    rng: RandomSource = None,
) -> Board:
    """
    Build a board holding only mines, no clues.

    All height * width coordinates are shuffled with a uniform random
    permutation and the first ``mine_count`` become mines.

    Args:
        height: Number of rows.
        width: Number of columns.
        mine_count: Number of mines to place.
        rng: Random source, see ``make_rng``.

    Returns:
        Board whose cells are either ``MINE`` or ``EMPTY``.

    Raises:
        InvalidConfiguration: If the configuration cannot be satisfied.
    """
    config = BoardConfig(height, width, mine_count)
    generator = make_rng(rng)

    grid = _empty_grid(config.height, config.width)
    order = generator.permutation(config.total_cells)
    for index in order[:config.num_mines]:
        row, col = divmod(int(index), config.width)
        grid.set(row, col, MINE)
    return Board(grid)


def board_from_mines(
    height: int,
    width: int,
    mines: Iterable[Tuple[int, int]],
) -> Board:
    """
    Build a board with clues from a fixed mine layout.

    Args:
        height: Number of rows.
        width: Number of columns.
        mines: (row, col) positions of every mine.

    Returns:
        Board with mines at the given positions and clues derived.

    Raises:
        InvalidConfiguration: If a mine is out of bounds or repeated.
    """
    grid = _empty_grid(height, width)
    for row, col in mines:
        if not grid.contains(row, col):
            raise InvalidConfiguration(
                f"Mine at ({row}, {col}) is outside a {height}x{width} board"
            )
        if grid.get(row, col).is_mine:
            raise InvalidConfiguration(f"Duplicate mine at ({row}, {col})")
        grid.set(row, col, MINE)
    return derive_clues(Board(grid))


# ============================================================================
# Clue Derivation (Mid-level)
# ============================================================================

def count_adjacent_mines(board: Board, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.get(neighbor_row, neighbor_col).is_mine:
            count += 1
    return count


def derive_clues(board: Board) -> Board:
    """
    Compute clue counts for every non-mine cell.

    Only mine positions are read, so applying this to its own output
    gives the same board back. The input board is not modified.

    Args:
        board: Board with mines placed.

    Returns:
        New board where mines are unchanged and every other cell is
        ``EMPTY`` or a clue with its adjacent mine count.
    """
    grid = board.values()
    for row, col in board.coordinates():
        if board.get(row, col).is_mine:
            continue
        count = count_adjacent_mines(board, row, col)
        grid.set(row, col, CellValue.from_count(count))
    return Board(grid)


# ============================================================================
# Generation (High-level)
# ============================================================================

def generate(
    height: int,
    width: int,
    mine_count: int,
    rng: RandomSource = None,
) -> Board:
    """
    Generate a complete random board.

    Args:
        height: Number of rows (positive).
        width: Number of columns (positive).
        mine_count: Mines to place, between 0 and height * width.
        rng: Random source, see ``make_rng``.

    Returns:
        A new board with mines and clues.

    Raises:
        InvalidConfiguration: If the configuration cannot be satisfied.
    """
    return derive_clues(place_mines(height, width, mine_count, rng))


def generate_from_config(
    config: BoardConfig,
    rng: RandomSource = None,
) -> Board:
    """Generate a board from a ``BoardConfig``."""
    return generate(config.height, config.width, config.num_mines, rng)
