"""
Board module for Minesweeper.

Holds the board configuration, the generated board of cell values,
and the mask that tracks what the player has uncovered.
"""
from dataclasses import dataclass
from typing import List

import numpy as np

from .cell import CellValue, MaskState
from .errors import InvalidConfiguration
from .grid import Grid, GridCoordinate


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        num_mines: Total mines to place.
    """

    height: int = 9
    width: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines > self.total_cells:
            raise InvalidConfiguration(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.height * self.width


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper board contents.

    A board is built once by the generator and only read afterwards.
    Reveal and flag state lives in a separate ``Mask``.
    """

    def __init__(self, values: Grid[CellValue]) -> None:
        """
        Wrap a grid of cell values.

        Args:
            values: Grid holding one ``CellValue`` per cell. The board
                keeps its own copy.
        """
        self._values = values.copy()

    @property
    def height(self) -> int:
        return self._values.height

    @property
    def width(self) -> int:
        return self._values.width

    def get(self, row: int, col: int) -> CellValue:
        """Get the value at a position."""
        return self._values.get(row, col)

    def __getitem__(self, coord: GridCoordinate) -> CellValue:
        return self._values[coord]

    def contains(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return self._values.contains(row, col)

    def neighbors(self, row: int, col: int) -> List[GridCoordinate]:
        """Get in-bounds neighbor positions."""
        return self._values.neighbors(row, col)

    def coordinates(self):
        """Iterate over every coordinate in row-major order."""
        return self._values.coordinates()

    def rows(self) -> List[List[CellValue]]:
        """Get the values as a list of rows."""
        return self._values.rows()

    def values(self) -> Grid[CellValue]:
        """Get a copy of the underlying grid."""
        return self._values.copy()

    # ========================================================================
    # Mine Queries
    # ========================================================================

    def mine_coordinates(self) -> List[GridCoordinate]:
        """Get positions of every mine, row-major."""
        return [
            coord for coord in self._values.coordinates()
            if self._values[coord].is_mine
        ]

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return len(self.mine_coordinates())

    def to_array(self) -> np.ndarray:
        """
        Get board contents as a numpy array.

        Returns:
            2D int8 array where -1 = mine and 0-8 = adjacent count.
        """
        arr = np.zeros((self.height, self.width), dtype=np.int8)
        for row, col in self._values.coordinates():
            arr[row, col] = self._values.get(row, col).to_observation()
        return arr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._values == other._values

    def __str__(self) -> str:
        from .render import render_board
        return render_board(self)

    def __repr__(self) -> str:
        return (
            f"Board(height={self.height}, width={self.width}, "
            f"mines={self.mine_count})"
        )


# ============================================================================
# Mask Class
# ============================================================================

class Mask:
    """
    Per-cell reveal state, aligned 1:1 with a board.

    Every cell starts ``CLOSED``. Play actions change the mask and
    never the board.
    """

    def __init__(self, height: int, width: int) -> None:
        """
        Create a mask with every cell closed.

        Args:
            height: Number of rows.
            width: Number of columns.
        """
        self._states: Grid[MaskState] = Grid(height, width, MaskState.CLOSED)

    @classmethod
    def for_board(cls, board: Board) -> "Mask":
        """Create a closed mask matching a board's shape."""
        return cls(board.height, board.width)

    @property
    def height(self) -> int:
        return self._states.height

    @property
    def width(self) -> int:
        return self._states.width

    def get(self, row: int, col: int) -> MaskState:
        """Get the state at a position."""
        return self._states.get(row, col)

    def set(self, row: int, col: int, state: MaskState) -> None:
        """Set the state at a position."""
        self._states.set(row, col, state)

    def __getitem__(self, coord: GridCoordinate) -> MaskState:
        return self._states[coord]

    def __setitem__(self, coord: GridCoordinate, state: MaskState) -> None:
        self._states[coord] = state

    def rows(self) -> List[List[MaskState]]:
        """Get the states as a list of rows."""
        return self._states.rows()

    # ========================================================================
    # Play Transitions
    # ========================================================================

    def open(self, row: int, col: int) -> bool:
        """
        Open a cell.

        Returns:
            True if the cell was opened, False if it is flagged or
            already open.
        """
        state = self._states.get(row, col)
        if state in (MaskState.OPEN, MaskState.FLAGGED):
            return False
        self._states.set(row, col, MaskState.OPEN)
        return True

    def cycle_mark(self, row: int, col: int) -> bool:
        """
        Step a closed cell through flagged and questioned.

        Closed -> Flagged -> Question -> Closed.

        Returns:
            True if the mark changed, False if the cell is open.
        """
        state = self._states.get(row, col)
        if state == MaskState.OPEN:
            return False
        self._states.set(row, col, _NEXT_MARK[state])
        return True

    def count(self, state: MaskState) -> int:
        """Count cells in a given state."""
        return sum(
            1 for coord in self._states.coordinates()
            if self._states[coord] == state
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mask):
            return NotImplemented
        return self._states == other._states

    def __str__(self) -> str:
        from .render import render_mask
        return render_mask(self)


_NEXT_MARK = {
    MaskState.CLOSED: MaskState.FLAGGED,
    MaskState.FLAGGED: MaskState.QUESTION,
    MaskState.QUESTION: MaskState.CLOSED,
}
