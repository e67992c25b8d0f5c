"""
Grid module for Minesweeper boards.

A fixed-size 2D store addressed by (row, col), shared by the board
and the mask. Neighbor lookups only ever return in-bounds cells.
"""
from typing import Any, Callable, Generic, Iterator, List, NamedTuple, TypeVar, Union

from .errors import InvalidConfiguration


T = TypeVar("T")


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class GridCoordinate(NamedTuple):
    """A (row, col) pair addressing one cell."""

    row: int
    col: int


# ============================================================================
# Grid Class
# ============================================================================

class Grid(Generic[T]):
    """
    Fixed-size 2D grid of values.

    Attributes:
        height: Number of rows.
        width: Number of columns.
    """

    def __init__(
        self,
        height: int,
        width: int,
        fill: Union[T, Callable[[], T]],
    ) -> None:
        """
        Create a grid with every cell set from ``fill``.

        Args:
            height: Number of rows (must be positive).
            width: Number of columns (must be positive).
            fill: Initial value, or a zero-argument factory called per cell.

        Raises:
            InvalidConfiguration: If either dimension is not positive.
        """
        if height < 1 or width < 1:
            raise InvalidConfiguration(
                f"Grid dimensions must be positive, got {height}x{width}"
            )
        self.height = height
        self.width = width
        factory = fill if callable(fill) else (lambda: fill)
        self._cells: List[List[T]] = [
            [factory() for _ in range(width)] for _ in range(height)
        ]

    # ========================================================================
    # Bounds and Neighbors
    # ========================================================================

    def contains(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def neighbors(self, row: int, col: int) -> List[GridCoordinate]:
        """
        Get the in-bounds members of the 8-neighborhood.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Neighbor coordinates in row-major order. Corners have 3,
            edges 5, interior cells 8.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.contains(new_row, new_col):
                neighbors.append(GridCoordinate(new_row, new_col))
        return neighbors

    def coordinates(self) -> Iterator[GridCoordinate]:
        """Iterate over every coordinate in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield GridCoordinate(row, col)

    # ========================================================================
    # Access
    # ========================================================================

    def _check(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise IndexError(
                f"({row}, {col}) is outside a {self.height}x{self.width} grid"
            )

    def get(self, row: int, col: int) -> T:
        """Get the value at a position."""
        self._check(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: T) -> None:
        """Set the value at a position."""
        self._check(row, col)
        self._cells[row][col] = value

    def __getitem__(self, coord: Any) -> T:
        row, col = coord
        return self.get(row, col)

    def __setitem__(self, coord: Any, value: T) -> None:
        row, col = coord
        self.set(row, col, value)

    def rows(self) -> List[List[T]]:
        """Get a copy of the cells as a list of rows."""
        return [list(row) for row in self._cells]

    def copy(self) -> "Grid[T]":
        """Return a grid with the same shape and values."""
        clone: Grid[T] = Grid.__new__(Grid)
        clone.height = self.height
        clone.width = self.width
        clone._cells = self.rows()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"
