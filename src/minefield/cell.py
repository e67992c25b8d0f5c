"""
Cell module for Minesweeper boards.

Represents what a cell holds (empty, mine, or a clue count) and how
much of it the player can see (closed, open, flagged, questioned).
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

MAX_CLUE = 8


class CellKind(Enum):
    """Possible contents of a board cell."""

    EMPTY = auto()
    MINE = auto()
    CLUE = auto()


class MaskState(Enum):
    """Possible visual states of a cell."""

    CLOSED = auto()
    OPEN = auto()
    FLAGGED = auto()
    QUESTION = auto()

    def to_char(self) -> str:
        """Single-character form used in text output."""
        return _MASK_CHARS[self]


_MASK_CHARS = {
    MaskState.CLOSED: ".",
    MaskState.OPEN: " ",
    MaskState.FLAGGED: "F",
    MaskState.QUESTION: "?",
}


# ============================================================================
# Cell Value
# ============================================================================

@dataclass(frozen=True)
class CellValue:
    """
    Content of a single board cell.

    Attributes:
        kind: Whether the cell is empty, a mine, or a clue.
        count: Adjacent mine count; 1-8 for clues, 0 otherwise.
    """

    kind: CellKind = CellKind.EMPTY
    count: int = 0

    def __post_init__(self) -> None:
        """Validate the kind/count pairing."""
        if self.kind == CellKind.CLUE:
            if not 1 <= self.count <= MAX_CLUE:
                raise ValueError(
                    f"Clue count must be between 1 and {MAX_CLUE}, got {self.count}"
                )
        elif self.count != 0:
            raise ValueError(f"{self.kind.name} cell cannot carry a count")

    @classmethod
    def clue(cls, count: int) -> "CellValue":
        """Create a clue cell with the given adjacent mine count."""
        return cls(CellKind.CLUE, count)

    @classmethod
    def from_count(cls, count: int) -> "CellValue":
        """Create the non-mine value for a count, ``EMPTY`` when zero."""
        if count == 0:
            return EMPTY
        return cls.clue(count)

    @property
    def is_mine(self) -> bool:
        """Check if cell is a mine."""
        return self.kind == CellKind.MINE

    @property
    def is_empty(self) -> bool:
        """Check if cell has no adjacent mines."""
        return self.kind == CellKind.EMPTY

    @property
    def is_clue(self) -> bool:
        """Check if cell carries a clue count."""
        return self.kind == CellKind.CLUE

    def to_char(self) -> str:
        """
        Single-character form used in text output.

        Returns:
            ".": Empty cell
            "B": Mine
            "1"-"8": Clue count
        """
        if self.kind == CellKind.MINE:
            return "B"
        if self.kind == CellKind.CLUE:
            return str(self.count)
        return "."

    def to_observation(self) -> int:
        """
        Convert cell to an integer code for array export.

        Returns:
            -1: Mine
            0-8: Adjacent mine count
        """
        if self.kind == CellKind.MINE:
            return -1
        return self.count

    def __str__(self) -> str:
        return self.to_char()


EMPTY = CellValue(CellKind.EMPTY)
MINE = CellValue(CellKind.MINE)
