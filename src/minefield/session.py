"""
Game session state.

Owns the board, its mask, and the cell currently under the pointer.
Callers drive it from whatever loop they run: a one-off call at
startup, per-frame polling, or event handlers.
"""
from dataclasses import dataclass
from typing import Optional

from .board import BEGINNER, Board, BoardConfig, Mask
from .generator import RandomSource, generate_from_config
from .grid import GridCoordinate
from .pointer import Vec2, map_pointer


@dataclass
class Game:
    """
    A single game's board and player-visible state.

    Attributes:
        config: Configuration the board was generated from.
        board: Generated board contents.
        mask: Reveal state per cell.
        pointer_cell: Last mapped pointer coordinate, possibly off the
            board; None when the pointer is off the surface.
    """

    config: BoardConfig
    board: Board
    mask: Mask
    pointer_cell: Optional[GridCoordinate] = None

    @classmethod
    def new(
        cls,
        config: BoardConfig = BEGINNER,
        rng: RandomSource = None,
    ) -> "Game":
        """
        Start a game with a freshly generated board.

        Args:
            config: Board configuration.
            rng: Random source for mine placement.

        Returns:
            Game with every cell closed and no pointer position.
        """
        board = generate_from_config(config, rng)
        return cls(config=config, board=board, mask=Mask.for_board(board))

    def hover(
        self,
        pointer_pos: Optional[Vec2],
        surface_size: Vec2,
        cell_size: float,
    ) -> Optional[GridCoordinate]:
        """
        Update the pointer coordinate from a surface position.

        Returns:
            The cell under the pointer if it is on the board, else None.
        """
        self.pointer_cell = map_pointer(
            pointer_pos,
            surface_size,
            self.board.height,
            self.board.width,
            cell_size,
        )
        return self.hovered_cell

    @property
    def hovered_cell(self) -> Optional[GridCoordinate]:
        """The pointer coordinate if it lies on the board."""
        if self.pointer_cell is None:
            return None
        if not self.board.contains(*self.pointer_cell):
            return None
        return self.pointer_cell
