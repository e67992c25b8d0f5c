"""
Text rendering of boards and masks.

One character per cell, one line per row. Used for diagnostic output
and golden-file comparisons in tests.
"""
from .board import Board, Mask


def render_board(board: Board, header: bool = True) -> str:
    """
    Render board contents as text.

    Args:
        board: Board to render.
        header: Prefix a "{height}x{width}" line.

    Returns:
        Rows of "." (empty), "B" (mine) and digits (clues).
    """
    lines = []
    if header:
        lines.append(f"{board.height}x{board.width}")
    for row in board.rows():
        lines.append("".join(value.to_char() for value in row))
    return "\n".join(lines)


def render_mask(mask: Mask) -> str:
    """Render mask states: "." closed, " " open, "F" flagged, "?" question."""
    return "\n".join(
        "".join(state.to_char() for state in row) for row in mask.rows()
    )
