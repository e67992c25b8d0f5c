"""
Unit tests for text rendering.
"""
from minefield import (
    Mask,
    MaskState,
    board_from_mines,
    generate,
    render_board,
    render_mask,
)


class TestRenderBoard:
    """Test board rendering."""

    def test_center_mine_golden(self) -> None:
        """A center mine renders as B surrounded by ones."""
        board = board_from_mines(3, 3, [(1, 1)])
        assert render_board(board) == "3x3\n111\n1B1\n111"

    def test_top_edge_golden(self) -> None:
        """Mines along the top edge render with their clues."""
        board = board_from_mines(3, 4, [(0, 0), (0, 1)])
        assert render_board(board) == "3x4\nBB1.\n221.\n...."

    def test_without_header(self) -> None:
        """Header can be left off."""
        board = generate(2, 2, 0, rng=0)
        assert render_board(board, header=False) == "..\n.."

    def test_str_matches_render(self) -> None:
        """str(board) should render with header."""
        board = generate(5, 4, 3, rng=8)
        assert str(board) == render_board(board)
        lines = str(board).splitlines()
        assert lines[0] == "5x4"
        assert all(len(line) == 4 for line in lines[1:])
        assert sum(line.count("B") for line in lines[1:]) == 3


class TestRenderMask:
    """Test mask rendering."""

    def test_new_mask_all_dots(self) -> None:
        """A fresh mask renders as closed cells."""
        assert render_mask(Mask(2, 3)) == "...\n..."

    def test_each_state(self) -> None:
        """Each state uses its own character."""
        mask = Mask(1, 4)
        mask.set(0, 1, MaskState.OPEN)
        mask.set(0, 2, MaskState.FLAGGED)
        mask.set(0, 3, MaskState.QUESTION)
        assert render_mask(mask) == ". F?"
        assert str(mask) == ". F?"
