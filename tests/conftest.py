"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Board,
    BoardConfig,
    Game,
    Mask,
    board_from_mines,
    generate,
)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def beginner_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return generate(9, 9, 10, rng=1234)


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with one mine in the center."""
    return board_from_mines(3, 3, [(1, 1)])


@pytest.fixture
def top_edge_board() -> Board:
    """Create a 3x3 board with mines at (0, 0) and (0, 1)."""
    return board_from_mines(3, 3, [(0, 0), (0, 1)])


@pytest.fixture
def empty_board() -> Board:
    """Create a 2x2 board with no mines."""
    return generate(2, 2, 0, rng=0)


# ============================================================================
# Mask Fixtures
# ============================================================================

@pytest.fixture
def closed_mask() -> Mask:
    """Create a 3x4 mask with every cell closed."""
    return Mask(3, 4)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """A 4x5 board with 3 mines."""
    return BoardConfig(4, 5, 3)


@pytest.fixture
def small_game(small_config: BoardConfig) -> Game:
    """Create a seeded game on a small board."""
    return Game.new(small_config, rng=7)
