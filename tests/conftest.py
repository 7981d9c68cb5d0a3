"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 5x20 board with random mines."""
    return Board(BoardConfig(5, 20, seed=1234))


@pytest.fixture
def corner_board() -> Board:
    """
    Create a 5x20 board with mines clustered in the bottom-right corner.

    Layout (* = mine):
        a: ....................
        b: ....................
        c: ..................**
        d: ..................**
        e: ..................**
    """
    mines = [(row, col) for row in (2, 3, 4) for col in (18, 19)]
    return Board.with_mines(5, 20, mines)


@pytest.fixture
def small_board() -> Board:
    """
    Create a 3x3 board with one mine in the centre.

    Every other cell borders the mine, so nothing chains.
    """
    return Board.with_mines(3, 3, [(1, 1)])


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for chain reveal testing."""
    return Board.with_mines(5, 5, [])


@pytest.fixture
def wall_board() -> Board:
    """
    Create a 3x5 board split by a column of mines.

    Layout (* = mine):
        a: ..*..
        b: ..*..
        c: ..*..
    """
    return Board.with_mines(3, 5, [(0, 2), (1, 2), (2, 2)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def unknown_cell() -> Cell:
    """Create an unknown cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an open cell with adjacent mines."""
    cell = Cell()
    cell.open(3)
    return cell
