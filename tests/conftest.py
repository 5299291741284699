"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mineboard.game import Board, BoardConfig, Cell, CellType


class ScriptedRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        self._draws = list(draws)

    def randrange(self, stop):
        value = self._draws.pop(0)
        assert 0 <= value < stop
        return value


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 16x16 board with 32 mines."""
    return Board()


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood fill testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corridor_board() -> Board:
    """5x1 board with a mine in the middle: E 1 * 1 E."""
    return Board(BoardConfig(5, 1, 1), mines=[(2, 0)])


@pytest.fixture
def corner_board() -> Board:
    """
    3x3 board with mines at (2, 0) and (0, 2).

    Row 0:  E 1 *
    Row 1:  1 2 1
    Row 2:  * 1 E
    """
    return Board(BoardConfig(3, 3, 2), mines=[(2, 0), (0, 2)])


@pytest.fixture
def scripted_random():
    """Factory for random sources with fixed draws."""
    return ScriptedRandom


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell(position=(0, 0), kind=CellType.EMPTY)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(position=(0, 0), kind=CellType.MINE)


@pytest.fixture
def invalid_cell() -> Cell:
    """Create the out-of-bounds sentinel."""
    return Cell()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
