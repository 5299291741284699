"""
Unit tests for Cell class.

Tests cell kinds, reveal/flag behavior, and observation conversion.
"""
import pytest
from mineboard.game import Cell, CellType


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_invalid_sentinel(self) -> None:
        """Default cell is the INVALID sentinel with no position."""
        cell = Cell()
        assert cell.kind == CellType.INVALID
        assert cell.is_invalid is True
        assert cell.position is None

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden, unflagged and not exploded."""
        cell = Cell()
        assert cell.revealed is False
        assert cell.flagged is False
        assert cell.exploded is False
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0

    def test_kind_properties(self) -> None:
        """Kind helpers match the cell type."""
        assert Cell(kind=CellType.MINE).is_mine is True
        assert Cell(kind=CellType.EMPTY).is_empty is True
        assert Cell(kind=CellType.NUMBER, adjacent_mines=2).is_number is True
        assert Cell(kind=CellType.NUMBER).is_mine is False


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.revealed is True
        assert hidden_cell.is_hidden is False

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_succeeds(self, hidden_cell: Cell) -> None:
        """Flags do not protect a cell from being revealed."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is True

    def test_reveal_invalid_cell_returns_false(
        self, invalid_cell: Cell
    ) -> None:
        """The sentinel can never be revealed."""
        assert invalid_cell.reveal() is False
        assert invalid_cell.revealed is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.flagged is True

    def test_toggle_twice_restores_state(self, hidden_cell: Cell) -> None:
        """Flagging twice returns the cell to unflagged."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.flagged is False

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.flagged is False

    def test_flag_invalid_cell_returns_false(self, invalid_cell: Cell) -> None:
        """Cannot flag the sentinel."""
        assert invalid_cell.toggle_flag() is False


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for ML agent."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    def test_revealed_empty_cell_observation_is_zero(
        self, hidden_cell: Cell
    ) -> None:
        """Revealed cell with 0 adjacent mines returns 0."""
        hidden_cell.reveal()
        assert hidden_cell.to_observation() == 0

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(position=(1, 1), kind=CellType.NUMBER, adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9

    def test_revealed_flagged_mine_shows_mine(self, mine_cell: Cell) -> None:
        """A revealed cell shows its content even if it was flagged."""
        mine_cell.toggle_flag()
        mine_cell.revealed = True
        assert mine_cell.to_observation() == 9
