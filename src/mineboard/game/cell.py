"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(empty/number/mine) and state (revealed/flagged/exploded).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


# ============================================================================
# Constants
# ============================================================================

class CellType(Enum):
    """Possible contents of a cell."""

    INVALID = auto()
    EMPTY = auto()
    NUMBER = auto()
    MINE = auto()


# Observation values for ML agents
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A default-constructed cell is the INVALID sentinel handed out for
    out-of-bounds lookups. It has no position and is never stored on a board.

    Attributes:
        position: (x, y) grid position, or None for the sentinel.
        kind: What the cell contains.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        revealed: Whether the cell has been uncovered.
        flagged: Whether the player marked the cell.
        exploded: Whether this is the mine the player triggered.
    """

    position: Optional[Tuple[int, int]] = None
    kind: CellType = CellType.INVALID
    adjacent_mines: int = 0
    revealed: bool = False
    flagged: bool = False
    exploded: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Flags do not protect a cell from being revealed.

        Returns:
            True if cell was revealed, False if already revealed or invalid.
        """
        if self.revealed or self.is_invalid:
            return False
        self.revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed or invalid.
        """
        if self.revealed or self.is_invalid:
            return False
        self.flagged = not self.flagged
        return True

    @property
    def is_invalid(self) -> bool:
        """Check if cell is the out-of-bounds sentinel."""
        return self.kind == CellType.INVALID

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.kind == CellType.MINE

    @property
    def is_empty(self) -> bool:
        """Check if cell has no adjacent mines."""
        return self.kind == CellType.EMPTY

    @property
    def is_number(self) -> bool:
        """Check if cell borders at least one mine."""
        return self.kind == CellType.NUMBER

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still covered."""
        return not self.revealed

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agent.

        Returns:
            -1: Hidden cell
            -2: Flagged hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if not self.revealed:
            return OBS_FLAGGED if self.flagged else OBS_HIDDEN
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
