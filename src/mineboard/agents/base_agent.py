"""
Base agent interface for Minesweeper.

Agents play through MinesweeperEnv. The base class knows the board
shape, the mine count and the environment's action layout: reveal
actions first, flag-toggle actions after them when flags are enabled.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import numpy as np

from ..game.board import NEIGHBOR_OFFSETS, BoardConfig
from ..game.cell import OBS_FLAGGED, OBS_HIDDEN


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Attributes:
        config: Board the agent is playing on.
        allow_flags: Whether the action space has a flag half.
        num_cells: Cells on the board, also the offset of flag actions.
    """

    def __init__(self, config: BoardConfig, allow_flags: bool = False) -> None:
        self.config = config
        self.allow_flags = allow_flags
        self.num_cells = config.total_cells

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: (height, width) array of cell observations.
            valid_actions: Optional mask as returned by get_action_mask.

        Returns:
            Action index understood by MinesweeperEnv.
        """

    def reset(self) -> None:
        """Reset agent state for new episode."""

    # ========================================================================
    # Action Encoding
    # ========================================================================

    def reveal_action(self, x: int, y: int) -> int:
        """Action that reveals (x, y)."""
        return y * self.config.width + x

    def flag_action(self, x: int, y: int) -> int:
        """Action that toggles the flag on (x, y)."""
        if not self.allow_flags:
            raise ValueError("Flag actions are disabled for this agent")
        return self.num_cells + self.reveal_action(x, y)

    def decode_action(self, action: int) -> Tuple[int, int, bool]:
        """Split an action into (x, y, is_flag)."""
        is_flag = action >= self.num_cells
        cell = action % self.num_cells
        return cell % self.config.width, cell // self.config.width, is_flag

    # ========================================================================
    # Observation Helpers
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """In-bounds (x, y) positions around a cell."""
        return [
            (x + dx, y + dy)
            for dx, dy in NEIGHBOR_OFFSETS
            if 0 <= x + dx < self.config.width and 0 <= y + dy < self.config.height
        ]

    def hidden_cells(self, observation: np.ndarray) -> List[Tuple[int, int]]:
        """Unflagged hidden cells in row-major order."""
        ys, xs = np.nonzero(observation == OBS_HIDDEN)
        return list(zip(xs.tolist(), ys.tolist()))

    def mines_remaining(self, observation: np.ndarray) -> int:
        """Mine count minus flags on the board, as the board's counter shows."""
        return self.config.num_mines - int(np.count_nonzero(observation == OBS_FLAGGED))
