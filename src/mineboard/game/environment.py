"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface for agents driving the board engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .display import render_board


# ============================================================================
# Rewards
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1
REWARD_FLAG = 0.0


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i % width, i // width).
        With allow_flags, actions width * height and above toggle the
        flag on the same cells instead.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed, or game over)
        - 0 for toggling a flag
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        allow_flags: bool = False,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 16x16 with 32 mines).
            render_mode: How to render the environment.
            allow_flags: Add flag-toggle actions to the action space.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode
        self.allow_flags = allow_flags

        self._num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One reveal action per cell, plus one flag action per cell
        num_actions = self._num_cells * (2 if allow_flags else 1)
        self.action_space = spaces.Discrete(num_actions)

        self._steps = 0
        self._total_safe_cells = self._num_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for a reproducible mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(seed) if seed is not None else None
        self.board.new_game(rng=rng)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index (y * width + x), offset by width * height
                for flag actions.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag = action >= self._num_cells
        x, y = self._action_to_position(action % self._num_cells)
        self._steps += 1

        if is_flag:
            reward = self._toggle_flag(x, y)
        else:
            reward = self._calculate_reward(x, y)

        observation = self.board.get_observation()
        terminated = self.board.game_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return action % self.config.width, action // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """
        Reveal a cell and score the result.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Reward value.
        """
        cell = self.board.get_cell(x, y)
        if self.board.game_over or cell.is_invalid or cell.revealed:
            return REWARD_INVALID

        self.board.reveal(x, y)

        if self.board.is_won:
            return REWARD_WIN
        if self.board.is_lost:
            return REWARD_MINE
        return REWARD_SAFE

    def _toggle_flag(self, x: int, y: int) -> float:
        """Toggle a flag and score the result."""
        if not self.board.toggle_flag(x, y):
            return REWARD_INVALID
        return REWARD_FLAG

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "status": self.board.status_text,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Flag actions share
            the mask of the reveal actions for the same cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.board.get_valid_actions():
            action = y * self.config.width + x
            mask[action] = True
            if self.allow_flags:
                mask[action + self._num_cells] = True
        return mask
