"""
Flagging agent for Minesweeper.

Works the board the way a careful player does: flag what must be a
mine, reveal what must be safe, and guess only when nothing is certain.
"""
from typing import Optional, Set, Tuple

import numpy as np

from ..game.board import BoardConfig
from ..game.cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from .base_agent import BaseAgent


Position = Tuple[int, int]


class FlaggingAgent(BaseAgent):
    """
    Agent that uses single-cell constraints and the mine counter.

    Each revealed number n with k known mines around it gives two rules:
        - k == n: every other hidden neighbor is safe
        - k + hidden == n: every hidden neighbor is a mine
    The global counter adds the same two rules over the whole board.

    With flags enabled, deduced mines are flagged one action at a time
    before any reveal, so the board's mine counter follows the agent.
    Without flags the agent keeps its deductions to itself.
    """

    def __init__(
        self,
        config: BoardConfig,
        allow_flags: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the flagging agent.

        Args:
            config: Board the agent is playing on.
            allow_flags: Use the flag half of the action space.
            seed: Random seed for guesses.
        """
        super().__init__(config, allow_flags)
        self.rng = np.random.default_rng(seed)
        self.known_mines: Set[Position] = set()
        self.guesses = 0

    def reset(self) -> None:
        """Forget deductions from the previous game."""
        self.known_mines = set()
        self.guesses = 0

    @property
    def mines_unaccounted(self) -> int:
        """Mines the agent has not located yet."""
        return self.config.num_mines - len(self.known_mines)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a flag, a certain reveal, or a guess, in that order.

        Args:
            observation: (height, width) array of cell observations.
            valid_actions: Optional mask; only its reveal half is consulted.

        Returns:
            Action index, or 0 when nothing can be played.
        """
        if valid_actions is None:
            flat = observation.flatten()
            valid_actions = (flat == OBS_HIDDEN) | (flat == OBS_FLAGGED)
        if not valid_actions.any():
            return 0

        ys, xs = np.nonzero(observation == OBS_FLAGGED)
        self.known_mines.update(zip(xs.tolist(), ys.tolist()))

        safe = self._deduce(observation)

        if self.allow_flags:
            for x, y in sorted(self.known_mines, key=lambda p: (p[1], p[0])):
                if observation[y, x] == OBS_HIDDEN:
                    return self.flag_action(x, y)

        for x, y in sorted(safe, key=lambda p: (p[1], p[0])):
            action = self.reveal_action(x, y)
            if valid_actions[action]:
                return action

        return self._guess(observation, valid_actions)

    def _deduce(self, observation: np.ndarray) -> Set[Position]:
        """
        Apply the number and counter rules until nothing changes.

        Updates known_mines in place.

        Returns:
            Hidden cells proven safe.
        """
        safe: Set[Position] = set()
        numbers = [
            (int(x), int(y), int(observation[y, x]))
            for y, x in zip(*np.nonzero((observation > 0) & (observation < OBS_MINE)))
        ]

        changed = True
        while changed:
            changed = False
            for x, y, count in numbers:
                around = self.neighbors(x, y)
                mines = [p for p in around if p in self.known_mines]
                unknown = [
                    p for p in around
                    if observation[p[1], p[0]] == OBS_HIDDEN
                    and p not in self.known_mines
                    and p not in safe
                ]
                if not unknown:
                    continue
                if len(mines) == count:
                    safe.update(unknown)
                    changed = True
                elif len(mines) + len(unknown) == count:
                    self.known_mines.update(unknown)
                    changed = True

            unknown = [
                p for p in self.hidden_cells(observation)
                if p not in self.known_mines and p not in safe
            ]
            if unknown and self.mines_unaccounted == 0:
                safe.update(unknown)
                changed = True
            elif unknown and self.mines_unaccounted == len(unknown):
                self.known_mines.update(unknown)
                changed = True

        return safe

    def _guess(self, observation: np.ndarray, valid_actions: np.ndarray) -> int:
        """Reveal a random hidden cell that is not a known mine."""
        candidates = [
            self.reveal_action(x, y)
            for x, y in self.hidden_cells(observation)
            if (x, y) not in self.known_mines
            and valid_actions[self.reveal_action(x, y)]
        ]
        if not candidates:
            # No valid actions, return any action (will be invalid)
            return 0
        self.guesses += 1
        return int(self.rng.choice(candidates))
