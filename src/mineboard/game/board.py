"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flood fill and game state management.
"""
import random
from dataclasses import InitVar, dataclass, field, replace
from enum import Enum, auto
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellType


# ============================================================================
# Constants
# ============================================================================

Position = Tuple[int, int]

NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)
ORTHOGONAL_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


STATUS_TEXT = {
    GameState.PLAYING: "",
    GameState.LOST: "GAME OVER",
    GameState.WON: "U R WINNER",
}


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    The mine count is clamped into [0, width * height] instead of being
    rejected.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 16
    height: int = 16
    num_mines: int = 32

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure dimensions are valid and clamp the mine count."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        self.num_mines = max(0, min(self.num_mines, self.total_cells))

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
CLASSIC = BoardConfig(16, 16, 32)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
    "classic": CLASSIC,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and exposes the game actions. Coordinates are
    (x, y) with x the column and y the row. Callers only ever receive
    copies of cells; the stored grid is never handed out.

    Attributes:
        config: Board dimensions and mine count.
        rng: Random source used to draw mine coordinates.
        mines: Optional explicit mine layout for the first game.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    mines: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)

    def __post_init__(self, mines: Optional[Iterable[Position]]) -> None:
        """Start the first game after dataclass creation."""
        self.new_game(mines=mines)

    # ========================================================================
    # Game Setup (Low-level)
    # ========================================================================

    def new_game(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        mines: Optional[Iterable[Position]] = None,
    ) -> "Board":
        """
        Start a new game, replacing the whole grid.

        Args:
            config: New configuration, or None to keep the current one.
            rng: New random source, or None to keep the current one.
            mines: Explicit (x, y) mine positions used instead of random
                placement. The mine count follows the layout.

        Returns:
            This board, for chaining.

        Raises:
            ValueError: If an explicit mine position is repeated or lies
                outside the board.
        """
        config = config or self.config
        layout = None
        if mines is not None:
            layout = self._validate_layout(mines, config)
            config = replace(config, num_mines=len(layout))

        self.config = config
        if rng is not None:
            self.rng = rng

        self._init_grid()
        if layout is None:
            self._place_mines()
        else:
            for x, y in layout:
                self._grid[y][x].kind = CellType.MINE
        self._calculate_adjacent_mines()
        self._game_state = GameState.PLAYING
        return self

    def reset(self) -> None:
        """Start a new game with the same configuration."""
        self.new_game()

    def _init_grid(self) -> None:
        """Create grid of empty hidden cells."""
        self._grid = [
            [
                Cell(position=(x, y), kind=CellType.EMPTY)
                for x in range(self.config.width)
            ]
            for y in range(self.config.height)
        ]

    @staticmethod
    def _validate_layout(
        mines: Iterable[Position], config: BoardConfig
    ) -> Set[Position]:
        """Check an explicit mine layout against the config it is meant for."""
        layout: Set[Position] = set()
        for x, y in mines:
            if not (0 <= x < config.width and 0 <= y < config.height):
                raise ValueError(f"Mine position ({x}, {y}) is off the board")
            if (x, y) in layout:
                raise ValueError(f"Duplicate mine position ({x}, {y})")
            layout.add((x, y))
        return layout

    def _place_mines(self) -> None:
        """
        Place mines at random coordinates.

        When the drawn cell already holds a mine, scan forward in row-major
        order (wrapping at the end of each row and at the end of the grid)
        to the next free cell. Collisions therefore cluster mines after
        existing ones, so placement is not uniform once they happen.
        """
        for _ in range(self.config.num_mines):
            x = self.rng.randrange(self.config.width)
            y = self.rng.randrange(self.config.height)
            while self._grid[y][x].is_mine:
                x, y = self._next_position(x, y)
            self._grid[y][x].kind = CellType.MINE

    def _next_position(self, x: int, y: int) -> Position:
        """Step one cell forward in row-major order, wrapping around."""
        x += 1
        if x >= self.config.width:
            x = 0
            y += 1
            if y >= self.config.height:
                y = 0
        return x, y

    def _calculate_adjacent_mines(self) -> None:
        """Count neighboring mines and classify safe cells."""
        for row in self._grid:
            for cell in row:
                if cell.is_mine:
                    continue
                count = self._count_adjacent_mines(*cell.position)
                cell.adjacent_mines = count
                cell.kind = CellType.NUMBER if count > 0 else CellType.EMPTY

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell, excluding the cell itself."""
        count = 0
        for neighbor_x, neighbor_y in self._get_neighbors(x, y):
            if self._grid[neighbor_y][neighbor_x].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of in-bounds (x, y) tuples for the up to 8 neighbors.
        """
        neighbors = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self._is_valid_position(new_x, new_y):
                neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _cell_at(self, x: int, y: int) -> Cell:
        """Get the stored cell, or a fresh INVALID sentinel off the board."""
        if not self._is_valid_position(x, y):
            return Cell()
        return self._grid[y][x]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> GameState:
        """
        Reveal a cell at the given position.

        A mine loses the game. An empty cell flood fills its region.
        A number cell is revealed on its own. Off-board positions,
        revealed cells and finished games are ignored.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            Game state after the action.
        """
        if not self._can_reveal(x, y):
            return self._game_state

        cell = self._grid[y][x]
        if cell.is_mine:
            self._explode(cell)
            return self._game_state

        if cell.is_empty:
            self._flood(cell)
        else:
            cell.reveal()
        return self.check_win_condition()

    def _can_reveal(self, x: int, y: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        cell = self._cell_at(x, y)
        return not cell.is_invalid and not cell.revealed

    def _flood(self, start: Cell) -> None:
        """
        Reveal the 4-connected region around an empty cell.

        Number cells are revealed but stop the spread. Mines and off-board
        positions are skipped.
        """
        stack = [start.position]
        while stack:
            x, y = stack.pop()
            cell = self._cell_at(x, y)
            if cell.revealed or cell.is_mine or cell.is_invalid:
                continue
            cell.reveal()
            if cell.is_empty:
                for delta_x, delta_y in ORTHOGONAL_OFFSETS:
                    stack.append((x + delta_x, y + delta_y))

    def _explode(self, cell: Cell) -> None:
        """Lose the game on the given mine."""
        cell.revealed = True
        cell.exploded = True
        self._reveal_mines()
        self._game_state = GameState.LOST

    def _reveal_mines(self) -> None:
        """Uncover every mine for the end-of-game display."""
        for row in self._grid:
            for cell in row:
                if cell.is_mine:
                    cell.revealed = True

    def check_win_condition(self) -> GameState:
        """
        Check if all non-mine cells are revealed.

        On a win every mine is uncovered and further actions are rejected.

        Returns:
            Game state after the check.
        """
        if self._game_state != GameState.PLAYING:
            return self._game_state
        for row in self._grid:
            for cell in row:
                if not cell.is_mine and not cell.revealed:
                    return self._game_state
        self._reveal_mines()
        self._game_state = GameState.WON
        return self._game_state

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        return self._cell_at(x, y).toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def game_over(self) -> bool:
        """Check if the game-over latch is set."""
        return self._game_state != GameState.PLAYING

    @property
    def status_text(self) -> str:
        """Banner text for the current state."""
        return STATUS_TEXT[self._game_state]

    @property
    def revealed_count(self) -> int:
        """Number of revealed safe cells."""
        return sum(
            1 for row in self._grid for cell in row
            if cell.revealed and not cell.is_mine
        )

    @property
    def flag_count(self) -> int:
        """Number of flags on hidden cells."""
        return sum(
            1 for row in self._grid for cell in row
            if cell.flagged and not cell.revealed
        )

    @property
    def mines_remaining(self) -> int:
        """Mine count minus placed flags, as shown on a mine counter."""
        return self.config.num_mines - self.flag_count

    def get_cell(self, x: int, y: int) -> Cell:
        """Get a copy of the cell at position, or the INVALID sentinel."""
        return replace(self._cell_at(x, y))

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Get a copy of the whole grid, indexed as [y][x]."""
        return tuple(
            tuple(replace(cell) for cell in row) for row in self._grid
        )

    def mine_positions(self) -> List[Position]:
        """Get (x, y) positions of all mines in row-major order."""
        return [
            cell.position
            for row in self._grid
            for cell in row
            if cell.is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Returns:
            2D numpy array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                obs[y, x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (x, y) positions, empty once the game is over.
        """
        if self.game_over:
            return []
        return [
            cell.position
            for row in self._grid
            for cell in row
            if not cell.revealed
        ]
