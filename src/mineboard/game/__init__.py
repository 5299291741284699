"""
Minesweeper game module.

Provides the board engine, cell state, text rendering and the
Gymnasium environment wrapper.
"""
from .cell import Cell, CellType
from .board import (
    Board,
    BoardConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    CLASSIC,
    PRESETS,
)
from .display import render_board, render_status
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellType",
    "Board",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "CLASSIC",
    "PRESETS",
    "render_board",
    "render_status",
    "MinesweeperEnv",
]
