"""
Text rendering for Minesweeper boards.

Turns a board snapshot into the ASCII grid printed by the console
entry points and the environment's ansi render mode.
"""
from .board import Board
from .cell import Cell


HIDDEN = "."
FLAG = "F"
MINE = "*"
EXPLODED = "X"
EMPTY = " "


def cell_symbol(cell: Cell, reveal_all: bool = False) -> str:
    """
    Get the display character for a cell.

    Args:
        cell: Cell to draw.
        reveal_all: Draw hidden cells as if revealed (debugging aid).
    """
    if not cell.revealed and not reveal_all:
        return FLAG if cell.flagged else HIDDEN
    if cell.is_mine:
        return EXPLODED if cell.exploded else MINE
    if cell.adjacent_mines == 0:
        return EMPTY
    return str(cell.adjacent_mines)


def render_board(board: Board, reveal_all: bool = False) -> str:
    """Render board as ASCII string, top line is row 0."""
    lines = []
    for row in board.snapshot():
        lines.append(" ".join(cell_symbol(cell, reveal_all) for cell in row))
    return "\n".join(lines)


def render_status(board: Board) -> str:
    """Render the mine counter followed by the end-of-game banner, if any."""
    status = f"Mines: {board.mines_remaining}"
    if board.status_text:
        status += f" | {board.status_text}"
    return status
