"""
Unit tests for text rendering.
"""
from mineboard.game import Board, BoardConfig, render_board, render_status


class TestRenderBoard:
    """Test the ASCII grid."""

    def test_new_board_is_all_hidden(self) -> None:
        """Hidden cells draw as dots, one line per row."""
        board = Board(BoardConfig(3, 2, 1))
        assert render_board(board) == ". . .\n. . ."

    def test_reveal_all_shows_layout(self, corner_board: Board) -> None:
        """Debug rendering shows numbers, blanks and mines."""
        assert render_board(corner_board, reveal_all=True) == (
            "  1 *\n"
            "1 2 1\n"
            "* 1  "
        )

    def test_flags_and_explosion(self, corridor_board: Board) -> None:
        """Flags draw as F and the triggered mine as X."""
        corridor_board.toggle_flag(4, 0)
        assert render_board(corridor_board) == ". . . . F"
        corridor_board.reveal(2, 0)
        assert render_board(corridor_board) == ". . X . F"

    def test_win_shows_mines(self, corridor_board: Board) -> None:
        """Mines uncovered by a win draw as *."""
        corridor_board.reveal(0, 0)
        corridor_board.reveal(4, 0)
        assert render_board(corridor_board) == "  1 * 1  "


class TestRenderStatus:
    """Test the status line."""

    def test_status_while_playing(self, corridor_board: Board) -> None:
        """Only the mine counter shows while playing."""
        corridor_board.toggle_flag(0, 0)
        assert render_status(corridor_board) == "Mines: 0"

    def test_status_after_loss(self, corridor_board: Board) -> None:
        """The loss banner follows the counter."""
        corridor_board.reveal(2, 0)
        assert render_status(corridor_board) == "Mines: 1 | GAME OVER"

    def test_status_after_win(self) -> None:
        """The win banner follows the counter."""
        board = Board(BoardConfig(1, 1, 0))
        board.reveal(0, 0)
        assert render_status(board) == "Mines: 0 | U R WINNER"
