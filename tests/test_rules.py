import pytest

from helpers import board_from_rows
from ttt_core.board import Board, Line, Mark
from ttt_core.exception import OutOfRangeError
from ttt_core.rules import LINES, Outcome, Status, check_winner, get_outcome, is_draw, is_valid_move, winning_line


class TestWinner:
    def test_eight_lines_in_order(self) -> None:
        assert len(LINES) == 8
        assert LINES[0] == ((0, 0), (0, 1), (0, 2))
        assert LINES[3] == ((0, 0), (1, 0), (2, 0))
        assert LINES[6] == ((0, 0), (1, 1), (2, 2))
        assert LINES[7] == ((0, 2), (1, 1), (2, 0))

    @pytest.mark.parametrize("line", LINES)
    @pytest.mark.parametrize("mark", list(Mark))
    def test_every_line_wins(self, line: Line, mark: Mark) -> None:
        board = Board()
        for row, col in line:
            board.place(row, col, mark)
        assert check_winner(board) is mark
        assert winning_line(board) == line

    def test_empty_board_has_no_winner(self) -> None:
        board = Board()
        assert check_winner(board) is None
        assert winning_line(board) is None

    def test_mixed_line_is_not_a_win(self) -> None:
        board = board_from_rows("XXO", "___", "___")
        assert check_winner(board) is None
        assert winning_line(board) is None

    def test_first_line_in_order_is_reported(self) -> None:
        # X owns both row 0 and column 0; the row comes first.
        board = board_from_rows("XXX", "XOO", "XOO")
        assert check_winner(board) is Mark.X
        assert winning_line(board) == ((0, 0), (0, 1), (0, 2))

    def test_winner_and_line_agree(self) -> None:
        board = board_from_rows("O_X", "OX_", "X__")
        line = winning_line(board)
        assert line == ((0, 2), (1, 1), (2, 0))
        row, col = line[0]
        assert board.cell_at(row, col) is check_winner(board)


class TestDraw:
    def test_full_board_without_winner(self) -> None:
        board = board_from_rows("XOX", "XXO", "OXO")
        assert is_draw(board)
        assert check_winner(board) is None
        assert winning_line(board) is None
        assert get_outcome(board) == Outcome(Status.DRAW)

    def test_full_board_with_winner_is_not_a_draw(self) -> None:
        board = board_from_rows("XXX", "OOX", "OXO")
        assert board.is_full()
        assert check_winner(board) is Mark.X
        assert not is_draw(board)
        assert get_outcome(board) == Outcome(Status.WON, Mark.X)

    def test_partial_board_is_not_a_draw(self) -> None:
        board = board_from_rows("XO_", "___", "___")
        assert not is_draw(board)
        assert get_outcome(board) == Outcome(Status.IN_PROGRESS)


class TestValidMove:
    def test_empty_cell_is_valid(self) -> None:
        board = board_from_rows("X__", "___", "___")
        assert is_valid_move(board, 0, 1)
        assert not is_valid_move(board, 0, 0)

    def test_ignores_game_over(self) -> None:
        board = board_from_rows("XXX", "OO_", "___")
        assert is_valid_move(board, 1, 2)

    def test_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            is_valid_move(Board(), 3, 0)
