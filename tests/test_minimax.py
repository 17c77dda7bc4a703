import pytest

from helpers import board_from_rows
from ttt_core.board import BOARD_SIZE, Board, Mark
from ttt_core.exception import LogicError, PreconditionError
from ttt_core.minimax import WIN_SCORE, best_move
from ttt_core.rules import check_winner, is_draw


class TestBestMove:
    def test_takes_win_over_block(self) -> None:
        board = board_from_rows("OO_", "XX_", "___")
        assert best_move(board, Mark.O) == (0, 2)

    def test_takes_win_on_column(self) -> None:
        board = board_from_rows("XO_", "XO_", "___")
        assert best_move(board, Mark.X) == (2, 0)

    def test_blocks_win_in_one(self) -> None:
        board = board_from_rows("XX_", "O__", "___")
        assert best_move(board, Mark.O) == (0, 2)

    def test_blocks_diagonal(self) -> None:
        board = board_from_rows("X__", "_X_", "O__")
        assert best_move(board, Mark.O) == (2, 2)

    def test_single_empty_cell(self) -> None:
        board = board_from_rows("XOX", "XOO", "OX_")
        assert best_move(board, Mark.X) == (2, 2)

    def test_tie_break_is_row_major(self) -> None:
        # Every reply to a centre opening that isn't a corner loses; the corners tie.
        board = board_from_rows("___", "_X_", "___")
        assert best_move(board, Mark.O) == (0, 0)

    def test_board_is_restored(self) -> None:
        board = board_from_rows("X__", "_O_", "__X")
        before = board.board
        best_move(board, Mark.O)
        assert board.board == before

    def test_win_score_dominates_depth(self) -> None:
        assert WIN_SCORE > BOARD_SIZE * BOARD_SIZE


class TestPreconditions:
    def test_full_board(self) -> None:
        board = board_from_rows("XOX", "XXO", "OXO")
        with pytest.raises(PreconditionError, match="empty cell"):
            best_move(board, Mark.X)

    def test_decided_board(self) -> None:
        board = board_from_rows("XXX", "OO_", "___")
        with pytest.raises(PreconditionError, match="without a winner"):
            best_move(board, Mark.O)
        assert issubclass(PreconditionError, LogicError)

    def test_no_empty_cell_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        board = board_from_rows("XOX", "XXO", "OXO")
        monkeypatch.setattr(board, "is_full", lambda: False)
        with pytest.raises(LogicError, match="No move found"):
            best_move(board, Mark.X)


class TestSelfPlay:
    @pytest.mark.parametrize(("row", "col"), [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)])
    def test_optimal_players_draw_from_any_opening(self, row: int, col: int) -> None:
        board = Board()
        board.place(row, col, Mark.X)
        mover = Mark.O
        while check_winner(board) is None and not board.is_full():
            move_row, move_col = best_move(board, mover)
            assert board.cell_at(move_row, move_col) is None
            assert board.place(move_row, move_col, mover)
            mover = mover.opponent()
        assert check_winner(board) is None
        assert is_draw(board)
