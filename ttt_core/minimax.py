import logging
from typing import Final

from ttt_core.board import BOARD_SIZE, Board, Mark, Position
from ttt_core.exception import LogicError, PreconditionError
from ttt_core.rules import check_winner

# Must exceed the deepest reachable ply (9) so wins and losses outrank draws.
WIN_SCORE: Final = 10

logger = logging.getLogger(__name__)


def best_move(board: Board, mark: Mark) -> Position:
    """Return the optimal cell for `mark` to play on `board`.

    Explores every continuation with full-depth minimax. Wins score
    `WIN_SCORE - depth` and losses `depth - WIN_SCORE`, so faster wins and
    slower losses are preferred. Ties keep the first cell in row-major order.

    The board is mutated while searching and restored before returning.
    """
    if check_winner(board) is not None:
        raise PreconditionError("best_move requires a board without a winner.")
    if board.is_full():
        raise PreconditionError("best_move requires at least one empty cell.")

    best_score: int | None = None
    best: Position | None = None
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board.cell_at(row, col) is not None:
                continue
            board.place(row, col, mark)
            score = _minimax(board, mark, mark.opponent(), 1)
            board.clear(row, col)
            if best_score is None or score > best_score:
                best_score = score
                best = (row, col)

    if best is None:
        raise LogicError("No move found on a board with empty cells.")
    logger.debug("Best move for %s: %s (score %s)", mark, best, best_score)
    return best


def _minimax(board: Board, mark: Mark, mover: Mark, depth: int) -> int:
    winner = check_winner(board)
    if winner == mark:
        return WIN_SCORE - depth
    if winner == mark.opponent():
        return depth - WIN_SCORE
    if board.is_full():
        return 0

    is_maximizing = mover == mark
    best_score = -WIN_SCORE if is_maximizing else WIN_SCORE
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board.cell_at(row, col) is not None:
                continue
            board.place(row, col, mover)
            score = _minimax(board, mark, mover.opponent(), depth + 1)
            board.clear(row, col)
            best_score = max(best_score, score) if is_maximizing else min(best_score, score)
    return best_score
