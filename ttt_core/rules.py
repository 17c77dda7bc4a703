from dataclasses import dataclass
from enum import Enum
from typing import Final

from ttt_core.board import Board, Line, Mark

# Rows, then columns, then the two diagonals. Every rule walks them in this order.
LINES: Final[tuple[Line, ...]] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Mark | None = None


def _line_owner(board: Board, line: Line) -> Mark | None:
    (r0, c0), (r1, c1), (r2, c2) = line
    first = board.cell_at(r0, c0)
    if first is not None and first == board.cell_at(r1, c1) and first == board.cell_at(r2, c2):
        return first
    return None


def check_winner(board: Board) -> Mark | None:
    """Return the mark owning the first complete line, if any."""
    for line in LINES:
        owner = _line_owner(board, line)
        if owner is not None:
            return owner
    return None


def winning_line(board: Board) -> Line | None:
    """Return the line `check_winner` would report, if any."""
    for line in LINES:
        if _line_owner(board, line) is not None:
            return line
    return None


def is_draw(board: Board) -> bool:  # noqa: D103
    return board.is_full() and check_winner(board) is None


def is_valid_move(board: Board, row: int, col: int) -> bool:
    """Only checks that the cell is empty. Turn order and game end are up to the caller."""
    return board.cell_at(row, col) is None


def get_outcome(board: Board) -> Outcome:  # noqa: D103
    winner = check_winner(board)
    if winner is not None:
        return Outcome(Status.WON, winner)
    if is_draw(board):
        return Outcome(Status.DRAW)
    return Outcome(Status.IN_PROGRESS)
