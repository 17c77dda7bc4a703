from dataclasses import dataclass
from enum import StrEnum
from typing import Final, TypeAlias

from ttt_core.exception import OutOfRangeError

BOARD_SIZE: Final = 3

Position: TypeAlias = tuple[int, int]
Line: TypeAlias = tuple[Position, Position, Position]


class Mark(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


@dataclass(frozen=True, slots=True)
class Move:
    player: Mark
    row: int
    col: int


class Board:
    """A 3x3 grid of marks addressed by zero-based (row, col).

    Cells only go from empty to occupied through `place` and back to empty
    through `clear` or `reset`. Every accessor validates coordinates before
    touching the grid.
    """

    def __init__(self) -> None:
        self._board: list[list[Mark | None]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @property
    def board(self) -> list[list[Mark | None]]:
        return [row[:] for row in self._board]

    def cell_at(self, row: int, col: int) -> Mark | None:
        self._check_bounds(row, col)
        return self._board[row][col]

    def place(self, row: int, col: int, mark: Mark) -> bool:
        """Occupy an empty cell. Returns False, leaving the board untouched, if the cell is taken."""
        self._check_bounds(row, col)
        if self._board[row][col] is not None:
            return False
        self._board[row][col] = mark
        return True

    def clear(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._board[row][col] = None

    def is_full(self) -> bool:
        return all(all(cell is not None for cell in row) for row in self._board)

    def reset(self) -> None:
        for row in self._board:
            row[:] = [None] * BOARD_SIZE

    def get_available_positions(self) -> list[Position]:
        return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if self._board[r][c] is None]

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            msg = f"Move out of bounds: ({row}, {col})."
            raise OutOfRangeError(msg)
