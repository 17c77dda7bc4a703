from dataclasses import dataclass

from ttt_core.board import Board, Line, Mark, Move
from ttt_core.exception import InvalidMoveError
from ttt_core.rules import Outcome, Status, get_outcome, is_valid_move, winning_line


@dataclass
class Scoreboard:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        match outcome.status:
            case Status.WON:
                if outcome.winner is Mark.X:
                    self.x_wins += 1
                else:
                    self.o_wins += 1
            case Status.DRAW:
                self.draws += 1
            case Status.IN_PROGRESS:
                pass

    def reset(self) -> None:
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0


class Game:
    def __init__(self) -> None:
        self._board = Board()
        self._current_player = Mark.X

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Mark:
        return self._current_player

    @property
    def outcome(self) -> Outcome:
        return get_outcome(self._board)

    @property
    def winning_line(self) -> Line | None:
        return winning_line(self._board)

    def is_over(self) -> bool:
        return self.outcome.status is not Status.IN_PROGRESS

    def apply_move(self, move: Move) -> None:
        if self.is_over():
            raise InvalidMoveError("Game over.")
        if move.player != self._current_player:
            raise InvalidMoveError("Not your turn.")
        if not is_valid_move(self._board, move.row, move.col):
            raise InvalidMoveError("Cell occupied.")
        if not self._board.place(move.row, move.col, move.player):
            raise InvalidMoveError("Cell occupied.")
        if not self.is_over():
            self._current_player = self._current_player.opponent()

    def reset(self) -> None:
        self._board.reset()
        self._current_player = Mark.X
