from ttt_core.board import Board, Mark, Position
from ttt_core.minimax import best_move
from ttt_core.player import Player


class MinimaxPlayer(Player):
    """Computer player backed by the exhaustive minimax search.

    `start_turn` only flags the player as thinking. The search runs when the
    engine next asks for the pending move, which gives a front-end one frame
    to show that the computer is about to play.
    """

    def __init__(self, symbol: Mark, board: Board) -> None:
        super().__init__(symbol)
        self._board = board
        self._thinking = False

    @property
    def thinking(self) -> bool:
        return self._thinking

    def start_turn(self) -> None:
        self._thinking = True

    def get_pending_move(self) -> Position | None:
        if self._thinking:
            self._thinking = False
            row, col = best_move(self._board, self._symbol)
            self.queue_move(row, col)
        return super().get_pending_move()

    def has_pending_move(self) -> bool:
        return self._thinking or super().has_pending_move()

    def clear_pending_move(self) -> None:
        self._thinking = False
        super().clear_pending_move()
