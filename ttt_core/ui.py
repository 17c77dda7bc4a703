from abc import ABC, abstractmethod
from collections.abc import Callable

from ttt_core.game_engine import GameEngine
from ttt_core.rules import Status


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._input_enabled = False
        self._change_mode_cb: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True
        self._game_engine.start()

    def _stop(self) -> None:
        self._running = False

    def _queue_move(self, row: int, col: int) -> None:
        # Disable own input immediately so a second click can't queue another move.
        if not self._input_enabled or self._game_engine.restricted:
            return
        self._disable_input()
        self._game_engine.queue_move(row, col)

    def _new_game(self) -> None:
        self._disable_input()
        self._game_engine.new_game()

    def set_change_mode_cb(self, callback: Callable[[], None]) -> None:
        self._change_mode_cb = callback

    def _change_mode(self) -> None:
        # Mode switching is disabled while input is locked.
        if self._change_mode_cb is None or self._game_engine.restricted:
            return
        self._disable_input()
        self._change_mode_cb()

    def enable_input(self) -> None:
        if not self._running:
            return
        self._input_enabled = True

    def _disable_input(self) -> None:
        self._input_enabled = False

    def on_board_updated(self) -> None:
        if not self._running:
            return
        # The engine restarts the next human turn after this callback, which re-enables input.
        self._disable_input()
        self._render_board()
        outcome = self._game_engine.game.outcome
        if outcome.status is Status.WON:
            self._show_end_message(f"Winner: {outcome.winner}")
        elif outcome.status is Status.DRAW:
            self._show_end_message("It's a draw")

    def on_error(self, exception: Exception) -> None:
        if not self._running:
            return
        self._on_input_error(exception)

    @property
    def status_text(self) -> str:
        outcome = self._game_engine.game.outcome
        if outcome.status is Status.WON:
            return f"Winner: {outcome.winner}"
        if outcome.status is Status.DRAW:
            return "It's a draw"
        if self._game_engine.restricted:
            return "Input locked"
        if self._game_engine.current_player.thinking:
            return "CPU's turn..."
        return f"Player {self._game_engine.game.current_player}'s turn"

    @property
    def score_text(self) -> str:
        scores = self._game_engine.scores
        return f"X {scores.x_wins} - O {scores.o_wins} - Draws {scores.draws}"

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
