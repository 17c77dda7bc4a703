# ruff: noqa: T201

from ttt_core.board import BOARD_SIZE
from ttt_core.game_engine import GameEngine
from ttt_core.ui import Ui


class TerminalUi(Ui):
    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._game_finished = False

    def run(self) -> None:
        super().run()
        while self._running:
            if self._game_finished:
                self._ask_play_again()
            elif self._input_enabled:
                self._get_input()
            else:
                self._game_engine.tick()
        print("Terminal UI stopped", flush=True)

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._ask_for_move()

    def _ask_for_move(self) -> None:
        max_move = BOARD_SIZE * BOARD_SIZE
        player = self._game_engine.game.current_player
        print(f"Player {player}'s move (1-{max_move}, new, mode, exit): ", end="", flush=True)

    def _read_line(self) -> str | None:
        try:
            return input().strip().lower()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return None

    def _get_input(self) -> None:
        input_str = self._read_line()
        if input_str is None:
            return

        if input_str == "exit":
            self._stop()
            return

        if input_str == "new":
            self._new_game()
            return

        if input_str == "mode":
            self._change_mode()
            return

        try:
            board_position = int(input_str)
        except ValueError:
            self._on_input_error(ValueError("Not an integer"))
            self._ask_for_move()
            return

        max_move = BOARD_SIZE * BOARD_SIZE
        if not (1 <= board_position <= max_move):
            self._on_input_error(ValueError(f"Not between 1 and {max_move}"))
            self._ask_for_move()
            return

        row, col = divmod(board_position - 1, BOARD_SIZE)
        self._queue_move(row, col)

    def _ask_play_again(self) -> None:
        print("Play again? [y/N]: ", end="", flush=True)
        answer = self._read_line()
        if answer in ("y", "yes"):
            self._game_finished = False
            self._new_game()
        else:
            self._stop()

    def _render_board(self) -> None:
        board = self._game_engine.game.board.board

        def _cell_value(index: int) -> str:
            row, col = divmod(index, BOARD_SIZE)
            value = board[row][col]
            return value if value is not None else str(index + 1)

        rows = []
        for r in range(BOARD_SIZE):
            start = r * BOARD_SIZE
            row = " | ".join(_cell_value(start + i) for i in range(BOARD_SIZE))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)
        if not self._game_engine.game.is_over():
            print(f"{self.status_text}  [{self.score_text}]", flush=True)

    def _show_end_message(self, message: str) -> None:
        print(f"{message}  [{self.score_text}]", flush=True)
        self._game_finished = True

    def _on_input_error(self, exception: Exception) -> None:
        if not self._running:
            return
        print(str(exception), flush=True)
