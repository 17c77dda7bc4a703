from typing import Final

import pygame

from ttt_core.board import BOARD_SIZE, Line, Mark
from ttt_core.game_engine import GameEngine
from ttt_core.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    STATUS_HEIGHT: Final = 64
    CELL_SIZE: Final = WINDOW_SIZE // BOARD_SIZE
    LINE_WIDTH: Final = 4
    WIN_LINE_WIDTH: Final = 10
    FLASH_INTERVAL_MS: Final = 400

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    WIN_COLOR: Final = (223, 191, 63)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._board = self._game_engine.game.board.board
        self._winning_line: Line | None = None
        self._end_message = ""
        self._last_error = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE + self.STATUS_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 32)

        super().run()
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
            # Rendered first so "CPU's turn..." is on screen before the search blocks.
            self._game_engine.tick()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.KEYDOWN if event.key == pygame.K_n:
                    self._new_game()
                case pygame.KEYDOWN if event.key == pygame.K_m:
                    self._change_mode()
                case pygame.KEYDOWN if event.key == pygame.K_l:
                    self._game_engine.set_restricted(not self._game_engine.restricted)
                case pygame.MOUSEBUTTONDOWN if self._input_enabled:
                    self._on_click(event.pos)

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            return
        self._last_error = ""
        self._queue_move(row, col)

    def _render(self) -> None:
        pygame.display.set_caption(f"{self.TITLE} - {self.status_text}")
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_winning_line()
        self._draw_marks()
        self._draw_status()
        pygame.display.flip()

    def _render_board(self) -> None:
        self._board = self._game_engine.game.board.board
        self._winning_line = self._game_engine.game.winning_line
        self._end_message = ""
        self._last_error = ""

    def _show_end_message(self, message: str) -> None:
        self._end_message = message

    def _on_input_error(self, exception: Exception) -> None:
        self._last_error = str(exception)

    def _cell_center(self, row: int, col: int) -> tuple[int, int]:
        return col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.WINDOW_SIZE, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )
        pygame.draw.line(
            self._screen,
            self.LINE_COLOR,
            (0, self.WINDOW_SIZE),
            (self.WINDOW_SIZE, self.WINDOW_SIZE),
            self.LINE_WIDTH,
        )

    def _draw_winning_line(self) -> None:
        if self._winning_line is None:
            return
        # Blink on and off until a new game clears the line.
        if (pygame.time.get_ticks() // self.FLASH_INTERVAL_MS) % 2:
            return
        start, _, end = self._winning_line
        pygame.draw.line(
            self._screen,
            self.WIN_COLOR,
            self._cell_center(*start),
            self._cell_center(*end),
            self.WIN_LINE_WIDTH,
        )

    def _draw_marks(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                value = self._board[row][col]
                if value is None:
                    continue
                color = self.X_COLOR if value is Mark.X else self.O_COLOR
                text = self._font.render(value, True, color)  # noqa: FBT003
                rect = text.get_rect(center=self._cell_center(row, col))
                self._screen.blit(text, rect)

    def _draw_status(self) -> None:
        message = self._end_message or self._last_error or self.status_text
        lines = (f"{message}  [{self.score_text}]", "N: new game   M: change mode   L: lock input")
        for i, line in enumerate(lines):
            text = self._small_font.render(line, True, self.TEXT_COLOR)  # noqa: FBT003
            rect = text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE + 18 + i * 28))
            self._screen.blit(text, rect)
