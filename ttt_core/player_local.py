from collections.abc import Callable

from ttt_core.board import Mark
from ttt_core.player import Player


class LocalPlayer(Player):
    def __init__(self, symbol: Mark) -> None:
        super().__init__(symbol)
        self._enable_input_cbs: list[Callable[[], None]] = []

    def add_enable_input_cb(self, callback: Callable[[], None]) -> None:
        self._enable_input_cbs.append(callback)

    def start_turn(self) -> None:
        for callback in list(self._enable_input_cbs):
            callback()
