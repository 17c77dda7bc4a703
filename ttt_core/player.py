from abc import ABC, abstractmethod
from queue import Empty, Full, Queue

from ttt_core.board import Mark, Position
from ttt_core.exception import LogicError


class Player(ABC):
    def __init__(self, symbol: Mark) -> None:
        self._symbol = symbol
        self._move_queue: Queue[Position] = Queue(maxsize=1)

    @property
    def symbol(self) -> Mark:
        return self._symbol

    @property
    def thinking(self) -> bool:
        return False

    @abstractmethod
    def start_turn(self) -> None:
        pass

    def get_pending_move(self) -> Position | None:
        """Get the next pending move if one is available."""
        try:
            return self._move_queue.get_nowait()
        except Empty:
            return None

    def has_pending_move(self) -> bool:
        return not self._move_queue.empty()

    def queue_move(self, row: int, col: int) -> None:
        """Queue a move to be processed by the game engine."""
        try:
            self._move_queue.put_nowait((row, col))
        except Full as e:
            raise LogicError("Pending move queue is full.") from e

    def clear_pending_move(self) -> None:
        while self.get_pending_move() is not None:
            pass
