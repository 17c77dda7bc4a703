import logging
from collections.abc import Callable

from ttt_core.board import Mark, Move
from ttt_core.exception import InvalidMoveError, LogicError, OutOfRangeError
from ttt_core.game import Game, Scoreboard
from ttt_core.player import Player

logger = logging.getLogger(__name__)


class GameEngine:
    def __init__(self) -> None:
        self._game = Game()
        self._scores = Scoreboard()
        self._players: tuple[Player, Player] | None = None
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []
        self._restricted = False

    @property
    def game(self) -> Game:
        return self._game

    @property
    def scores(self) -> Scoreboard:
        return self._scores

    @property
    def restricted(self) -> bool:
        return self._restricted

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players or ()

    @property
    def current_player(self) -> Player:
        if self._players is None:
            raise LogicError("Players have not been set.")
        player_x, player_o = self._players
        return player_x if self._game.current_player == player_x.symbol else player_o

    def set_players(self, player_x: Player, player_o: Player) -> None:
        if player_x.symbol == player_o.symbol:
            msg = f"Both players use the same symbol: {player_x.symbol}."
            raise LogicError(msg)
        if self._players is not None:
            for player in self._players:
                player.clear_pending_move()
        self._players = (player_x, player_o) if player_x.symbol is Mark.X else (player_o, player_x)

    def change_mode(self, player_x: Player, player_o: Player) -> None:
        """Swap in new players and start over with an empty board and zeroed scores."""
        if self._restricted:
            raise LogicError("Cannot change mode while input is locked.")
        self.set_players(player_x, player_o)
        self._scores.reset()
        logger.info("Mode changed: X=%s, O=%s", type(player_x).__name__, type(player_o).__name__)
        self.new_game()

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def start(self) -> None:
        """Start the game. The caller must call tick() to advance it."""
        self._notify_board_updated()
        self._start_turn()

    def tick(self) -> None:
        """Apply at most one pending move of the current player.

        Call this repeatedly from a UI loop. A computer player searches for
        its move here, on the tick after its turn started.
        """
        if self._restricted or self._game.is_over():
            return

        player = self.current_player
        move = player.get_pending_move()
        if move is None:
            return

        row, col = move
        try:
            self._game.apply_move(Move(player.symbol, row, col))
        except (InvalidMoveError, OutOfRangeError) as e:
            logger.debug("Rejected move %s at (%s, %s): %s", player.symbol, row, col, e)
            self._notify_on_error(e)
            self._start_turn()
            return
        logger.debug("%s played (%s, %s)", player.symbol, row, col)

        outcome = self._game.outcome
        if self._game.is_over():
            self._scores.record(outcome)
            logger.info("Game over: %s %s", outcome.status.value, outcome.winner or "")
        self._notify_board_updated()

        if self._game.is_over():
            return
        self._start_turn()

    def queue_move(self, row: int, col: int) -> None:
        """Submit a move for the current player, processed by the next tick()."""
        self.current_player.queue_move(row, col)

    def new_game(self) -> None:
        """Clear the board and pending moves, keep the scores, and hand the turn to X."""
        if self._players is not None:
            for player in self._players:
                player.clear_pending_move()
        self._game.reset()
        logger.debug("New game started")
        self._notify_board_updated()
        self._start_turn()

    def reset_scores(self) -> None:
        self._scores.reset()

    def set_restricted(self, restricted: bool) -> None:  # noqa: FBT001
        """Lock or unlock move input. Nothing is applied and no turn starts while locked."""
        if restricted == self._restricted:
            return
        self._restricted = restricted
        logger.info("Input %s", "locked" if restricted else "unlocked")
        self._notify_board_updated()
        if not restricted and self._players is not None and not self.current_player.has_pending_move():
            self._start_turn()

    def _start_turn(self) -> None:
        if self._restricted or self._game.is_over():
            return
        self.current_player.start_turn()

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_on_error(self, exception: Exception) -> None:
        for callback in list(self._on_error_cbs):
            callback(exception)
