import argparse
from collections.abc import Iterable

from ttt_core.board import Mark
from ttt_core.game_engine import GameEngine
from ttt_core.logging_setup import default_log_level, setup_logging
from ttt_core.player import Player
from ttt_core.player_ai import MinimaxPlayer
from ttt_core.player_local import LocalPlayer
from ttt_core.ui import Ui
from ttt_core.ui_pygame import PygameUi
from ttt_core.ui_terminal import TerminalUi


def main() -> None:
    ui_choices: dict[str, type[Ui]] = {"terminal": TerminalUi, "pygame": PygameUi}

    args = _parse_args(ui_choices.keys())
    setup_logging(args.log_level)

    game_engine = GameEngine()
    ui = ui_choices[args.ui](game_engine)

    player_x = _create_player(args.player_x, Mark.X, game_engine, ui)
    player_o = _create_player(args.player_o, Mark.O, game_engine, ui)
    game_engine.set_players(player_x, player_o)
    game_engine.add_board_updated_cb(ui.on_board_updated)
    game_engine.add_on_error_cb(ui.on_error)
    ui.set_change_mode_cb(lambda: _toggle_mode(game_engine, ui))

    ui.run()


def _toggle_mode(game_engine: GameEngine, ui: Ui) -> None:
    """Switch between two-player and human-vs-CPU, as the mode selector does."""
    vs_cpu = any(isinstance(player, MinimaxPlayer) for player in game_engine.players)
    player_o_kind = "human" if vs_cpu else "cpu"
    game_engine.change_mode(
        _create_player("human", Mark.X, game_engine, ui),
        _create_player(player_o_kind, Mark.O, game_engine, ui),
    )


def _create_player(kind: str, symbol: Mark, game_engine: GameEngine, ui: Ui) -> Player:
    match kind:
        case "human":
            player = LocalPlayer(symbol)
            player.add_enable_input_cb(ui.enable_input)
            return player
        case "cpu":
            return MinimaxPlayer(symbol, game_engine.game.board)
        case _:
            msg = f"Invalid player kind: {kind}"
            raise ValueError(msg)


def _parse_args(ui_choices: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ttt_core", description="Tic-Tac-Toe with a perfect minimax opponent.")

    parser.add_argument("--player-x", choices=("human", "cpu"), default="human")
    parser.add_argument("--player-o", choices=("human", "cpu"), default="cpu")
    parser.add_argument("--ui", choices=list(ui_choices), default="terminal")
    parser.add_argument("--log-level", default=default_log_level(), help="Defaults to $LOG_LEVEL or WARNING.")

    return parser.parse_args()


if __name__ == "__main__":
    main()
