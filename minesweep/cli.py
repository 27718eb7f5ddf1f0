"""Interactive command loop."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from minesweep.game import Game, GameState
from minesweep.output import OUTPUT_LOG, write_to_file
from minesweep.player_input import PROMPT, Action, read_command
from minesweep.render import (
    clear_screen,
    render_error,
    render_game,
    render_help_list,
    render_welcome,
)


def _show(game: Game, out: TextIO) -> None:
    clear_screen()
    out.write(render_game(game))


def _new_game(game: Game, out: TextIO) -> None:
    try:
        game.start()
    except ValueError as error:
        game.state = GameState.NOT_INIT
        _show(game, out)
        out.write(f"{error}\n")
        return
    _show(game, out)


def _update(game: Game, out: TextIO) -> None:
    game.update()
    _show(game, out)


def run(stream, out, log_path):
    """Play a game reading commands from ``stream`` and writing to ``out``."""

    def log(message: str) -> None:
        if log_path is not None:
            write_to_file(log_path, message)

    game = Game(log_path=log_path)
    clear_screen()
    out.write(render_welcome(game))

    while True:
        out.write(PROMPT)
        out.flush()
        command = read_command(stream)
        if command is None:
            break

        log("\n> Player input: ")
        action = command.action
        if action == Action.HELP:
            log("Help")
            out.write(render_help_list())
        elif action == Action.NEW_GAME:
            log("New Game")
            _new_game(game, out)
        elif action == Action.REVEAL:
            log(f"Reveal ({command.x} {command.y})")
            game.board.reveal(command.x, command.y)
            _update(game, out)
        elif action == Action.FLAG:
            log(f"Flag ({command.x} {command.y})")
            game.board.toggle_flag(command.x, command.y)
            _update(game, out)
        elif action == Action.QUIT:
            log("Quit")
            clear_screen()
            break
        elif action == Action.CHANGE_BOARD:
            log(f"New board size ({command.x} {command.y})")
            game.board.resize(command.x, command.y)
            _new_game(game, out)
        elif action == Action.CHANGE_BOMBS:
            log(f"Change bombs ({command.x})")
            game.set_bomb_count(command.x)
            _new_game(game, out)
        else:
            log("Invalid")
            out.write(render_error())

    game.board.clear()


def main(argv=None):
    """Start an interactive game on the terminal."""
    parser = argparse.ArgumentParser(prog="minesweep", description="Play Minesweeper.")
    parser.add_argument("--log", default=OUTPUT_LOG, help="file to append the game log to")
    args = parser.parse_args(argv)
    run(sys.stdin, sys.stdout, args.log)
    return 0


if __name__ == "__main__":
    sys.exit(main())