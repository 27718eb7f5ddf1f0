"""Text rendering of the board and game screens."""

from __future__ import annotations

import subprocess
import sys

from minesweep.board import Board, Cell, CellState
from minesweep.game import Game, GameState

_STATE_NAMES = {
    GameState.PROC: "In Process",
    GameState.WON: "Won",
    GameState.LOST: "Lost",
    GameState.NOT_INIT: "Not initialized",
}


def clear_screen():
    """Clear the terminal when standard output is one."""
    if not sys.stdout.isatty():
        return
    sys.stdout.flush()
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        sys.stdout.write("\033[H\033[2J")
        sys.stdout.flush()


def render_cell(cell: Cell):
    """Return the two-character text of one cell."""
    if cell.state == CellState.HIDDEN:
        return "■ "
    if cell.state == CellState.FLAGGED:
        return "⚑ "
    if cell.has_bomb:
        return "☼ "
    return f"{cell.bombs_around} "


def render_board(board: Board):
    """Return the board with column and row numbers and a frame."""
    border = "   +" + "--" * board.width + "+\n"
    parts = ["\n   ", "".join(f"{y:2d}" for y in range(board.width)), "\n", border]
    for x, row in enumerate(board.cells):
        parts.append(f"{x:2d} |" + "".join(render_cell(cell) for cell in row) + "|\n")
    parts.append(border)
    return "".join(parts)


def render_header(game: Game):
    """Return the title, bomb count and game state lines."""
    state = _STATE_NAMES.get(game.state, "NaN")
    return (
        "===Minesweeper===\n"
        f"Total bombs: {game.bombs}\n"
        f"Game State: {state}\n"
    )


def render_help_list():
    """Return the list of available commands."""
    return (
        "List of commands:\n"
        "H - List of commands\n"
        "R (number) (number) - Reveal cell using coordinates\n"
        "F (number) (number) - Flag cell using coordinates\n"
        "Q - Quit the game\n"
        "N - Start new game\n"
        "S (number) (number) - Change board height and width\n"
        "B (number) - Set amount of bombs"
    )


def render_error():
    """Return the message shown for an unrecognised command."""
    return "Invalid command.\n"


def render_welcome(game: Game):
    """Return the start screen, listing the settings still missing."""
    parts = ["===Minesweeper===\nTo start the game use following commands:\n"]
    if not game.bombs:
        parts.append("B (number) - Set amount of bombs\n")
    if not game.board.height or not game.board.width:
        parts.append("S (number) (number) - Set board height and width\n")
    parts.append("Type H for more commands.\n")
    return "".join(parts)


def render_game(game: Game):
    """Return the full game screen, or the welcome screen before a game starts."""
    if game.state != GameState.NOT_INIT:
        return render_header(game) + render_board(game.board)
    return render_welcome(game)