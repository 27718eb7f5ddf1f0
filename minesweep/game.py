"""Game state on top of a board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from minesweep.board import Board
from minesweep.output import write_to_file


class GameState(IntEnum):
    NOT_INIT = -1
    PROC = 0
    WON = 1
    LOST = 2


@dataclass
class Game:
    board: Board = field(default_factory=Board)
    state: GameState = GameState.NOT_INIT
    bombs: int = 0
    seed: int | None = None
    log_path: str | None = None

    def __post_init__(self) -> None:
        if self.board.log_path is None:
            self.board.log_path = self.log_path

    def _log(self, message: str) -> None:
        if self.log_path is not None:
            write_to_file(self.log_path, message)

    def start(self):
        """Lay out a new board if a bomb count is set, and reset the state."""
        if self.bombs:
            self.board.populate(self.bombs, self.seed)
        self.state = GameState.PROC if self.board.cells else GameState.NOT_INIT

    def update(self):
        """Recompute the state after a move; a lost game reveals the board."""
        self._log("\n> Game status: ")
        if self.state == GameState.NOT_INIT:
            self._log("Not initialized")
        elif self.board.is_lost():
            self._log("Lost")
            self.board.reveal_all()
            self.state = GameState.LOST
        elif self.board.is_won():
            self._log("Won")
            self.state = GameState.WON
        else:
            self._log("In process")
            self.state = GameState.PROC

    def set_bomb_count(self, bomb_count):
        """Set the bomb count, never below one."""
        self.bombs = bomb_count if bomb_count > 0 else 1