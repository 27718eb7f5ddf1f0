"""The minefield: cells, bomb placement, revealing and flagging."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

from minesweep.output import write_to_file

MIN_SIDE = 5
"""Board sides must be strictly greater than this."""


class CellState(IntEnum):
    HIDDEN = 0
    SHOWN = 1
    FLAGGED = 2


@dataclass
class Cell:
    state: CellState = CellState.HIDDEN
    bombs_around: int = 0
    has_bomb: bool = False


@dataclass
class Board:
    """A grid of cells, addressed as ``(x, y)`` with ``x`` the row."""

    height: int = 0
    width: int = 0
    cells: list[list[Cell]] = field(default_factory=list)
    log_path: str | None = None

    def _log(self, message: str) -> None:
        if self.log_path is not None:
            write_to_file(self.log_path, message)

    def _all_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if (dx or dy) and not self.out_of_bounds(x + dx, y + dy):
                    yield x + dx, y + dy

    def _cell_at(self, x: int, y: int) -> Cell | None:
        if not self.cells or self.out_of_bounds(x, y):
            return None
        if x >= len(self.cells) or y >= len(self.cells[x]):
            return None
        return self.cells[x][y]

    def out_of_bounds(self, x, y):
        """Return True if ``(x, y)`` lies outside the board."""
        return not (0 <= x < self.height and 0 <= y < self.width)

    def clear(self):
        """Drop all cells, keeping the board dimensions."""
        self.cells = []

    def resize(self, height, width):
        """Change dimensions; sizes not above ``MIN_SIDE`` are ignored."""
        if height > MIN_SIDE and width > MIN_SIDE:
            self.height = height
            self.width = width

    def populate(self, bomb_count, seed=None):
        """Create fresh hidden cells and scatter ``bomb_count`` bombs at random."""
        self._log("\n> Initializing board:")
        self._log("\nFreeing board memory")
        self.clear()

        if not self.height or not self.width:
            return

        bomb_count = max(bomb_count, 0)
        total = self.height * self.width
        if bomb_count > total:
            raise ValueError(
                f"cannot place {bomb_count} bombs on a board of {total} cells"
            )

        self._log(f"\nAllocating board memory ({self.height} {self.width})")
        self.cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]
        self._log("\nSetting default settings for cells")

        if seed is None:
            seed = int(time.time())
        self._log(f"\nSeed: {seed}")
        rng = random.Random(seed)

        for position in rng.sample(range(total), bomb_count):
            row, column = divmod(position, self.width)
            self.cells[row][column].has_bomb = True
        self._log(f"\nBombs placed in random positions, total: {bomb_count}")

        for x, row in enumerate(self.cells):
            for y, cell in enumerate(row):
                if not cell.has_bomb:
                    cell.bombs_around = sum(
                        self.cells[nx][ny].has_bomb for nx, ny in self._neighbours(x, y)
                    )

        self._log("\nCompleted initializing board")

    def reveal(self, x, y):
        """Show a hidden cell, flooding outward from cells with no bombs around."""
        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            cell = self._cell_at(cx, cy)
            if cell is None or cell.state != CellState.HIDDEN:
                continue
            cell.state = CellState.SHOWN
            if not cell.has_bomb and not cell.bombs_around:
                pending.extend(self._neighbours(cx, cy))

    def reveal_all(self):
        """Show every cell on the board."""
        if not self.cells:
            return
        self._log("\n> Revealing all cells")
        for cell in self._all_cells():
            cell.state = CellState.SHOWN

    def toggle_flag(self, x, y):
        """Flag a hidden cell or unflag a flagged one; shown cells are untouched."""
        cell = self._cell_at(x, y)
        if cell is None:
            return
        if cell.state == CellState.HIDDEN:
            self._log(f"\n> Flagged cell ({x} {y})")
            cell.state = CellState.FLAGGED
        elif cell.state == CellState.FLAGGED:
            self._log(f"\n> Unflagged cell ({x} {y})")
            cell.state = CellState.HIDDEN

    def is_lost(self):
        """Return True if any bomb has been revealed."""
        return any(
            cell.has_bomb and cell.state == CellState.SHOWN for cell in self._all_cells()
        )

    def is_won(self):
        """Return True if every cell without a bomb has been revealed."""
        if not self.cells:
            return False
        return all(
            cell.has_bomb or cell.state == CellState.SHOWN for cell in self._all_cells()
        )

    def count_flagged(self):
        """Return the number of flagged cells."""
        return sum(cell.state == CellState.FLAGGED for cell in self._all_cells())