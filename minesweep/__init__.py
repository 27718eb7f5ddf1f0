"""Terminal Minesweeper: board, game state, command parsing, rendering and CLI."""

__version__ = "0.1.0"
__all__ = ["board", "cli", "game", "output", "player_input", "render"]