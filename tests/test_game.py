import pytest

from minesweep.board import Board, CellState
from minesweep.game import Game, GameState


def sized_game(bombs, seed=3):
    game = Game(seed=seed)
    game.board.resize(6, 6)
    game.set_bomb_count(bombs)
    return game


@pytest.mark.parametrize("requested,expected", [(0, 1), (-5, 1), (1, 1), (10, 10)])
def test_set_bomb_count(requested, expected):
    game = Game()
    game.set_bomb_count(requested)
    assert game.bombs == expected


def test_start_without_bombs_stays_uninitialised():
    game = Game()
    game.board.resize(6, 6)
    game.start()
    assert game.state == GameState.NOT_INIT
    assert game.board.cells == []


def test_start_without_size_stays_uninitialised():
    game = Game()
    game.set_bomb_count(5)
    game.start()
    assert game.state == GameState.NOT_INIT


def test_start_creates_board():
    game = sized_game(5)
    game.start()
    assert game.state == GameState.PROC
    bombs = sum(cell.has_bomb for row in game.board.cells for cell in row)
    assert bombs == 5


def test_update_not_initialised_keeps_state():
    game = Game()
    game.update()
    assert game.state == GameState.NOT_INIT


def test_update_in_progress():
    game = sized_game(5)
    game.start()
    game.update()
    assert game.state == GameState.PROC


def test_update_lost_reveals_everything():
    game = sized_game(5)
    game.start()
    x, y = next(
        (x, y)
        for x, row in enumerate(game.board.cells)
        for y, cell in enumerate(row)
        if cell.has_bomb
    )
    game.board.reveal(x, y)
    game.update()
    assert game.state == GameState.LOST
    assert all(
        cell.state == CellState.SHOWN for row in game.board.cells for cell in row
    )


def test_update_won():
    game = sized_game(1)
    game.start()
    for x, row in enumerate(game.board.cells):
        for y, cell in enumerate(row):
            if not cell.has_bomb:
                game.board.reveal(x, y)
    game.update()
    assert game.state == GameState.WON


def test_update_logs_status(tmp_path):
    log = tmp_path / "log.txt"
    game = Game(log_path=str(log))
    game.update()
    assert log.read_text(encoding="utf-8") == "\n> Game status: Not initialized"


def test_board_inherits_log_path(tmp_path):
    log = str(tmp_path / "log.txt")
    game = Game(log_path=log)
    assert game.board.log_path == log


def test_explicit_board_log_path_kept(tmp_path):
    board_log = str(tmp_path / "board.txt")
    game = Game(board=Board(log_path=board_log), log_path=str(tmp_path / "game.txt"))
    assert game.board.log_path == board_log