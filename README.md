# minesweep

Minesweeper in the terminal. You drive the game by typing short commands, and
after each move the board is drawn again.

## Install

```
pip install .
```

## Play

```
minesweep
```

A new session has no board size and no bomb count yet. Set both, then start a
game:

```
S 9 9     set the board to 9 rows and 9 columns
B 10      set 10 bombs
N         start a new game
```

Each side of the board must be greater than 5. A size that is not is ignored.
A bomb count below 1 counts as 1. If there are more bombs than cells, no game
starts and the prompt says so.

## Commands

Only the first letter of a command matters, and it is not case sensitive.
Numbers may be separated from the letter and from each other by spaces.

| Command   | Effect                                   |
|-----------|------------------------------------------|
| `H`       | List the commands                        |
| `R x y`   | Reveal the cell in row `x`, column `y`   |
| `F x y`   | Put a flag on that cell or take it off   |
| `N`       | Start a new game                         |
| `S h w`   | Change the board height and width        |
| `B n`     | Set the number of bombs                  |
| `Q`       | Quit                                     |

Changing the size or the bomb count starts a new game straight away. Blank
lines are skipped. Anything else prints `Invalid command.`. The game also ends
when the input runs out.

On the board, `■` is a hidden cell, `⚑` is a flag, `☼` is a bomb, and a digit
gives the number of bombs in the eight cells around it. If you reveal a cell
with no bombs next to it, the cells around it are revealed too. You lose when
you reveal a bomb, and then the whole board is shown. You win when every cell
without a bomb has been revealed.

The screen is cleared before each redraw when output goes to a terminal.

## Log

Each session appends its moves and game events to a log file. By default the
file is `log.txt` in the current directory. Use `--log` to choose a different
one:

```
minesweep --log /tmp/minesweep.log
```

## Using it from Python

The rendering functions return strings, and the game can be seeded so that the
bombs are always placed the same way:

```python
from minesweep.game import Game
from minesweep.render import render_game

game = Game(seed=1)
game.board.resize(9, 9)
game.set_bomb_count(10)
game.start()
game.board.reveal(0, 0)
game.update()
print(render_game(game))
```

`minesweep.cli.run(stream, out, log_path)` plays a whole session. It reads
commands from any text stream and writes to any text stream. Pass
`log_path=None` to turn logging off.

## What it does not do

The board always measures what you set with `S`. There are no preset
difficulty levels. The first reveal is not guaranteed to be safe. There is no
timer and no score table.

## Tests

```
pip install .[test]
pytest
```