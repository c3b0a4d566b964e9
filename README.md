# blockfall

A falling-block puzzle game. Pieces drop into a well 10 cells wide and 20 cells tall.
Fill a row completely to clear it. The game ends when a new piece has no room to enter the well.

## Installing

```
pip install .
```

This installs `pygame`, which the game uses for its window, drawing and sound.

## Playing

```
blockfall
```

The command takes no options apart from `--help`.

| Key         | Action                                 |
|-------------|----------------------------------------|
| Left arrow  | Move the piece one column left         |
| Right arrow | Move the piece one column right        |
| Down arrow  | Drop the piece one row (+1 point)      |
| Up arrow    | Rotate the piece                       |
| Escape      | Quit                                   |

Closing the window also quits. Pieces fall one row on their own every 0.2 seconds.
A piece that cannot fall any further is locked into the well, and the next piece enters.
Each bag holds all seven shapes (I, J, L, O, S, T, Z), and the game deals them in random
order before it refills the bag. The panel on the right shows the score and the next piece.

When the game is over, "GAME OVER" is shown; press any key to start a new round. The key
that starts the new round also acts on the new piece if it is one of the arrow keys.

### Scoring

| Rows cleared at once | Points |
|----------------------|--------|
| 1                    | 100    |
| 2                    | 300    |
| 3                    | 500    |

Clearing four rows at once gives no line points. Every press of the down arrow adds one point.

### Assets

The game looks for its music and sound effects in `./sounds/` (`music.mp3`,
`rotate.mp3`, `clear.mp3`) and its font in `./fonts/PressStart2P.ttf`, relative to the
directory you start it from. Every one of them is optional: without the font the game uses
pygame's default font, and without the sound files (or without a working audio device) it
plays silently. The music loops for as long as the game runs.

## Using the rules in code

The rules live in modules that need no window:

- `blockfall.position.Position` – a frozen `(row, column)` dataclass.
- `blockfall.colors` – the `Color` RGBA tuple, the palette constants and
  `get_cell_colors()`, which maps cell values (0 for empty, 1–7 for piece ids) to colours.
- `blockfall.block` – `Block` and the seven shapes `LBlock`, `JBlock`, `IBlock`, `OBlock`,
  `SBlock`, `TBlock`, `ZBlock`, each created at its spawn position. `move(rows, columns)`,
  `rotate()`, `undo_rotation()` and `cell_positions()` work on a piece; `all_blocks()`
  returns one of each.
- `blockfall.grid.Grid` – the 20 × 10 board in `cells`. `is_cell_outside(row, column)`,
  `is_cell_empty(row, column)` (which raises `IndexError` for cells off the board),
  `clear_full_rows()` and `initialize()`; `str(grid)` gives a text dump of the cell values.
- `blockfall.game` – `Game` and the `Key` enum (`LEFT`, `RIGHT`, `DOWN`, `UP`, `OTHER`).

```python
from blockfall.grid import Grid
from blockfall.block import TBlock

grid = Grid()
block = TBlock()
block.rotate()
block.move(1, 0)
for pos in block.cell_positions():
    print(pos.row, pos.column, grid.is_cell_empty(pos.row, pos.column))
print(grid)
```

`Grid.clear_full_rows()` removes every full row, moves the rows above it down, and returns
how many rows it cleared.

A `Game` can be driven without a window. Pass a `random.Random` for a repeatable order of
pieces, and optional callbacks that run when a rotation succeeds or rows are cleared:

```python
import random
from blockfall.game import Game, Key

game = Game(rng=random.Random(1), on_clear=lambda: print("cleared"))
game.handle_key(Key.LEFT)
game.handle_key(Key.DOWN)
game.move_block_down()
print(game.score, game.game_over, type(game.current_block).__name__)
```

`handle_key(None)` does nothing; `reset()` starts a new round; `update_score(lines, points)`
adds points by the table above.

## Tests

```
pip install .[test]
pytest
```