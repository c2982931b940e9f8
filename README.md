# pacman_console

A small Pac-Man style maze game that runs in your terminal.

You steer Pac-Man (`@`) through a maze loaded from a text file, eat the food
(`o`) and keep away from the monsters. The game comes with several rule
variants, from simply walking the maze to the full game, where monsters roam
the board, new ones keep appearing, a score of 20 makes you invincible for a
while, and eating every piece of food clears the level.

## Installing

```
pip install .
```

## Playing

```
pacman-console
```

Options:

| Option            | Meaning                                                         |
|-------------------|-----------------------------------------------------------------|
| `--variant NAME`  | rule set to play with (default: `master`)                        |
| `--map FILE`      | map file to load (default: `mapFile.txt`)                        |
| `--delay SECONDS` | seconds per frame (default: the variant's own)                   |
| `--seed N`        | random seed, for repeatable monster placement and movement      |
| `--no-color`      | draw without colours                                             |
| `--no-pause`      | exit at once instead of waiting for a key when the game ends    |

If the map file cannot be found, a message is printed and the game is played
on an empty board.

Controls:

| Key | Action     |
|-----|------------|
| `w` | move up    |
| `s` | move down  |
| `a` | move left  |
| `d` | move right |
| `q` | quit       |

Score, remaining invincibility and the result (`[ Game Clear! ]` or
`[ Game Over! ]`) are shown under the board. Variants that pause on exit wait
for a key with `Press any key to continue . . .` unless `--no-pause` is given.

## Variants

| Name         | Board | Rules                                                                              |
|--------------|-------|------------------------------------------------------------------------------------|
| `basic`      | 30x20 | walk the maze; only empty corridor can be entered                                  |
| `wide`       | 30x20 | as `basic`, with a full-width player glyph and cells drawn with spaces between them |
| `phase`      | 30x20 | the player (`P`) passes through walls                                              |
| `score`      | 30x20 | eating food raises the score                                                       |
| `enemies`    | 30x20 | four monsters (`E`) wander at random; touching one ends the game                   |
| `chase`      | 40x14 | coloured board; five monsters (`M`) leave food where they found it                 |
| `invincible` | 40x14 | a new monster every 100 frames; score 20 grants 200 frames of invincibility; eating all food wins |
| `master`     | 40x14 | as `invincible`, and the level is also cleared once no food is left on the board   |

## Map files

A map is a plain UTF-8 text file, one line per row of the maze:

- `#` is a wall
- `o` is food
- a space is an empty corridor

Rows and columns beyond the board's size are ignored, and short lines are
padded with empty corridor. Pac-Man is placed at the variant's starting
position, and monsters are placed at random on empty cells.

## Using it as a library

The game logic does not depend on the terminal, so it can be driven directly:

```python
import random

from pacman_console.board import load_board
from pacman_console.game import Game
from pacman_console.rules import get_variant, variant_names
from pacman_console.render import render_frame

print(variant_names())
variant = get_variant("master")
board = load_board("mapFile.txt", variant.rows, variant.cols)
game = Game(board, variant, random.Random(1))

outcome = game.tick("d")          # one frame with a key press
print(render_frame(game, colorize=False))
print(game.score, outcome)
```

The modules:

- `pacman_console.board` — `Board`, a grid of characters addressed by
  `(x, y)`, with `parse_board` and `load_board` to build one from text.
- `pacman_console.rules` — `Variant`, `EnemyStyle`, `get_variant` and
  `variant_names`.
- `pacman_console.game` — `Game`, `Enemy` and `Outcome` (`PLAYING`, `QUIT`,
  `CAUGHT`, `CLEARED`). `Game.tick` runs one frame; `Game.status_lines`
  gives the lines shown under the board.
- `pacman_console.render` — `render_board`, `render_frame`, `cell_color` and
  `Color`, producing plain or ANSI-coloured text.
- `pacman_console.cli` — `build_parser`, `run` and `main`, the terminal
  front end built on `blessed`.

## What it does not do

There is one map per game and no levels, lives or saved high scores. Monsters
move at random rather than chasing the player, and there is no sound.

## Running the tests

```
pip install .[test]
pytest
```