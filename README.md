# snakegrid

Game logic for the snake game on a rectangular grid, for one player or
several, with a plain-text renderer for an ANSI terminal.

Every game state is an immutable value (a frozen dataclass): each operation
takes a game and returns a new one, so states can be stored, compared and
replayed. Randomness (food placement, spawn points) comes from a small
deterministic generator seeded by the caller, so the same seed always gives
the same game.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## The model

`snakegrid.model` holds the value types:

- `Direction` (`UP`, `DOWN`, `LEFT`, `RIGHT`), `GameStatus` (`PLAYING`,
  `GAME_OVER`) and `PlayerStatus` (`ALIVE`, `DEAD`), all enums.
- `Point(x, y)`, which supports `+` and `-` between points.
- `SnakeGame`, `PlayerSnake` (with a `head` property that is `None` for a snake
  with no segments) and `MultiSnakeGame`.
- `RandomResult` and `FoodPlacement`, returned by the generator and by food
  placement.

and the helpers `point_equals`, `is_opposite`, `direction_delta` (the
one-cell offset for a direction; up is `Point(0, -1)`), `direction_to_string`
and `string_to_direction` (which converts the words `up`, `down`, `left` and
`right`, and returns `None` for anything else).

## Single player

```python
from snakegrid.model import Direction
from snakegrid.single import new_game, change_direction, tick
from snakegrid.render import render

game = new_game(10, 10, 42)          # width, height, seed
game = change_direction(game, Direction.DOWN)
game = tick(game)
print(render(game))
```

The snake starts with three segments at the centre of the board, heading
right. A turn straight back into the snake is ignored. Running into a wall or
into the snake's own body sets the status to `GameStatus.GAME_OVER`, after
which `tick` leaves the game unchanged; eating food grows the snake by one
segment, raises the score and places new food on a free cell.

`snakegrid.single` also provides `next_random(seed, maximum)`, the seeded
generator, and `place_food(snake, width, height, seed)`, which tries random
cells and then scans the board for a free one. `move(...)` is a trivial
automatic player that always answers `Direction.RIGHT`.

## Several players

```python
from snakegrid.model import Direction
from snakegrid.multi import (
    new_multi_game, multi_tick, change_player_direction,
    add_player, remove_player, is_multi_game_over,
)
from snakegrid.render import multi_render

game = new_multi_game(60, 30, 2, 42)  # width, height, players, seed
game = change_player_direction(game, 0, Direction.UP)
game = multi_tick(game, [Direction.UP, Direction.LEFT])
game = add_player(game, 99)
print(multi_render(game))
print(is_multi_game_over(game))
```

Snakes spawn at seeded positions at least five cells from the walls, each
with a random heading; on a board too small for that they start in the
centre heading right. `multi_tick` takes one direction per player by
position; a missing entry or a reversal keeps the snake's heading. All live
snakes move at once, and a snake dies on hitting a wall, its own body,
another live snake's body, or another snake's new head. If several snakes
reach the food in the same step, the last one in order eats it. Each step
increments `tick_count`.

`is_multi_game_over` is true once at most one snake is alive; a game with a
single player ends when that snake dies, and a game with no players is never
over. `remove_player` drops the snakes with a given id; `add_player` appends a
new snake and places the food again.

## Rendering

`snakegrid.render.render` and `multi_render` return a string that starts with
the ANSI clear-screen sequence and draws the board inside a wall of `#`, with
`\r\n` line endings, followed by the score and status (one line per player
in the multi-player view). The food is `*`. Players 0 to 3 are drawn with the
heads `@ # $ %` and bodies `o + ~ =`; later players use `&` and `.`
(`player_head_char`, `player_body_char`).

## Terminal helpers

`snakegrid.terminal` offers `terminal_columns()` and `terminal_rows()` (the
size of the terminal on standard output, or 80 by 24 when unknown) and two
coroutines: `sleep(ms)`, and `read_line()`, which on a terminal returns a
single key press as soon as it is made (Ctrl+C raises SIGINT and yields
`None`) and otherwise returns the next line of standard input without its line
ending, or `None` at end of input.

## What is not included

There is no command that plays the game. The package supplies the game
states, the rules, the renderer and the terminal helpers; a loop that reads
keys, calls `tick` or `multi_tick` on a timer and prints the rendered board is
left to the caller.

## Running the tests

```
pip install .[test]
pytest
```