# solong

A small top-down puzzle game. You walk a character around a walled map,
pick up every collectible, and then step onto the exit. The exit stays
locked while anything is left to collect. In the bonus edition, enemies
chase you one step after each of your moves, collectibles blink, and the
move count is shown in the window.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
so_long maps/level1.ber
so_long_bonus maps/level1.ber
```

Each command takes exactly one argument: a map file whose name ends in
`.ber` (case-sensitive). Anything else prints a usage or extension error
and exits with status 1. Texture images are read from an `assets`
directory in the current working directory:

- `wall.xpm`, `floor.xpm`, `exit_closed.xpm`, `exit.xpm`, `collectible.xpm`
- `player.xpm`, `player_l.xpm`, `player_r.xpm`, `player_b.xpm`
  (facing down, left, right, up)
- bonus edition only: `enemy.xpm`, `collectible2.xpm`

The open exit image (`exit.xpm`) replaces the closed one once every
collectible has been picked up.

Controls:

| Key               | Action     |
|-------------------|------------|
| `W` / Up arrow    | move up    |
| `S` / Down arrow  | move down  |
| `A` / Left arrow  | move left  |
| `D` / Right arrow | move right |
| `Esc`             | quit       |

Closing the window also quits. After every step the player's position
and the move count are printed in the terminal. Reaching the exit wins
(status 0); being caught by an enemy ends the game.

## Map format

A map is a plain text file, one row per line, using these tiles:

| Tile | Meaning                       |
|------|-------------------------------|
| `1`  | wall                          |
| `0`  | floor                         |
| `P`  | player start (exactly one)    |
| `E`  | exit (exactly one)            |
| `C`  | collectible (at least one)    |
| `M`  | enemy (bonus edition only)    |

A map is rejected when:

- it is empty or has more than 99 rows,
- its rows are not all the same length,
- it is not closed in by walls on every edge,
- it holds any other character,
- it does not have exactly one `P`, exactly one `E` and at least one `C`,
- the player cannot reach the exit and every collectible.

In the plain edition the exit blocks the path search; in the bonus
edition the search may pass through it. A map that is too large for the
screen (32 pixels per tile, with 64 pixels kept free vertically) is not
opened.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

## Using it as a library

The map handling and game rules work without a window:

```python
from solong.board import parse_map
from solong.validate import validate_map
from solong.game import Game, Direction, MoveOutcome

board = parse_map("11111\n1PCE1\n11111\n")
counts = validate_map(board, False)   # Counts(player=1, exit=1, collectible=1)

game = Game(board)
assert game.move(Direction.RIGHT) is MoveOutcome.MOVED
assert game.collectibles_left() == 0
assert game.move(Direction.RIGHT) is MoveOutcome.WON
```

- `solong.board`: `Board` (a grid indexed by `(x, y)` with `count`,
  `find`, `positions` and `copy`), `parse_map`, `load_map`, and
  `MapError`, raised for every invalid map.
- `solong.validate`: `check_walls`, `check_dimensions`, `count_tiles`,
  `check_counts` and `validate_map`.
- `solong.pathing`: `flood_fill` and `check_valid_path`.
- `solong.game`: `Game` (with `from_file`, `move`, `handle_key` and
  `collectibles_left`), `Direction`, `MoveOutcome` and
  `direction_for_key`. Moves report their result as a `MoveOutcome`
  (`MOVED`, `WALL`, `EXIT_LOCKED`, `WON`, `CAUGHT`, ...).
- `solong.enemies`: `Enemy`, `find_enemies`, `next_position` and
  `move_enemies`, which raises `GameOver` when an enemy reaches the
  player. `Game.move` turns that into `MoveOutcome.CAUGHT`.
- `solong.render`: `load_textures`, `Textures`, `Renderer` and
  `fits_screen`, for drawing onto a pygame surface.
- `solong.app`: the `main` and `main_bonus` command entry points and
  `run`.