# dungeonwalk

A small tile-based dungeon walker. It reads a dungeon layout from a plain
text file, draws it in a window with pygame, and lets you walk a character
over the floor tiles one tile at a time, with idle and walking animations.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

```
dungeonwalk
```

The same entry point can be started with `python -m dungeonwalk.game`.

The command opens a window the size of the desktop, placed at the top-left
corner and titled "My Game", loads the map from `maps/small` and draws it
with 32×32 pixel tiles. Textures are read relative to the current
directory, so run the command from a directory that holds both `maps/` and
`assets/`:

| File                                              | Used for            |
|---------------------------------------------------|---------------------|
| `assets/2 Dungeon Tileset/1 Tiles/Tile_20.png`    | floor tile          |
| `assets/1 Characters/1/D_Idle.png`                | idle animation      |
| `assets/1 Characters/1/D_Walk.png`                | walking animation   |

Animations are horizontal (or vertical) strips of square frames. If the
floor texture cannot be loaded, the game does not start. If a character
texture is missing, the error is logged and the character is simply not
drawn.

If anything fails, the command prints `Error: <message>` to standard error
and exits with status 1; after the window is closed it exits with status 0.

Controls:

| Key | Moves |
|-----|-------|
| W   | up    |
| A   | left  |
| S   | down  |
| D   | right |

If several movement keys are held, the one pressed most recently wins. A
step is only started when the character is idle and the target tile is
floor. Each step moves the character 0.1 tile every 50 ms until it lands
on the next tile. Close the window to quit.

## Map files

A map is a text file, one row per line. Each character is one tile:

| Character | Tile                                   |
|-----------|----------------------------------------|
| `0`       | empty (not drawn, cannot be walked on) |
| `1`       | floor                                  |
| `2`       | the player's starting tile (floor)     |

Rules:

- Every line must be non-empty; an empty line is an error. A single
  trailing newline at the end of the file is allowed.
- Any other character is an error.
- Shorter rows are padded with empty tiles to the width of the longest row.
- The map must contain a `2`; the first one found (row by row) is the start.
- Surround the floor with empty tiles: trying to walk off the edge of the
  map looks up a tile outside it, which raises `IndexError` and ends the
  game with an error.

Example:

```
00000
01110
01210
01110
00000
```

## Using the pieces

### `dungeonwalk.tilemap`

```python
from dungeonwalk.tilemap import load_map, TileType

tiles = load_map("maps/small")
print(tiles.size)                          # (width, height)
start = tiles.extract_player_position()    # the start tile becomes floor
assert tiles[start] is TileType.FLOOR
for (x, y), tile in tiles.tiles():
    ...
```

- `TileType` — `EMPTY`, `FLOOR`, `PLAYER`, valued `"0"`, `"1"`, `"2"`.
- `is_valid_tile_type(value)` — whether a value names a tile type.
- `TileMap(rows)` — a grid built from rows of tiles; indexing with `(x, y)`
  reads or writes a tile, and coordinates outside the map raise
  `IndexError`.
- `load_map(filename)` — reads a map file; a missing file, an empty line,
  an unknown character or an empty map raise `MapError`, as does
  `extract_player_position()` when there is no start tile.

### `dungeonwalk.character` and `dungeonwalk.actions`

`Character(clock=None)` keeps a grid `position`, the held keys
(`press(key)`, `release(key)`, `inputs`) and its current `action`.
`logic(world)` takes any object that can be indexed with `(x, y)` and
returns `TileType` values, so the movement rules run without a window:

```python
from dungeonwalk.character import Character
from dungeonwalk.tilemap import TileMap, TileType
from dungeonwalk.utils import Key

now = [0]
world = TileMap([[TileType.EMPTY] * 3, [TileType.EMPTY, TileType.FLOOR, TileType.FLOOR], [TileType.EMPTY] * 3])
hero = Character(clock=lambda: now[0])
hero.position = (1.0, 1.0)
hero.press(Key.D)
for now[0] in range(0, 1000, 50):
    hero.logic(world)
print(hero.position)   # (2.0, 1.0)
```

The actions are `Idle` (never finishes) and `Move(direction)` (one tile);
both derive from the abstract `Action`, which runs `execute` once for each
scheduled time that has passed when `update` is called. Every time-driven
class takes an optional `clock` returning milliseconds.

### `dungeonwalk.animation` and `dungeonwalk.utils`

`Animation(frame_time, texture_path, clock=None).frame_rect(texture_size)`
returns the `(left, top, width, height)` of the frame to show now.
`dungeonwalk.utils` holds the `Key` enum and small helpers:
`current_time_ms`, `frames_count`, `frame_size`, `scale_to`,
`offset_position`, `round_vector`, `is_tolerated_difference` and
`direction_to_move`.

## What it does not do

The `dungeonwalk` command takes no options other than `--help`: the map
file, window title and tile size are fixed. There is no sound, no menu, no
saving, and nothing to do in the dungeon beyond walking on its floor.