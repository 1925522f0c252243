"""Tile maps loaded from text files of tile characters."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

logger = logging.getLogger(__name__)


class TileType(str, Enum):
    """Kinds of map cell, keyed by their character in a map file."""

    EMPTY = "0"
    FLOOR = "1"
    PLAYER = "2"


class MapError(RuntimeError):
    """Raised when a map cannot be loaded or is missing required content."""


def is_valid_tile_type(value: object) -> bool:
    """Tell whether ``value`` names a tile type."""
    try:
        TileType(value)
    except ValueError:
        return False
    return True


class TileMap:
    """A rectangular grid of tiles; short rows are padded with empty tiles."""

    def __init__(self, rows: Iterable[Sequence[TileType]]) -> None:
        grid = [[TileType(tile) for tile in row] for row in rows]
        if not grid:
            raise MapError("Map file is empty or malformed")
        width = max(len(row) for row in grid)
        self._data = [row + [TileType.EMPTY] * (width - len(row)) for row in grid]
        self._size = (width, len(grid))

    @property
    def size(self) -> tuple[int, int]:
        """The map's width and height in tiles."""
        return self._size

    def _check(self, coords: tuple[int, int]) -> tuple[int, int]:
        x, y = coords
        width, height = self._size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError("Map coordinates out of range")
        return x, y

    def __getitem__(self, coords: tuple[int, int]) -> TileType:
        x, y = self._check(coords)
        return self._data[y][x]

    def __setitem__(self, coords: tuple[int, int], value: TileType) -> None:
        x, y = self._check(coords)
        self._data[y][x] = TileType(value)

    def tiles(self) -> Iterator[tuple[tuple[int, int], TileType]]:
        """Yield every cell's coordinates and tile, row by row."""
        for y, row in enumerate(self._data):
            for x, tile in enumerate(row):
                yield (x, y), tile

    def extract_player_position(self) -> tuple[int, int]:
        """Find the first player tile, turn it into floor and return its coordinates."""
        for coords, tile in self.tiles():
            if tile is TileType.PLAYER:
                self[coords] = TileType.FLOOR
                return coords
        raise MapError("Player position not found in map")


def load_map(filename: str) -> TileMap:
    """Read a map file where each line is a row of tile characters."""
    try:
        with open(filename, encoding="utf-8", newline="") as file:
            text = file.read()
    except OSError as exc:
        raise MapError(f"Failed to open {filename}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    rows: list[list[TileType]] = []
    for line in lines:
        if not line:
            raise MapError(f"Empty line found in {filename}")
        row = []
        for token in line:
            if not is_valid_tile_type(token):
                raise MapError(f"Invalid tile type in {filename}: {token}")
            row.append(TileType(token))
        rows.append(row)

    tilemap = TileMap(rows)
    width, height = tilemap.size
    logger.info("Map loaded from %s with size %ux%u", filename, width, height)
    return tilemap