"""Time, sprite-sheet geometry and movement helpers."""

from __future__ import annotations

import math
import time
from enum import Enum

Vector = tuple[float, float]
Size = tuple[int, int]


class Key(Enum):
    """Keyboard keys the game distinguishes."""

    A = "a"
    D = "d"
    W = "w"
    S = "s"
    SPACE = "space"
    ESCAPE = "escape"
    UNKNOWN = "unknown"


_MOVES: dict[Key, Vector] = {
    Key.A: (-1.0, 0.0),
    Key.D: (1.0, 0.0),
    Key.W: (0.0, -1.0),
    Key.S: (0.0, 1.0),
}


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def frames_count(texture_size: Size) -> int:
    """Return how many square frames a strip-shaped sprite sheet holds."""
    width, height = texture_size
    if width > height:
        return width // height
    if height > width:
        return height // width
    return 1


def frame_size(texture_size: Size) -> Size:
    """Return the size of one square frame of a sprite sheet."""
    width, height = texture_size
    side = min(width, height)
    return (side, side)


def scale_to(source_size: tuple[float, float], target_size: tuple[float, float]) -> Vector:
    """Return the scale factors that stretch ``source_size`` to ``target_size``."""
    return (
        float(target_size[0]) / float(source_size[0]),
        float(target_size[1]) / float(source_size[1]),
    )


def offset_position(
    sprite_size: tuple[float, float],
    grid_position: tuple[float, float],
    tile_size: Size,
) -> Vector:
    """Return the pixel position that centres a sprite on a grid cell."""
    offset_x = (float(tile_size[0]) - float(sprite_size[0])) / 2.0
    offset_y = (float(tile_size[1]) - float(sprite_size[1])) / 2.0
    return (
        grid_position[0] * float(tile_size[0]) + offset_x,
        grid_position[1] * float(tile_size[1]) + offset_y,
    )


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_vector(vector: tuple[float, float]) -> tuple[int, int]:
    """Round both components to the nearest integer, halves away from zero."""
    return (_round_half_away(vector[0]), _round_half_away(vector[1]))


def is_tolerated_difference(
    value: tuple[float, float], target: tuple[float, float], tolerance: float
) -> bool:
    """Tell whether both components of ``value`` lie strictly within ``tolerance`` of ``target``."""
    return abs(value[0] - target[0]) < tolerance and abs(value[1] - target[1]) < tolerance


def direction_to_move(key: Key) -> Vector:
    """Return the unit grid step for a movement key, or a zero vector."""
    return _MOVES.get(key, (0.0, 0.0))