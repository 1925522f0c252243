import time

import pytest

from dungeonwalk.utils import (
    Key,
    current_time_ms,
    direction_to_move,
    frame_size,
    frames_count,
    is_tolerated_difference,
    offset_position,
    round_vector,
    scale_to,
)


def test_current_time_ms_tracks_wall_clock():
    before = time.time() * 1000
    now = current_time_ms()
    after = time.time() * 1000
    assert before - 1 <= now <= after + 1


@pytest.mark.parametrize("count", [1, 2, 4, 7])
def test_frames_count_horizontal_strip(count):
    assert frames_count((32 * count, 32)) == count


@pytest.mark.parametrize("count", [2, 3, 6])
def test_frames_count_vertical_strip(count):
    assert frames_count((16, 16 * count)) == count


def test_frames_count_square_is_single_frame():
    assert frames_count((48, 48)) == 1


def test_frame_size_is_square_of_shorter_side():
    assert frame_size((96, 32)) == (32, 32)
    assert frame_size((24, 120)) == (24, 24)
    assert frame_size((40, 40)) == (40, 40)


def test_scale_to_maps_source_onto_target():
    source = (32, 16)
    target = (64, 64)
    sx, sy = scale_to(source, target)
    assert sx * source[0] == pytest.approx(target[0])
    assert sy * source[1] == pytest.approx(target[1])


def test_offset_position_same_size_sits_on_grid():
    tile = (32, 32)
    grid = (3.0, 2.0)
    assert offset_position((32, 32), grid, tile) == (grid[0] * tile[0], grid[1] * tile[1])


@pytest.mark.parametrize("sprite", [(64, 64), (16, 48), (32, 32)])
def test_offset_position_centres_sprite_on_tile(sprite):
    tile = (32, 32)
    grid = (1.5, 4.0)
    x, y = offset_position(sprite, grid, tile)
    assert x + sprite[0] / 2 == pytest.approx(grid[0] * tile[0] + tile[0] / 2)
    assert y + sprite[1] / 2 == pytest.approx(grid[1] * tile[1] + tile[1] / 2)


def test_round_vector_rounds_halves_away_from_zero():
    assert round_vector((2.5, -2.5)) == (3, -3)
    assert round_vector((1.2, 1.7)) == (1, 2)


def test_round_vector_keeps_integers():
    assert round_vector((4.0, -7.0)) == (4, -7)


def test_is_tolerated_difference_inside():
    assert is_tolerated_difference((1.005, 2.0), (1.0, 2.0), 0.01) is True


def test_is_tolerated_difference_outside_on_either_axis():
    assert is_tolerated_difference((1.5, 2.0), (1.0, 2.0), 0.01) is False
    assert is_tolerated_difference((1.0, 2.5), (1.0, 2.0), 0.01) is False


def test_is_tolerated_difference_is_strict():
    assert is_tolerated_difference((1.0, 1.0), (1.0, 1.0), 0.0) is False


@pytest.mark.parametrize(
    "key, expected",
    [
        (Key.A, (-1.0, 0.0)),
        (Key.D, (1.0, 0.0)),
        (Key.W, (0.0, -1.0)),
        (Key.S, (0.0, 1.0)),
    ],
)
def test_direction_to_move(key, expected):
    assert direction_to_move(key) == expected


@pytest.mark.parametrize("key", [Key.SPACE, Key.ESCAPE, Key.UNKNOWN])
def test_direction_to_move_other_keys_stand_still(key):
    assert direction_to_move(key) == (0.0, 0.0)