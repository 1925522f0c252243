import pytest

from dungeonwalk.animation import Animation


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


SHEET = (32 * 6, 32)
FRAME_TIME = 100


def make(clock):
    return Animation(FRAME_TIME, "assets/walk.png", clock)


def test_first_frame_at_start():
    clock = FakeClock()
    animation = make(clock)
    assert animation.frame_rect(SHEET) == (0, 0, SHEET[1], SHEET[1])
    assert animation.frame_index == 0


def test_advances_one_frame_per_frame_time():
    clock = FakeClock()
    animation = make(clock)
    for step in range(6):
        clock.now = animation.start_timestamp + step * FRAME_TIME
        left, top, width, height = animation.frame_rect(SHEET)
        assert animation.frame_index == step
        assert left == step * width
        assert top == 0


def test_stays_on_frame_until_frame_time_elapses():
    clock = FakeClock()
    animation = make(clock)
    clock.now += FRAME_TIME - 1
    assert animation.frame_rect(SHEET)[0] == 0


def test_wraps_after_last_frame():
    clock = FakeClock()
    animation = make(clock)
    frames = SHEET[0] // SHEET[1]
    clock.now += frames * FRAME_TIME
    assert animation.frame_rect(SHEET)[0] == 0
    assert animation.frame_index == 0


def test_square_texture_never_moves():
    clock = FakeClock()
    animation = make(clock)
    clock.now += 12345
    assert animation.frame_rect((48, 48)) == (0, 0, 48, 48)


def test_start_timestamp_from_clock_and_path_kept():
    clock = FakeClock(now=777)
    animation = make(clock)
    assert animation.start_timestamp == 777
    assert animation.texture_path == "assets/walk.png"


@pytest.mark.parametrize("frame_time", [0, -5])
def test_rejects_non_positive_frame_time(frame_time):
    with pytest.raises(ValueError):
        Animation(frame_time, "assets/walk.png", FakeClock())