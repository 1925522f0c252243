"""Timed actions a character performs: standing idle and stepping one tile."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from .animation import Animation
from .utils import Key, current_time_ms, direction_to_move

STEP_SIZE = 0.1
RUN_SPEED = 50
IDLE_FRAME_TIME = 100
IDLE_TEXTURE = "./assets/1 Characters/1/D_Idle.png"
WALK_TEXTURE = "./assets/1 Characters/1/D_Walk.png"


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _step_count() -> int:
    """Number of steps needed to cover one tile, using single-precision sums."""
    steps = 0
    moved = 0.0
    step = _f32(STEP_SIZE)
    while moved < 1.0:
        steps += 1
        moved = _f32(moved + step)
    return steps


class Action(ABC):
    """An animated action that runs ``execute`` at scheduled timestamps."""

    def __init__(
        self,
        frame_time: int,
        texture_path: str,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._clock = clock or current_time_ms
        self.animation = Animation(frame_time, texture_path, self._clock)
        self._execute_timestamps: list[int] = []

    @property
    def texture_path(self) -> str:
        """Path of the sprite sheet this action shows."""
        return self.animation.texture_path

    def update(self, world: Any, actor: Any) -> None:
        """Run ``execute`` once for every scheduled timestamp that has passed."""
        now = self._clock()
        while self._execute_timestamps and self._execute_timestamps[0] <= now:
            self.execute(world, actor)
            self._execute_timestamps.pop(0)

    def frame_rect(self, texture_size: tuple[int, int]) -> tuple[int, int, int, int]:
        """Return the sprite-sheet rectangle of the current animation frame."""
        return self.animation.frame_rect(texture_size)

    @abstractmethod
    def execute(self, world: Any, actor: Any) -> None:
        """Perform one step of the action."""

    @abstractmethod
    def is_finished(self) -> bool:
        """Tell whether the action has completed."""


class Idle(Action):
    """Standing still; never finishes on its own."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        super().__init__(IDLE_FRAME_TIME, IDLE_TEXTURE, clock)

    def execute(self, world: Any, actor: Any) -> None:
        """Do nothing."""

    def is_finished(self) -> bool:
        return False


class Move(Action):
    """Walks the actor one tile in a direction, in small timed steps."""

    def __init__(self, direction: Key, clock: Callable[[], int] | None = None) -> None:
        super().__init__(RUN_SPEED, WALK_TEXTURE, clock)
        self.remaining = direction_to_move(direction)
        start = self._clock()
        self._execute_timestamps = [
            start + step * RUN_SPEED for step in range(1, _step_count() + 1)
        ]

    def execute(self, world: Any, actor: Any) -> None:
        x, y = actor.position
        rx, ry = self.remaining
        if rx < 0:
            x -= STEP_SIZE
            rx += STEP_SIZE
        elif rx > 0:
            x += STEP_SIZE
            rx -= STEP_SIZE
        if ry < 0:
            y -= STEP_SIZE
            ry += STEP_SIZE
        elif ry > 0:
            y += STEP_SIZE
            ry -= STEP_SIZE
        actor.position = (x, y)
        self.remaining = (rx, ry)
        if actor.snap_position():
            self.remaining = (0.0, 0.0)

    def is_finished(self) -> bool:
        return self.remaining[0] == 0 and self.remaining[1] == 0