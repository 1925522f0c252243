"""The player character: held keys, grid position and current action."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .actions import Action, Idle, Move
from .tilemap import TileType
from .utils import Key, current_time_ms, direction_to_move, is_tolerated_difference, round_vector

logger = logging.getLogger(__name__)

_MOVEMENT_KEYS = frozenset({Key.A, Key.D, Key.W, Key.S})
SNAP_TOLERANCE = 0.01


class Character:
    """A character that walks tile by tile over floor cells."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or current_time_ms
        self.position: tuple[float, float] = (0.0, 0.0)
        self._inputs: list[Key] = []
        self.action: Action = Idle(self._clock)

    @property
    def inputs(self) -> tuple[Key, ...]:
        """Keys currently held, oldest first."""
        return tuple(self._inputs)

    def press(self, key: Key) -> None:
        """Record a key press."""
        self._inputs.append(key)

    def release(self, key: Key) -> None:
        """Forget every held instance of a key."""
        self._inputs = [held for held in self._inputs if held != key]

    def logic(self, world: Any) -> None:
        """Choose the next action from held keys and advance the current one."""
        if self.action.is_finished():
            self.action = Idle(self._clock)

        if isinstance(self.action, Idle) and self._inputs:
            key = self._inputs[-1]
            mx, my = direction_to_move(key)
            x, y = self.position
            logger.debug("Move: %f x %f", mx, my)
            logger.debug("Position: %f x %f", x, y)
            if world[(int(x + mx), int(y + my))] == TileType.FLOOR:
                self.action = Move(key, self._clock)

        self.action.update(world, self)

    def snap_position(self) -> bool:
        """Round the position to the grid if it is within tolerance; tell whether it was."""
        snapped = tuple(float(v) for v in round_vector(self.position))
        if is_tolerated_difference(self.position, snapped, SNAP_TOLERANCE):
            self.position = snapped
            return True
        return False

    def is_input(self, key: Key) -> bool:
        """Tell whether the character reacts to ``key``."""
        return key in _MOVEMENT_KEYS