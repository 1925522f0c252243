"""Time-driven frame selection for horizontal sprite strips."""

from __future__ import annotations

from collections.abc import Callable

from .utils import current_time_ms, frame_size, frames_count


class Animation:
    """Cycles through the frames of a sprite sheet at a fixed frame time."""

    def __init__(
        self,
        frame_time: int,
        texture_path: str,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if frame_time <= 0:
            raise ValueError("frame_time must be positive")
        self.frame_time = frame_time
        self.texture_path = texture_path
        self._clock = clock or current_time_ms
        self.start_timestamp = self._clock()
        self.frame_index = 0

    def frame_rect(self, texture_size: tuple[int, int]) -> tuple[int, int, int, int]:
        """Return the (left, top, width, height) of the frame to show now."""
        elapsed = self._clock() - self.start_timestamp
        self.frame_index = (elapsed // self.frame_time) % frames_count(texture_size)
        width, height = frame_size(texture_size)
        return (self.frame_index * width, 0, width, height)