"""Frames-per-second counting."""

from __future__ import annotations

import time
from typing import Callable, Optional


class FpsCounter:
    """Counts frames and yields the rate once per elapsed second."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.time
        self._last_ms = 0
        self._frames = 0
        self.fps = 0

    def tick(self) -> Optional[int]:
        """Record a frame; return the frame count when a second has passed."""
        now = int(self._clock() * 1000)
        self._frames += 1
        if now - self._last_ms >= 1000:
            self.fps = self._frames
            self._frames = 0
            self._last_ms = now
            return self.fps
        return None

    def report(self) -> Optional[int]:
        """Tick and print the rate when one is available."""
        fps = self.tick()
        if fps is not None:
            print(f"FPS: {fps}")
        return fps