"""A frames-per-second counter that produces a window title."""

from __future__ import annotations

import time
from collections.abc import Callable

DEFAULT_TITLE = "OpenGL App"


class FrameRateCounter:
    """Counts frames and reports the rate once per refresh period."""

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        refresh_time: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.title = title
        self.window_title = title
        self.refresh_time = refresh_time
        self.elapsed = 0.0
        self.fps = 0.0
        self.frames = 0
        self._clock = clock
        self._accumulated = 0.0
        self._frame_start = clock()

    def set_title(self, title: str) -> None:
        """Change the application title and show it as the window title."""
        self.title = title
        self.window_title = title

    def update(self) -> str | None:
        """Record one frame; return the new window title when the rate is refreshed."""
        now = self._clock()
        self.elapsed = now - self._frame_start
        self._frame_start = now
        self._accumulated += self.elapsed
        self.frames += 1
        if self._accumulated > self.refresh_time:
            self.fps = self.frames / self._accumulated
            self.window_title = f"{self.title} : {self.fps:3.1f} fps"
            self._accumulated = 0.0
            self.frames = 0
            return self.window_title
        return None