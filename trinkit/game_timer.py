"""Frame timer with a time scale that eases back to normal speed."""

from __future__ import annotations

import time
from typing import Callable

from trinkit.easing import ease_out_expo


class GameTimer:
    """Measures frame delta time and manages a recoverable time scale.

    When ``time_scale`` differs from 1 and ``return_scale_enable`` is set, the
    scale is held for ``wait_time`` seconds and then eased back towards 1.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last_frame_time = clock()
        self.delta_time = 0.0
        self.time_scale = 1.0
        self.lerp_speed = 1.8
        self.wait_timer = 0.0
        self.wait_time = 0.18
        self.return_scale_enable = True

    def update(self) -> None:
        """Advance one frame."""
        now = self._clock()
        self.delta_time = now - self._last_frame_time
        self._last_frame_time = now

        if not self.return_scale_enable or self.time_scale == 1.0:
            return

        self.wait_timer += self.delta_time
        if self.wait_timer < self.wait_time:
            return

        eased = ease_out_expo(self.lerp_speed * self.delta_time)
        self.time_scale += (1.0 - self.time_scale) * eased
        if abs(1.0 - self.time_scale) < 0.01:
            self.time_scale = 1.0
            self.wait_timer = 0.0

    def scaled_delta_time(self) -> float:
        """Delta time multiplied by the time scale."""
        return self.delta_time * self.time_scale