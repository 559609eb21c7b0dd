"""Countdown timer shown as minutes and two second digits."""

from __future__ import annotations

from typing import Any

from trinkit.json_store import from_vector2, to_vector2
from trinkit.vector import Vector2

PARAMETER_PATH = "HUD/TimeParameter.json"

TEXTURE_WIDTH = 544.0 / 10.0
"""Width of one digit in the ten-digit number strip."""
TEXTURE_HEIGHT = 64.0
DIGIT_SIZE = Vector2(TEXTURE_WIDTH, TEXTURE_HEIGHT) / 2.0
"""On-screen size of one digit."""

_DIGIT_COUNT = 3


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division and remainder truncated towards zero."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


class TimeLimit:
    """Counts whole seconds up to ``time_limit`` once the game has started.

    Counting begins ``wait_time`` seconds after ``started`` is first true.
    """

    def __init__(self, time_limit: int = 0, wait_time: float = 4.0) -> None:
        self.time = 0
        self.time_limit = time_limit
        self.wait_timer = 0.0
        self.wait_time = wait_time
        self.accumulated_time = 0.0
        self.is_count_start = False
        self.is_finish = False
        self.number_positions = [Vector2() for _ in range(_DIGIT_COUNT)]
        self.colon_pos = Vector2()

    def update(self, delta_time: float, started: bool) -> None:
        """Advance by ``delta_time`` seconds; ``started`` tells whether play has begun."""
        if self.is_finish:
            return

        if not self.is_count_start and started:
            self.wait_timer += delta_time
            if self.wait_timer >= self.wait_time:
                self.is_count_start = True

        if self.is_count_start:
            self.accumulated_time += delta_time
            if self.accumulated_time >= 1.0:
                self.time += 1
                self.accumulated_time = 0.0

        if self.time == self.time_limit:
            self.is_finish = True

    @property
    def remaining(self) -> int:
        """Seconds left."""
        return self.time_limit - self.time

    def digits(self) -> tuple[int, int, int]:
        """Minutes, tens of seconds and units of seconds left."""
        minutes, seconds = _trunc_divmod(self.remaining, 60)
        tens, ones = _trunc_divmod(seconds, 10)
        return minutes, tens, ones

    def texture_offsets(self) -> list[Vector2]:
        """Left-top texture coordinate in the number strip for each displayed digit."""
        return [Vector2(TEXTURE_WIDTH * digit, 0.0) for digit in self.digits()]

    def apply_json(self, data: Any) -> None:
        """Load the limit and the digit and colon positions."""
        self.time_limit = int(data["timeLimit"])
        self.number_positions = [
            to_vector2(data.get(f"timePos_{index}")) for index in range(_DIGIT_COUNT)
        ]
        self.colon_pos = to_vector2(data.get("timeCoronPos"))

    def to_json(self) -> dict[str, Any]:
        """Parameters in the layout ``apply_json`` reads."""
        data: dict[str, Any] = {"timeLimit": self.time_limit}
        for index, pos in enumerate(self.number_positions):
            data[f"timePos_{index}"] = from_vector2(pos)
        data["timeCoronPos"] = from_vector2(self.colon_pos)
        return data