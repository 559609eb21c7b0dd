"""Fade-to-colour transition played between two scenes."""

from __future__ import annotations

from enum import Enum, auto

from trinkit.easing import ease_in_circ, ease_out_expo
from trinkit.vector import Color

FADE_OUT_TIME = 2.0
WAIT_TIME = 1.0
FADE_IN_TIME = 4.0


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class TransitionState(Enum):
    """Phase of a running transition."""

    BEGIN = auto()
    WAIT = auto()
    END = auto()


class SceneTransition:
    """Fades a full-screen overlay in, holds it, then fades it out.

    The overlay first fades in (``BEGIN``) and then holds (``WAIT``). When the
    hold ends, ``is_begin_transition_finished`` is raised so the scene can be
    swapped while the screen is covered. The overlay then fades away (``END``)
    and the transition stops.
    """

    def __init__(
        self,
        fade_out_time: float = FADE_OUT_TIME,
        wait_time: float = WAIT_TIME,
        fade_in_time: float = FADE_IN_TIME,
    ) -> None:
        self.color = Color(0.12, 0.12, 0.12, 0.0)
        self.is_transition = False
        self.is_begin_transition_finished = False
        self.state = TransitionState.BEGIN

        self.fade_out_time = fade_out_time
        self.wait_time = wait_time
        self.fade_in_time = fade_in_time

        self._fade_out_timer = 0.0
        self._wait_timer = 0.0
        self._fade_in_timer = 0.0

    def start(self) -> None:
        """Begin a transition."""
        self.is_transition = True

    def reset_begin_transition(self) -> None:
        """Acknowledge that the covered moment has been handled."""
        self.is_begin_transition_finished = False

    def update(self, delta_time: float) -> None:
        """Advance the running transition by ``delta_time`` seconds."""
        if not self.is_transition:
            return
        if self.state is TransitionState.BEGIN:
            self._fade_out(delta_time)
        elif self.state is TransitionState.WAIT:
            self._wait(delta_time)
        else:
            self._fade_in(delta_time)

    def _fade_out(self, delta_time: float) -> None:
        self._fade_out_timer += delta_time
        t = self._fade_out_timer / self.fade_out_time
        self.color.a = _clamp01(_lerp(0.0, 1.0, ease_out_expo(t)))
        if t > 1.0:
            self.state = TransitionState.WAIT
            self._fade_out_timer = 0.0

    def _wait(self, delta_time: float) -> None:
        self._wait_timer += delta_time
        if self._wait_timer > self.wait_time:
            self.state = TransitionState.END
            self._wait_timer = 0.0
            self.is_begin_transition_finished = True

    def _fade_in(self, delta_time: float) -> None:
        self._fade_in_timer += delta_time
        t = self._fade_in_timer / self.fade_in_time
        if t > 1.0:
            self.state = TransitionState.BEGIN
            self._fade_in_timer = 0.0
            self.is_transition = False
            self.color.a = 0.0
            return
        self.color.a = _clamp01(_lerp(1.0, 0.0, ease_in_circ(t)))