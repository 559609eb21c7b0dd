"""Easing curves mapping a progress value ``t`` (usually 0..1) to an eased value."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Callable

_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1.0
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


class EasingType(Enum):
    """Every easing curve in this module."""

    EASE_IN_SINE = auto()
    EASE_IN_QUAD = auto()
    EASE_IN_CUBIC = auto()
    EASE_IN_QUART = auto()
    EASE_IN_QUINT = auto()
    EASE_IN_EXPO = auto()
    EASE_IN_CIRC = auto()
    EASE_IN_BACK = auto()
    EASE_IN_BOUNCE = auto()

    EASE_OUT_SINE = auto()
    EASE_OUT_QUAD = auto()
    EASE_OUT_CUBIC = auto()
    EASE_OUT_QUART = auto()
    EASE_OUT_QUINT = auto()
    EASE_OUT_EXPO = auto()
    EASE_OUT_CIRC = auto()
    EASE_OUT_BACK = auto()
    EASE_OUT_BOUNCE = auto()

    EASE_IN_OUT_SINE = auto()
    EASE_IN_OUT_QUAD = auto()
    EASE_IN_OUT_CUBIC = auto()
    EASE_IN_OUT_QUART = auto()
    EASE_IN_OUT_QUINT = auto()
    EASE_IN_OUT_EXPO = auto()
    EASE_IN_OUT_CIRC = auto()
    EASE_IN_OUT_BOUNCE = auto()


def ease_in_sine(t: float) -> float:
    return 1.0 - math.cos((t * math.pi) / 2.0)


def ease_out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2.0)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1.0) / 2.0


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return 1.0 - (1.0 - t) * (1.0 - t)


def ease_in_out_quad(t: float) -> float:
    return 2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    return 4.0 * t * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    return 1.0 - (1.0 - t) ** 4


def ease_in_out_quart(t: float) -> float:
    return 8.0 * t ** 4 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0


def ease_in_quint(t: float) -> float:
    return t ** 5


def ease_out_quint(t: float) -> float:
    return 1.0 - (1.0 - t) ** 5


def ease_in_out_quint(t: float) -> float:
    return 16.0 * t ** 5 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 5 / 2.0


def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * t - 10.0)


def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1.0 else 1.0 - 2.0 ** (-10.0 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) / 2.0


def ease_in_circ(t: float) -> float:
    return 1.0 - math.sqrt(1.0 - t * t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(1.0 - (t - 1.0) ** 2)


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1.0 - math.sqrt(1.0 - (2.0 * t) ** 2)) / 2.0
    return (math.sqrt(1.0 - (-2.0 * t + 2.0) ** 2) + 1.0) / 2.0


def ease_in_back(t: float) -> float:
    return _BACK_C3 * t ** 3 - _BACK_C1 * t ** 2


def ease_out_back(t: float) -> float:
    return 1.0 + _BACK_C3 * (t - 1.0) ** 3 + _BACK_C1 * (t - 1.0) ** 2


def ease_out_bounce(t: float) -> float:
    if t < 1.0 / _BOUNCE_D1:
        return _BOUNCE_N1 * t * t
    if t < 2.0 / _BOUNCE_D1:
        t -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.75
    if t < 2.5 / _BOUNCE_D1:
        t -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1.0 - ease_out_bounce(1.0 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return ease_in_bounce(t * 2.0) * 0.5
    return ease_out_bounce(t * 2.0 - 1.0) * 0.5 + 0.5


_CURVES: dict[EasingType, Callable[[float], float]] = {
    EasingType.EASE_IN_SINE: ease_in_sine,
    EasingType.EASE_OUT_SINE: ease_out_sine,
    EasingType.EASE_IN_OUT_SINE: ease_in_out_sine,
    EasingType.EASE_IN_QUAD: ease_in_quad,
    EasingType.EASE_OUT_QUAD: ease_out_quad,
    EasingType.EASE_IN_OUT_QUAD: ease_in_out_quad,
    EasingType.EASE_IN_CUBIC: ease_in_cubic,
    EasingType.EASE_OUT_CUBIC: ease_out_cubic,
    EasingType.EASE_IN_OUT_CUBIC: ease_in_out_cubic,
    EasingType.EASE_IN_QUART: ease_in_quart,
    EasingType.EASE_OUT_QUART: ease_out_quart,
    EasingType.EASE_IN_OUT_QUART: ease_in_out_quart,
    EasingType.EASE_IN_QUINT: ease_in_quint,
    EasingType.EASE_OUT_QUINT: ease_out_quint,
    EasingType.EASE_IN_OUT_QUINT: ease_in_out_quint,
    EasingType.EASE_IN_EXPO: ease_in_expo,
    EasingType.EASE_OUT_EXPO: ease_out_expo,
    EasingType.EASE_IN_OUT_EXPO: ease_in_out_expo,
    EasingType.EASE_IN_CIRC: ease_in_circ,
    EasingType.EASE_OUT_CIRC: ease_out_circ,
    EasingType.EASE_IN_OUT_CIRC: ease_in_out_circ,
    EasingType.EASE_IN_BACK: ease_in_back,
    EasingType.EASE_OUT_BACK: ease_out_back,
    EasingType.EASE_IN_BOUNCE: ease_in_bounce,
    EasingType.EASE_OUT_BOUNCE: ease_out_bounce,
    EasingType.EASE_IN_OUT_BOUNCE: ease_in_out_bounce,
}


def eased_value(easing_type: EasingType, t: float) -> float:
    """Apply the curve named by ``easing_type``; unknown types return ``t`` unchanged."""
    curve = _CURVES.get(easing_type)
    return t if curve is None else curve(t)