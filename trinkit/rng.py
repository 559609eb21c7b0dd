"""Uniform random numbers for integers (inclusive) and floats."""

from __future__ import annotations

import random

_rng = random.Random()


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return _is_int(value) or isinstance(value, float)


def generate(minimum: int | float, maximum: int | float) -> int | float:
    """Uniform value in ``[minimum, maximum]`` for ints, ``[minimum, maximum)`` for floats."""
    if not (_is_number(minimum) and _is_number(maximum)):
        raise TypeError("generate() needs two numbers")
    if minimum > maximum:
        raise ValueError("minimum must not be greater than maximum")
    if _is_int(minimum) and _is_int(maximum):
        return _rng.randint(minimum, maximum)
    if minimum == maximum:
        return float(minimum)
    value = _rng.uniform(float(minimum), float(maximum))
    return value if value < maximum else float(minimum)