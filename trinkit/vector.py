"""Two-, three- and four-component vectors and RGBA colours."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterator, Sequence

Number = (int, float)


def _lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation that returns ``b`` exactly at ``t == 1``."""
    if t == 1.0:
        return b
    return a + t * (b - a)


def _rows(matrix: Any) -> Sequence[Sequence[float]]:
    """Accept either an object carrying a 4x4 ``m`` table or the table itself."""
    return getattr(matrix, "m", matrix)


class _Components:
    """Component-wise arithmetic shared by the vector types."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        return iter(tuple(getattr(self, f.name) for f in fields(self)))

    def _combine(self, other: Any, op: Callable[[float, float], float], allow_scalar: bool):
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if allow_scalar and isinstance(other, Number) and not isinstance(other, bool):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b, allow_scalar=False)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b, allow_scalar=False)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b, allow_scalar=True)

    def __rmul__(self, other):
        if isinstance(other, Number) and not isinstance(other, bool):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b, allow_scalar=True)

    def __rtruediv__(self, other):
        # A scalar on the left divides the components by that scalar.
        if isinstance(other, Number) and not isinstance(other, bool):
            return self / other
        return NotImplemented


@dataclass(slots=True)
class Vector2(_Components):
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class Vector3(_Components):
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    @staticmethod
    def cross(v0: Vector3, v1: Vector3) -> Vector3:
        """Cross product ``v0 x v1``."""
        return Vector3(
            v0.y * v1.z - v0.z * v1.y,
            v0.z * v1.x - v0.x * v1.z,
            v0.x * v1.y - v0.y * v1.x,
        )

    @staticmethod
    def dot(v0: Vector3, v1: Vector3) -> float:
        """Dot product."""
        return v0.x * v1.x + v0.y * v1.y + v0.z * v1.z

    @staticmethod
    def lerp(v0: Vector3, v1: Vector3, t: float) -> Vector3:
        """Component-wise linear interpolation."""
        return Vector3(_lerp(v0.x, v1.x, t), _lerp(v0.y, v1.y, t), _lerp(v0.z, v1.z, t))

    @staticmethod
    def reflect(incoming: Vector3, normal: Vector3) -> Vector3:
        """Reflect ``incoming`` about ``normal``."""
        return incoming - normal * (2.0 * Vector3.dot(incoming, normal))

    @staticmethod
    def transform(v: Vector3, matrix: Any) -> Vector3:
        """Transform a point by a row-major 4x4 matrix with perspective divide."""
        m = _rows(matrix)
        x = v.x * m[0][0] + v.y * m[1][0] + v.z * m[2][0] + m[3][0]
        y = v.x * m[0][1] + v.y * m[1][1] + v.z * m[2][1] + m[3][1]
        z = v.x * m[0][2] + v.y * m[1][2] + v.z * m[2][2] + m[3][2]
        w = v.x * m[0][3] + v.y * m[1][3] + v.z * m[2][3] + m[3][3]
        if w != 0.0:
            x, y, z = x / w, y / w, z / w
        return Vector3(x, y, z)

    @staticmethod
    def transfer_normal(v: Vector3, matrix: Any) -> Vector3:
        """Transform a direction by the upper 3x3 part of a 4x4 matrix."""
        m = _rows(matrix)
        return Vector3(
            v.x * m[0][0] + v.y * m[1][0] + v.z * m[2][0],
            v.x * m[0][1] + v.y * m[1][1] + v.z * m[2][1],
            v.x * m[0][2] + v.y * m[1][2] + v.z * m[2][2],
        )

    @staticmethod
    def calculate_value(keyframes: Sequence[tuple[float, Vector3]], time: float) -> Vector3:
        """Sample ``(time, value)`` keyframes at ``time`` by linear interpolation."""
        if not keyframes:
            raise ValueError("keyframes must not be empty")
        first_time, first_value = keyframes[0]
        if len(keyframes) == 1 or time <= first_time:
            return first_value
        for (t0, v0), (t1, v1) in zip(keyframes, keyframes[1:]):
            if t0 <= time <= t1:
                return Vector3.lerp(v0, v1, (time - t0) / (t1 - t0))
        return keyframes[-1][1]


@dataclass(slots=True, eq=False)
class Vector4(_Components):
    """A 4D vector; equality compares only x, y and z."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None  # type: ignore[assignment]


@dataclass(slots=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @staticmethod
    def convert(color: int) -> Color:
        """Build a colour from a packed 0xAARRGGBB integer."""
        r = (color >> 16) & 0xFF
        g = (color >> 8) & 0xFF
        b = color & 0xFF
        a = (color >> 24) & 0xFF
        return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @staticmethod
    def white(alpha: float = 1.0) -> Color:
        return Color(1.0, 1.0, 1.0, alpha)

    @staticmethod
    def black(alpha: float = 1.0) -> Color:
        return Color(0.0, 0.0, 0.0, alpha)

    @staticmethod
    def red(alpha: float = 1.0) -> Color:
        return Color(1.0, 0.0, 0.0, alpha)

    @staticmethod
    def green(alpha: float = 1.0) -> Color:
        return Color(0.0, 1.0, 0.0, alpha)

    @staticmethod
    def blue(alpha: float = 1.0) -> Color:
        return Color(0.0, 0.0, 1.0, alpha)