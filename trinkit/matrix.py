"""Row-major 4x4 matrices for affine and projective transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Sequence

from trinkit.vector import Vector3

_SIZE = 4
Rows = list[list[float]]


def _zeros() -> Rows:
    return [[0.0] * _SIZE for _ in range(_SIZE)]


def _det3(a: Sequence[Sequence[float]]) -> float:
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


def _minor(m: Rows, row: int, col: int) -> list[list[float]]:
    return [
        [value for j, value in enumerate(r) if j != col]
        for i, r in enumerate(m)
        if i != row
    ]


@dataclass
class Matrix4x4:
    """A 4x4 matrix used with row vectors (``v * M``), translation in row 3.

    ``+``, ``-`` and ``/ scalar`` work element by element; ``*`` and ``@`` are
    matrix products. The in-place ``*=`` and ``/=`` with another matrix work
    element by element.
    """

    m: Rows = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        rows = [[float(v) for v in row] for row in self.m]
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("a Matrix4x4 needs 4 rows of 4 values")
        self.m = rows

    # ------------------------------------------------------------------ access

    def __getitem__(self, index: int) -> list[float]:
        return self.m[index]

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self.m)

    def _zip(self, other: Matrix4x4) -> Iterable[tuple[list[float], list[float]]]:
        return zip(self.m, other.m)

    # --------------------------------------------------------------- operators

    def __add__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4([[a + b for a, b in zip(r0, r1)] for r0, r1 in self._zip(other)])

    def __sub__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4([[a - b for a, b in zip(r0, r1)] for r0, r1 in self._zip(other)])

    def __mul__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4.multiply(self, other)

    def __matmul__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4.multiply(self, other)

    def __truediv__(self, scalar: Any) -> Matrix4x4:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Matrix4x4([[value / scalar for value in row] for row in self.m])

    def __iadd__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self.m = (self + other).m
        return self

    def __isub__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self.m = (self - other).m
        return self

    def __imul__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self.m = [[a * b for a, b in zip(r0, r1)] for r0, r1 in self._zip(other)]
        return self

    def __itruediv__(self, other: Any) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        self.m = [[a / b for a, b in zip(r0, r1)] for r0, r1 in self._zip(other)]
        return self

    # ----------------------------------------------------------- constructors

    @staticmethod
    def zero() -> Matrix4x4:
        """The all-zero matrix."""
        return Matrix4x4()

    @staticmethod
    def identity() -> Matrix4x4:
        """The identity matrix."""
        return Matrix4x4([[1.0 if i == j else 0.0 for j in range(_SIZE)] for i in range(_SIZE)])

    @staticmethod
    def multiply(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
        """Matrix product ``m1 * m2``."""
        columns = list(zip(*m2.m))
        return Matrix4x4([[sum(a * b for a, b in zip(row, col)) for col in columns] for row in m1.m])

    @staticmethod
    def inverse(m: Matrix4x4) -> Matrix4x4:
        """Inverse matrix; raises ``ValueError`` when ``m`` is singular."""
        rows = m.m
        det = sum(
            (-1.0) ** j * rows[0][j] * _det3(_minor(rows, 0, j)) for j in range(_SIZE)
        )
        if det == 0.0:
            raise ValueError("matrix is singular and has no inverse")
        inv_det = 1.0 / det
        return Matrix4x4(
            [
                [(-1.0) ** (i + j) * _det3(_minor(rows, j, i)) * inv_det for j in range(_SIZE)]
                for i in range(_SIZE)
            ]
        )

    @staticmethod
    def transpose(m: Matrix4x4) -> Matrix4x4:
        """Transposed matrix."""
        return Matrix4x4([list(col) for col in zip(*m.m)])

    @staticmethod
    def scale(scale: Vector3) -> Matrix4x4:
        """Scaling matrix."""
        return Matrix4x4(
            [
                [scale.x, 0.0, 0.0, 0.0],
                [0.0, scale.y, 0.0, 0.0],
                [0.0, 0.0, scale.z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def pitch(radian: float) -> Matrix4x4:
        """Rotation about the X axis."""
        c, s = math.cos(radian), math.sin(radian)
        return Matrix4x4(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, s, 0.0],
                [0.0, -s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def yaw(radian: float) -> Matrix4x4:
        """Rotation about the Y axis."""
        c, s = math.cos(radian), math.sin(radian)
        return Matrix4x4(
            [
                [c, 0.0, -s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def roll(radian: float) -> Matrix4x4:
        """Rotation about the Z axis."""
        c, s = math.cos(radian), math.sin(radian)
        return Matrix4x4(
            [
                [c, s, 0.0, 0.0],
                [-s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def rotate(rotate: Vector3) -> Matrix4x4:
        """Euler rotation: pitch * (yaw * roll)."""
        return Matrix4x4.multiply(
            Matrix4x4.pitch(rotate.x),
            Matrix4x4.multiply(Matrix4x4.yaw(rotate.y), Matrix4x4.roll(rotate.z)),
        )

    @staticmethod
    def translate(translate: Vector3) -> Matrix4x4:
        """Translation matrix."""
        return Matrix4x4(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [translate.x, translate.y, translate.z, 1.0],
            ]
        )

    @staticmethod
    def affine(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
        """Scale, then Euler rotation, then translation."""
        return Matrix4x4.multiply(
            Matrix4x4.multiply(Matrix4x4.scale(scale), Matrix4x4.rotate(rotate)),
            Matrix4x4.translate(translate),
        )

    @staticmethod
    def orthographic(
        left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
    ) -> Matrix4x4:
        """Orthographic projection onto x, y in -1..1 and z in 0..1."""
        result = Matrix4x4()
        result.m[0][0] = 2.0 / (right - left)
        result.m[1][1] = 2.0 / (top - bottom)
        result.m[2][2] = 1.0 / (far_clip - near_clip)
        result.m[3][0] = (left + right) / (left - right)
        result.m[3][1] = (top + bottom) / (bottom - top)
        result.m[3][2] = near_clip / (near_clip - far_clip)
        result.m[3][3] = 1.0
        return result

    @staticmethod
    def shadow_orthographic(
        width: float, height: float, near_clip: float, far_clip: float
    ) -> Matrix4x4:
        """Orthographic projection of a box centred on the origin."""
        half_w, half_h = width * 0.5, height * 0.5
        return Matrix4x4.orthographic(-half_w, half_h, half_w, -half_h, near_clip, far_clip)

    @staticmethod
    def perspective_fov(
        fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
    ) -> Matrix4x4:
        """Left-handed perspective projection with depth in 0..1."""
        tan_half = math.tan(fov_y / 2.0)
        result = Matrix4x4()
        result.m[0][0] = 1.0 / (aspect_ratio * tan_half)
        result.m[1][1] = 1.0 / tan_half
        result.m[2][2] = far_clip / (far_clip - near_clip)
        result.m[2][3] = 1.0
        result.m[3][2] = (-far_clip * near_clip) / (far_clip - near_clip)
        return result

    @staticmethod
    def viewport(
        left: float, top: float, width: float, height: float, min_depth: float, max_depth: float
    ) -> Matrix4x4:
        """Map normalised device coordinates to screen coordinates."""
        result = Matrix4x4()
        result.m[0][0] = width / 2.0
        result.m[1][1] = -height / 2.0
        result.m[2][2] = max_depth - min_depth
        result.m[3][0] = left + width / 2.0
        result.m[3][1] = top + height / 2.0
        result.m[3][2] = min_depth
        result.m[3][3] = 1.0
        return result

    @staticmethod
    def axis_affine(scale: Vector3, rotate: Any, translate: Vector3) -> Matrix4x4:
        """Scale, then a quaternion rotation, then translation.

        ``rotate`` is any object with a ``to_rotate_matrix()`` method returning
        a ``Matrix4x4``.
        """
        return Matrix4x4.multiply(
            Matrix4x4.multiply(Matrix4x4.scale(scale), rotate.to_rotate_matrix()),
            Matrix4x4.translate(translate),
        )