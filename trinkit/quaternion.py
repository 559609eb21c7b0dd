"""Rotation quaternions with Hamilton products and keyframe sampling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from trinkit.matrix import Matrix4x4
from trinkit.vector import Vector3

_FLT_EPSILON = 1.1920929e-07


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(slots=True)
class Quaternion:
    """A quaternion ``(x, y, z, w)``; the default value is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    # --------------------------------------------------------------- operators

    def __add__(self, other: Any) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Quaternion):
            return Quaternion.multiply(self, other)
        if isinstance(other, Vector3):
            return self.rotate_vector(other)
        if _is_scalar(other):
            return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Quaternion:
        if _is_scalar(other):
            return Quaternion(other * self.x, other * self.y, other * self.z, other * self.w)
        return NotImplemented

    # ------------------------------------------------------------ construction

    @staticmethod
    def identity() -> Quaternion:
        """The identity rotation."""
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_euler(euler: Vector3) -> Quaternion:
        """Quaternion from Euler angles (x = pitch, y = yaw, z = roll) in radians."""
        pitch, yaw, roll = euler.x * 0.5, euler.y * 0.5, euler.z * 0.5
        sp, cp = math.sin(pitch), math.cos(pitch)
        sy, cy = math.sin(yaw), math.cos(yaw)
        sr, cr = math.sin(roll), math.cos(roll)
        return Quaternion(
            x=cy * sp * cr + sy * cp * sr,
            y=sy * cp * cr - cy * sp * sr,
            z=cy * cp * sr - sy * sp * cr,
            w=cy * cp * cr + sy * sp * sr,
        )

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis`` (expected to be unit length)."""
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @staticmethod
    def from_rotation_matrix(m: Any) -> Quaternion:
        """Quaternion from the upper 3x3 part of a ``Matrix4x4`` or 4x4 table."""
        r = getattr(m, "m", m)
        trace = r[0][0] + r[1][1] + r[2][2]
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            return Quaternion(
                x=(r[2][1] - r[1][2]) / s,
                y=(r[0][2] - r[2][0]) / s,
                z=(r[1][0] - r[0][1]) / s,
                w=0.25 * s,
            )
        if r[0][0] > r[1][1] and r[0][0] > r[2][2]:
            s = math.sqrt(1.0 + r[0][0] - r[1][1] - r[2][2]) * 2.0
            return Quaternion(
                x=0.25 * s,
                y=(r[0][1] + r[1][0]) / s,
                z=(r[0][2] + r[2][0]) / s,
                w=(r[2][1] - r[1][2]) / s,
            )
        if r[1][1] > r[2][2]:
            s = math.sqrt(1.0 + r[1][1] - r[0][0] - r[2][2]) * 2.0
            return Quaternion(
                x=(r[0][1] + r[1][0]) / s,
                y=0.25 * s,
                z=(r[1][2] + r[2][1]) / s,
                w=(r[0][2] - r[2][0]) / s,
            )
        s = math.sqrt(1.0 + r[2][2] - r[0][0] - r[1][1]) * 2.0
        return Quaternion(
            x=(r[0][2] + r[2][0]) / s,
            y=(r[1][2] + r[2][1]) / s,
            z=0.25 * s,
            w=(r[1][0] - r[0][1]) / s,
        )

    @staticmethod
    def look_rotation(forward: Vector3, up: Vector3) -> Quaternion:
        """Rotation that turns +Z towards ``forward`` keeping ``up`` as close as possible."""
        f = forward.normalize()
        r = Vector3.cross(up.normalize(), f).normalize()
        u = Vector3.cross(f, r)

        m00, m01, m02 = r.x, u.x, f.x
        m10, m11, m12 = r.y, u.y, f.y
        m20, m21, m22 = r.z, u.z, f.z

        trace = m00 + m11 + m22
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 0.5
            inv = 0.25 / s
            return Quaternion(inv * (m21 - m12), inv * (m02 - m20), inv * (m10 - m01), s)
        if m00 > m11 and m00 > m22:
            s = math.sqrt(1.0 + m00 - m11 - m22) * 0.5
            inv = 0.25 / s
            return Quaternion(s, inv * (m01 + m10), inv * (m02 + m20), inv * (m21 - m12))
        if m11 > m22:
            s = math.sqrt(1.0 + m11 - m00 - m22) * 0.5
            inv = 0.25 / s
            return Quaternion(inv * (m01 + m10), s, inv * (m12 + m21), inv * (m02 - m20))
        s = math.sqrt(1.0 + m22 - m00 - m11) * 0.5
        inv = 0.25 / s
        return Quaternion(inv * (m02 + m20), inv * (m12 + m21), s, inv * (m10 - m01))

    @staticmethod
    def look_at(origin: Vector3, target: Vector3, up: Vector3) -> Quaternion:
        """Orientation looking from ``origin`` to ``target``, built from a basis matrix."""
        fwd = (target - origin).normalize()
        right = Vector3.cross(up, fwd).normalize()
        corrected_up = Vector3.cross(fwd, right)
        basis = Matrix4x4(
            [
                [right.x, right.y, right.z, 0.0],
                [corrected_up.x, corrected_up.y, corrected_up.z, 0.0],
                [fwd.x, fwd.y, fwd.z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return Quaternion.from_rotation_matrix(basis)

    # -------------------------------------------------------------- operations

    @staticmethod
    def multiply(lhs: Quaternion, rhs: Quaternion) -> Quaternion:
        """Hamilton product ``lhs * rhs``."""
        return Quaternion(
            x=lhs.w * rhs.x + lhs.x * rhs.w + lhs.y * rhs.z - lhs.z * rhs.y,
            y=lhs.w * rhs.y - lhs.x * rhs.z + lhs.y * rhs.w + lhs.z * rhs.x,
            z=lhs.w * rhs.z + lhs.x * rhs.y - lhs.y * rhs.x + lhs.z * rhs.w,
            w=lhs.w * rhs.w - lhs.x * rhs.x - lhs.y * rhs.y - lhs.z * rhs.z,
        )

    def conjugate(self) -> Quaternion:
        """The conjugate ``(-x, -y, -z, w)``."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Quaternion:
        """Unit quaternion; raises ``ValueError`` for the zero quaternion."""
        n = self.norm()
        if n == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse; raises ``ValueError`` for the zero quaternion."""
        norm_sq = self.norm() ** 2
        if norm_sq == 0.0:
            raise ValueError("a zero quaternion has no inverse")
        c = self.conjugate()
        return Quaternion(c.x / norm_sq, c.y / norm_sq, c.z / norm_sq, c.w / norm_sq)

    def dot(self, other: Quaternion) -> float:
        """Four-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def rotate_vector(self, vector: Vector3) -> Vector3:
        """Rotate ``vector`` by this (unit) quaternion: ``q v q*``."""
        qv = Quaternion(vector.x, vector.y, vector.z, 0.0)
        result = Quaternion.multiply(Quaternion.multiply(self, qv), self.conjugate())
        return Vector3(result.x, result.y, result.z)

    def to_rotate_matrix(self) -> Matrix4x4:
        """Row-vector rotation matrix equivalent to this quaternion."""
        x, y, z, w = self.x, self.y, self.z, self.w
        xx, yy, zz, ww = x * x, y * y, z * z, w * w
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return Matrix4x4(
            [
                [ww + xx - yy - zz, 2.0 * (xy + wz), 2.0 * (xz - wy), 0.0],
                [2.0 * (xy - wz), ww - xx + yy - zz, 2.0 * (yz + wx), 0.0],
                [2.0 * (xz + wy), 2.0 * (yz - wx), ww - xx - yy + zz, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def to_euler_angles(self) -> Vector3:
        """Euler angles in radians; the y angle is clamped to +-pi/2."""
        x, y, z, w = self.x, self.y, self.z, self.w
        angle_x = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
        sinp = 2.0 * (w * y - z * x)
        if abs(sinp) >= 1.0:
            angle_y = math.copysign(math.pi / 2.0, sinp)
        else:
            angle_y = math.asin(sinp)
        angle_z = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return Vector3(angle_x, angle_y, angle_z)

    @staticmethod
    def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
        """Spherical interpolation along the shorter arc."""
        dot = q0.dot(q1)
        if dot < 0.0:
            q0 = -q0
            dot = -dot
        if dot >= 1.0 - _FLT_EPSILON:
            return (1.0 - t) * q0 + t * q1
        theta = math.acos(dot)
        sin_theta = math.sin(theta)
        scale0 = math.sin((1.0 - t) * theta) / sin_theta
        scale1 = math.sin(t * theta) / sin_theta
        return q0 * scale0 + q1 * scale1

    @staticmethod
    def calculate_value(
        keyframes: Sequence[tuple[float, Quaternion]], time: float
    ) -> Quaternion:
        """Sample ``(time, value)`` keyframes at ``time`` by spherical interpolation."""
        if not keyframes:
            raise ValueError("keyframes must not be empty")
        first_time, first_value = keyframes[0]
        if len(keyframes) == 1 or time <= first_time:
            return first_value
        for (t0, v0), (t1, v1) in zip(keyframes, keyframes[1:]):
            if t0 <= time <= t1:
                return Quaternion.slerp(v0, v1, (time - t0) / (t1 - t0))
        return keyframes[-1][1]