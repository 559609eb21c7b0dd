"""Named unit directions in world space."""

from __future__ import annotations

from trinkit.vector import Vector3


def right() -> Vector3:
    """+X."""
    return Vector3(1.0, 0.0, 0.0)


def left() -> Vector3:
    """-X."""
    return Vector3(-1.0, 0.0, 0.0)


def up() -> Vector3:
    """+Y."""
    return Vector3(0.0, 1.0, 0.0)


def down() -> Vector3:
    """-Y."""
    return Vector3(0.0, -1.0, 0.0)


def forward() -> Vector3:
    """+Z."""
    return Vector3(0.0, 0.0, 1.0)


def backward() -> Vector3:
    """-Z."""
    return Vector3(0.0, 0.0, -1.0)


def up_right() -> Vector3:
    """+X, +Y."""
    return Vector3(1.0, 1.0, 0.0).normalize()


def up_left() -> Vector3:
    """-X, +Y."""
    return Vector3(-1.0, 1.0, 0.0).normalize()


def down_right() -> Vector3:
    """+X, -Y."""
    return Vector3(1.0, -1.0, 0.0).normalize()


def down_left() -> Vector3:
    """-X, -Y."""
    return Vector3(-1.0, -1.0, 0.0).normalize()


def up_forward_right() -> Vector3:
    """+X, +Y, +Z."""
    return Vector3(1.0, 1.0, 1.0).normalize()


def up_forward_left() -> Vector3:
    """-X, +Y, +Z."""
    return Vector3(-1.0, 1.0, 1.0).normalize()


def down_backward_right() -> Vector3:
    """+X, -Y, -Z."""
    return Vector3(1.0, -1.0, -1.0).normalize()


def down_backward_left() -> Vector3:
    """-X, -Y, -Z."""
    return Vector3(-1.0, -1.0, -1.0).normalize()