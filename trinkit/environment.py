"""Arena floor mesh, UV transforms and the pulsing wall opacity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from trinkit.json_store import from_vector3, to_vector3
from trinkit.vector import Vector2, Vector3, Vector4

WALL_PARAMETER_PATH = "Wall/wallSubParameter.json"
FIELD_PARAMETER_FOLDER = "Field/"

_HALF_WIDTH = 1.0
_HALF_DEPTH = 1.0


@dataclass(slots=True)
class MeshVertex:
    """One vertex of a generated mesh."""

    pos: Vector4 = field(default_factory=Vector4)
    texcoord: Vector2 = field(default_factory=Vector2)
    normal: Vector3 = field(default_factory=Vector3)


@dataclass(slots=True)
class UVTransform:
    """Scale, rotation and translation applied to texture coordinates."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotate: Vector3 = field(default_factory=Vector3)
    translate: Vector3 = field(default_factory=Vector3)

    @staticmethod
    def from_json(data: Any) -> UVTransform:
        """Read ``uvScale``, ``uvRotate`` and ``uvTranslate``; missing entries are zero."""
        get = data.get if hasattr(data, "get") else (lambda _key: None)
        return UVTransform(
            scale=to_vector3(get("uvScale")),
            rotate=to_vector3(get("uvRotate")),
            translate=to_vector3(get("uvTranslate")),
        )

    def to_json(self) -> dict[str, dict[str, float]]:
        """Parameters in the layout ``from_json`` reads."""
        return {
            "uvScale": from_vector3(self.scale),
            "uvRotate": from_vector3(self.rotate),
            "uvTranslate": from_vector3(self.translate),
        }


def create_field_grid(division: int) -> tuple[list[MeshVertex], list[int]]:
    """Flat square grid from -1 to 1 on X and Z, split into ``division`` cells per side.

    Returns the vertices, row by row along Z, and the triangle indices.
    """
    if isinstance(division, bool) or not isinstance(division, int):
        raise TypeError("division must be an integer")
    if division < 1:
        raise ValueError("division must be at least 1")

    vertices = []
    for z in range(division + 1):
        for x in range(division + 1):
            u = x / division
            v = z / division
            x_pos = -_HALF_WIDTH + u * _HALF_WIDTH * 2.0
            z_pos = -_HALF_DEPTH + v * _HALF_WIDTH * 2.0
            vertices.append(
                MeshVertex(
                    pos=Vector4(x_pos, 0.0, z_pos, 1.0),
                    texcoord=Vector2(u, -v),
                    normal=Vector3(0.0, 1.0, 0.0),
                )
            )

    row = division + 1
    indices: list[int] = []
    for z in range(division):
        for x in range(division):
            top_left = z * row + x
            top_right = top_left + 1
            bottom_left = (z + 1) * row + x
            bottom_right = bottom_left + 1
            indices.extend((top_left, bottom_left, top_right))
            indices.extend((top_right, bottom_left, bottom_right))
    return vertices, indices


def wall_alpha(elapsed: float, clamped: bool) -> float:
    """Wall opacity: solid while the player is pushed against the edge, pulsing otherwise."""
    if clamped:
        return 1.0
    return 0.6 * (1.0 + math.sin(0.8 * elapsed * math.pi))