"""JSON parameter files under a base directory, and vector/colour conversion."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from trinkit.vector import Color, Vector2, Vector3

DEFAULT_BASE_DIRECTORY = "./Resources/Json/"


class JsonStore:
    """Reads and writes JSON documents relative to ``base_directory``."""

    def __init__(self, base_directory: str | Path = DEFAULT_BASE_DIRECTORY) -> None:
        self.base_directory = Path(base_directory)

    def save(self, relative_path: str | Path, data: Any) -> Path:
        """Write ``data`` indented by four spaces; the extension is forced to ``.json``."""
        path = self.base_directory / relative_path
        if path.suffix != ".json":
            path = path.with_suffix(".json")
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=4, ensure_ascii=False)
        return path

    def load(self, relative_path: str | Path) -> Any:
        """Read a JSON document; raises ``OSError`` if the file cannot be opened."""
        path = self.base_directory / relative_path
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)


def _has_keys(data: Any, *keys: str) -> bool:
    return isinstance(data, Mapping) and all(key in data for key in keys)


def from_vector3(v: Vector3) -> dict[str, float]:
    return {"x": v.x, "y": v.y, "z": v.z}


def to_vector3(data: Any) -> Vector3:
    """Vector from ``{"x", "y", "z"}``; a zero vector if any key is missing."""
    if _has_keys(data, "x", "y", "z"):
        return Vector3(float(data["x"]), float(data["y"]), float(data["z"]))
    return Vector3()


def from_vector2(v: Vector2) -> dict[str, float]:
    return {"x": v.x, "y": v.y}


def to_vector2(data: Any) -> Vector2:
    """Vector from ``{"x", "y"}``; a zero vector if any key is missing."""
    if _has_keys(data, "x", "y"):
        return Vector2(float(data["x"]), float(data["y"]))
    return Vector2()


def from_color(color: Color) -> dict[str, float]:
    return {"r": color.r, "g": color.g, "b": color.b, "a": color.a}


def to_color(data: Any) -> Color:
    """Colour from ``{"r", "g", "b", "a"}``; the default colour if any key is missing."""
    if _has_keys(data, "r", "g", "b", "a"):
        return Color(float(data["r"]), float(data["g"]), float(data["b"]), float(data["a"]))
    return Color()