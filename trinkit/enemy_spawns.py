"""Enemy spawn positions per arena area and the wave progression."""

from __future__ import annotations

from enum import Enum
from typing import Any

from trinkit.json_store import JsonStore, from_vector3, to_vector3
from trinkit.vector import Vector3

SPAWN_PARAMETER_PATH = "Enemy/enemyEditor.json"
FINAL_PHASE = 3


class SpawnPlace(Enum):
    """Area of the arena an enemy appears in."""

    CENTER = "Center"
    FRONT_RIGHT = "FrontRight"  # x+, z+
    BACK_RIGHT = "BackRight"  # x+, z-
    FRONT_LEFT = "FrontLeft"  # x-, z+
    BACK_LEFT = "BackLeft"  # x-, z-


class SpawnTable:
    """Spawn positions grouped by ``SpawnPlace``."""

    def __init__(self, positions: dict[SpawnPlace, list[Vector3]] | None = None) -> None:
        self.positions: dict[SpawnPlace, list[Vector3]] = {
            place: list(points) for place, points in (positions or {}).items()
        }

    def __getitem__(self, place: SpawnPlace) -> list[Vector3]:
        return self.positions.get(place, [])

    @staticmethod
    def from_json(data: Any) -> SpawnTable:
        """Build a table from ``{place name: [{x, y, z}, ...]}``; unknown names are skipped."""
        known = {place.value: place for place in SpawnPlace}
        table = SpawnTable()
        for key, value in data.items():
            place = known.get(key)
            if place is None:
                continue
            table.positions[place] = [to_vector3(item) for item in value]
        return table

    def to_json(self) -> dict[str, list[dict[str, float]]]:
        """Positions in the layout ``from_json`` reads."""
        return {
            place.value: [from_vector3(p) for p in self.positions[place]]
            for place in SpawnPlace
            if place in self.positions
        }

    def load(self, store: JsonStore) -> None:
        """Replace the positions with those stored in the editor file."""
        self.positions = SpawnTable.from_json(store.load(SPAWN_PARAMETER_PATH)).positions

    def save(self, store: JsonStore) -> None:
        """Write the positions to the editor file."""
        store.save(SPAWN_PARAMETER_PATH, self.to_json())

    def add(self, place: SpawnPlace, position: Vector3) -> None:
        """Append a spawn position to ``place``."""
        self.positions.setdefault(place, []).append(Vector3(position.x, position.y, position.z))

    def remove(self, place: SpawnPlace, index: int) -> Vector3:
        """Remove and return the position at ``index``; raises ``IndexError`` if absent."""
        points = self.positions.get(place, [])
        if not 0 <= index < len(points):
            raise IndexError(f"no spawn position {index} in {place.value}")
        return points.pop(index)

    def wave_positions(self, phase: int) -> list[Vector3]:
        """Positions at which the enemies of wave ``phase`` appear, in spawn order."""
        if phase == 0:
            places = (SpawnPlace.CENTER, SpawnPlace.FRONT_LEFT, SpawnPlace.FRONT_RIGHT)
            return [Vector3(p.x, p.y, p.z) for place in places for p in self[place]]
        if phase == 1:
            places = (SpawnPlace.CENTER, SpawnPlace.BACK_LEFT, SpawnPlace.BACK_RIGHT)
            return [Vector3(p.x, p.y, p.z) for place in places for p in self[place]]
        if phase == 2:
            result = [Vector3(p.x, p.y, p.z) for p in self[SpawnPlace.CENTER]]
            for place in (SpawnPlace.FRONT_LEFT, SpawnPlace.FRONT_RIGHT):
                points = self[place]
                result.extend(Vector3(p.x, p.y, 0.0) for p in points[: max(len(points) - 2, 0)])
            return result
        if phase == FINAL_PHASE:
            return [Vector3(0.0, 0.0, 0.0)]
        raise ValueError(f"unknown wave phase {phase}")


class PhaseTracker:
    """Decides when the next wave of enemies is due."""

    def __init__(self) -> None:
        self.phase = 0
        self.controller: int | None = None
        self.is_start = False

    @property
    def is_final_wave(self) -> bool:
        """Whether the last wave has been spawned."""
        return self.controller == FINAL_PHASE

    def advance(self, enemy_count: int) -> int | None:
        """Step with ``enemy_count`` enemies alive; returns the wave to spawn, if any."""
        self.is_start = True

        if self.controller is not None and self.controller < FINAL_PHASE and enemy_count == 0:
            self.phase = self.controller + 1

        expected = None if self.phase == 0 else self.phase - 1
        if self.phase <= FINAL_PHASE and self.controller == expected:
            self.controller = self.phase
            return self.phase
        return None