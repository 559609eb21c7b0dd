import pytest

from trinkit.json_store import (
    JsonStore,
    from_color,
    from_vector2,
    from_vector3,
    to_color,
    to_vector2,
    to_vector3,
)
from trinkit.vector import Color, Vector2, Vector3


@pytest.fixture
def store(tmp_path):
    return JsonStore(tmp_path)


def test_save_and_load_round_trip(store):
    data = {"timeLimit": 90, "pos": {"x": 1.5, "y": -2.0}}
    store.save("HUD/TimeParameter.json", data)
    assert store.load("HUD/TimeParameter.json") == data


def test_save_creates_parent_directories(store, tmp_path):
    path = store.save("a/b/c/params.json", {"k": 1})
    assert path == tmp_path / "a" / "b" / "c" / "params.json"
    assert path.is_file()
    assert store.load("a/b/c/params.json") == {"k": 1}


def test_save_forces_json_extension(store, tmp_path):
    path = store.save("Enemy/enemyEditor.jdon", {"Center": []})
    assert path == tmp_path / "Enemy" / "enemyEditor.json"
    assert store.load("Enemy/enemyEditor.json") == {"Center": []}


def test_save_adds_extension_when_missing(store, tmp_path):
    store.save("Player/noext", [1, 2, 3])
    assert store.load("Player/noext.json") == [1, 2, 3]


def test_saved_file_is_indented_by_four(store, tmp_path):
    path = store.save("v.json", from_vector3(Vector3(1.0, 2.0, 3.0)))
    assert '\n    "x": 1.0' in path.read_text(encoding="utf-8")


def test_load_missing_file_raises(store):
    with pytest.raises(FileNotFoundError):
        store.load("missing.json")


def test_vector3_round_trip():
    v = Vector3(1.25, -3.5, 8.0)
    assert to_vector3(from_vector3(v)) == v


def test_vector3_missing_key_gives_zero():
    assert to_vector3({"x": 1.0, "y": 2.0}) == Vector3(0.0, 0.0, 0.0)
    assert to_vector3(None) == Vector3(0.0, 0.0, 0.0)


def test_vector2_round_trip_and_missing():
    v = Vector2(4.0, -0.5)
    assert to_vector2(from_vector2(v)) == v
    assert to_vector2({"x": 3.0}) == Vector2(0.0, 0.0)


def test_color_round_trip():
    c = Color(0.1, 0.2, 0.3, 0.4)
    assert to_color(from_color(c)) == c


def test_color_missing_key_gives_default():
    assert to_color({"r": 1.0, "g": 1.0, "b": 1.0}) == Color()
    assert to_color({}).a == 1.0


def test_integers_in_json_become_floats():
    v = to_vector3({"x": 1, "y": 2, "z": 3})
    assert isinstance(v.x, float) and v == Vector3(1.0, 2.0, 3.0)