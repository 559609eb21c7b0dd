import math

import pytest

from trinkit.vector import Color, Vector2, Vector3, Vector4


def _identity():
    return [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]


def test_vector2_arithmetic():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, 5.0)
    assert a + b == Vector2(4.0, 7.0)
    assert b - a == Vector2(2.0, 3.0)
    assert a * b == Vector2(3.0, 10.0)
    assert a * 2 == 2 * a
    assert (a * 2) / 2 == a


def test_vector2_scalar_on_left_of_division_divides_components():
    v = Vector2(4.0, 8.0)
    assert 2 / v == v / 2


def test_vector2_equality():
    assert Vector2(1.0, 2.0) == Vector2(1.0, 2.0)
    assert not (Vector2(1.0, 2.0) == Vector2(1.0, 3.0))


def test_vector2_default_is_zero():
    assert tuple(Vector2()) == (0.0, 0.0)


def test_vector3_add_rejects_scalar():
    with pytest.raises(TypeError):
        Vector3(1.0, 2.0, 3.0) + 1.0


def test_vector3_in_place_ops():
    v = Vector3(1.0, 2.0, 3.0)
    v += Vector3(1.0, 1.0, 1.0)
    assert v == Vector3(2.0, 3.0, 4.0)
    v *= 0.5
    assert v == Vector3(1.0, 1.5, 2.0)


def test_vector3_normalize_is_unit_length():
    v = Vector3(3.0, -7.0, 2.5).normalize()
    assert v.length() == pytest.approx(1.0)


def test_vector3_normalize_zero_stays_zero():
    assert Vector3().normalize() == Vector3(0.0, 0.0, 0.0)


def test_vector3_length_matches_dot():
    v = Vector3(1.5, -2.0, 4.0)
    assert v.length() ** 2 == pytest.approx(Vector3.dot(v, v))


def test_vector3_length_pinned():
    assert Vector3(3.0, 4.0, 0.0).length() == 5.0


def test_vector3_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = Vector3.cross(a, b)
    assert Vector3.dot(c, a) == pytest.approx(0.0)
    assert Vector3.dot(c, b) == pytest.approx(0.0)
    assert Vector3.cross(b, a) == c * -1


def test_vector3_cross_of_axes():
    assert Vector3.cross(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)) == Vector3(0.0, 0.0, 1.0)


def test_vector3_lerp_endpoints():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.3, -8.0, 9.1)
    assert Vector3.lerp(a, b, 0.0) == a
    assert Vector3.lerp(a, b, 1.0) == b


def test_vector3_lerp_midpoint():
    a = Vector3(0.0, 2.0, -4.0)
    b = Vector3(2.0, 4.0, 4.0)
    assert Vector3.lerp(a, b, 0.5) == (a + b) / 2


def test_vector3_reflect_off_floor():
    reflected = Vector3.reflect(Vector3(1.0, -1.0, 0.5), Vector3(0.0, 1.0, 0.0))
    assert reflected == Vector3(1.0, 1.0, 0.5)


def test_vector3_reflect_preserves_length():
    v = Vector3(2.0, -3.0, 1.0)
    n = Vector3(1.0, 1.0, 0.0).normalize()
    assert Vector3.reflect(v, n).length() == pytest.approx(v.length())


def test_transform_identity_and_translation():
    v = Vector3(1.0, -2.0, 3.0)
    assert Vector3.transform(v, _identity()) == v
    m = _identity()
    m[3][0], m[3][1], m[3][2] = 5.0, 6.0, 7.0
    assert Vector3.transform(v, m) == v + Vector3(5.0, 6.0, 7.0)


def test_transform_divides_by_w():
    v = Vector3(2.0, 4.0, 6.0)
    m = _identity()
    m[3][3] = 2.0
    assert Vector3.transform(v, m) == v / 2


def test_transform_accepts_object_with_m():
    class Holder:
        def __init__(self, rows):
            self.m = rows

    v = Vector3(1.0, 2.0, 3.0)
    assert Vector3.transform(v, Holder(_identity())) == v


def test_transfer_normal_ignores_translation():
    v = Vector3(1.0, -2.0, 3.0)
    m = _identity()
    m[3][0], m[3][1], m[3][2] = 5.0, 6.0, 7.0
    assert Vector3.transfer_normal(v, m) == v


def test_calculate_value_empty_raises():
    with pytest.raises(ValueError):
        Vector3.calculate_value([], 0.5)


def test_calculate_value_before_after_and_between():
    a = Vector3(0.0, 0.0, 0.0)
    b = Vector3(2.0, 4.0, 6.0)
    c = Vector3(-1.0, 1.0, 1.0)
    keys = [(1.0, a), (2.0, b), (3.0, c)]
    assert Vector3.calculate_value(keys, 0.0) == a
    assert Vector3.calculate_value(keys, 9.0) == c
    assert Vector3.calculate_value(keys, 1.5) == Vector3.lerp(a, b, 0.5)
    assert Vector3.calculate_value(keys, 2.0) == b


def test_calculate_value_single_key():
    v = Vector3(1.0, 2.0, 3.0)
    assert Vector3.calculate_value([(5.0, v)], 100.0) == v


def test_vector4_equality_ignores_w():
    assert Vector4(1.0, 2.0, 3.0, 4.0) == Vector4(1.0, 2.0, 3.0, 9.0)
    assert not (Vector4(1.0, 2.0, 3.0, 4.0) == Vector4(1.0, 2.0, 0.0, 4.0))


def test_vector4_arithmetic_includes_w():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    b = Vector4(1.0, 1.0, 1.0, 1.0)
    assert tuple(a + b) == (2.0, 3.0, 4.0, 5.0)
    assert tuple(a - b) == (0.0, 1.0, 2.0, 3.0)


def test_color_default_is_opaque_black():
    assert Color() == Color.black()


def test_color_factories_take_alpha():
    assert Color.white(0.25).a == 0.25
    assert Color.green() == Color(0.0, 1.0, 0.0, 1.0)
    assert Color.blue(0.5) == Color(0.0, 0.0, 1.0, 0.5)


def test_color_convert_packed():
    assert Color.convert(0xFFFF0000) == Color.red()
    assert Color.convert(0xFF00FF00) == Color.green()
    assert Color.convert(0x000000FF) == Color.blue(0.0)


def test_color_convert_components_in_range():
    c = Color.convert(0x80402010)
    assert all(0.0 <= value <= 1.0 for value in (c.r, c.g, c.b, c.a))
    assert math.isclose(c.a * 255.0, 0x80)