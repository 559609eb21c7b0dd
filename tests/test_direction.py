import pytest

from trinkit import direction
from trinkit.vector import Vector3


def _approx(v):
    return pytest.approx(tuple(v))


@pytest.mark.parametrize(
    "positive, negative",
    [
        (direction.right, direction.left),
        (direction.up, direction.down),
        (direction.forward, direction.backward),
        (direction.up_forward_right, direction.down_backward_left),
    ],
)
def test_opposites(positive, negative):
    assert tuple(negative()) == _approx(positive() * -1)


@pytest.mark.parametrize(
    "func",
    [
        direction.right,
        direction.left,
        direction.up,
        direction.down,
        direction.forward,
        direction.backward,
        direction.up_right,
        direction.up_left,
        direction.down_right,
        direction.down_left,
        direction.up_forward_right,
        direction.up_forward_left,
        direction.down_backward_right,
        direction.down_backward_left,
    ],
)
def test_all_unit_length(func):
    assert func().length() == pytest.approx(1.0)


def test_axes_pinned():
    assert direction.up() == Vector3(0.0, 1.0, 0.0)
    assert direction.right() == Vector3(1.0, 0.0, 0.0)
    assert direction.backward() == Vector3(0.0, 0.0, -1.0)


def test_planar_diagonals_are_normalized_sums():
    assert tuple(direction.up_right()) == _approx((direction.up() + direction.right()).normalize())
    assert tuple(direction.up_left()) == _approx((direction.up() + direction.left()).normalize())
    assert tuple(direction.down_right()) == _approx((direction.down() + direction.right()).normalize())
    assert tuple(direction.down_left()) == _approx((direction.down() + direction.left()).normalize())


def test_planar_diagonals_stay_in_xy_plane():
    for func in (direction.up_right, direction.up_left, direction.down_right, direction.down_left):
        assert func().z == 0.0


def test_spatial_diagonals_are_normalized_sums():
    expected = (direction.up() + direction.forward() + direction.left()).normalize()
    assert tuple(direction.up_forward_left()) == _approx(expected)
    expected = (direction.down() + direction.backward() + direction.right()).normalize()
    assert tuple(direction.down_backward_right()) == _approx(expected)


def test_each_call_returns_fresh_vector():
    first = direction.up()
    first.x = 5.0
    assert direction.up() == Vector3(0.0, 1.0, 0.0)