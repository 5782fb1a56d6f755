import pytest

from protonkit.vector import Rect, Vector2, Vector2i, Vector3


def test_vector2_add_then_sub_restores():
    a = Vector2(1.5, -2.0)
    b = Vector2(3.0, 4.25)
    assert (a + b) - b == a


def test_vector2_add_commutes():
    a = Vector2(1.0, 2.0)
    b = Vector2(-7.0, 0.5)
    assert a + b == b + a


def test_vector2_sub_self_is_zero():
    a = Vector2(9.0, -3.0)
    assert a - a == Vector2()


def test_vector2_distance_pinned():
    assert Vector2(0.0, 0.0).distance(3.0, 4.0) == pytest.approx(5.0)


def test_vector2_distance_to_self_and_symmetry():
    a = Vector2(2.0, 7.0)
    b = Vector2(-1.0, 3.5)
    assert a.distance(a.x, a.y) == 0.0
    assert a.distance(b.x, b.y) == pytest.approx(b.distance(a.x, a.y))


def test_vector2i_arithmetic_round_trip():
    a = Vector2i(5, -2)
    b = Vector2i(10, 20)
    assert (a + b) - b == a
    assert a - a == Vector2i()


def test_vector2i_distance():
    a = Vector2i(4, 9)
    assert a.distance(4, 9) == 0.0
    assert a.distance(1, 2) == pytest.approx(Vector2i(1, 2).distance(4, 9))


def test_vector3_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-0.5, 8.0, 0.25)
    assert (a + b) - b == a
    assert a + b == b + a


def test_rect_round_trip():
    a = Rect(1.0, 2.0, 30.0, 40.0)
    b = Rect(0.5, 0.5, 1.0, 2.0)
    assert (a + b) - b == a
    assert a - a == Rect()


def test_equality_differs_on_component():
    assert Vector3(1.0, 2.0, 3.0) != Vector3(1.0, 2.0, 4.0)
    assert Rect(1.0, 2.0, 3.0, 4.0) == Rect(1.0, 2.0, 3.0, 4.0)