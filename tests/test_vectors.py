import pytest

from cubecaster.vectors import Vec2


def test_add_then_sub_round_trips():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 4.0)
    assert (a + b) - b == a


def test_add_is_commutative():
    a = Vec2(3.0, 7.0)
    b = Vec2(-1.0, 2.5)
    assert a + b == b + a


def test_sub_self_is_zero():
    a = Vec2(3.0, -7.0)
    assert a - a == Vec2()


def test_scale_by_one_is_identity():
    a = Vec2(2.0, -5.0)
    assert a.scale(1.0) == a


def test_scale_matches_repeated_addition():
    a = Vec2(1.25, -0.5)
    assert a.scale(2.0) == a + a


def test_dot_is_commutative():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 4.0)
    assert a.dot(b) == b.dot(a)


def test_dot_of_perpendicular_vectors_is_zero():
    a = Vec2(2.0, 3.0)
    b = Vec2(-3.0, 2.0)
    assert a.dot(b) == 0.0


def test_dot_with_self_is_squared_length():
    a = Vec2(3.0, 4.0)
    assert a.dot(a) == pytest.approx(25.0)


def test_add_rejects_non_vector():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + 3