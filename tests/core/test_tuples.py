from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from engine.core.tuples import Tuple, point, vector


def test_tuple_with_w1_is_point() -> None:
    a = Tuple(4.3, -4.2, 3.1, 1.0)
    assert a.x == 4.3 and a.y == -4.2 and a.z == 3.1 and a.w == 1.0
    assert a.is_point()
    assert not a.is_vector()


def test_tuple_with_w0_is_vector() -> None:
    a = Tuple(4.3, -4.2, 3.1, 0.0)
    assert a.is_vector()
    assert not a.is_point()


def test_point_and_vector_factories() -> None:
    assert point(4, -4, 3) == Tuple(4.0, -4.0, 3.0, 1.0)
    assert vector(4, -4, 3) == Tuple(4.0, -4.0, 3.0, 0.0)
    assert Tuple.point(1, 2, 3) == point(1, 2, 3)
    assert Tuple.vector(1, 2, 3) == vector(1, 2, 3)


def test_adding_tuples() -> None:
    assert Tuple(3, -2, 5, 1) + Tuple(-2, 3, 1, 0) == Tuple(1, 1, 6, 1)
    assert point(3, -2, 5) + vector(-2, 3, 1) == point(1, 1, 6)


def test_adding_two_points_is_representable_but_not_a_point() -> None:
    s = point(3, -2, 5) + point(-2, 3, 1)
    assert s == Tuple(1, 1, 6, 2)
    assert not s.is_point() and not s.is_vector()


def test_subtraction_variants() -> None:
    assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)
    assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)
    assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)
    assert vector(0, 0, 0) - vector(1, -2, 3) == vector(-1, 2, -3)


def test_negate_scale_divide() -> None:
    a = Tuple(1, -2, 3, -4)
    assert -a == Tuple(-1, 2, -3, 4)
    assert a * 3.5 == Tuple(3.5, -7, 10.5, -14)
    assert 0.5 * a == Tuple(0.5, -1, 1.5, -2)
    assert a / 2 == Tuple(0.5, -1, 1.5, -2)


def test_divide_by_zero_is_not_special_cased() -> None:
    with pytest.raises(ZeroDivisionError):
        _ = vector(1, 2, 3) / 0


def test_magnitude() -> None:
    assert vector(1, 0, 0).magnitude() == 1.0
    assert vector(0, 0, 1).magnitude() == 1.0
    assert math.isclose(vector(1, 2, 3).magnitude(), math.sqrt(14))
    assert math.isclose(vector(-1, -2, -3).magnitude(), math.sqrt(14))
    # w も含む
    assert math.isclose(Tuple(0, 0, 0, 2).magnitude(), 2.0)


def test_normalize() -> None:
    assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
    s = math.sqrt(14)
    n = vector(1, 2, 3).normalize()
    assert n == vector(1 / s, 2 / s, 3 / s)
    assert math.isclose(n.magnitude(), 1.0)


def test_normalize_zero_tuple_yields_nan() -> None:
    n = vector(0, 0, 0).normalize()
    assert all(math.isnan(c) for c in n)


def test_dot_and_cross() -> None:
    a = vector(1, 2, 3)
    b = vector(2, 3, 4)
    assert a.dot(b) == 20.0
    assert a.cross(b) == vector(-1, 2, -1)
    assert b.cross(a) == vector(1, -2, 1)


def test_cross_forces_vector_result() -> None:
    c = Tuple(1, 0, 0, 1).cross(Tuple(0, 1, 0, 1))
    assert c.is_vector()
    assert c == vector(0, 0, 1)


def test_equality_is_approximate() -> None:
    assert point(1, 2, 3) == Tuple(1 + 1e-12, 2 - 1e-12, 3, 1)
    assert point(1, 2, 3) != point(1 + 1e-6, 2, 3)
    assert point(1, 2, 3) != "point"


def test_tuple_is_immutable_and_unhashable() -> None:
    p = point(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0  # type: ignore[misc]
    with pytest.raises(TypeError):
        hash(p)


def test_array_round_trip_and_validation() -> None:
    arr = point(1, 2, 3).as_array()
    assert arr.dtype == np.float64
    assert arr.tolist() == [1.0, 2.0, 3.0, 1.0]
    assert Tuple.from_array(np.array([0.0, 1.0, 2.0, 0.0])) == vector(0, 1, 2)
    with pytest.raises(ValueError):
        Tuple.from_array(np.zeros(3))
    assert list(vector(1, 2, 3)) == [1.0, 2.0, 3.0, 0.0]
