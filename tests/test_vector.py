import math

import pytest

from planar3d.vector import Ray3, Vector3, Vector4, ulps_eq_scalar


def test_cross_of_axes_gives_third_axis():
    assert Vector3.unit_x().cross(Vector3.unit_y()) == Vector3.unit_z()
    assert Vector3.unit_y().cross(Vector3.unit_z()) == Vector3.unit_x()
    assert Vector3.unit_z().cross(Vector3.unit_x()) == Vector3.unit_y()


def test_cross_is_perpendicular_to_operands():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert ulps_eq_scalar(c.dot(a), 0.0)
    assert ulps_eq_scalar(c.dot(b), 0.0)


def test_cross_is_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, 5.0, 6.0)
    assert a.cross(b) == -b.cross(a)


def test_dot_of_self_is_square_of_magnitude():
    v = Vector3(3.0, 4.0, 12.0)
    assert ulps_eq_scalar(v.dot(v), v.magnitude() ** 2)


def test_normalize_has_unit_length():
    v = Vector3(1.0, 1.0, 1.0).normalize()
    assert ulps_eq_scalar(v.magnitude(), 1.0)
    assert v.x == v.y == v.z


def test_normalize_zero_vector_is_nan():
    v = Vector3.zero().normalize()
    nan_flags = (math.isnan(v.x), math.isnan(v.y), math.isnan(v.z))
    assert nan_flags == (True, True, True)
    assert v.ulps_eq(v, 0.0, 4) is False


def test_arithmetic_round_trip():
    a = Vector3(1.0, -2.0, 3.0)
    b = Vector3(0.5, 0.25, -4.0)
    assert (a + b) - b == a
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0


def test_vector_ulps_eq():
    a = Vector3(0.1 + 0.2, 1.0, 0.0)
    b = Vector3(0.3, 1.0, 0.0)
    assert a.ulps_eq(b, 0.0, 4)
    assert not a.ulps_eq(Vector3(0.31, 1.0, 0.0), 0.0, 4)


def test_ulps_eq_scalar_cases():
    assert ulps_eq_scalar(0.1 + 0.2, 0.3)
    assert not ulps_eq_scalar(1.0, 1.0 + 1e-9)
    assert not ulps_eq_scalar(math.nan, math.nan)
    assert ulps_eq_scalar(math.inf, math.inf)


def test_ulps_eq_scalar_sign_mismatch_fails():
    assert not ulps_eq_scalar(1e-300, -1e-300, 0.0, 4)


def test_ulps_eq_scalar_counts_units_in_last_place():
    a = 1.0
    b = math.nextafter(math.nextafter(a, 2.0), 2.0)
    assert ulps_eq_scalar(a, b, 0.0, 2)
    assert not ulps_eq_scalar(a, b, 0.0, 1)


def test_vector_is_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v.x == 1.0
    assert v == Vector3(1.0, 2.0, 3.0)