import math

import pytest

from shockmap.quat import Quat, Vec


def _components(v):
    return (v.x, v.y, v.z)


def test_identity_is_neutral_for_multiplication():
    q = Quat.angle_axis(0.7, 1.0, 2.0, 3.0)
    r = q * Quat()
    assert (r.w, r.x, r.y, r.z) == pytest.approx((q.w, q.x, q.y, q.z))
    p = Quat() * q
    assert (p.w, p.x, p.y, p.z) == pytest.approx((q.w, q.x, q.y, q.z))


def test_angle_axis_is_unit_length():
    q = Quat.angle_axis(1.2, 0.3, -0.5, 2.0)
    norm = q.w ** 2 + q.x ** 2 + q.y ** 2 + q.z ** 2
    assert norm == pytest.approx(1.0)
    assert q.w == pytest.approx(math.cos(0.6))


def test_angle_axis_with_zero_axis_is_identity():
    assert Quat.angle_axis(1.0, 0.0, 0.0, 0.0) == Quat()


def test_normalized_degenerate_is_identity():
    assert Quat(2.0, 1.0, 1.0, 1.0).normalized() == Quat()


def test_inverse_times_self_is_identity():
    q = Quat.angle_axis(0.9, 1.0, 1.0, 0.0)
    p = q * q.inverse()
    assert (p.w, p.x, p.y, p.z) == pytest.approx((1.0, 0.0, 0.0, 0.0))


def test_inverse_negates_vector_part():
    q = Quat(0.5, 0.1, 0.2, 0.3)
    assert q.inverse() == Quat(0.5, -0.1, -0.2, -0.3)


def test_rotation_quarter_turn_about_z():
    q = Quat.angle_axis(math.pi / 2, 0.0, 0.0, 1.0)
    rotated = Vec(1.0, 0.0, 0.0).rotated(q)
    assert _components(rotated) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_rotation_preserves_length():
    q = Quat.angle_axis(2.1, 0.4, 0.1, -0.7)
    v = Vec(3.0, -2.0, 5.0)
    assert (v * q).length() == pytest.approx(v.length())


def test_rotation_then_inverse_restores():
    q = Quat.angle_axis(1.3, 1.0, 0.0, 1.0)
    v = Vec(0.5, 1.5, -2.5)
    restored = v.rotated(q).rotated(q.inverse())
    assert _components(restored) == pytest.approx(_components(v), abs=1e-9)


def test_vec_arithmetic_round_trips():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-4.0, 0.5, 7.0)
    assert (a + b) - b == a
    assert (a * 2.0) / 2.0 == a
    assert -(-a) == a
    assert a + (-a) == Vec()


def test_normalized_has_unit_length():
    assert Vec(3.0, 4.0, 12.0).normalized().length() == pytest.approx(1.0)


def test_zero_vec_normalized_stays_zero():
    assert Vec().normalized() == Vec()


def test_cross_is_orthogonal_to_inputs():
    a = Vec(1.0, 2.0, 3.0)
    b = Vec(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert a.cross(a) == Vec()


def test_dot_with_self_is_length_squared():
    v = Vec(2.0, -3.0, 6.0)
    assert v.dot(v) == pytest.approx(v.length() ** 2)