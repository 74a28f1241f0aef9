# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from gmath3d.math import Quat, Vec3

I = Quat(0, 1, 0, 0)
J = Quat(0, 0, 1, 0)
K = Quat(0, 0, 0, 1)
ONE = Quat(1, 0, 0, 0)


def test_hamilton_basis_products():
    assert I * J == K
    assert J * K == I
    assert K * I == J
    assert J * I == Quat(0, 0, 0, -1)
    assert I * I == Quat(-1, 0, 0, 0)
    assert I.mul(J) * K == Quat(-1, 0, 0, 0)


def test_mul_rejects_other_types():
    with pytest.raises(TypeError):
        I.mul(Vec3(1, 0, 0))
    with pytest.raises(TypeError):
        I * 2


def test_conjugate():
    q = Quat(1, 2, 3, 4)
    assert q.conjugate() == Quat(1, -2, -3, -4)
    assert (q * q.conjugate()).isclose(Quat(30, 0, 0, 0))
    assert q.norm() == pytest.approx(math.sqrt(30))
    assert q.normalized().norm() == pytest.approx(1.0, abs=1e-6)


def test_from_axis_angle_is_unit():
    q = Quat.from_axis_angle(Vec3(1, 2, 3), 1.1)
    assert q.norm() == pytest.approx(1.0, abs=1e-6)
    assert q.r == pytest.approx(math.cos(0.55), abs=1e-7)


def test_rotation_is_right_handed():
    # +x вокруг +z на 90° → +y
    rotated = Quat.rotate(Vec3(1, 0, 0), Vec3(0, 0, 1), math.pi / 2)
    assert rotated.isclose(Vec3(0, 1, 0), eps=1e-6)
    # +x вокруг +y на 90° → −z
    rotated = Quat.rotate(Vec3(1, 0, 0), Vec3(0, 1, 0), math.pi / 2)
    assert rotated.isclose(Vec3(0, 0, -1), eps=1e-6)
    # +y вокруг +x на 90° → +z
    rotated = Quat.rotate(Vec3(0, 1, 0), Vec3(1, 0, 0), math.pi / 2)
    assert rotated.isclose(Vec3(0, 0, 1), eps=1e-6)


def test_rotation_identity_and_periodicity(rng):
    for _ in range(30):
        p = Vec3(*rng.uniform(-1, 1, 3))
        axis = Vec3(*rng.uniform(-1, 1, 3))
        assert Quat.rotate(p, axis, 0.0).isclose(p)
        assert Quat.rotate(p, axis, 2 * math.pi).isclose(p)


def test_rotation_keeps_length(rng):
    for _ in range(30):
        p = Vec3(*rng.uniform(-2, 2, 3))
        axis = Vec3(*rng.uniform(-1, 1, 3))
        angle = rng.uniform(-math.pi, math.pi)
        assert Quat.rotate(p, axis, angle).magnitude() == pytest.approx(p.magnitude(), abs=1e-5)


def test_axis_is_normalized_internally():
    p = Vec3(1, 2, 3)
    a = Quat.rotate(p, Vec3(0, 0, 5), 0.7)
    b = Quat.rotate(p, Vec3(0, 0, 1), 0.7)
    assert a.isclose(b, eps=1e-6)


def test_axis_may_be_a_plain_sequence():
    assert Quat.rotate((1, 0, 0), [0, 0, 1], math.pi).isclose(Vec3(-1, 0, 0), eps=1e-6)


def test_rotate_offset_is_pivot_rotation(rng):
    for _ in range(20):
        p = Vec3(*rng.uniform(-3, 3, 3))
        offset = Vec3(*rng.uniform(-3, 3, 3))
        axis = Vec3(*rng.uniform(-1, 1, 3))
        angle = rng.uniform(-math.pi, math.pi)
        expected = Quat.rotate(p - offset, axis, angle) + offset
        assert Quat.rotate_offset(p, axis, offset, angle).isclose(expected, eps=1e-6)
        # центр поворота остаётся на месте
        assert Quat.rotate_offset(offset, axis, offset, angle).isclose(offset)


def test_rotate_offset_quarter_turn():
    rotated = Quat.rotate_offset(Vec3(2, 1, 0), Vec3(0, 0, 1), Vec3(1, 1, 0), math.pi / 2)
    assert rotated.isclose(Vec3(1, 2, 0), eps=1e-6)


def test_to_mat3_matches_sandwich_product(rng):
    q = Quat.from_axis_angle(Vec3(0.3, -1.0, 0.5), 2.2)
    m = q.to_mat3()
    for _ in range(10):
        v = Vec3(*rng.uniform(-1, 1, 3))
        assert (m @ v).isclose(q.rotate_vector(v))
    assert m.determinant() == pytest.approx(1.0, abs=1e-5)


def test_as_np_layout():
    assert np.array_equal(Quat(1, 2, 3, 4).as_np(), np.array([1, 2, 3, 4], dtype=np.float32))
    assert ONE.to_tuple() == (1.0, 0.0, 0.0, 0.0)


def test_isclose_rejects_other_types():
    with pytest.raises(TypeError):
        ONE.isclose(Vec3())
    with pytest.raises(TypeError):
        np.float32(2.0) * ONE
