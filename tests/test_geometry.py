import math

import pytest

from voxelcraft.geometry import AABB, Vec3


def test_arithmetic_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert -(-a) == a
    assert 2 * a == a * 2


def test_indexing_and_iteration():
    v = Vec3(7.0, 8.0, 9.0)
    assert [v[0], v[1], v[2]] == list(v)
    assert tuple(v) == (7.0, 8.0, 9.0)


def test_cross_of_axes():
    x = Vec3(1, 0, 0)
    y = Vec3(0, 1, 0)
    assert x.cross(y) == Vec3(0, 0, 1)
    assert y.cross(x) == -Vec3(0, 0, 1)


def test_cross_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-9)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-9)


def test_length_and_normalized():
    v = Vec3(3, 4, 0)
    assert v.length() == pytest.approx(5.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalizing_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec3().normalized()


def test_floor_handles_negatives():
    assert Vec3(-0.5, 2.9, -3.0).floor() == (-1, 2, -3)


def test_aabb_touching_counts_as_intersection():
    a = AABB(Vec3(0, 0, 0), Vec3(1, 1, 1))
    b = AABB(Vec3(1, 0, 0), Vec3(2, 1, 1))
    assert a.intersects(b)
    assert b.intersects(a)


def test_aabb_disjoint_on_one_axis():
    a = AABB(Vec3(0, 0, 0), Vec3(1, 1, 1))
    b = AABB(Vec3(0, 0, 1.5), Vec3(1, 1, 2.5))
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_aabb_contained_box_intersects():
    outer = AABB(Vec3(-5, -5, -5), Vec3(5, 5, 5))
    inner = AABB(Vec3(-1, -1, -1), Vec3(1, 1, 1))
    assert outer.intersects(inner)
    assert inner.intersects(outer)