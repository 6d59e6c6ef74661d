import math

import pytest

from collisionkit.bound import Relation
from collisionkit.frustum import Frustum, relate_clip_space
from collisionkit.plane import Plane

IDENTITY = [
    [1.0, 0.0, 0.0, 0.0],
    [0.0, 1.0, 0.0, 0.0],
    [0.0, 0.0, 1.0, 0.0],
    [0.0, 0.0, 0.0, 1.0],
]
ZERO = [[0.0] * 4 for _ in range(4)]


class FixedBound:
    def __init__(self, relation):
        self.relation = relation
        self.planes = []

    def relate_plane(self, plane):
        self.planes.append(plane)
        return self.relation


def test_from_matrix4_planes_are_normalized():
    frustum = Frustum.from_matrix4(IDENTITY)
    assert frustum is not None
    for plane in frustum.planes():
        assert math.isclose(sum(c * c for c in plane.n), 1.0)


def test_from_matrix4_degenerate_is_none():
    assert Frustum.from_matrix4(ZERO) is None


def test_from_matrix4_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Frustum.from_matrix4([[1.0, 0.0], [0.0, 1.0]])


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0.0, 0.0, 0.0), Relation.IN),
        ((0.5, -0.5, 0.5), Relation.IN),
        ((2.0, 0.0, 0.0), Relation.OUT),
        ((0.0, 0.0, -3.0), Relation.OUT),
        ((1.0, 0.0, 0.0), Relation.CROSS),
    ],
)
def test_contains_point(point, expected):
    frustum = Frustum.from_matrix4(IDENTITY)
    assert frustum.contains(point) is expected


@pytest.mark.parametrize("point", [(0.2, 0.3, -0.4), (5.0, 0.0, 0.0), (0.0, -0.9, 4.0)])
def test_clip_space_agrees_with_frustum_for_points(point):
    frustum = Frustum.from_matrix4(IDENTITY)
    assert relate_clip_space(point, IDENTITY) is frustum.contains(point)


def test_contains_asks_every_plane_in_order():
    frustum = Frustum.from_matrix4(IDENTITY)
    bound = FixedBound(Relation.CROSS)
    assert frustum.contains(bound) is Relation.CROSS
    assert bound.planes == list(frustum.planes())


def test_planes_order():
    frustum = Frustum.from_ortho(-1.0, 2.0, -3.0, 4.0, 5.0, 6.0)
    assert frustum.planes() == (
        frustum.left,
        frustum.right,
        frustum.top,
        frustum.bottom,
        frustum.near,
        frustum.far,
    )


def test_from_ortho_planes():
    frustum = Frustum.from_ortho(-1.0, 2.0, -3.0, 4.0, 5.0, 6.0)
    assert frustum.left == Plane.from_abcd(1.0, 0.0, 0.0, -1.0)
    assert frustum.right == Plane.from_abcd(-1.0, 0.0, 0.0, 2.0)
    assert frustum.bottom == Plane.from_abcd(0.0, 1.0, 0.0, -3.0)
    assert frustum.top == Plane.from_abcd(0.0, -1.0, 0.0, 4.0)
    assert frustum.near == Plane.from_abcd(0.0, 0.0, -1.0, 5.0)
    assert frustum.far == Plane.from_abcd(0.0, 0.0, 1.0, 6.0)


def test_relate_clip_space_bound_with_degenerate_matrix_is_cross():
    bound = FixedBound(Relation.OUT)
    assert relate_clip_space(bound, ZERO) is Relation.CROSS
    assert bound.planes == []


def test_relate_clip_space_bound_uses_frustum():
    assert relate_clip_space(FixedBound(Relation.OUT), IDENTITY) is Relation.OUT
    assert relate_clip_space(FixedBound(Relation.IN), IDENTITY) is Relation.IN