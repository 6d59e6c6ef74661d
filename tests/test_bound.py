import math

from collisionkit.bound import Relation, relate_point_clip_space, relate_point_plane
from collisionkit.plane import Plane

IDENTITY = [
    [1.0, 0.0, 0.0, 0.0],
    [0.0, 1.0, 0.0, 0.0],
    [0.0, 0.0, 1.0, 0.0],
    [0.0, 0.0, 0.0, 1.0],
]


def test_relation_order_lets_out_dominate():
    planes = [
        Plane((0.0, 0.0, 1.0), 1.0),
        Plane((1.0, 0.0, 0.0), 3.0),
        Plane((0.0, 1.0, 0.0), 5.0),
    ]
    point = (3.0, 0.0, 2.0)
    relations = [relate_point_plane(point, plane) for plane in planes]
    assert relations == [Relation.IN, Relation.CROSS, Relation.OUT]
    assert max(relations) is Relation.OUT
    assert max(relations[:2]) is Relation.CROSS
    assert max(relations[:1]) is Relation.IN


def test_point_in_front_of_plane_is_in():
    plane = Plane((0.0, 0.0, 1.0), 1.0)
    assert relate_point_plane((0.0, 0.0, 2.0), plane) is Relation.IN


def test_point_behind_plane_is_out():
    plane = Plane((0.0, 0.0, 1.0), 1.0)
    assert relate_point_plane((5.0, 5.0, 0.0), plane) is Relation.OUT


def test_point_on_plane_is_cross():
    plane = Plane((0.0, 0.0, 1.0), 1.0)
    assert relate_point_plane((3.0, -2.0, 1.0), plane) is Relation.CROSS


def test_clip_space_inside():
    assert relate_point_clip_space((0.5, -0.5, 0.25), IDENTITY) is Relation.IN


def test_clip_space_outside():
    assert relate_point_clip_space((0.0, 2.0, 0.0), IDENTITY) is Relation.OUT


def test_clip_space_on_boundary_is_cross():
    assert relate_point_clip_space((1.0, 0.0, 0.0), IDENTITY) is Relation.CROSS