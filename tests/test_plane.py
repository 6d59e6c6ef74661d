import math

import pytest

from collisionkit.plane import Plane


def dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def test_from_abcd_keeps_coefficients():
    plane = Plane.from_abcd(1.0, 2.0, 3.0, 4.0)
    assert plane.n == (1.0, 2.0, 3.0)
    assert plane.d == 4.0


def test_from_vector4_and_alt_differ_in_sign_of_d():
    v = (1.0, 2.0, 3.0, 4.0)
    assert Plane.from_vector4(v).d == 4.0
    assert Plane.from_vector4_alt(v).d == -4.0
    assert Plane.from_vector4(v).n == Plane.from_vector4_alt(v).n


def test_from_points_gives_unit_normal_orthogonal_to_edges():
    a, b, c = (1.0, 0.0, 2.0), (3.0, 1.0, 0.0), (0.0, 4.0, 1.0)
    plane = Plane.from_points(a, b, c)
    assert plane is not None
    assert math.isclose(dot(plane.n, plane.n), 1.0)
    ab = [y - x for x, y in zip(a, b)]
    ac = [y - x for x, y in zip(a, c)]
    assert dot(plane.n, ab) == pytest.approx(0.0, abs=1e-12)
    assert dot(plane.n, ac) == pytest.approx(0.0, abs=1e-12)
    # every point on the plane yields the same dot product with the normal
    assert dot(a, plane.n) == pytest.approx(dot(b, plane.n))
    assert dot(a, plane.n) == pytest.approx(-plane.d)


def test_from_points_collinear_is_none():
    assert Plane.from_points((0, 0, 0), (1, 1, 1), (2, 2, 2)) is None


def test_from_point_normal_same_for_points_in_plane():
    n = (0.0, 0.0, 2.0)
    first = Plane.from_point_normal((1.0, 2.0, 3.0), n)
    second = Plane.from_point_normal((-5.0, 7.0, 3.0), n)
    assert first.isclose(second)
    assert first.n == n


def test_normalize_makes_unit_normal_and_keeps_ratio():
    plane = Plane.from_abcd(0.0, 3.0, 4.0, 10.0)
    normal = plane.normalize()
    assert math.isclose(dot(normal.n, normal.n), 1.0)
    assert normal.d / normal.n[1] == pytest.approx(plane.d / plane.n[1])


def test_normalize_zero_normal_is_none():
    assert Plane.from_abcd(0.0, 0.0, 0.0, 1.0).normalize() is None


def test_ray_intersection_solves_plane_equation():
    plane = Plane.from_abcd(0.0, 0.0, 1.0, -5.0)
    origin = (1.0, 2.0, 0.0)
    direction = (0.0, 0.0, 1.0)
    point = plane.ray_intersection(origin, direction)
    assert point is not None
    assert dot(point, plane.n) + plane.d == pytest.approx(0.0)
    assert plane.intersects_ray(origin, direction)


def test_ray_pointing_away_misses():
    plane = Plane.from_abcd(0.0, 0.0, 1.0, -5.0)
    origin = (0.0, 0.0, 0.0)
    direction = (0.0, 0.0, -1.0)
    assert plane.ray_intersection(origin, direction) is None
    assert not plane.intersects_ray(origin, direction)


def test_plane_intersection_point_lies_on_both_planes():
    p1 = Plane((1.0, 0.0, 0.0), 2.0)
    p2 = Plane((0.0, 1.0, 1.0), 3.0)
    result = p1.plane_intersection(p2)
    assert result is not None
    point, direction = result
    assert dot(point, p1.n) == pytest.approx(p1.d)
    assert dot(point, p2.n) == pytest.approx(p2.d)
    assert dot(direction, p1.n) == pytest.approx(0.0)
    assert dot(direction, p2.n) == pytest.approx(0.0)
    assert p1.intersects_plane(p2)


def test_parallel_planes_do_not_intersect():
    p1 = Plane((0.0, 0.0, 1.0), 2.0)
    p2 = Plane((0.0, 0.0, 1.0), 5.0)
    assert p1.plane_intersection(p2) is None
    assert not p1.intersects_plane(p2)


def test_three_planes_meet_in_point_on_all_of_them():
    planes = [
        Plane((1.0, 0.0, 0.0), 1.0),
        Plane((0.0, 1.0, 0.0), -2.0),
        Plane((1.0, 1.0, 1.0), 4.0),
    ]
    point = planes[0].planes_intersection(planes[1], planes[2])
    assert point is not None
    for plane in planes:
        assert dot(point, plane.n) == pytest.approx(plane.d)
    assert planes[0].intersects_planes(planes[1], planes[2])


def test_three_planes_with_shared_direction_have_no_point():
    p1 = Plane((1.0, 0.0, 0.0), 1.0)
    p2 = Plane((0.0, 1.0, 0.0), 1.0)
    p3 = Plane((1.0, 1.0, 0.0), 1.0)
    assert p1.planes_intersection(p2, p3) is None
    assert not p1.intersects_planes(p2, p3)


def test_str_formats_equation():
    assert str(Plane.from_abcd(1.0, 2.0, 3.0, 4.0)) == "1.0x + 2.0y + 3.0z - 4.0 = 0"


def test_isclose_detects_difference():
    plane = Plane.from_abcd(1.0, 2.0, 3.0, 4.0)
    assert plane.isclose(Plane.from_abcd(1.0, 2.0, 3.0, 4.0 + 1e-14))
    assert not plane.isclose(Plane.from_abcd(1.0, 2.0, 3.0, 4.5))


def test_wrong_normal_length_raises():
    with pytest.raises(ValueError):
        Plane((1.0, 2.0), 0.0)