"""Planes in three dimensions and their intersections with rays and other planes."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

Vector3 = Tuple[float, float, float]

_EPSILON = sys.float_info.epsilon


def _vec(v: Sequence[float]) -> Vector3:
    if len(v) != 3:
        raise ValueError(f"expected a 3-component vector, got {len(v)} components")
    return (float(v[0]), float(v[1]), float(v[2]))


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _sub(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _add(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _scale(a: Sequence[float], s: float) -> Vector3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _near_zero(x: float) -> bool:
    return abs(x) <= _EPSILON


def _vec_near_zero(v: Sequence[float]) -> bool:
    return all(_near_zero(c) for c in v)


def _divide(numerator: float, denominator: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.inf * math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass(frozen=True)
class Plane:
    """A plane given by ``A*x + B*y + C*z - D = 0``.

    ``n`` holds ``(A, B, C)`` and ``d`` holds ``D``.
    """

    n: Vector3
    d: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "n", _vec(self.n))
        object.__setattr__(self, "d", float(self.d))

    @classmethod
    def from_abcd(cls, a: float, b: float, c: float, d: float) -> "Plane":
        """Build a plane from the four equation coefficients."""
        return cls((a, b, c), d)

    @classmethod
    def from_vector4(cls, v: Sequence[float]) -> "Plane":
        """Build a plane from ``(A, B, C, D)``."""
        x, y, z, w = v
        return cls((x, y, z), w)

    @classmethod
    def from_vector4_alt(cls, v: Sequence[float]) -> "Plane":
        """Build a plane from ``(A, B, C, D)`` in the ``A*x + B*y + C*z + D = 0`` form."""
        x, y, z, w = v
        return cls((x, y, z), -w)

    @classmethod
    def from_points(
        cls, a: Sequence[float], b: Sequence[float], c: Sequence[float]
    ) -> Optional["Plane"]:
        """Plane through three points, or None if they are collinear."""
        v0 = _sub(b, a)
        v1 = _sub(c, a)
        n = _cross(v0, v1)
        if _vec_near_zero(n):
            return None
        length = math.sqrt(_dot(n, n))
        n = _scale(n, 1.0 / length)
        return cls(n, -_dot(a, n))

    @classmethod
    def from_point_normal(cls, p: Sequence[float], n: Sequence[float]) -> "Plane":
        """Plane containing ``p`` and perpendicular to ``n``."""
        return cls(_vec(n), _dot(p, n))

    def normalize(self) -> Optional["Plane"]:
        """Return the plane scaled to a unit normal, or None for a zero normal."""
        if _vec_near_zero(self.n):
            return None
        denom = 1.0 / math.sqrt(_dot(self.n, self.n))
        return Plane(_scale(self.n, denom), self.d * denom)

    def _ray_parameter(self, origin: Sequence[float], direction: Sequence[float]) -> float:
        return _divide(-(self.d + _dot(origin, self.n)), _dot(direction, self.n))

    def ray_intersection(
        self, origin: Sequence[float], direction: Sequence[float]
    ) -> Optional[Vector3]:
        """Point where the ray hits the plane, or None if it lies behind the origin."""
        t = self._ray_parameter(origin, direction)
        if t < 0.0:
            return None
        return _add(origin, _scale(direction, t))

    def intersects_ray(self, origin: Sequence[float], direction: Sequence[float]) -> bool:
        """Whether the ray hits the plane."""
        return self._ray_parameter(origin, direction) >= 0.0

    def plane_intersection(self, other: "Plane") -> Optional[Tuple[Vector3, Vector3]]:
        """Line shared with another plane as ``(point, direction)``, or None if parallel."""
        d = _cross(self.n, other.n)
        denom = _dot(d, d)
        if _near_zero(denom):
            return None
        p = _cross(_sub(_scale(other.n, self.d), _scale(self.n, other.d)), d)
        return _scale(p, 1.0 / denom), d

    def intersects_plane(self, other: "Plane") -> bool:
        """Whether this plane and ``other`` are not parallel."""
        d = _cross(self.n, other.n)
        return not _near_zero(_dot(d, d))

    def planes_intersection(self, second: "Plane", third: "Plane") -> Optional[Vector3]:
        """Single point shared by three planes, or None if there is none."""
        u = _cross(second.n, third.n)
        denom = _dot(self.n, u)
        if _near_zero(abs(denom)):
            return None
        inner = _sub(_scale(second.n, third.d), _scale(third.n, second.d))
        p = _add(_scale(u, self.d), _cross(self.n, inner))
        return _scale(p, 1.0 / denom)

    def intersects_planes(self, second: "Plane", third: "Plane") -> bool:
        """Whether three planes meet in a single point."""
        u = _cross(second.n, third.n)
        return not _near_zero(abs(_dot(self.n, u)))

    def isclose(self, other: "Plane") -> bool:
        """Approximate equality of normal and distance."""
        return all(
            math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-12)
            for a, b in zip(self.n + (self.d,), other.n + (other.d,))
        )

    def __str__(self) -> str:
        x, y, z = self.n
        return f"{x!r}x + {y!r}y + {z!r}z - {self.d!r} = 0"