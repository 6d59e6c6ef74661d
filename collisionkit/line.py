"""Directed line segments and their intersection with 2D rays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

Point2 = Tuple[float, float]


def _perp_dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[1] - a[1] * b[0]


def _dot2(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1]


@dataclass(frozen=True)
class Line:
    """A directed line segment from ``origin`` to ``dest``."""

    origin: Tuple[float, ...]
    dest: Tuple[float, ...]

    def __post_init__(self) -> None:
        origin = tuple(float(c) for c in self.origin)
        dest = tuple(float(c) for c in self.dest)
        if len(origin) != len(dest):
            raise ValueError("origin and dest must have the same dimension")
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "dest", dest)

    def ray_intersection(
        self, origin: Sequence[float], direction: Sequence[float]
    ) -> Optional[Point2]:
        """Where a 2D ray meets this segment, or None."""
        return ray_line_intersection(origin, direction, self)

    def intersects_ray(self, origin: Sequence[float], direction: Sequence[float]) -> bool:
        """Whether a 2D ray meets this segment."""
        return ray_line_intersection(origin, direction, self) is not None


def ray_line_intersection(
    origin: Sequence[float], direction: Sequence[float], line: Line
) -> Optional[Point2]:
    """First point where a 2D ray meets a segment, or None.

    When ray and segment are collinear the ray origin is returned if it lies on
    the segment, otherwise the segment end nearest along the ray.
    """
    if len(origin) != 2 or len(direction) != 2 or len(line.origin) != 2:
        raise ValueError("ray and line intersection is defined for 2D only")
    p = (float(origin[0]), float(origin[1]))
    r = (float(direction[0]), float(direction[1]))
    q = line.origin
    s = (line.dest[0] - q[0], line.dest[1] - q[1])

    cross_1 = _perp_dot(r, s)
    qmp = (q[0] - p[0], q[1] - p[1])
    cross_2 = _perp_dot(qmp, r)

    if cross_1 == 0.0:
        if cross_2 != 0.0:
            return None  # parallel
        q2mp = (line.dest[0] - p[0], line.dest[1] - p[1])
        dot_1 = _dot2(qmp, r)
        dot_2 = _dot2(q2mp, r)
        if (dot_1 <= 0.0 and dot_2 >= 0.0) or (dot_1 >= 0.0 and dot_2 <= 0.0):
            return p
        if dot_1 >= 0.0 and dot_2 >= 0.0:
            return (q[0], q[1]) if dot_1 <= dot_2 else (line.dest[0], line.dest[1])
        return None

    t = _perp_dot(qmp, s) / cross_1
    u = cross_2 / cross_1
    if 0.0 <= t and 0.0 <= u <= 1.0:
        return (p[0] + t * r[0], p[1] + t * r[1])
    return None