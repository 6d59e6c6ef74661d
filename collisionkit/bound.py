"""Spatial relations between bounds and planes or clip space."""

from __future__ import annotations

import enum
from typing import Optional, Sequence

from collisionkit.plane import Plane


class Relation(enum.IntEnum):
    """Spatial relation of an object to a boundary; larger values dominate."""

    IN = 0
    CROSS = 1
    OUT = 2


def relate_point_plane(point: Sequence[float], plane: Plane) -> Relation:
    """Classify a point against a plane: in front is IN, behind is OUT."""
    dist = point[0] * plane.n[0] + point[1] * plane.n[1] + point[2] * plane.n[2]
    if dist > plane.d:
        return Relation.IN
    if dist < plane.d:
        return Relation.OUT
    return Relation.CROSS


def _compare(a: float, b: float) -> Optional[int]:
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    return None


def relate_point_clip_space(
    point: Sequence[float], projection: Sequence[Sequence[float]]
) -> Relation:
    """Classify a point against the clip volume of a projection matrix.

    The matrix is given as four rows.
    """
    homogeneous = (point[0], point[1], point[2], 1.0)
    x, y, z, w = (sum(m * v for m, v in zip(row, homogeneous)) for row in projection)
    orders = [_compare(abs(c), w) for c in (x, y, z)]
    if all(order == -1 for order in orders):
        return Relation.IN
    if any(order == 1 for order in orders):
        return Relation.OUT
    return Relation.CROSS