"""View frustum for visibility determination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from collisionkit.bound import Relation, relate_point_clip_space, relate_point_plane
from collisionkit.plane import Plane

Point3 = Tuple[float, float, float]


def _relate(bound: Any, plane: Plane) -> Relation:
    relate_plane = getattr(bound, "relate_plane", None)
    if relate_plane is not None:
        return relate_plane(plane)
    return relate_point_plane(bound, plane)


@dataclass(frozen=True)
class Frustum:
    """Six bounding planes of a view volume, normals pointing inwards."""

    left: Plane
    right: Plane
    bottom: Plane
    top: Plane
    near: Plane
    far: Plane

    @classmethod
    def from_matrix4(cls, mat: Sequence[Sequence[float]]) -> Optional["Frustum"]:
        """Extract the planes of a projection matrix given as four rows.

        Returns None if any plane is degenerate.
        """
        rows = [tuple(float(x) for x in row) for row in mat]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("projection matrix must be 4x4")
        last = rows[3]
        planes = []
        for row in rows[:3]:
            for sign in (1.0, -1.0):
                combined = tuple(a + sign * b for a, b in zip(last, row))
                plane = Plane.from_vector4_alt(combined).normalize()
                if plane is None:
                    return None
                planes.append(plane)
        return cls(*planes)

    @classmethod
    def from_ortho(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> "Frustum":
        """Frustum of an orthographic projection with the given extents."""
        return cls(
            left=Plane.from_abcd(1.0, 0.0, 0.0, left),
            right=Plane.from_abcd(-1.0, 0.0, 0.0, right),
            bottom=Plane.from_abcd(0.0, 1.0, 0.0, bottom),
            top=Plane.from_abcd(0.0, -1.0, 0.0, top),
            near=Plane.from_abcd(0.0, 0.0, -1.0, near),
            far=Plane.from_abcd(0.0, 0.0, 1.0, far),
        )

    def planes(self) -> Tuple[Plane, Plane, Plane, Plane, Plane, Plane]:
        """The planes in test order: left, right, top, bottom, near, far."""
        return (self.left, self.right, self.top, self.bottom, self.near, self.far)

    def contains(self, bound: Any) -> Relation:
        """Relation of a bound to this frustum.

        ``bound`` is either a 3D point or an object with a ``relate_plane`` method.
        """
        return max((_relate(bound, plane) for plane in self.planes()), default=Relation.IN)


@dataclass(frozen=True)
class FrustumPoints:
    """The eight corner points of a view frustum."""

    near_top_left: Point3
    near_top_right: Point3
    near_bottom_left: Point3
    near_bottom_right: Point3
    far_top_left: Point3
    far_top_right: Point3
    far_bottom_left: Point3
    far_bottom_right: Point3


def relate_clip_space(bound: Any, projection: Sequence[Sequence[float]]) -> Relation:
    """Relation of a bound to the clip volume of a projection matrix.

    Points are tested directly in clip space; other bounds are tested against the
    extracted frustum, and count as crossing when no frustum can be extracted.
    """
    if getattr(bound, "relate_plane", None) is None:
        return relate_point_clip_space(bound, projection)
    frustum = Frustum.from_matrix4(projection)
    if frustum is None:
        return Relation.CROSS
    return frustum.contains(bound)