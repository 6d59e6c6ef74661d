"""Collision contact manifold."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence, Tuple


class CollisionStrategy(enum.Enum):
    """How much contact information a collision test computes."""

    FULL_RESOLUTION = "full_resolution"
    COLLISION_ONLY = "collision_only"


@dataclass
class Contact:
    """A single collision contact.

    Normal, penetration depth and contact point are only meaningful for
    ``FULL_RESOLUTION``; ``time_of_impact`` only for continuous detection.
    """

    strategy: CollisionStrategy
    normal: Tuple[float, ...]
    penetration_depth: float
    contact_point: Tuple[float, ...]
    time_of_impact: float = 0.0

    def __post_init__(self) -> None:
        self.normal = tuple(float(c) for c in self.normal)
        self.contact_point = tuple(float(c) for c in self.contact_point)
        self.penetration_depth = float(self.penetration_depth)
        self.time_of_impact = float(self.time_of_impact)

    @classmethod
    def empty(cls, strategy: CollisionStrategy, dimension: int) -> "Contact":
        """Contact with zero normal and depth at the origin of the given dimension."""
        if dimension < 1:
            raise ValueError("dimension must be positive")
        zero = (0.0,) * dimension
        return cls(strategy, zero, 0.0, zero)

    @classmethod
    def with_normal(
        cls,
        strategy: CollisionStrategy,
        normal: Sequence[float],
        penetration_depth: float,
    ) -> "Contact":
        """Contact with the given normal and depth, located at the origin."""
        return cls(strategy, tuple(normal), penetration_depth, (0.0,) * len(normal))