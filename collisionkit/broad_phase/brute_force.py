"""Broad phase collision detection by testing every pair."""

from __future__ import annotations

from itertools import combinations
from typing import Any, List, Sequence, Tuple


class BruteForce:
    """Tests the bounds of all shape combinations against each other."""

    def find_collider_pairs(self, shapes: Sequence[Any]) -> List[Tuple[int, int]]:
        """Index pairs of shapes whose bounds intersect.

        Each shape exposes a ``bound`` with an ``intersects(other)`` method. The
        first index of a pair is always the smaller one.
        """
        return [
            (left_index, right_index)
            for (left_index, left), (right_index, right) in combinations(enumerate(shapes), 2)
            if left.bound.intersects(right.bound)
        ]