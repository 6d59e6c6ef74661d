"""Sweep and prune broad phase collision detection."""

from __future__ import annotations

from typing import Any, List, Tuple


class Variance:
    """Running sums of bound centres, used to choose the next sweep axis."""

    def __init__(self, dimension: int) -> None:
        if dimension < 1:
            raise ValueError("dimension must be positive")
        self.dimension = dimension
        self.csum = [0.0] * dimension
        self.csumsq = [0.0] * dimension

    def clear(self) -> None:
        """Reset the sums."""
        self.csum = [0.0] * self.dimension
        self.csumsq = [0.0] * self.dimension

    def add_bound(self, bound: Any) -> None:
        """Add the centre of a bound to the sums."""
        centre = [
            (lo + hi) / 2.0 for lo, hi in zip(bound.min_extent(), bound.max_extent())
        ]
        if len(centre) != self.dimension:
            raise ValueError(
                f"expected a {self.dimension}D bound, got {len(centre)} dimensions"
            )
        self.csum = [s + c for s, c in zip(self.csum, centre)]
        self.csumsq = [s + c * c for s, c in zip(self.csumsq, centre)]

    def compute_axis(self, n: float) -> Tuple[int, float]:
        """Axis with the largest spread of centres over ``n`` bounds, and that spread."""
        if n <= 0:
            raise ValueError("number of bounds must be positive")
        variance = [sq - s * s / n for s, sq in zip(self.csum, self.csumsq)]
        axis, value = 0, variance[0]
        for index, v in enumerate(variance[1:], start=1):
            if v > value:
                axis, value = index, v
        return axis, value


class SweepAndPrune:
    """Sorts bounds along an axis and sweeps them to find overlapping pairs.

    After each run the axis along which the bound centres vary most becomes the
    sweep axis of the next run. Bounds need ``min_extent()``, ``max_extent()``
    and ``intersects(other)``.
    """

    def __init__(self, dimension: int = 2, sweep_axis: int = 0) -> None:
        if not 0 <= sweep_axis < dimension:
            raise ValueError(f"sweep axis {sweep_axis} out of range for {dimension}D")
        self.sweep_axis = sweep_axis
        self.variance = Variance(dimension)

    def find_collider_pairs(self, shapes: List[Any]) -> List[Tuple[int, int]]:
        """Index pairs of shapes whose bounds intersect.

        ``shapes`` is sorted in place along the sweep axis, and the indices
        refer to the sorted list; the first index of a pair is the smaller one.
        """
        pairs: List[Tuple[int, int]] = []
        if len(shapes) <= 1:
            return pairs

        axis = self.sweep_axis
        shapes.sort(
            key=lambda s: (s.bound.min_extent()[axis], s.bound.max_extent()[axis])
        )

        self.variance.clear()
        self.variance.add_bound(shapes[0].bound)

        active = [0]
        for shape_index, shape in enumerate(shapes[1:], start=1):
            bound = shape.bound
            start = bound.min_extent()[axis]
            active = [i for i in active if shapes[i].bound.max_extent()[axis] >= start]
            pairs.extend(
                (i, shape_index) for i in active if shapes[i].bound.intersects(bound)
            )
            active.append(shape_index)
            self.variance.add_bound(bound)

        self.sweep_axis, _ = self.variance.compute_axis(float(len(shapes)))
        return pairs