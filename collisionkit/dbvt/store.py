"""Flat node storage for the dynamic bounding volume tree, with refitting and rotation.

Nodes refer to each other by index into ``nodes``. Slot 0 always stays empty,
so only the root can have parent 0. Bounds must offer ``union(other)`` and
``surface_area()``.
"""

from __future__ import annotations

import bisect
import random
from typing import Any, List, Optional, Protocol, Tuple

from collisionkit.dbvt.nodes import (
    Branch,
    Node,
    Rotation,
    best_rotation,
    is_leaf,
    node_bound,
    node_height,
    swap_nodes,
)

SURFACE_AREA_IMPROVEMENT_FOR_ROTATION = 0.3
PERFORM_ROTATION_PERCENTAGE = 10


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


class NodeStore:
    """Node list, free slots and the height-ordered refit queue of a tree.

    ``rng`` decides when a refitted node is also checked for rotation; it needs
    a ``randrange(stop)`` method and defaults to a fresh ``random.Random``.
    """

    def __init__(self, rng: Optional[_RandomSource] = None) -> None:
        self.nodes: List[Node] = [None]
        self.free_list: List[int] = []
        self.refit_nodes: List[Tuple[int, int]] = []
        self.root_index = 0
        self._rng: _RandomSource = rng if rng is not None else random.Random()

    def clear(self) -> None:
        """Drop all nodes and pending work."""
        self.root_index = 0
        self.nodes = [None]
        self.free_list.clear()
        self.refit_nodes.clear()

    def size(self) -> int:
        """Number of nodes in use."""
        return len(self.nodes) - len(self.free_list) - 1

    def take_free(self) -> int:
        """Index of a slot where a new node can be stored."""
        if self.free_list:
            return self.free_list.pop(0)
        self.nodes.append(None)
        return len(self.nodes) - 1

    def mark_for_refit(self, node_index: int, min_height: int) -> None:
        """Queue a node for refitting, ordered by height, at most once."""
        node = self.nodes[node_index]
        current = node.height if isinstance(node, Branch) else 0
        entry = (max(current, min_height), node_index)
        position = bisect.bisect_left(self.refit_nodes, entry)
        if position < len(self.refit_nodes) and self.refit_nodes[position] == entry:
            return
        self.refit_nodes.insert(position, entry)

    def recalculate_node(self, node_index: int) -> Optional[Tuple[int, int]]:
        """Recompute a branch's bound and height from its children.

        Returns ``(parent_index, height)``, or None if the node is not a branch.
        """
        node = self.nodes[node_index]
        if not isinstance(node, Branch):
            return None
        left = self.nodes[node.left]
        right = self.nodes[node.right]
        node.height = 1 + max(node_height(left), node_height(right))
        node.bound = node_bound(left).union(node_bound(right))
        return node.parent, node.height

    def _child(self, index: int, side: str) -> int:
        node = self.nodes[index]
        if not isinstance(node, Branch):
            raise ValueError(f"node {index} is expected to be a branch")
        return node.left if side == "left" else node.right

    def rotate(self, node_index: int) -> Optional[int]:
        """Rotate a grandparent node if that shrinks its surface area enough.

        Returns the node's parent index, or None if the node is not a branch.
        """
        node = self.nodes[node_index]
        if not isinstance(node, Branch):
            return None
        left_index, right_index = node.left, node.right
        my_area = node.bound.surface_area()
        parent_index = node.parent

        left_is_leaf = is_leaf(self.nodes[left_index])
        right_is_leaf = is_leaf(self.nodes[right_index])
        if left_is_leaf and right_is_leaf:
            return parent_index

        rotation, min_area = best_rotation(
            self.nodes, left_index, right_index, my_area, left_is_leaf, right_is_leaf
        )
        if my_area == 0:
            return parent_index
        if (my_area - min_area) / my_area > SURFACE_AREA_IMPROVEMENT_FOR_ROTATION:
            self._apply_rotation(rotation, node_index, left_index, right_index)
        return parent_index

    def _apply_rotation(
        self, rotation: Rotation, node_index: int, left_index: int, right_index: int
    ) -> None:
        match rotation:
            case Rotation.NONE:
                return
            case Rotation.LEFT_RIGHT_LEFT:
                other = self._child(right_index, "left")
                swap_nodes(self.nodes, left_index, other, node_index, right_index)
                refit = (right_index, node_index)
            case Rotation.LEFT_RIGHT_RIGHT:
                other = self._child(right_index, "right")
                swap_nodes(self.nodes, left_index, other, node_index, right_index)
                refit = (right_index, node_index)
            case Rotation.RIGHT_LEFT_LEFT:
                other = self._child(left_index, "left")
                swap_nodes(self.nodes, other, right_index, left_index, node_index)
                refit = (left_index, node_index)
            case Rotation.RIGHT_LEFT_RIGHT:
                other = self._child(left_index, "right")
                swap_nodes(self.nodes, other, right_index, left_index, node_index)
                refit = (left_index, node_index)
            case Rotation.LEFT_LEFT_RIGHT_LEFT:
                left_left = self._child(left_index, "left")
                right_left = self._child(right_index, "left")
                swap_nodes(self.nodes, left_left, right_left, left_index, right_index)
                refit = (left_index, right_index, node_index)
            case Rotation.LEFT_LEFT_RIGHT_RIGHT:
                left_left = self._child(left_index, "left")
                right_right = self._child(right_index, "right")
                swap_nodes(self.nodes, left_left, right_right, left_index, right_index)
                refit = (left_index, right_index, node_index)
        for index in refit:
            self.recalculate_node(index)

    def refit_node(self, node_index: int) -> None:
        """Refit one node, queue its parent, and occasionally try a rotation."""
        result = self.recalculate_node(node_index)
        if result is not None:
            parent_index, height = result
            if parent_index != 0:
                self.mark_for_refit(parent_index, height + 1)
        if self._rng.randrange(100) < PERFORM_ROTATION_PERCENTAGE:
            self.rotate(node_index)

    def do_refit(self) -> None:
        """Process the refit queue from the lowest node upwards until empty."""
        while self.refit_nodes:
            _, node_index = self.refit_nodes.pop(0)
            self.refit_node(node_index)

    def bound_of(self, node_index: int) -> Any:
        """Bound stored at a node index."""
        return node_bound(self.nodes[node_index])