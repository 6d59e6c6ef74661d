"""Node types and structural helpers for the dynamic bounding volume tree.

Nodes live in a flat list and refer to each other by index. Index 0 is never
used by a real node, so a parent of 0 means "no parent". A free slot holds
``None``.

Bounds are duck typed: they need ``union(other)`` and ``surface_area()``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, List, MutableSequence, Optional, Sequence, Tuple, Union


@dataclass
class Branch:
    """Inner node with exactly two children."""

    parent: int
    left: int
    right: int
    height: int
    bound: Any


@dataclass
class Leaf:
    """Node that refers to one entry in the tree's value list."""

    parent: int
    value: int
    bound: Any


Node = Optional[Union[Branch, Leaf]]


class Rotation(enum.Enum):
    """Which pair of nodes to swap when rebalancing a grandparent."""

    NONE = enum.auto()
    LEFT_RIGHT_LEFT = enum.auto()
    LEFT_RIGHT_RIGHT = enum.auto()
    RIGHT_LEFT_LEFT = enum.auto()
    RIGHT_LEFT_RIGHT = enum.auto()
    LEFT_LEFT_RIGHT_LEFT = enum.auto()
    LEFT_LEFT_RIGHT_RIGHT = enum.auto()


def node_bound(node: Node) -> Any:
    """Bound of a branch or leaf; an empty slot has none."""
    if node is None:
        raise ValueError("an empty node slot has no bound")
    return node.bound


def node_height(node: Node) -> int:
    """Height of a node: leaves count 1, empty slots 0."""
    if isinstance(node, Branch):
        return node.height
    if isinstance(node, Leaf):
        return 1
    return 0


def is_leaf(node: Node) -> bool:
    """Whether the node is a leaf."""
    return isinstance(node, Leaf)


def _child_bounds(nodes: Sequence[Node], index: int) -> Tuple[Any, Any]:
    node = nodes[index]
    if not isinstance(node, Branch):
        raise ValueError(f"node {index} is expected to be a branch")
    return node_bound(nodes[node.left]), node_bound(nodes[node.right])


def _combined_area(a: Any, b: Any, c: Any) -> Any:
    return a.union(b.union(c)).surface_area()


def best_rotation(
    nodes: Sequence[Node],
    left_index: int,
    right_index: int,
    surface_area: Any,
    left_is_leaf: bool,
    right_is_leaf: bool,
) -> Tuple[Rotation, Any]:
    """Pick the rotation of a grandparent that gives the smallest surface area.

    Returns the rotation together with the surface area it leads to; the
    rotation is ``Rotation.NONE`` when nothing beats ``surface_area``.
    """
    rotation = Rotation.NONE
    min_sa = surface_area

    l_bound = node_bound(nodes[left_index])
    r_bound = node_bound(nodes[right_index])

    if not right_is_leaf:
        rl_bound, rr_bound = _child_bounds(nodes, right_index)

        candidate = _combined_area(rl_bound, l_bound, rr_bound)
        if candidate < min_sa:
            rotation, min_sa = Rotation.LEFT_RIGHT_LEFT, candidate

        candidate = _combined_area(rr_bound, l_bound, rl_bound)
        if candidate < min_sa:
            rotation, min_sa = Rotation.LEFT_RIGHT_RIGHT, candidate

        if not left_is_leaf:
            ll_bound, lr_bound = _child_bounds(nodes, left_index)

            candidate = _combined_area(rl_bound.union(lr_bound), ll_bound, rr_bound)
            if candidate < min_sa:
                rotation, min_sa = Rotation.LEFT_LEFT_RIGHT_LEFT, candidate

            candidate = _combined_area(rr_bound.union(lr_bound), rl_bound, ll_bound)
            if candidate < min_sa:
                rotation, min_sa = Rotation.LEFT_LEFT_RIGHT_RIGHT, candidate

    if not left_is_leaf:
        ll_bound, lr_bound = _child_bounds(nodes, left_index)

        candidate = _combined_area(ll_bound, r_bound, lr_bound)
        if candidate < min_sa:
            rotation, min_sa = Rotation.RIGHT_LEFT_LEFT, candidate

        candidate = _combined_area(lr_bound, r_bound, ll_bound)
        if candidate < min_sa:
            rotation, min_sa = Rotation.RIGHT_LEFT_RIGHT, candidate

    return rotation, min_sa


def swap_nodes(
    nodes: MutableSequence[Node],
    left_swap_index: int,
    right_swap_index: int,
    left_parent_index: int,
    right_parent_index: int,
) -> None:
    """Exchange two subtrees between their parents.

    The left parent's link to ``left_swap_index`` is pointed at
    ``right_swap_index`` and vice versa; both swapped nodes get their new parent.
    """
    left_parent = nodes[left_parent_index]
    if isinstance(left_parent, Branch):
        if left_parent.left == left_swap_index:
            left_parent.left = right_swap_index
        else:
            left_parent.right = right_swap_index

    right_parent = nodes[right_parent_index]
    if isinstance(right_parent, Branch):
        if right_parent.left == right_swap_index:
            right_parent.left = left_swap_index
        else:
            right_parent.right = left_swap_index

    moves: List[Tuple[int, int]] = [
        (left_swap_index, right_parent_index),
        (right_swap_index, left_parent_index),
    ]
    for index, parent in moves:
        node = nodes[index]
        if node is not None:
            node.parent = parent