# collisionkit

Building blocks for collision detection, in plain Python with no runtime
dependencies.

The package works with plain tuples for points and vectors. It does not ship
bounding volume types of its own (no axis-aligned boxes or spheres); the tree
and broad phase code work with any bound object that has the methods they ask
for, listed below.

## Modules

- `collisionkit.plane`: `Plane`, a plane `A*x + B*y + C*z - D = 0` with
  intersections against rays, another plane, or two other planes.
- `collisionkit.bound`: the `Relation` enum (`IN`, `CROSS`, `OUT`),
  `relate_point_plane` and `relate_point_clip_space`.
- `collisionkit.frustum`: `Frustum`, `FrustumPoints` and `relate_clip_space`.
- `collisionkit.contact`: `Contact` and `CollisionStrategy`
  (`FULL_RESOLUTION`, `COLLISION_ONLY`).
- `collisionkit.line`: `Line`, a directed segment, and
  `ray_line_intersection` for 2D rays.
- `collisionkit.dbvt.nodes`: `Branch`, `Leaf` and `Rotation`, plus
  `node_bound`, `node_height`, `is_leaf`, `best_rotation` and `swap_nodes`.
- `collisionkit.dbvt.store`: `NodeStore`, flat node storage with a free list,
  a height-ordered refit queue, refitting and surface-area rotations.
- `collisionkit.broad_phase.brute_force`: `BruteForce`.
- `collisionkit.broad_phase.sweep_prune`: `SweepAndPrune` and `Variance`.

## Installation

```
pip install collisionkit
```

## Planes

```python
from collisionkit.plane import Plane

floor = Plane.from_abcd(0.0, 1.0, 0.0, 0.0)
hit = floor.ray_intersection((0.0, 5.0, 0.0), (0.0, -1.0, 0.0))  # (0.0, 0.0, 0.0)
```

`Plane.from_points` returns `None` for three collinear points,
`Plane.normalize` returns `None` for a zero normal, `plane_intersection`
returns a `(point, direction)` pair or `None` for parallel planes, and
`planes_intersection` returns the single point shared by three planes or
`None`.

## Frustum culling

```python
from collisionkit.bound import Relation
from collisionkit.frustum import Frustum

frustum = Frustum.from_ortho(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0)
relation = frustum.contains((0.0, 0.0, 0.0))
```

`Frustum.contains` accepts a 3D point or any object with a
`relate_plane(plane)` method returning a `Relation`. The result is `OUT` if any
plane reports `OUT`, otherwise `CROSS` if any reports `CROSS`, otherwise `IN`.

`Frustum.from_matrix4` extracts the six planes from a 4x4 projection matrix
given as four rows, and returns `None` when a plane is degenerate.
`relate_clip_space(bound, projection)` tests points directly in clip space and
other bounds against the extracted frustum.

## Line segments

```python
from collisionkit.line import Line

segment = Line((0.0, 5.0), (10.0, 5.0))
point = segment.ray_intersection((6.0, 0.0), (0.0, 1.0))  # (6.0, 5.0)
```

## Contacts

`Contact.empty(strategy, dimension)` gives a contact with zero normal and
depth at the origin; `Contact.with_normal(strategy, normal, depth)` sets the
normal and depth. `time_of_impact` defaults to `0.0`.

## Bounding volume tree nodes

`NodeStore` keeps nodes in a list addressed by index. Slot 0 always stays
empty, so a parent of 0 means "no parent"; free slots hold `None`. Bounds
stored in nodes need `union(other)` and `surface_area()`.

```python
from collisionkit.dbvt.nodes import Branch, Leaf
from collisionkit.dbvt.store import NodeStore

store = NodeStore()
a, b, root = store.take_free(), store.take_free(), store.take_free()
store.nodes[a] = Leaf(parent=root, value=0, bound=box_a)
store.nodes[b] = Leaf(parent=root, value=1, bound=box_b)
store.nodes[root] = Branch(parent=0, left=a, right=b, height=0, bound=box_a)
store.root_index = root

store.mark_for_refit(root, 2)
store.do_refit()  # recomputes bound and height of the branch
```

`do_refit` processes queued nodes from the lowest height upwards, queues each
parent in turn, and for about one node in ten checks whether a rotation would
cut the node's surface area by more than 30 %. Pass `rng` (anything with
`randrange(stop)`) to `NodeStore` to control when rotations are tried.

## Broad phase

Shapes expose a `bound` attribute. `BruteForce` needs `bound.intersects(other)`;
`SweepAndPrune` also needs `bound.min_extent()` and `bound.max_extent()`.

```python
from collisionkit.broad_phase.brute_force import BruteForce
from collisionkit.broad_phase.sweep_prune import SweepAndPrune

pairs = BruteForce().find_collider_pairs(shapes)

sweep = SweepAndPrune(dimension=2)
pairs = sweep.find_collider_pairs(shapes)
```

Each result is a list of index pairs `(i, j)` with `i < j`. `SweepAndPrune`
sorts the given list in place along its current sweep axis, and the indices
refer to the sorted list. After each call it sets `sweep_axis` to the axis
with the largest variance of bound centres.

## What the package does not do

There is no ready-made tree container: `NodeStore` handles storage, refitting
and rotation, but inserting and removing values, keeping a value list, and
querying the tree with visitors or rays are left to the caller. There is
likewise no tree-accelerated broad phase and no narrow phase (GJK/EPA)
collision test; `Contact` only describes results.

## Running the tests

```
pip install collisionkit[test]
pytest
```