#!/usr/bin/env python3
"""
Kruskal's minimum spanning tree over star systems.

The complete candidate graph is built with numpy (every unordered pair, in
the same row-major order as a double loop over system indices) and sorted
with a stable sort, so ties keep insertion order and a fixed seed always
gives the same tree. A Delaunay triangulation can be used instead as a
sparser candidate set: it contains every Euclidean MST edge.
"""
from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, Sequence, TypeVar

import numpy as np

# Delaunay method for the sparse candidate set
from scipy.spatial import Delaunay, QhullError  # type: ignore

from starmap.models import Edge, StarSystem

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Union-find with path compression and union by rank. Not thread-safe."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.parent: Dict[T, T] = {}
        self.rank: Dict[T, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        if item not in self.parent:
            self.parent[item] = item
            self.rank[item] = 0

    def __contains__(self, item: object) -> bool:
        return item in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, item: T) -> T:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # second pass: point every visited node straight at the root
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: T, b: T) -> bool:
        """Merge the sets of a and b. False means they were already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            self.parent[ra] = rb
        elif self.rank[ra] > self.rank[rb]:
            self.parent[rb] = ra
        else:
            self.parent[rb] = ra
            self.rank[ra] += 1
        return True

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)

    def component_count(self) -> int:
        return len({self.find(item) for item in self.parent})


def _positions(systems: Sequence[StarSystem]) -> np.ndarray:
    return np.array(
        [(s.position.x, s.position.y) for s in systems], dtype=np.int64
    ).reshape(-1, 2)


def complete_edges(systems: Sequence[StarSystem]) -> List[Edge]:
    """Every unordered pair, sorted ascending by squared distance (stable)."""
    n = len(systems)
    if n < 2:
        return []
    points = _positions(systems)
    i_idx, j_idx = np.triu_indices(n, k=1)
    delta = points[i_idx] - points[j_idx]
    dist2 = (delta * delta).sum(axis=1)
    order = np.argsort(dist2, kind="stable")
    return [
        Edge(systems[int(i_idx[k])].id, systems[int(j_idx[k])].id, float(dist2[k]))
        for k in order
    ]


def delaunay_edges(systems: Sequence[StarSystem]) -> List[Edge]:
    """
    Triangulation edges sorted by (distance, i, j). Returns an empty list when
    the point set is too small or degenerate to triangulate.
    """
    n = len(systems)
    if n < 4:
        return []
    points = _positions(systems).astype(float)
    try:
        tri = Delaunay(points)  # type: ignore
    except (QhullError, ValueError):
        return []
    pairs: set[tuple[int, int]] = set()
    for simplex in tri.simplices:  # type: ignore
        a, b, c = (int(v) for v in simplex)
        for u, v in ((a, b), (b, c), (c, a)):
            pairs.add((u, v) if u < v else (v, u))
    weighted = [
        (systems[i].distance_to(systems[j]), i, j) for (i, j) in pairs
    ]
    weighted.sort()
    return [Edge(systems[i].id, systems[j].id, d2) for (d2, i, j) in weighted]


def kruskal(systems: Sequence[StarSystem], edges: Iterable[Edge]) -> List[Edge]:
    """Greedy pass over pre-sorted edges; stops once n-1 edges are kept."""
    target = len(systems) - 1
    tree: List[Edge] = []
    if target <= 0:
        return tree
    dsu: DisjointSet = DisjointSet(s.id for s in systems)
    for edge in edges:
        if dsu.union(edge.source, edge.target):
            tree.append(edge)
            if len(tree) == target:
                break
    return tree


def minimum_spanning_tree(
    systems: Sequence[StarSystem], candidates: str = "complete"
) -> List[Edge]:
    """
    Return the len(systems)-1 edges of a minimum spanning tree.

    candidates="delaunay" restricts the search to triangulation edges and
    falls back to the complete graph if that cannot produce a full tree
    (duplicate or collinear positions).
    """
    if candidates == "delaunay":
        tree = kruskal(systems, delaunay_edges(systems))
        if len(tree) == max(0, len(systems) - 1):
            return tree
        if len(systems) >= 4:
            print(
                f"[starmap] delaunay candidates incomplete ({len(tree)} edges); "
                "using complete graph"
            )
    elif candidates != "complete":
        raise ValueError(f"unknown candidate edge strategy: {candidates!r}")
    return kruskal(systems, complete_edges(systems))
