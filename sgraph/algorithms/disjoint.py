"""Greedy extraction of vertex-disjoint paths from a reachability forest.

The forest's roots are targets; each root-to-leaf branch, read from the leaf
up, is a shortest path from the start set to that root. Roots are processed
in order and each claims at most one branch by depth-first search.

Every vertex the search steps on is marked in a :class:`VisitedSet` and stays
marked for the rest of the extraction, including vertices of attempts that
later fail. The result is therefore pairwise vertex-disjoint and maximal for
this greedy order, but not necessarily the largest disjoint set.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from sgraph.algorithms.instances import collect_forest, roots_forest, start_forest
from sgraph.algorithms.reach import graph_vertices, shortest_with
from sgraph.logging import get_logger
from sgraph.sparse.matrix import SparseMatrix
from sgraph.sparse.vector import SparseVector
from sgraph.types.base import Forest, Path, Vertex

logger = get_logger(__name__)


class VisitedSet:
    """Fixed-size boolean marks over vertices ``0..size-1``.

    Indices outside that range are not checked.
    """

    __slots__ = ("_marks",)

    def __init__(self, size: int) -> None:
        self._marks = np.zeros(size, dtype=bool)

    def __len__(self) -> int:
        return len(self._marks)

    def __contains__(self, vertex: Vertex) -> bool:
        return bool(self._marks[vertex])

    def mark(self, vertex: Vertex) -> None:
        self._marks[vertex] = True

    def count(self) -> int:
        """Number of marked vertices."""
        return int(np.count_nonzero(self._marks))


def _chop(forest: Forest, visited: VisitedSet) -> Optional[Path]:
    # Siblings are tried in order; only descent into children recurses, so
    # recursion depth is bounded by the forest height.
    for root, children in forest:
        if root in visited:
            continue
        visited.mark(root)
        if not children:
            return (root,)
        suffix = _chop(children, visited)
        if suffix is not None:
            return suffix + (root,)
    return None


def extract_disjoint_paths(forest: Forest, size: int) -> List[Path]:
    """Claim at most one path per root of ``forest``, greedily and disjointly.

    Args:
        forest: Reachability forest whose roots are the targets.
        size: Number of vertices; every vertex in ``forest`` must be below it.

    Returns:
        One path per succeeding root, in root order. Each path ends at its
        root and starts at a leaf of the forest. Roots without a path are
        omitted.
    """
    visited = VisitedSet(size)
    paths: List[Path] = []
    for tree in forest:
        path = _chop((tree,), visited)
        if path is None:
            logger.debug(f"No disjoint path left for root {tree.root}")
            continue
        paths.append(path)
    logger.debug(
        f"Extracted {len(paths)} of {len(forest)} path(s); "
        f"{visited.count()} vertex(es) claimed"
    )
    return paths


def disjoint_shortest_paths(
    sources: Iterable[Vertex],
    targets: Iterable[Vertex],
    graphs: Sequence[SparseMatrix],
    size: Optional[int] = None,
) -> List[Path]:
    """Vertex-disjoint shortest paths from ``sources`` to the nearest ``targets``.

    Builds reachability forests from ``sources`` until the first layer that
    contains a target, roots one tree at each target hit in that layer, and
    extracts disjoint paths from them.

    Args:
        sources: Start vertices.
        targets: Goal vertices.
        graphs: Graph sequence making up one step (see ``reach``).
        size: Vertex count; derived from the inputs when omitted.

    Returns:
        Paths from a source to a target, in increasing target order.
    """
    sources = list(sources)
    targets = list(targets)
    hit = shortest_with(
        collect_forest,
        start_forest(sources),
        SparseVector.from_indices(targets),
        graphs,
    )
    if not hit:
        return []
    if size is None:
        everything = graph_vertices(graphs).indices() + tuple(sources) + tuple(targets)
        size = max(everything) + 1
    return extract_disjoint_paths(roots_forest(hit), size)
