"""Breadth-first layering over a sequence of graphs.

One step of the engine multiplies the current frontier by every graph of the
sequence in turn (so a step follows one arc of the first graph, then one arc
of the second, and so on). Vertices already placed in an earlier layer are
removed, as is anything outside the vertex set of the graphs. The layering
stops at the first empty frontier.

The vertex set of a graph sequence is the union of the row and column indices
of all of its matrices.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Dict, Iterable, Iterator, List, Sequence

from sgraph.algorithms.instances import successors
from sgraph.logging import get_logger
from sgraph.sparse.matrix import SparseMatrix, matrix_vertices
from sgraph.sparse.vector import SparseVector, big_union_with, keep_left
from sgraph.types.base import Vertex

logger = get_logger(__name__)

#: One vector-matrix step, e.g. a bound instantiation from ``instances``.
Multiply = Callable[[SparseVector, SparseMatrix], SparseVector]


def graph_vertices(graphs: Iterable[SparseMatrix]) -> SparseVector:
    """Union of the vertex sets of ``graphs``, with unit values."""
    return big_union_with(keep_left, [matrix_vertices(g) for g in graphs])


def iter_reach(
    multiply: Multiply, start: SparseVector, graphs: Sequence[SparseMatrix]
) -> Iterator[SparseVector]:
    """Yield the frontier of every BFS layer, starting with ``start`` itself.

    Args:
        multiply: Step function applied once per graph per layer.
        start: Layer 0. It is yielded unfiltered.
        graphs: Matrices folded left to right in every step.

    Yields:
        Non-empty frontiers in increasing distance order. A vertex appears in
        at most one of them (``start`` included).
    """
    graphs = tuple(graphs)
    yield start
    if not graphs:
        return

    vertices = graph_vertices(graphs)
    visited = start.map(lambda _x: None)
    frontier = start
    depth = 0
    while True:
        candidate = reduce(multiply, graphs, frontier)
        layer = (candidate - visited) & vertices
        if not layer:
            logger.debug(f"Reachability exhausted after {depth} step(s)")
            return
        depth += 1
        logger.debug(f"Layer {depth}: {len(layer)} new vertex(es)")
        yield layer
        visited = visited | layer.map(lambda _x: None)
        frontier = layer


def reach_with(
    multiply: Multiply, start: SparseVector, graphs: Sequence[SparseMatrix]
) -> List[SparseVector]:
    """All frontiers of :func:`iter_reach`; ``[start]`` when ``graphs`` is empty."""
    return list(iter_reach(multiply, start, graphs))


def shortest_with(
    multiply: Multiply,
    start: SparseVector,
    target: SparseVector,
    graphs: Sequence[SparseMatrix],
) -> SparseVector:
    """First layer restricted to ``target`` that is non-empty.

    Only ``target``'s indices matter; the values come from the layer. Returns
    the empty vector when no layer meets ``target``.
    """
    for depth, layer in enumerate(iter_reach(multiply, start, graphs)):
        hit = layer & target
        if hit:
            logger.debug(f"Target reached at distance {depth} ({len(hit)} vertex(es))")
            return hit
    logger.debug("Target not reachable")
    return SparseVector.empty()


def layer_distances(layers: Iterable[SparseVector]) -> Dict[Vertex, int]:
    """Map each vertex to the index of the layer it first appears in."""
    distances: Dict[Vertex, int] = {}
    for depth, layer in enumerate(layers):
        for vertex in layer.indices():
            distances.setdefault(vertex, depth)
    return distances


def bfs_layers(
    start: Iterable[Vertex], graphs: Sequence[SparseMatrix]
) -> List[SparseVector]:
    """Plain successor layering from a set of start vertices."""
    return reach_with(successors, SparseVector.from_indices(start), graphs)
