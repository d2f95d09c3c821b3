"""Graph algorithms built on the generalized vector-matrix product."""

from __future__ import annotations

from sgraph.algorithms.disjoint import (
    VisitedSet,
    disjoint_shortest_paths,
    extract_disjoint_paths,
)
from sgraph.algorithms.instances import (
    algebraic_product,
    algebraic_product_optimized,
    close_path_lists,
    close_paths,
    collect_forest,
    collect_predecessors,
    counted_successors,
    has_successors,
    prolong_all_paths,
    prolong_path,
    roots_forest,
    start_forest,
    start_path_lists,
    start_paths,
    successors,
    transpose,
)
from sgraph.algorithms.multiply import multiplier, multiply
from sgraph.algorithms.reach import (
    bfs_layers,
    graph_vertices,
    iter_reach,
    layer_distances,
    reach_with,
    shortest_with,
)

__all__ = [
    # Framework
    "multiply",
    "multiplier",
    # Instantiations
    "successors",
    "algebraic_product",
    "algebraic_product_optimized",
    "counted_successors",
    "has_successors",
    "prolong_path",
    "prolong_all_paths",
    "collect_predecessors",
    "transpose",
    "collect_forest",
    "start_paths",
    "start_path_lists",
    "start_forest",
    "close_paths",
    "close_path_lists",
    "roots_forest",
    # Reachability
    "iter_reach",
    "reach_with",
    "shortest_with",
    "graph_vertices",
    "layer_distances",
    "bfs_layers",
    # Disjoint paths
    "VisitedSet",
    "extract_disjoint_paths",
    "disjoint_shortest_paths",
]
