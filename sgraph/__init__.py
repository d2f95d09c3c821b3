"""sgraph: graph algorithms as sparse vector-matrix algebra.

Every algorithm is one generalized vector-matrix product, parameterized by how
a vector entry scales a matrix row and how the scaled rows are aggregated.

Primary API:
    SparseVector - immutable, index-sorted partial function vertex -> value
    multiply() - the generalized product; see ``sgraph.algorithms``
    reach_with(), shortest_with() - breadth-first layering
    disjoint_shortest_paths() - greedy vertex-disjoint shortest paths
    Semiring, NUMERIC, BOOLEAN, TROPICAL - algebraic capabilities

Example:
    from sgraph import SparseVector, matrix_from_adjacency, reach_with, successors

    A = matrix_from_adjacency({0: [1, 2], 1: [2], 2: [1]})
    layers = reach_with(successors, SparseVector.from_indices([0]), [A])
    # [{0}, {1, 2}]
"""

from __future__ import annotations

from sgraph import cli, logging
from sgraph._version import __version__
from sgraph.algebra import BOOLEAN, COUNTING, NUMERIC, TROPICAL, Semiring
from sgraph.algorithms import (
    VisitedSet,
    algebraic_product,
    algebraic_product_optimized,
    collect_forest,
    collect_predecessors,
    counted_successors,
    disjoint_shortest_paths,
    extract_disjoint_paths,
    has_successors,
    iter_reach,
    multiply,
    prolong_all_paths,
    prolong_path,
    reach_with,
    shortest_with,
    successors,
    transpose,
)
from sgraph.generate import random_matrix, random_vector
from sgraph.nx import NodeMap, from_networkx, to_networkx
from sgraph.sparse import (
    SparseMatrix,
    SparseVector,
    matrix_from_adjacency,
    matrix_from_assoc,
    matrix_from_rows,
)
from sgraph.types.base import Forest, MatrixShape, Path, Tree

__all__ = [
    # Version
    "__version__",
    # Containers
    "SparseVector",
    "SparseMatrix",
    "matrix_from_rows",
    "matrix_from_assoc",
    "matrix_from_adjacency",
    # Types
    "Path",
    "Tree",
    "Forest",
    "MatrixShape",
    # Algebra
    "Semiring",
    "NUMERIC",
    "BOOLEAN",
    "TROPICAL",
    "COUNTING",
    # Algorithms
    "multiply",
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
    "iter_reach",
    "reach_with",
    "shortest_with",
    "VisitedSet",
    "extract_disjoint_paths",
    "disjoint_shortest_paths",
    # Generation
    "random_matrix",
    "random_vector",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
