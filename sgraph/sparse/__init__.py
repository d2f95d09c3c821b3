"""Sparse vector and matrix containers with merge-based set algebra."""

from __future__ import annotations

from sgraph.sparse.matrix import (
    SparseMatrix,
    matrix_columns,
    matrix_entries,
    matrix_from_adjacency,
    matrix_from_assoc,
    matrix_from_rows,
    matrix_to_dict,
    matrix_vertices,
)
from sgraph.sparse.vector import (
    SparseVector,
    big_union_with,
    concat,
    difference,
    intersection_with_key,
    keep_left,
    left_biased_intersection,
    left_biased_union,
    merge,
    union_with,
)

__all__ = [
    "SparseMatrix",
    "SparseVector",
    "big_union_with",
    "concat",
    "difference",
    "intersection_with_key",
    "keep_left",
    "left_biased_intersection",
    "left_biased_union",
    "matrix_columns",
    "matrix_entries",
    "matrix_from_adjacency",
    "matrix_from_assoc",
    "matrix_from_rows",
    "matrix_to_dict",
    "matrix_vertices",
    "merge",
    "union_with",
]
