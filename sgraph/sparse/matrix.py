"""Sparse matrices as sparse vectors of sparse row vectors.

A matrix maps a row index to the row's ``(column, value)`` arcs. Rows with no
entries may be present (as empty vectors) or absent; the algebra treats both
the same way.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Sequence, Tuple, TypeVar, Union

from sgraph.sparse.vector import SparseVector, big_union_with, keep_left
from sgraph.types.base import Arc, Vertex

V = TypeVar("V")

#: Row index -> row vector of (column, value) arcs.
SparseMatrix = SparseVector  # SparseVector[SparseVector[V]]

RowSpec = Union[Mapping[Vertex, V], Iterable[Arc]]


def _row(spec: RowSpec) -> SparseVector:
    if isinstance(spec, SparseVector):
        return spec
    if isinstance(spec, Mapping):
        return SparseVector.from_mapping(spec)
    return SparseVector.from_arcs(spec)


def matrix_from_rows(rows: Mapping[Vertex, RowSpec]) -> SparseMatrix:
    """Build a matrix from ``{row: {col: value}}`` or ``{row: [(col, value)]}``.

    Rows may be given in any order; arcs given as sequences must be sorted.
    """
    return SparseVector.from_mapping({i: _row(spec) for i, spec in rows.items()})


def matrix_from_assoc(
    assoc: Iterable[Tuple[Vertex, Sequence[Arc]]],
) -> SparseMatrix:
    """Wrap an association list ``[(row, [(col, value), ...]), ...]`` as is.

    This is the direct structural wrap of generator output: ordering is
    checked, nothing else.
    """
    return SparseVector.from_arcs((i, SparseVector.from_arcs(arcs)) for i, arcs in assoc)


def matrix_from_adjacency(
    adjacency: Mapping[Vertex, Iterable[Vertex]], value: V = 1
) -> SparseMatrix:
    """Build an unweighted matrix from ``{row: [successor, ...]}``."""
    return SparseVector.from_mapping(
        {i: SparseVector.from_indices(cols, value) for i, cols in adjacency.items()}
    )


def matrix_columns(m: SparseMatrix) -> SparseVector:
    """Indices of every column holding an entry, with unit values."""
    return big_union_with(keep_left, (row.map(lambda _: 1) for _, row in m))


def matrix_vertices(m: SparseMatrix) -> SparseVector:
    """Row indices united with column indices, with unit values."""
    return m.map(lambda _: 1) | matrix_columns(m)


def matrix_entries(m: SparseMatrix) -> int:
    """Number of stored (row, column) entries."""
    return sum(len(row) for _, row in m)


def matrix_to_dict(m: SparseMatrix) -> Dict[Vertex, Dict[Vertex, V]]:
    return {i: row.to_dict() for i, row in m}
