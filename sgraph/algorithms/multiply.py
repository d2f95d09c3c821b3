"""Generalized vector-matrix multiplication.

Every graph algorithm in :mod:`sgraph.algorithms.instances` is one call to
:func:`multiply` with a particular pair of ``aggregate`` and
``scalar_multiply`` functions:

1. ``v``'s indices are intersected with ``m``'s row indices;
2. each shared index ``i`` yields ``scalar_multiply(i, v[i], m[i])``;
3. the partial results, in increasing ``i`` order, are reduced by
   ``aggregate``.

Rows of ``m`` at indices absent from ``v`` never participate.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from sgraph.sparse.matrix import SparseMatrix
from sgraph.sparse.vector import SparseVector, intersection_with_key
from sgraph.types.base import Vertex

V = TypeVar("V")
W = TypeVar("W")
P = TypeVar("P")
R = TypeVar("R")

#: Reduces the per-row partial results; must accept an empty sequence.
Aggregate = Callable[[Sequence[P]], R]

#: Combines the vector value at ``i`` with row ``i`` of the matrix.
ScalarMultiply = Callable[[Vertex, V, SparseVector[W]], P]


def multiply(
    aggregate: Aggregate,
    scalar_multiply: ScalarMultiply,
    v: SparseVector[V],
    m: SparseMatrix,
) -> R:
    """Multiply ``v`` by ``m`` under the given aggregate and scalar product.

    Args:
        aggregate: Reduction over the partial results. It defines the result
            for the empty sequence (e.g. the empty vector, ``False``).
        scalar_multiply: ``(index, vector_value, row) -> partial result``.
        v: Left operand.
        m: Matrix whose rows are selected by ``v``'s indices.

    Returns:
        Whatever ``aggregate`` produces.
    """
    partials = intersection_with_key(scalar_multiply, v, m)
    return aggregate(partials.values())


def multiplier(
    aggregate: Aggregate, scalar_multiply: ScalarMultiply
) -> Callable[[SparseVector, SparseMatrix], R]:
    """Bind an instantiation so it can be passed to the reachability engine."""

    def _apply(v: SparseVector, m: SparseMatrix) -> R:
        return multiply(aggregate, scalar_multiply, v, m)

    return _apply
