"""Graph algorithms expressed as instantiations of :func:`multiply`.

Each function takes a frontier vector ``v`` and a matrix ``m`` and performs
one step of its algorithm. Paired with :func:`multiplier`-style partial
application they plug directly into :mod:`sgraph.algorithms.reach`.

Unions that collect lists (all paths, predecessors, forests) concatenate in
increasing source index: the contribution of row ``i`` precedes that of row
``k`` whenever ``i < k``.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sgraph.algebra.semiring import COUNTING, Semiring
from sgraph.algorithms.multiply import multiply
from sgraph.sparse.matrix import SparseMatrix
from sgraph.sparse.vector import (
    SparseVector,
    big_union_with,
    concat,
    keep_left,
    left_biased_union,
)
from sgraph.types.base import Arc, Forest, Path, Tree, Vertex


def _left_biased_aggregate(partials: Sequence[SparseVector]) -> SparseVector:
    return big_union_with(keep_left, partials)


def _concat_aggregate(partials: Sequence[SparseVector]) -> SparseVector:
    return big_union_with(concat, partials)


def successors(v: SparseVector, m: SparseMatrix) -> SparseVector:
    """One-step successor set of ``v``.

    Values are taken from the rows of ``m``; where several sources reach the
    same vertex, the lowest-indexed source's arc value is kept.
    """
    return multiply(_left_biased_aggregate, lambda _i, _x, row: row, v, m)


def algebraic_product(
    semiring: Semiring, v: SparseVector, m: SparseMatrix
) -> SparseVector:
    """Vector-matrix product ``v . m`` over ``semiring``.

    Entries equal to the semiring's zero are kept if they arise.
    """

    def scale(_i: Vertex, x, row: SparseVector) -> SparseVector:
        return row.map(lambda y: semiring.mul(x, y))

    return multiply(lambda ps: big_union_with(semiring.add, ps), scale, v, m)


def algebraic_product_optimized(
    semiring: Semiring, v: SparseVector, m: SparseMatrix
) -> SparseVector:
    """Same product as :func:`algebraic_product` without zero entries.

    When the semiring can recognise its identities, rows scaled by zero are
    skipped, rows scaled by one are reused as they are, and zero-valued
    results are dropped. Without ``semiring.eq`` this performs the plain
    product.
    """

    def nonzero(value) -> bool:
        return not semiring.is_zero(value)

    def scale(_i: Vertex, x, row: SparseVector) -> SparseVector:
        if semiring.is_zero(x):
            return SparseVector.empty()
        if semiring.is_one(x):
            return row
        return row.map(lambda y: semiring.mul(x, y)).filter(nonzero)

    def aggregate(partials: Sequence[SparseVector]) -> SparseVector:
        return big_union_with(semiring.add, partials).filter(nonzero)

    return multiply(aggregate, scale, v, m)


def counted_successors(v: SparseVector, m: SparseMatrix) -> SparseVector:
    """Number of rows selected by ``v`` that have an arc into each vertex."""
    return multiply(
        lambda ps: big_union_with(COUNTING.add, ps),
        lambda _i, _x, row: row.map(lambda _y: COUNTING.one),
        v,
        m,
    )


def has_successors(v: SparseVector, m: SparseMatrix) -> bool:
    """True when some vertex of ``v`` has a non-empty row in ``m``."""
    return multiply(any, lambda _i, _x, row: bool(row), v, m)


def prolong_path(v: SparseVector, m: SparseMatrix) -> SparseVector:
    """Extend the path attached to each source by the source itself.

    ``v`` maps a vertex to the path that led to it (excluding the vertex).
    Each reached vertex receives one path; ties go to the lowest source.
    """
    return multiply(
        _left_biased_aggregate,
        lambda i, path, row: row.map(lambda _y: tuple(path) + (i,)),
        v,
        m,
    )


def prolong_all_paths(v: SparseVector, m: SparseMatrix) -> SparseVector:
    """Like :func:`prolong_path` but keeps every path to each reached vertex."""

    def extend(i: Vertex, paths: Sequence[Path], row: SparseVector) -> SparseVector:
        extended = tuple(tuple(p) + (i,) for p in paths)
        return row.map(lambda _y: extended)

    return multiply(_concat_aggregate, extend, v, m)


def collect_predecessors(
    m: SparseMatrix, v: Optional[SparseVector] = None
) -> SparseVector:
    """Map each column of ``m`` to its ``(row, value)`` predecessor arcs.

    ``v`` attaches an accumulated arc list to each participating row; each
    ``(row, value)`` is prepended to it. By default every row of ``m``
    participates with an empty list.
    """
    if v is None:
        v = m.map(lambda _row: ())

    def prepend(i: Vertex, acc: Sequence[Arc], row: SparseVector) -> SparseVector:
        return row.map(lambda y: ((i, y),) + tuple(acc))

    return multiply(_concat_aggregate, prepend, v, m)


def transpose(m: SparseMatrix, columns: Optional[int] = None) -> SparseMatrix:
    """Transpose ``m``.

    Every row index of ``m`` (or, with ``columns``, every index in
    ``range(columns)``) appears in the result, with an empty row when it has
    no incoming arcs.
    """
    incoming = collect_predecessors(m).map(SparseVector.from_arcs)
    if columns is None:
        everything = m.map(lambda _row: SparseVector.empty())
    else:
        everything = SparseVector.from_indices(range(columns), SparseVector.empty())
    return left_biased_union(incoming, everything)


def collect_forest(v: SparseVector, m: SparseMatrix) -> SparseVector:
    """Grow reachability forests by one step.

    ``v`` maps a vertex to the forest by which it was reached. Every
    successor ``j`` of ``i`` receives a tree rooted at ``i`` whose children are
    ``i``'s forest, so trees point back towards the start set.
    """

    def wrap(i: Vertex, forest: Forest, row: SparseVector) -> SparseVector:
        tree = Tree(i, tuple(forest))
        return row.map(lambda _y: (tree,))

    return multiply(_concat_aggregate, wrap, v, m)


def start_paths(vertices: Iterable[Vertex]) -> SparseVector:
    """Seed vector for :func:`prolong_path`: the empty path at each vertex."""
    return SparseVector.from_indices(vertices, ())


def start_path_lists(vertices: Iterable[Vertex]) -> SparseVector:
    """Seed vector for :func:`prolong_all_paths`."""
    return SparseVector.from_indices(vertices, ((),))


def start_forest(vertices: Iterable[Vertex]) -> SparseVector:
    """Seed vector for :func:`collect_forest`: an empty forest at each vertex."""
    return SparseVector.from_indices(vertices, ())


def close_paths(v: SparseVector) -> SparseVector:
    """Append each vertex to the path attached to it."""
    return v.map_with_key(lambda j, path: tuple(path) + (j,))


def close_path_lists(v: SparseVector) -> SparseVector:
    return v.map_with_key(lambda j, paths: tuple(tuple(p) + (j,) for p in paths))


def roots_forest(v: SparseVector) -> Forest:
    """Turn a forest-valued vector into one tree per entry, rooted at its index."""
    return tuple(Tree(j, tuple(forest)) for j, forest in v)
