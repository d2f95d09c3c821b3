"""Sparse vectors and their merge-based set algebra.

A :class:`SparseVector` is an immutable, index-sorted tuple of ``(index,
value)`` arcs with unique indices. It represents a partial function from
vertices to values: an index that is absent has no entry, which is different
from an entry holding a zero.

Every set operation is a specialization of :func:`merge`, a single pass over
both arc sequences in index order (the merge step of merge sort) driven by
five policies. Each policy returns the arcs to emit, so outputs stay sorted
and unique whenever the inputs are.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import (
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from sgraph.types.base import Arc, Vertex

V = TypeVar("V")
W = TypeVar("W")
R = TypeVar("R")


@dataclass(frozen=True)
class SparseVector(Generic[V]):
    """Ordered association of vertex indices to values.

    The constructor trusts ``arcs`` to be strictly increasing by index; use
    :meth:`from_arcs` to validate or :meth:`from_mapping` to sort.

    Attributes:
        arcs: Tuple of ``(index, value)`` pairs, indices strictly increasing.
    """

    arcs: Tuple[Arc, ...] = ()

    @classmethod
    def empty(cls) -> "SparseVector":
        return cls(())

    @classmethod
    def singleton(cls, index: Vertex, value: V) -> "SparseVector[V]":
        return cls(((index, value),))

    @classmethod
    def from_arcs(cls, arcs: Iterable[Arc]) -> "SparseVector":
        """Build a vector from arcs already sorted by index.

        Raises:
            ValueError: If an index is negative, repeated, or out of order.
        """
        materialized = tuple((int(i), x) for i, x in arcs)
        previous = -1
        for index, _ in materialized:
            if index <= previous:
                if index < 0:
                    raise ValueError(f"Vertex indices must be non-negative, got {index}")
                raise ValueError(
                    f"Arc indices must be strictly increasing: {index} follows {previous}"
                )
            previous = index
        return cls(materialized)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Vertex, V]) -> "SparseVector[V]":
        """Build a vector from an index -> value mapping in any order."""
        return cls.from_arcs(sorted(mapping.items(), key=lambda arc: arc[0]))

    @classmethod
    def from_indices(cls, indices: Iterable[Vertex], value: V = 1) -> "SparseVector[V]":
        """Build a vector holding ``value`` at each distinct index."""
        return cls.from_arcs((i, value) for i in sorted(set(indices)))

    def __len__(self) -> int:
        return len(self.arcs)

    def __bool__(self) -> bool:
        return bool(self.arcs)

    def __iter__(self) -> Iterator[Arc]:
        return iter(self.arcs)

    def __contains__(self, index: object) -> bool:
        return self._position(index) is not None

    def __or__(self, other: "SparseVector") -> "SparseVector[V]":
        return left_biased_union(self, other)

    def __and__(self, other: "SparseVector") -> "SparseVector[V]":
        return left_biased_intersection(self, other)

    def __sub__(self, other: "SparseVector") -> "SparseVector[V]":
        return difference(self, other)

    def _position(self, index: object) -> Optional[int]:
        lo, hi = 0, len(self.arcs)
        while lo < hi:
            mid = (lo + hi) // 2
            current = self.arcs[mid][0]
            if current == index:
                return mid
            if current < index:  # type: ignore[operator]
                lo = mid + 1
            else:
                hi = mid
        return None

    def get(self, index: Vertex, default: Optional[V] = None) -> Optional[V]:
        """Return the value at ``index`` or ``default`` when there is no entry."""
        pos = self._position(index)
        return default if pos is None else self.arcs[pos][1]

    def indices(self) -> Tuple[Vertex, ...]:
        return tuple(i for i, _ in self.arcs)

    def values(self) -> Tuple[V, ...]:
        return tuple(x for _, x in self.arcs)

    def to_dict(self) -> Dict[Vertex, V]:
        return dict(self.arcs)

    def map(self, fn: Callable[[V], R]) -> "SparseVector[R]":
        """Apply ``fn`` to every value, keeping the index set."""
        return SparseVector(tuple((i, fn(x)) for i, x in self.arcs))

    def map_with_key(self, fn: Callable[[Vertex, V], R]) -> "SparseVector[R]":
        return SparseVector(tuple((i, fn(i, x)) for i, x in self.arcs))

    def filter(self, predicate: Callable[[V], bool]) -> "SparseVector[V]":
        """Keep only the entries whose value satisfies ``predicate``."""
        return SparseVector(tuple(arc for arc in self.arcs if predicate(arc[1])))


def _emit_nothing(*_args: object) -> Tuple[Arc, ...]:
    return ()


def _emit_rest(rest: Sequence[Arc]) -> Sequence[Arc]:
    return rest


def _emit_arc(index: Vertex, value: object) -> Tuple[Arc, ...]:
    return ((index, value),)


def keep_left(left: V, _right: object) -> V:
    return left


def concat(left: Sequence, right: Sequence) -> Tuple:
    """Order-preserving concatenation used by the list-collecting unions."""
    return tuple(left) + tuple(right)


def merge(
    left: SparseVector[V],
    right: SparseVector[W],
    left_exhausted: Callable[[Sequence[Arc]], Iterable[Arc]],
    right_exhausted: Callable[[Sequence[Arc]], Iterable[Arc]],
    on_equal: Callable[[Vertex, V, W], Iterable[Arc]],
    on_left_smaller: Callable[[Vertex, V], Iterable[Arc]],
    on_left_larger: Callable[[Vertex, W], Iterable[Arc]],
) -> SparseVector:
    """Walk two sorted arc sequences once and collect what the policies emit.

    Args:
        left: First operand.
        right: Second operand; its value type may differ from ``left``'s.
        left_exhausted: Receives the remaining arcs of ``right`` once ``left``
            has run out.
        right_exhausted: Receives the remaining arcs of ``left`` once
            ``right`` has run out.
        on_equal: Called with ``(index, left_value, right_value)`` at a
            shared index.
        on_left_smaller: Called with the ``left`` arc when its index is the
            smaller one.
        on_left_larger: Called with the ``right`` arc when the ``left`` index
            is the larger one.

    Returns:
        A vector of the emitted arcs, in emission order. The policies must
        only emit the index they were handed.
    """
    xs, ys = left.arcs, right.arcs
    out = []
    a = b = 0
    while True:
        if a == len(xs):
            out.extend(left_exhausted(ys[b:]))
            break
        if b == len(ys):
            out.extend(right_exhausted(xs[a:]))
            break
        i, x = xs[a]
        j, y = ys[b]
        if i == j:
            out.extend(on_equal(i, x, y))
            a += 1
            b += 1
        elif i < j:
            out.extend(on_left_smaller(i, x))
            a += 1
        else:
            out.extend(on_left_larger(j, y))
            b += 1
    return SparseVector(tuple(out))


def union_with(
    combine: Callable[[V, V], V], left: SparseVector[V], right: SparseVector[V]
) -> SparseVector[V]:
    """Keep every index of both operands; combine the values at shared ones."""
    return merge(
        left,
        right,
        _emit_rest,
        _emit_rest,
        lambda i, x, y: ((i, combine(x, y)),),
        _emit_arc,
        _emit_arc,
    )


def left_biased_union(left: SparseVector[V], right: SparseVector) -> SparseVector[V]:
    """Union that keeps ``left``'s value wherever both operands have an entry."""
    return union_with(keep_left, left, right)


def intersection_with_key(
    combine: Callable[[Vertex, V, W], R], left: SparseVector[V], right: SparseVector[W]
) -> SparseVector[R]:
    """Keep only shared indices, valued ``combine(index, left_value, right_value)``."""
    return merge(
        left,
        right,
        _emit_nothing,
        _emit_nothing,
        lambda i, x, y: ((i, combine(i, x, y)),),
        _emit_nothing,
        _emit_nothing,
    )


def left_biased_intersection(
    left: SparseVector[V], right: SparseVector
) -> SparseVector[V]:
    return intersection_with_key(lambda _i, x, _y: x, left, right)


def difference(left: SparseVector[V], right: SparseVector) -> SparseVector[V]:
    """Keep ``left``'s entries whose index is absent from ``right``.

    Only the indices of ``right`` are consulted, never its values.
    """
    return merge(
        left,
        right,
        _emit_nothing,
        _emit_rest,
        _emit_nothing,
        _emit_arc,
        _emit_nothing,
    )


def big_union_with(
    combine: Callable[[V, V], V], vectors: Iterable[SparseVector[V]]
) -> SparseVector[V]:
    """Right fold of :func:`union_with` over ``vectors`` from the empty vector.

    For a non-commutative ``combine`` such as :func:`concat`, contributions at
    a shared index are combined in sequence order (first vector leftmost).
    """
    return reduce(
        lambda acc, vector: union_with(combine, vector, acc),
        reversed(list(vectors)),
        SparseVector.empty(),
    )
