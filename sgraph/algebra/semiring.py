"""Algebraic capability consumed by the generalized vector-matrix product.

A :class:`Semiring` bundles an additive identity, a multiplicative identity,
an associative-commutative ``add`` and an associative ``mul`` that
distributes over ``add``, with ``mul(zero, x) == zero``. The optional ``eq``
is used only to recognise the identities so the optimized product can skip
work; without it every value is treated as a general value.

Named instances:
    NUMERIC - ordinary (+, *) over ints/floats.
    BOOLEAN - (or, and) over bools.
    TROPICAL - (min, +) over floats, ``inf`` as zero.
    COUNTING - alias of NUMERIC, used for in-multiplicity counts.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Semiring(Generic[T]):
    """A value type with (zero, one, add, mul) satisfying the semiring laws.

    Attributes:
        name: Human-readable identifier used in logs.
        zero: Additive identity; absorbing for ``mul``.
        one: Multiplicative identity.
        add: Associative, commutative addition.
        mul: Associative multiplication distributing over ``add``.
        eq: Optional equality used to detect ``zero`` and ``one``.
    """

    name: str
    zero: T
    one: T
    add: Callable[[T, T], T]
    mul: Callable[[T, T], T]
    eq: Optional[Callable[[T, T], bool]] = None

    def is_zero(self, value: T) -> bool:
        return self.eq is not None and self.eq(value, self.zero)

    def is_one(self, value: T) -> bool:
        return self.eq is not None and self.eq(value, self.one)

    def without_equality(self) -> "Semiring[T]":
        """Return the same algebra with identity detection disabled."""
        return Semiring(self.name, self.zero, self.one, self.add, self.mul)


NUMERIC: Semiring = Semiring(
    name="numeric", zero=0, one=1, add=operator.add, mul=operator.mul, eq=operator.eq
)

BOOLEAN: Semiring = Semiring(
    name="boolean",
    zero=False,
    one=True,
    add=operator.or_,
    mul=operator.and_,
    eq=operator.eq,
)

TROPICAL: Semiring = Semiring(
    name="tropical",
    zero=math.inf,
    one=0.0,
    add=min,
    mul=operator.add,
    eq=operator.eq,
)

COUNTING = NUMERIC
