"""Tests for the Semiring capability and its named instances."""

from __future__ import annotations

import math

import pytest

from sgraph.algebra.semiring import BOOLEAN, COUNTING, NUMERIC, TROPICAL, Semiring


@pytest.mark.parametrize(
    "semiring, samples",
    [
        (NUMERIC, [0, 1, 2, -3, 7]),
        (BOOLEAN, [False, True]),
        (TROPICAL, [math.inf, 0.0, 1.5, 4.0]),
    ],
)
def test_semiring_laws(semiring: Semiring, samples):
    add, mul, zero, one = semiring.add, semiring.mul, semiring.zero, semiring.one
    for a in samples:
        assert add(a, zero) == a
        assert mul(a, one) == a
        assert mul(one, a) == a
        assert mul(a, zero) == zero
        assert mul(zero, a) == zero
        for b in samples:
            assert add(a, b) == add(b, a)
            for c in samples:
                assert add(add(a, b), c) == add(a, add(b, c))
                assert mul(mul(a, b), c) == mul(a, mul(b, c))
                assert mul(a, add(b, c)) == add(mul(a, b), mul(a, c))


def test_identity_detection():
    assert NUMERIC.is_zero(0)
    assert NUMERIC.is_one(1)
    assert not NUMERIC.is_zero(2)
    assert TROPICAL.is_zero(math.inf)
    assert TROPICAL.is_one(0.0)
    assert BOOLEAN.is_zero(False)


def test_without_equality_disables_detection():
    plain = NUMERIC.without_equality()
    assert plain.eq is None
    assert not plain.is_zero(0)
    assert not plain.is_one(1)
    assert plain.add(2, 3) == 5


def test_counting_is_numeric():
    assert COUNTING is NUMERIC


def test_custom_instance_is_caller_supplied():
    max_times = Semiring("max-times", 0.0, 1.0, max, lambda a, b: a * b)
    assert max_times.add(0.2, 0.7) == 0.7
    assert not max_times.is_zero(0.0)
