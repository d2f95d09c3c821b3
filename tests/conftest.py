"""Shared graph fixtures.

Adjacency sketches use ``->`` for an arc; unweighted matrices carry value 1.
"""

from __future__ import annotations

import pytest

from sgraph.sparse.matrix import matrix_from_adjacency, matrix_from_rows
from sgraph.sparse.vector import SparseVector


@pytest.fixture
def cycle_a():
    # 0 -> 1, 0 -> 2, 1 -> 2, 2 -> 1
    return matrix_from_adjacency({0: [1, 2], 1: [2], 2: [1]})


@pytest.fixture
def diamond():
    #     1
    #   /   \
    # 0       3
    #   \   /
    #     2
    return matrix_from_adjacency({0: [1, 2], 1: [3], 2: [3], 3: []})


@pytest.fixture
def ring4():
    # 0 -> 1 -> 2 -> 3 -> 0
    return matrix_from_adjacency({0: [1], 1: [2], 2: [3], 3: [0]})


@pytest.fixture
def weighted():
    # 0 -[2]-> 1 -[1]-> 2 -[1]-> 3, plus 0 -[5]-> 2
    return matrix_from_rows(
        {0: {1: 2.0, 2: 5.0}, 1: {2: 1.0}, 2: {3: 1.0}, 3: {}}
    )


@pytest.fixture
def vec():
    """Shorthand for building a vector from a mapping."""
    return SparseVector.from_mapping
