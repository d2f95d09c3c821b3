"""Random sparse structures for experiments and tests.

The ``*_assoc`` functions return plain association lists; :func:`random_matrix`
and :func:`random_vector` wrap them into sparse containers. Every row index
``0..size-1`` is present in a generated matrix, possibly with an empty row.
Values are integers drawn uniformly from an inclusive range.
"""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from sgraph.config import GENERATOR_CONFIG, GeneratorConfig
from sgraph.logging import get_logger
from sgraph.seed_manager import SeedManager
from sgraph.sparse.matrix import SparseMatrix, matrix_from_assoc
from sgraph.sparse.vector import SparseVector
from sgraph.types.base import MatrixShape

logger = get_logger(__name__)

AssocVector = List[Tuple[int, int]]
AssocMatrix = List[Tuple[int, AssocVector]]


def _resolve(
    size: int,
    density: Optional[float],
    value_range: Optional[Tuple[int, int]],
    config: GeneratorConfig,
) -> Tuple[float, int, int]:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    low, high = config.value_range if value_range is None else value_range
    effective = GeneratorConfig(
        density=config.density if density is None else density,
        value_low=low,
        value_high=high,
        shape=config.shape,
    )
    effective.validate()
    return effective.density, low, high


def random_matrix_assoc(
    seed: Optional[int],
    size: int,
    density: Optional[float] = None,
    value_range: Optional[Tuple[int, int]] = None,
    shape: Union[MatrixShape, str, None] = None,
    config: GeneratorConfig = GENERATOR_CONFIG,
) -> AssocMatrix:
    """Generate ``[(row, [(col, value), ...]), ...]`` for a ``size``-vertex matrix.

    Args:
        seed: Master seed; ``None`` for a non-reproducible matrix.
        size: Number of rows and columns.
        density: Probability that an admissible cell is populated.
        value_range: Inclusive ``(low, high)`` bounds for values.
        shape: Which cells are admissible (square, diagonal, triangular,
            strict-triangular).
        config: Source of defaults for the omitted arguments.

    Raises:
        ValueError: If ``size`` is negative, ``density`` is outside [0, 1],
            the value range is inverted, or ``shape`` is unknown.
    """
    density, low, high = _resolve(size, density, value_range, config)
    if shape is None:
        shape = config.shape
    if isinstance(shape, str):
        shape = MatrixShape.from_string(shape)

    rng = SeedManager(seed).create_random_state("matrix", shape.name, size)
    assoc: AssocMatrix = []
    for row in range(size):
        arcs = [
            (col, rng.randint(low, high))
            for col in range(size)
            if shape.admits(row, col) and rng.random() < density
        ]
        assoc.append((row, arcs))
    logger.debug(
        f"Generated {shape.name.lower()} {size}x{size} matrix with "
        f"{sum(len(arcs) for _, arcs in assoc)} entries (seed={seed})"
    )
    return assoc


def random_vector_assoc(
    seed: Optional[int],
    size: int,
    density: Optional[float] = None,
    value_range: Optional[Tuple[int, int]] = None,
    config: GeneratorConfig = GENERATOR_CONFIG,
) -> AssocVector:
    """Generate ``[(index, value), ...]`` with indices below ``size``."""
    density, low, high = _resolve(size, density, value_range, config)
    rng = SeedManager(seed).create_random_state("vector", size)
    return [(i, rng.randint(low, high)) for i in range(size) if rng.random() < density]


def random_matrix(
    seed: Optional[int],
    size: int,
    density: Optional[float] = None,
    value_range: Optional[Tuple[int, int]] = None,
    shape: Union[MatrixShape, str, None] = None,
    config: GeneratorConfig = GENERATOR_CONFIG,
) -> SparseMatrix:
    return matrix_from_assoc(
        random_matrix_assoc(seed, size, density, value_range, shape, config)
    )


def random_vector(
    seed: Optional[int],
    size: int,
    density: Optional[float] = None,
    value_range: Optional[Tuple[int, int]] = None,
    config: GeneratorConfig = GENERATOR_CONFIG,
) -> SparseVector:
    return SparseVector.from_arcs(
        random_vector_assoc(seed, size, density, value_range, config)
    )
