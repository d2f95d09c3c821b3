"""Tests for `sgraph.config`."""

import pytest

from sgraph.config import GENERATOR_CONFIG, GeneratorConfig
from sgraph.types.base import MatrixShape


def test_default_config_is_valid() -> None:
    GENERATOR_CONFIG.validate()
    assert 0.0 <= GENERATOR_CONFIG.density <= 1.0
    assert GENERATOR_CONFIG.value_range == (
        GENERATOR_CONFIG.value_low,
        GENERATOR_CONFIG.value_high,
    )
    assert MatrixShape.from_string(GENERATOR_CONFIG.shape) is MatrixShape.SQUARE


@pytest.mark.parametrize("density", [-0.01, 1.01])
def test_density_bounds(density: float) -> None:
    with pytest.raises(ValueError, match="density"):
        GeneratorConfig(density=density).validate()


def test_inverted_value_range() -> None:
    with pytest.raises(ValueError, match="inverted"):
        GeneratorConfig(value_low=3, value_high=2).validate()


def test_shape_parsing() -> None:
    assert MatrixShape.from_string("Strict-Triangular") is MatrixShape.STRICT_TRIANGULAR
    assert MatrixShape.from_string("DIAGONAL") is MatrixShape.DIAGONAL
    with pytest.raises(ValueError, match="Valid values are"):
        MatrixShape.from_string("round")
