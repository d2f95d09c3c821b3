"""Configuration classes for sgraph components."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class GeneratorConfig:
    """Defaults for random matrix and vector generation."""

    # Probability that any admissible (row, column) cell is populated
    density: float = 0.3

    # Inclusive bounds for generated integer values
    value_low: int = 1
    value_high: int = 9

    # Name of the default matrix shape (see MatrixShape)
    shape: str = "square"

    @property
    def value_range(self) -> Tuple[int, int]:
        return (self.value_low, self.value_high)

    def validate(self) -> None:
        """Raise ValueError when the defaults cannot drive the generator."""
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be within [0, 1], got {self.density}")
        if self.value_low > self.value_high:
            raise ValueError(
                f"value range is inverted: {self.value_low} > {self.value_high}"
            )


# Global configuration instance
GENERATOR_CONFIG = GeneratorConfig()
