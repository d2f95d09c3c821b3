"""Deterministic seed derivation for the random structure generator."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional


class SeedManager:
    """Derives independent seeds for each generated structure from one master seed.

    Two structures generated from the same master seed but with different
    component labels (for example ``("matrix", "square", 8)`` and
    ``("vector", 8)``) draw from unrelated streams, so adding a new structure
    to a fixture does not perturb the others.

    Usage:
        seeds = SeedManager(42)
        rng = seeds.create_random_state("matrix", "square", 8)
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        """
        Args:
            master_seed: Master seed. ``None`` makes every derived stream
                non-deterministic.
        """
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Hash the master seed and ``components`` into a positive 31-bit seed.

        Returns:
            Derived seed, or ``None`` when no master seed is set.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        digest = hashlib.sha256(seed_input.encode()).digest()
        return int.from_bytes(digest[:4], byteorder="big") & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Return a private ``random.Random`` seeded for ``components``."""
        derived = self.derive_seed(*components)
        rng = random.Random()
        if derived is not None:
            rng.seed(derived)
        return rng
