"""Type aliases shared across sgraph modules."""

from __future__ import annotations

from sgraph.types.base import Arc, Forest, MatrixShape, Path, Tree, Vertex

__all__ = ["Arc", "Forest", "MatrixShape", "Path", "Tree", "Vertex"]
