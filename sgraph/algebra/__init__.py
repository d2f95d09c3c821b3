"""Semiring instances used by the algebraic products."""

from __future__ import annotations

from sgraph.algebra.semiring import BOOLEAN, COUNTING, NUMERIC, TROPICAL, Semiring

__all__ = ["BOOLEAN", "COUNTING", "NUMERIC", "TROPICAL", "Semiring"]
