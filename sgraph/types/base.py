"""Shared aliases and small value types for sparse graph algebra."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Tuple, TypeVar

V = TypeVar("V")

#: A vertex is a non-negative integer index.
Vertex = int

#: One entry of a sparse vector, or one weighted entry of a matrix row.
Arc = Tuple[Vertex, V]

#: An append-only vertex sequence; it only ever grows at the tail.
Path = Tuple[Vertex, ...]


class Tree(NamedTuple):
    """One node of a reachability forest.

    Attributes:
        root: Vertex stored at this node.
        children: Sub-forest hanging below ``root``.
    """

    root: Vertex
    children: Tuple["Tree", ...] = ()


#: An ordered sequence of trees.
Forest = Tuple[Tree, ...]


class MatrixShape(IntEnum):
    """Admissible cell patterns for generated matrices."""

    #: Any (row, column) cell.
    SQUARE = 1
    #: Only cells with row == column.
    DIAGONAL = 2
    #: Cells with column >= row.
    TRIANGULAR = 3
    #: Cells with column > row.
    STRICT_TRIANGULAR = 4

    @classmethod
    def from_string(cls, value: str) -> "MatrixShape":
        """Parse a case-insensitive shape name (``-`` accepted for ``_``).

        Raises:
            ValueError: If the string doesn't match any shape.
        """
        try:
            return cls[value.upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid matrix shape '{value}'. Valid values are: {valid}"
            ) from None

    def admits(self, row: Vertex, col: Vertex) -> bool:
        if self is MatrixShape.DIAGONAL:
            return row == col
        if self is MatrixShape.TRIANGULAR:
            return col >= row
        if self is MatrixShape.STRICT_TRIANGULAR:
            return col > row
        return True
