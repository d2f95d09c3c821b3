"""Text rendering and YAML loading of sparse structures.

Rendering is line oriented: a vector prints one ``(index | value)`` arc per
line, a matrix prints one row per line as ``row: (col | value) ...``.

YAML input describes one matrix as a mapping from row index to either a list
of successor columns (unit values) or a mapping ``column: value``::

    0: [1, 2]
    1: {2: 5}
    2: []

A document may instead hold ``graphs:``, a list of such mappings, to describe
a graph sequence.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence

import yaml

from sgraph.sparse.matrix import SparseMatrix, matrix_from_rows
from sgraph.sparse.vector import SparseVector
from sgraph.types.base import Path, Vertex


def _format_value(value: Any) -> str:
    if isinstance(value, SparseVector):
        return "{" + ", ".join(f"{i}: {_format_value(x)}" for i, x in value) + "}"
    return str(value)


def format_vector(v: SparseVector) -> str:
    """One ``(index | value)`` line per arc."""
    return "\n".join(f"({i} | {_format_value(x)})" for i, x in v)


def format_matrix(m: SparseMatrix) -> str:
    """One ``row: (col | value) ...`` line per row; empty rows end after the colon."""
    lines = []
    for i, row in m:
        arcs = " ".join(f"({j} | {_format_value(x)})" for j, x in row)
        lines.append(f"{i}: {arcs}".rstrip())
    return "\n".join(lines)


def format_layers(layers: Iterable[SparseVector]) -> str:
    return "\n".join(
        f"layer {depth}: " + ", ".join(str(i) for i in layer.indices())
        for depth, layer in enumerate(layers)
    )


def format_path(path: Path, names: Optional[Mapping[Vertex, Hashable]] = None) -> str:
    if names is None:
        return " -> ".join(str(v) for v in path)
    return " -> ".join(str(names[v]) for v in path)


def format_paths(paths: Sequence[Path]) -> str:
    return "\n".join(format_path(p) for p in paths)


def _vertex(key: Any, where: str) -> Vertex:
    # YAML 1.1 turns keys such as ``yes``/``on`` into booleans
    if isinstance(key, bool):
        raise ValueError(f"{where}: boolean key {key!r} is not a vertex index")
    try:
        index = int(key)
    except (TypeError, ValueError):
        raise ValueError(f"{where}: {key!r} is not a vertex index") from None
    if index < 0:
        raise ValueError(f"{where}: vertex index {index} is negative")
    return index


def matrix_from_data(data: Any) -> SparseMatrix:
    """Build a matrix from the parsed form of one YAML matrix mapping.

    Raises:
        ValueError: On non-mapping input, non-integer indices, or rows that are
            neither a list nor a mapping.
    """
    if data is None:
        return SparseVector.empty()
    if not isinstance(data, dict):
        raise ValueError("A matrix must be a mapping from row index to its row")

    rows: Dict[Vertex, Dict[Vertex, Any]] = {}
    for key, spec in data.items():
        i = _vertex(key, "row")
        if spec is None:
            rows[i] = {}
        elif isinstance(spec, list):
            rows[i] = {_vertex(col, f"row {i}"): 1 for col in spec}
        elif isinstance(spec, dict):
            rows[i] = {_vertex(col, f"row {i}"): value for col, value in spec.items()}
        else:
            raise ValueError(
                f"row {i}: expected a list of columns or a column -> value mapping"
            )
    return matrix_from_rows(rows)


def load_graphs_yaml(yaml_str: str) -> List[SparseMatrix]:
    """Parse a YAML document into a graph sequence (one or more matrices)."""
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    if isinstance(data, dict) and "graphs" in data:
        graphs = data["graphs"]
        if not isinstance(graphs, list):
            raise ValueError("'graphs' must be a list of matrices")
        return [matrix_from_data(g) for g in graphs]
    return [matrix_from_data(data)]


def load_matrix_yaml(yaml_str: str) -> SparseMatrix:
    """Parse a YAML document describing exactly one matrix."""
    graphs = load_graphs_yaml(yaml_str)
    if len(graphs) != 1:
        raise ValueError(f"Expected a single matrix, found {len(graphs)}")
    return graphs[0]


def dump_matrix_yaml(m: SparseMatrix) -> str:
    """Serialize ``m`` in the ``column: value`` form accepted by the loaders."""
    return yaml.safe_dump({i: row.to_dict() for i, row in m}, sort_keys=True)
