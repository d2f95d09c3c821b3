"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and sparse matrices. Node names are mapped to
contiguous vertex indices so that results (layers, paths) can be translated
back.

Example:
    >>> import networkx as nx
    >>> from sgraph.nx import from_networkx
    >>> from sgraph.algorithms import bfs_layers
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3)
    >>> G.add_edge("B", "C", weight=1)
    >>> m, node_map = from_networkx(G)
    >>> layers = bfs_layers([node_map.to_index["A"]], [m])
    >>> [node_map.names(layer.indices()) for layer in layers]
    [['A'], ['B'], ['C']]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Tuple,
    Union,
)

from sgraph.sparse.matrix import SparseMatrix, matrix_from_rows
from sgraph.types.base import Path, Vertex

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to node names.
    """

    to_index: Dict[Hashable, Vertex] = field(default_factory=dict)
    to_name: Dict[Vertex, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)

    def indices(self, names: Iterable[Hashable]) -> List[Vertex]:
        return [self.to_index[name] for name in names]

    def names(self, indices: Iterable[Vertex]) -> List[Hashable]:
        return [self.to_name[i] for i in indices]

    def path_names(self, path: Path) -> Tuple[Hashable, ...]:
        return tuple(self.to_name[i] for i in path)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Any = 1,
    combine: Callable[[Any, Any], Any] = min,
) -> Tuple[SparseMatrix, NodeMap]:
    """Convert a NetworkX graph to a sparse adjacency matrix.

    Nodes are indexed in ``str``-sorted order. Undirected graphs yield arcs in
    both directions. Parallel edges of multigraphs are folded with
    ``combine``.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute supplying the arc value.
        default_weight: Value used when the attribute is missing.
        combine: Folds the values of parallel edges.

    Returns:
        ``(matrix, node_map)``. Every node has a row, possibly empty.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    rows: Dict[Vertex, Dict[Vertex, Any]] = {i: {} for i in node_map.to_name}

    def add(u: Hashable, v: Hashable, value: Any) -> None:
        row = rows[node_map.to_index[u]]
        col = node_map.to_index[v]
        row[col] = combine(row[col], value) if col in row else value

    for u, v, data in G.edges(data=True):
        value = data.get(weight_attr, default_weight)
        add(u, v, value)
        if not G.is_directed() and u != v:
            add(v, u, value)

    return matrix_from_rows(rows), node_map


def to_networkx(
    m: SparseMatrix,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> "nx.DiGraph":
    """Convert a sparse matrix to a ``networkx.DiGraph``.

    Row indices become nodes even when their row is empty; arc values are
    stored under ``weight_attr``. With ``node_map`` nodes carry their names.
    """
    import networkx as nx

    def name(i: Vertex) -> Hashable:
        return i if node_map is None else node_map.to_name[i]

    G = nx.DiGraph()
    for i, row in m:
        G.add_node(name(i))
        for j, value in row:
            G.add_edge(name(i), name(j), **{weight_attr: value})
    return G
