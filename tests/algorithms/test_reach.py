"""Tests for breadth-first layering and shortest-target search."""

from __future__ import annotations

import logging

import networkx as nx
import pytest

from sgraph.algorithms.instances import close_paths, prolong_path, start_paths, successors
from sgraph.algorithms.reach import (
    bfs_layers,
    graph_vertices,
    iter_reach,
    layer_distances,
    reach_with,
    shortest_with,
)
from sgraph.generate import random_matrix
from sgraph.nx import to_networkx
from sgraph.sparse.matrix import matrix_from_adjacency
from sgraph.sparse.vector import SparseVector


def _idx(*indices):
    return SparseVector.from_indices(indices)


def _layer_indices(layers):
    return [layer.indices() for layer in layers]


class TestReachWith:
    def test_no_graphs_yields_start_only(self):
        start = _idx(0, 4)
        assert reach_with(successors, start, []) == [start]

    def test_cycle_terminates(self, cycle_a):
        layers = reach_with(successors, _idx(0), [cycle_a])
        assert _layer_indices(layers) == [(0,), (1, 2)]

    def test_ring_layers_by_distance(self, ring4):
        assert _layer_indices(reach_with(successors, _idx(0), [ring4])) == [
            (0,),
            (1,),
            (2,),
            (3,),
        ]

    def test_vertex_never_repeats(self, diamond):
        layers = reach_with(successors, _idx(0), [diamond])
        seen = [i for layer in layers for i in layer.indices()]
        assert len(seen) == len(set(seen))
        assert _layer_indices(layers) == [(0,), (1, 2), (3,)]

    def test_graph_sequence_is_one_step(self):
        g1 = matrix_from_adjacency({0: [1]})
        g2 = matrix_from_adjacency({1: [2]})
        assert _layer_indices(reach_with(successors, _idx(0), [g1, g2])) == [
            (0,),
            (2,),
        ]

    def test_start_is_not_filtered(self, diamond):
        layers = reach_with(successors, _idx(0, 9), [diamond])
        assert layers[0].indices() == (0, 9)

    def test_iter_reach_is_lazy(self, ring4):
        layers = iter_reach(successors, _idx(0), [ring4])
        assert next(layers).indices() == (0,)
        assert next(layers).indices() == (1,)

    def test_graph_vertices(self):
        g1 = matrix_from_adjacency({0: [1]})
        g2 = matrix_from_adjacency({4: [2]})
        assert graph_vertices([g1, g2]).indices() == (0, 1, 2, 4)

    def test_repeatable(self, diamond):
        assert reach_with(successors, _idx(0), [diamond]) == reach_with(
            successors, _idx(0), [diamond]
        )


class TestShortestWith:
    def test_first_layer_hitting_target(self, cycle_a):
        hit = shortest_with(successors, _idx(0), _idx(2), [cycle_a])
        assert hit.to_dict() == {2: 1}

    def test_unreachable_target_gives_empty(self, cycle_a):
        assert shortest_with(successors, _idx(0), _idx(7), [cycle_a]) == SparseVector.empty()

    def test_layer_zero_without_graphs(self):
        assert shortest_with(successors, _idx(0), _idx(0), []).indices() == (0,)
        assert shortest_with(successors, _idx(0), _idx(3), []) == SparseVector.empty()

    def test_nearest_layer_only(self):
        m = matrix_from_adjacency({0: [1, 3], 1: [2], 2: [4], 3: [4]})
        hit = shortest_with(successors, _idx(0), _idx(2, 3, 4), [m])
        assert hit.indices() == (3,)

    def test_with_path_prolongation(self, ring4):
        hit = shortest_with(prolong_path, start_paths([0]), _idx(3), [ring4])
        assert close_paths(hit).to_dict() == {3: (0, 1, 2, 3)}


@pytest.mark.parametrize("seed", range(12))
def test_distances_match_networkx(seed):
    m = random_matrix(seed, 12, density=0.15)
    G = to_networkx(m)
    expected = nx.single_source_shortest_path_length(G, 0)
    assert layer_distances(bfs_layers([0], [m])) == expected


def test_layers_logged_at_debug(caplog, diamond):
    caplog.set_level(logging.DEBUG, logger="sgraph.algorithms.reach")
    reach_with(successors, _idx(0), [diamond])
    messages = [r.getMessage() for r in caplog.records if r.name == "sgraph.algorithms.reach"]
    assert any("Layer 1" in msg for msg in messages)
    assert any("exhausted" in msg for msg in messages)
