"""Tests for text rendering and YAML loading."""

from __future__ import annotations

import pytest

from sgraph.io import (
    dump_matrix_yaml,
    format_layers,
    format_matrix,
    format_path,
    format_paths,
    format_vector,
    load_graphs_yaml,
    load_matrix_yaml,
)
from sgraph.sparse.matrix import matrix_from_rows, matrix_to_dict
from sgraph.sparse.vector import SparseVector


def test_format_vector_one_arc_per_line(vec):
    assert format_vector(vec({0: 1, 3: "x"})) == "(0 | 1)\n(3 | x)"
    assert format_vector(SparseVector.empty()) == ""


def test_format_matrix_rows(weighted):
    assert format_matrix(weighted).splitlines() == [
        "0: (1 | 2.0) (2 | 5.0)",
        "1: (2 | 1.0)",
        "2: (3 | 1.0)",
        "3:",
    ]


def test_format_layers_and_paths(vec):
    layers = [vec({0: 1}), vec({1: 1, 2: 1})]
    assert format_layers(layers) == "layer 0: 0\nlayer 1: 1, 2"
    assert format_paths([(0, 1, 3), (5,)]) == "0 -> 1 -> 3\n5"
    assert format_path((0, 1), names={0: "A", 1: "B"}) == "A -> B"


def test_load_matrix_list_and_mapping_rows():
    m = load_matrix_yaml("0: [2, 1]\n1: {2: 5}\n2: []\n3:\n")
    assert matrix_to_dict(m) == {0: {1: 1, 2: 1}, 1: {2: 5}, 2: {}, 3: {}}


def test_load_graph_sequence():
    graphs = load_graphs_yaml("graphs:\n  - {0: [1]}\n  - {1: [2]}\n")
    assert [matrix_to_dict(g) for g in graphs] == [{0: {1: 1}}, {1: {2: 1}}]


def test_load_single_matrix_rejects_sequences():
    with pytest.raises(ValueError, match="single matrix"):
        load_matrix_yaml("graphs:\n  - {0: [1]}\n  - {1: [2]}\n")


def test_empty_document_is_empty_matrix():
    assert load_matrix_yaml("") == SparseVector.empty()


@pytest.mark.parametrize(
    "text, message",
    [
        ("- 1\n- 2\n", "mapping"),
        ("yes: [1]\n", "boolean"),
        ("a: [1]\n", "not a vertex"),
        ("0: [-1]\n", "negative"),
        ("0: 5\n", "expected a list"),
        ("graphs: {0: [1]}\n", "must be a list"),
        ("0: [1, 2\n", "Invalid YAML"),
    ],
)
def test_malformed_yaml_rejected(text, message):
    with pytest.raises(ValueError, match=message):
        load_graphs_yaml(text)


def test_dump_is_accepted_by_loader():
    m = matrix_from_rows({0: {1: 3}, 1: {}})
    assert load_matrix_yaml(dump_matrix_yaml(m)) == m
