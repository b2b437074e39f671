"""
Unit tests for the edge store and adjacency index of WeightedGraph.
"""

import pytest

from relaxtable.exceptions import EmptyGraphError, InputError, NegativeWeightError
from relaxtable.graph import Edge, WeightedGraph


def test_add_edge_builds_store_and_adjacency():
    g = WeightedGraph()
    g.add_edge("a", "b", 12)
    g.add_edge("b", "c", 3)
    g.add_edge("a", "d", 5)

    assert [e.as_tuple() for e in g.edges] == [("a", "b", 12), ("b", "c", 3), ("a", "d", 5)]
    assert list(g.adjacency) == ["a", "b"]
    assert g.adjacency["a"].adjacent == [("b", 12), ("d", 5)]
    assert g.adjacency["b"].adjacent == [("c", 3)]


def test_end_only_vertex_has_no_adjacency_entry():
    g = WeightedGraph()
    g.add_edge("a", "b", 1)

    assert "b" not in g.adjacency
    assert g.out_degree("b") == 0
    assert g.vertex_keys() == ["a", "b"]


def test_source_is_start_of_first_edge():
    g = WeightedGraph.from_edges([("x", "y", 1), ("a", "x", 2)])
    assert g.source == "x"
    assert g.require_source() == "x"


def test_empty_graph_has_no_source():
    g = WeightedGraph()
    assert g.source is None
    with pytest.raises(EmptyGraphError):
        g.require_source()


def test_negative_weight_rejected_before_mutation():
    g = WeightedGraph()
    g.add_edge("a", "b", 1)

    with pytest.raises(NegativeWeightError):
        g.add_edge("b", "c", -1)

    assert len(g) == 1
    assert "b" not in g.adjacency
    assert g.vertex_keys() == ["a", "b"]


def test_negative_weight_is_an_input_error():
    with pytest.raises(InputError):
        WeightedGraph().add_edge("a", "b", -5)


@pytest.mark.parametrize("weight", [1.5, "3", None, True])
def test_non_integer_weight_rejected(weight):
    with pytest.raises(InputError):
        WeightedGraph().add_edge("a", "b", weight)


def test_empty_key_rejected():
    with pytest.raises(InputError):
        WeightedGraph().add_edge("", "b", 1)


def test_edge_is_immutable():
    e = Edge("a", "b", 1)
    with pytest.raises(AttributeError):
        e.weight = 2
