"""
Unit tests for the reference Dijkstra and the comparison report.
"""

from relaxtable.compare import compare_with_reference, comparison_summary
from relaxtable.dijkstra import dijkstra_reference
from relaxtable.samples import sample_graph
from relaxtable.table import INF


def test_reference_follows_directed_edges():
    ref = dijkstra_reference(sample_graph(1))

    assert ref.source == "a"
    assert ref.distances == {"a": 0, "b": 12, "c": 15, "d": 17}
    assert ref.predecessors["d"] == "b"


def test_reference_unreachable_is_inf():
    from relaxtable.graph import WeightedGraph

    ref = dijkstra_reference(WeightedGraph.from_edges([("a", "b", 1), ("c", "d", 1)]))
    assert ref.distances["d"] == INF


def test_default_graph_agrees():
    rows = compare_with_reference(sample_graph(4))
    assert [r.key for r in rows] == ["b", "c"]
    assert all(r.agrees for r in rows)


def test_tree_sample_diverges_only_at_d():
    g = sample_graph(3)
    summary = comparison_summary(compare_with_reference(g, g.compute_shortest_paths()))

    assert summary["diverging"] == ["d"]
    assert summary["vertices"] == 8
    assert summary["agree"] == 7
