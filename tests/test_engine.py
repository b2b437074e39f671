"""
Unit tests for the single-pass RelaxationEngine.
"""

import io
import json

import pytest

from relaxtable.engine import EngineConfig, RelaxationEngine, compute_shortest_paths
from relaxtable.exceptions import AlgorithmError, EmptyGraphError, UnknownVertexError
from relaxtable.graph import WeightedGraph
from relaxtable.logger import StdLogger
from relaxtable.samples import sample_graph
from relaxtable.table import INF


def _g(*edges):
    return WeightedGraph.from_edges(edges)


def test_loop_back_to_source_lowers_distance_via_sweep():
    g = _g(("a", "b", 12), ("b", "c", 3), ("b", "d", 5), ("d", "c", 1), ("c", "a", 2))
    res = g.compute_shortest_paths()

    assert res.source == "a"
    # Case A on c, then the sweep re-checks b and d
    assert res.distance("c") == 2 and res.previous("c") == "a"
    assert res.distance("b") == 5 and res.previous("b") == "c"
    assert res.entry("b").distance_from_previous == 3
    assert res.distance("d") == 3 and res.previous("d") == "c"


def test_direct_edges_from_source():
    res = _g(("a", "b", 1), ("a", "c", 2)).compute_shortest_paths()

    assert res.distance("b") == 1 and res.previous("b") == "a"
    assert res.distance("c") == 2 and res.previous("c") == "a"


def test_equidistant_tree_with_edge_back_to_source():
    res = sample_graph(3).compute_shortest_paths()

    assert res.distance("d") == 1
    assert res.previous("d") == "a"
    assert res.distance("b") == 1
    # the sweep is one level deep: d's children keep the longer estimate
    assert res.distance("h") == 3
    assert res.distance("i") == 3
    assert res.distance("f") == 2


def test_larger_loop_sample():
    res = sample_graph(2).compute_shortest_paths()

    expected = {
        "b": ("a", 3),
        "c": ("b", 47),
        "d": ("c", 48),
        "d1": ("d2", 16),
        "d2": ("a", 1),
        "c1": ("c", 58),
        "c2": ("c1", 60),
    }
    for key, (prev, dist) in expected.items():
        assert (res.previous(key), res.distance(key)) == (prev, dist), key


@pytest.mark.parametrize("number", [1, 2, 3, 4])
def test_one_row_per_vertex_and_source_untouched(number):
    g = sample_graph(number)
    res = g.compute_shortest_paths()

    assert res.keys() == g.vertex_keys()
    src = res.entry(res.source)
    assert src.previous is None
    assert src.distance_from_start == INF
    assert src.distance_from_previous == INF


def test_single_edge_boundary():
    g = _g(("a", "b", 1))
    res = g.compute_shortest_paths()

    assert len(res) == 2
    assert "b" not in g.adjacency
    assert res.distance("b") == 1


def test_repeated_computation_is_stable():
    g = sample_graph(1)
    assert g.compute_shortest_paths() == g.compute_shortest_paths()

    engine = RelaxationEngine(g)
    first = engine.solve()
    assert engine.solve() == first


def test_unreachable_start_keeps_sentinel():
    res = _g(("a", "b", 1), ("c", "d", 1)).compute_shortest_paths()

    assert res.distance("c") == INF
    assert res.distance("d") == INF
    assert res.previous("d") is None


def test_edge_into_source_counts_even_if_unreachable():
    res = _g(("a", "b", 1), ("c", "a", 4)).compute_shortest_paths()

    assert res.distance("c") == 4
    assert res.previous("c") == "a"


def test_neighbor_set_from_source_is_relaxed_through_current():
    res = _g(("a", "b", 5), ("a", "c", 1), ("c", "b", 1)).compute_shortest_paths()

    b = res.entry("b")
    assert (b.previous, b.distance_from_start, b.distance_from_previous) == ("c", 2, 1)


def test_predecessor_overwritten_without_improvement():
    res = _g(("a", "b", 1), ("a", "c", 5), ("c", "b", 1)).compute_shortest_paths()

    b = res.entry("b")
    # distance still comes from a, but the pointer moved to c
    assert b.distance_from_start == 1
    assert b.previous == "c"
    assert b.distance_from_previous == 1


def test_sweep_skips_source_by_default():
    g = _g(("a", "c", 5), ("c", "a", 1))

    res = g.compute_shortest_paths()
    assert res.distance("a") == INF
    assert res.distance("c") == 1

    res = g.compute_shortest_paths(config=EngineConfig(protect_source=False))
    a = res.entry("a")
    assert (a.previous, a.distance_from_start, a.distance_from_previous) == ("c", 6, 5)


def test_source_self_loop():
    g = _g(("a", "a", 2), ("a", "b", 1))

    assert g.compute_shortest_paths().previous("a") is None
    res = g.compute_shortest_paths(config=EngineConfig(protect_source=False))
    assert res.previous("a") == "a"
    assert res.distance("a") == 2
    assert res.distance("b") == 1


def test_counters_for_looped_sample():
    engine = RelaxationEngine(sample_graph(1))
    engine.solve()
    counters = engine.summary()

    assert counters["vertices_visited"] == 4
    assert counters["edges_examined"] == 5
    assert counters["case_a"] == 1
    assert counters["case_b"] == 1
    assert counters["case_c"] == 3
    assert counters["backward_sweeps"] == 1
    assert counters["sweep_updates"] == 2

    metrics = engine.metrics(wall_ms=1.5)
    assert metrics.n == 4
    assert metrics.m == 5
    assert metrics.source == "a"


def test_empty_graph_raises():
    with pytest.raises(EmptyGraphError):
        WeightedGraph().compute_shortest_paths()
    with pytest.raises(EmptyGraphError):
        compute_shortest_paths(WeightedGraph())


def test_run_requires_initialize():
    engine = RelaxationEngine(sample_graph(1))
    with pytest.raises(AlgorithmError):
        engine.run()


def test_initialize_returns_source_and_sentinel_rows():
    engine = RelaxationEngine(sample_graph(1))
    assert engine.initialize() == "a"
    assert engine.table.keys() == ["a", "b", "c", "d"]
    assert all(r.previous is None and r.distance_from_start == INF for r in engine.table)


def test_unknown_key_lookup_on_result():
    res = sample_graph(4).compute_shortest_paths()
    with pytest.raises(UnknownVertexError):
        res.distance("nope")


def test_engine_logs_events():
    stream = io.StringIO()
    logger = StdLogger(level="debug", json_fmt=True, stream=stream)
    sample_graph(4).compute_shortest_paths(config=EngineConfig(trace=True), logger=logger)

    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    names = [e["event"] for e in events]
    assert names[0] == "initialize"
    assert names[-1] == "pass_complete"
    relax = [e for e in events if e["event"] == "relax"]
    assert [(e["case"], e["key"], e["distance"]) for e in relax] == [("B", "b", 1), ("B", "c", 2)]


def test_unreached_current_leaves_source_set_neighbor_alone():
    res = _g(("a", "b", 1), ("c", "b", 1)).compute_shortest_paths()

    b = res.entry("b")
    assert (b.previous, b.distance_from_start, b.distance_from_previous) == ("a", 1, 1)
    assert res.distance("c") == INF


def test_run_requires_source():
    from relaxtable.table import DistanceTable

    engine = RelaxationEngine(sample_graph(1))
    engine.table = DistanceTable()
    with pytest.raises(AlgorithmError):
        engine.run()
