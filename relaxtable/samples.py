"""Canned graphs used for demonstrations and regression checks."""

from __future__ import annotations

from typing import Dict, List

from .graph import EdgeTuple, WeightedGraph

SAMPLE_EDGES: Dict[int, List[EdgeTuple]] = {
    # a path with a loop back to the source
    1: [
        ("a", "b", 12),
        ("b", "c", 3),
        ("b", "d", 5),
        ("d", "c", 1),
        ("c", "a", 2),
    ],
    # bigger weights and a longer loop
    2: [
        ("a", "b", 3),
        ("b", "c", 44),
        ("c", "d", 1),
        ("d", "d1", 2),
        ("d1", "d2", 15),
        ("d2", "a", 1),
        ("c", "c1", 11),
        ("c1", "c2", 2),
    ],
    # equidistant tree; d ends up one hop from the source
    3: [
        ("a", "b", 1),
        ("a", "c", 1),
        ("b", "d", 1),
        ("b", "e", 1),
        ("c", "f", 1),
        ("c", "g", 1),
        ("d", "h", 1),
        ("d", "i", 1),
        ("d", "a", 1),
    ],
}

DEFAULT_EDGES: List[EdgeTuple] = [("a", "b", 1), ("a", "c", 2)]


def sample_edges(number: int) -> List[EdgeTuple]:
    """Return the edge list of sample ``number``; unknown numbers get the default."""
    return list(SAMPLE_EDGES.get(number, DEFAULT_EDGES))


def sample_graph(number: int) -> WeightedGraph:
    """Build sample graph ``number`` (1, 2 or 3, anything else is the default)."""
    return WeightedGraph.from_edges(sample_edges(number))
