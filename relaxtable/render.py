"""Plain-text rendering of edge lists and distance tables."""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from .engine import RelaxationResult
from .graph import VertexKey, WeightedGraph
from .table import Distance, DistanceTable, is_unknown

RULE = "-" * 36


class _RowLike(Protocol):
    key: VertexKey
    previous: Optional[VertexKey]
    distance_from_start: Distance


def _banner(title: str) -> List[str]:
    return [RULE, title, RULE]


def format_edges(graph: WeightedGraph) -> str:
    """Return one ``{start, end, weight}`` line per edge, in insertion order."""
    return "\n".join(f"{{{e.start}, {e.end}, {e.weight}}}" for e in graph.edges)


def format_row(row: _RowLike, source: VertexKey) -> str:
    """Render a single table row.

    The source row is recognised by key, not by its distance.
    """
    if row.key == source:
        return f"Source Vertex: {row.key}"
    if not row.previous and is_unknown(row.distance_from_start):
        return f"Source Vertex: {row.key}, Previous: Empty , Distance: Infinity"
    distance = "Infinity" if is_unknown(row.distance_from_start) else row.distance_from_start
    return f"Source: {row.key}, Previous: {row.previous}, Distance: {distance}"


def format_table(rows: Iterable[_RowLike], source: VertexKey) -> str:
    """Render every row of a :class:`DistanceTable` or :class:`RelaxationResult`."""
    return "\n".join(format_row(row, source) for row in rows)


def format_report(graph: WeightedGraph, result: RelaxationResult) -> str:
    """Return the full report: edges, the initialized table and the final table."""
    initial = DistanceTable()
    for key in result.keys():
        initial.ensure(key)

    lines: List[str] = []
    lines += _banner("Weighted edges for this execution: ")
    lines += [format_edges(graph), ""]
    lines += _banner("DijkstraTable initialized:")
    lines += [format_table(initial, result.source), ""]
    lines += _banner("Dijkstra's Shortest Path:")
    lines += [format_table(result, result.source), ""]
    return "\n".join(lines)
