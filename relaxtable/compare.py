"""Side-by-side comparison of the single pass against textbook Dijkstra."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .dijkstra import dijkstra_reference
from .engine import RelaxationResult
from .graph import VertexKey, WeightedGraph

Distance = Union[int, float]


@dataclass(frozen=True)
class ComparisonRow:
    key: VertexKey
    single_pass: Distance
    reference: Distance

    @property
    def agrees(self) -> bool:
        return self.single_pass == self.reference


def compare_with_reference(
    graph: WeightedGraph, result: Optional[RelaxationResult] = None
) -> List[ComparisonRow]:
    """Return one row per vertex, in table order.

    The source row is skipped, since the engine leaves it at the sentinel while
    Dijkstra reports ``0``.
    """
    if result is None:
        result = graph.compute_shortest_paths()
    ref = dijkstra_reference(graph, result.source)
    return [
        ComparisonRow(entry.key, entry.distance_from_start, ref.distances[entry.key])
        for entry in result
        if entry.key != result.source
    ]


def comparison_summary(rows: List[ComparisonRow]) -> Dict[str, object]:
    """Return counts and the keys whose distances differ."""
    diverging = [r.key for r in rows if not r.agrees]
    return {"vertices": len(rows), "agree": len(rows) - len(diverging), "diverging": diverging}
