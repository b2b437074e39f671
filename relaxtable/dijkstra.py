"""Reference Dijkstra implementation used for comparisons."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple, Union

from .graph import VertexKey, WeightedGraph

Distance = Union[int, float]


@dataclass(frozen=True)
class ReferenceResult:
    """Distances and predecessors from a textbook Dijkstra run."""

    source: VertexKey
    distances: Dict[VertexKey, Distance]
    predecessors: Dict[VertexKey, Optional[VertexKey]]


def dijkstra_reference(graph: WeightedGraph, source: Optional[VertexKey] = None) -> ReferenceResult:
    """Run the standard Dijkstra algorithm over the directed edges of ``graph``.

    Unlike the relaxation engine, the source gets distance ``0`` and only
    ``start -> end`` edges are followed.

    Args:
        graph: Input graph with non-negative weights.
        source: Start vertex; defaults to the graph's source.

    Raises:
        EmptyGraphError: If ``source`` is omitted and the graph has no edges.
    """
    src = source if source is not None else graph.require_source()
    dist: Dict[VertexKey, Distance] = {k: math.inf for k in graph.vertex_keys()}
    pred: Dict[VertexKey, Optional[VertexKey]] = {k: None for k in dist}
    dist[src] = 0
    pq: List[Tuple[Distance, VertexKey]] = [(0, src)]
    seen: Set[VertexKey] = set()
    while pq:
        d, u = heapq.heappop(pq)
        if d != dist[u] or u in seen:
            continue
        seen.add(u)
        vertex = graph.adjacency.get(u)
        if vertex is None:
            continue
        for v, w in vertex.adjacent:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                pred[v] = u
                heapq.heappush(pq, (nd, v))
    return ReferenceResult(source=src, distances=dist, predecessors=pred)
