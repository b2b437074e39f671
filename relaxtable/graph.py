"""Edge store and adjacency index for weighted graphs keyed by vertex name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from .exceptions import EmptyGraphError, InputError, NegativeWeightError

if TYPE_CHECKING:  # pragma: no cover
    from .engine import EngineConfig, RelaxationResult
    from .logger import Logger

VertexKey = str
Weight = int
EdgeTuple = Tuple[VertexKey, VertexKey, Weight]


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge as it was supplied to the graph."""

    start: VertexKey
    end: VertexKey
    weight: Weight

    def as_tuple(self) -> EdgeTuple:
        return (self.start, self.end, self.weight)


@dataclass
class Vertex:
    """Adjacency entry for a key that has at least one outgoing edge.

    Attributes:
        key: Vertex identifier.
        adjacent: Outgoing ``(neighbor_key, weight)`` pairs in the order the
            edges were added.
    """

    key: VertexKey
    adjacent: List[Tuple[VertexKey, Weight]] = field(default_factory=list)


def _check_key(key: object, role: str) -> VertexKey:
    if not isinstance(key, str) or not key:
        raise InputError(f"{role} vertex must be a non-empty string, got {key!r}")
    return key


class WeightedGraph:
    """Directed graph with non-negative integer weights, built edge by edge.

    The graph keeps two views of the same data: the ordered edge store (which
    fixes the source vertex and the distance-table row order) and the
    adjacency index (which drives the relaxation pass). Vertices that only
    ever appear as an edge end have no adjacency entry.

    Examples:
        ```python
        >>> g = WeightedGraph()
        >>> g.add_edge("a", "b", 1)
        >>> g.add_edge("a", "c", 2)
        >>> g.source
        'a'
        >>> g.adjacency["a"].adjacent
        [('b', 1), ('c', 2)]
        ```
    """

    def __init__(self) -> None:
        self.edges: List[Edge] = []
        self.adjacency: Dict[VertexKey, Vertex] = {}

    def add_edge(self, start: VertexKey, end: VertexKey, weight: Weight) -> None:
        """Add a directed edge from ``start`` to ``end``.

        Args:
            start: Tail vertex key.
            end: Head vertex key.
            weight: Non-negative integer weight.

        Raises:
            InputError: If a key is empty or ``weight`` is not an integer.
            NegativeWeightError: If ``weight`` is negative.
        """
        _check_key(start, "start")
        _check_key(end, "end")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InputError(f"non-integer weight {weight!r} on edge ({start}, {end})")
        if weight < 0:
            raise NegativeWeightError(f"negative weight {weight} on edge ({start}, {end})")

        self.edges.append(Edge(start, end, weight))
        vertex = self.adjacency.get(start)
        if vertex is None:
            vertex = Vertex(start)
            self.adjacency[start] = vertex
        vertex.adjacent.append((end, weight))

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeTuple]) -> "WeightedGraph":
        """Create a graph from an iterable of ``(start, end, weight)`` tuples."""
        g = cls()
        for start, end, weight in edges:
            g.add_edge(start, end, weight)
        return g

    @property
    def source(self) -> Optional[VertexKey]:
        """Start endpoint of the first edge added, or ``None`` if empty."""
        if not self.edges:
            return None
        return self.edges[0].start

    def require_source(self) -> VertexKey:
        """Return :attr:`source`, raising :class:`EmptyGraphError` if unset."""
        if not self.edges:
            raise EmptyGraphError("graph has no edges; no source vertex can be determined")
        return self.edges[0].start

    def vertex_keys(self) -> List[VertexKey]:
        """Return every key seen in the edge store, in first-seen order."""
        seen: Dict[VertexKey, None] = {}
        for edge in self.edges:
            seen.setdefault(edge.start, None)
            seen.setdefault(edge.end, None)
        return list(seen)

    def out_degree(self, key: VertexKey) -> int:
        """Return the number of outgoing edges recorded for ``key``."""
        vertex = self.adjacency.get(key)
        return len(vertex.adjacent) if vertex is not None else 0

    def __len__(self) -> int:
        return len(self.edges)

    def compute_shortest_paths(
        self,
        config: Optional["EngineConfig"] = None,
        logger: Optional["Logger"] = None,
    ) -> "RelaxationResult":
        """Initialize a fresh distance table, run one pass and return it.

        Raises:
            EmptyGraphError: If no edge has been added.
        """
        from .engine import RelaxationEngine

        return RelaxationEngine(self, config=config, logger=logger).solve()
