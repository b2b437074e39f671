"""Single-pass relaxation engine with a one-level backward sweep."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .exceptions import AlgorithmError, UnknownVertexError
from .graph import Vertex, VertexKey, WeightedGraph
from .logger import Logger, NoopLogger
from .table import Distance, DistanceTable, DistanceTableRow, add_distance, is_unknown


@dataclass(frozen=True)
class EngineConfig:
    """Configuration knobs for the engine.

    Attributes:
        protect_source: If ``True``, the source row is never written, so it
            keeps ``previous=None`` and the sentinel distance for every graph.
            If ``False``, a backward sweep or a source self-loop may update it.
        trace: If ``True``, emit a ``debug`` event for every row update.
    """

    protect_source: bool = True
    trace: bool = False


@dataclass(frozen=True)
class PathEntry:
    """Final state of one distance-table row."""

    key: VertexKey
    previous: Optional[VertexKey]
    distance_from_start: Distance
    distance_from_previous: Distance


@dataclass(frozen=True)
class RelaxationResult:
    """Source key plus the final table, in row-creation order."""

    source: VertexKey
    paths: Dict[VertexKey, PathEntry]

    @classmethod
    def from_table(cls, source: VertexKey, table: DistanceTable) -> "RelaxationResult":
        paths = {
            row.key: PathEntry(
                key=row.key,
                previous=row.previous,
                distance_from_start=row.distance_from_start,
                distance_from_previous=row.distance_from_previous,
            )
            for row in table
        }
        return cls(source=source, paths=paths)

    def entry(self, key: VertexKey) -> PathEntry:
        """Return the entry for ``key``.

        Raises:
            UnknownVertexError: If ``key`` is not in the table.
        """
        try:
            return self.paths[key]
        except KeyError:
            raise UnknownVertexError(f"no distance-table row for vertex {key!r}") from None

    def distance(self, key: VertexKey) -> Distance:
        return self.entry(key).distance_from_start

    def previous(self, key: VertexKey) -> Optional[VertexKey]:
        return self.entry(key).previous

    def keys(self) -> List[VertexKey]:
        return list(self.paths)

    def __iter__(self) -> Iterator[PathEntry]:
        return iter(self.paths.values())

    def __len__(self) -> int:
        return len(self.paths)


@dataclass(frozen=True)
class RelaxationMetrics:
    """Counters and timing collected from one engine run."""

    n: int
    m: int
    source: VertexKey
    counters: Dict[str, int]
    wall_ms: float


class RelaxationEngine:
    """Computes the distance table for a :class:`WeightedGraph` in one pass.

    The pass walks the adjacency index once, in vertex-creation order, and
    applies one of three update rules per out-edge:

    * Case A: the edge leads back to the source from a non-source vertex.
      A cheaper direct hop rewrites the current row, then every vertex with an
      edge into the current vertex is re-checked once (the backward sweep).
    * Case B: the current vertex is the source; neighbours take the edge
      weight as their distance if it is smaller.
    * Case C: neither endpoint is the source; ordinary relaxation, except when
      the neighbour was last set directly from the source, in which case its
      predecessor is overwritten unconditionally.

    The rules are not a fixpoint computation and do not always produce true
    shortest paths.
    """

    def __init__(
        self,
        graph: WeightedGraph,
        config: Optional[EngineConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        self.graph = graph
        self.cfg = config or EngineConfig()
        self.logger = logger or NoopLogger()
        self.table: Optional[DistanceTable] = None
        self.source: Optional[VertexKey] = None
        self.counters: Dict[str, int] = {}
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.counters = {
            "vertices_visited": 0,
            "edges_examined": 0,
            "case_a": 0,
            "case_b": 0,
            "case_c": 0,
            "backward_sweeps": 0,
            "sweep_updates": 0,
            "updates": 0,
        }

    # ---------- initialization --------------------------------------------

    def initialize(self) -> VertexKey:
        """Build a fresh sentinel table from the edge store.

        Returns:
            The source key (start of the first edge).

        Raises:
            EmptyGraphError: If the graph has no edges.
        """
        source = self.graph.require_source()
        table = DistanceTable()
        for edge in self.graph.edges:
            table.set_row(DistanceTableRow(edge.start))
            table.set_row(DistanceTableRow(edge.end))
        self.table = table
        self.source = source
        self._reset_counters()
        self.logger.info("initialize", source=source, rows=len(table), edges=len(self.graph))
        return source

    # ---------- update rules ----------------------------------------------

    def _trace(self, case: str, row: DistanceTableRow) -> None:
        self.counters["updates"] += 1
        if self.cfg.trace:
            self.logger.debug(
                "relax",
                case=case,
                key=row.key,
                previous=row.previous,
                distance=row.distance_from_start,
            )

    def _backward_sweep(self, current: DistanceTableRow, source: VertexKey) -> None:
        table = self._table()
        self.counters["backward_sweeps"] += 1
        for entry in self.graph.adjacency.values():
            if entry.key == current.key:
                continue
            if self.cfg.protect_source and entry.key == source:
                continue
            for neighbor, w2 in entry.adjacent:
                if neighbor != current.key:
                    continue
                row = table.row(entry.key)
                candidate = add_distance(w2, current.distance_from_start)
                if candidate < row.distance_from_start:
                    row.update(current.key, candidate, w2)
                    self.counters["sweep_updates"] += 1
                    self._trace("sweep", row)

    def _case_a(self, current: DistanceTableRow, w: int, source: VertexKey) -> None:
        self.counters["case_a"] += 1
        if w < current.distance_from_start:
            current.update(source, w, w)
            self._trace("A", current)
            self._backward_sweep(current, source)

    def _case_b(self, current: Vertex, neighbor: DistanceTableRow, w: int, source: VertexKey) -> None:
        self.counters["case_b"] += 1
        if self.cfg.protect_source and neighbor.key == source:
            return
        if w < neighbor.distance_from_start:
            neighbor.update(current.key, w, w)
            self._trace("B", neighbor)

    def _case_c(
        self,
        current: DistanceTableRow,
        neighbor: DistanceTableRow,
        w: int,
        source: VertexKey,
    ) -> None:
        self.counters["case_c"] += 1
        if neighbor.previous != source:
            candidate = add_distance(current.distance_from_start, w)
            if candidate < neighbor.distance_from_start:
                neighbor.update(current.key, candidate, w)
                self._trace("C", neighbor)
            return

        # neighbour was set directly from the source earlier in this pass
        via_prev_hop = add_distance(current.distance_from_start, neighbor.distance_from_previous)
        if is_unknown(neighbor.distance_from_start) or via_prev_hop < neighbor.distance_from_start:
            neighbor.distance_from_start = via_prev_hop
            neighbor.previous = current.key
            self._trace("C", neighbor)

        if not is_unknown(current.distance_from_start):
            # predecessor moves even when the distance does not improve
            neighbor.previous = current.key
            neighbor.distance_from_previous = w
            total = w + current.distance_from_start
            if total < neighbor.distance_from_start:
                neighbor.distance_from_start = total
            self._trace("C", neighbor)

    # ---------- pass --------------------------------------------------------

    def _table(self) -> DistanceTable:
        if self.table is None:
            raise AlgorithmError("call initialize() before run()")
        return self.table

    def run(self) -> None:
        """Run the single relaxation pass over the initialized table."""
        table = self._table()
        source = self.source
        if source is None:
            raise AlgorithmError("call initialize() before run()")

        for current in self.graph.adjacency.values():
            if not current.adjacent:
                continue
            self.counters["vertices_visited"] += 1
            current_row = table.row(current.key)
            is_source_row = current.key == source

            for neighbor_key, w in current.adjacent:
                self.counters["edges_examined"] += 1
                neighbor_row = table.row(neighbor_key)
                if neighbor_key == source and not is_source_row:
                    self._case_a(current_row, w, source)
                elif is_source_row:
                    self._case_b(current, neighbor_row, w, source)
                else:
                    self._case_c(current_row, neighbor_row, w, source)

        self.logger.info("pass_complete", source=source, **self.counters)

    def solve(self) -> RelaxationResult:
        """Initialize a fresh table, run the pass and return the result."""
        source = self.initialize()
        self.run()
        return RelaxationResult.from_table(source, self._table())

    # ---------- counters ----------------------------------------------------

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> RelaxationMetrics:
        """Return counters and run parameters for the most recent run."""
        return RelaxationMetrics(
            n=len(self.table) if self.table is not None else 0,
            m=len(self.graph),
            source=self.source or "",
            counters=self.summary(),
            wall_ms=wall_ms,
        )


def compute_shortest_paths(
    graph: WeightedGraph,
    config: Optional[EngineConfig] = None,
    logger: Logger | None = None,
) -> RelaxationResult:
    """Run initialization and the relaxation pass on ``graph``."""
    return RelaxationEngine(graph, config=config, logger=logger).solve()
