"""Export utilities for computed distance tables."""

from __future__ import annotations

import json
from typing import Dict, List, Optional, Tuple, Union

from .engine import RelaxationResult
from .graph import VertexKey, WeightedGraph
from .table import Distance, is_unknown


def _json_distance(d: Distance) -> Optional[Union[int, float]]:
    return None if is_unknown(d) else d


def predecessor_edges(result: RelaxationResult) -> List[Tuple[VertexKey, VertexKey]]:
    """Return ``(previous, key)`` pairs for every row that has a predecessor."""
    return [(e.previous, e.key) for e in result if e.previous is not None]


def table_to_dict(result: RelaxationResult) -> Dict[str, object]:
    """Return a JSON-ready dict; unknown distances become ``None``."""
    return {
        "source": result.source,
        "rows": [
            {
                "key": e.key,
                "previous": e.previous,
                "distance_from_start": _json_distance(e.distance_from_start),
                "distance_from_previous": _json_distance(e.distance_from_previous),
            }
            for e in result
        ],
    }


def export_table_json(graph: WeightedGraph, result: RelaxationResult) -> str:
    """Return a JSON string with the edge list and the final table."""
    data = table_to_dict(result)
    data["edges"] = [{"start": e.start, "end": e.end, "weight": e.weight} for e in graph.edges]
    return json.dumps(data)


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")
    )


def export_tree_graphml(graph: WeightedGraph, result: RelaxationResult) -> str:
    """Return a minimal GraphML document of the predecessor edges.

    Each node carries its ``distance`` (omitted when unknown); edges point from
    the predecessor to the row's vertex.
    """
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="d" for="node" attr.name="distance" attr.type="double"/>')
    lines.append('  <graph id="G" edgedefault="directed">')
    for e in result:
        key = _escape(e.key)
        if is_unknown(e.distance_from_start):
            lines.append(f'    <node id="{key}"/>')
        else:
            lines.append(f'    <node id="{key}"><data key="d">{e.distance_from_start}</data></node>')
    for prev, key in predecessor_edges(result):
        lines.append(f'    <edge source="{_escape(prev)}" target="{_escape(key)}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)
