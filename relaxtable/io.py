"""Graph input/output helpers.

Both formats keep edges in file order, so the first edge (and with it the
source vertex) survives a write/read round trip.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .exceptions import GraphFormatError, InputError
from .graph import EdgeTuple, WeightedGraph

EdgeList = List[EdgeTuple]


def _parse_weight(raw: object, path: Path, lineno: int) -> int:
    if isinstance(raw, bool):
        raise GraphFormatError(f"{path}:{lineno}: invalid weight {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        raise GraphFormatError(f"{path}:{lineno}: invalid weight {raw!r}") from None


def _read_csv(path: Path) -> EdgeList:
    """Read ``start,end,weight`` rows.

    Lines starting with ``#`` and blank lines are ignored; tabs are accepted
    as separators.

    Raises:
        GraphFormatError: If a row has fewer than three columns or a
            non-integer weight, or if the file holds no edges.
    """
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = [p.strip() for p in row.replace("\t", ",").split(",")]
            if len(parts) < 3:
                raise GraphFormatError(f"{path}:{lineno}: expected start,end,weight")
            edges.append((parts[0], parts[1], _parse_weight(parts[2], path, lineno)))
    if not edges:
        raise GraphFormatError(f"no edges parsed from {path}")
    return edges


def _write_csv(path: Path, graph: WeightedGraph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write("# start,end,weight\n")
        for e in graph.edges:
            fh.write(f"{e.start},{e.end},{e.weight}\n")


def _read_jsonl(path: Path) -> EdgeList:
    """Read one ``{"start": ..., "end": ..., "weight": ...}`` object per line."""
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                start, end, weight = obj["start"], obj["end"], obj["weight"]
            except (json.JSONDecodeError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"{path}:{lineno}: {exc}") from exc
            if not isinstance(start, str) or not isinstance(end, str):
                raise GraphFormatError(
                    f"{path}:{lineno}: vertex keys must be strings, got {start!r} and {end!r}"
                )
            edges.append((start, end, _parse_weight(weight, path, lineno)))
    if not edges:
        raise GraphFormatError(f"no edges parsed from {path}")
    return edges


def _write_jsonl(path: Path, graph: WeightedGraph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for e in graph.edges:
            fh.write(json.dumps({"start": e.start, "end": e.end, "weight": e.weight}) + "\n")


_FMT_READERS: Dict[str, Callable[[Path], EdgeList]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
}

_FMT_WRITERS: Dict[str, Callable[[Path, WeightedGraph], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
}

FORMATS = sorted(_FMT_READERS)


def detect_format(path: Path) -> Optional[str]:
    """Return ``"csv"`` or ``"jsonl"`` based on the file extension, else ``None``."""
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv", ".txt"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    return None


def read_graph(path: str, fmt: Optional[str] = None) -> WeightedGraph:
    """Read a graph from ``path``.

    Args:
        path: Edge file.
        fmt: ``"csv"`` or ``"jsonl"``; auto-detected when ``None``.

    Raises:
        InputError: If the path is not a readable file.
        GraphFormatError: If the format is unknown or the file is malformed.
        NegativeWeightError: If an edge carries a negative weight.
    """
    p = Path(path)
    if not p.is_file():
        raise InputError(f"edges file not found: {path}")
    fmt = fmt or detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError(f"unknown graph format for {path}")
    try:
        edges = _FMT_READERS[fmt](p)
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{path}: not valid UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise InputError(f"cannot read edges file {path}: {exc.strerror or exc}") from exc
    return WeightedGraph.from_edges(edges)


def write_graph(graph: WeightedGraph, path: str, fmt: Optional[str] = None) -> None:
    """Write ``graph`` to ``path`` in ``fmt`` (auto-detected when ``None``)."""
    p = Path(path)
    fmt = fmt or detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError(f"unknown graph format for {path}")
    _FMT_WRITERS[fmt](p, graph)
