"""Command-line interface for computing and printing distance tables."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from typing import Dict, List, Optional

from .compare import compare_with_reference, comparison_summary
from .engine import EngineConfig, RelaxationEngine
from .exceptions import (
    ConfigError,
    EmptyGraphError,
    InputError,
    RelaxTableError,
    UnknownVertexError,
)
from .export import export_table_json, export_tree_graphml, table_to_dict
from .graph import WeightedGraph
from .io import FORMATS, read_graph
from .logger import LEVELS, StdLogger
from .path import reconstruct_path
from .render import format_report
from .samples import sample_graph

EXAMPLE_CSV = """# start,end,weight
a,b,12
b,c,3
b,d,5
d,c,1
c,a,2
"""


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  relaxtable --sample 1\n"
        "  relaxtable --edges graph.csv --target c\n"
        "  relaxtable --sample 3 --json --compare\n"
    )
    p = argparse.ArgumentParser(
        prog="relaxtable",
        description="Single-pass shortest-path table for a weighted edge list",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument("--log-level", choices=sorted(LEVELS), default="warning", help="Log verbosity")
    p.add_argument("--trace", action="store_true", help="Log every row update (debug level)")

    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--sample", type=int, help="Use canned graph 1, 2 or 3 (others: default)")
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Edge file format (auto-detected from extension)",
    )

    p.add_argument(
        "--unprotected-source",
        action="store_true",
        help="Allow the backward sweep and source self-loops to write the source row",
    )
    p.add_argument("--json", action="store_true", help="Print the table as JSON")
    p.add_argument("--target", type=str, default=None, help="Vertex to reconstruct a path to")
    p.add_argument("--compare", action="store_true", help="Compare against textbook Dijkstra")

    p.add_argument("--export-json", type=str, default=None, help="Write edges and table as JSON")
    p.add_argument(
        "--export-graphml",
        type=str,
        default=None,
        help="Write predecessor edges as GraphML",
    )
    p.add_argument("--export-matrix", type=str, default=None, help="Write the weight matrix as CSV")
    p.add_argument("--plot", type=str, default=None, help="Save a drawing of the result (PNG, SVG)")
    p.add_argument(
        "--metrics-out",
        type=str,
        default=None,
        help="Write run metrics to this JSON file",
    )
    return p


def _load(args: argparse.Namespace) -> WeightedGraph:
    if args.sample is not None:
        return sample_graph(args.sample)
    return read_graph(args.edges, args.format)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``relaxtable`` command-line tool."""
    p = _build_parser()
    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return 0

    try:
        if args.format is not None and args.edges is None:
            raise ConfigError("--format only applies to --edges")
        graph = _load(args)

        stream = sys.stdout if args.log_json and not args.json else sys.stderr
        level = "debug" if args.trace else args.log_level
        logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)
        cfg = EngineConfig(protect_source=not args.unprotected_source, trace=args.trace)

        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: edges={len(graph)} source={graph.source} "
                f"protect_source={cfg.protect_source}\n"
            )

        engine = RelaxationEngine(graph, config=cfg, logger=logger)
        t0 = time.perf_counter()
        result = engine.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0

        out: Dict[str, object] = table_to_dict(result)
        extra: List[str] = []
        if args.target is not None:
            route = reconstruct_path(result, args.target)
            out["target"] = args.target
            out["path"] = route
            extra.append(f"Path to {args.target}: " + (" -> ".join(route) if route else "none"))
        if args.compare:
            summary = comparison_summary(compare_with_reference(graph, result))
            out["comparison"] = summary
            extra.append(
                f"Agrees with Dijkstra on {summary['agree']}/{summary['vertices']} vertices"
                + (f"; diverging: {', '.join(summary['diverging'])}" if summary["diverging"] else "")
            )

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_table_json(graph, result))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_tree_graphml(graph, result))
        if args.export_matrix:
            from .graph_numpy import save_weight_matrix

            save_weight_matrix(graph, args.export_matrix)
        if args.plot:
            from .visualize import draw_result

            draw_result(graph, result, args.plot)
        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(engine.metrics(wall_ms=wall_ms)), fh)

        logger.info("run", edges=len(graph), rows=len(result), wall_ms=round(wall_ms, 3))

        if args.json:
            print(json.dumps(out))
        else:
            print(format_report(graph, result))
            for line in extra:
                print(line)
        return 0

    except (InputError, ConfigError, EmptyGraphError, UnknownVertexError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except RelaxTableError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
