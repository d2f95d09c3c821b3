"""Command-line interface for sgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from sgraph.algorithms import (
    bfs_layers,
    disjoint_shortest_paths,
    graph_vertices,
    shortest_with,
    successors,
)
from sgraph.config import GENERATOR_CONFIG
from sgraph.generate import random_matrix
from sgraph.io import (
    dump_matrix_yaml,
    format_layers,
    format_matrix,
    format_paths,
    format_vector,
    load_graphs_yaml,
)
from sgraph.logging import get_logger, set_global_log_level
from sgraph.sparse.matrix import matrix_entries
from sgraph.sparse.vector import SparseVector

logger = get_logger(__name__)


def _generate(
    size: int,
    density: Optional[float],
    seed: Optional[int],
    shape: Optional[str],
    low: Optional[int],
    high: Optional[int],
    as_yaml: bool,
) -> None:
    value_range = None
    if low is not None or high is not None:
        value_range = (
            GENERATOR_CONFIG.value_low if low is None else low,
            GENERATOR_CONFIG.value_high if high is None else high,
        )
    try:
        m = random_matrix(seed, size, density, value_range, shape)
    except ValueError as e:
        logger.error(f"Invalid generator arguments: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)

    logger.info(f"Generated {size}x{size} matrix with {matrix_entries(m)} entries")
    print(dump_matrix_yaml(m) if as_yaml else format_matrix(m))


def _reach(
    path: Path,
    start: List[int],
    target: Optional[List[int]],
    paths: bool,
) -> None:
    _start_time = perf_counter()
    negative = [v for v in [*start, *(target or [])] if v < 0]
    if negative:
        logger.error(f"Invalid vertex arguments: {negative}")
        print(f"ERROR: Vertex indices must be non-negative, got {negative}")
        sys.exit(1)

    try:
        graphs = load_graphs_yaml(path.read_text())
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid graph file {path}: {e}")
        print(f"ERROR: Invalid graph file {path}: {e}")
        sys.exit(1)

    logger.info(
        f"Loaded {len(graphs)} graph(s) over "
        f"{len(graph_vertices(graphs))} vertices from {path}"
    )

    layers = bfs_layers(start, graphs)
    print(format_layers(layers))

    if target:
        hit = shortest_with(
            successors,
            SparseVector.from_indices(start),
            SparseVector.from_indices(target),
            graphs,
        )
        if hit:
            print("shortest:")
            print(format_vector(hit))
        else:
            print("shortest: unreachable")

        if paths:
            found = disjoint_shortest_paths(start, target, graphs)
            print(f"disjoint paths: {len(found)}")
            if found:
                print(format_paths(found))

    logger.info(f"Reachability finished in {perf_counter() - _start_time:.3f} s")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``sgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="sgraph",
        description="Generate sparse graphs and run reachability queries.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{generate,reach}",
        help="Available commands",
    )

    gen_parser = subparsers.add_parser("generate", help="Print a random matrix")
    gen_parser.add_argument("--size", "-n", type=int, required=True)
    gen_parser.add_argument("--density", "-d", type=float, default=None)
    gen_parser.add_argument("--seed", "-s", type=int, default=None)
    gen_parser.add_argument(
        "--shape",
        default=None,
        help="square, diagonal, triangular or strict-triangular",
    )
    gen_parser.add_argument("--low", type=int, default=None, help="Smallest value")
    gen_parser.add_argument("--high", type=int, default=None, help="Largest value")
    gen_parser.add_argument(
        "--yaml", action="store_true", help="Emit YAML accepted by 'reach'"
    )

    reach_parser = subparsers.add_parser(
        "reach", help="BFS layers, shortest hit and disjoint paths"
    )
    reach_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    reach_parser.add_argument(
        "--start", nargs="+", type=int, required=True, help="Start vertices"
    )
    reach_parser.add_argument(
        "--target", nargs="+", type=int, default=None, help="Target vertices"
    )
    reach_parser.add_argument(
        "--paths",
        action="store_true",
        help="Also extract vertex-disjoint shortest paths to the targets",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "generate":
        _generate(
            size=args.size,
            density=args.density,
            seed=args.seed,
            shape=args.shape,
            low=args.low,
            high=args.high,
            as_yaml=args.yaml,
        )
    elif args.command == "reach":
        _reach(
            path=args.graph,
            start=args.start,
            target=args.target,
            paths=args.paths,
        )


if __name__ == "__main__":
    main()
