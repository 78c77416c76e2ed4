#!/usr/bin/env python3
"""Entry point for generating a graph and computing one of its matrix powers.

Chains the stages into a single command:
seed -> graph generation -> matrix power -> summary.

Usage:
    python run_exercise.py --config config.json
    python run_exercise.py --config config.json --operation tropical --power 3
    python run_exercise.py --config config.json --dry-run
    python run_exercise.py --config config.json --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import numpy as np
from dacite import DaciteError

from adjpower.algebra import InvalidPower, MultiplyType
from adjpower.config import SessionConfig, config_from_json
from adjpower.graph import Graph, GraphGenerationError

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s")
    log.info("Completed: %s in %.3fs", name, elapsed)


def format_matrix(matrix: np.ndarray) -> str:
    """Right-aligned rows, one per line."""
    if matrix.size == 0:
        return "[]"
    width = max(len(str(v)) for v in matrix.flat)
    return "\n".join(
        " ".join(str(v).rjust(width) for v in row) for row in matrix.tolist()
    )


def print_stats(graph: Graph) -> None:
    stats = graph.stats()
    print(f"  Type:       {stats.gen_type.name}")
    print(f"  Edges:      {stats.edge_number}")
    print(f"  Weights:    {stats.sum_weights}")
    print(f"  Components: {stats.connected_components} "
          f"(weak={stats.weak_components}, strong={stats.strong_components})")


def run_pipeline(
    config: SessionConfig, operation: MultiplyType, power: int
) -> Graph:
    """Generate the configured graph and raise it to the given power.

    Args:
        config: Session configuration.
        operation: Multiplication type.
        power: Exponent, >= 1.

    Returns:
        The graph after the power operation.
    """
    # Lazy imports to keep --dry-run fast
    from adjpower.graph.factory import generate_graph
    from adjpower.reproducibility import get_rng, set_seed

    with stage_timer("Set seed"):
        set_seed(config.seed)

    with stage_timer("Graph generation"):
        graph = generate_graph(config, rng=get_rng())
        print(format_matrix(graph.matrix))
        print_stats(graph)

    with stage_timer(f"{operation.value.capitalize()} power {power}"):
        graph.multiply(power, operation)
        print(format_matrix(graph.matrix))
        print_stats(graph)

    return graph


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a random graph and compute a power of its adjacency matrix"
    )
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to session config JSON file",
    )
    parser.add_argument(
        "--operation",
        choices=[m.value for m in MultiplyType],
        default=None,
        help="Multiplication type (defaults to the config's exercise operation)",
    )
    parser.add_argument(
        "--power",
        type=int,
        default=None,
        help="Exponent (defaults to the config's exercise max_power)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the plan without generating anything",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load config
    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = config_from_json(config_path.read_text())
    except (ValueError, DaciteError) as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(1)

    operation = MultiplyType(args.operation or config.exercise.operation)
    power = args.power if args.power is not None else config.exercise.max_power

    print(f"Graph:    size={config.graph.size}, edges={config.graph.edge_number}, "
          f"mode={config.graph.mode.name}")
    print(f"Power:    {operation.value} ^ {power}")
    print(f"Seed:     {config.seed}")

    if args.dry_run:
        print("\nPipeline plan:")
        print("  1. Set seed")
        print("  2. Graph generation")
        print(f"  3. {operation.value.capitalize()} power {power}")
        print("\n[dry-run] No computation performed.")
        return

    try:
        run_pipeline(config, operation, power)
    except (GraphGenerationError, InvalidPower) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
