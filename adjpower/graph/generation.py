"""Random adjacency matrix generator with structural constraints and retry.

Edges are placed one at a time by sampling a uniformly random ordered pair
(i, j) and rejecting picks the mode does not allow. A generated matrix is
kept only if it forms a single component under forward-reachability BFS;
otherwise generation is retried with a fresh matrix, up to max_retries.
"""

import logging
from typing import Callable

import numpy as np

from adjpower.graph.connectivity import count_components
from adjpower.graph.types import GenerationMode
from adjpower.reproducibility.seed import get_rng

log = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 1000


class GraphGenerationError(Exception):
    """Raised when no single-component graph can be produced."""


class InvalidGenerationMode(ValueError):
    """Raised when a generation mode is not recognized."""


def parse_mode(mode: GenerationMode | str) -> GenerationMode:
    """Resolve a mode given as a member, its value ("SYMM") or its name ("SYMMETRICAL").

    Raises:
        InvalidGenerationMode: For unknown strings and for UNKNOWN itself.
    """
    if isinstance(mode, GenerationMode):
        resolved = mode
    else:
        try:
            resolved = GenerationMode(mode)
        except ValueError:
            try:
                resolved = GenerationMode[str(mode)]
            except KeyError:
                raise InvalidGenerationMode(
                    f"Unknown graph generation type: {mode!r}"
                ) from None
    if resolved is GenerationMode.UNKNOWN:
        raise InvalidGenerationMode("UNKNOWN is not a generation mode")
    return resolved


def max_edges(size: int, mode: GenerationMode | str) -> int:
    """Largest edge count the mode's placement rule can reach.

    DEFAULT: every cell, n^2.
    SYMMETRICAL / ANTISYMMETRICAL: one per unordered pair plus the diagonal.
    ASYMMETRICAL: one per unordered pair, no diagonal.
    """
    mode = parse_mode(mode)
    pairs = size * (size - 1) // 2
    if mode in (GenerationMode.SYMMETRICAL, GenerationMode.ANTISYMMETRICAL):
        return size + pairs
    if mode is GenerationMode.ASYMMETRICAL:
        return pairs
    return size * size


def min_edges(size: int) -> int:
    """Fewest edges that can connect size vertices (a spanning tree)."""
    return max(size - 1, 0)


# ── Placement rules ──────────────────────────────────────────────────
# Each rule gets the matrix and a sampled pair, and returns True when the
# pick was accepted (and the matrix updated).


def _place_default(matrix: np.ndarray, i: int, j: int) -> bool:
    if matrix[i, j] != 0:
        return False
    matrix[i, j] = 1
    return True


def _place_symmetrical(matrix: np.ndarray, i: int, j: int) -> bool:
    if matrix[i, j] != 0:
        return False
    matrix[i, j] = 1
    matrix[j, i] = 1
    return True


def _place_antisymmetrical(matrix: np.ndarray, i: int, j: int) -> bool:
    if matrix[i, j] != 0 or matrix[j, i] != 0:
        return False
    matrix[i, j] = 1
    return True


def _place_asymmetrical(matrix: np.ndarray, i: int, j: int) -> bool:
    if i == j or matrix[i, j] != 0 or matrix[j, i] != 0:
        return False
    matrix[i, j] = 1
    return True


PLACEMENT_RULES: dict[GenerationMode, Callable[[np.ndarray, int, int], bool]] = {
    GenerationMode.DEFAULT: _place_default,
    GenerationMode.SYMMETRICAL: _place_symmetrical,
    GenerationMode.ANTISYMMETRICAL: _place_antisymmetrical,
    GenerationMode.ASYMMETRICAL: _place_asymmetrical,
}


def sample_adjacency(
    size: int,
    edge_number: int,
    mode: GenerationMode | str,
    rng: np.random.Generator,
) -> np.ndarray:
    """Place exactly edge_number edges into a fresh size x size zero matrix.

    Caller must ensure edge_number <= max_edges(size, mode); the rejection
    loop only terminates when enough legal cells exist.

    Returns:
        int64 adjacency matrix with 0/1 entries.
    """
    place = PLACEMENT_RULES[parse_mode(mode)]
    matrix = np.zeros((size, size), dtype=np.int64)
    edges_added = 0

    while edges_added < edge_number:
        i, j = (int(v) for v in rng.integers(0, size, size=2))
        if place(matrix, i, j):
            edges_added += 1

    return matrix


def validate_request(size: int, edge_number: int, mode: GenerationMode | str) -> list[str]:
    """Check generation parameters against what the mode can produce.

    Returns:
        List of error strings (empty = parameters are feasible).
    """
    errors: list[str] = []
    upper = max_edges(size, mode)
    if edge_number > upper:
        errors.append(
            f"edge_number {edge_number} exceeds the maximum {upper} "
            f"for {parse_mode(mode).name} graphs with {size} vertices"
        )
    lower = min_edges(size)
    if edge_number < lower:
        errors.append(
            f"edge_number {edge_number} is below {lower}; "
            f"{size} vertices cannot form a single component"
        )
    return errors


def generate_adjacency(
    size: int,
    edge_number: int,
    mode: GenerationMode | str,
    rng: np.random.Generator | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> tuple[np.ndarray, int]:
    """Generate a single-component adjacency matrix by rejection sampling.

    Args:
        size: Number of vertices.
        edge_number: Number of edges to place.
        mode: Generation mode (member, value or name).
        rng: numpy random Generator; the shared one from
            adjpower.reproducibility.get_rng if None.
        max_retries: Maximum generation attempts before raising.

    Returns:
        (matrix, attempt) where attempt is the 0-indexed successful try.

    Raises:
        InvalidGenerationMode: If mode is not recognized.
        ValueError: If size or edge_number is negative.
        GraphGenerationError: If the parameters are infeasible or no
            single-component matrix was found within max_retries.
    """
    mode = parse_mode(mode)
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    if edge_number < 0:
        raise ValueError(f"edge_number must be >= 0, got {edge_number}")
    errors = validate_request(size, edge_number, mode)
    if errors:
        raise GraphGenerationError("; ".join(errors))

    if size == 0:
        return np.zeros((0, 0), dtype=np.int64), 0

    if rng is None:
        rng = get_rng()

    for attempt in range(max_retries):
        matrix = sample_adjacency(size, edge_number, mode, rng)
        components = count_components(matrix)
        if components == 1:
            log.info(
                "Graph generated on attempt %d (size=%d, edges=%d, mode=%s)",
                attempt,
                size,
                edge_number,
                mode.name,
            )
            return matrix, attempt
        log.debug(
            "Generation attempt %d rejected: %d components", attempt, components
        )

    log.warning(
        "Graph generation gave up after %d attempts (size=%d, edges=%d, mode=%s)",
        max_retries,
        size,
        edge_number,
        mode.name,
    )
    raise GraphGenerationError(
        f"Failed to generate a connected {mode.name} graph with {size} vertices "
        f"and {edge_number} edges after {max_retries} attempts"
    )
