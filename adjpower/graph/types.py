"""Graph data types: generation modes and derived statistics."""

from dataclasses import dataclass
from enum import StrEnum


class GenerationMode(StrEnum):
    """Structural constraint used to place edges, or the classified type.

    DEFAULT: unrestricted directed graph, self-loops allowed.
    SYMMETRICAL: undirected graph, every edge mirrored.
    ANTISYMMETRICAL: at most one direction per vertex pair.
    ASYMMETRICAL: at most one direction per pair and no self-loops.
    UNKNOWN: not a generation mode; only ever a placeholder type.
    """

    DEFAULT = "DEFAULT"
    SYMMETRICAL = "SYMM"
    ANTISYMMETRICAL = "ANTISYMM"
    ASYMMETRICAL = "ASYMM"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class GraphStats:
    """Snapshot of the derived statistics of a graph.

    connected_components follows the forward-reachability clustering used
    for generation. weak_components and strong_components are the textbook
    counts, reported for comparison only.
    """

    size: int
    gen_type: GenerationMode
    edge_number: int
    sum_weights: int
    connected_components: int
    weak_components: int
    strong_components: int
