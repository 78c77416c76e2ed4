"""Graph entity: adjacency matrix, generation, derived stats and powers."""

import logging

import numpy as np

from adjpower.algebra.power import check_power, matrix_power
from adjpower.algebra.semiring import MultiplyType
from adjpower.graph.classification import classify
from adjpower.graph.connectivity import (
    count_components,
    neighbors,
    strong_components,
    weak_components,
)
from adjpower.graph.generation import (
    DEFAULT_MAX_RETRIES,
    generate_adjacency,
    parse_mode,
)
from adjpower.graph.types import GenerationMode, GraphStats

log = logging.getLogger(__name__)


class HiddenCellsError(ValueError):
    """Raised when an operation needs a fully revealed matrix."""


def _logical_cells(matrix: np.ndarray, gen_type: GenerationMode) -> np.ndarray:
    """Cells that carry one logical edge each under the counting convention.

    A symmetric graph stores every undirected edge twice, so only the upper
    triangle (diagonal included) is counted. gen_type can be stale after
    change_edge, so the matrix itself must still be symmetric; otherwise
    every nonzero cell counts.
    """
    if gen_type is GenerationMode.SYMMETRICAL and np.array_equal(matrix, matrix.T):
        return np.triu(matrix)
    return matrix


def count_edges(matrix: np.ndarray, gen_type: GenerationMode = GenerationMode.DEFAULT) -> int:
    """Number of logical edges (strictly nonzero cells)."""
    return int(np.count_nonzero(_logical_cells(matrix, gen_type)))


def count_weights(matrix: np.ndarray, gen_type: GenerationMode = GenerationMode.DEFAULT) -> int:
    """Sum of logical edge weights."""
    return int(_logical_cells(matrix, gen_type).sum())


class Graph:
    """Square adjacency-matrix graph.

    Construction with size > 0 always yields a single forward-reachability
    component; see adjpower.graph.generation for the retry loop. Hidden
    cells (a learner's not-yet-entered answers) live in a separate boolean
    mask and store weight 0, so they never count as edges.

    Attributes:
        size: Number of vertices, fixed after construction.
        matrix: int64 array of shape (size, size); 0 means no edge.
        hidden: bool array of shape (size, size).
        gen_type: Requested mode, or the classified type after a power.
        edge_number: Logical edge count.
        sum_weights: Logical weight sum.
        connected_components: Forward-reachability component count.
    """

    def __init__(
        self,
        size: int = 0,
        edge_number: int = 0,
        mode: GenerationMode | str = GenerationMode.DEFAULT,
        *,
        rng: np.random.Generator | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        self.gen_type = parse_mode(mode)
        self.matrix, self.attempt = generate_adjacency(
            size, edge_number, self.gen_type, rng=rng, max_retries=max_retries
        )
        self.size = size
        self.hidden = np.zeros((size, size), dtype=bool)
        self.edge_number = edge_number
        self.sum_weights = count_weights(self.matrix, self.gen_type)
        self.connected_components = count_components(self.matrix)

    @classmethod
    def from_matrix(cls, matrix) -> "Graph":
        """Wrap an existing square matrix without generating anything.

        gen_type comes from classification and all stats are computed.
        No connectivity requirement is imposed.

        Raises:
            ValueError: If the matrix is not square or holds non-integral
                weights.
        """
        raw = np.asarray(matrix)
        if raw.dtype.kind == "f" and not np.all(np.mod(raw, 1) == 0):
            raise ValueError("Adjacency matrix weights must be integers")
        arr = np.array(raw, dtype=np.int64)
        if arr.size == 0:
            arr = arr.reshape(0, 0)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got shape {arr.shape}")

        graph = cls()
        graph.size = arr.shape[0]
        graph.matrix = arr
        graph.hidden = np.zeros(arr.shape, dtype=bool)
        graph.gen_type = classify(arr)
        graph.refresh_stats()
        return graph

    def clone(self, source: "Graph") -> None:
        """Deep-copy every field of source into this graph."""
        self.gen_type = source.gen_type
        self.size = source.size
        self.attempt = source.attempt
        self.edge_number = source.edge_number
        self.sum_weights = source.sum_weights
        self.connected_components = source.connected_components
        self.matrix = source.matrix.copy()
        self.hidden = source.hidden.copy()

    def copy(self) -> "Graph":
        graph = Graph()
        graph.clone(self)
        return graph

    # ── Queries ──────────────────────────────────────────────────────

    def neighbors(self, vertex: int) -> list[int]:
        return neighbors(self.matrix, vertex)

    def count_edges(self) -> int:
        return count_edges(self.matrix, self.gen_type)

    def count_weights(self) -> int:
        return count_weights(self.matrix, self.gen_type)

    def cell(self, i: int, j: int) -> int | None:
        """Weight at (i, j), or None if the cell is hidden."""
        if self.hidden[i, j]:
            return None
        return int(self.matrix[i, j])

    def is_fully_revealed(self) -> bool:
        return not self.hidden.any()

    def stats(self) -> GraphStats:
        return GraphStats(
            size=self.size,
            gen_type=self.gen_type,
            edge_number=self.edge_number,
            sum_weights=self.sum_weights,
            connected_components=self.connected_components,
            weak_components=weak_components(self.matrix),
            strong_components=strong_components(self.matrix),
        )

    # ── Mutation ─────────────────────────────────────────────────────

    def change_edge(self, i: int, j: int, value: int | None) -> None:
        """Set one cell; None hides it. Derived stats are left untouched."""
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError(f"Cell ({i}, {j}) outside a {self.size}x{self.size} matrix")
        if value is None:
            self.matrix[i, j] = 0
            self.hidden[i, j] = True
        else:
            self.matrix[i, j] = value
            self.hidden[i, j] = False

    def hide_all(self) -> None:
        self.matrix[:] = 0
        self.hidden[:] = True

    def refresh_stats(self) -> None:
        """Recompute edge_number, sum_weights and connected_components."""
        self.edge_number = self.count_edges()
        self.sum_weights = self.count_weights()
        self.connected_components = count_components(self.matrix)

    # ── Powers ───────────────────────────────────────────────────────

    def multiply(self, power: int, operation: MultiplyType | str) -> GraphStats:
        """Replace the matrix with its power under the given semiring.

        Reclassifies gen_type and refreshes all derived stats. The graph is
        left unchanged if power is invalid.

        Returns:
            The new GraphStats.

        Raises:
            InvalidPower: If power is not an integer >= 1.
            HiddenCellsError: If any cell is hidden.
        """
        check_power(power)
        if not self.is_fully_revealed():
            raise HiddenCellsError(
                f"Cannot raise a matrix with {int(self.hidden.sum())} hidden cells"
            )
        operation = MultiplyType(operation)
        self.matrix = matrix_power(self.matrix, power, operation)
        self.gen_type = classify(self.matrix)
        self.refresh_stats()
        log.info(
            "Applied %s power %d: type=%s, edges=%d, weights=%d, components=%d",
            operation.value,
            power,
            self.gen_type.name,
            self.edge_number,
            self.sum_weights,
            self.connected_components,
        )
        return self.stats()

    def classic_multiply(self, power: int) -> GraphStats:
        return self.multiply(power, MultiplyType.CLASSIC)

    def logical_multiply(self, power: int) -> GraphStats:
        return self.multiply(power, MultiplyType.LOGICAL)

    def tropical_multiply(self, power: int) -> GraphStats:
        return self.multiply(power, MultiplyType.TROPICAL)

    def __repr__(self) -> str:
        return (
            f"Graph(size={self.size}, gen_type={self.gen_type.name}, "
            f"edge_number={self.edge_number}, "
            f"connected_components={self.connected_components})"
        )
