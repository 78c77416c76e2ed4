"""Breadth-first connectivity over an adjacency matrix.

Traversal follows edges in their stored direction (out-neighbours only).
count_components therefore performs forward-reachability clustering: take
the lowest-index unvisited vertex, remove everything it reaches, repeat.
For a symmetric matrix this is exactly weak connectivity. For a directed
matrix the count depends on root order, e.g. [[0, 0], [1, 0]] gives 2
because vertex 0 reaches nothing on its own.

weak_components and strong_components give the textbook counts through
scipy's csgraph for comparison.
"""

from collections import deque

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components


def neighbors(matrix: np.ndarray, vertex: int) -> list[int]:
    """All j with matrix[vertex, j] != 0, in ascending order."""
    return np.flatnonzero(matrix[vertex]).tolist()


def bfs(matrix: np.ndarray, start: int) -> set[int]:
    """Return the set of vertices reachable from start, start included."""
    visited: set[int] = set()
    to_visit = deque([start])

    while to_visit:
        vertex = to_visit.popleft()
        if vertex in visited:
            continue
        visited.add(vertex)
        for neighbor in neighbors(matrix, vertex):
            if neighbor not in visited:
                to_visit.append(neighbor)

    return visited


def count_components(matrix: np.ndarray) -> int:
    """Count forward-reachability clusters; 0 for an empty matrix."""
    size = matrix.shape[0]
    unvisited = set(range(size))
    components = 0

    while unvisited:
        root = min(unvisited)
        unvisited -= bfs(matrix, root)
        components += 1

    return components


def _scipy_components(matrix: np.ndarray, connection: str) -> int:
    if matrix.shape[0] == 0:
        return 0
    n_components, _ = connected_components(
        scipy.sparse.csr_matrix((matrix != 0).astype(np.float64)),
        directed=True,
        connection=connection,
    )
    return int(n_components)


def weak_components(matrix: np.ndarray) -> int:
    """Number of weakly connected components (edge direction ignored)."""
    return _scipy_components(matrix, "weak")


def strong_components(matrix: np.ndarray) -> int:
    """Number of strongly connected components."""
    return _scipy_components(matrix, "strong")
