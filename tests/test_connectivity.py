"""Tests for BFS traversal and component counting.

count_components is forward-reachability clustering: roots are taken in
ascending index order and only out-edges are followed. On symmetric
matrices this is weak connectivity; on directed matrices it is not, and
these tests pin the difference.
"""

import numpy as np
import pytest

from adjpower.graph.connectivity import (
    bfs,
    count_components,
    neighbors,
    strong_components,
    weak_components,
)


def _symmetric_random(seed: int, n: int = 8, p: float = 0.2) -> np.ndarray:
    rng = np.random.default_rng(seed)
    upper = np.triu((rng.random((n, n)) < p).astype(np.int64))
    return upper | upper.T


class TestNeighbors:
    """Out-neighbourhood queries."""

    def test_out_neighbors_in_order(self) -> None:
        m = np.array([[0, 3, 0, 1], [0, 0, 0, 0], [1, 0, 0, 0], [0, 0, 0, 0]])
        assert neighbors(m, 0) == [1, 3]
        assert neighbors(m, 1) == []
        assert neighbors(m, 2) == [0]

    def test_negative_weight_is_an_edge(self) -> None:
        m = np.array([[0, -2], [0, 0]])
        assert neighbors(m, 0) == [1]

    def test_returns_python_ints(self) -> None:
        m = np.array([[0, 1], [1, 0]])
        assert all(type(v) is int for v in neighbors(m, 0))


class TestBFS:
    """Breadth-first reachability."""

    def test_follows_edge_direction(self) -> None:
        path = np.eye(4, k=1, dtype=np.int64)
        assert bfs(path, 0) == {0, 1, 2, 3}
        assert bfs(path, 2) == {2, 3}
        assert bfs(path, 3) == {3}

    def test_handles_cycles(self) -> None:
        cycle = np.roll(np.eye(5, dtype=np.int64), 1, axis=1)
        assert bfs(cycle, 3) == {0, 1, 2, 3, 4}

    def test_self_loop_only(self) -> None:
        m = np.array([[1, 0], [0, 0]])
        assert bfs(m, 0) == {0}


class TestCountComponents:
    """Forward-reachability clustering."""

    def test_empty_matrix_has_no_components(self) -> None:
        assert count_components(np.zeros((0, 0), dtype=np.int64)) == 0

    def test_single_vertex(self) -> None:
        assert count_components(np.zeros((1, 1), dtype=np.int64)) == 1

    def test_isolated_vertices(self) -> None:
        assert count_components(np.zeros((4, 4), dtype=np.int64)) == 4

    def test_two_undirected_pairs(self) -> None:
        m = np.array(
            [
                [0, 1, 0, 0],
                [1, 0, 0, 0],
                [0, 0, 0, 1],
                [0, 0, 1, 0],
            ]
        )
        assert count_components(m) == 2

    def test_out_tree_from_first_vertex_is_one_component(self) -> None:
        m = np.array([[0, 1, 1], [0, 0, 0], [0, 0, 0]])
        assert count_components(m) == 1

    def test_edge_into_first_vertex_is_two_components(self) -> None:
        # 1 -> 0: weakly connected, but vertex 0 reaches nothing on its own
        m = np.array([[0, 0], [1, 0]])
        assert count_components(m) == 2
        assert weak_components(m) == 1
        assert strong_components(m) == 2

    def test_root_order_matters_for_directed(self) -> None:
        # 0 -> 1, 2 -> 1: vertex 0 takes {0, 1}; vertex 2 is a new cluster
        m = np.array([[0, 1, 0], [0, 0, 0], [0, 1, 0]])
        assert count_components(m) == 2

    def test_does_not_mutate(self) -> None:
        m = np.eye(3, k=1, dtype=np.int64)
        before = m.copy()
        count_components(m)
        np.testing.assert_array_equal(m, before)

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_weak_components_on_symmetric(self, seed: int) -> None:
        m = _symmetric_random(seed)
        assert count_components(m) == weak_components(m)


class TestScipyCounts:
    """Weak and strong counts reported for comparison."""

    def test_directed_cycle(self) -> None:
        cycle = np.roll(np.eye(4, dtype=np.int64), 1, axis=1)
        assert weak_components(cycle) == 1
        assert strong_components(cycle) == 1

    def test_directed_path(self) -> None:
        path = np.eye(4, k=1, dtype=np.int64)
        assert weak_components(path) == 1
        assert strong_components(path) == 4

    def test_empty(self) -> None:
        empty = np.zeros((0, 0), dtype=np.int64)
        assert weak_components(empty) == 0
        assert strong_components(empty) == 0
