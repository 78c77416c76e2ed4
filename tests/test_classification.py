"""Tests for structural type classification."""

import numpy as np
import pytest

from adjpower.graph import GenerationMode, classify


class TestClassify:
    """Flag scan over the lower triangle with diagonal."""

    def test_symmetric(self) -> None:
        m = np.array([[0, 1, 1], [1, 1, 0], [1, 0, 0]])
        assert classify(m) is GenerationMode.SYMMETRICAL

    def test_symmetric_requires_equal_weights(self) -> None:
        m = np.array([[0, 2], [3, 0]])
        assert classify(m) is not GenerationMode.SYMMETRICAL

    def test_antisymmetric_with_self_loop(self) -> None:
        m = np.array([[1, 1], [0, 0]])
        assert classify(m) is GenerationMode.ANTISYMMETRICAL

    def test_differing_weights_count_as_antisymmetric(self) -> None:
        m = np.array([[0, 2], [3, 0]])
        assert classify(m) is GenerationMode.ANTISYMMETRICAL

    def test_asymmetric(self) -> None:
        # Pair (0, 2) has no edge in either direction, which rules out
        # antisymmetric; no self-loops keeps asymmetric
        m = np.array([[0, 1, 0], [0, 0, 0], [0, 0, 0]])
        assert classify(m) is GenerationMode.ASYMMETRICAL

    def test_default(self) -> None:
        m = np.array([[1, 1, 0], [1, 0, 1], [0, 0, 0]])
        assert classify(m) is GenerationMode.DEFAULT

    def test_tie_break_prefers_antisymmetric_over_asymmetric(self) -> None:
        # Loopless single edge on two vertices satisfies both flags
        m = np.array([[0, 1], [0, 0]])
        assert classify(m) is GenerationMode.ANTISYMMETRICAL

    def test_tie_break_prefers_symmetric(self) -> None:
        # All-zero matrix keeps every flag
        assert classify(np.zeros((3, 3), dtype=np.int64)) is GenerationMode.SYMMETRICAL

    def test_loopless_bidirectional_pair_is_asymmetric(self) -> None:
        # Asymmetric only checks the diagonal, so a mirrored pair does not
        # clear it once symmetric and antisymmetric have failed
        m = np.array([[0, 1, 1], [1, 0, 0], [0, 0, 0]])
        assert classify(m) is GenerationMode.ASYMMETRICAL

    def test_empty_matrix(self) -> None:
        assert classify(np.zeros((0, 0), dtype=np.int64)) is GenerationMode.SYMMETRICAL

    @pytest.mark.parametrize("seed", range(5))
    def test_idempotent(self, seed: int) -> None:
        rng = np.random.default_rng(seed)
        m = rng.integers(0, 2, size=(6, 6))
        assert classify(m) is classify(m.copy())

    def test_never_returns_unknown(self) -> None:
        rng = np.random.default_rng(0)
        for _ in range(50):
            m = rng.integers(0, 3, size=(4, 4))
            assert classify(m) is not GenerationMode.UNKNOWN
