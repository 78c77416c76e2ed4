"""Cellwise comparison of a learner's matrix against the correct answer."""

import numpy as np


def check_matrix_completion(
    user_matrix: np.ndarray,
    correct_matrix: np.ndarray,
    hidden: np.ndarray | None = None,
) -> bool:
    """True when every cell is revealed and equals the correct value.

    Args:
        user_matrix: Learner's matrix.
        correct_matrix: Expected matrix of the same shape.
        hidden: Optional bool mask of cells the learner has not entered;
            a hidden cell never matches.
    """
    user_matrix = np.asarray(user_matrix)
    correct_matrix = np.asarray(correct_matrix)
    if user_matrix.shape != correct_matrix.shape:
        return False
    if hidden is not None and np.any(hidden):
        return False
    return bool(np.array_equal(user_matrix, correct_matrix))


def mismatched_cells(
    user_matrix: np.ndarray,
    correct_matrix: np.ndarray,
    hidden: np.ndarray | None = None,
) -> list[tuple[int, int]]:
    """Revealed cells whose value differs from the answer, in row-major order."""
    wrong = np.asarray(user_matrix) != np.asarray(correct_matrix)
    if hidden is not None:
        wrong &= ~hidden
    return [(int(i), int(j)) for i, j in np.argwhere(wrong)]
