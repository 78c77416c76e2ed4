"""Structural type classification of an adjacency matrix."""

import numpy as np

from adjpower.graph.types import GenerationMode


def classify(matrix: np.ndarray) -> GenerationMode:
    """Classify a square matrix as SYMMETRICAL, ANTISYMMETRICAL, ASYMMETRICAL or DEFAULT.

    Scans the lower triangle including the diagonal with three flags:

    - a nonzero diagonal cell (self-loop) rules out asymmetric
    - an off-diagonal pair with equal values rules out antisymmetric
    - a pair with different values rules out symmetric

    The scan stops as soon as all three flags are cleared. Ties resolve in
    the order symmetric, antisymmetric, asymmetric. An empty matrix is
    symmetric.
    """
    size = matrix.shape[0]
    symmetric = True
    antisymmetric = True
    asymmetric = True

    for i in range(size):
        for j in range(i + 1):
            forward = matrix[i, j]
            backward = matrix[j, i]
            if i == j and forward != 0:
                asymmetric = False
            if i != j and forward == backward:
                antisymmetric = False
            if forward != backward:
                symmetric = False
            if not (symmetric or antisymmetric or asymmetric):
                return GenerationMode.DEFAULT

    if symmetric:
        return GenerationMode.SYMMETRICAL
    if antisymmetric:
        return GenerationMode.ANTISYMMETRICAL
    if asymmetric:
        return GenerationMode.ASYMMETRICAL
    return GenerationMode.DEFAULT
