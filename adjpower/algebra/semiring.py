"""Semiring matrix multiplication over integer adjacency matrices.

Three interpretations of the product of two adjacency matrices:

1. Classic: ordinary integer arithmetic, counts (weighted) walks
2. Logical: OR/AND, one-step reachability composition
3. Tropical: min-plus, shortest walk weight, with a stored 0 read as +inf

Each multiplication is split into encode -> product -> decode so that the
power routines can keep intermediate results in the semiring's own domain
(the tropical domain keeps +inf between steps instead of round-tripping
through the integer 0).
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

import numpy as np


class DimensionMismatch(ValueError):
    """Raised when the inner dimensions of two operands disagree."""


class MultiplyType(StrEnum):
    """Algebraic interpretation used for a matrix product."""

    CLASSIC = "classic"
    LOGICAL = "logical"
    TROPICAL = "tropical"


@dataclass(frozen=True, slots=True)
class Semiring:
    """Encode/product/decode triple for one multiplication type."""

    name: MultiplyType
    encode: Callable[[np.ndarray], np.ndarray]
    product: Callable[[np.ndarray, np.ndarray], np.ndarray]
    decode: Callable[[np.ndarray], np.ndarray]


def _as_matrix(matrix) -> np.ndarray:
    arr = np.asarray(matrix)
    if arr.ndim != 2:
        raise DimensionMismatch(
            f"Expected a 2-D matrix, got array with shape {arr.shape}"
        )
    return arr


def check_dimensions(first: np.ndarray, second: np.ndarray) -> None:
    """Raise DimensionMismatch unless first's columns match second's rows."""
    if first.shape[1] != second.shape[0]:
        raise DimensionMismatch(
            f"Number of columns in first matrix ({first.shape[1]}) must equal "
            f"number of rows in second matrix ({second.shape[0]})"
        )


# ── Classic ──────────────────────────────────────────────────────────


def _classic_encode(matrix: np.ndarray) -> np.ndarray:
    return np.array(matrix, dtype=np.int64)


def _classic_product(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    return first @ second


# ── Logical ──────────────────────────────────────────────────────────


def _logical_encode(matrix: np.ndarray) -> np.ndarray:
    return (np.asarray(matrix) != 0).astype(np.int64)


def _logical_product(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    # Operands are 0/1, so a positive count means at least one witness k
    return ((first @ second) > 0).astype(np.int64)


# ── Tropical (min-plus) ──────────────────────────────────────────────


def _tropical_encode(matrix: np.ndarray) -> np.ndarray:
    arr = np.asarray(matrix, dtype=np.float64)
    return np.where(arr == 0, np.inf, arr)


def _tropical_product(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    rows, inner = first.shape
    cols = second.shape[1]
    if inner == 0:
        return np.full((rows, cols), np.inf)
    # sums[i, k, j] = first[i, k] + second[k, j]
    sums = first[:, :, None] + second[None, :, :]
    return sums.min(axis=1)


def _tropical_decode(matrix: np.ndarray) -> np.ndarray:
    return np.where(np.isinf(matrix), 0, matrix).astype(np.int64)


def _identity(matrix: np.ndarray) -> np.ndarray:
    return matrix


SEMIRINGS: dict[MultiplyType, Semiring] = {
    MultiplyType.CLASSIC: Semiring(
        MultiplyType.CLASSIC, _classic_encode, _classic_product, _identity
    ),
    MultiplyType.LOGICAL: Semiring(
        MultiplyType.LOGICAL, _logical_encode, _logical_product, _identity
    ),
    MultiplyType.TROPICAL: Semiring(
        MultiplyType.TROPICAL, _tropical_encode, _tropical_product, _tropical_decode
    ),
}


def get_semiring(operation: MultiplyType | str) -> Semiring:
    """Look up the semiring for a multiplication type or its string value."""
    return SEMIRINGS[MultiplyType(operation)]


def semiring_multiply(first, second, operation: MultiplyType | str) -> np.ndarray:
    """Multiply two integer matrices under the given semiring.

    Inputs are never mutated; the result is a freshly allocated int64 array.

    Raises:
        DimensionMismatch: If an operand is not 2-D or inner dimensions differ.
    """
    first = _as_matrix(first)
    second = _as_matrix(second)
    check_dimensions(first, second)
    semiring = get_semiring(operation)
    product = semiring.product(semiring.encode(first), semiring.encode(second))
    return semiring.decode(product)


def classic_multiply(first, second) -> np.ndarray:
    """result[i, j] = sum_k first[i, k] * second[k, j]."""
    return semiring_multiply(first, second, MultiplyType.CLASSIC)


def logical_multiply(first, second) -> np.ndarray:
    """result[i, j] = 1 iff some k has first[i, k] != 0 and second[k, j] != 0."""
    return semiring_multiply(first, second, MultiplyType.LOGICAL)


def tropical_multiply(first, second) -> np.ndarray:
    """Min-plus product; absent edges are +inf and unreachable cells come back as 0."""
    return semiring_multiply(first, second, MultiplyType.TROPICAL)
