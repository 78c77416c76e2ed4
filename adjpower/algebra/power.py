"""Matrix powers under the classic, logical and tropical semirings."""

import logging
from typing import Iterator

import numpy as np

from adjpower.algebra.semiring import (
    DimensionMismatch,
    MultiplyType,
    get_semiring,
)

log = logging.getLogger(__name__)


class InvalidPower(ValueError):
    """Raised when a matrix power is requested with power < 1."""


def check_power(power: int) -> None:
    """Reject anything that is not an integer >= 1."""
    if isinstance(power, bool) or not isinstance(power, (int, np.integer)):
        raise InvalidPower(f"Power must be an integer, got {power!r}")
    if power < 1:
        raise InvalidPower(f"Power must be >= 1, got {power}")


def _square_matrix(matrix) -> np.ndarray:
    arr = np.asarray(matrix)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise DimensionMismatch(
            f"Matrix power needs a square matrix, got shape {arr.shape}"
        )
    return arr


def matrix_power(
    matrix, power: int, operation: MultiplyType | str = MultiplyType.CLASSIC
) -> np.ndarray:
    """Raise a square matrix to an integer power under a semiring.

    power == 1 returns an unchanged copy of the input. Larger powers use
    repeated squaring, which is valid because all three semirings are
    associative. Intermediate results stay in the semiring's domain and are
    decoded to integers once at the end.

    Args:
        matrix: Square integer adjacency matrix.
        power: Exponent, >= 1.
        operation: Multiplication type (enum member or its string value).

    Returns:
        Fresh int64 array holding M^power.

    Raises:
        InvalidPower: If power is not an integer >= 1.
        DimensionMismatch: If matrix is not square.
    """
    check_power(power)
    arr = _square_matrix(matrix)
    if power == 1:
        return np.array(arr, dtype=np.int64)

    semiring = get_semiring(operation)
    base = semiring.encode(arr)
    result = None
    remaining = int(power)
    while remaining:
        if remaining & 1:
            result = base if result is None else semiring.product(result, base)
        remaining >>= 1
        if remaining:
            base = semiring.product(base, base)

    log.debug(
        "Computed %s power %d of %dx%d matrix",
        semiring.name.value,
        power,
        arr.shape[0],
        arr.shape[1],
    )
    return semiring.decode(result)


def iter_powers(
    matrix, max_power: int, operation: MultiplyType | str = MultiplyType.CLASSIC
) -> Iterator[tuple[int, np.ndarray]]:
    """Yield (k, M^k) for k = 1..max_power, one multiplication per step.

    The accumulator is left-multiplied by the original matrix at each step,
    so every intermediate power is observable.
    """
    check_power(max_power)
    arr = _square_matrix(matrix)
    semiring = get_semiring(operation)

    yield 1, np.array(arr, dtype=np.int64)
    original = semiring.encode(arr)
    accumulator = original
    for k in range(2, int(max_power) + 1):
        accumulator = semiring.product(accumulator, original)
        yield k, semiring.decode(accumulator)
