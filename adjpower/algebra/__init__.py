"""Semiring matrix algebra: classic, logical and tropical products and powers."""

from adjpower.algebra.power import (
    InvalidPower,
    check_power,
    iter_powers,
    matrix_power,
)
from adjpower.algebra.semiring import (
    SEMIRINGS,
    DimensionMismatch,
    MultiplyType,
    Semiring,
    classic_multiply,
    get_semiring,
    logical_multiply,
    semiring_multiply,
    tropical_multiply,
)

__all__ = [
    "DimensionMismatch",
    "InvalidPower",
    "MultiplyType",
    "SEMIRINGS",
    "Semiring",
    "check_power",
    "classic_multiply",
    "get_semiring",
    "iter_powers",
    "logical_multiply",
    "matrix_power",
    "semiring_multiply",
    "tropical_multiply",
]
