"""Reproducibility infrastructure: seed management."""

from adjpower.reproducibility.seed import get_rng, set_seed, verify_seed_determinism

__all__ = [
    "get_rng",
    "set_seed",
    "verify_seed_determinism",
]
