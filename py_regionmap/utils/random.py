"""
Random number generation utilities.

Every generation entry point owns its random source. A generator is created
from the caller's seed and passed explicitly to each stage, so two maps can be
generated side by side without sharing any mutable state.
"""

import numpy as np

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_MAX_NOISE_SEED = 2**63 - 1


def create_rng(seed: int) -> np.random.Generator:
    """
    Create the random source for one generation call.

    Negative seeds are folded into the unsigned 64-bit range, so any signed
    64-bit seed yields a valid and distinct stream.

    Args:
        seed: Integer seed

    Returns:
        NumPy Generator seeded from ``seed``
    """
    return np.random.default_rng(int(seed) & _UINT64_MASK)


def draw_seed(rng: np.random.Generator) -> int:
    """
    Draw a non-negative 63-bit seed for a derived generator (e.g. noise).

    Args:
        rng: Parent random source

    Returns:
        Integer in [0, 2**63 - 1)
    """
    return int(rng.integers(0, _MAX_NOISE_SEED))
