"""
Random number generation utilities.

Helpers layered on top of the Alea generators. Every helper takes the
generator explicitly; there is no module-level generator, so each caller
owns its own stream.
"""

from typing import Optional

import numpy as np
import structlog

from ..config import settings
from ..core.alea_prng import AleaFastPRNG, AleaPRNG, RandomSource
from ..core.mash import SeedValue

logger = structlog.get_logger()

VARIANTS = {
    "exact": AleaPRNG,
    "fast": AleaFastPRNG,
}


def create_prng(
    seed: Optional[SeedValue] = None, variant: Optional[str] = None
) -> RandomSource:
    """
    Create an Alea generator.

    Args:
        seed: Seed to use, defaults to settings.default_seed
        variant: "exact" or "fast", defaults to settings.default_variant

    Returns:
        A freshly seeded generator
    """
    if seed is None:
        seed = settings.default_seed
    variant = variant or settings.default_variant

    try:
        prng_class = VARIANTS[variant]
    except KeyError:
        raise ValueError(
            f"Unknown Alea variant {variant!r}, expected one of {sorted(VARIANTS)}"
        ) from None

    logger.debug("Creating Alea PRNG", variant=variant)
    return prng_class(seed)


def rand(
    prng: RandomSource,
    min_val: Optional[float] = None,
    max_val: Optional[float] = None,
) -> int:
    """Random integer in [min, max] inclusive, like JS rand(min, max).

    With no bounds returns a raw unsigned 32-bit value; with one bound
    the range is [0, min_val].
    """
    if min_val is None and max_val is None:
        return prng.uint32()
    if max_val is None:
        max_val = min_val
        min_val = 0
    return int(prng.random() * (max_val - min_val + 1)) + int(min_val)


def probability(prng: RandomSource, p: float) -> bool:
    """Return True with probability p. Draws only when 0 < p < 1."""
    if p >= 1:
        return True
    if p <= 0:
        return False
    return prng.random() < p


def random_array(prng: RandomSource, size: int) -> np.ndarray:
    """
    Draw ``size`` consecutive random() values.

    Returns:
        float64 array in generation order
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return np.fromiter((prng.random() for _ in range(size)), dtype=np.float64, count=size)


def uint32_array(prng: RandomSource, size: int) -> np.ndarray:
    """Draw ``size`` consecutive uint32() values as a uint32 array."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return np.fromiter((prng.uint32() for _ in range(size)), dtype=np.uint32, count=size)
