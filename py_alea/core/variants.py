"""
Divergence checks between the exact and fast Alea variants.

Both generators run the same recurrence once seeded, and ``y`` never
leaves [0, 2091640), so truncation and the ToInt32 round-trip agree on
the hot path. Any difference comes from seeding: Mash keeps the 2^-32
fraction of a small intermediate product that MashFast truncates away.
"""

from typing import Optional

import structlog

from .alea_prng import AleaFastPRNG, AleaPRNG
from .mash import SeedValue

logger = structlog.get_logger()


def states_match(seed: SeedValue) -> bool:
    """Check whether both variants end up in the same state after seeding."""
    return AleaPRNG(seed).state == AleaFastPRNG(seed).state


def find_divergence(seed: SeedValue, count: int = 1000) -> Optional[int]:
    """
    Find the first output where AleaFastPRNG differs from AleaPRNG.

    Args:
        seed: Seed used for both generators
        count: Number of outputs to compare

    Returns:
        Index of the first differing output, or None if the first
        ``count`` outputs are identical
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    exact = AleaPRNG(seed)
    fast = AleaFastPRNG(seed)

    for index in range(count):
        if exact.random() != fast.random():
            logger.info(
                "Alea variants diverge",
                seed=exact.seeds[0],
                index=index,
            )
            return index

    logger.debug("Alea variants agree", seed=exact.seeds[0], count=count)
    return None
