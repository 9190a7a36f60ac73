"""
Utility helpers for seeded random generation.
"""

from .random import create_prng, rand, probability, random_array, uint32_array
from .logging import configure_logging

__all__ = ['create_prng', 'rand', 'probability', 'random_array', 'uint32_array',
           'configure_logging']
