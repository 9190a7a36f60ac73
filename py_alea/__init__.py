"""
Seedable Alea PRNG reproducing the JavaScript output sequence.
"""

from .core import (
    AleaFastPRNG,
    AleaPRNG,
    AleaState,
    Mash,
    MashFast,
    RandomSource,
    find_divergence,
    states_match,
    to_int32,
)
from .utils.random import create_prng

__version__ = "0.1.0"

__all__ = ['AleaPRNG', 'AleaFastPRNG', 'AleaState', 'Mash', 'MashFast',
           'RandomSource', 'find_divergence', 'states_match', 'to_int32',
           'create_prng']
