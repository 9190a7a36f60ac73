"""
Core Alea generator functionality.
"""

from .int32 import to_int32, to_uint32
from .mash import Mash, MashFast, utf16_code_units
from .alea_prng import AleaPRNG, AleaFastPRNG, AleaState, RandomSource
from .variants import find_divergence, states_match

__all__ = ['to_int32', 'to_uint32', 'Mash', 'MashFast', 'utf16_code_units',
           'AleaPRNG', 'AleaFastPRNG', 'AleaState', 'RandomSource',
           'find_divergence', 'states_match']
