"""
Mash string hash used to seed Alea.

Based on Johannes Baagøe's Mash function. The accumulator persists
between calls, so hashing the same text twice gives different results.
The seeding protocol in ``alea_prng`` relies on that.
"""

import math
from typing import List, Union

from .int32 import to_int32

MASH_INITIAL = 4022871197.0  # 0xEFC8249D
MASH_MULTIPLIER = 0.02519603282416938

TWO_32 = 4294967296.0  # 2^32
TWO_NEG_32 = 2.3283064365386963e-10  # 2^-32

SeedValue = Union[str, int, float, bool]


def utf16_code_units(text: str) -> List[int]:
    """Split text into UTF-16 code units.

    Characters outside the basic plane become their surrogate pair, the
    way a JS string indexes them. Lone surrogates are passed through.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def number_to_text(value: float) -> str:
    """Format a double the way JS ``Number.prototype.toString()`` does.

    Python's ``repr`` already yields the shortest round-tripping digits;
    only the placement of the decimal point and exponent differs.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    mantissa, _, exp_text = repr(abs(value)).partition("e")
    point = mantissa.find(".")
    if point < 0:
        point = len(mantissa)
    digits = mantissa.replace(".", "")
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")

    # value == 0.<digits> * 10^n
    n = point + (int(exp_text) if exp_text else 0)
    k = len(digits)

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        exponent = n - 1
        exp_sign = "+" if exponent >= 0 else "-"
        head = digits if k == 1 else digits[0] + "." + digits[1:]
        text = f"{head}e{exp_sign}{abs(exponent)}"
    return sign + text


def seed_to_text(value: SeedValue) -> str:
    """Convert a seed value to the string JS ``toString()`` would give."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int) and abs(value) < 10 ** 21:
        return str(value)
    return number_to_text(float(value))


class Mash:
    """
    Alea's string hash, faithful to the JavaScript output.

    Normally used privately by AleaPRNG but usable on its own:

        mash = Mash()
        mash.hash("string to hash")
        mash.hash("second string to hash")
    """

    def __init__(self):
        self.n = MASH_INITIAL

    @property
    def state(self) -> float:
        """Current accumulator value."""
        return self.n

    def hash(self, data: SeedValue) -> float:
        """Hash data, updating the accumulator.

        Args:
            data: Text to hash (other values are stringified first)

        Returns:
            Hash value in [-0.5, 0.5)
        """
        n = self.n
        for code in utf16_code_units(seed_to_text(data)):
            n += code
            h = to_int32(MASH_MULTIPLIER * n)
            f = MASH_MULTIPLIER * n - h
            t = f * h
            t_int = to_int32(t)
            n = TWO_32 * (t - t_int) + t_int
        self.n = n
        return to_int32(n) * TWO_NEG_32

    __call__ = hash


class MashFast:
    """
    Mash variant that truncates instead of doing the 32-bit round-trip.

    Agrees with Mash as long as every intermediate product keeps an
    integral 2^-32 remainder; see ``core.variants``.
    """

    def __init__(self):
        self.n = MASH_INITIAL

    @property
    def state(self) -> float:
        return self.n

    def hash(self, data: SeedValue) -> float:
        n = self.n
        for code in utf16_code_units(seed_to_text(data)):
            n += code
            h = n * MASH_MULTIPLIER
            n = float(math.trunc(h))
            h -= n
            h *= n
            n = float(math.trunc(h))
            h -= n
            n += math.trunc(h * TWO_32)
        self.n = n
        return n * TWO_NEG_32

    __call__ = hash
