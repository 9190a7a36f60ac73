"""
JavaScript 32-bit integer coercion.

JS numbers are 64-bit doubles; any bitwise operation first converts them
to a 32-bit signed integer (``value | 0``) and the result is widened back
to a double. Alea and Mash depend on this conversion bit-for-bit, so it
is spelled out here instead of relying on a native cast.
"""

_TWO_32 = 0x100000000
_TWO_31 = 0x80000000


def to_int32(value: float) -> float:
    """Emulate JavaScript's ``value | 0``.

    Truncates toward zero, keeps the low 32 bits and reinterprets them as
    a two's-complement signed integer.

    Args:
        value: Any finite double

    Returns:
        The signed 32-bit result as a float
    """
    n = int(value) & 0xFFFFFFFF
    if n >= _TWO_31:
        n -= _TWO_32
    return float(n)


def to_uint32(value: float) -> int:
    """Emulate JavaScript's ``value >>> 0``."""
    return int(value) & 0xFFFFFFFF
