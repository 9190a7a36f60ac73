"""
Python implementation of Alea PRNG matching the JavaScript reference.

Based on Johannes Baagøe's Alea algorithm: a multiply-with-carry
generator over three 32-bit fractional words with multiplier 2091639.
``AleaPRNG`` reproduces the JS output sequence bit-for-bit for the same
seed; ``AleaFastPRNG`` skips the 32-bit round-trip and may drift from it
for unusual seeds.
"""

from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple, TypeVar, Union
import math

from .int32 import to_int32, to_uint32
from .mash import Mash, MashFast, SeedValue, TWO_32, TWO_NEG_32, seed_to_text

ALEA_MULTIPLIER = 2091639.0
TWO_NEG_53 = 1.1102230246251565e-16  # 2^-53
FRACT53_SCALE = 0x200000  # 2^21

T = TypeVar("T")


@dataclass(frozen=True)
class AleaState:
    """Snapshot of a generator's internal registers."""

    s0: float
    s1: float
    s2: float
    x: float

    def validate(self) -> None:
        """Raise ValueError unless s0, s1 and s2 all lie in [0, 1)."""
        for name in ("s0", "s1", "s2"):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ValueError(f"{name} must be in [0, 1), got {value!r}")


class RandomSource(Protocol):
    """Capabilities shared by both Alea variants."""

    def random(self) -> float: ...

    def uint32(self) -> int: ...

    def fract53(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def _seed_registers(
    mash: Union[Mash, MashFast], seeds: Sequence[str]
) -> Tuple[float, float, float]:
    # Three hashes of a space, then three hashes per seed, all on the same
    # evolving accumulator. The order determines the output sequence.
    # Hashes are signed, so from the second seed on a register can also
    # overshoot 1; wrapping both ways keeps it congruent with the JS value.
    s0 = mash.hash(" ")
    s1 = mash.hash(" ")
    s2 = mash.hash(" ")

    for seed in seeds:
        s0 -= mash.hash(seed)
        if s0 < 0:
            s0 += 1
        elif s0 >= 1:
            s0 -= 1
        s1 -= mash.hash(seed)
        if s1 < 0:
            s1 += 1
        elif s1 >= 1:
            s1 -= 1
        s2 -= mash.hash(seed)
        if s2 < 0:
            s2 += 1
        elif s2 >= 1:
            s2 -= 1

    return s0, s1, s2


class AleaPRNG:
    """
    Alea PRNG faithful to the JavaScript version.

    The carry is extracted with an explicit ToInt32 emulation, so the
    sequence matches JS to the last bit:

        prng = AleaPRNG("frank")
        prng.random()  # 0.8080874253064394
        prng.random()  # 0.8366762748919427
    """

    def __init__(self, seed: SeedValue, *more_seeds: SeedValue):
        """Initialize with one or more seeds (strings or numbers)."""
        self.seeds = tuple(seed_to_text(s) for s in (seed,) + more_seeds)
        self.call_count = 0

        self.s0, self.s1, self.s2 = _seed_registers(Mash(), self.seeds)
        self.x = 1.0

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        y = self.x * TWO_NEG_32 + self.s0 * ALEA_MULTIPLIER
        self.s0 = self.s1
        self.s1 = self.s2
        self.x = to_int32(y)
        self.s2 = y - self.x
        return self.s2

    def uint32(self) -> int:
        """Generate next random unsigned 32-bit integer."""
        return to_uint32(self.random() * TWO_32)

    def fract53(self) -> float:
        """Generate a float in [0, 1) with 53 bits of randomness (two draws)."""
        high = self.random()
        return high + to_int32(self.random() * FRACT53_SCALE) * TWO_NEG_53

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    @property
    def state(self) -> AleaState:
        return AleaState(self.s0, self.s1, self.s2, self.x)

    def set_state(self, state: AleaState) -> None:
        """Restore registers from a snapshot taken with ``state``."""
        state.validate()
        self.s0, self.s1, self.s2, self.x = state.s0, state.s1, state.s2, state.x

    def __repr__(self):
        return f"AleaPRNG(seeds={self.seeds!r}, call_count={self.call_count})"


class AleaFastPRNG:
    """
    Alea PRNG using plain truncation for the carry.

    Same construction protocol and recurrence as AleaPRNG, seeded through
    MashFast. Identical to AleaPRNG for ordinary seeds; may diverge from
    the JS sequence when seeding produces extreme intermediate values.
    """

    def __init__(self, seed: SeedValue, *more_seeds: SeedValue):
        self.seeds = tuple(seed_to_text(s) for s in (seed,) + more_seeds)
        self.call_count = 0

        self.s0, self.s1, self.s2 = _seed_registers(MashFast(), self.seeds)
        self.x = 1.0

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        y = self.x * TWO_NEG_32 + self.s0 * ALEA_MULTIPLIER
        self.s0 = self.s1
        self.s1 = self.s2
        self.x = float(math.trunc(y))
        self.s2 = y - self.x
        return self.s2

    def uint32(self) -> int:
        return to_uint32(self.random() * TWO_32)

    def fract53(self) -> float:
        high = self.random()
        return high + math.trunc(self.random() * FRACT53_SCALE) * TWO_NEG_53

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    @property
    def state(self) -> AleaState:
        return AleaState(self.s0, self.s1, self.s2, self.x)

    def set_state(self, state: AleaState) -> None:
        state.validate()
        self.s0, self.s1, self.s2, self.x = state.s0, state.s1, state.s2, state.x

    def __repr__(self):
        return f"AleaFastPRNG(seeds={self.seeds!r}, call_count={self.call_count})"
