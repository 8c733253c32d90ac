"""
Purely functional random number generation.

Generators are immutable. Every function takes a generator and returns the
generated value together with the next generator, so callers thread state
explicitly instead of mutating a shared source of randomness.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fpbook import config

MAX_INT32 = 2_147_483_647
MIN_INT32 = -2_147_483_648

MULTIPLIER = 0x5DEECE66D
INCREMENT = 0xB
SEED_MASK = 0xFFFFFFFFFFFF  # 48 bits


def _to_signed(value: int, bits: int) -> int:
    """Reinterpret the low ``bits`` bits of ``value`` as two's complement."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


class RNG(ABC):
    """A source of pseudo-random 32-bit integers."""

    @abstractmethod
    def next_int(self) -> "tuple[int, RNG]":
        """Return a signed 32-bit integer and the next generator."""


@dataclass(frozen=True)
class SimpleRNG(RNG):
    """Linear congruential generator using the java.util.Random constants."""

    seed: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", _to_signed(self.seed, 64))

    def next_int(self) -> "tuple[int, RNG]":
        new_seed = (self.seed * MULTIPLIER + INCREMENT) & SEED_MASK
        n = _to_signed(new_seed >> 16, 32)
        return n, SimpleRNG(new_seed)


def default_rng() -> RNG:
    """A SimpleRNG seeded from the configured ``rng_seed``."""
    return SimpleRNG(config.get_settings().rng_seed)


def non_negative_int(rng: RNG) -> tuple[int, RNG]:
    """An integer between 0 and MAX_INT32 inclusive."""
    x, rng2 = rng.next_int()
    if x == MIN_INT32:
        return 0, rng2
    if x < 0:
        return -x, rng2
    return x, rng2


def double(rng: RNG) -> tuple[float, RNG]:
    """A float in [0, 1)."""
    x, rng2 = non_negative_int(rng)
    return x / (MAX_INT32 + 1.0), rng2


def double3(rng: RNG) -> tuple[tuple[float, float, float], RNG]:
    d1, rng2 = double(rng)
    d2, rng3 = double(rng2)
    d3, rng4 = double(rng3)
    return (d1, d2, d3), rng4


def int_double(rng: RNG) -> tuple[tuple[int, float], RNG]:
    n, rng2 = rng.next_int()
    d, rng3 = double(rng2)
    return (n, d), rng3


__all__ = [
    "MAX_INT32",
    "MIN_INT32",
    "RNG",
    "SimpleRNG",
    "default_rng",
    "double",
    "double3",
    "int_double",
    "non_negative_int",
]
