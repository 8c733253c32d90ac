"""Purely functional state."""

from .rng import (
    RNG,
    SimpleRNG,
    default_rng,
    double,
    double3,
    int_double,
    non_negative_int,
)

__all__ = [
    "RNG",
    "SimpleRNG",
    "default_rng",
    "double",
    "double3",
    "int_double",
    "non_negative_int",
]
