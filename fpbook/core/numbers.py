"""Numeric helpers that report impossible results as Nothing instead of raising."""

from fpbook.core.option import NONE, Option, Some, try_option
from fpbook.data_structures.linked_list import List


def parse_int_opt(s: str) -> Option[int]:
    """Some(n) if ``s`` holds a base-10 integer, otherwise Nothing."""
    return try_option(lambda: int(s, 10))


def mean(xs: List[float]) -> Option[float]:
    """Arithmetic mean, or Nothing for an empty list."""
    if xs.is_empty():
        return NONE
    return Some(xs.sum() / xs.length())


def variance(xs: List[float]) -> Option[float]:
    """Population variance, or Nothing for an empty list."""
    return mean(xs).flat_map(lambda m: mean(xs.map(lambda x: (x - m) ** 2)))


__all__ = ["mean", "parse_int_opt", "variance"]
