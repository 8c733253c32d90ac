"""Higher-order helpers for composing and reshaping functions."""

from typing import Callable, TypeVar

from fpbook.core.lazy import Lazy

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """Return ``x -> f(g(x))``."""
    return lambda a: f(g(a))


def partial1(a: A, f: Callable[[A, B], C]) -> Callable[[B], C]:
    """Fix the first argument of a two-argument function."""
    return lambda b: f(a, b)


def curry(f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Turn ``f(a, b)`` into ``f(a)(b)``."""
    return lambda a: partial1(a, f)


def uncurry(f: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """Turn ``f(a)(b)`` into ``f(a, b)``."""
    return lambda a, b: f(a)(b)


def memoize(thunk: Callable[[], A]) -> Lazy[A]:
    """Wrap a thunk so that it runs at most once."""
    return Lazy(thunk)


__all__ = ["compose", "curry", "memoize", "partial1", "uncurry"]
