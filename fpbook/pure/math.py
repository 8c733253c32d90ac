"""Pure numeric exercises: absolute value, factorials, Fibonacci and searching."""

from collections.abc import Sequence
from typing import Callable, TypeVar

from fpbook.exceptions import InvalidArgumentError

A = TypeVar("A")


def _require_integer(n: object, argument: str = "n") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(
            f"Expected an integer, got {n!r}",
            argument=argument,
            invalid_value=str(n),
        )
    return n


def absolute(n: float) -> float:
    if n < 0:
        return -n
    return n


def factorial_recursive(n: int) -> int:
    """Factorial with a tail-recursive inner helper."""
    _require_integer(n)

    def go(m: int, acc: int) -> int:
        if m <= 0:
            return acc
        return go(m - 1, m * acc)

    return go(n, 1)


def factorial_while(n: int) -> int:
    _require_integer(n)
    acc = 1
    while n > 0:
        acc *= n
        n -= 1
    return acc


def factorial_for(n: int) -> int:
    _require_integer(n)
    acc = 1
    for i in range(2, n + 1):
        acc *= i
    return acc


def fib(n: int) -> int:
    """The nth Fibonacci number, 1-indexed: fib(1) == 0, fib(2) == 1."""
    _require_integer(n)
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return previous


def fib_tail(n: int) -> int:
    """Same as ``fib`` using an accumulator-passing helper."""
    _require_integer(n)

    def go(remaining: int, previous: int, current: int) -> int:
        if remaining <= 1:
            return previous
        return go(remaining - 1, current, previous + current)

    return go(n, 0, 1)


def fib_tree(n: int) -> int:
    """Same as ``fib`` using the doubly recursive definition."""
    _require_integer(n)
    if n <= 1:
        return 0
    if n == 2:
        return 1
    return fib_tree(n - 1) + fib_tree(n - 2)


def format_result(name: str, n: int, f: Callable[[int], int]) -> str:
    return f"The {name} of {n} is {f(n)}"


def is_sorted(items: Sequence[A], ordered: Callable[[A, A], bool]) -> bool:
    """Check that every adjacent pair satisfies ``ordered``."""
    return all(ordered(items[i], items[i + 1]) for i in range(len(items) - 1))


def find_first_string(items: Sequence[str], key: str) -> int:
    """Index of the first string equal to ``key``, or -1."""
    return find_first(items, lambda s: s == key)


def find_first(items: Sequence[A], predicate: Callable[[A], bool]) -> int:
    """Index of the first element satisfying ``predicate``, or -1."""
    for index, item in enumerate(items):
        if predicate(item):
            return index
    return -1


__all__ = [
    "absolute",
    "factorial_for",
    "factorial_recursive",
    "factorial_while",
    "fib",
    "fib_tail",
    "fib_tree",
    "find_first",
    "find_first_string",
    "format_result",
    "is_sorted",
]
