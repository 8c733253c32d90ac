"""
Either monad for handling success/error cases in functional programming.

This module provides an Either type for representing computations that may fail,
with Left representing failure and Right representing success. Unlike Option,
the failure side carries a value describing what went wrong.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar, cast

from fpbook.core.option import FATAL_EXCEPTIONS
from fpbook.data_structures.linked_list import NIL, Cons, List
from fpbook.exceptions import WrappedFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")
F = TypeVar("F")


class Either(Generic[E, T], ABC):
    """Abstract base class for Either monad."""

    __slots__ = ()

    @abstractmethod
    def is_left(self) -> bool:
        """Check if this is a Left (error) value."""

    def is_right(self) -> bool:
        """Check if this is a Right (success) value."""
        return not self.is_left()

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Either[E, U]"]) -> "Either[E, U]":
        """Flat map function over Right value, propagating Left untouched."""

    def map(self, func: Callable[[T], U]) -> "Either[E, U]":
        """Map function over Right value, preserving Left."""
        return self.flat_map(lambda value: Right(func(value)))

    @abstractmethod
    def map_left(self, func: Callable[[E], F]) -> "Either[F, T]":
        """Map function over Left value, preserving Right."""

    @abstractmethod
    def fold(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        """Fold Either by applying appropriate function."""

    def get_or_else(self, default: Callable[[], U]) -> T | U:
        """Get Right value or evaluate the default thunk."""
        return self.fold(lambda _: default(), lambda value: value)

    def or_else(self, alternative: Callable[[], "Either[F, U]"]) -> "Either[E | F, T | U]":
        """Return this if Right, otherwise evaluate the alternative thunk."""
        if self.is_right():
            return self
        return alternative()


class Left(Either[E, T]):
    """Left side of Either representing an error/failure."""

    __slots__ = ("value",)

    def __init__(self, value: E) -> None:
        self.value = value

    def is_left(self) -> bool:
        return True

    def flat_map(self, func: Callable[[T], "Either[E, U]"]) -> "Either[E, U]":
        return cast("Either[E, U]", self)

    def map_left(self, func: Callable[[E], F]) -> "Either[F, T]":
        return Left(func(self.value))

    def fold(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        return left_func(self.value)

    def __str__(self) -> str:
        return f"Left({self.value})"

    def __repr__(self) -> str:
        return f"Left({self.value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Left) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Left, self.value))


class Right(Either[E, T]):
    """Right side of Either representing success."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def is_left(self) -> bool:
        return False

    def flat_map(self, func: Callable[[T], "Either[E, U]"]) -> "Either[E, U]":
        return func(self.value)

    def map_left(self, func: Callable[[E], F]) -> "Either[F, T]":
        return cast("Either[F, T]", self)

    def fold(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        return right_func(self.value)

    def __str__(self) -> str:
        return f"Right({self.value})"

    def __repr__(self) -> str:
        return f"Right({self.value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Right) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Right, self.value))


# Utility functions for creating Either instances
def left(value: E) -> Either[E, T]:
    """Create a Left Either."""
    return Left(value)


def right(value: T) -> Either[E, T]:
    """Create a Right Either."""
    return Right(value)


def map2(
    either1: Either[E, T],
    either2: Either[E, U],
    combiner: Callable[[T, U], V],
) -> Either[E, V]:
    """Combine two Eithers; the first Left encountered wins."""
    return either1.flat_map(lambda a: either2.map(lambda b: combiner(a, b)))


def try_either(func: Callable[[], T]) -> Either[Exception, T]:
    """Run a computation, catching what it raises as a Left.

    Exceptions are kept as they are. Anything else that was raised is wrapped
    in WrappedFailure so every Left holds an Exception.
    """
    try:
        return Right(func())
    except FATAL_EXCEPTIONS:
        raise
    except Exception as e:
        logger.debug("Computation raised %s, returning Left", type(e).__name__)
        return Left(e)
    except BaseException as e:
        logger.debug("Computation raised non-error %s, wrapping it", type(e).__name__)
        return Left(WrappedFailure(e))


def sequence_either(eithers: List[Either[E, T]]) -> Either[E, List[T]]:
    """Transform a List of Eithers into an Either of List.

    Returns the first Left found, or Right with all values.
    """
    return traverse_either(eithers, lambda either: either)


def traverse_either(
    items: List[T],
    func: Callable[[T], Either[E, U]],
) -> Either[E, List[U]]:
    """Apply function to each item and sequence results.

    Items are visited left to right and ``func`` is not called again after
    the first Left, which is returned.
    """
    results: List[U] = NIL
    for item in items:
        either = func(item)
        if either.is_left():
            return cast("Either[E, List[U]]", either)
        results = Cons(cast("Right[E, U]", either).value, results)
    return Right(results.reverse())


__all__ = [
    "Either",
    "Left",
    "Right",
    "left",
    "map2",
    "right",
    "sequence_either",
    "traverse_either",
    "try_either",
]
