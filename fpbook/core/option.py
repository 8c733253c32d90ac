"""
Option monad for handling optional values in functional programming.

This module provides an Option type for representing values that may or may not exist,
with Some representing a value and Nothing representing absence. Defaults and
alternatives are passed as thunks and only evaluated when they are needed.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar, cast

from fpbook.data_structures.linked_list import NIL, Cons, List

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

# Never converted into a value by the Try bridges.
FATAL_EXCEPTIONS = (KeyboardInterrupt, SystemExit, GeneratorExit)


class Option(Generic[T], ABC):
    """Abstract base class for Option monad."""

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        """Check if this is a Some (has value)."""

    def is_empty(self) -> bool:
        """Check if this is Nothing (no value)."""
        return not self.is_some()

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Map function over Some value, preserving Nothing."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Flat map function over Some value."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep a Some only if its value satisfies the predicate."""

    @abstractmethod
    def fold(self, if_empty: Callable[[], U], some_func: Callable[[T], U]) -> U:
        """Fold Option by providing a thunk for Nothing and a function for Some."""

    def get_or_else(self, default: Callable[[], U]) -> T | U:
        """Get Some value or evaluate the default thunk."""
        return self.fold(default, lambda value: value)

    def or_else(self, alternative: Callable[[], "Option[U]"]) -> "Option[T | U]":
        """Return this if Some, otherwise evaluate the alternative thunk."""
        if self.is_some():
            return self
        return alternative()


class Some(Option[T]):
    """Some variant of Option representing a value."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def is_some(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> "Option[U]":
        return Some(func(self.value))

    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        return func(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        return self if predicate(self.value) else NONE

    def fold(self, if_empty: Callable[[], U], some_func: Callable[[T], U]) -> U:
        return some_func(self.value)

    def __str__(self) -> str:
        return f"Some({self.value})"

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Some, self.value))


class Nothing(Option[Any]):
    """Nothing variant of Option representing absence of value.

    There is only one instance, ``NONE``.
    """

    __slots__ = ()

    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def map(self, func: Callable[[Any], U]) -> "Option[U]":
        return self

    def flat_map(self, func: Callable[[Any], "Option[U]"]) -> "Option[U]":
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> "Option[Any]":
        return self

    def fold(self, if_empty: Callable[[], U], some_func: Callable[[Any], U]) -> U:
        return if_empty()

    def __reduce__(self) -> str:
        return "NONE"

    def __str__(self) -> str:
        return "Nothing"

    def __repr__(self) -> str:
        return "Nothing()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)


NONE: Option[Any] = Nothing()


# Utility functions for creating Option instances
def some(value: T) -> Option[T]:
    """Create a Some Option."""
    return Some(value)


def none() -> Option[Any]:
    """Return the Nothing Option."""
    return NONE


def option_from_nullable(value: T | None) -> Option[T]:
    """Create Option from potentially null value."""
    return Some(value) if value is not None else NONE


def lift(func: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    """Promote a plain function to one that works inside Option."""
    return lambda option: option.map(func)


def map2(
    option1: Option[T],
    option2: Option[U],
    combiner: Callable[[T, U], V],
) -> Option[V]:
    """Combine two options; Nothing if either is Nothing."""
    return option1.flat_map(lambda a: option2.map(lambda b: combiner(a, b)))


def try_option(func: Callable[[], T]) -> Option[T]:
    """Run a computation, turning any raised exception into Nothing."""
    try:
        return Some(func())
    except FATAL_EXCEPTIONS:
        raise
    except BaseException as e:
        logger.debug("Computation raised %s, returning Nothing", type(e).__name__)
        return NONE


def sequence_option(options: List[Option[T]]) -> Option[List[T]]:
    """Transform a List of Options into an Option of List.

    Returns Nothing if any option is Nothing, otherwise Some with all values.
    An empty List gives ``Some(NIL)``.
    """
    return traverse_option(options, lambda option: option)


def traverse_option(
    items: List[T],
    func: Callable[[T], Option[U]],
) -> Option[List[U]]:
    """Apply function to each item and sequence results.

    Items are visited left to right and ``func`` is not called again after
    the first Nothing.
    """
    results: List[U] = NIL
    for item in items:
        option = func(item)
        if option.is_empty():
            return NONE
        results = Cons(cast("Some[U]", option).value, results)
    return Some(results.reverse())


__all__ = [
    "NONE",
    "Nothing",
    "Option",
    "Some",
    "lift",
    "map2",
    "none",
    "option_from_nullable",
    "sequence_option",
    "some",
    "traverse_option",
    "try_option",
]
