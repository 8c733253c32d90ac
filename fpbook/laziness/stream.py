"""
Lazy, memoized streams.

A ``Stream`` is either the canonical ``EMPTY`` stream or a ``Cons`` node whose
head and tail are suspended computations. Each suspended computation lives in
a ``Lazy`` cell, so it runs at most once no matter how often the node is
inspected. Streams may be infinite; only operations that need every element,
such as ``to_list``, require a finite stream.

Most transformations are built from one of two primitives: ``fold_right``,
which hands the combining function the rest of the fold as a thunk so it can
stop early, and ``unfold``, which grows a stream from a seed.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, Callable, Generic, TypeVar, cast

from fpbook import config
from fpbook.core.lazy import Lazy
from fpbook.core.option import NONE, Option, Some
from fpbook.data_structures.linked_list import List
from fpbook.exceptions import EmptyStreamError

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
S = TypeVar("S")

_MISSING = object()


class Stream(Generic[A], ABC):
    """Abstract base class for the two stream variants."""

    __slots__ = ()

    @staticmethod
    def of(*values: A) -> "Stream[A]":
        """Create a finite Stream from positional arguments."""
        return _from_sequence(values, 0)

    @staticmethod
    def from_iterable(values: Iterable[A]) -> "Stream[A]":
        """Create a Stream that pulls from ``values`` on demand."""
        iterator = iter(values)

        def pull(it: Iterator[A]) -> "Option[tuple[A, Iterator[A]]]":
            value = next(it, _MISSING)
            if value is _MISSING:
                return NONE
            return Some((cast(A, value), it))

        return unfold(iterator, pull)

    @abstractmethod
    def is_empty(self) -> bool:
        """Check if this is the empty stream."""

    @abstractmethod
    def head(self) -> A:
        """Force and return the first element."""

    @abstractmethod
    def tail(self) -> "Stream[A]":
        """Force and return the rest of the stream."""

    def head_option(self) -> Option[A]:
        return self.fold_right(lambda: NONE, lambda a, _: Some(a))

    def fold_right(self, zero: Callable[[], B], func: Callable[[A, Callable[[], B]], B]) -> B:
        """Fold from the right, passing the folded rest as a thunk.

        ``func`` only walks further down the stream if it calls the thunk.
        """
        if self.is_empty():
            return zero()
        return func(self.head(), lambda: self.tail().fold_right(zero, func))

    def exists(self, predicate: Callable[[A], bool]) -> bool:
        """Check whether any element satisfies ``predicate``, stopping at the first."""
        return any(predicate(a) for a in self)

    def for_all(self, predicate: Callable[[A], bool]) -> bool:
        """Check whether every element satisfies ``predicate``.

        Stops at the first failure. An empty stream gives False.
        """
        if self.is_empty():
            return False
        return all(predicate(a) for a in self)

    # Built on unfold

    def map(self, func: Callable[[A], B]) -> "Stream[B]":
        def step(s: Stream[A]) -> "Option[tuple[B, Stream[A]]]":
            if s.is_empty():
                return NONE
            return Some((func(s.head()), s.tail()))

        return unfold(self, step)

    def filter(self, predicate: Callable[[A], bool]) -> "Stream[A]":
        def step(s: Stream[A]) -> "Option[tuple[A, Stream[A]]]":
            s = s.drop_while(lambda a: not predicate(a))
            if s.is_empty():
                return NONE
            return Some((s.head(), s.tail()))

        return unfold(self, step)

    def take(self, n: int) -> "Stream[A]":
        def step(state: "tuple[Stream[A], int]") -> "Option[tuple[A, tuple[Stream[A], int]]]":
            s, remaining = state
            if s.is_empty() or remaining <= 0:
                return NONE
            if remaining == 1:
                return Some((s.head(), (empty(), 0)))
            return Some((s.head(), (s.tail(), remaining - 1)))

        return unfold((self, n), step)

    def take_while(self, predicate: Callable[[A], bool]) -> "Stream[A]":
        def step(s: Stream[A]) -> "Option[tuple[A, Stream[A]]]":
            if s.is_empty() or not predicate(s.head()):
                return NONE
            return Some((s.head(), s.tail()))

        return unfold(self, step)

    def zip_with(self, other: "Stream[B]", func: Callable[[A, B], C]) -> "Stream[C]":
        """Combine corresponding elements, stopping at the shorter stream."""

        def step(
            state: "tuple[Stream[A], Stream[B]]",
        ) -> "Option[tuple[C, tuple[Stream[A], Stream[B]]]]":
            sa, sb = state
            if sa.is_empty() or sb.is_empty():
                return NONE
            return Some((func(sa.head(), sb.head()), (sa.tail(), sb.tail())))

        return unfold((self, other), step)

    def zip_all(self, other: "Stream[B]") -> "Stream[tuple[Option[A], Option[B]]]":
        """Pair elements until both streams end, padding the shorter with Nothing."""

        def step(
            state: "tuple[Stream[A], Stream[B]]",
        ) -> "Option[tuple[tuple[Option[A], Option[B]], tuple[Stream[A], Stream[B]]]]":
            sa, sb = state
            if sa.is_empty() and sb.is_empty():
                return NONE
            next_a: Stream[A] = empty() if sa.is_empty() else sa.tail()
            next_b: Stream[B] = empty() if sb.is_empty() else sb.tail()
            return Some(((sa.head_option(), sb.head_option()), (next_a, next_b)))

        return unfold((self, other), step)

    def tails(self) -> "Stream[Stream[A]]":
        """Every suffix of this stream, starting with itself and ending with EMPTY."""

        def step(
            state: "Option[Stream[A]]",
        ) -> "Option[tuple[Stream[A], Option[Stream[A]]]]":
            return state.map(
                lambda s: (s, NONE if s.is_empty() else Some(s.tail()))
            )

        return unfold(cast("Option[Stream[A]]", Some(self)), step)

    # Built on fold_right

    def append(self, other: Callable[[], "Stream[A]"]) -> "Stream[A]":
        """This stream followed by the stream produced by the ``other`` thunk."""
        return self.fold_right(other, lambda a, rest: cons(lambda: a, rest))

    def flat_map(self, func: Callable[[A], "Stream[B]"]) -> "Stream[B]":
        return self.fold_right(
            cast("Callable[[], Stream[B]]", empty),
            lambda a, rest: func(a).append(rest),
        )

    def find(self, predicate: Callable[[A], bool]) -> Option[A]:
        return self.filter(predicate).head_option()

    # Prefixes and subsequences

    def drop(self, n: int) -> "Stream[A]":
        """Skip the first ``n`` elements; dropping past the end gives EMPTY."""
        node: Stream[A] = self
        while n > 0 and not node.is_empty():
            node = node.tail()
            n -= 1
        return node

    def drop_while(self, predicate: Callable[[A], bool]) -> "Stream[A]":
        node: Stream[A] = self
        while not node.is_empty() and predicate(node.head()):
            node = node.tail()
        return node

    def starts_with(self, prefix: "Stream[A]") -> bool:
        """Check whether ``prefix`` matches the leading elements of this stream.

        Forces no more of this stream than ``prefix`` has elements.
        """
        node: Stream[A] = self
        expected = prefix
        while not expected.is_empty():
            if node.is_empty() or node.head() != expected.head():
                return False
            expected = expected.tail()
            if expected.is_empty():
                break
            node = node.tail()
        return True

    def has_subsequence(self, sub: "Stream[A]") -> bool:
        """Check whether ``sub`` appears contiguously anywhere in this stream."""
        return self.tails().exists(lambda suffix: suffix.starts_with(sub))

    # Conversions

    def to_list(self) -> List[A]:
        """Force every element into a List. Never returns for an infinite stream."""
        return List.from_iterable(self)

    def __iter__(self) -> Iterator[A]:
        node: Stream[A] = self
        while not node.is_empty():
            yield node.head()
            node = node.tail()


class Cons(Stream[A]):
    """A non-empty stream: a suspended head and a suspended tail."""

    __slots__ = ("_head", "_tail")

    def __init__(self, head: Lazy[A], tail: "Lazy[Stream[A]]") -> None:
        self._head = head
        self._tail = tail

    def is_empty(self) -> bool:
        return False

    def head(self) -> A:
        return self._head.force()

    def tail(self) -> Stream[A]:
        return self._tail.force()

    def __repr__(self) -> str:
        # Only shows what has already been forced.
        limit = config.get_settings().repr_limit
        shown: list[str] = []
        node: Stream[A] = self
        while isinstance(node, Cons):
            if len(shown) == limit:
                shown.append("...")
                break
            shown.append(repr(node._head.force()) if node._head.is_evaluated else "?")
            if not node._tail.is_evaluated:
                shown.append("...")
                break
            node = node._tail.force()
        return f"Stream({', '.join(shown)})"


class Empty(Stream[Any]):
    """The empty stream. There is only one instance, ``EMPTY``."""

    __slots__ = ()

    _instance: "Empty | None" = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return True

    def head(self) -> Any:
        raise EmptyStreamError("take the head of")

    def tail(self) -> Stream[Any]:
        raise EmptyStreamError("take the tail of")

    def __reduce__(self) -> str:
        return "EMPTY"

    def __repr__(self) -> str:
        return "Empty"


EMPTY: Stream[Any] = Empty()


# Smart constructors
def cons(head: Callable[[], A], tail: Callable[[], Stream[A]]) -> Stream[A]:
    """Create a non-empty stream whose head and tail are memoized."""
    return Cons(Lazy(head), Lazy(tail))


def empty() -> Stream[Any]:
    """Return the empty stream."""
    return EMPTY


def stream_of(*values: A) -> Stream[A]:
    """Create a finite Stream from positional arguments."""
    return Stream.of(*values)


def _from_sequence(values: "tuple[A, ...]", index: int) -> Stream[A]:
    if index >= len(values):
        return EMPTY
    return cons(lambda: values[index], lambda: _from_sequence(values, index + 1))


def unfold(seed: S, func: Callable[[S], "Option[tuple[A, S]]"]) -> Stream[A]:
    """Grow a stream from ``seed``; it ends when ``func`` returns Nothing."""
    return func(seed).fold(
        empty,
        lambda pair: cons(lambda: pair[0], lambda: unfold(pair[1], func)),
    )


# Generators
def constant(value: A) -> Stream[A]:
    """An infinite stream of ``value``."""
    return unfold(value, lambda _: Some((value, value)))


def from_n(n: int) -> Stream[int]:
    """The infinite stream n, n + 1, n + 2, ..."""
    return unfold(n, lambda i: Some((i, i + 1)))


def fibs() -> Stream[int]:
    """The infinite Fibonacci stream 0, 1, 1, 2, 3, 5, ..."""
    return unfold((0, 1), lambda pair: Some((pair[0], (pair[1], pair[0] + pair[1]))))


ones: Stream[int] = constant(1)


__all__ = [
    "EMPTY",
    "Cons",
    "Empty",
    "Stream",
    "constant",
    "cons",
    "empty",
    "fibs",
    "from_n",
    "ones",
    "stream_of",
    "unfold",
]
