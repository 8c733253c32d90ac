"""
Persistent singly linked list.

A ``List`` is either the canonical empty list ``NIL`` or a ``Cons`` cell
holding a head value and a tail ``List``. Cells are frozen, so derived lists
share every unchanged tail with the list they came from.

Every operation is written in terms of two folds. ``fold_left`` walks the list
with a loop, and ``fold_right`` reverses first and then folds left with the
arguments flipped, so neither grows the call stack with the length of the
list.
"""

import operator
from abc import ABC
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Callable, Generic, TypeVar, cast

from fpbook import config
from fpbook.exceptions import EmptyListError

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

_MISSING = object()


class List(Generic[A], ABC):
    """Abstract base class for the two list variants."""

    __slots__ = ()

    @classmethod
    def of(cls, *values: A) -> "List[A]":
        """Create a List from positional arguments."""
        return cls.from_iterable(values)

    @staticmethod
    def from_iterable(values: Iterable[A]) -> "List[A]":
        """Create a List from any finite iterable."""
        result: List[A] = NIL
        for value in reversed(list(values)):
            result = Cons(value, result)
        return result

    def is_empty(self) -> bool:
        """Check if this is the empty list."""
        return self is NIL

    # Folds

    def fold_left(self, zero: B, func: Callable[[B, A], B]) -> B:
        """Combine elements head to tail: ``func(func(zero, a1), a2)...``."""
        acc = zero
        node: List[A] = self
        while isinstance(node, Cons):
            acc = func(acc, node.head)
            node = node.tail
        return acc

    def fold_right(self, zero: B, func: Callable[[A, B], B]) -> B:
        """Combine elements tail to head: ``func(a1, func(a2, ... zero))``."""
        return self.reverse().fold_left(zero, lambda b, a: func(a, b))

    # Reductions

    def sum(self) -> Any:
        """Add up a list of numbers. The sum of Nil is 0."""
        return self.fold_left(0, operator.add)

    def product(self) -> Any:
        """Multiply a list of numbers. The product of Nil is 1.0."""
        return self.fold_left(1.0, operator.mul)

    def length(self) -> int:
        return self.fold_left(0, lambda n, _: n + 1)

    # Transformations

    def reverse(self) -> "List[A]":
        return self.fold_left(cast("List[A]", NIL), lambda acc, a: Cons(a, acc))

    def append(self, other: "List[A]") -> "List[A]":
        """Elements of this list followed by the elements of ``other``.

        ``other`` is shared, not copied.
        """
        return self.fold_right(other, Cons)

    def concat(self: "List[List[B]]") -> "List[B]":
        """Flatten a list of lists, preserving order."""
        return self.fold_right(cast("List[B]", NIL), lambda xs, acc: xs.append(acc))

    def flat_map(self, func: Callable[[A], "List[B]"]) -> "List[B]":
        return self.fold_right(
            cast("List[B]", NIL), lambda a, acc: func(a).append(acc)
        )

    def map(self, func: Callable[[A], B]) -> "List[B]":
        return self.flat_map(lambda a: Cons(func(a), NIL))

    def filter(self, predicate: Callable[[A], bool]) -> "List[A]":
        return self.flat_map(lambda a: Cons(a, NIL) if predicate(a) else NIL)

    def zip_with(self, other: "List[B]", func: Callable[[A, B], C]) -> "List[C]":
        """Combine corresponding elements, stopping at the shorter list."""
        acc: List[C] = NIL
        left: List[A] = self
        right: List[B] = other
        while isinstance(left, Cons) and isinstance(right, Cons):
            acc = Cons(func(left.head, right.head), acc)
            left, right = left.tail, right.tail
        return acc.reverse()

    def add_corresponding(self, other: "List[A]") -> "List[A]":
        return self.zip_with(other, operator.add)

    def add_one(self) -> "List[A]":
        return self.map(lambda n: n + 1)

    def to_string(self) -> "List[str]":
        """Convert each element to a string."""
        return self.map(str)

    # Operations that need a non-empty list

    def get_head(self) -> A:
        if not isinstance(self, Cons):
            raise EmptyListError("take the head of")
        return self.head

    def get_tail(self) -> "List[A]":
        if not isinstance(self, Cons):
            raise EmptyListError("take the tail of")
        return self.tail

    def set_head(self, value: A) -> "List[A]":
        """Replace the head, keeping the existing tail."""
        if not isinstance(self, Cons):
            raise EmptyListError("set the head of")
        return Cons(value, self.tail)

    def drop(self, n: int) -> "List[A]":
        """Remove the first ``n`` elements.

        Raises EmptyListError whenever Nil is reached, including ``drop(0)``
        on Nil and dropping exactly as many elements as the list holds.
        """
        node: List[A] = self
        while True:
            if not isinstance(node, Cons):
                raise EmptyListError("drop from", context={"remaining": n})
            if n <= 0:
                return node
            node = node.tail
            n -= 1

    def drop_while(self, predicate: Callable[[A], bool]) -> "List[A]":
        """Remove the longest prefix whose elements all satisfy ``predicate``."""
        if not isinstance(self, Cons):
            raise EmptyListError("drop from")
        node: List[A] = self
        while isinstance(node, Cons) and predicate(node.head):
            node = node.tail
        return node

    def init(self) -> "List[A]":
        """All elements but the last."""
        if not isinstance(self, Cons):
            raise EmptyListError("take the init of")
        return self.reverse().get_tail().reverse()

    # Queries

    def has_subsequence(self, sub: "List[A]") -> bool:
        """Check whether ``sub`` occurs contiguously anywhere in this list."""
        if not isinstance(sub, Cons):
            return True

        def step(
            acc: "tuple[bool, List[List[A]]]", a: A
        ) -> "tuple[bool, List[List[A]]]":
            found, partials = acc
            if found:
                return acc
            # Advance every partial match (plus a fresh one) past ``a``.
            advanced = Cons(sub, partials).flat_map(
                lambda rest: Cons(rest.get_tail(), NIL)
                if rest.get_head() == a
                else NIL
            )
            return (
                advanced.fold_left(False, lambda f, rest: f or rest.is_empty()),
                advanced.filter(lambda rest: not rest.is_empty()),
            )

        return self.fold_left((False, cast("List[List[A]]", NIL)), step)[0]

    # Python protocols

    def __iter__(self) -> Iterator[A]:
        node: List[A] = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        if self is other:
            return True
        return all(
            a is not _MISSING and b is not _MISSING and a == b
            for a, b in zip_longest(self, other, fillvalue=_MISSING)
        )

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        if not isinstance(self, Cons):
            return "Nil"
        limit = config.get_settings().repr_limit
        shown: list[str] = []
        for index, value in enumerate(self):
            if index == limit:
                shown.append("...")
                break
            shown.append(repr(value))
        return f"List({', '.join(shown)})"

    def __str__(self) -> str:
        return repr(self)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Cons(List[A]):
    """A link in the list: a value and the rest of the list."""

    head: A
    tail: List[A]


class Nil(List[Any]):
    """The empty list. There is only one instance, ``NIL``."""

    __slots__ = ()

    _instance: "Nil | None" = None

    def __new__(cls) -> "Nil":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> str:
        return "NIL"


NIL: List[Any] = Nil()


# Smart constructors
def cons(head: A, tail: List[A]) -> List[A]:
    """Create a Cons cell."""
    return Cons(head, tail)


def nil() -> List[Any]:
    """Return the empty list."""
    return NIL


def list_of(*values: A) -> List[A]:
    """Create a List from positional arguments."""
    return List.from_iterable(values)


__all__ = [
    "NIL",
    "Cons",
    "List",
    "Nil",
    "cons",
    "list_of",
    "nil",
]
