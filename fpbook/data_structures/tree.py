"""
Persistent binary tree.

A ``Tree`` is either a ``Leaf`` holding a value or a ``Branch`` holding two
subtrees. All queries are expressed through ``fold``.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, cast

A = TypeVar("A")
B = TypeVar("B")


class Tree(Generic[A], ABC):
    """Abstract base class for the two tree variants."""

    __slots__ = ()

    def fold(self, leaf_func: Callable[[A], B], branch_func: Callable[[B, B], B]) -> B:
        """Fold leaves with ``leaf_func`` and combine subtrees with ``branch_func``."""
        if isinstance(self, Leaf):
            return leaf_func(self.value)
        node = cast("Branch[A]", self)
        return branch_func(
            node.left.fold(leaf_func, branch_func),
            node.right.fold(leaf_func, branch_func),
        )

    def size(self) -> int:
        """Total number of nodes, leaves and branches alike."""
        return self.fold(lambda _: 1, lambda l, r: l + r + 1)

    def maximum(self) -> Any:
        return self.fold(lambda a: a, max)

    def depth(self) -> int:
        """Number of nodes on the longest path from the root to a leaf."""
        return self.fold(lambda _: 1, lambda l, r: max(l, r) + 1)

    def map(self, func: Callable[[A], B]) -> "Tree[B]":
        """Tree of the same shape with ``func`` applied to every leaf."""
        return self.fold(lambda a: Leaf(func(a)), Branch)


@dataclass(frozen=True, slots=True)
class Leaf(Tree[A]):
    value: A


@dataclass(frozen=True, slots=True)
class Branch(Tree[A]):
    left: Tree[A]
    right: Tree[A]


def leaf(value: A) -> Tree[A]:
    """Create a Leaf."""
    return Leaf(value)


def branch(left: Tree[A], right: Tree[A]) -> Tree[A]:
    """Create a Branch."""
    return Branch(left, right)


__all__ = [
    "Branch",
    "Leaf",
    "Tree",
    "branch",
    "leaf",
]
