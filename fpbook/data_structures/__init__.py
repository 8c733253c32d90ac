"""Persistent, eagerly evaluated data structures."""

from .linked_list import NIL, Cons, List, Nil, cons, list_of, nil
from .tree import Branch, Leaf, Tree, branch, leaf

__all__ = [
    "NIL",
    "Branch",
    "Cons",
    "Leaf",
    "List",
    "Nil",
    "Tree",
    "branch",
    "cons",
    "leaf",
    "list_of",
    "nil",
]
