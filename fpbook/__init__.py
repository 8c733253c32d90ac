"""
fpbook: persistent data structures and error-handling combinators.

Companion code for working through a functional programming textbook in
Python. The package provides:

- ``Option`` and ``Either`` for total handling of absence and failure
- ``List``, a persistent singly linked list built on two folds
- ``Tree``, a persistent binary tree built on a single fold
- ``Stream``, a lazy, memoized and possibly infinite sequence
- ``SimpleRNG``, a pure random number generator that threads its state

Usage:
    from fpbook import List, Stream, some

    List.of(1, 2, 3).fold_right(0, lambda a, b: a + b)   # 6
    Stream.of(2, 4, 1).take_while(lambda n: n % 2 == 0).to_list()
"""

import logging

from .config import Settings, create_settings, get_settings, set_settings
from .core import (
    NONE,
    Either,
    Lazy,
    Left,
    Nothing,
    Option,
    Right,
    Some,
    left,
    none,
    right,
    some,
    try_either,
    try_option,
)
from .data_structures import NIL, Branch, Leaf, List, Tree, branch, leaf
from .exceptions import (
    ConfigurationError,
    EmptyContainerError,
    EmptyListError,
    EmptyStreamError,
    FPBookError,
    InvalidArgumentError,
    WrappedFailure,
)
from .laziness import EMPTY, Stream
from .state import RNG, SimpleRNG

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "NIL",
    "NONE",
    "RNG",
    "Branch",
    "ConfigurationError",
    "Either",
    "EmptyContainerError",
    "EmptyListError",
    "EmptyStreamError",
    "FPBookError",
    "InvalidArgumentError",
    "Lazy",
    "Leaf",
    "Left",
    "List",
    "Nothing",
    "Option",
    "Right",
    "Settings",
    "SimpleRNG",
    "Some",
    "Stream",
    "Tree",
    "WrappedFailure",
    "branch",
    "create_settings",
    "get_settings",
    "leaf",
    "left",
    "none",
    "right",
    "set_settings",
    "some",
    "try_either",
    "try_option",
]
