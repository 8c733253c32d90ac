"""
Functional Programming Core Components

This module provides the core monads (Option, Either), the Lazy cell used for
non-strict evaluation, and Option-returning numeric helpers.
"""

from .either import (
    Either,
    Left,
    Right,
    left,
    right,
    sequence_either,
    traverse_either,
    try_either,
)
from .lazy import Lazy, delay, now
from .numbers import mean, parse_int_opt, variance
from .option import (
    NONE,
    Nothing,
    Option,
    Some,
    lift,
    none,
    option_from_nullable,
    sequence_option,
    some,
    traverse_option,
    try_option,
)

__all__ = [
    "NONE",
    "Either",
    "Lazy",
    "Left",
    "Nothing",
    "Option",
    "Right",
    "Some",
    "delay",
    "left",
    "lift",
    "mean",
    "none",
    "now",
    "option_from_nullable",
    "parse_int_opt",
    "right",
    "sequence_either",
    "sequence_option",
    "some",
    "traverse_either",
    "traverse_option",
    "try_either",
    "try_option",
    "variance",
]
