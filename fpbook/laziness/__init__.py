"""Non-strict data structures."""

from .stream import (
    EMPTY,
    Stream,
    constant,
    cons,
    empty,
    fibs,
    from_n,
    ones,
    stream_of,
    unfold,
)

__all__ = [
    "EMPTY",
    "Stream",
    "cons",
    "constant",
    "empty",
    "fibs",
    "from_n",
    "ones",
    "stream_of",
    "unfold",
]
