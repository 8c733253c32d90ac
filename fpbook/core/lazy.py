"""
Lazy values for non-strict evaluation.

A ``Lazy`` wraps a zero-argument computation and caches its result the first
time it is forced. Streams use one cell for each head and each tail so that
every suspended computation runs at most once.
"""

from typing import Callable, Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")

_UNSET = object()


class Lazy(Generic[T]):
    """Write-once, read-many cell around a suspended computation."""

    __slots__ = ("_computation", "_value")

    def __init__(self, computation: Callable[[], T]) -> None:
        """Initialize Lazy with a computation that has not run yet."""
        self._computation: Callable[[], T] | None = computation
        self._value: object = _UNSET

    @property
    def is_evaluated(self) -> bool:
        """Check whether the computation has already produced a value."""
        return self._value is not _UNSET

    def force(self) -> T:
        """Run the computation on first call, then return the cached value."""
        if self._value is _UNSET:
            computation = cast("Callable[[], T]", self._computation)
            # A raising computation leaves the cell unset.
            self._value = computation()
            self._computation = None
        return self._value  # type: ignore[return-value]

    def __call__(self) -> T:
        return self.force()

    def map(self, func: Callable[[T], U]) -> "Lazy[U]":
        """Map a function over the value without forcing it."""
        return Lazy(lambda: func(self.force()))

    def flat_map(self, func: Callable[[T], "Lazy[U]"]) -> "Lazy[U]":
        """Chain a computation that itself returns a Lazy."""
        return Lazy(lambda: func(self.force()).force())

    def __str__(self) -> str:
        return f"Lazy({self._value})" if self.is_evaluated else "Lazy(<pending>)"

    def __repr__(self) -> str:
        return f"Lazy({self._value!r})" if self.is_evaluated else "Lazy(<pending>)"


def delay(computation: Callable[[], T]) -> Lazy[T]:
    """Suspend a computation."""
    return Lazy(computation)


def now(value: T) -> Lazy[T]:
    """Create an already evaluated Lazy."""
    cell: Lazy[T] = Lazy(lambda: value)
    cell.force()
    return cell


__all__ = [
    "Lazy",
    "delay",
    "now",
]
