"""Tests for the Either monad and its combinators."""

import pytest

from fpbook.core.either import (
    Left,
    Right,
    left,
    map2,
    right,
    sequence_either,
    traverse_either,
    try_either,
)
from fpbook.data_structures.linked_list import NIL, List
from fpbook.exceptions import WrappedFailure


def concat(a, b):
    return f"{a}{b}"


def safe_div(a, b):
    if b == 0:
        return left("division by zero")
    return right(a / b)


class TestEitherBasics:
    """Test constructors, predicates and equality."""

    def test_predicates(self):
        assert left("x").is_left()
        assert not left("x").is_right()
        assert right(1).is_right()
        assert not right(1).is_left()

    def test_equality(self):
        assert left("x") == Left("x")
        assert right(1) == Right(1)
        assert left(1) != right(1)
        assert len({left(1), left(1), right(1)}) == 2

    def test_repr(self):
        assert repr(left("x")) == "Left('x')"
        assert str(right(1)) == "Right(1)"


class TestEitherCombinators:
    """Test flat_map, map, map_left, fold, get_or_else and or_else."""

    def test_flat_map(self):
        assert right(10).flat_map(lambda a: safe_div(a, 2)) == Right(5.0)
        assert right(10).flat_map(lambda a: safe_div(a, 0)) == Left("division by zero")
        assert left("boom").flat_map(lambda a: safe_div(a, 2)) == Left("boom")

    def test_map(self):
        assert right(2).map(lambda a: a + 1) == Right(3)
        assert left("boom").map(lambda a: a + 1) == Left("boom")

    def test_map_left(self):
        assert left("boom").map_left(str.upper) == Left("BOOM")
        assert right(1).map_left(str.upper) == Right(1)

    def test_fold(self):
        assert left("e").fold(len, lambda a: a * 2) == 1
        assert right(4).fold(len, lambda a: a * 2) == 8

    def test_get_or_else(self):
        assert right(1).get_or_else(lambda: 0) == 1
        assert left("e").get_or_else(lambda: 0) == 0

    def test_or_else(self):
        assert right(1).or_else(lambda: right(2)) == Right(1)
        assert left("e").or_else(lambda: right(2)) == Right(2)

    def test_or_else_alternative_is_lazy(self):
        def explode():
            raise AssertionError("alternative should not be evaluated")

        assert right(1).or_else(explode) == Right(1)


class TestMap2AndSequence:
    """Test combining several Eithers."""

    def test_map2_first_left_wins(self):
        assert map2(left("x"), right(1), concat) == Left("x")
        assert map2(right(1), left("y"), concat) == Left("y")
        assert map2(left("x"), left("y"), concat) == Left("x")

    def test_map2_both_right(self):
        assert map2(right("x"), right(1), concat) == Right("x1")

    def test_sequence(self):
        assert sequence_either(List.of(right(1), right(2))) == Right(List.of(1, 2))
        assert sequence_either(NIL) == Right(NIL)

    def test_sequence_returns_the_first_left(self):
        eithers = List.of(right(1), left("first"), left("second"))
        assert sequence_either(eithers) == Left("first")

    def test_traverse(self):
        assert traverse_either(List.of(1, 2), lambda a: safe_div(4, a)) == Right(
            List.of(4.0, 2.0)
        )
        assert traverse_either(List.of(1, 0), lambda a: safe_div(4, a)) == Left(
            "division by zero"
        )

    def test_traverse_stops_at_the_first_left(self):
        calls = []

        def check(a):
            calls.append(a)
            return left(f"bad {a}") if a == 1 else right(a)

        assert traverse_either(List.of(1, 2, 3), check) == Left("bad 1")
        assert calls == [1]

    def test_traverse_visits_items_left_to_right(self):
        calls = []

        def record(a):
            calls.append(a)
            return right(a * 10)

        assert traverse_either(List.of(1, 2, 3), record) == Right(List.of(10, 20, 30))
        assert calls == [1, 2, 3]

    def test_traverse_handles_long_lists(self):
        items = List.from_iterable(range(10_000))
        assert traverse_either(items, right) == Right(items)


class TestTryEither:
    """Test the exception bridge."""

    def test_success(self):
        assert try_either(lambda: int("42")) == Right(42)

    def test_exception_is_kept_unchanged(self):
        error = ValueError("bad value")

        def fail():
            raise error

        result = try_either(fail)
        assert result.is_left()
        assert result.fold(lambda e: e, lambda a: a) is error

    def test_non_exception_is_wrapped(self):
        class Abort(BaseException):
            pass

        def abort():
            raise Abort("This is not an error")

        result = try_either(abort)
        assert result == Left(WrappedFailure(Abort("This is not an error")))
        wrapped = result.fold(lambda e: e, lambda a: a)
        assert isinstance(wrapped, Exception)
        assert wrapped.message == "This is not an error"
        assert isinstance(wrapped.payload, Abort)

    def test_system_exit_propagates(self):
        def leave():
            raise SystemExit(1)

        with pytest.raises(SystemExit):
            try_either(leave)
