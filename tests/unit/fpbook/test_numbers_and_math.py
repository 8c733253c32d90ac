"""Tests for the numeric helpers and pure exercises."""

import pytest

from fpbook.core.numbers import mean, parse_int_opt, variance
from fpbook.core.option import NONE, Some
from fpbook.data_structures.linked_list import NIL, List
from fpbook.exceptions import InvalidArgumentError
from fpbook.pure.math import (
    absolute,
    factorial_for,
    factorial_recursive,
    factorial_while,
    fib,
    fib_tail,
    fib_tree,
    find_first,
    find_first_string,
    format_result,
    is_sorted,
)

FACTORIALS = [factorial_recursive, factorial_while, factorial_for]
FIBONACCIS = [fib, fib_tail, fib_tree]


class TestNumbers:
    """Test Option-returning numeric helpers."""

    def test_parse_int_opt(self):
        assert parse_int_opt("123") == Some(123)
        assert parse_int_opt("-7") == Some(-7)
        assert parse_int_opt("adfsad") is NONE
        assert parse_int_opt("") is NONE

    def test_mean(self):
        assert mean(List.of(1, 2, 3)) == Some(2.0)
        assert mean(NIL) is NONE

    def test_variance(self):
        assert variance(List.of(2, 4)) == Some(1.0)
        assert variance(List.of(5, 5, 5)) == Some(0.0)
        assert variance(NIL) is NONE


class TestFactorial:
    """Test the factorial variants."""

    @pytest.mark.parametrize("factorial", FACTORIALS)
    def test_known_values(self, factorial):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(6) == 720

    @pytest.mark.parametrize("factorial", FACTORIALS)
    def test_rejects_non_integers(self, factorial):
        with pytest.raises(InvalidArgumentError) as exc_info:
            factorial(2.5)
        assert exc_info.value.get_error_context()["argument"] == "n"

    @pytest.mark.parametrize("factorial", FACTORIALS)
    def test_rejects_booleans(self, factorial):
        with pytest.raises(InvalidArgumentError):
            factorial(True)

    def test_format_result(self):
        assert format_result("factorial", 6, factorial_for) == "The factorial of 6 is 720"
        assert format_result("absolute value", -3, absolute) == "The absolute value of -3 is 3"


class TestFibonacci:
    """Test the 1-indexed Fibonacci variants."""

    @pytest.mark.parametrize("fibonacci", FIBONACCIS)
    def test_first_values(self, fibonacci):
        assert [fibonacci(n) for n in range(1, 9)] == [0, 1, 1, 2, 3, 5, 8, 13]

    @pytest.mark.parametrize("fibonacci", [fib, fib_tail])
    def test_larger_value(self, fibonacci):
        assert fibonacci(51) == 12586269025

    @pytest.mark.parametrize("fibonacci", FIBONACCIS)
    def test_rejects_non_integers(self, fibonacci):
        with pytest.raises(InvalidArgumentError):
            fibonacci("3")


class TestSearching:
    """Test absolute, is_sorted and find_first."""

    def test_absolute(self):
        assert absolute(-5) == 5
        assert absolute(5) == 5
        assert absolute(0) == 0

    def test_is_sorted(self):
        ascending = lambda a, b: a <= b  # noqa: E731
        assert is_sorted([0, 1], ascending)
        assert is_sorted([1, 1, 2], ascending)
        assert not is_sorted([2, 1], ascending)
        assert is_sorted([], ascending)
        assert is_sorted([9], ascending)

    def test_find_first(self):
        words = ["lorem", "ipsum", "dolor", "sit"]
        assert find_first(words, lambda s: s == "ipsum") == 1
        assert find_first(words, lambda s: s == "amet") == -1
        assert find_first([], lambda s: True) == -1

    def test_find_first_string(self):
        assert find_first_string(["a", "b", "b"], "b") == 1
        assert find_first_string(["a"], "z") == -1
