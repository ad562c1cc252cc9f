"""Tests for three-way comparison helpers."""

import operator
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from relcheck.ordering import Ordering, compare, holds, partial_cmp


class TestOrdering:
    @given(st.integers())
    def test_from_int_follows_sign(self, value):
        """from_int maps negative, zero and positive to LESS, EQUAL, GREATER."""
        expected = Ordering.LESS if value < 0 else Ordering.GREATER if value > 0 else Ordering.EQUAL
        assert Ordering.from_int(value) is expected

    def test_reverse(self):
        assert Ordering.LESS.reverse() is Ordering.GREATER
        assert Ordering.EQUAL.reverse() is Ordering.EQUAL
        assert Ordering.GREATER.reverse() is Ordering.LESS


class TestHolds:
    def test_defined_comparison(self):
        assert holds(operator.lt, 1, 2) is True
        assert holds(operator.gt, 1, 2) is False

    def test_type_error_is_undefined(self):
        """Comparisons Python refuses to evaluate are undefined, not false."""
        assert holds(operator.lt, 1, "a") is None


class TestPartialCmp:
    @given(st.integers(), st.integers())
    def test_matches_integer_order(self, a, b):
        assert partial_cmp(a, b) is Ordering.from_int((a > b) - (a < b))

    def test_nan_is_incomparable(self):
        assert partial_cmp(float("nan"), 1.0) is None
        assert partial_cmp(float("nan"), float("nan")) is None

    def test_disjoint_sets_are_incomparable(self):
        """Sets are ordered by inclusion, so disjoint sets have no order."""
        assert partial_cmp({1}, {2}) is None
        assert partial_cmp({1}, {1, 2}) is Ordering.LESS

    def test_unorderable_types_are_incomparable(self):
        assert partial_cmp(1, "a") is None

    def test_cross_type_numbers(self):
        assert partial_cmp(1, Fraction(1, 1)) is Ordering.EQUAL


class TestCompare:
    def test_default_is_partial_cmp(self):
        assert compare(None, 3, 2) is Ordering.GREATER

    def test_ordering_result_passes_through(self):
        assert compare(lambda a, b: Ordering.LESS, 3, 2) is Ordering.LESS

    def test_int_result_is_normalised(self):
        """cmp-style comparators for functools.cmp_to_key are accepted."""
        assert compare(lambda a, b: a - b, 10, 3) is Ordering.GREATER
        assert compare(lambda a, b: a - b, 3, 10) is Ordering.LESS
        assert compare(lambda a, b: a - b, 3, 3) is Ordering.EQUAL

    def test_none_result_is_incomparable(self):
        assert compare(lambda a, b: None, 1, 2) is None

    def test_other_results_rejected(self):
        with pytest.raises(TypeError):
            compare(lambda a, b: "less", 1, 2)
        with pytest.raises(TypeError):
            compare(lambda a, b: True, 1, 2)
