"""Integration tests for the public checkers."""

import math
import random
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Optional

import pytest
from hypothesis import given, strategies as st

from relcheck import (
    EqualityViolation,
    IteratorViolation,
    PartialOrderViolation,
    RelationError,
    TotalOrderViolation,
    check_double_ended_iterator,
    check_fused_iterator,
    check_hash,
    check_iterator,
    check_partial_equality,
    check_partial_order,
    check_strict_equality,
    check_total_order,
    ensure,
)
from tests.helpers.broken import (
    Deck,
    EchoCursor,
    FirstAsLastCursor,
    Restarting,
    RotatedSequence,
    Shrinking,
    block,
    transaction,
)


@dataclass(frozen=True, order=True)
class Version:
    major: int
    minor: int
    label: str = field(default="", compare=False)


@dataclass
class Pair:
    first: Optional[int]
    second: Optional[int]


versions = st.builds(Version, st.integers(0, 5), st.integers(0, 5), st.text(max_size=3))
pairs = st.builds(Pair, st.none() | st.integers(), st.none() | st.integers())


class TestEqualityAndOrder:
    @given(st.integers(), st.integers(), st.integers())
    def test_integers_are_totally_ordered(self, a, b, c):
        assert check_total_order(a, b, c) is None

    @given(st.text(), st.text(), st.text())
    def test_strings_are_totally_ordered(self, a, b, c):
        assert check_total_order(a, b, c) is None

    @given(versions, versions, versions)
    def test_ordered_dataclasses(self, a, b, c):
        assert check_total_order(a, b, c) is None

    @given(st.integers(), st.integers(), st.integers())
    def test_comparator_for_cmp_to_key(self, a, b, c):
        """An int-returning comparator agrees with the operators it mirrors."""
        assert check_total_order(a, b, c, cmp=lambda x, y: (x > y) - (x < y)) is None

    @given(st.floats(), st.floats(), st.floats())
    def test_floats_are_a_partial_order(self, a, b, c):
        assert check_partial_equality(a, b, c) is None
        assert check_partial_order(a, b, c) is None

    def test_nan_breaks_reflexivity(self):
        nan = float("nan")
        assert check_partial_equality(nan, nan, nan) is None
        assert check_strict_equality(nan, nan, nan) is EqualityViolation.BROKE_REFLEXIVITY
        assert check_total_order(nan, 1.0, 2.0) is EqualityViolation.BROKE_REFLEXIVITY

    @given(
        st.frozensets(st.integers(0, 3)),
        st.frozensets(st.integers(0, 3)),
        st.frozensets(st.integers(0, 3)),
    )
    def test_sets_are_a_partial_order(self, a, b, c):
        assert check_partial_order(a, b, c) is None

    def test_disjoint_sets_are_not_totally_ordered(self):
        result = check_total_order(frozenset({1}), frozenset({2}), frozenset({3}))
        assert result is TotalOrderViolation.BAD_CMP

    def test_mixed_numeric_types(self):
        assert check_total_order(1, Fraction(1, 2), 0.25) is None

    def test_trigger_ordering_is_rejected(self):
        """Triggers that ignore their payload when ordering are caught either way."""
        a, b, c = transaction(1), transaction(2), block(0)
        assert check_total_order(a, b, c) is PartialOrderViolation.BAD_LE
        assert check_total_order(a, b, c, cmp=lambda x, y: x.cmp(y)) is PartialOrderViolation.BAD_PARTIAL_CMP

    def test_trigger_ordering_passes_on_lucky_samples(self):
        assert check_total_order(transaction(1), block(1), block(1)) is None

    @given(st.integers(), st.integers(), st.integers())
    def test_repeated_checks_agree(self, a, b, c):
        assert check_total_order(a, b, c) == check_total_order(a, b, c)


class TestHash:
    @given(st.text(), st.text())
    def test_strings(self, a, b):
        assert check_hash(a, b) is None

    @given(st.integers(), st.integers())
    def test_integers(self, a, b):
        assert check_hash(a, b) is None

    @given(st.lists(st.binary()), st.lists(st.binary()))
    def test_lists_of_bytes(self, a, b):
        assert check_hash(a, b) is None

    @given(st.frozensets(st.text()), st.frozensets(st.text()))
    def test_frozensets(self, a, b):
        assert check_hash(a, b) is None

    @given(
        st.tuples(st.integers(), st.text(), st.booleans()),
        st.tuples(st.integers(), st.text(), st.booleans()),
    )
    def test_tuples(self, a, b):
        assert check_hash(a, b) is None

    @given(versions, versions)
    def test_dataclass_skips_uncompared_fields(self, a, b):
        assert check_hash(a, b) is None

    def test_concatenation_does_not_collide(self):
        assert check_hash(("ab", "c"), ("a", "bc")) is None

    def test_none_in_different_positions(self):
        assert check_hash(Pair(None, 1), Pair(1, None)) is None
        assert check_hash([None, 1], [1, None]) is None

    @given(pairs, pairs)
    def test_optional_dataclass_fields(self, a, b):
        assert check_hash(a, b) is None

    @pytest.mark.parametrize("a, b", [((1,), (True,)), ([1], [1.0]), ((0.0, False), (0, 0))])
    def test_numbers_equal_across_types(self, a, b):
        """1, 1.0 and True compare equal, so they must feed the same bytes."""
        assert check_hash(a, b) is None

    @given(
        st.lists(st.integers() | st.booleans() | st.floats(allow_nan=False)),
        st.lists(st.integers() | st.booleans() | st.floats(allow_nan=False)),
    )
    def test_mixed_number_lists(self, a, b):
        assert check_hash(a, b) is None


class TestIterators:
    @given(st.lists(st.integers()))
    def test_lists(self, items):
        assert check_iterator(items) is None
        assert check_fused_iterator(items) is None

    @given(st.text())
    def test_strings(self, text):
        assert check_iterator(text) is None

    @given(st.integers(-50, 50), st.integers(-50, 50), st.integers(1, 5))
    def test_ranges(self, start, stop, step):
        assert check_iterator(range(start, stop, step)) is None

    @given(st.dictionaries(st.text(), st.integers()))
    def test_dicts(self, mapping):
        assert check_iterator(mapping) is None
        assert check_iterator(mapping.items()) is None

    @given(st.sets(st.integers()))
    def test_sets(self, items):
        assert check_iterator(items) is None

    def test_generators_are_rejected(self):
        with pytest.raises(TypeError):
            check_iterator(x for x in range(3))

    def test_cursor_last_returning_first_item(self):
        deck = Deck([1, 2, 3], cursor_type=FirstAsLastCursor)
        assert check_iterator(deck) is IteratorViolation.BAD_LAST

    def test_shared_traversal_state(self):
        assert check_iterator(Shrinking([1, 2, 3])) is IteratorViolation.BAD_COUNT

    def test_restarting_cursor(self):
        assert check_iterator(Restarting([1, 2])) is None
        result = check_fused_iterator(Restarting([1, 2]))
        assert result is IteratorViolation.FUSED_ITERATOR_RETURNED_ITEM_AFTER_EXHAUSTION

    def test_fused_margin_from_environment(self, monkeypatch):
        monkeypatch.setenv("RELCHECK_FUSED_POLL_MARGIN", "3")
        assert check_fused_iterator([1, 2, 3]) is None


class TestDoubleEndedIterators:
    @given(st.lists(st.integers()), st.randoms())
    def test_lists(self, items, rng):
        assert check_double_ended_iterator(items, rng) is None

    @given(st.text(), st.randoms())
    def test_strings(self, text, rng):
        assert check_double_ended_iterator(text, rng) is None

    @given(st.integers(0, 20), st.randoms())
    def test_ranges(self, stop, rng):
        assert check_double_ended_iterator(range(stop), rng) is None

    @given(st.lists(st.integers()), st.randoms())
    def test_hand_written_cursor(self, items, rng):
        assert check_double_ended_iterator(Deck(items), rng) is None

    def test_indexing_off_by_one(self):
        assert check_double_ended_iterator(RotatedSequence([1, 2, 3])) is IteratorViolation.BAD_NEXT_BACK

    def test_seed_from_environment_is_reproducible(self, monkeypatch):
        """RELCHECK_SEED replays the same interleaving as an explicit rng."""
        deck = Deck(list(range(8)), cursor_type=EchoCursor)
        monkeypatch.setenv("RELCHECK_SEED", "1234")
        from_env = check_double_ended_iterator(deck)
        assert from_env == check_double_ended_iterator(deck, random.Random(1234))
        assert from_env == check_double_ended_iterator(deck)

    def test_sets_are_not_double_ended(self):
        with pytest.raises(TypeError):
            check_double_ended_iterator({1, 2, 3})


class TestEnsure:
    @given(st.integers(), st.integers(), st.integers())
    def test_passing_check(self, a, b, c):
        ensure(check_total_order(a, b, c))

    def test_failing_check_raises(self):
        with pytest.raises(RelationError) as excinfo:
            ensure(check_strict_equality(math.nan, math.nan, math.nan))
        assert excinfo.value.violation is EqualityViolation.BROKE_REFLEXIVITY
        assert "a == a MUST be true" in str(excinfo.value)
