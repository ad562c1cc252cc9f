"""
relcheck: law checkers for hand-written comparison, hashing and iteration.

Feed the checkers sample values from a property-based test (Hypothesis works
well) and assert that they report no violation:

    @given(st.integers(), st.integers(), st.integers())
    def test_version_order(a, b, c):
        ensure(check_total_order(Version(a), Version(b), Version(c)))
"""

from .checkers import (
    check_double_ended_iterator,
    check_fused_iterator,
    check_hash,
    check_iterator,
    check_partial_equality,
    check_partial_order,
    check_strict_equality,
    check_total_order,
)
from .cursor import SequenceCursor
from .errors import (
    EqualityViolation,
    HashViolation,
    IteratorViolation,
    PartialEqualityViolation,
    PartialOrderViolation,
    RelationError,
    TotalOrderViolation,
    Violation,
    ensure,
)
from .hashing import IdentityHasher, hash_into, hasher_output
from .ordering import Ordering

__all__ = [
    "check_partial_equality",
    "check_strict_equality",
    "check_partial_order",
    "check_total_order",
    "check_hash",
    "check_iterator",
    "check_double_ended_iterator",
    "check_fused_iterator",
    "Violation",
    "PartialEqualityViolation",
    "EqualityViolation",
    "PartialOrderViolation",
    "TotalOrderViolation",
    "HashViolation",
    "IteratorViolation",
    "RelationError",
    "ensure",
    "Ordering",
    "IdentityHasher",
    "hash_into",
    "hasher_output",
    "SequenceCursor",
]
