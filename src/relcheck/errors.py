"""
Violation taxonomy for the relation checkers.

Every broken law maps to exactly one enum member. The members carry no
payload: the caller already holds the values that produced the violation.
"""

from enum import Enum
from typing import Optional


class Violation(Enum):
    """Umbrella kind for every broken law, whatever the capability."""

    @property
    def capability(self) -> str:
        return _CAPABILITIES[type(self)]

    def __str__(self) -> str:
        return f"{self.capability}: {self.value}"


class PartialEqualityViolation(Violation):
    """Broken invariant of `==` / `!=`."""

    BAD_NE = "a != b MUST always return the negation of a == b"
    BROKE_SYMMETRY = "a == b MUST imply b == a"
    BROKE_TRANSITIVITY = "a == b and b == c MUST imply a == c"


class EqualityViolation(Violation):
    """
    Broken invariant of strict equality.

    Strict equality also mandates every PartialEqualityViolation law.
    """

    BROKE_REFLEXIVITY = "a == a MUST be true"


class PartialOrderViolation(Violation):
    """
    Broken invariant of `<`, `<=`, `>`, `>=` and the three-way comparator.

    A partial order also mandates every PartialEqualityViolation law.
    """

    BAD_PARTIAL_CMP = "the comparator MUST return EQUAL if and only if a == b is true"
    BAD_LT = "a < b MUST be true if and only if the comparator returns LESS"
    BAD_LE = "a <= b MUST be true if and only if a < b or a == b"
    BAD_GT = "a > b MUST be true if and only if the comparator returns GREATER"
    BAD_GE = "a >= b MUST be true if and only if a > b or a == b"
    BROKE_DUALITY = "a > b MUST be true if and only if b < a is true"
    BROKE_TRANSITIVITY = "a < b and b < c MUST imply a < c, and likewise for >"


class TotalOrderViolation(Violation):
    """
    Broken invariant of a total order.

    A total order also mandates every EqualityViolation and
    PartialOrderViolation law.
    """

    BAD_CMP = "the comparator MUST be total and agree with the rich comparisons"
    BAD_MAX = "max(a, b) is not consistent with the comparator"
    BAD_MIN = "min(a, b) is not consistent with the comparator"
    BAD_CLAMP = "clamping is not consistent with the comparator"


class HashViolation(Violation):
    """Broken invariant of byte-level hashing in relation to equality."""

    EQUAL_BUT_DIFFERENT_HASHES = "equal values MUST feed identical bytes to the hasher"
    PREFIX_COLLISION = (
        "when two values are different, neither hash input may be a prefix of the other"
    )


class IteratorViolation(Violation):
    """Broken invariant of iteration."""

    BAD_SIZE_HINT = "the size hint MUST provide correct lower and upper bounds"
    BAD_COUNT = "the element count MUST match the length of the materialized list"
    BAD_LAST = "the last element MUST equal the last element of the materialized list"
    BAD_NEXT_BACK = (
        "next_back() MUST return the same values as next(), but in reverse order"
    )
    FUSED_ITERATOR_RETURNED_ITEM_AFTER_EXHAUSTION = (
        "an exhausted iterator MUST keep raising StopIteration"
    )


_CAPABILITIES = {
    PartialEqualityViolation: "partial equality",
    EqualityViolation: "strict equality",
    PartialOrderViolation: "partial order",
    TotalOrderViolation: "total order",
    HashViolation: "hash",
    IteratorViolation: "iterator",
}


class RelationError(AssertionError):
    """Raised by ensure() when a checker reported a violation."""

    def __init__(self, violation: Violation) -> None:
        super().__init__(str(violation))
        self.violation = violation


def ensure(result: Optional[Violation]) -> None:
    """
    Turn a checker result into an assertion.

    Args:
        result: Return value of any checker

    Raises:
        RelationError: If the checker reported a violation
    """
    if result is not None:
        raise RelationError(result)
