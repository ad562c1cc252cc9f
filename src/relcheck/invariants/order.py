"""
Ordering laws for rich comparisons and three-way comparators.

A comparison that raises TypeError is treated as undefined, the same way an
incomparable pair is. Undefined comparisons count as false wherever a law
needs a truth value.
"""

import operator
from typing import Any, Optional

from ..errors import PartialOrderViolation, TotalOrderViolation
from ..ordering import Comparator, Ordering, compare, holds, partial_cmp


def partial_ord_methods_consistency(
    a: Any,
    b: Any,
    cmp: Optional[Comparator] = None,
) -> Optional[PartialOrderViolation]:
    """
    Check that the comparison operators agree with each other and with the
    three-way comparator.

    Args:
        a: Left operand
        b: Right operand
        cmp: Three-way comparator; derived from the operators when omitted

    Returns:
        The first inconsistency found, or None
    """
    ordering = compare(cmp, a, b)
    eq = bool(holds(operator.eq, a, b))
    lt = bool(holds(operator.lt, a, b))
    gt = bool(holds(operator.gt, a, b))

    if eq != (ordering is Ordering.EQUAL):
        return PartialOrderViolation.BAD_PARTIAL_CMP
    if lt != (ordering is Ordering.LESS):
        return PartialOrderViolation.BAD_LT
    if gt != (ordering is Ordering.GREATER):
        return PartialOrderViolation.BAD_GT
    if bool(holds(operator.le, a, b)) != (lt or eq):
        return PartialOrderViolation.BAD_LE
    if bool(holds(operator.ge, a, b)) != (gt or eq):
        return PartialOrderViolation.BAD_GE
    return None


def partial_ord_duality(a: Any, b: Any) -> Optional[PartialOrderViolation]:
    """
    Check that `a > b` iff `b < a`, and `a < b` iff `b > a`.

    A pair is skipped when either side of it is undefined, which keeps
    one-directional cross-type comparisons checkable.
    """
    pairs = (
        (holds(operator.gt, a, b), holds(operator.lt, b, a)),
        (holds(operator.lt, a, b), holds(operator.gt, b, a)),
    )
    for forward, backward in pairs:
        if forward is None or backward is None:
            continue
        if forward != backward:
            return PartialOrderViolation.BROKE_DUALITY
    return None


def partial_ord_transitivity(a: Any, b: Any, c: Any) -> Optional[PartialOrderViolation]:
    """Check that `<` and `>` are transitive."""
    for op in (operator.lt, operator.gt):
        if holds(op, a, b) and holds(op, b, c) and not holds(op, a, c):
            return PartialOrderViolation.BROKE_TRANSITIVITY
    return None


def ord_methods_consistency(
    a: Any,
    b: Any,
    c: Any,
    cmp: Optional[Comparator] = None,
) -> Optional[TotalOrderViolation]:
    """
    Check that a total comparator agrees with the rich comparisons and with
    the builtin max() and min().

    Python's max() and min() return the first argument when the two compare
    equal, so the expected result resolves ties toward `a`. Selection is
    compared by identity: returning an equal but different object is a
    violation.

    Args:
        a: First value
        b: Second value, also the first clamp bound
        c: Third value, also the second clamp bound
        cmp: Three-way comparator; derived from the operators when omitted

    Returns:
        The first inconsistency found, or None
    """
    ordering = compare(cmp, a, b)
    if ordering is None or ordering is not partial_cmp(a, b):
        return TotalOrderViolation.BAD_CMP

    expected_max = b if ordering is Ordering.LESS else a
    try:
        if max(a, b) is not expected_max:
            return TotalOrderViolation.BAD_MAX
    except TypeError:
        return TotalOrderViolation.BAD_MAX

    expected_min = b if ordering is Ordering.GREATER else a
    try:
        if min(a, b) is not expected_min:
            return TotalOrderViolation.BAD_MIN
    except TypeError:
        return TotalOrderViolation.BAD_MIN

    try:
        lo, hi = min(b, c), max(b, c)
        clamped = min(max(a, lo), hi)
    except TypeError:
        return TotalOrderViolation.BAD_CLAMP
    if compare(cmp, clamped, lo) is Ordering.LESS or compare(cmp, clamped, hi) is Ordering.GREATER:
        return TotalOrderViolation.BAD_CLAMP
    return None
