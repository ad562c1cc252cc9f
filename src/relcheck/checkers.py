"""
Public API: one checker per capability.

Each checker runs its laws in a fixed order and stops at the first violation.
Stronger capabilities run the checker of the weaker capability they imply
first, so the most specific applicable violation is the one reported.
"""

import random
from typing import Any, Iterable, Optional, Union

from .errors import (
    EqualityViolation,
    HashViolation,
    IteratorViolation,
    PartialEqualityViolation,
    Violation,
)
from .invariants import (
    double_ended_iterator_next_back,
    eq_reflexivity,
    fused_iterator_none_forever,
    hash_consistency_with_eq,
    hash_prefix_collision,
    iterator_count,
    iterator_last,
    iterator_size_hint,
    ord_methods_consistency,
    partial_eq_methods_consistency,
    partial_eq_symmetry,
    partial_eq_transitivity,
    partial_ord_duality,
    partial_ord_methods_consistency,
    partial_ord_transitivity,
)
from .logging import get_logger
from .ordering import Comparator

logger = get_logger(__name__)


def _report(violation: Optional[Violation], subject: Any) -> Optional[Violation]:
    if violation is not None:
        logger.debug(
            f"{violation.capability} violation {violation.name} "
            f"for {type(subject).__name__}: {violation.value}"
        )
    return violation


def _partial_equality_laws(a: Any, b: Any, c: Any) -> Optional[Violation]:
    return (
        partial_eq_methods_consistency(a, b)
        or partial_eq_symmetry(a, b)
        or partial_eq_transitivity(a, b, c)
    )


def _strict_equality_laws(a: Any, b: Any, c: Any) -> Optional[Violation]:
    return _partial_equality_laws(a, b, c) or eq_reflexivity(a)


def _partial_order_laws(a: Any, b: Any, c: Any, cmp: Optional[Comparator]) -> Optional[Violation]:
    return (
        _partial_equality_laws(a, b, c)
        or partial_ord_methods_consistency(a, b, cmp)
        or partial_ord_duality(a, b)
        or partial_ord_transitivity(a, b, c)
    )


def _iterator_laws(iterable: Iterable) -> Optional[Violation]:
    return (
        iterator_size_hint(iterable)
        or iterator_count(iterable)
        or iterator_last(iterable)
    )


def check_partial_equality(a: Any, b: Any, c: Any) -> Optional[PartialEqualityViolation]:
    """
    Check `==` and `!=` for a partial equivalence relation.

    Returns:
        The first broken law, or None
    """
    return _report(_partial_equality_laws(a, b, c), a)


def check_strict_equality(
    a: Any,
    b: Any,
    c: Any,
) -> Optional[Union[PartialEqualityViolation, EqualityViolation]]:
    """
    Check `==` and `!=` for an equivalence relation.

    Accepts any type with partial equality so a test can also assert that a
    type is *not* an equivalence relation, e.g. that NaN breaks reflexivity.

    Returns:
        A PartialEqualityViolation or EqualityViolation, or None
    """
    return _report(_strict_equality_laws(a, b, c), a)


def check_partial_order(
    a: Any,
    b: Any,
    c: Any,
    cmp: Optional[Comparator] = None,
) -> Optional[Violation]:
    """
    Check the rich comparison operators for a partial order.

    Args:
        a, b, c: Sample values
        cmp: Three-way comparator to check the operators against; derived
            from the operators when omitted

    Returns:
        A PartialEqualityViolation or PartialOrderViolation, or None
    """
    return _report(_partial_order_laws(a, b, c, cmp), a)


def check_total_order(
    a: Any,
    b: Any,
    c: Any,
    cmp: Optional[Comparator] = None,
) -> Optional[Violation]:
    """
    Check equality, the rich comparison operators, max() and min() for a
    total order.

    Args:
        a, b, c: Sample values
        cmp: Total three-way comparator, e.g. a function written for
            `functools.cmp_to_key`; derived from the operators when omitted

    Returns:
        The first broken equality, partial order or total order law, or None
    """
    violation = (
        _strict_equality_laws(a, b, c)
        or _partial_order_laws(a, b, c, cmp)
        or ord_methods_consistency(a, b, c, cmp)
    )
    return _report(violation, a)


def check_hash(a: Any, b: Any) -> Optional[HashViolation]:
    """
    Check byte-level hashing against strict equality.

    Both values need `hash_into` support; see relcheck.hashing.
    """
    violation = hash_consistency_with_eq(a, b) or hash_prefix_collision(a, b)
    return _report(violation, a)


def check_iterator(iterable: Iterable) -> Optional[IteratorViolation]:
    """
    Check iteration of a finite, re-iterable object.

    Raises:
        TypeError: If `iterable` is a one-shot iterator
    """
    return _report(_iterator_laws(iterable), iterable)


def check_double_ended_iterator(
    iterable: Iterable,
    rng: Optional[random.Random] = None,
) -> Optional[IteratorViolation]:
    """
    Check iteration plus front/back interleaving.

    Args:
        iterable: Finite re-iterable object whose cursors have `next_back()`,
            or a Sequence
        rng: Source of the front/back choices, for reproducible runs
    """
    violation = _iterator_laws(iterable) or double_ended_iterator_next_back(iterable, rng)
    return _report(violation, iterable)


def check_fused_iterator(iterable: Iterable) -> Optional[IteratorViolation]:
    """Check iteration plus StopIteration persistence after exhaustion."""
    violation = _iterator_laws(iterable) or fused_iterator_none_forever(iterable)
    return _report(violation, iterable)
