"""Equality laws: `==` and `!=` over up to three values of any types."""

from typing import Any, Optional

from ..errors import EqualityViolation, PartialEqualityViolation


def partial_eq_methods_consistency(a: Any, b: Any) -> Optional[PartialEqualityViolation]:
    """
    Check that `a != b` is the exact negation of `a == b`.

    Python derives `__ne__` from `__eq__` unless a class overrides it, so
    this only fails for hand-written `__ne__` methods.
    """
    if bool(a == b) != (not (a != b)):
        return PartialEqualityViolation.BAD_NE
    return None


def partial_eq_symmetry(a: Any, b: Any) -> Optional[PartialEqualityViolation]:
    """Check that `==` is symmetric."""
    if bool(a == b) != bool(b == a):
        return PartialEqualityViolation.BROKE_SYMMETRY
    return None


def partial_eq_transitivity(a: Any, b: Any, c: Any) -> Optional[PartialEqualityViolation]:
    """Check that `==` is transitive."""
    if a == b and b == c and a != c:
        return PartialEqualityViolation.BROKE_TRANSITIVITY
    return None


def eq_reflexivity(a: Any) -> Optional[EqualityViolation]:
    """
    Check that `a == a`.

    Partial equality does not require reflexivity; strict equality does.
    `float("nan")` fails exactly here.
    """
    if not a == a:
        return EqualityViolation.BROKE_REFLEXIVITY
    return None
