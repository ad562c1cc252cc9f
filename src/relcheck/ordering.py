"""
Three-way comparison on top of Python's rich comparison operators.

Python has no built-in three-way comparator, so the order checkers derive one
from `==`, `<` and `>`, or use a caller-supplied comparator such as a `cmp`
function written for `functools.cmp_to_key`.
"""

import operator
from enum import Enum
from typing import Any, Callable, Optional, Union

ComparatorResult = Union["Ordering", int, None]
Comparator = Callable[[Any, Any], ComparatorResult]


class Ordering(Enum):
    """Result of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, value: int) -> "Ordering":
        """Map the sign of a `cmp`-style integer to an Ordering."""
        return cls((value > 0) - (value < 0))

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


def holds(op: Callable[[Any, Any], Any], a: Any, b: Any) -> Optional[bool]:
    """
    Evaluate a rich comparison.

    Args:
        op: Binary operator from the `operator` module
        a: Left operand
        b: Right operand

    Returns:
        Truth value of `op(a, b)`, or None if the comparison is undefined
        (the operands raised TypeError, e.g. `1 < "a"`)
    """
    try:
        return bool(op(a, b))
    except TypeError:
        return None


def partial_cmp(a: Any, b: Any) -> Optional[Ordering]:
    """
    Derive a three-way comparison from `==`, `<` and `>`.

    Returns:
        The first relation that holds, or None if `a` and `b` are incomparable
    """
    if holds(operator.eq, a, b):
        return Ordering.EQUAL
    if holds(operator.lt, a, b):
        return Ordering.LESS
    if holds(operator.gt, a, b):
        return Ordering.GREATER
    return None


def compare(cmp: Optional[Comparator], a: Any, b: Any) -> Optional[Ordering]:
    """
    Run a caller comparator and normalise its result.

    Args:
        cmp: Comparator returning an Ordering, a `cmp`-style int or None.
            When omitted, partial_cmp() is used.
        a: Left operand
        b: Right operand

    Returns:
        Ordering, or None if the comparator reports the pair as incomparable

    Raises:
        TypeError: If the comparator returns anything else
    """
    if cmp is None:
        return partial_cmp(a, b)

    result = cmp(a, b)
    if result is None or isinstance(result, Ordering):
        return result
    if isinstance(result, int) and not isinstance(result, bool):
        return Ordering.from_int(result)
    raise TypeError(
        f"comparator must return Ordering, int or None, got {type(result).__name__}"
    )
