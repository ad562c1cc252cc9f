"""Hashing laws, checked on the raw bytes a value feeds to its hasher."""

from typing import Any, Optional

from ..errors import HashViolation
from ..hashing import hasher_output


def hash_consistency_with_eq(a: Any, b: Any) -> Optional[HashViolation]:
    """
    Check that `a == b` holds exactly when both values feed identical bytes.

    Checking the bytes instead of a finished hash means unequal values must
    also feed different bytes, not merely avoid colliding by luck.
    """
    same_bytes = hasher_output(a) == hasher_output(b)
    if same_bytes != bool(a == b):
        return HashViolation.EQUAL_BUT_DIFFERENT_HASHES
    return None


def hash_prefix_collision(a: Any, b: Any) -> Optional[HashViolation]:
    """
    Check that, for unequal values, neither byte sequence is a prefix of the
    other.

    A prefix collision makes composite values ambiguous: `("ab", "c")` and
    `("a", "bc")` would hash alike if strings were fed without a terminator.
    """
    if a != b:
        output_a = hasher_output(a)
        output_b = hasher_output(b)
        if output_a.startswith(output_b) or output_b.startswith(output_a):
            return HashViolation.PREFIX_COLLISION
    return None
