"""
Granular checkers, one per law.

Use these directly when a relation crosses types (`A == B` without `A == A`,
say) and the composite checkers' same-type assumption does not fit.
"""

from .equality import (
    eq_reflexivity,
    partial_eq_methods_consistency,
    partial_eq_symmetry,
    partial_eq_transitivity,
)
from .hash import hash_consistency_with_eq, hash_prefix_collision
from .iterator import (
    double_ended_iterator_next_back,
    fused_iterator_none_forever,
    iterator_count,
    iterator_last,
    iterator_size_hint,
)
from .order import (
    ord_methods_consistency,
    partial_ord_duality,
    partial_ord_methods_consistency,
    partial_ord_transitivity,
)

__all__ = [
    "partial_eq_methods_consistency",
    "partial_eq_symmetry",
    "partial_eq_transitivity",
    "eq_reflexivity",
    "partial_ord_methods_consistency",
    "partial_ord_duality",
    "partial_ord_transitivity",
    "ord_methods_consistency",
    "hash_consistency_with_eq",
    "hash_prefix_collision",
    "iterator_size_hint",
    "iterator_count",
    "iterator_last",
    "double_ended_iterator_next_back",
    "fused_iterator_none_forever",
]
