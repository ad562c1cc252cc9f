"""
Iteration laws.

Every checker takes a re-iterable object and draws fresh cursors from it
with clone(), so no two traversals share position state. All iterables must
be finite.
"""

import random
from typing import Iterable, Optional

from ..config import Settings
from ..cursor import MISSING, clone, double_ended, last, next_back, size_hint
from ..errors import IteratorViolation
from ..logging import get_logger

logger = get_logger(__name__)


def _same_item(x: object, y: object) -> bool:
    # Same identity-then-equality rule list comparison uses, so NaN items
    # compare equal to themselves
    return x is y or bool(x == y)


def iterator_size_hint(iterable: Iterable) -> Optional[IteratorViolation]:
    """Check that the size hint bounds the number of items actually yielded."""
    cursor = clone(iterable)
    lower, upper = size_hint(iterable, cursor)
    count = sum(1 for _ in cursor)

    if lower > count:
        return IteratorViolation.BAD_SIZE_HINT
    if upper is not None and upper < count:
        return IteratorViolation.BAD_SIZE_HINT
    return None


def iterator_count(iterable: Iterable) -> Optional[IteratorViolation]:
    """
    Check that counting one traversal matches the length of a list built from
    another. Fails when traversals are not independent of each other.
    """
    count = sum(1 for _ in clone(iterable))
    collected = list(clone(iterable))

    if count != len(collected):
        return IteratorViolation.BAD_COUNT
    return None


def iterator_last(iterable: Iterable) -> Optional[IteratorViolation]:
    """Check that the last item agrees with the last item of the materialized list."""
    found = last(iterable, clone(iterable))
    collected = list(clone(iterable))

    expected = collected[-1] if collected else MISSING

    if found is MISSING or expected is MISSING:
        if found is not expected:
            return IteratorViolation.BAD_LAST
    elif not _same_item(found, expected):
        return IteratorViolation.BAD_LAST
    return None


def double_ended_iterator_next_back(
    iterable: Iterable,
    rng: Optional[random.Random] = None,
) -> Optional[IteratorViolation]:
    """
    Check that randomly interleaved `next()` and `next_back()` calls
    reassemble the forward traversal.

    Items taken from the front, followed by the items taken from the back in
    reverse, must equal a list built from an independent cursor. The law
    holds for every interleaving; one call samples one of them, so run it
    repeatedly (or under Hypothesis) for confidence.

    Args:
        iterable: Re-iterable object whose cursors have `next_back()`, or a
            Sequence
        rng: Source of the per-step front/back choice. When omitted, a
            generator is seeded from Settings.seed, or randomly if unset.

    Returns:
        IteratorViolation.BAD_NEXT_BACK if the reassembled items differ
    """
    if rng is None:
        seed = Settings.from_env().seed
        if seed is None:
            seed = random.getrandbits(64)
        logger.debug(f"Interleaving next()/next_back() with seed {seed}")
        rng = random.Random(seed)

    collected = list(clone(iterable))
    cursor = double_ended(iterable)

    from_front = []
    from_back = []
    while True:
        if rng.getrandbits(1):
            item = next(cursor, MISSING)
            if item is MISSING:
                break
            from_front.append(item)
        else:
            item = next_back(cursor)
            if item is MISSING:
                break
            from_back.append(item)

    assembled = from_front + from_back[::-1]
    if assembled != collected:
        return IteratorViolation.BAD_NEXT_BACK
    return None


def fused_iterator_none_forever(
    iterable: Iterable,
    margin: Optional[int] = None,
) -> Optional[IteratorViolation]:
    """
    Check that an exhausted cursor keeps raising StopIteration.

    The iterator protocol requires this of every Python iterator. After the
    first StopIteration the cursor is polled `count + margin` more times.

    Args:
        iterable: Re-iterable object
        margin: Extra polls beyond the item count, at least 1. Defaults to
            Settings.fused_poll_margin.
    """
    if margin is None:
        margin = Settings.from_env().fused_poll_margin
    if margin < 1:
        raise ValueError(f"margin must be at least 1, got {margin}")

    cursor = clone(iterable)
    count = 0
    while next(cursor, MISSING) is not MISSING:
        count += 1

    for _ in range(count + margin):
        if next(cursor, MISSING) is not MISSING:
            return IteratorViolation.FUSED_ITERATOR_RETURNED_ITEM_AFTER_EXHAUSTION
    return None
