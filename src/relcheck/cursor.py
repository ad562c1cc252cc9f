"""
Independent cursors over the iterables under test.

The iterator checkers compare what one traversal yields against another, so
they need traversals that share no position state. In Python the natural
restartable sequence is a re-iterable object: every `iter(obj)` call returns
a fresh cursor. One-shot iterators (generators, file objects, `iter(list)`)
cannot be restarted and are rejected up front.
"""

from collections import deque
from collections.abc import Reversible, Sequence, Sized
from typing import Any, Iterable, Iterator, Optional, Tuple

MISSING = object()


class SequenceCursor:
    """
    Double-ended cursor over a Sequence.

    Walks the sequence from both ends with `__getitem__`, so driving it
    exercises the sequence's indexing rather than its `__iter__`.
    """

    def __init__(self, sequence: Sequence) -> None:
        self._sequence = sequence
        self._front = 0
        self._back = len(sequence)

    def __iter__(self) -> "SequenceCursor":
        return self

    def __next__(self) -> Any:
        if self._front >= self._back:
            raise StopIteration
        item = self._sequence[self._front]
        self._front += 1
        return item

    def next_back(self) -> Any:
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self._sequence[self._back]

    def size_hint(self) -> Tuple[int, Optional[int]]:
        remaining = self._back - self._front
        return remaining, remaining


def clone(iterable: Iterable) -> Iterator:
    """
    Return a fresh cursor over `iterable`.

    Raises:
        TypeError: If `iterable` is a one-shot iterator
    """
    cursor = iter(iterable)
    if cursor is iterable:
        raise TypeError(
            f"{type(iterable).__name__} is a one-shot iterator; pass a re-iterable "
            f"object (list, range, a container with __iter__) instead"
        )
    return cursor


def double_ended(iterable: Iterable) -> Iterator:
    """
    Return a fresh cursor that supports `next_back()`.

    Raises:
        TypeError: If neither the cursor nor the iterable is double-ended
    """
    cursor = clone(iterable)
    if callable(getattr(cursor, "next_back", None)):
        return cursor
    if isinstance(iterable, Sequence):
        return SequenceCursor(iterable)
    raise TypeError(
        f"{type(iterable).__name__} is not double-ended; its cursor needs a "
        f"next_back() method, or the object must be a Sequence"
    )


def size_hint(iterable: Iterable, cursor: Iterator) -> Tuple[int, Optional[int]]:
    """
    Bounds on the number of items a fresh cursor will yield.

    Uses the cursor's own `size_hint()` when it has one, `len()` for sized
    objects, and no information otherwise.
    """
    hint = getattr(cursor, "size_hint", None)
    if callable(hint):
        lower, upper = hint()
        return lower, upper
    if isinstance(iterable, Sized):
        length = len(iterable)
        return length, length
    return 0, None


def last(iterable: Iterable, cursor: Iterator) -> Any:
    """
    The last item of `iterable`, or MISSING when it is empty.

    Uses the cursor's own `last()` when it has one, which raises
    StopIteration on an empty cursor like `next_back()` does. Otherwise
    reversible objects answer through `reversed()`, and anything else is
    found by draining `cursor`.
    """
    method = getattr(cursor, "last", None)
    if callable(method):
        try:
            return method()
        except StopIteration:
            return MISSING
    if isinstance(iterable, Reversible):
        return next(reversed(iterable), MISSING)
    tail = deque(cursor, maxlen=1)
    return tail[0] if tail else MISSING


def next_back(cursor: Iterator) -> Any:
    """Take an item from the back of `cursor`, or MISSING when it is exhausted."""
    try:
        return cursor.next_back()
    except StopIteration:
        return MISSING
