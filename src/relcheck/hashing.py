"""
Byte-level hashing support for the hash checkers.

Python's built-in hash() scrambles its input into a single integer, which
hides both prefix collisions and accidental inconsistencies with `==`. The
checkers instead feed a value into an IdentityHasher, a sink that records
every byte it receives, and compare the recordings directly.

Built-in encodings start with a one-byte type tag, so None, ints and
containers stay distinguishable wherever they sit inside a larger value.

A type takes part by defining `hash_into(self, hasher)`, or by registering an
implementation with the `hash_into` single-dispatch function:

    @hash_into.register
    def _(value: Money, hasher: IdentityHasher) -> None:
        hasher.write_int(value.cents)
        hasher.write_str(value.currency)
"""

import dataclasses
import struct
from enum import Enum
from functools import singledispatch
from typing import Any, Sequence

from .logging import get_logger

logger = get_logger(__name__)

# Leading type tags of the built-in encodings. Values that compare equal
# across types (1, 1.0, True; set and frozenset; bytes and bytearray) share
# a tag.
TAG_NONE = 0x00
TAG_INT = 0x01
TAG_FLOAT = 0x02
TAG_STR = 0x03
TAG_BYTES = 0x04
TAG_TUPLE = 0x05
TAG_LIST = 0x06
TAG_SET = 0x07
TAG_ENUM = 0x08
TAG_RECORD = 0x09


class IdentityHasher:
    """
    Non-scrambling hash sink.

    Mirrors the `update()`/`digest()` interface of `hashlib` objects, but
    digest() returns the exact bytes that were fed in.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def update(self, data: bytes) -> None:
        self._buffer.extend(data)

    def digest(self) -> bytes:
        return bytes(self._buffer)

    def write_u8(self, value: int) -> None:
        self.update(bytes((value,)))

    def write_length(self, length: int) -> None:
        """Write a collection length as a fixed-width prefix."""
        self.update(length.to_bytes(8, "big"))

    def write_int(self, value: int) -> None:
        """Write an arbitrary-precision integer, length-prefixed."""
        width = (value.bit_length() + 8) // 8
        if width < 0xff:
            self.write_u8(width)
        else:
            self.write_u8(0xff)
            self.write_length(width)
        self.update(value.to_bytes(width, "big", signed=True))

    def write_str(self, value: str) -> None:
        # 0xff never occurs in UTF-8, so it terminates the string unambiguously
        self.update(value.encode("utf-8"))
        self.write_u8(0xff)

    def write_bytes(self, value: bytes) -> None:
        self.write_length(len(value))
        self.update(value)


@singledispatch
def hash_into(value: Any, hasher: IdentityHasher) -> None:
    """
    Feed `value` into `hasher`.

    Dispatches on the value's type. Objects without a registration use their
    own `hash_into(hasher)` method; dataclasses feed their compared fields.

    Raises:
        TypeError: If the value has no byte-level hashing support
    """
    method = getattr(value, "hash_into", None)
    if callable(method):
        method(hasher)
        return

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        hasher.write_u8(TAG_RECORD)
        hasher.write_str(type(value).__qualname__)
        for field in dataclasses.fields(value):
            if field.compare:
                hash_into(getattr(value, field.name), hasher)
        return

    raise TypeError(
        f"{type(value).__name__} does not support byte-level hashing; define "
        f"hash_into(self, hasher) or register it with relcheck.hashing.hash_into"
    )


@hash_into.register(type(None))
def _(value: None, hasher: IdentityHasher) -> None:
    hasher.write_u8(TAG_NONE)


@hash_into.register
def _(value: int, hasher: IdentityHasher) -> None:
    # Covers bool, so True feeds the same bytes as 1
    hasher.write_u8(TAG_INT)
    hasher.write_int(int(value))


@hash_into.register
def _(value: float, hasher: IdentityHasher) -> None:
    # Integral floats compare equal to ints and must feed the same bytes;
    # -0.0 lands here as 0
    if value.is_integer():
        hasher.write_u8(TAG_INT)
        hasher.write_int(int(value))
    else:
        hasher.write_u8(TAG_FLOAT)
        hasher.update(struct.pack(">d", value))


@hash_into.register
def _(value: str, hasher: IdentityHasher) -> None:
    hasher.write_u8(TAG_STR)
    hasher.write_str(value)


@hash_into.register(bytes)
@hash_into.register(bytearray)
def _(value: bytes, hasher: IdentityHasher) -> None:
    hasher.write_u8(TAG_BYTES)
    hasher.write_bytes(bytes(value))


@hash_into.register
def _(value: tuple, hasher: IdentityHasher) -> None:
    hasher.write_u8(TAG_TUPLE)
    _write_items(value, hasher)


@hash_into.register
def _(value: list, hasher: IdentityHasher) -> None:
    hasher.write_u8(TAG_LIST)
    _write_items(value, hasher)


def _write_items(items: Sequence, hasher: IdentityHasher) -> None:
    hasher.write_length(len(items))
    for item in items:
        hash_into(item, hasher)


@hash_into.register(frozenset)
@hash_into.register(set)
def _(value: frozenset, hasher: IdentityHasher) -> None:
    # Iteration order of equal sets may differ; sorting the per-item
    # recordings gives every equal set the same byte sequence.
    hasher.write_u8(TAG_SET)
    hasher.write_length(len(value))
    for recorded in sorted(hasher_output(item) for item in value):
        hasher.update(recorded)


@hash_into.register
def _(value: Enum, hasher: IdentityHasher) -> None:
    hasher.write_u8(TAG_ENUM)
    hasher.write_str(type(value).__qualname__)
    hasher.write_str(value.name)


def hasher_output(value: Any) -> bytes:
    """
    Record the bytes `value` feeds into a fresh IdentityHasher.

    Args:
        value: Object with byte-level hashing support

    Returns:
        The exact byte sequence fed to the hasher
    """
    hasher = IdentityHasher()
    hash_into(value, hasher)
    output = hasher.digest()
    logger.debug(f"Recorded {len(output)} hash bytes for {type(value).__name__}")
    return output
