"""
The decoding contract and its combinators.

A decoder is anything with a ``decode(cursor)`` callable that reads exactly its
canonical byte layout and returns the result wrapped by ``cursor.guard``. Types
opt in by subclassing ``Decodable``; the primitive readers and ``FixedArray``
follow the same contract.
"""
from __future__ import annotations

from enum import Enum, IntFlag
from typing import Any, Optional, Protocol, Tuple, Type, TypeVar

from highflow.core.cursor import ByteCursor, SkipCursor
from highflow.core.errors import InvalidValueError

E = TypeVar("E", bound=Enum)
F = TypeVar("F", bound=IntFlag)


class Decoder(Protocol):
    def decode(self, cursor: ByteCursor) -> Any: ...


def skip_bytes(decoder: Decoder, cursor: ByteCursor) -> None:
    """Run ``decoder`` in skip mode, advancing ``cursor`` past one value."""
    decoder.decode(SkipCursor(cursor))


def decode_or_skip(decoder: Decoder, cursor: ByteCursor, keep: bool) -> Optional[Any]:
    """
    Decode a value when ``keep`` is set, otherwise skip over it.

    Both branches consume the same number of bytes. The result is ``None``
    when the value was skipped.
    """
    if keep:
        value = decoder.decode(cursor)
        return cursor.guard(lambda: value)
    skip_bytes(decoder, cursor)
    return cursor.guard(lambda: None)


class Decodable:
    @classmethod
    def decode(cls, cursor: ByteCursor) -> Any:
        raise NotImplementedError

    @classmethod
    def decode_or_skip(cls, cursor: ByteCursor, keep: bool) -> Optional[Any]:
        return decode_or_skip(cls, cursor, keep)

    @classmethod
    def skip_bytes(cls, cursor: ByteCursor) -> None:
        skip_bytes(cls, cursor)


class U8(Decodable):
    width = 1

    @staticmethod
    def read(cursor: ByteCursor) -> int:
        return cursor.read_u8()

    @classmethod
    def decode(cls, cursor: ByteCursor) -> int:
        value = cls.read(cursor)
        return cursor.guard(lambda: value)


class U16(Decodable):
    width = 2

    @staticmethod
    def read(cursor: ByteCursor) -> int:
        return cursor.read_u16be()

    @classmethod
    def decode(cls, cursor: ByteCursor) -> int:
        value = cls.read(cursor)
        return cursor.guard(lambda: value)


class I16(Decodable):
    width = 2

    @staticmethod
    def read(cursor: ByteCursor) -> int:
        return cursor.read_i16be()

    @classmethod
    def decode(cls, cursor: ByteCursor) -> int:
        value = cls.read(cursor)
        return cursor.guard(lambda: value)


_PRIMITIVES = {1: U8, 2: U16}


class FixedArray:
    """``count`` consecutive items of ``item``, decoded into a tuple."""

    def __init__(self, item: Decoder, count: int) -> None:
        self.item = item
        self.count = count

    def __repr__(self) -> str:
        return f"FixedArray({getattr(self.item, '__name__', self.item)!r}, {self.count})"

    def decode(self, cursor: ByteCursor) -> Tuple[Any, ...]:
        items = [self.item.decode(cursor) for _ in range(self.count)]
        return cursor.guard(lambda: tuple(items))

    def decode_or_skip(self, cursor: ByteCursor, keep: bool) -> Optional[Tuple[Any, ...]]:
        return decode_or_skip(self, cursor, keep)

    def skip_bytes(self, cursor: ByteCursor) -> None:
        skip_bytes(self, cursor)


def decode_enum(enum_cls: Type[E], cursor: ByteCursor, name: str, width: int = 1) -> E:
    """
    Read a ``width``-byte selector and map it onto ``enum_cls``.

    Unknown selectors raise ``InvalidValueError`` in both traversal modes.
    """
    code = _PRIMITIVES[width].read(cursor)
    try:
        member = enum_cls(code)
    except ValueError:
        raise InvalidValueError(name, code) from None
    return cursor.guard(lambda: member)


def flag_mask(flag_cls: Type[F]) -> int:
    mask = 0
    for member in flag_cls:
        mask |= member.value
    return mask


def decode_flags(flag_cls: Type[F], cursor: ByteCursor, width: int = 1) -> F:
    """Read a bit-flag field, dropping bits that have no named member."""
    bits = _PRIMITIVES[width].read(cursor)
    return cursor.guard(lambda: flag_cls(bits & flag_mask(flag_cls)))
