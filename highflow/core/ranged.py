"""
Validated wrappers around primitive integers.

A ``RangedValue`` subclass names one domain quantity. It declares the wire
primitive it is read as and the policy a raw value has to satisfy::

    class Flow(RangedValue):
        primitive = U16
        policy = Bounds(0, 3000)

Instances can only be created through validation and are immutable. Values of
different subclasses never compare equal, even if they wrap the same number.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar

from highflow.core.cursor import ByteCursor
from highflow.core.decodable import Decodable, U8
from highflow.core.errors import RangeError

R = TypeVar("R", bound="RangedValue")


@dataclass(frozen=True)
class Bounds:
    min: int
    max: int

    def verify(self, value: int) -> int:
        if value < self.min or value > self.max:
            raise RangeError(self.min, self.max, value)
        return value


@dataclass(frozen=True)
class AcceptAll:
    """Accepts every raw value; the wrapper only distinguishes the quantity."""

    def verify(self, value: int) -> int:
        return value


@dataclass(frozen=True, order=True)
class RangedValue(Decodable):
    value: int

    primitive: ClassVar[Type[Decodable]] = U8
    policy: ClassVar[Bounds | AcceptAll] = AcceptAll()

    def __post_init__(self) -> None:
        self.policy.verify(self.value)

    @classmethod
    def from_value(cls: Type[R], raw: int) -> R:
        return cls(raw)

    @classmethod
    def min_inclusive(cls) -> int:
        if not isinstance(cls.policy, Bounds):
            raise TypeError(f"{cls.__name__} does not define bounds")
        return cls.policy.min

    @classmethod
    def max_inclusive(cls) -> int:
        if not isinstance(cls.policy, Bounds):
            raise TypeError(f"{cls.__name__} does not define bounds")
        return cls.policy.max

    @classmethod
    def decode(cls: Type[R], cursor: ByteCursor) -> R:
        raw = cls.primitive.read(cursor)
        return cursor.guard(lambda: cls.from_value(raw))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"
