"""
Error taxonomy of the decoder.

Every failure caused by the input bytes is a ``DecodeError``. Nothing inside
the decoder catches or retries these; the first one raised aborts the decode.
"""
from __future__ import annotations


class DecodeError(Exception):
    pass


class ReadError(DecodeError):
    """The byte source could not supply the requested bytes."""

    def __init__(self, requested: int, received: int, reason: str | None = None) -> None:
        self.requested = requested
        self.received = received
        message = f"Short read: requested {requested} bytes, received {received}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidValueError(DecodeError):
    """A selector or enumerated code did not match any known case."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid or unknown value (name={name}, value={value})")


class RangeError(DecodeError):
    def __init__(self, min: int, max: int, value: int) -> None:
        self.min = min
        self.max = max
        self.value = value
        super().__init__(f"Value out of range (min={min}, max={max}, val={value})!")


class ChecksumMismatchError(DecodeError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Checksum does not match! (expected=0x{expected:04X}, actual=0x{actual:04X})")


class TraversalError(RuntimeError):
    """A value was requested from output produced in skip mode."""
