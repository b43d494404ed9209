"""
Binary decoding primitives shared by every protocol structure.

- ``cursor``: sequential byte sources, including the skipping and checksumming wrappers.
- ``traversal``: the VALUE / SKIP traversal modes.
- ``decodable``: the decoding contract and its combinators.
- ``ranged``: validated wrappers around primitive integers.
"""
from highflow.core.binary import crc16_usb, flag_set
from highflow.core.cursor import ByteCursor, ChecksumCursor, SkipCursor
from highflow.core.decodable import (
    Decodable,
    FixedArray,
    I16,
    U16,
    U8,
    decode_enum,
    decode_flags,
    decode_or_skip,
    skip_bytes,
)
from highflow.core.errors import (
    ChecksumMismatchError,
    DecodeError,
    InvalidValueError,
    RangeError,
    ReadError,
    TraversalError,
)
from highflow.core.ranged import AcceptAll, Bounds, RangedValue
from highflow.core.traversal import SKIPPED, TraversalMode

__all__ = [
    "AcceptAll",
    "Bounds",
    "ByteCursor",
    "ChecksumCursor",
    "ChecksumMismatchError",
    "Decodable",
    "DecodeError",
    "FixedArray",
    "I16",
    "InvalidValueError",
    "RangeError",
    "RangedValue",
    "ReadError",
    "SKIPPED",
    "SkipCursor",
    "TraversalError",
    "TraversalMode",
    "U16",
    "U8",
    "crc16_usb",
    "decode_enum",
    "decode_flags",
    "decode_or_skip",
    "flag_set",
    "skip_bytes",
]
