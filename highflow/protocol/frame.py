"""
Top-level frame envelope.

``[op code: 1] [payload: N] [CRC-16/USB over the payload: 2, big-endian]``
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Union

from highflow.core.cursor import ByteCursor, ByteSource, ChecksumCursor
from highflow.core.decodable import Decodable
from highflow.core.errors import ChecksumMismatchError, InvalidValueError
from highflow.protocol.settings import Settings

logger = logging.getLogger(__name__)


class OpCode(IntEnum):
    SETTINGS = 0x03


@dataclass(frozen=True)
class Frame(Decodable):
    """A decoded frame; ``settings`` is the payload of a ``SETTINGS`` frame."""
    op_code: OpCode
    settings: Settings

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "Frame":
        code = cursor.read_u8()
        checksum = ChecksumCursor(cursor)

        if code == OpCode.SETTINGS:
            logger.debug("Decoding settings frame", extra={"details": {"op_code": code}})
            settings = Settings.decode(checksum)
            frame = cursor.guard(lambda: cls(op_code=OpCode.SETTINGS, settings=settings))
        else:
            raise InvalidValueError("OpCode", code)

        actual = checksum.finalize()
        expected = cursor.read_u16be()
        if actual != expected:
            logger.warning(
                "Frame checksum mismatch",
                extra={"details": {"expected": f"0x{expected:04X}", "actual": f"0x{actual:04X}"}},
            )
            raise ChecksumMismatchError(expected, actual)

        logger.debug("Frame checksum ok", extra={"details": {"crc": f"0x{actual:04X}", "size": cursor.position}})
        return frame

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Frame":
        with open(path, "rb") as f:
            return cls.decode(ByteCursor(f))

    def as_dict(self) -> dict[str, Any]:
        return {"op_code": self.op_code.name, "settings": self.settings.as_dict()}


def decode_frame(data: ByteSource) -> Frame:
    """Decode one frame from a byte buffer or a binary stream."""
    return Frame.decode(ByteCursor(data))
