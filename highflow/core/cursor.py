"""
Sequential byte sources consumed by the decoders.

A cursor is created for one decode call and discarded afterwards. After a
failed decode the read position of the underlying source is undefined; start
again from a fresh source instead of resuming.
"""
from __future__ import annotations

import io
import struct
from typing import BinaryIO, Callable, TypeVar, Union

from highflow.core.binary import CRC16_USB_INIT, CRC16_USB_XOROUT, crc16_usb_update
from highflow.core.errors import ReadError
from highflow.core.traversal import TraversalMode

T = TypeVar("T")

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]

_U16BE = struct.Struct(">H")
_I16BE = struct.Struct(">h")


class ByteCursor:
    """
    Reads exact-length chunks from a byte buffer or a binary stream.

    Streams may return fewer bytes than requested; reading continues until the
    chunk is complete or the stream reports end of data.

    Decoding through a plain ``ByteCursor`` runs in ``TraversalMode.VALUE``.
    """

    mode = TraversalMode.VALUE

    def __init__(self, source: ByteSource) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self.position = 0

    def read_exact(self, size: int) -> bytes:
        buf = bytearray()
        while len(buf) < size:
            try:
                chunk = self._source.read(size - len(buf))
            except OSError as exc:
                raise ReadError(size, len(buf), str(exc)) from exc
            if not chunk:
                raise ReadError(size, len(buf))
            buf += chunk
        self.position += size
        return bytes(buf)

    def skip(self, size: int) -> None:
        self.read_exact(size)

    def read_u8(self) -> int:
        return self.read_exact(1)[0]

    def read_u16be(self) -> int:
        return _U16BE.unpack(self.read_exact(2))[0]

    def read_i16be(self) -> int:
        return _I16BE.unpack(self.read_exact(2))[0]

    def guard(self, build: Callable[[], T]) -> T:
        return self.mode.guard(build)


class _WrappingCursor(ByteCursor):
    def __init__(self, inner: ByteCursor) -> None:
        self._inner = inner

    @property
    def position(self) -> int:
        return self._inner.position

    def read_exact(self, size: int) -> bytes:
        return self._inner.read_exact(size)


class SkipCursor(_WrappingCursor):
    """Forwards reads to ``inner`` but decodes in ``TraversalMode.SKIP``."""

    mode = TraversalMode.SKIP


class ChecksumCursor(_WrappingCursor):
    """
    Forwards reads to ``inner`` while accumulating a CRC-16/USB digest over
    every byte that passes through. The traversal mode is that of ``inner``.
    """

    def __init__(self, inner: ByteCursor) -> None:
        super().__init__(inner)
        self._crc = CRC16_USB_INIT

    @property
    def mode(self) -> TraversalMode:  # type: ignore[override]
        return self._inner.mode

    def read_exact(self, size: int) -> bytes:
        data = self._inner.read_exact(size)
        self._crc = crc16_usb_update(self._crc, data)
        return data

    def finalize(self) -> int:
        return self._crc ^ CRC16_USB_XOROUT
