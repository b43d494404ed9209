"""Tests for byte cursors and traversal modes."""
import io

import pytest

from frame_builder import frame, settings_payload

from highflow.core.binary import crc16_usb
from highflow.core.cursor import ByteCursor, ChecksumCursor, SkipCursor
from highflow.core.decodable import FixedArray, U16, decode_or_skip, skip_bytes
from highflow.core.errors import DecodeError, ReadError, TraversalError
from highflow.core.traversal import SKIPPED, TraversalMode
from highflow.protocol.frame import decode_frame


class _BrokenStream(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("device unplugged")


class _ChunkedStream(io.RawIOBase):
    def __init__(self, data, chunk=16):
        self._data = data
        self._offset = 0
        self._chunk = chunk

    def readable(self):
        return True

    def readinto(self, buffer):
        size = min(len(buffer), self._chunk, len(self._data) - self._offset)
        buffer[:size] = self._data[self._offset:self._offset + size]
        self._offset += size
        return size


def test_reads_big_endian_primitives():
    cursor = ByteCursor(b"\x7f\x01\x02\xff\xfe")
    assert cursor.read_u8() == 0x7F
    assert cursor.read_u16be() == 0x0102
    assert cursor.read_i16be() == -2
    assert cursor.position == 5


def test_reads_from_stream():
    cursor = ByteCursor(io.BytesIO(b"\x00\x2a\x10"))
    assert cursor.read_u16be() == 42
    cursor.skip(1)
    assert cursor.position == 3


def test_short_read_raises_read_error():
    cursor = ByteCursor(b"\x01")
    with pytest.raises(ReadError) as excinfo:
        cursor.read_u16be()
    assert excinfo.value.requested == 2
    assert excinfo.value.received == 1
    assert isinstance(excinfo.value, DecodeError)


def test_reads_across_partial_stream_chunks():
    cursor = ByteCursor(_ChunkedStream(bytes(range(40)), chunk=3))
    assert cursor.read_u16be() == 0x0001
    assert cursor.read_exact(20) == bytes(range(2, 22))
    assert cursor.position == 22


def test_frame_from_chunked_stream():
    data = frame(settings_payload())
    assert decode_frame(_ChunkedStream(data)) == decode_frame(data)


def test_chunked_stream_end_raises_read_error():
    cursor = ByteCursor(_ChunkedStream(bytes(10), chunk=4))
    with pytest.raises(ReadError) as excinfo:
        cursor.read_exact(12)
    assert excinfo.value.requested == 12
    assert excinfo.value.received == 10


def test_transport_failure_is_chained():
    cursor = ByteCursor(_BrokenStream())
    with pytest.raises(ReadError) as excinfo:
        cursor.read_u8()
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "device unplugged" in str(excinfo.value)


def test_guard_runs_builder_in_value_mode():
    assert ByteCursor(b"").guard(lambda: 7) == 7


def test_skip_cursor_never_runs_builder():
    def build():
        raise AssertionError("builder must not run in skip mode")

    cursor = SkipCursor(ByteCursor(b"\x00\x01"))
    assert cursor.mode is TraversalMode.SKIP
    assert cursor.guard(build) is SKIPPED
    assert U16.decode(cursor) is SKIPPED
    assert cursor.position == 2


def test_skip_bytes_advances_inner_cursor():
    cursor = ByteCursor(bytes(10))
    skip_bytes(FixedArray(U16, 4), cursor)
    assert cursor.position == 8
    assert cursor.mode is TraversalMode.VALUE


def test_decode_or_skip_consumes_same_bytes():
    data = b"\x00\x05\x00\x06"
    kept = ByteCursor(data)
    dropped = ByteCursor(data)
    assert decode_or_skip(U16, kept, True) == 5
    assert decode_or_skip(U16, dropped, False) is None
    assert kept.position == dropped.position == 2


def test_fixed_array_decodes_tuple():
    assert FixedArray(U16, 2).decode(ByteCursor(b"\x00\x01\x00\x02")) == (1, 2)


def test_get_and_extract_fail_in_skip_mode():
    with pytest.raises(TraversalError):
        TraversalMode.SKIP.get(SKIPPED)
    with pytest.raises(TraversalError):
        TraversalMode.SKIP.extract(SKIPPED)
    with pytest.raises(TraversalError):
        TraversalMode.VALUE.extract(SKIPPED)
    assert TraversalMode.VALUE.get(3) == 3
    assert TraversalMode.VALUE.extract("x") == "x"


def test_skipped_placeholder_is_falsy():
    assert not SKIPPED
    assert repr(SKIPPED) == "SKIPPED"


def test_checksum_cursor_digest():
    data = b"123456789"
    cursor = ChecksumCursor(ByteCursor(data + b"\xaa"))
    cursor.read_exact(4)
    cursor.skip(5)
    assert cursor.finalize() == crc16_usb(data)
    assert cursor.position == 9


def test_checksum_cursor_inherits_mode():
    assert ChecksumCursor(ByteCursor(b"")).mode is TraversalMode.VALUE
    assert ChecksumCursor(SkipCursor(ByteCursor(b""))).mode is TraversalMode.SKIP


def test_skip_mode_digest_matches_value_mode():
    data = bytes(range(20))
    value = ChecksumCursor(ByteCursor(data))
    FixedArray(U16, 10).decode(value)
    skipped = ChecksumCursor(ByteCursor(data))
    FixedArray(U16, 10).skip_bytes(skipped)
    assert value.finalize() == skipped.finalize() == crc16_usb(data)
