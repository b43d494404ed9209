"""Tests for the CRC-16/USB helpers and flag tests."""
from highflow.core.binary import CRC16_USB_INIT, crc16_usb, crc16_usb_update, flag_set


def test_crc16_usb_check_value():
    assert crc16_usb(b"123456789") == 0xB4C8


def test_crc16_usb_empty():
    assert crc16_usb(b"") == 0x0000


def test_crc16_usb_incremental_matches_one_shot():
    data = bytes(range(256)) * 3
    crc = CRC16_USB_INIT
    for start in range(0, len(data), 7):
        crc = crc16_usb_update(crc, data[start:start + 7])
    assert crc ^ 0xFFFF == crc16_usb(data)


def test_crc16_usb_detects_single_byte_change():
    data = bytearray(b"high flow NEXT")
    original = crc16_usb(bytes(data))
    data[3] ^= 0x01
    assert crc16_usb(bytes(data)) != original


def test_flag_set():
    assert flag_set(0x8002, 0x8000)
    assert flag_set(0x8002, 0x0002)
    assert not flag_set(0x8002, 0x4000)
    assert not flag_set(0x00, 0x01)
