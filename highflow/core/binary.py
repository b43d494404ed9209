from __future__ import annotations

from typing import Iterable


CRC16_USB_POLY = 0xA001  # 0x8005 reflected
CRC16_USB_INIT = 0xFFFF
CRC16_USB_XOROUT = 0xFFFF


def crc16_usb_update(crc: int, data: Iterable[int]) -> int:
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 0x0001:
                crc = (crc >> 1) ^ CRC16_USB_POLY
            else:
                crc >>= 1
    return crc & 0xFFFF


def crc16_usb(data: bytes) -> int:
    return crc16_usb_update(CRC16_USB_INIT, data) ^ CRC16_USB_XOROUT


def flag_set(flags: int, flag: int) -> bool:
    return flags & flag != 0
