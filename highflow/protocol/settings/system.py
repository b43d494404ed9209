from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Optional

from highflow.core.cursor import ByteCursor
from highflow.core.decodable import U16, U8, decode_flags
from highflow.core.ranged import Bounds, RangedValue
from highflow.protocol.settings.export import export_value


class StandbyFlags(IntFlag):
    STANDBY_NO_USB = 0x01
    STANDBY_ON_SUSPEND = 0x02
    STANDBY_ON_ABUS_LOSS = 0x04
    DISABLE_ALARM_DETECT = 0x10
    DISPLAY_OFF = 0x20
    LEDS_DISABLED = 0x40
    DISABLE_VOLUME_COUNTER = 0x80

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "StandbyFlags":
        return decode_flags(cls, cursor)


class AquaBusAddress(RangedValue):
    primitive = U8
    policy = Bounds(58, 61)


class CurrentDraw(RangedValue):
    """Increased USB current draw in mA."""

    primitive = U16
    policy = Bounds(500, 2000)

    @classmethod
    def decode_optional(cls, cursor: ByteCursor) -> Optional["CurrentDraw"]:
        # [reserved] [flags: 0x01 = enabled] [u16 value]
        cursor.skip(1)
        flags = cursor.read_u8()
        raw = cursor.read_u16be()
        return cursor.guard(lambda: cls.from_value(raw) if flags & 0x01 else None)


@dataclass(frozen=True)
class SystemSettings:
    standby_flags: StandbyFlags
    aqua_bus_address: AquaBusAddress
    increased_current_draw: Optional[CurrentDraw]

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)
