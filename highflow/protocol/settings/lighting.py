from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Tuple

from highflow.core.binary import flag_set
from highflow.core.cursor import ByteCursor
from highflow.core.decodable import Decodable, FixedArray, U8
from highflow.core.errors import InvalidValueError
from highflow.core.ranged import AcceptAll, RangedValue
from highflow.protocol.settings.effects import EFFECT_BODY_SIZE, EFFECT_NONE, Effect, decode_effect
from highflow.protocol.settings.export import export_value

STRIP_CONTROLLER_SLOTS = 6
SENSOR_CONTROLLER_SLOTS = 2
CONTROLLER_SIZE = 70

LIGHTING_DISABLED = 0x02
DATA_SOURCE_NONE = 0xFFFF


class Brightness(RangedValue):
    """Global LED brightness, 0-255."""

    primitive = U8
    policy = AcceptAll()


class DataSource(IntEnum):
    FLOW = 0x0000
    WATER_TEMPERATURE = 0x0001
    EXTERNAL_TEMPERATURE = 0x0002
    CONDUCTIVITY = 0x0003
    WATER_QUALITY = 0x0004
    POWER = 0x0005
    SOFTWARE_SENSOR_1 = 0x0006
    SOFTWARE_SENSOR_2 = 0x0007
    SOFTWARE_SENSOR_3 = 0x0008
    SOFTWARE_SENSOR_4 = 0x0009
    SOFTWARE_SENSOR_5 = 0x000A
    SOFTWARE_SENSOR_6 = 0x000B
    SOFTWARE_SENSOR_7 = 0x000C
    SOFTWARE_SENSOR_8 = 0x000D
    SOUND = 0x001C

    @classmethod
    def decode_optional(cls, cursor: ByteCursor) -> Optional["DataSource"]:
        code = cursor.read_u16be()
        if code == DATA_SOURCE_NONE:
            return cursor.guard(lambda: None)
        try:
            member = cls(code)
        except ValueError:
            raise InvalidValueError("DataSource", code) from None
        return cursor.guard(lambda: member)


@dataclass(frozen=True)
class Controller:
    """
    One LED region and the effect displayed on it.

    Attributes:
        offset: First LED of the region.
        length: Number of LEDs in the region.
        effect: Effect shown in the region.
        data_source: Signal driving data controlled effects, if any.
        sensor_attenuation_rising: Filtering of rising sensor values.
        sensor_attenuation_falling: Filtering of falling sensor values.
    """
    offset: int
    length: int
    effect: Effect
    data_source: Optional[DataSource]
    sensor_attenuation_rising: int
    sensor_attenuation_falling: int

    @classmethod
    def decode_optional(cls, cursor: ByteCursor) -> Optional["Controller"]:
        """Decode one 70 byte controller slot; unused slots yield ``None``."""
        offset = cursor.read_u8()
        length = cursor.read_u8()
        selector = cursor.read_u8()
        flags = cursor.read_u16be()
        data_source = DataSource.decode_optional(cursor)
        sensor_attenuation_rising = cursor.read_u8()
        sensor_attenuation_falling = cursor.read_u8()

        if selector == EFFECT_NONE:
            cursor.skip(EFFECT_BODY_SIZE + 1)
            return cursor.guard(lambda: None)

        effect = decode_effect(cursor, selector, flags)
        cursor.skip(1)

        return cursor.guard(
            lambda: cls(
                offset=offset,
                length=length,
                effect=effect,
                data_source=data_source,
                sensor_attenuation_rising=sensor_attenuation_rising,
                sensor_attenuation_falling=sensor_attenuation_falling,
            )
        )

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)


class _ControllerSlot(Decodable):
    """A controller slot, decoded to ``None`` when unused."""

    @classmethod
    def decode(cls, cursor: ByteCursor) -> Optional[Controller]:
        return Controller.decode_optional(cursor)


@dataclass(frozen=True)
class LightingSettings:
    """
    RGBpx lighting settings.

    Attributes:
        brightness: Global brightness of all effects.
        strip_controllers: Effects of the external LED strip, in slot order.
        sensor_controllers: Effects of the LEDs built into the sensor.
    """
    brightness: Brightness
    strip_controllers: Tuple[Controller, ...]
    sensor_controllers: Tuple[Controller, ...]

    @classmethod
    def decode_optional(cls, cursor: ByteCursor) -> Optional["LightingSettings"]:
        """Decode the lighting block; ``None`` if lighting is disabled on the device."""
        brightness = Brightness.decode(cursor)
        cursor.skip(1)
        flags = cursor.read_u8()
        cursor.skip(1)

        if flag_set(flags, LIGHTING_DISABLED):
            FixedArray(_ControllerSlot, STRIP_CONTROLLER_SLOTS + SENSOR_CONTROLLER_SLOTS).skip_bytes(cursor)
            return cursor.guard(lambda: None)

        strip = FixedArray(_ControllerSlot, STRIP_CONTROLLER_SLOTS).decode(cursor)
        sensor = FixedArray(_ControllerSlot, SENSOR_CONTROLLER_SLOTS).decode(cursor)

        return cursor.guard(
            lambda: cls(
                brightness=brightness,
                strip_controllers=tuple(c for c in strip if c is not None),
                sensor_controllers=tuple(c for c in sensor if c is not None),
            )
        )

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)
