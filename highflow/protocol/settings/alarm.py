from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Optional

from highflow.core.binary import flag_set
from highflow.core.cursor import ByteCursor
from highflow.core.decodable import Decodable, U16, U8, decode_enum, decode_flags
from highflow.core.ranged import Bounds, RangedValue
from highflow.protocol.settings.export import export_value
from highflow.protocol.settings.sensor import Flow

ALARM_FLOW = 0x01
ALARM_WATER_TEMPERATURE = 0x02
ALARM_EXTERNAL_TEMPERATURE = 0x04
ALARM_WATER_QUALITY = 0x08


class StartupDelay(RangedValue):
    """Seconds the alarms stay disabled after boot."""

    primitive = U8
    policy = Bounds(0, 100)


class Temperature(RangedValue):
    """Temperature in 1/100 degree."""

    primitive = U16
    policy = Bounds(0, 10_000)


class WaterQuality(RangedValue):
    """Water quality in 1/100 %."""

    primitive = U16
    policy = Bounds(0, 10_000)


class OutputSignal(IntEnum):
    CONSTANT_SPEED = 0x00
    HIGH_FLOW_SENSOR = 0x01
    FAN_FROM_FLOW = 0x02
    PULSE_ON_ALARM = 0x03
    PERMANENT_ON = 0x04
    PERMANENT_OFF = 0x05

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "OutputSignal":
        return decode_enum(cls, cursor, "OutputSignal")


class AlarmFlags(IntFlag):
    DISABLE_SIGNAL_OUTPUT_DURING_ALARM = 0x20
    ENABLE_OPTICAL_INDICATOR = 0x40
    ENABLE_ACUSTIC_INDICATOR = 0x80

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "AlarmFlags":
        return decode_flags(cls, cursor)


@dataclass(frozen=True)
class AlarmSettings(Decodable):
    """
    Alarm related settings.

    Each limit is ``None`` when the corresponding alarm is disabled; the bytes of
    a disabled limit are still present on the wire and are skipped.
    """
    flags: AlarmFlags
    startup_delay: StartupDelay
    flow_alarm_limit: Optional[Flow]
    water_temperature_limit: Optional[Temperature]
    external_temperature_limit: Optional[Temperature]
    water_quality_limit: Optional[WaterQuality]
    output_signal: OutputSignal

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "AlarmSettings":
        flags = AlarmFlags.decode(cursor)
        enabled = cursor.read_u8()
        cursor.skip(1)
        startup_delay = StartupDelay.decode(cursor)
        flow_alarm_limit = Flow.decode_or_skip(cursor, flag_set(enabled, ALARM_FLOW))
        water_temperature_limit = Temperature.decode_or_skip(cursor, flag_set(enabled, ALARM_WATER_TEMPERATURE))
        external_temperature_limit = Temperature.decode_or_skip(cursor, flag_set(enabled, ALARM_EXTERNAL_TEMPERATURE))
        water_quality_limit = WaterQuality.decode_or_skip(cursor, flag_set(enabled, ALARM_WATER_QUALITY))
        output_signal = OutputSignal.decode(cursor)

        return cursor.guard(
            lambda: cls(
                flags=flags,
                startup_delay=startup_delay,
                flow_alarm_limit=flow_alarm_limit,
                water_temperature_limit=water_temperature_limit,
                external_temperature_limit=external_temperature_limit,
                water_quality_limit=water_quality_limit,
                output_signal=output_signal,
            )
        )

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)
