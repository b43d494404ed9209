from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Optional, Tuple

from highflow.core.cursor import ByteCursor
from highflow.core.decodable import Decodable, FixedArray, U16, U8, decode_enum, decode_flags
from highflow.core.errors import InvalidValueError, RangeError
from highflow.core.ranged import Bounds, RangedValue
from highflow.protocol.settings.export import export_value

IDLE_BRIGHTNESS_OFF = 0x03


class TemperatureUnit(IntEnum):
    C = 0x00
    F = 0x01

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "TemperatureUnit":
        return decode_enum(cls, cursor, "TemperatureUnit")


class FlowUnit(IntEnum):
    LITER = 0x00
    GALLONS = 0x01

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "FlowUnit":
        return decode_enum(cls, cursor, "FlowUnit")


class DisplayBrightness(IntEnum):
    MAXIMUM = 0x00
    MEDIUM = 0x01
    LOW = 0x02

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "DisplayBrightness":
        return decode_enum(cls, cursor, "DisplayBrightness")

    @classmethod
    def decode_optional(cls, cursor: ByteCursor) -> Optional["DisplayBrightness"]:
        """Stand-by brightness; code ``0x03`` switches the display off."""
        code = cursor.read_u8()
        if code == IDLE_BRIGHTNESS_OFF:
            return cursor.guard(lambda: None)
        try:
            member = cls(code)
        except ValueError:
            raise InvalidValueError("Option<DisplayBrightness>", code) from None
        return cursor.guard(lambda: member)


class ChartSource(IntEnum):
    FLOW = 0x00
    WATER_TEMP = 0x01
    EXTERNAL_TEMP = 0x02
    CONDUCTIVITY = 0x03
    WATER_QUALITY = 0x04
    POWER_CONSUMPTION = 0x05
    SYSTEM_VOLTAGE = 0x06

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "ChartSource":
        return decode_enum(cls, cursor, "ChartSource")


class DisplayFlags(IntFlag):
    ROTATE = 0x01
    INVERT = 0x04
    AUTO_INVERT = 0x08
    DISABLE_BUTTONS = 0x10
    LOCK_MENU = 0x20

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "DisplayFlags":
        return decode_flags(cls, cursor)


class PageFlags(IntFlag):
    DEVICE_INFO = 0x0001
    FLOW = 0x0002
    WATER_TEMP = 0x0004
    EXTERNAL_TEMP = 0x0008
    CONDUCTIVITY = 0x0010
    WATER_QUALITY = 0x0020
    VOLUME_COUNT = 0x0040
    POWER_SENSOR = 0x0080
    FLOW_WATERTEMP = 0x0100
    COND_QUALITY = 0x0200
    TEMPERATURES = 0x0400
    FLOW_VOLUME = 0x0800
    CHART1 = 0x1000
    CHART2 = 0x2000
    CHART3 = 0x4000
    CHART4 = 0x8000

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "PageFlags":
        return decode_flags(cls, cursor, width=2)


class ChartInterval(RangedValue):
    """Chart update interval in 1/10 s."""

    primitive = U16
    policy = Bounds(1, 60_000)


class NextPageInterval(RangedValue):
    """Page cycling interval in seconds."""

    primitive = U8
    policy = Bounds(3, 60)

    @classmethod
    def decode_optional(cls, cursor: ByteCursor) -> Optional["NextPageInterval"]:
        # Values above the maximum disable page cycling.
        raw = cursor.read_u8()

        def build() -> Optional["NextPageInterval"]:
            if raw > cls.max_inclusive():
                return None
            try:
                return cls.from_value(raw)
            except RangeError:
                raise InvalidValueError("NextPageInterval", raw) from None

        return cursor.guard(build)


@dataclass(frozen=True)
class Chart(Decodable):
    source: ChartSource
    interval: ChartInterval

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "Chart":
        cursor.skip(1)
        source = ChartSource.decode(cursor)
        interval = ChartInterval.decode(cursor)
        return cursor.guard(lambda: cls(source=source, interval=interval))


@dataclass(frozen=True)
class DisplaySettings(Decodable):
    """
    Display related settings.

    Attributes:
        temperature_unit: Unit temperatures are shown in.
        flow_unit: Unit the flow is shown in.
        display_flags: Rotation, inversion and lock options.
        next_page_interval: Page cycling interval, ``None`` if cycling is off.
        page_flags: Pages shown on the display.
        display_brightness: Brightness during normal operation.
        idle_display_brightness: Brightness in stand-by, ``None`` if the display is off.
        charts: Settings of the four value charts.
    """
    temperature_unit: TemperatureUnit
    flow_unit: FlowUnit
    display_flags: DisplayFlags
    next_page_interval: Optional[NextPageInterval]
    page_flags: PageFlags
    display_brightness: DisplayBrightness
    idle_display_brightness: Optional[DisplayBrightness]
    charts: Tuple[Chart, ...]

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "DisplaySettings":
        temperature_unit = TemperatureUnit.decode(cursor)
        flow_unit = FlowUnit.decode(cursor)
        cursor.skip(1)
        next_page_interval = NextPageInterval.decode_optional(cursor)
        cursor.skip(2)
        page_flags = PageFlags.decode(cursor)
        cursor.skip(4)
        display_brightness = DisplayBrightness.decode(cursor)
        idle_display_brightness = DisplayBrightness.decode_optional(cursor)
        cursor.skip(4)
        display_flags = DisplayFlags.decode(cursor)
        charts = FixedArray(Chart, 4).decode(cursor)

        return cursor.guard(
            lambda: cls(
                temperature_unit=temperature_unit,
                flow_unit=flow_unit,
                display_flags=display_flags,
                next_page_interval=next_page_interval,
                page_flags=page_flags,
                display_brightness=display_brightness,
                idle_display_brightness=idle_display_brightness,
                charts=charts,
            )
        )

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)
