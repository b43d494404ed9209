"""Tests for the display, alarm, sensor and system blocks of the settings payload."""
import pytest

from frame_builder import alarms, chart, current_draw, display, i16, u16, u8

from highflow.core.cursor import ByteCursor
from highflow.core.decodable import FixedArray
from highflow.core.errors import InvalidValueError, RangeError
from highflow.protocol.settings.alarm import AlarmFlags, AlarmSettings, OutputSignal, Temperature, WaterQuality
from highflow.protocol.settings.display import (
    Chart,
    ChartInterval,
    ChartSource,
    DisplayBrightness,
    DisplayFlags,
    DisplaySettings,
    FlowUnit,
    NextPageInterval,
    PageFlags,
    TemperatureUnit,
)
from highflow.protocol.settings.sensor import ConnectorType, Flow, FlowCorrection, Medium, PowerFlags
from highflow.protocol.settings.system import CurrentDraw, StandbyFlags


def _decode(decoder, data):
    cursor = ByteCursor(data)
    value = decoder(cursor)
    assert cursor.position == len(data)
    return value


def test_display_settings():
    data = display(
        temperature_unit=1,
        flow_unit=1,
        next_page_interval=15,
        page_flags=0x1003,
        brightness=1,
        idle_brightness=2,
        display_flags=0x05,
        charts=[chart(0, 10), chart(1, 20), chart(5, 600), chart(6, 60_000)],
    )
    assert len(data) == 35

    settings = _decode(DisplaySettings.decode, data)
    assert settings.temperature_unit is TemperatureUnit.F
    assert settings.flow_unit is FlowUnit.GALLONS
    assert settings.next_page_interval == NextPageInterval(15)
    assert settings.page_flags == PageFlags.DEVICE_INFO | PageFlags.FLOW | PageFlags.CHART1
    assert settings.display_brightness is DisplayBrightness.MEDIUM
    assert settings.idle_display_brightness is DisplayBrightness.LOW
    assert settings.display_flags == DisplayFlags.ROTATE | DisplayFlags.INVERT
    assert settings.charts == (
        Chart(ChartSource.FLOW, ChartInterval(10)),
        Chart(ChartSource.WATER_TEMP, ChartInterval(20)),
        Chart(ChartSource.POWER_CONSUMPTION, ChartInterval(600)),
        Chart(ChartSource.SYSTEM_VOLTAGE, ChartInterval(60_000)),
    )


def test_display_idle_brightness_off_and_no_page_cycling():
    settings = _decode(DisplaySettings.decode, display(next_page_interval=0xFF, idle_brightness=0x03))
    assert settings.next_page_interval is None
    assert settings.idle_display_brightness is None


@pytest.mark.parametrize("raw", [0, 1, 2])
def test_next_page_interval_below_minimum_is_invalid(raw):
    with pytest.raises(InvalidValueError) as excinfo:
        NextPageInterval.decode_optional(ByteCursor(u8(raw)))
    assert excinfo.value.name == "NextPageInterval"
    assert excinfo.value.value == raw


def test_unknown_idle_brightness():
    with pytest.raises(InvalidValueError) as excinfo:
        DisplayBrightness.decode_optional(ByteCursor(u8(0x04)))
    assert excinfo.value.name == "Option<DisplayBrightness>"
    assert excinfo.value.value == 4


def test_display_flags_ignore_unknown_bits():
    assert DisplayFlags.decode(ByteCursor(u8(0xC2))) == DisplayFlags(0)


def test_chart_interval_out_of_range():
    with pytest.raises(RangeError):
        Chart.decode(ByteCursor(chart(0, 0)))


def test_alarm_settings_all_limits_enabled():
    data = alarms(
        flags=0xE0,
        enabled=0x0F,
        startup_delay=30,
        flow_limit=120,
        water_temperature_limit=4500,
        external_temperature_limit=3500,
        water_quality_limit=2500,
        output_signal=3,
    )
    assert len(data) == 13

    settings = _decode(AlarmSettings.decode, data)
    assert settings.flags == (
        AlarmFlags.DISABLE_SIGNAL_OUTPUT_DURING_ALARM
        | AlarmFlags.ENABLE_OPTICAL_INDICATOR
        | AlarmFlags.ENABLE_ACUSTIC_INDICATOR
    )
    assert settings.startup_delay.value == 30
    assert settings.flow_alarm_limit == Flow(120)
    assert settings.water_temperature_limit == Temperature(4500)
    assert settings.external_temperature_limit == Temperature(3500)
    assert settings.water_quality_limit == WaterQuality(2500)
    assert settings.output_signal is OutputSignal.PULSE_ON_ALARM


@pytest.mark.parametrize(
    "enabled, present",
    [
        (0x00, (False, False, False, False)),
        (0x01, (True, False, False, False)),
        (0x02, (False, True, False, False)),
        (0x04, (False, False, True, False)),
        (0x08, (False, False, False, True)),
        (0x0A, (False, True, False, True)),
    ],
)
def test_alarm_limits_gated_by_enable_bits(enabled, present):
    settings = _decode(AlarmSettings.decode, alarms(enabled=enabled))
    limits = (
        settings.flow_alarm_limit,
        settings.water_temperature_limit,
        settings.external_temperature_limit,
        settings.water_quality_limit,
    )
    assert tuple(limit is not None for limit in limits) == present
    assert settings.output_signal is OutputSignal.CONSTANT_SPEED


def test_disabled_alarm_limit_is_not_validated():
    settings = _decode(AlarmSettings.decode, alarms(enabled=0x00, flow_limit=0xFFFF))
    assert settings.flow_alarm_limit is None


def test_enabled_alarm_limit_is_validated():
    with pytest.raises(RangeError):
        AlarmSettings.decode(ByteCursor(alarms(enabled=0x01, flow_limit=0xFFFF)))


def test_unknown_output_signal():
    with pytest.raises(InvalidValueError) as excinfo:
        AlarmSettings.decode(ByteCursor(alarms(output_signal=6)))
    assert (excinfo.value.name, excinfo.value.value) == ("OutputSignal", 6)


def test_current_draw_gated_by_flag():
    assert _decode(CurrentDraw.decode_optional, current_draw(1500, flags=0x01)) == CurrentDraw(1500)
    assert _decode(CurrentDraw.decode_optional, current_draw(1500, flags=0x00)) is None
    assert _decode(CurrentDraw.decode_optional, current_draw(0, flags=0x00)) is None


def test_current_draw_validated_when_present():
    with pytest.raises(RangeError):
        CurrentDraw.decode_optional(ByteCursor(current_draw(100, flags=0x01)))


@pytest.mark.parametrize(
    "decoder, name, raw",
    [
        (Medium.decode, "Medium", 2),
        (ConnectorType.decode, "ConnectorType", 0x10),
        (TemperatureUnit.decode, "TemperatureUnit", 2),
        (FlowUnit.decode, "FlowUnit", 0xFF),
        (ChartSource.decode, "ChartSource", 7),
        (DisplayBrightness.decode, "DisplayBrightness", 3),
    ],
)
def test_unknown_enum_codes(decoder, name, raw):
    with pytest.raises(InvalidValueError) as excinfo:
        decoder(ByteCursor(u8(raw)))
    assert excinfo.value.name == name
    assert excinfo.value.value == raw
    assert f"name={name}" in str(excinfo.value)


def test_flag_fields():
    assert StandbyFlags.decode(ByteCursor(u8(0x23))) == (
        StandbyFlags.STANDBY_NO_USB | StandbyFlags.STANDBY_ON_SUSPEND | StandbyFlags.DISPLAY_OFF
    )
    assert StandbyFlags.decode(ByteCursor(u8(0x08))) == StandbyFlags(0)
    assert PowerFlags.decode(ByteCursor(u8(0x03))) == PowerFlags.AUTOMATIC_POWER_OFFSET_COMPENSATION


def test_flow_correction_arrays():
    corrections = FixedArray(FlowCorrection, 3).decode(ByteCursor(i16(-5000) + i16(0) + i16(250)))
    assert corrections == (FlowCorrection(-5000), FlowCorrection(0), FlowCorrection(250))
    flows = FixedArray(Flow, 2).decode(ByteCursor(u16(0) + u16(3000)))
    assert flows == (Flow(0), Flow(3000))
