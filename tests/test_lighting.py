"""Tests for LED controllers and the lighting block."""
import pytest

from frame_builder import (
    color,
    controller,
    empty_controller,
    lighting,
    rainbow_body,
)

from highflow.core.cursor import ByteCursor
from highflow.core.errors import InvalidValueError, RangeError
from highflow.protocol.settings.color import Color
from highflow.protocol.settings.effects import EffectKind, EffectPercent
from highflow.protocol.settings.lighting import (
    CONTROLLER_SIZE,
    Brightness,
    Controller,
    DataSource,
    LightingSettings,
)


def _decode_controller(data):
    cursor = ByteCursor(data)
    value = Controller.decode_optional(cursor)
    assert cursor.position == CONTROLLER_SIZE
    return value


def _decode_lighting(data):
    cursor = ByteCursor(data)
    value = LightingSettings.decode_optional(cursor)
    assert cursor.position == len(data)
    return value


def test_controller_header():
    data = controller(
        rainbow_body(speed=70),
        offset=45,
        length=15,
        data_source=DataSource.WATER_TEMPERATURE,
        attenuation_rising=10,
        attenuation_falling=20,
    )
    assert len(data) == CONTROLLER_SIZE

    decoded = _decode_controller(data)
    assert decoded.offset == 45
    assert decoded.length == 15
    assert decoded.data_source is DataSource.WATER_TEMPERATURE
    assert decoded.sensor_attenuation_rising == 10
    assert decoded.sensor_attenuation_falling == 20
    assert decoded.effect.kind is EffectKind.RAINBOW
    assert decoded.effect.params.speed == EffectPercent(70)


def test_controller_without_data_source():
    assert _decode_controller(controller(rainbow_body())).data_source is None


@pytest.mark.parametrize("code", [0x000E, 0x001B, 0x001D, 0xFFFE])
def test_unknown_data_source(code):
    with pytest.raises(InvalidValueError) as excinfo:
        Controller.decode_optional(ByteCursor(controller(rainbow_body(), data_source=code)))
    assert (excinfo.value.name, excinfo.value.value) == ("DataSource", code)


@pytest.mark.parametrize("filler", [0x00, 0xFF])
def test_empty_controller_is_absent(filler):
    assert _decode_controller(empty_controller(filler)) is None


def test_lighting_keeps_controller_order_and_drops_empty_slots():
    strip = [
        controller(rainbow_body(speed=10), offset=0),
        empty_controller(),
        controller(rainbow_body(speed=20), offset=30),
    ]
    sensor = [empty_controller(), controller(rainbow_body(speed=30), offset=0, length=10)]
    decoded = _decode_lighting(lighting(strip=strip, sensor=sensor, brightness=128))

    assert decoded.brightness == Brightness(128)
    assert [c.offset for c in decoded.strip_controllers] == [0, 30]
    assert [c.effect.params.speed.value for c in decoded.strip_controllers] == [10, 20]
    assert len(decoded.sensor_controllers) == 1
    assert decoded.sensor_controllers[0].length == 10


def test_lighting_without_controllers():
    decoded = _decode_lighting(lighting())
    assert decoded.strip_controllers == ()
    assert decoded.sensor_controllers == ()


def test_disabled_lighting_is_absent():
    assert _decode_lighting(lighting(strip=[controller(rainbow_body())], flags=0x02)) is None


def test_disabled_lighting_is_not_validated():
    strip = [controller(rainbow_body(speed=0xFFFF))] * 6
    assert _decode_lighting(lighting(strip=strip, flags=0x02)) is None


def test_disabled_lighting_still_rejects_unknown_effects():
    strip = [controller(rainbow_body(), selector=0x06)]
    with pytest.raises(InvalidValueError):
        LightingSettings.decode_optional(ByteCursor(lighting(strip=strip, flags=0x02)))


def test_enabled_lighting_validates_effects():
    strip = [controller(rainbow_body(speed=0xFFFF))]
    with pytest.raises(RangeError):
        LightingSettings.decode_optional(ByteCursor(lighting(strip=strip)))


def test_controller_export():
    decoded = _decode_controller(controller(rainbow_body(start=color(4, 0, 255, 255)), data_source=DataSource.SOUND))
    exported = decoded.as_dict()
    assert exported["data_source"] == "SOUND"
    assert exported["effect"]["kind"] == "RAINBOW"
    assert exported["effect"]["params"]["color"] == Color.from_hsv(240.0, 1.0, 1.0).as_dict()
