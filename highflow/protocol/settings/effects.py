"""
LED effect encodings.

Every controller slot carries a 60 byte effect body. The selector byte picks
one of the encodings below; the controller flags word toggles per-effect
options and decides whether the two leading source-control blocks are kept.

Several effects share a parameter layout (Scanner/Laser, Rain/Snow/Stardust,
BarGraph/SoundBars). They are told apart by ``Effect.kind`` only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, Optional, Tuple, Union

from highflow.core.binary import flag_set
from highflow.core.cursor import ByteCursor
from highflow.core.decodable import Decodable, FixedArray, U16, decode_enum
from highflow.core.errors import InvalidValueError
from highflow.core.ranged import Bounds, RangedValue
from highflow.protocol.settings.color import Color
from highflow.protocol.settings.export import export_value

EFFECT_NONE = 0x00
EFFECT_BODY_SIZE = 60

SOURCE_CONTROL_0 = 0x4000
SOURCE_CONTROL_1 = 0x8000


class EffectPercent(RangedValue):
    """Speed, intensity and similar parameters in %."""

    primitive = U16
    policy = Bounds(0, 100)


class EffectDelay(RangedValue):
    primitive = U16
    policy = Bounds(0, 100)


class EffectWidth(RangedValue):
    """Relative width or intensity."""

    primitive = U16
    policy = Bounds(1, 100)


class RainItems(RangedValue):
    primitive = U16
    policy = Bounds(1, 4)


class SoundEffectSpeed(RangedValue):
    primitive = U16
    policy = Bounds(1, 10)


class SoundEffect(IntEnum):
    OUTWARDS_FROM_CENTER = 0x0000
    INWARDS_TO_CENTER_A = 0x0001
    INWARDS_TO_CENTER_B = 0x0002
    FROM_LEFT = 0x0003
    FROM_RIGHT = 0x0004
    ALL_LEDS = 0x0005

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "SoundEffect":
        return decode_enum(cls, cursor, "SoundEffect", width=2)


@dataclass(frozen=True)
class SourceControl(Decodable):
    """
    Linear mapping of an external signal onto an effect parameter.

    The unit of ``input_min``/``input_max`` depends on the controller's data source.
    """
    input_min: int
    input_max: int
    output_min: int
    output_max: int

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "SourceControl":
        input_min = cursor.read_u16be()
        input_max = cursor.read_u16be()
        output_min = cursor.read_u8()
        output_max = cursor.read_u8()
        return cursor.guard(lambda: cls(input_min, input_max, output_min, output_max))


class EffectKind(IntEnum):
    STATIC = 0x01
    BREATHING = 0x02
    RAINBOW = 0x03
    BLINK = 0x04
    COLOR_CHANGE = 0x05
    SEQUENCE = 0x07
    SCANNER = 0x08
    LASER = 0x09
    WAVE = 0x0A
    COLOR_SEQUENCE = 0x0B
    COLOR_SHIFT = 0x0C
    BAR_GRAPH = 0x0D
    FLAME = 0x0E
    RAIN = 0x0F
    SNOW = 0x10
    STARDUST = 0x11
    COLOR_SWITCH = 0x12
    SWIPING_RAINBOW = 0x13
    SOUND_FLASH = 0x14
    SOUND_BARS = 0x15
    SOUND_SLIDER = 0x16
    SOUND_SHIFT = 0x17
    AMBIENT = 0x18
    COLOR_GRADIENT = 0x21


@dataclass(frozen=True)
class ColorThreshold:
    color: Color
    value: int
    blink: bool


@dataclass(frozen=True)
class GradientStop:
    color: Color
    position: int


@dataclass(frozen=True)
class SoundSliderChannel:
    color: Color
    effect: SoundEffect
    speed: SoundEffectSpeed


@dataclass(frozen=True)
class SoundShiftChannel:
    color: Color
    speed: SoundEffectSpeed
    random_color: bool


@dataclass(frozen=True)
class StaticEffect:
    color: Color
    source_control_brightness: Optional[SourceControl]
    source_control_saturation: Optional[SourceControl]


@dataclass(frozen=True)
class BreathingEffect:
    color: Color
    speed: EffectPercent
    intensity: EffectPercent
    delay_max_brightness: EffectDelay
    delay_min_brightness: EffectDelay
    source_control_speed: Optional[SourceControl]
    source_control_intensity: Optional[SourceControl]


@dataclass(frozen=True)
class RainbowEffect:
    color: Color
    speed: EffectPercent
    color_range: EffectPercent
    reverse_direction: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class BlinkEffect:
    background: Color
    colors: Tuple[Color, ...]
    speed: EffectPercent
    fade_in: bool
    fade_out: bool
    random_color: bool
    slide_colors: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class ColorChangeEffect:
    colors: Tuple[Color, ...]
    speed: EffectPercent
    fade: bool
    random_color: bool
    slide_colors: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class SequenceEffect:
    background: Color
    colors: Tuple[Color, ...]
    speed: EffectPercent
    smoothness: EffectPercent
    delay_after_sequence: EffectDelay
    delay_before_sequence: EffectDelay
    reverse_direction: bool
    fade: bool
    random_color: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class ScannerEffect:
    """Layout of both the Scanner and the Laser effect."""
    background: Color
    inner_color: Color
    outer_color: Color
    speed: EffectPercent
    smoothness: EffectPercent
    width: EffectWidth
    reverse_direction: bool
    fade: bool
    random_color: bool
    second_color_mode: bool
    color_change: bool
    circular: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class WaveEffect:
    background: Color
    colors: Tuple[Color, ...]
    speed: EffectPercent
    smoothness: EffectPercent
    width: EffectWidth
    reverse_direction: bool
    random_color: bool
    circular: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class ColorSequenceEffect:
    colors: Tuple[Color, ...]
    speed: EffectPercent
    smoothness: EffectPercent
    color_change_speed: EffectWidth
    reverse_direction: bool
    random_color: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class ColorShiftEffect:
    color: Color
    speed: EffectPercent
    color_range: EffectPercent
    total_area: EffectWidth
    reverse_direction: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class BarGraphEffect:
    """
    Layout of both the BarGraph and the SoundBars effect.

    ``colors`` holds the start range followed by one range per configured
    color; ``end_value`` closes the last range.
    """
    background: Color
    peak_color: Color
    colors: Tuple[ColorThreshold, ...]
    end_value: int
    rotation: EffectPercent
    peak_hold_time: EffectPercent
    reverse_direction: bool
    show_peak: bool
    show_bar: bool
    show_ranges: bool
    fade_ranges: bool
    source_control_rotation: Optional[SourceControl]


@dataclass(frozen=True)
class FlameEffect:
    background: Color
    color_primary: Color
    color_secondary: Color
    intensity: EffectWidth
    source_control_intensity: Optional[SourceControl]


@dataclass(frozen=True)
class RainEffect:
    """Layout of the Rain, Snow and Stardust effects."""
    background: Color
    color: Color
    speed: EffectWidth
    items: RainItems
    size: EffectWidth
    smoothness: EffectWidth
    reverse_direction: bool
    random_color: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class ColorSwitchEffect:
    colors: Tuple[ColorThreshold, ...]
    end_value: int
    fade_ranges: bool
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class SwipingRainbowEffect:
    point_color: Color
    strip_color: Color
    point_speed: EffectWidth
    point_smoothness: EffectWidth
    point_size: EffectWidth
    color_change_speed: EffectWidth
    color_range: EffectWidth
    reverse_direction: bool
    source_control_speed: Optional[SourceControl]
    source_control_brightness: Optional[SourceControl]


@dataclass(frozen=True)
class SoundFlashEffect:
    background: Color
    colors: Tuple[Color, ...]


@dataclass(frozen=True)
class SoundSliderEffect:
    background: Color
    effects: Tuple[SoundSliderChannel, ...]
    rotate_color: EffectPercent


@dataclass(frozen=True)
class SoundShiftEffect:
    background: Color
    effects: Tuple[SoundShiftChannel, ...]
    rotate_color: EffectPercent
    idle_speed: EffectPercent
    activity_speed: EffectPercent
    reverse_direction: bool


@dataclass(frozen=True)
class AmbientEffect:
    background: Color


@dataclass(frozen=True)
class ColorGradientEffect:
    start_color: Color
    colors: Tuple[GradientStop, ...]
    rotation: EffectPercent
    reverse_direction: bool
    reverse_rotation: bool
    source_control_rotation: Optional[SourceControl]


EffectParams = Union[
    StaticEffect,
    BreathingEffect,
    RainbowEffect,
    BlinkEffect,
    ColorChangeEffect,
    SequenceEffect,
    ScannerEffect,
    WaveEffect,
    ColorSequenceEffect,
    ColorShiftEffect,
    BarGraphEffect,
    FlameEffect,
    RainEffect,
    ColorSwitchEffect,
    SwipingRainbowEffect,
    SoundFlashEffect,
    SoundSliderEffect,
    SoundShiftEffect,
    AmbientEffect,
    ColorGradientEffect,
]


@dataclass(frozen=True)
class Effect:
    """An effect selector together with the parameters of that effect."""
    kind: EffectKind
    params: EffectParams

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)


# --- effect bodies ---
#
# Each body reader receives the cursor positioned at the start of the 60 byte
# effect body together with the controller flags word. It returns the guarded
# parameter object of its effect.

BodyReader = Callable[[ByteCursor, int], EffectParams]


def _source_controls(cursor: ByteCursor, flags: int) -> Tuple[Any, Any]:
    first = SourceControl.decode_or_skip(cursor, flag_set(flags, SOURCE_CONTROL_0))
    second = SourceControl.decode_or_skip(cursor, flag_set(flags, SOURCE_CONTROL_1))
    return first, second


def _skip_source_controls(cursor: ByteCursor) -> None:
    SourceControl.skip_bytes(cursor)
    SourceControl.skip_bytes(cursor)


def _read_static(cursor: ByteCursor, flags: int) -> StaticEffect:
    source_control_brightness, source_control_saturation = _source_controls(cursor, flags)
    cursor.skip(24)
    color = Color.decode(cursor)
    FixedArray(Color, 5).skip_bytes(cursor)

    return cursor.guard(
        lambda: StaticEffect(
            color=color,
            source_control_brightness=source_control_brightness,
            source_control_saturation=source_control_saturation,
        )
    )


def _read_breathing(cursor: ByteCursor, flags: int) -> BreathingEffect:
    source_control_speed, source_control_intensity = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    intensity = EffectPercent.decode(cursor)
    delay_max_brightness = EffectDelay.decode(cursor)
    delay_min_brightness = EffectDelay.decode(cursor)
    cursor.skip(16)
    color = Color.decode(cursor)
    FixedArray(Color, 5).skip_bytes(cursor)

    return cursor.guard(
        lambda: BreathingEffect(
            color=color,
            speed=speed,
            intensity=intensity,
            delay_max_brightness=delay_max_brightness,
            delay_min_brightness=delay_min_brightness,
            source_control_speed=source_control_speed,
            source_control_intensity=source_control_intensity,
        )
    )


def _read_rainbow(cursor: ByteCursor, flags: int) -> RainbowEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    color_range = EffectPercent.decode(cursor)
    cursor.skip(20)
    color = Color.decode(cursor)
    FixedArray(Color, 5).skip_bytes(cursor)

    return cursor.guard(
        lambda: RainbowEffect(
            color=color,
            speed=speed,
            color_range=color_range,
            reverse_direction=flag_set(flags, 0x02),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_blink(cursor: ByteCursor, flags: int) -> BlinkEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    color_count = cursor.read_u16be()
    cursor.skip(20)
    colors = FixedArray(Color, 6).decode(cursor)

    return cursor.guard(
        lambda: BlinkEffect(
            background=colors[0],
            colors=colors[1:][:color_count],
            speed=speed,
            fade_in=flag_set(flags, 0x02),
            fade_out=flag_set(flags, 0x04),
            random_color=flag_set(flags, 0x08),
            slide_colors=flag_set(flags, 0x10),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_color_change(cursor: ByteCursor, flags: int) -> ColorChangeEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    color_count = cursor.read_u16be()
    cursor.skip(20)
    colors = FixedArray(Color, 6).decode(cursor)

    return cursor.guard(
        lambda: ColorChangeEffect(
            colors=colors[:color_count],
            speed=speed,
            fade=flag_set(flags, 0x04),
            random_color=flag_set(flags, 0x08),
            slide_colors=flag_set(flags, 0x10),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_sequence(cursor: ByteCursor, flags: int) -> SequenceEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    smoothness = EffectPercent.decode(cursor)
    color_count = cursor.read_u16be()
    delay_after_sequence = EffectDelay.decode(cursor)
    delay_before_sequence = EffectDelay.decode(cursor)
    cursor.skip(14)
    colors = FixedArray(Color, 6).decode(cursor)

    return cursor.guard(
        lambda: SequenceEffect(
            background=colors[0],
            colors=colors[1:][:color_count],
            speed=speed,
            smoothness=smoothness,
            delay_after_sequence=delay_after_sequence,
            delay_before_sequence=delay_before_sequence,
            reverse_direction=flag_set(flags, 0x02),
            fade=flag_set(flags, 0x04),
            random_color=flag_set(flags, 0x08),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_scanner(cursor: ByteCursor, flags: int) -> ScannerEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    smoothness = EffectPercent.decode(cursor)
    width = EffectWidth.decode(cursor)
    cursor.skip(18)
    background = Color.decode(cursor)
    outer_color = Color.decode(cursor)
    inner_color = Color.decode(cursor)
    FixedArray(Color, 3).skip_bytes(cursor)

    return cursor.guard(
        lambda: ScannerEffect(
            background=background,
            inner_color=inner_color,
            outer_color=outer_color,
            speed=speed,
            smoothness=smoothness,
            width=width,
            reverse_direction=flag_set(flags, 0x02),
            fade=flag_set(flags, 0x04),
            random_color=flag_set(flags, 0x08),
            second_color_mode=flag_set(flags, 0x20),
            color_change=flag_set(flags, 0x40),
            circular=flag_set(flags, 0x80),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_wave(cursor: ByteCursor, flags: int) -> WaveEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    smoothness = EffectPercent.decode(cursor)
    width = EffectWidth.decode(cursor)
    color_count = cursor.read_u16be()
    cursor.skip(16)
    colors = FixedArray(Color, 6).decode(cursor)

    return cursor.guard(
        lambda: WaveEffect(
            background=colors[0],
            colors=colors[1:][:color_count],
            speed=speed,
            smoothness=smoothness,
            width=width,
            reverse_direction=flag_set(flags, 0x02),
            random_color=flag_set(flags, 0x04),
            circular=flag_set(flags, 0x80),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_color_sequence(cursor: ByteCursor, flags: int) -> ColorSequenceEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    smoothness = EffectPercent.decode(cursor)
    cursor.skip(2)
    color_count = cursor.read_u16be()
    color_change_speed = EffectWidth.decode(cursor)
    cursor.skip(14)
    colors = FixedArray(Color, 6).decode(cursor)

    return cursor.guard(
        lambda: ColorSequenceEffect(
            colors=colors[:color_count],
            speed=speed,
            smoothness=smoothness,
            color_change_speed=color_change_speed,
            reverse_direction=flag_set(flags, 0x02),
            random_color=flag_set(flags, 0x08),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_color_shift(cursor: ByteCursor, flags: int) -> ColorShiftEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectPercent.decode(cursor)
    color_range = EffectPercent.decode(cursor)
    total_area = EffectWidth.decode(cursor)
    cursor.skip(18)
    color = Color.decode(cursor)
    FixedArray(Color, 5).skip_bytes(cursor)

    return cursor.guard(
        lambda: ColorShiftEffect(
            color=color,
            speed=speed,
            color_range=color_range,
            total_area=total_area,
            reverse_direction=flag_set(flags, 0x02),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _threshold_ranges(
    colors: Tuple[Color, ...],
    values: Tuple[int, ...],
    flags: int,
    first_blink_bit: int,
    count: int,
) -> Tuple[ColorThreshold, ...]:
    # Range i blinks when bit (first_blink_bit + i) of the flags word is set.
    ranges = [
        ColorThreshold(color, value, flag_set(flags, 1 << (first_blink_bit + index)))
        for index, (color, value) in enumerate(zip(colors, values))
    ]
    return tuple(ranges[:count])


def _read_bar_graph(cursor: ByteCursor, flags: int) -> BarGraphEffect:
    source_control_rotation = SourceControl.decode_or_skip(cursor, flag_set(flags, SOURCE_CONTROL_0))
    SourceControl.skip_bytes(cursor)
    start_value = cursor.read_u16be()
    end_value = cursor.read_u16be()
    rotation = EffectPercent.decode(cursor)
    color_count = cursor.read_u16be()
    color_values = FixedArray(U16, 3).decode(cursor)
    peak_hold_time = EffectPercent.decode(cursor)
    cursor.skip(8)
    background = Color.decode(cursor)
    peak_color = Color.decode(cursor)
    colors = FixedArray(Color, 4).decode(cursor)

    return cursor.guard(
        lambda: BarGraphEffect(
            background=background,
            peak_color=peak_color,
            colors=_threshold_ranges(colors, (start_value,) + color_values, flags, 7, color_count + 1),
            end_value=end_value,
            rotation=rotation,
            peak_hold_time=peak_hold_time,
            reverse_direction=flag_set(flags, 0x08),
            show_peak=flag_set(flags, 0x20),
            show_bar=flag_set(flags, 0x02),
            show_ranges=flag_set(flags, 0x04),
            fade_ranges=flag_set(flags, 0x01),
            source_control_rotation=source_control_rotation,
        )
    )


def _read_flame(cursor: ByteCursor, flags: int) -> FlameEffect:
    source_control_intensity = SourceControl.decode_or_skip(cursor, flag_set(flags, SOURCE_CONTROL_0))
    SourceControl.skip_bytes(cursor)
    intensity = EffectWidth.decode(cursor)
    cursor.skip(22)
    background = Color.decode(cursor)
    color_primary = Color.decode(cursor)
    color_secondary = Color.decode(cursor)
    FixedArray(Color, 3).skip_bytes(cursor)

    return cursor.guard(
        lambda: FlameEffect(
            background=background,
            color_primary=color_primary,
            color_secondary=color_secondary,
            intensity=intensity,
            source_control_intensity=source_control_intensity,
        )
    )


def _read_rain(cursor: ByteCursor, flags: int) -> RainEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    speed = EffectWidth.decode(cursor)
    items = RainItems.decode(cursor)
    size = EffectWidth.decode(cursor)
    smoothness = EffectWidth.decode(cursor)
    cursor.skip(16)
    background = Color.decode(cursor)
    color = Color.decode(cursor)
    FixedArray(Color, 4).skip_bytes(cursor)

    return cursor.guard(
        lambda: RainEffect(
            background=background,
            color=color,
            speed=speed,
            items=items,
            size=size,
            smoothness=smoothness,
            reverse_direction=flag_set(flags, 0x02),
            random_color=flag_set(flags, 0x08),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_color_switch(cursor: ByteCursor, flags: int) -> ColorSwitchEffect:
    # The brightness mapping sits in the first block but is gated by the second bit.
    source_control_brightness = SourceControl.decode_or_skip(cursor, flag_set(flags, SOURCE_CONTROL_1))
    SourceControl.skip_bytes(cursor)
    color_count = cursor.read_u16be()
    values = FixedArray(U16, 6).decode(cursor)
    end_value = cursor.read_u16be()
    cursor.skip(8)
    colors = FixedArray(Color, 6).decode(cursor)

    return cursor.guard(
        lambda: ColorSwitchEffect(
            colors=_threshold_ranges(colors, values, flags, 1, color_count + 1),
            end_value=end_value,
            fade_ranges=flag_set(flags, 0x01),
            source_control_brightness=source_control_brightness,
        )
    )


def _read_swiping_rainbow(cursor: ByteCursor, flags: int) -> SwipingRainbowEffect:
    source_control_speed, source_control_brightness = _source_controls(cursor, flags)
    point_speed = EffectWidth.decode(cursor)
    point_smoothness = EffectWidth.decode(cursor)
    point_size = EffectWidth.decode(cursor)
    color_change_speed = EffectWidth.decode(cursor)
    color_range = EffectWidth.decode(cursor)
    cursor.skip(14)
    point_color = Color.decode(cursor)
    strip_color = Color.decode(cursor)
    FixedArray(Color, 4).skip_bytes(cursor)

    return cursor.guard(
        lambda: SwipingRainbowEffect(
            point_color=point_color,
            strip_color=strip_color,
            point_speed=point_speed,
            point_smoothness=point_smoothness,
            point_size=point_size,
            color_change_speed=color_change_speed,
            color_range=color_range,
            reverse_direction=flag_set(flags, 0x01),
            source_control_speed=source_control_speed,
            source_control_brightness=source_control_brightness,
        )
    )


def _read_sound_flash(cursor: ByteCursor, flags: int) -> SoundFlashEffect:
    _skip_source_controls(cursor)
    cursor.skip(24)
    background = Color.decode(cursor)
    colors = FixedArray(Color, 4).decode(cursor)
    Color.skip_bytes(cursor)

    return cursor.guard(lambda: SoundFlashEffect(background=background, colors=colors))


def _read_sound_slider(cursor: ByteCursor, flags: int) -> SoundSliderEffect:
    _skip_source_controls(cursor)
    effects = FixedArray(SoundEffect, 4).decode(cursor)
    speeds = FixedArray(SoundEffectSpeed, 4).decode(cursor)
    rotate_color = EffectPercent.decode(cursor)
    cursor.skip(6)
    background = Color.decode(cursor)
    colors = FixedArray(Color, 4).decode(cursor)
    Color.skip_bytes(cursor)

    return cursor.guard(
        lambda: SoundSliderEffect(
            background=background,
            effects=tuple(
                SoundSliderChannel(color, effect, speed)
                for effect, speed, color in zip(effects, speeds, colors)
            ),
            rotate_color=rotate_color,
        )
    )


def _read_sound_shift(cursor: ByteCursor, flags: int) -> SoundShiftEffect:
    _skip_source_controls(cursor)
    rotate_color = EffectPercent.decode(cursor)
    speeds = FixedArray(SoundEffectSpeed, 2).decode(cursor)
    idle_speed = EffectPercent.decode(cursor)
    activity_speed = EffectPercent.decode(cursor)
    cursor.skip(14)
    background = Color.decode(cursor)
    colors = FixedArray(Color, 2).decode(cursor)
    FixedArray(Color, 3).skip_bytes(cursor)

    return cursor.guard(
        lambda: SoundShiftEffect(
            background=background,
            effects=tuple(
                SoundShiftChannel(color, speed, flag_set(flags, 1 << (index + 1)))
                for index, (speed, color) in enumerate(zip(speeds, colors))
            ),
            rotate_color=rotate_color,
            idle_speed=idle_speed,
            activity_speed=activity_speed,
            reverse_direction=flag_set(flags, 0x01),
        )
    )


def _read_ambient(cursor: ByteCursor, flags: int) -> AmbientEffect:
    _skip_source_controls(cursor)
    cursor.skip(24)
    background = Color.decode(cursor)
    FixedArray(Color, 5).skip_bytes(cursor)

    return cursor.guard(lambda: AmbientEffect(background=background))


def _read_color_gradient(cursor: ByteCursor, flags: int) -> ColorGradientEffect:
    source_control_rotation = SourceControl.decode_or_skip(cursor, flag_set(flags, SOURCE_CONTROL_0))
    SourceControl.skip_bytes(cursor)
    cursor.skip(4)
    rotation = EffectPercent.decode(cursor)
    color_count = cursor.read_u16be()
    positions = FixedArray(U16, 3).decode(cursor)
    cursor.skip(10)
    FixedArray(Color, 2).skip_bytes(cursor)
    start_color = Color.decode(cursor)
    colors = FixedArray(Color, 3).decode(cursor)

    return cursor.guard(
        lambda: ColorGradientEffect(
            start_color=start_color,
            colors=tuple(GradientStop(color, position) for color, position in zip(colors, positions))[:color_count],
            rotation=rotation,
            reverse_direction=flag_set(flags, 0x08),
            reverse_rotation=flag_set(flags, 0x10),
            source_control_rotation=source_control_rotation,
        )
    )


EFFECT_READERS: Dict[EffectKind, BodyReader] = {
    EffectKind.STATIC: _read_static,
    EffectKind.BREATHING: _read_breathing,
    EffectKind.RAINBOW: _read_rainbow,
    EffectKind.BLINK: _read_blink,
    EffectKind.COLOR_CHANGE: _read_color_change,
    EffectKind.SEQUENCE: _read_sequence,
    EffectKind.SCANNER: _read_scanner,
    EffectKind.LASER: _read_scanner,
    EffectKind.WAVE: _read_wave,
    EffectKind.COLOR_SEQUENCE: _read_color_sequence,
    EffectKind.COLOR_SHIFT: _read_color_shift,
    EffectKind.BAR_GRAPH: _read_bar_graph,
    EffectKind.FLAME: _read_flame,
    EffectKind.RAIN: _read_rain,
    EffectKind.SNOW: _read_rain,
    EffectKind.STARDUST: _read_rain,
    EffectKind.COLOR_SWITCH: _read_color_switch,
    EffectKind.SWIPING_RAINBOW: _read_swiping_rainbow,
    EffectKind.SOUND_FLASH: _read_sound_flash,
    EffectKind.SOUND_BARS: _read_bar_graph,
    EffectKind.SOUND_SLIDER: _read_sound_slider,
    EffectKind.SOUND_SHIFT: _read_sound_shift,
    EffectKind.AMBIENT: _read_ambient,
    EffectKind.COLOR_GRADIENT: _read_color_gradient,
}


def decode_effect(cursor: ByteCursor, selector: int, flags: int) -> Effect:
    """
    Decode the 60 byte body of the effect chosen by ``selector``.

    The ``EFFECT_NONE`` selector has no body layout and is handled by the
    controller decoder; unknown selectors raise ``InvalidValueError``.
    """
    try:
        kind = EffectKind(selector)
    except ValueError:
        raise InvalidValueError("Effect", selector) from None
    params = EFFECT_READERS[kind](cursor, flags)
    return cursor.guard(lambda: Effect(kind=kind, params=params))
