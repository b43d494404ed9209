"""
Device settings carried by the settings frame.

- ``model``: the ``Settings`` aggregate and its decoder.
- ``system``, ``sensor``, ``alarm``, ``display``: the fixed sub-records.
- ``lighting``: LED controllers and their data sources.
- ``effects``: the effect encodings of a controller.
- ``color``: the device color encoding.
"""
from highflow.protocol.settings.alarm import (
    AlarmFlags,
    AlarmSettings,
    OutputSignal,
    StartupDelay,
    Temperature,
    WaterQuality,
)
from highflow.protocol.settings.color import Color
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
from highflow.protocol.settings.effects import (
    AmbientEffect,
    BarGraphEffect,
    BlinkEffect,
    BreathingEffect,
    ColorChangeEffect,
    ColorGradientEffect,
    ColorSequenceEffect,
    ColorShiftEffect,
    ColorSwitchEffect,
    ColorThreshold,
    Effect,
    EffectDelay,
    EffectKind,
    EffectParams,
    EffectPercent,
    EffectWidth,
    FlameEffect,
    GradientStop,
    RainbowEffect,
    RainEffect,
    RainItems,
    ScannerEffect,
    SequenceEffect,
    SoundEffect,
    SoundEffectSpeed,
    SoundFlashEffect,
    SoundShiftChannel,
    SoundShiftEffect,
    SoundSliderChannel,
    SoundSliderEffect,
    SourceControl,
    StaticEffect,
    SwipingRainbowEffect,
    WaveEffect,
    decode_effect,
)
from highflow.protocol.settings.lighting import Brightness, Controller, DataSource, LightingSettings
from highflow.protocol.settings.model import Settings
from highflow.protocol.settings.sensor import (
    Conductivity,
    ConductivityOffset,
    ConnectorType,
    Flow,
    FlowCorrection,
    Medium,
    PowerDamping,
    PowerFlags,
    SensorSettings,
    TempOffset,
)
from highflow.protocol.settings.system import AquaBusAddress, CurrentDraw, StandbyFlags, SystemSettings

__all__ = [
    "AlarmFlags",
    "AlarmSettings",
    "AmbientEffect",
    "AquaBusAddress",
    "BarGraphEffect",
    "BlinkEffect",
    "BreathingEffect",
    "Brightness",
    "Chart",
    "ChartInterval",
    "ChartSource",
    "Color",
    "ColorChangeEffect",
    "ColorGradientEffect",
    "ColorSequenceEffect",
    "ColorShiftEffect",
    "ColorSwitchEffect",
    "ColorThreshold",
    "Conductivity",
    "ConductivityOffset",
    "ConnectorType",
    "Controller",
    "CurrentDraw",
    "DataSource",
    "DisplayBrightness",
    "DisplayFlags",
    "DisplaySettings",
    "Effect",
    "EffectDelay",
    "EffectKind",
    "EffectParams",
    "EffectPercent",
    "EffectWidth",
    "FlameEffect",
    "Flow",
    "FlowCorrection",
    "FlowUnit",
    "GradientStop",
    "LightingSettings",
    "Medium",
    "NextPageInterval",
    "OutputSignal",
    "PageFlags",
    "PowerDamping",
    "PowerFlags",
    "RainbowEffect",
    "RainEffect",
    "RainItems",
    "ScannerEffect",
    "SensorSettings",
    "SequenceEffect",
    "Settings",
    "SoundEffect",
    "SoundEffectSpeed",
    "SoundFlashEffect",
    "SoundShiftChannel",
    "SoundShiftEffect",
    "SoundSliderChannel",
    "SoundSliderEffect",
    "SourceControl",
    "StandbyFlags",
    "StartupDelay",
    "StaticEffect",
    "SwipingRainbowEffect",
    "SystemSettings",
    "TempOffset",
    "Temperature",
    "TemperatureUnit",
    "WaterQuality",
    "WaveEffect",
    "decode_effect",
]
