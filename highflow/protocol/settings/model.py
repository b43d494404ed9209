"""
The settings aggregate.

The payload interleaves the fields of all sub-records in device order, so the
aggregate decoder reads them in that order and assembles the sub-records at
the end. Reserved bytes are skipped but must never be dropped: every later
field depends on them for its position.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from highflow.core.cursor import ByteCursor
from highflow.core.decodable import Decodable, FixedArray
from highflow.protocol.settings.alarm import AlarmSettings
from highflow.protocol.settings.display import DisplaySettings
from highflow.protocol.settings.export import export_value
from highflow.protocol.settings.lighting import LightingSettings
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

FLOW_CORRECTION_POINTS = 10


@dataclass(frozen=True)
class Settings(Decodable):
    """
    Complete configuration of a high flow NEXT device.

    Attributes:
        system: Addressing, stand-by and USB power options.
        sensor: Coolant, calibration and water quality options.
        alarms: Alarm limits and signal output.
        display: Display units, pages and brightness.
        lighting: RGBpx lighting, ``None`` if lighting is disabled.
    """
    system: SystemSettings
    sensor: SensorSettings
    alarms: AlarmSettings
    display: DisplaySettings
    lighting: Optional[LightingSettings]

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "Settings":
        cursor.skip(2)  # version
        display = DisplaySettings.decode(cursor)
        increased_current_draw = CurrentDraw.decode_optional(cursor)
        aqua_bus_address = AquaBusAddress.decode(cursor)
        water_temp_offset = TempOffset.decode(cursor)
        external_temp_offset = TempOffset.decode(cursor)
        medium = Medium.decode(cursor)
        connector_type = ConnectorType.decode(cursor)
        correction_values = FixedArray(FlowCorrection, FLOW_CORRECTION_POINTS).decode(cursor)
        correction_flows = FixedArray(Flow, FLOW_CORRECTION_POINTS).decode(cursor)
        lighting = LightingSettings.decode_optional(cursor)
        standby_flags = StandbyFlags.decode(cursor)
        cursor.skip(2)
        conductivity_offset = ConductivityOffset.decode(cursor)
        water_quality_max = Conductivity.decode(cursor)
        water_quality_min = Conductivity.decode(cursor)
        cursor.skip(1)
        power_flags = PowerFlags.decode(cursor)
        power_damping = PowerDamping.decode(cursor)
        alarms = AlarmSettings.decode(cursor)
        cursor.skip(1)

        def build() -> "Settings":
            system = SystemSettings(
                standby_flags=standby_flags,
                aqua_bus_address=aqua_bus_address,
                increased_current_draw=increased_current_draw,
            )
            sensor = SensorSettings(
                medium=medium,
                connector_type=connector_type,
                flow_correction=tuple(zip(correction_flows, correction_values)),
                water_temp_offset=water_temp_offset,
                external_temp_offset=external_temp_offset,
                conductivity_offset=conductivity_offset,
                water_quality_max=water_quality_max,
                water_quality_min=water_quality_min,
                power_flags=power_flags,
                power_damping=power_damping,
            )
            return cls(
                system=system,
                sensor=sensor,
                alarms=alarms,
                display=display,
                lighting=lighting,
            )

        return cursor.guard(build)

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)
