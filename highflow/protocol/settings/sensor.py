from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Tuple

from highflow.core.cursor import ByteCursor
from highflow.core.decodable import I16, U16, decode_enum, decode_flags
from highflow.core.ranged import Bounds, RangedValue
from highflow.protocol.settings.export import export_value


class Flow(RangedValue):
    """Water flow in 1/10 l/sec (or gal/sec)."""

    primitive = U16
    policy = Bounds(0, 3000)


class FlowCorrection(RangedValue):
    """Flow correction in 1/100 %."""

    primitive = I16
    policy = Bounds(-5000, 5000)


class TempOffset(RangedValue):
    """Temperature sensor offset in 1/100 degree."""

    primitive = I16
    policy = Bounds(-1500, 1500)


class PowerDamping(RangedValue):
    """Power damping in mW."""

    primitive = U16
    policy = Bounds(0, 10_000)


class Conductivity(RangedValue):
    """Conductivity in µS/cm."""

    primitive = U16
    policy = Bounds(0, 2000)


class ConductivityOffset(RangedValue):
    """Conductivity sensor offset in 1/10 µS/cm."""

    primitive = I16
    policy = Bounds(-500, 500)


class Medium(IntEnum):
    DP_ULTRA = 0x00
    DISTILLED_WATER = 0x01

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "Medium":
        return decode_enum(cls, cursor, "Medium")


class ConnectorType(IntEnum):
    INNER_DIAMETER_GT_7MM = 0x00
    INNER_DIAMETER_LT_7MM = 0x01

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "ConnectorType":
        return decode_enum(cls, cursor, "ConnectorType")


class PowerFlags(IntFlag):
    AUTOMATIC_POWER_OFFSET_COMPENSATION = 0x01

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "PowerFlags":
        return decode_flags(cls, cursor)


@dataclass(frozen=True)
class SensorSettings:
    """
    Sensor related settings.

    Attributes:
        medium: Coolant in use.
        connector_type: Fitting used to connect the sensor to the loop.
        flow_correction: Ten ``(Flow, FlowCorrection)`` calibration pairs.
        water_temp_offset: Adjustment of the water temperature sensor.
        external_temp_offset: Adjustment of the external temperature sensor.
        conductivity_offset: Adjustment of the conductivity sensor.
        water_quality_max: Conductivity that maps to 100 % water quality.
        water_quality_min: Conductivity that maps to 0 % water quality.
        power_flags: Options of the power calculation.
        power_damping: Damping of the power calculation.
    """
    medium: Medium
    connector_type: ConnectorType
    flow_correction: Tuple[Tuple[Flow, FlowCorrection], ...]
    water_temp_offset: TempOffset
    external_temp_offset: TempOffset
    conductivity_offset: ConductivityOffset
    water_quality_max: Conductivity
    water_quality_min: Conductivity
    power_flags: PowerFlags
    power_damping: PowerDamping

    def as_dict(self) -> dict[str, Any]:
        return export_value(self)
