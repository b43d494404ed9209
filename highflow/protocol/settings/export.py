"""Conversion of decoded settings into JSON-friendly primitives."""
from __future__ import annotations

import dataclasses
from enum import Enum, IntFlag
from typing import Any

from highflow.core.ranged import RangedValue


def export_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, str, float)):
        return value
    if isinstance(value, RangedValue):
        return value.value
    if isinstance(value, IntFlag):
        return [member.name for member in type(value) if member in value]
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, int):
        return value
    if dataclasses.is_dataclass(value):
        return {f.name: export_value(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (tuple, list)):
        return [export_value(item) for item in value]
    raise TypeError(f"Cannot export value of type {type(value).__name__}")
