"""
HSV colors as stored by the device.

On the wire a color takes four bytes: the hue section (0-5, 60° each), the hue
offset within that section (0-255 spread over 60°), saturation and value
(both 0-255).
"""
from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import Any

from highflow.core.cursor import ByteCursor
from highflow.core.decodable import Decodable

HUE_SECTION_DEGREES = 60.0


@dataclass(frozen=True)
class Color(Decodable):
    """
    A color in HSV space.

    Attributes:
        h: Hue in degrees, ``[0.0, 360.0)``.
        s: Saturation, ``[0.0, 1.0]``.
        v: Value (brightness), ``[0.0, 1.0]``.

    Equality compares the three components exactly.
    """
    h: float
    s: float
    v: float

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "Color":
        return cls(float(h), float(s), float(v))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from 8-bit RGB channels."""
        for channel in (r, g, b):
            if channel < 0 or channel > 255:
                raise ValueError("RGB channels must be between 0 and 255")
        h, s, v = colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
        return cls(h * 360.0, s, v)

    @classmethod
    def from_rgb_hex(cls, value: int) -> "Color":
        """Create a color from a packed ``0xRRGGBB`` value."""
        if value < 0 or value > 0xFFFFFF:
            raise ValueError("hex color must be between 0x000000 and 0xFFFFFF")
        return cls.from_rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def decode(cls, cursor: ByteCursor) -> "Color":
        section, offset, s, v = cursor.read_exact(4)
        return cursor.guard(
            lambda: cls(
                HUE_SECTION_DEGREES * section + HUE_SECTION_DEGREES * offset / 255.0,
                s / 255.0,
                v / 255.0,
            )
        )

    def to_rgb(self) -> tuple[int, int, int]:
        r, g, b = colorsys.hsv_to_rgb((self.h % 360.0) / 360.0, self.s, self.v)
        return round(r * 255), round(g * 255), round(b * 255)

    def as_dict(self) -> dict[str, Any]:
        return {"h": self.h, "s": self.s, "v": self.v}
