"""Angle constants and hexagon orientation shared by the direction types."""

from __future__ import annotations

import enum
import math

__all__ = [
    "DIRECTION_ANGLE_OFFSET_RAD",
    "DIRECTION_ANGLE_OFFSET_DEGREES",
    "DIRECTION_ANGLE_RAD",
    "DIRECTION_ANGLE_DEGREES",
    "HexOrientation",
]

#: Angle in radians between flat and pointy top orientations (30 degrees).
DIRECTION_ANGLE_OFFSET_RAD: float = math.pi / 6.0
#: Angle in degrees between flat and pointy top orientations (pi / 6 radians).
DIRECTION_ANGLE_OFFSET_DEGREES: float = 30.0
#: Angle in radians between two adjacent directions (60 degrees).
DIRECTION_ANGLE_RAD: float = math.pi / 3.0
#: Angle in degrees between two adjacent directions (pi / 3 radians).
DIRECTION_ANGLE_DEGREES: float = 60.0


class HexOrientation(enum.Enum):
    """Orientation of the hexagons of a grid."""

    #: Hexagons with a pointy top, shifted 30 degrees clockwise from flat.
    POINTY = "pointy"
    #: Hexagons with a flat top.
    FLAT = "flat"