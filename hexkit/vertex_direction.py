"""The six diagonal (vertex) directions of a hexagon."""

from __future__ import annotations

import enum
import math
from typing import Iterator, Tuple

from .angles import (
    DIRECTION_ANGLE_DEGREES,
    DIRECTION_ANGLE_OFFSET_DEGREES,
    DIRECTION_ANGLE_OFFSET_RAD,
    DIRECTION_ANGLE_RAD,
    HexOrientation,
)
from .edge_direction import EdgeDirection

__all__ = ["VertexDirection", "DIAGONAL_COORDS"]

#: Axial offsets of the six diagonal neighbours, indexed by vertex direction.
DIAGONAL_COORDS: Tuple[Tuple[int, int], ...] = (
    (2, -1),
    (1, 1),
    (-1, 2),
    (-2, 1),
    (-1, -1),
    (1, -2),
)


class VertexDirection(enum.Enum):
    """One of the six diagonal/vertex directions in hexagonal space.

    Members are stored as an index from 0 to 5 in clockwise order::

                  e4
              v4_____ v5
            e3 /     \\ e5
              /       \\
          v3 (         ) v0
              \\       /
            e2 \\_____/ e0
             v2   e1  v1

    On pointy orientation the hexagon is shifted by 30 degrees clockwise.
    Directions rotate clockwise with ``>>`` and counter clockwise with
    ``<<``, negate with ``-`` and multiply by an int into an axial vector.
    """

    X = 0
    NEG_Z = 1
    Y = 2
    NEG_X = 3
    Z = 4
    NEG_Y = 5

    X_NEG_Y_NEG_Z = 0
    FLAT_RIGHT = 0
    FLAT_EAST = 0
    POINTY_TOP_RIGHT = 0
    POINTY_NORTH_EAST = 0

    X_Y = 1
    FLAT_BOTTOM_RIGHT = 1
    FLAT_SOUTH_EAST = 1
    POINTY_BOTTOM_RIGHT = 1
    POINTY_SOUTH_EAST = 1

    NEG_X_Y_NEG_Z = 2
    FLAT_BOTTOM_LEFT = 2
    FLAT_SOUTH_WEST = 2
    POINTY_BOTTOM = 2
    POINTY_SOUTH = 2

    NEG_X_Y_Z = 3
    FLAT_LEFT = 3
    FLAT_WEST = 3
    POINTY_BOTTOM_LEFT = 3
    POINTY_SOUTH_WEST = 3

    NEG_X_NEG_Y = 4
    FLAT_TOP_LEFT = 4
    FLAT_NORTH_WEST = 4
    POINTY_TOP_LEFT = 4
    POINTY_NORTH_WEST = 4

    X_NEG_Y_Z = 5
    FLAT_TOP_RIGHT = 5
    FLAT_NORTH_EAST = 5
    POINTY_TOP = 5
    POINTY_NORTH = 5

    @staticmethod
    def iter() -> Iterator["VertexDirection"]:
        """Iterate through all six directions in clockwise order."""
        return iter(VertexDirection)

    @property
    def index(self) -> int:
        """The inner index of the direction, from 0 to 5."""
        return self.value

    def into_hex(self) -> Tuple[int, int]:
        """The direction as an axial ``(x, y)`` vector."""
        return DIAGONAL_COORDS[self.value]

    def __neg__(self) -> "VertexDirection":
        return VertexDirection((self.value + 3) % 6)

    def clockwise(self) -> "VertexDirection":
        """The next direction in clockwise order."""
        return VertexDirection((self.value + 1) % 6)

    def counter_clockwise(self) -> "VertexDirection":
        """The next direction in counter clockwise order."""
        return VertexDirection((self.value + 5) % 6)

    def rotate_ccw(self, offset: int) -> "VertexDirection":
        """Rotate counter clockwise by ``offset`` steps."""
        return VertexDirection((self.value - offset) % 6)

    def rotate_cw(self, offset: int) -> "VertexDirection":
        """Rotate clockwise by ``offset`` steps."""
        return VertexDirection((self.value + offset) % 6)

    def __rshift__(self, offset: int) -> "VertexDirection":
        return self.rotate_cw(offset)

    def __lshift__(self, offset: int) -> "VertexDirection":
        return self.rotate_ccw(offset)

    def __mul__(self, factor: int) -> Tuple[int, int]:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        x, y = self.into_hex()
        return (x * factor, y * factor)

    def __rmul__(self, factor: int) -> Tuple[int, int]:
        return self.__mul__(factor)

    def _steps_between(self, rhs: "VertexDirection") -> int:
        return (self.value - rhs.value) % 6

    @staticmethod
    def angle_between(a: "VertexDirection", b: "VertexDirection") -> float:
        """The angle between ``a`` and ``b`` in radians."""
        return a.angle_to(b)

    @staticmethod
    def angle_degrees_between(a: "VertexDirection", b: "VertexDirection") -> float:
        """The angle between ``a`` and ``b`` in degrees."""
        return a.angle_degrees_to(b)

    def angle_to(self, rhs: "VertexDirection") -> float:
        """The angle between ``self`` and ``rhs`` in radians."""
        return self._steps_between(rhs) * DIRECTION_ANGLE_RAD

    def angle_degrees_to(self, rhs: "VertexDirection") -> float:
        """The angle between ``self`` and ``rhs`` in degrees."""
        return self._steps_between(rhs) * DIRECTION_ANGLE_DEGREES

    def angle_flat(self) -> float:
        """The angle in radians of the direction for flat hexagons."""
        return self.angle(HexOrientation.FLAT)

    def angle_pointy(self) -> float:
        """The angle in radians of the direction for pointy hexagons."""
        return self.angle(HexOrientation.POINTY)

    def angle(self, orientation: HexOrientation) -> float:
        """The angle in radians of the direction in ``orientation``."""
        base = self.angle_to(VertexDirection.X)
        if orientation is HexOrientation.POINTY:
            return (base - DIRECTION_ANGLE_OFFSET_RAD) % math.tau
        if orientation is HexOrientation.FLAT:
            return base
        raise ValueError(f"unknown orientation: {orientation!r}")

    def unit_vector(self, orientation: HexOrientation) -> Tuple[float, float]:
        """The unit ``(x, y)`` vector of the direction in ``orientation``."""
        angle = self.angle(orientation)
        return (math.cos(angle), math.sin(angle))

    def angle_flat_degrees(self) -> float:
        """The angle in degrees of the direction for flat hexagons."""
        return self.angle_degrees(HexOrientation.FLAT)

    def angle_pointy_degrees(self) -> float:
        """The angle in degrees of the direction for pointy hexagons."""
        return self.angle_degrees(HexOrientation.POINTY)

    def angle_degrees(self, orientation: HexOrientation) -> float:
        """The angle in degrees of the direction in ``orientation``."""
        base = self.angle_degrees_to(VertexDirection.X)
        if orientation is HexOrientation.POINTY:
            return (base - DIRECTION_ANGLE_OFFSET_DEGREES) % 360.0
        if orientation is HexOrientation.FLAT:
            return base
        raise ValueError(f"unknown orientation: {orientation!r}")

    @staticmethod
    def from_flat_angle_degrees(angle: float) -> "VertexDirection":
        """The direction pointing at ``angle`` degrees for flat hexagons."""
        return VertexDirection.from_pointy_angle_degrees(
            angle - DIRECTION_ANGLE_OFFSET_DEGREES
        )

    @staticmethod
    def from_pointy_angle_degrees(angle: float) -> "VertexDirection":
        """The direction pointing at ``angle`` degrees for pointy hexagons."""
        angle = angle % 360.0
        sector = int(angle / DIRECTION_ANGLE_DEGREES)
        return VertexDirection((sector + 1) % 6)

    @staticmethod
    def from_flat_angle(angle: float) -> "VertexDirection":
        """The direction pointing at ``angle`` radians for flat hexagons."""
        return VertexDirection.from_pointy_angle(angle - DIRECTION_ANGLE_OFFSET_RAD)

    @staticmethod
    def from_pointy_angle(angle: float) -> "VertexDirection":
        """The direction pointing at ``angle`` radians for pointy hexagons."""
        angle = angle % math.tau
        sector = int(angle / DIRECTION_ANGLE_RAD)
        return VertexDirection((sector + 1) % 6)

    @staticmethod
    def from_angle_degrees(
        angle: float, orientation: HexOrientation
    ) -> "VertexDirection":
        """The direction pointing at ``angle`` degrees in ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return VertexDirection.from_pointy_angle_degrees(angle)
        if orientation is HexOrientation.FLAT:
            return VertexDirection.from_flat_angle_degrees(angle)
        raise ValueError(f"unknown orientation: {orientation!r}")

    @staticmethod
    def from_angle(angle: float, orientation: HexOrientation) -> "VertexDirection":
        """The direction pointing at ``angle`` radians in ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return VertexDirection.from_pointy_angle(angle)
        if orientation is HexOrientation.FLAT:
            return VertexDirection.from_flat_angle(angle)
        raise ValueError(f"unknown orientation: {orientation!r}")

    def direction_ccw(self) -> EdgeDirection:
        """The counter clockwise edge direction next to ``self``."""
        return self.edge_ccw()

    def edge_ccw(self) -> EdgeDirection:
        """The counter clockwise edge direction next to ``self``."""
        return EdgeDirection(self.counter_clockwise().value)

    def direction_cw(self) -> EdgeDirection:
        """The clockwise edge direction next to ``self``."""
        return self.edge_cw()

    def edge_cw(self) -> EdgeDirection:
        """The clockwise edge direction next to ``self``."""
        return EdgeDirection(self.value)

    def edge_directions(self) -> Tuple[EdgeDirection, EdgeDirection]:
        """The two adjacent edge directions, in clockwise order."""
        return (self.edge_ccw(), self.edge_cw())