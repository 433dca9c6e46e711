"""The six neighbour (edge) directions of a hexagon."""

from __future__ import annotations

import enum
import math
from typing import TYPE_CHECKING, Iterator, Tuple

from .angles import (
    DIRECTION_ANGLE_DEGREES,
    DIRECTION_ANGLE_OFFSET_DEGREES,
    DIRECTION_ANGLE_OFFSET_RAD,
    DIRECTION_ANGLE_RAD,
    HexOrientation,
)

if TYPE_CHECKING:
    from .vertex_direction import VertexDirection

__all__ = ["EdgeDirection", "NEIGHBORS_COORDS"]

#: Axial offsets of the six neighbours, indexed by edge direction.
NEIGHBORS_COORDS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (0, -1),
    (1, -1),
)


class EdgeDirection(enum.Enum):
    """One of the six neighbour/edge directions in hexagonal space.

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
    Y = 1
    NEG_X_Y = 2
    NEG_X = 3
    NEG_Y = 4
    X_NEG_Y = 5

    FLAT_BOTTOM_RIGHT = 0
    FLAT_SOUTH_EAST = 0
    POINTY_RIGHT = 0
    POINTY_EAST = 0

    FLAT_BOTTOM = 1
    FLAT_SOUTH = 1
    POINTY_BOTTOM_RIGHT = 1
    POINTY_SOUTH_EAST = 1

    FLAT_BOTTOM_LEFT = 2
    FLAT_SOUTH_WEST = 2
    POINTY_BOTTOM_LEFT = 2
    POINTY_SOUTH_WEST = 2

    FLAT_TOP_LEFT = 3
    FLAT_NORTH_WEST = 3
    POINTY_LEFT = 3
    POINTY_WEST = 3

    FLAT_TOP = 4
    FLAT_NORTH = 4
    POINTY_TOP_LEFT = 4
    POINTY_NORTH_WEST = 4

    FLAT_TOP_RIGHT = 5
    FLAT_NORTH_EAST = 5
    POINTY_TOP_RIGHT = 5
    POINTY_NORTH_EAST = 5

    @staticmethod
    def iter() -> Iterator["EdgeDirection"]:
        """Iterate through all six directions in clockwise order."""
        return iter(EdgeDirection)

    @property
    def index(self) -> int:
        """The inner index of the direction, from 0 to 5."""
        return self.value

    def into_hex(self) -> Tuple[int, int]:
        """The direction as a unit axial ``(x, y)`` vector."""
        return NEIGHBORS_COORDS[self.value]

    def __neg__(self) -> "EdgeDirection":
        return EdgeDirection((self.value + 3) % 6)

    def clockwise(self) -> "EdgeDirection":
        """The next direction in clockwise order."""
        return EdgeDirection((self.value + 1) % 6)

    def counter_clockwise(self) -> "EdgeDirection":
        """The next direction in counter clockwise order."""
        return EdgeDirection((self.value + 5) % 6)

    def rotate_ccw(self, offset: int) -> "EdgeDirection":
        """Rotate counter clockwise by ``offset`` steps."""
        return EdgeDirection((self.value - offset) % 6)

    def rotate_cw(self, offset: int) -> "EdgeDirection":
        """Rotate clockwise by ``offset`` steps."""
        return EdgeDirection((self.value + offset) % 6)

    def __rshift__(self, offset: int) -> "EdgeDirection":
        return self.rotate_cw(offset)

    def __lshift__(self, offset: int) -> "EdgeDirection":
        return self.rotate_ccw(offset)

    def __mul__(self, factor: int) -> Tuple[int, int]:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        x, y = self.into_hex()
        return (x * factor, y * factor)

    def __rmul__(self, factor: int) -> Tuple[int, int]:
        return self.__mul__(factor)

    def _steps_between(self, rhs: "EdgeDirection") -> int:
        return (self.value - rhs.value) % 6

    @staticmethod
    def angle_between(a: "EdgeDirection", b: "EdgeDirection") -> float:
        """The angle between ``a`` and ``b`` in radians."""
        return a.angle_to(b)

    @staticmethod
    def angle_degrees_between(a: "EdgeDirection", b: "EdgeDirection") -> float:
        """The angle between ``a`` and ``b`` in degrees."""
        return a.angle_degrees_to(b)

    def angle_to(self, rhs: "EdgeDirection") -> float:
        """The angle between ``self`` and ``rhs`` in radians."""
        return self._steps_between(rhs) * DIRECTION_ANGLE_RAD

    def angle_degrees_to(self, rhs: "EdgeDirection") -> float:
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
        base = self.angle_to(EdgeDirection.X)
        if orientation is HexOrientation.POINTY:
            return base
        if orientation is HexOrientation.FLAT:
            return base + DIRECTION_ANGLE_OFFSET_RAD
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
        base = self.angle_degrees_to(EdgeDirection.X)
        if orientation is HexOrientation.POINTY:
            return base
        if orientation is HexOrientation.FLAT:
            return base + DIRECTION_ANGLE_OFFSET_DEGREES
        raise ValueError(f"unknown orientation: {orientation!r}")

    @staticmethod
    def from_pointy_angle_degrees(angle: float) -> "EdgeDirection":
        """The direction pointing at ``angle`` degrees for pointy hexagons."""
        return EdgeDirection.from_flat_angle_degrees(
            angle + DIRECTION_ANGLE_OFFSET_DEGREES
        )

    @staticmethod
    def from_flat_angle_degrees(angle: float) -> "EdgeDirection":
        """The direction pointing at ``angle`` degrees for flat hexagons."""
        angle = angle % 360.0
        sector = int(angle / DIRECTION_ANGLE_DEGREES)
        return EdgeDirection(sector % 6)

    @staticmethod
    def from_pointy_angle(angle: float) -> "EdgeDirection":
        """The direction pointing at ``angle`` radians for pointy hexagons."""
        return EdgeDirection.from_flat_angle(angle + DIRECTION_ANGLE_OFFSET_RAD)

    @staticmethod
    def from_flat_angle(angle: float) -> "EdgeDirection":
        """The direction pointing at ``angle`` radians for flat hexagons."""
        angle = angle % math.tau
        sector = int(angle / DIRECTION_ANGLE_RAD)
        return EdgeDirection(sector % 6)

    @staticmethod
    def from_angle_degrees(
        angle: float, orientation: HexOrientation
    ) -> "EdgeDirection":
        """The direction pointing at ``angle`` degrees in ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return EdgeDirection.from_pointy_angle_degrees(angle)
        if orientation is HexOrientation.FLAT:
            return EdgeDirection.from_flat_angle_degrees(angle)
        raise ValueError(f"unknown orientation: {orientation!r}")

    @staticmethod
    def from_angle(angle: float, orientation: HexOrientation) -> "EdgeDirection":
        """The direction pointing at ``angle`` radians in ``orientation``."""
        if orientation is HexOrientation.POINTY:
            return EdgeDirection.from_pointy_angle(angle)
        if orientation is HexOrientation.FLAT:
            return EdgeDirection.from_flat_angle(angle)
        raise ValueError(f"unknown orientation: {orientation!r}")

    def diagonal_ccw(self) -> "VertexDirection":
        """The counter clockwise vertex direction next to ``self``."""
        return self.vertex_ccw()

    def vertex_ccw(self) -> "VertexDirection":
        """The counter clockwise vertex direction next to ``self``."""
        from .vertex_direction import VertexDirection

        return VertexDirection(self.value)

    def diagonal_cw(self) -> "VertexDirection":
        """The clockwise vertex direction next to ``self``."""
        return self.vertex_cw()

    def vertex_cw(self) -> "VertexDirection":
        """The clockwise vertex direction next to ``self``."""
        from .vertex_direction import VertexDirection

        return VertexDirection(self.clockwise().value)

    def vertex_directions(self) -> Tuple["VertexDirection", "VertexDirection"]:
        """The two adjacent vertex directions, in clockwise order."""
        return (self.vertex_ccw(), self.vertex_cw())