"""The six edge directions and six diagonal directions of a hex.

Enumerant values increase counter-clockwise in a y-up world frame, starting at
``TOP_RIGHT``. Rotating "left" steps the value up, rotating "right" steps it
down, always modulo 6::

               ___
              /   \\
          +--+  1  +--+
         / 2  \\___/  0 \\
         \\    /   \\    /
          +--+     +--+
         /    \\___/    \\
         \\ 3  /   \\  5 /
          +--+  4  +--+
              \\___/
"""

from __future__ import annotations

import math
from enum import IntEnum

from .coords import DIAGONAL_COORDS, NEIGHBOR_COORDS, Hex
from .orientation import HexOrientation

# Angle between the flat and pointy orientations.
DIRECTION_ANGLE_OFFSET = math.pi / 6.0
DIRECTION_ANGLE_OFFSET_DEGREES = 30.0
# Angle between two adjacent directions.
DIRECTION_ANGLE_RAD = math.pi / 3.0
DIRECTION_ANGLE_DEGREES = 60.0

_TAU = 2.0 * math.pi


class Direction(IntEnum):
    """Edge directions, indexed like :data:`hexcells.coords.NEIGHBOR_COORDS`."""

    TOP_RIGHT = 0
    TOP = 1
    TOP_LEFT = 2
    BOTTOM_LEFT = 3
    BOTTOM = 4
    BOTTOM_RIGHT = 5

    @property
    def offset(self) -> Hex:
        """Unit hex offset pointing in this direction."""
        return Hex(*NEIGHBOR_COORDS[self])

    @property
    def opposite(self) -> Direction:
        return Direction((self + 3) % 6)

    def rotate_left(self, amount: int = 1) -> Direction:
        return Direction((self + amount) % 6)

    def rotate_right(self, amount: int = 1) -> Direction:
        return Direction((self - amount) % 6)

    def left(self) -> Direction:
        return self.rotate_left(1)

    def right(self) -> Direction:
        return self.rotate_right(1)

    def diagonal_left(self) -> DiagonalDirection:
        """Diagonal direction immediately counter-clockwise of this one."""
        return DiagonalDirection((self + 1) % 6)

    def diagonal_right(self) -> DiagonalDirection:
        """Diagonal direction immediately clockwise of this one."""
        return DiagonalDirection(int(self))

    def angle_pointy(self) -> float:
        return self * DIRECTION_ANGLE_RAD

    def angle_flat(self) -> float:
        return self.angle_pointy() + DIRECTION_ANGLE_OFFSET

    def angle_pointy_degrees(self) -> float:
        return self * DIRECTION_ANGLE_DEGREES

    def angle_flat_degrees(self) -> float:
        return self.angle_pointy_degrees() + DIRECTION_ANGLE_OFFSET_DEGREES

    def angle(self, orientation: HexOrientation) -> float:
        """Angle in radians of this direction for the given ``orientation``."""
        if orientation is HexOrientation.FLAT:
            return self.angle_flat()
        return self.angle_pointy()

    def angle_degrees(self, orientation: HexOrientation) -> float:
        if orientation is HexOrientation.FLAT:
            return self.angle_flat_degrees()
        return self.angle_pointy_degrees()


class DiagonalDirection(IntEnum):
    """Directions towards the six hexes that share only a corner.

    Each diagonal sits between :meth:`direction_right` and
    :meth:`direction_left`, and its offset is the sum of theirs.
    """

    RIGHT = 0
    TOP_RIGHT = 1
    TOP_LEFT = 2
    LEFT = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5

    @property
    def offset(self) -> Hex:
        return Hex(*DIAGONAL_COORDS[self])

    @property
    def opposite(self) -> DiagonalDirection:
        return DiagonalDirection((self + 3) % 6)

    def rotate_left(self, amount: int = 1) -> DiagonalDirection:
        return DiagonalDirection((self + amount) % 6)

    def rotate_right(self, amount: int = 1) -> DiagonalDirection:
        return DiagonalDirection((self - amount) % 6)

    def left(self) -> DiagonalDirection:
        return self.rotate_left(1)

    def right(self) -> DiagonalDirection:
        return self.rotate_right(1)

    def direction_left(self) -> Direction:
        return Direction(int(self))

    def direction_right(self) -> Direction:
        return Direction((self - 1) % 6)

    def angle_pointy(self) -> float:
        return (self.direction_left().angle_pointy() - DIRECTION_ANGLE_OFFSET) % _TAU

    def angle_flat(self) -> float:
        return self.direction_left().angle_pointy()

    def angle_pointy_degrees(self) -> float:
        return (self.direction_left().angle_pointy_degrees() - DIRECTION_ANGLE_OFFSET_DEGREES) % 360.0

    def angle_flat_degrees(self) -> float:
        return self.direction_left().angle_pointy_degrees()

    def angle(self, orientation: HexOrientation) -> float:
        if orientation is HexOrientation.FLAT:
            return self.angle_flat()
        return self.angle_pointy()

    def angle_degrees(self, orientation: HexOrientation) -> float:
        if orientation is HexOrientation.FLAT:
            return self.angle_flat_degrees()
        return self.angle_pointy_degrees()


__all__ = [
    "DIRECTION_ANGLE_DEGREES",
    "DIRECTION_ANGLE_OFFSET",
    "DIRECTION_ANGLE_OFFSET_DEGREES",
    "DIRECTION_ANGLE_RAD",
    "DiagonalDirection",
    "Direction",
]
