from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

SQRT_3 = math.sqrt(3.0)


@dataclass(frozen=True)
class OrientationMatrix:
    f0: float; f1: float; f2: float; f3: float  # axial(x, y) -> world
    b0: float; b1: float; b2: float; b3: float  # world -> axial
    corner_angle: float                          # first corner, radians


# World space is y-up. Neighbor offsets land at their direction's angle:
# flat puts TopRight at 30 degrees, pointy puts it at 0.
FLAT_MATRIX = OrientationMatrix(
    f0=3.0 / 2.0, f1=0.0,
    f2=-SQRT_3 / 2.0, f3=-SQRT_3,
    b0=2.0 / 3.0, b1=0.0,
    b2=-1.0 / 3.0, b3=-SQRT_3 / 3.0,
    corner_angle=0.0,
)
POINTY_MATRIX = OrientationMatrix(
    f0=SQRT_3 / 2.0, f1=-SQRT_3 / 2.0,
    f2=-3.0 / 2.0, f3=-3.0 / 2.0,
    b0=SQRT_3 / 3.0, b1=-1.0 / 3.0,
    b2=-SQRT_3 / 3.0, b3=-1.0 / 3.0,
    corner_angle=math.pi / 6.0,
)


class HexOrientation(str, Enum):
    """Hex layout style. Only affects angles and world-space conversions."""

    FLAT = "flat"
    POINTY = "pointy"

    @property
    def matrix(self) -> OrientationMatrix:
        return FLAT_MATRIX if self is HexOrientation.FLAT else POINTY_MATRIX

    @property
    def angle_offset(self) -> float:
        """Phase, in radians, added to pointy direction angles."""
        return math.pi / 6.0 if self is HexOrientation.FLAT else 0.0


__all__ = ["FLAT_MATRIX", "HexOrientation", "OrientationMatrix", "POINTY_MATRIX", "SQRT_3"]
