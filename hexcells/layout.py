"""Bridge between hex coordinates and a 2D world/pixel frame."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import FractionalHex, Hex
from .orientation import SQRT_3, HexOrientation


class HexLayout(BaseModel):
    """World-space placement of a hex grid.

    The world frame is y-up. ``hex_size`` is the center-to-corner distance per
    axis, and ``invert_x``/``invert_y`` mirror the corresponding world axis.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: HexOrientation = Field(default=HexOrientation.POINTY)
    origin: tuple[float, float] = Field(default=(0.0, 0.0))
    hex_size: tuple[float, float] = Field(default=(1.0, 1.0))
    invert_x: bool = Field(default=False)
    invert_y: bool = Field(default=False)

    @field_validator("hex_size")
    @classmethod
    def _non_zero_size(cls, value: tuple[float, float]) -> tuple[float, float]:
        if value[0] == 0.0 or value[1] == 0.0:
            raise ValueError("hex_size components must be non-zero")
        return value

    @property
    def axis_scale(self) -> NDArray[np.float64]:
        return np.array(
            [-1.0 if self.invert_x else 1.0, -1.0 if self.invert_y else 1.0],
            dtype=np.float64,
        )

    def hex_to_world_pos(self, h: Hex) -> NDArray[np.float64]:
        """World position of the center of ``h``."""

        m = self.orientation.matrix
        unit = np.array(
            [m.f0 * h.x + m.f1 * h.y, m.f2 * h.x + m.f3 * h.y], dtype=np.float64
        )
        return unit * np.asarray(self.hex_size) * self.axis_scale + np.asarray(self.origin)

    def world_pos_to_fractional(self, pos: ArrayLike) -> FractionalHex:
        m = self.orientation.matrix
        point = (
            (np.asarray(pos, dtype=np.float64) - np.asarray(self.origin))
            * self.axis_scale
            / np.asarray(self.hex_size)
        )
        px, py = float(point[0]), float(point[1])
        return FractionalHex(m.b0 * px + m.b1 * py, m.b2 * px + m.b3 * py)

    def world_pos_to_hex(self, pos: ArrayLike) -> Hex:
        """The hex whose cell contains ``pos``."""
        return self.world_pos_to_fractional(pos).round()

    def hex_corners(self, h: Hex) -> NDArray[np.float64]:
        """The six corners of ``h`` as a ``(6, 2)`` array, counter-clockwise."""

        center = self.hex_to_world_pos(h)
        start = self.orientation.matrix.corner_angle
        angles = start + np.arange(6) * (math.pi / 3.0)
        unit = np.stack([np.cos(angles), np.sin(angles)], axis=1)
        return center + unit * np.asarray(self.hex_size) * self.axis_scale

    @property
    def rect_size(self) -> NDArray[np.float64]:
        """Width and height of the box bounding one hex."""

        if self.orientation is HexOrientation.POINTY:
            factor = np.array([SQRT_3, 2.0])
        else:
            factor = np.array([2.0, SQRT_3])
        return factor * np.abs(np.asarray(self.hex_size))


__all__ = ["HexLayout"]
