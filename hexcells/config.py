"""Validated configuration for a hex grid."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .bounds import HexBounds
from .conversions import Offset, OffsetMode, axial_to_offset, offset_to_axial
from .coords import Hex
from .layout import HexLayout
from .orientation import HexOrientation
from .shapes import RingCache, cached_rings


class GridSettings(BaseModel):
    """Static parameters describing a hexagonal map and how it is drawn."""

    model_config = ConfigDict(extra="forbid")

    orientation: HexOrientation = Field(default=HexOrientation.POINTY)
    offset_mode: OffsetMode = Field(default=OffsetMode.ODD_R)
    radius: int = Field(default=8, ge=0)
    center: tuple[int, int] = Field(default=(0, 0))
    hex_size: tuple[float, float] = Field(default=(1.0, 1.0))
    origin: tuple[float, float] = Field(default=(0.0, 0.0))
    invert_x: bool = Field(default=False)
    invert_y: bool = Field(default=False)

    @field_validator("orientation", "offset_mode", mode="before")
    @classmethod
    def _normalise_enum_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def center_hex(self) -> Hex:
        return Hex(*self.center)

    def layout(self) -> HexLayout:
        """Instantiate the :class:`~hexcells.layout.HexLayout` these settings describe."""

        return HexLayout(
            orientation=self.orientation,
            origin=self.origin,
            hex_size=self.hex_size,
            invert_x=self.invert_x,
            invert_y=self.invert_y,
        )

    def bounds(self) -> HexBounds:
        return HexBounds(center=self.center_hex, radius=self.radius)

    def ring_cache(self) -> RingCache[Hex]:
        """Build the rings around ``center`` up to ``radius`` once."""

        return cached_rings(self.center_hex, self.radius)

    def to_offset(self, h: Hex) -> Offset:
        return axial_to_offset(h, self.offset_mode)

    def from_offset(self, col: int, row: int) -> Hex:
        return offset_to_axial(Offset(col, row, self.offset_mode))


__all__ = ["GridSettings"]
