"""Hexagonal grid coordinates and the algorithms built on them."""

from .aggregate import average, center
from .bounds import HexBounds
from .config import GridSettings
from .conversions import (
    Doubled,
    DoubledMode,
    Offset,
    OffsetMode,
    axial_to_cube,
    axial_to_doubled,
    axial_to_offset,
    cube_to_axial,
    doubled_to_axial,
    offset_to_axial,
)
from .coords import Cube, FractionalHex, Hex, cube_round, hex_round
from .direction import DiagonalDirection, Direction
from .errors import (
    CoordinateRangeError,
    EmptyHexSequenceError,
    HexDivisionError,
    HexError,
    InvalidCubeError,
    InvalidDoubledError,
)
from .fov import field_of_view
from .layout import HexLayout
from .neighbors import (
    all_diagonals,
    all_neighbors,
    neighbor_direction,
    neighbors_axial_bounded,
    neighbors_offset,
    neighbors_offset_bounded,
)
from .orientation import HexOrientation
from .shapes import RingCache, cached_custom_rings, cached_rings, line, ring, spiral

__version__ = "0.1.0"

__all__ = [
    "CoordinateRangeError",
    "Cube",
    "DiagonalDirection",
    "Direction",
    "Doubled",
    "DoubledMode",
    "EmptyHexSequenceError",
    "FractionalHex",
    "GridSettings",
    "Hex",
    "HexBounds",
    "HexDivisionError",
    "HexError",
    "HexLayout",
    "HexOrientation",
    "InvalidCubeError",
    "InvalidDoubledError",
    "Offset",
    "OffsetMode",
    "RingCache",
    "all_diagonals",
    "all_neighbors",
    "average",
    "axial_to_cube",
    "axial_to_doubled",
    "axial_to_offset",
    "cached_custom_rings",
    "cached_rings",
    "center",
    "cube_round",
    "cube_to_axial",
    "doubled_to_axial",
    "field_of_view",
    "hex_round",
    "line",
    "neighbor_direction",
    "neighbors_axial_bounded",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "offset_to_axial",
    "ring",
    "spiral",
]
