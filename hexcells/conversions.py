from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .coords import Cube, Hex
from .errors import InvalidDoubledError


class OffsetMode(Enum):
    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # x-like
    row: int  # y-like
    mode: OffsetMode


class DoubledMode(Enum):
    DOUBLE_WIDTH = "double_width"
    DOUBLE_HEIGHT = "double_height"


@dataclass(frozen=True, slots=True)
class Doubled:
    col: int
    row: int
    mode: DoubledMode

    def __post_init__(self) -> None:
        if (self.col + self.row) & 1:
            raise InvalidDoubledError("For doubled coords, col + row must be even")


def axial_to_cube(h: Hex) -> Cube:
    return Cube(h.x, h.y, h.z)


def cube_to_axial(c: Cube) -> Hex:
    return Hex(c.x, c.y)


def axial_to_offset(h: Hex, mode: OffsetMode) -> Offset:
    x, y = h.x, h.y
    if mode == OffsetMode.EVEN_R:
        col = x + (y + (y & 1)) // 2
        row = y
    elif mode == OffsetMode.ODD_R:
        col = x + (y - (y & 1)) // 2
        row = y
    elif mode == OffsetMode.EVEN_Q:
        col = x
        row = y + (x + (x & 1)) // 2
    elif mode == OffsetMode.ODD_Q:
        col = x
        row = y + (x - (x & 1)) // 2
    else:
        raise ValueError("Unknown offset mode")
    return Offset(col, row, mode)


def offset_to_axial(o: Offset) -> Hex:
    col, row, mode = o.col, o.row, o.mode
    if mode == OffsetMode.EVEN_R:
        x = col - (row + (row & 1)) // 2
        y = row
    elif mode == OffsetMode.ODD_R:
        x = col - (row - (row & 1)) // 2
        y = row
    elif mode == OffsetMode.EVEN_Q:
        x = col
        y = row - (col + (col & 1)) // 2
    elif mode == OffsetMode.ODD_Q:
        x = col
        y = row - (col - (col & 1)) // 2
    else:
        raise ValueError("Unknown offset mode")
    return Hex(x, y)


def axial_to_doubled(h: Hex, mode: DoubledMode) -> Doubled:
    if mode == DoubledMode.DOUBLE_WIDTH:
        return Doubled(2 * h.x + h.y, h.y, mode)
    if mode == DoubledMode.DOUBLE_HEIGHT:
        return Doubled(h.x, 2 * h.y + h.x, mode)
    raise ValueError("Unknown doubled mode")


def doubled_to_axial(d: Doubled) -> Hex:
    if d.mode == DoubledMode.DOUBLE_WIDTH:
        return Hex((d.col - d.row) // 2, d.row)
    if d.mode == DoubledMode.DOUBLE_HEIGHT:
        return Hex(d.col, (d.row - d.col) // 2)
    raise ValueError("Unknown doubled mode")


__all__ = [
    "Doubled",
    "DoubledMode",
    "Offset",
    "OffsetMode",
    "axial_to_cube",
    "axial_to_doubled",
    "axial_to_offset",
    "cube_to_axial",
    "doubled_to_axial",
    "offset_to_axial",
]
