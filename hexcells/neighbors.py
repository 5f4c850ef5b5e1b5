from __future__ import annotations

from typing import Iterable

from .conversions import Offset, axial_to_offset, offset_to_axial
from .coords import Hex
from .direction import DiagonalDirection, Direction


def all_neighbors(h: Hex) -> Iterable[Hex]:
    """The six adjacent hexes, in :class:`Direction` order."""
    for d in Direction:
        yield h.neighbor(d)


def all_diagonals(h: Hex) -> Iterable[Hex]:
    for d in DiagonalDirection:
        yield h.diagonal_neighbor(d)


def neighbor_direction(a: Hex, b: Hex) -> Direction | None:
    """Return the direction leading from ``a`` to ``b``, or ``None`` if not adjacent."""
    delta = b - a
    for d in Direction:
        if d.offset == delta:
            return d
    return None


def neighbors_offset(o: Offset) -> Iterable[Offset]:
    # Row/column parity is handled by the conversion, never by per-parity tables.
    for n in all_neighbors(offset_to_axial(o)):
        yield axial_to_offset(n, o.mode)


def neighbors_axial_bounded(h: Hex, width: int, height: int) -> Iterable[Hex]:
    for n in all_neighbors(h):
        if 0 <= n.x < width and 0 <= n.y < height:
            yield n


def neighbors_offset_bounded(o: Offset, width: int, height: int) -> Iterable[Offset]:
    for n in neighbors_offset(o):
        if 0 <= n.col < width and 0 <= n.row < height:
            yield n


__all__ = [
    "all_diagonals",
    "all_neighbors",
    "neighbor_direction",
    "neighbors_axial_bounded",
    "neighbors_offset",
    "neighbors_offset_bounded",
]
