"""Aggregates over finite collections of hexes."""

from __future__ import annotations

from typing import Iterable

from .coords import Hex, cube_round
from .errors import EmptyHexSequenceError


def average(hexes: Iterable[Hex]) -> Hex:
    """Return the hex nearest to the mean of ``hexes``.

    Cube components are summed exactly as integers, divided by the count and
    resolved with :func:`~hexcells.coords.cube_round`, so the result does not
    depend on iteration order. Raises :class:`EmptyHexSequenceError` when
    ``hexes`` is empty.
    """

    count = 0
    sum_x = 0
    sum_y = 0
    for h in hexes:
        sum_x += h.x
        sum_y += h.y
        count += 1
    if count == 0:
        raise EmptyHexSequenceError("cannot average an empty sequence of hexes")
    sum_z = -sum_x - sum_y
    return cube_round(sum_x / count, sum_y / count, sum_z / count)


def center(hexes: Iterable[Hex]) -> Hex:
    """Centroid of ``hexes``; same contract as :func:`average`."""
    return average(hexes)


__all__ = ["average", "center"]
