"""Rings, spirals and lines of hexes.

Every walk here happens in axial space. Callers that work in offset or doubled
coordinates convert the results at the boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from .coords import FractionalHex, Hex
from .direction import Direction

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Keeps lerp samples off cell edges so ties never alternate along a line.
_LINE_NUDGE = FractionalHex(1e-6, 2e-6)

# Ring walks start this way from the center and then follow Direction order.
RING_START_DIRECTION = Direction.BOTTOM


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")


def ring(center: Hex, radius: int) -> list[Hex]:
    """Hexes at exactly ``radius`` steps from ``center``.

    Radius 0 yields ``[center]``; any other radius yields ``6 * radius`` hexes,
    walked from ``center + BOTTOM * radius`` along each direction in turn.
    """

    _check_radius(radius)
    if radius == 0:
        return [center]

    cells: list[Hex] = []
    current = center + RING_START_DIRECTION.offset * radius
    for direction in Direction:
        for _ in range(radius):
            cells.append(current)
            current = current.neighbor(direction)
    return cells


def spiral(center: Hex, radius: int) -> list[Hex]:
    """All hexes within ``radius`` of ``center``, ring by ring outward."""

    _check_radius(radius)
    cells: list[Hex] = []
    for r in range(radius + 1):
        cells.extend(ring(center, r))
    return cells


def line(start: Hex, end: Hex) -> list[Hex]:
    """Connected hexes on the straight line from ``start`` to ``end``, both included."""

    n = start.distance_to(end)
    if n == 0:
        return [start]

    a = FractionalHex(start.x + _LINE_NUDGE.x, start.y + _LINE_NUDGE.y)
    b = FractionalHex(end.x + _LINE_NUDGE.x, end.y + _LINE_NUDGE.y)
    return [a.lerp(b, step / n).round() for step in range(n + 1)]


@dataclass(frozen=True)
class RingCache(Generic[T]):
    """Rings around ``center`` computed once, indexed by radius.

    Instances are immutable; build a new one if the center or radius changes.
    """

    center: Hex
    radius: int
    rings: tuple[tuple[T, ...], ...]

    def ring(self, radius: int) -> tuple[T, ...]:
        if not 0 <= radius <= self.radius:
            raise IndexError(f"radius {radius} outside cached range 0..{self.radius}")
        return self.rings[radius]

    def __getitem__(self, radius: int) -> tuple[T, ...]:
        return self.ring(radius)

    def __len__(self) -> int:
        return len(self.rings)

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        return iter(self.rings)

    def spiral(self) -> list[T]:
        return [cell for cells in self.rings for cell in cells]


def cached_custom_rings(
    center: Hex, radius: int, transform: Callable[[Hex], T]
) -> RingCache[T]:
    """Precompute ``transform(hex)`` for every hex of every ring up to ``radius``."""

    _check_radius(radius)
    rings = tuple(tuple(transform(h) for h in ring(center, r)) for r in range(radius + 1))
    logger.debug(
        "built ring cache around %s: radius=%d cells=%d",
        center,
        radius,
        sum(len(cells) for cells in rings),
    )
    return RingCache(center=center, radius=radius, rings=rings)


def cached_rings(center: Hex, radius: int) -> RingCache[Hex]:
    return cached_custom_rings(center, radius, lambda h: h)


__all__ = [
    "RING_START_DIRECTION",
    "RingCache",
    "cached_custom_rings",
    "cached_rings",
    "line",
    "ring",
    "spiral",
]
