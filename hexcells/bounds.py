"""Hexagonal map bounds with wrap-around."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .coords import Hex
from .shapes import spiral

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HexBounds:
    """All hexes within ``radius`` of ``center``."""

    center: Hex
    radius: int

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")

    @property
    def hex_count(self) -> int:
        return 3 * self.radius * (self.radius + 1) + 1

    @property
    def mirrors(self) -> tuple[Hex, ...]:
        """Offsets from ``center`` to the centers of the six neighboring copies of the map."""
        first = Hex(2 * self.radius + 1, -self.radius)
        return tuple(first.rotate_left(i) for i in range(6))

    def is_in_bounds(self, h: Hex) -> bool:
        return self.center.distance_to(h) <= self.radius

    def all_coords(self) -> list[Hex]:
        return spiral(self.center, self.radius)

    def wrap(self, h: Hex) -> Hex:
        """Map ``h`` into the bounds, treating the map as tiling the plane."""

        relative = h - self.center
        if relative.length() <= self.radius:
            return h

        # Copies of the map sit on the lattice spanned by two adjacent mirrors,
        # whose determinant is -hex_count. Solve for lattice coordinates and
        # search the copies around them for the one containing ``relative``.
        m0, m1 = self.mirrors[0], self.mirrors[1]
        det = -self.hex_count
        a = (relative.x * m1.y - relative.y * m1.x) // det
        b = (m0.x * relative.y - m0.y * relative.x) // det
        candidates = (
            relative - m0 * i - m1 * j
            for i in range(a - 1, a + 3)
            for j in range(b - 1, b + 3)
        )
        wrapped = min(candidates, key=Hex.length) + self.center
        logger.debug("wrapped %s into %s", h, wrapped)
        return wrapped


__all__ = ["HexBounds"]
