from __future__ import annotations

import logging
from typing import Callable

from .coords import Hex
from .shapes import line, spiral

logger = logging.getLogger(__name__)


def field_of_view(center: Hex, radius: int, blocking: Callable[[Hex], bool]) -> set[Hex]:
    """Hexes visible from ``center`` within ``radius``.

    A line is cast to every hex of the disk; each line contributes the hexes it
    crosses up to, but excluding, the first one ``blocking`` rejects.
    """

    visible: set[Hex] = set()
    for target in spiral(center, radius):
        if target in visible:
            continue
        for h in line(center, target):
            if blocking(h):
                break
            visible.add(h)
    logger.debug("field of view from %s (radius %d): %d hexes", center, radius, len(visible))
    return visible


__all__ = ["field_of_view"]
