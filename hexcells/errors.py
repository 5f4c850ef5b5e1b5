"""Exceptions raised by the hex coordinate library."""

from __future__ import annotations


class HexError(Exception):
    """Base class for every error raised by :mod:`hexcells`."""


class HexDivisionError(HexError, ZeroDivisionError):
    """Raised when dividing a hex by zero or by the zero hex."""


class EmptyHexSequenceError(HexError, ValueError):
    """Raised when an aggregate is requested over no coordinates."""


class InvalidCubeError(HexError, ValueError):
    """Raised when cube components do not sum to zero."""


class InvalidDoubledError(HexError, ValueError):
    """Raised when doubled coordinates do not address a hex centre."""


class CoordinateRangeError(HexError, OverflowError):
    """Raised when a coordinate does not fit a fixed-width integer vector."""


__all__ = [
    "CoordinateRangeError",
    "EmptyHexSequenceError",
    "HexDivisionError",
    "HexError",
    "InvalidCubeError",
    "InvalidDoubledError",
]
