"""Axial hex coordinates and their fractional counterpart.

A :class:`Hex` stores the two axial components ``x`` and ``y``. The third cube
component ``z = -x - y`` is derived on access, so ``x + y + z == 0`` holds for
every value the library hands out.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import ClassVar, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .errors import CoordinateRangeError, HexDivisionError, InvalidCubeError

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

# Unit offsets indexed by ``Direction`` value.
NEIGHBOR_COORDS: tuple[tuple[int, int], ...] = (
    (+1, -1),
    (0, -1),
    (-1, 0),
    (-1, +1),
    (0, +1),
    (+1, 0),
)

# Indexed by ``DiagonalDirection`` value.
DIAGONAL_COORDS: tuple[tuple[int, int], ...] = (
    (+2, -1),
    (+1, -2),
    (-1, -1),
    (-2, +1),
    (-1, +2),
    (+1, +1),
)

# Slack allowed on the cube invariant for floating-point vectors.
_FLOAT_CUBE_TOLERANCE = 1e-6


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def cube_round(x: float, y: float, z: float) -> Hex:
    """Resolve fractional cube components to the nearest valid :class:`Hex`.

    Each component is rounded half away from zero. The component whose rounding
    moved it the furthest is then recomputed from the other two, which restores
    ``x + y + z == 0`` with the smallest possible correction. Error ties favour
    keeping ``y`` and ``z`` over ``x``, then ``z`` over ``y``.
    """

    rx, ry, rz = _round_half_away(x), _round_half_away(y), _round_half_away(z)
    dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)
    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    return Hex(rx, ry)


def hex_round(x: float, y: float) -> Hex:
    """Round fractional axial components to a :class:`Hex`."""

    return cube_round(x, y, -x - y)


def _is_integral(value: object) -> bool:
    return hasattr(type(value), "__index__")


@dataclass(frozen=True, slots=True, order=True)
class Hex:
    """Immutable hex coordinate in axial form.

    Equality, hashing and ordering follow the ``(x, y)`` tuple, so values can be
    used as dictionary keys and sorted deterministically.
    """

    x: int
    y: int

    ZERO: ClassVar[Hex]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", operator.index(self.x))
        object.__setattr__(self, "y", operator.index(self.y))

    @property
    def z(self) -> int:
        """The implicit third cube component."""
        return -self.x - self.y

    @classmethod
    def from_cube(cls, x: int, y: int, z: int) -> Hex:
        if x + y + z != 0:
            raise InvalidCubeError(f"cube components must sum to 0, got ({x}, {y}, {z})")
        return cls(x, y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Hex) -> Hex:
        return Hex(self.x + other.x, self.y + other.y)

    def subtract(self, other: Hex) -> Hex:
        return Hex(self.x - other.x, self.y - other.y)

    def negate(self) -> Hex:
        return Hex(-self.x, -self.y)

    def multiply(self, factor: int) -> Hex:
        factor = operator.index(factor)
        return Hex(self.x * factor, self.y * factor)

    def absolute(self) -> Hex:
        """Component-wise absolute value."""
        return Hex(abs(self.x), abs(self.y))

    def divide(self, divisor: int | Hex) -> Hex:
        """Divide by an integer, or by the length of a hex divisor.

        The quotient is the hex cell containing ``(x / k, y / k)``, so its
        length tracks ``self.length() / abs(k)`` rather than the per-component
        integer quotients. Raises :class:`HexDivisionError` on a zero divisor.
        """

        k = self._divisor(divisor)
        return hex_round(self.x / k, self.y / k)

    def remainder(self, divisor: int | Hex) -> Hex:
        """Return ``self - self.divide(divisor) * k`` for the same ``k``.

        Together with :meth:`divide` this satisfies
        ``h == h.divide(k).multiply(k).add(h.remainder(k))`` exactly.
        """

        k = self._divisor(divisor)
        return self.subtract(hex_round(self.x / k, self.y / k).multiply(k))

    @staticmethod
    def _divisor(divisor: int | Hex) -> int:
        if isinstance(divisor, Hex):
            k = divisor.length()
            if k == 0:
                raise HexDivisionError("cannot divide by the zero hex")
            return k
        k = operator.index(divisor)
        if k == 0:
            raise HexDivisionError("hex division by zero")
        return k

    def __add__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Hex:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Hex:
        return self.negate()

    def __abs__(self) -> Hex:
        return self.absolute()

    def __mul__(self, factor: object) -> Hex:
        if isinstance(factor, Hex) or not _is_integral(factor):
            return NotImplemented
        return self.multiply(factor)  # type: ignore[arg-type]

    __rmul__ = __mul__

    def __floordiv__(self, divisor: object) -> Hex:
        if not (isinstance(divisor, Hex) or _is_integral(divisor)):
            return NotImplemented
        return self.divide(divisor)  # type: ignore[arg-type]

    def __mod__(self, divisor: object) -> Hex:
        if not (isinstance(divisor, Hex) or _is_integral(divisor)):
            return NotImplemented
        return self.remainder(divisor)  # type: ignore[arg-type]

    def __divmod__(self, divisor: object) -> tuple[Hex, Hex]:
        if not (isinstance(divisor, Hex) or _is_integral(divisor)):
            return NotImplemented
        return self.divide(divisor), self.remainder(divisor)  # type: ignore[arg-type]

    # --- Distances --------------------------------------------------------------

    def length(self) -> int:
        """Distance from the origin, in steps."""
        return max(abs(self.x), abs(self.y), abs(self.z))

    def distance_to(self, other: Hex) -> int:
        # Python ints never wrap, so the deltas are already widened.
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return max(abs(dx), abs(dy), abs(dz))

    def unsigned_distance_to(self, other: Hex) -> int:
        """Distance magnitude for consumers that store it in an unsigned field.

        Two hexes at opposite ends of the 32-bit range are up to ``2**32 - 1``
        steps apart; the result is exact for any inputs.
        """

        return (
            abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)
        ) // 2

    def unsigned_length(self) -> int:
        return self.unsigned_distance_to(Hex.ZERO)

    # --- Neighbors and rotation -------------------------------------------------

    def neighbor(self, direction: int) -> Hex:
        dx, dy = NEIGHBOR_COORDS[operator.index(direction) % 6]
        return Hex(self.x + dx, self.y + dy)

    def diagonal_neighbor(self, direction: int) -> Hex:
        dx, dy = DIAGONAL_COORDS[operator.index(direction) % 6]
        return Hex(self.x + dx, self.y + dy)

    def rotate_left(self, amount: int = 1) -> Hex:
        """Rotate counter-clockwise about the origin by ``amount`` sixths of a turn."""

        x, y, z = self.x, self.y, self.z
        for _ in range(operator.index(amount) % 6):
            x, y, z = -z, -x, -y
        return Hex(x, y)

    def rotate_right(self, amount: int = 1) -> Hex:
        """Rotate clockwise about the origin by ``amount`` sixths of a turn."""

        x, y, z = self.x, self.y, self.z
        for _ in range(operator.index(amount) % 6):
            x, y, z = -y, -z, -x
        return Hex(x, y)

    def left(self) -> Hex:
        return self.rotate_left(1)

    def right(self) -> Hex:
        return self.rotate_right(1)

    def rotate_left_around(self, center: Hex, amount: int = 1) -> Hex:
        return self.subtract(center).rotate_left(amount).add(center)

    def rotate_right_around(self, center: Hex, amount: int = 1) -> Hex:
        return self.subtract(center).rotate_right(amount).add(center)

    # --- Interpolation ----------------------------------------------------------

    def lerp(self, other: Hex, t: float) -> FractionalHex:
        return FractionalHex(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
        )

    # --- Vectors ----------------------------------------------------------------

    def _check_range(self, *components: int) -> None:
        for value in components:
            if not INT32_MIN <= value <= INT32_MAX:
                raise CoordinateRangeError(f"{self!r} does not fit a 32-bit integer vector")

    def as_ivec2(self) -> NDArray[np.int32]:
        self._check_range(self.x, self.y)
        return np.array([self.x, self.y], dtype=np.int32)

    def as_ivec3(self) -> NDArray[np.int32]:
        self._check_range(self.x, self.y, self.z)
        return np.array([self.x, self.y, self.z], dtype=np.int32)

    def as_vec2(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def as_vec3(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_ivec2(cls, vec: ArrayLike) -> Hex:
        x, y = _components(vec, 2)
        return cls(x, y)

    @classmethod
    def from_ivec3(cls, vec: ArrayLike) -> Hex:
        x, y, z = _components(vec, 3)
        return cls.from_cube(operator.index(x), operator.index(y), operator.index(z))

    @classmethod
    def from_vec2(cls, vec: ArrayLike) -> Hex:
        x, y = (float(value) for value in _components(vec, 2))
        return hex_round(x, y)

    @classmethod
    def from_vec3(cls, vec: ArrayLike) -> Hex:
        x, y, z = (float(value) for value in _components(vec, 3))
        if abs(x + y + z) > _FLOAT_CUBE_TOLERANCE:
            raise InvalidCubeError(f"cube components must sum to 0, got ({x}, {y}, {z})")
        return cube_round(x, y, z)


Hex.ZERO = Hex(0, 0)


def _components(vec: ArrayLike, size: int) -> list:
    values = np.asarray(vec)
    if values.shape != (size,):
        raise ValueError(f"expected a vector of {size} components, got shape {values.shape}")
    return values.tolist()


@dataclass(frozen=True, slots=True)
class FractionalHex:
    """Floating-point hex used while interpolating; resolve it with :meth:`round`."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def z(self) -> float:
        return -self.x - self.y

    @classmethod
    def from_hex(cls, hex: Hex) -> FractionalHex:
        return cls(hex.x, hex.y)

    def lerp(self, other: FractionalHex, t: float) -> FractionalHex:
        return FractionalHex(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
        )

    def length(self) -> float:
        return max(abs(self.x), abs(self.y), abs(self.z))

    def round(self) -> Hex:
        return hex_round(self.x, self.y)

    def __round__(self) -> Hex:
        return self.round()


@dataclass(frozen=True, slots=True)
class Cube:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise InvalidCubeError("For cube coords, x + y + z must be 0")


__all__ = [
    "Cube",
    "DIAGONAL_COORDS",
    "FractionalHex",
    "Hex",
    "INT32_MAX",
    "INT32_MIN",
    "NEIGHBOR_COORDS",
    "cube_round",
    "hex_round",
]
