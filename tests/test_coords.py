import numpy as np
import pytest

from hexcells import Cube, Hex, HexDivisionError, InvalidCubeError
from hexcells import axial_to_cube, cube_to_axial
from hexcells.coords import INT32_MAX, INT32_MIN
from hexcells.errors import CoordinateRangeError


def _random_hexes(count: int, *, seed: int = 7, bound: int = 1000) -> list[Hex]:
    rng = np.random.default_rng(seed)
    values = rng.integers(-bound, bound, size=(count, 2))
    return [Hex(int(x), int(y)) for x, y in values]


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.x + c.y + c.z == 0


def test_cube_rejects_broken_invariant():
    with pytest.raises(InvalidCubeError):
        Cube(1, 1, 1)


def test_axial_cube_roundtrip():
    a = Hex(3, -2)
    c = axial_to_cube(a)
    a2 = cube_to_axial(c)
    assert a == a2
    assert c == Cube(3, -2, -1)


def test_z_is_derived():
    for h in _random_hexes(200):
        assert h.x + h.y + h.z == 0


def test_components_accept_numpy_integers_and_reject_floats():
    h = Hex(np.int32(4), np.int64(-2))
    assert h == Hex(4, -2)
    assert type(h.x) is int
    with pytest.raises(TypeError):
        Hex(1.5, 0)


def test_equality_hash_and_ordering():
    assert Hex(1, 2) == Hex(1, 2)
    assert len({Hex(1, 2), Hex(1, 2), Hex(2, 1)}) == 2
    assert sorted([Hex(1, 0), Hex(0, 5), Hex(0, -1)]) == [Hex(0, -1), Hex(0, 5), Hex(1, 0)]


def test_arithmetic_operators_match_named_methods():
    a, b = Hex(3, -1), Hex(-2, 5)
    assert a + b == a.add(b) == Hex(1, 4)
    assert a - b == a.subtract(b) == Hex(5, -6)
    assert -a == a.negate() == Hex(-3, 1)
    assert a * 3 == 3 * a == a.multiply(3) == Hex(9, -3)
    assert abs(Hex(-3, 2)) == Hex(-3, 2).absolute() == Hex(3, 2)


def test_multiplying_two_hexes_is_unsupported():
    with pytest.raises(TypeError):
        Hex(1, 0) * Hex(1, 0)


def test_hex_distance():
    a = Hex(0, 0)
    b = Hex(2, -1)
    assert a.distance_to(b) == 2
    assert b.distance_to(a) == 2
    assert Hex(1, -2).length() == 2


def test_distance_to_self_is_zero():
    for h in _random_hexes(100):
        assert h.distance_to(h) == 0
        assert h.unsigned_distance_to(h) == 0


def test_distance_matches_unsigned_distance():
    hexes = _random_hexes(100, seed=3)
    for a, b in zip(hexes, hexes[1:]):
        assert a.distance_to(b) == a.unsigned_distance_to(b) == (a - b).length()


def test_distance_across_the_full_int32_range_does_not_overflow():
    low = Hex(INT32_MIN, 0)
    high = Hex(INT32_MAX, 0)
    expected = INT32_MAX - INT32_MIN
    assert low.distance_to(high) == expected
    assert high.unsigned_distance_to(low) == expected
    assert Hex(INT32_MAX, INT32_MIN).length() == -INT32_MIN
    assert Hex(INT32_MAX, INT32_MIN).unsigned_length() == -INT32_MIN


@pytest.mark.parametrize(
    ("h", "k", "quotient"),
    [
        (Hex(4, -2), 2, Hex(2, -1)),
        (Hex(9, 0), 3, Hex(3, 0)),
        (Hex(-6, 3), -3, Hex(2, -1)),
        (Hex(3, 0), 2, Hex(2, 0)),
        (Hex(1, 0), 3, Hex(0, 0)),
    ],
)
def test_scalar_division(h: Hex, k: int, quotient: Hex):
    assert h // k == quotient
    assert h.divide(k) == quotient


def test_division_law_holds_for_scalars():
    hexes = _random_hexes(300, seed=11)
    for k in (-7, -2, -1, 1, 2, 3, 5, 13):
        for h in hexes:
            q, r = divmod(h, k)
            assert q * k + r == h
            assert h.divide(k).multiply(k).add(h.remainder(k)) == h


def test_division_tracks_length_not_components():
    for k in (2, 3, 4, 7):
        for h in _random_hexes(300, seed=k):
            assert abs((h // k).length() - h.length() / abs(k)) <= 2 / 3 + 1e-9


def test_exact_division_is_exact():
    for h in _random_hexes(100, seed=5):
        for k in (1, 2, 6, -3):
            assert (h * k) // k == h
            assert (h * k) % k == Hex.ZERO


def test_division_by_hex_uses_its_length():
    h = Hex(8, -4)
    d = Hex(1, -2)  # length 2
    assert h // d == h // 2
    assert h % d == h % 2
    assert (h // d) * d.length() + h % d == h


@pytest.mark.parametrize("divisor", [0, Hex(0, 0)])
def test_division_by_zero_fails_loudly(divisor):
    with pytest.raises(HexDivisionError):
        Hex(3, 1) // divisor
    with pytest.raises(ZeroDivisionError):
        Hex(3, 1) % divisor


def test_ivec_roundtrip():
    h = Hex(5, -9)
    assert Hex.from_ivec2(h.as_ivec2()) == h
    assert Hex.from_ivec3(h.as_ivec3()) == h
    assert h.as_ivec3().tolist() == [5, -9, 4]
    assert h.as_ivec2().dtype == np.int32


def test_from_ivec3_validates_invariant():
    with pytest.raises(InvalidCubeError):
        Hex.from_ivec3(np.array([1, 1, 1]))


def test_from_ivec2_rejects_wrong_shape():
    with pytest.raises(ValueError, match="2 components"):
        Hex.from_ivec2([1, 2, 3])


def test_as_ivec_out_of_range():
    with pytest.raises(CoordinateRangeError):
        Hex(INT32_MAX + 1, 0).as_ivec2()
    # z = -(INT32_MIN) - 0 does not fit
    with pytest.raises(OverflowError):
        Hex(INT32_MIN, 0).as_ivec3()


def test_float_vectors():
    h = Hex(2, -7)
    assert h.as_vec2().tolist() == [2.0, -7.0]
    assert h.as_vec3().tolist() == [2.0, -7.0, 5.0]
    assert Hex.from_vec2(np.array([2.2, -6.9])) == h
    assert Hex.from_vec3([2.1, -7.0, 4.9]) == h
    with pytest.raises(InvalidCubeError):
        Hex.from_vec3([1.0, 1.0, 1.0])


def test_unpacking():
    x, y = Hex(4, -1)
    assert (x, y) == (4, -1)
