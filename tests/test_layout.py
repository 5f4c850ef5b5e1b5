import math

import numpy as np
import pytest
from pydantic import ValidationError

from hexcells import Direction, Hex, HexLayout, HexOrientation, spiral

H = 5.0 * math.sqrt(3.0)


@pytest.mark.parametrize("orientation", list(HexOrientation))
def test_neighbor_vectors_follow_direction_angles(orientation: HexOrientation):
    layout = HexLayout(orientation=orientation)
    origin = layout.hex_to_world_pos(Hex.ZERO)
    for direction in Direction:
        vec = layout.hex_to_world_pos(direction.offset) - origin
        assert np.linalg.norm(vec) == pytest.approx(math.sqrt(3.0))
        angle = direction.angle(orientation)
        np.testing.assert_allclose(
            vec / np.linalg.norm(vec), [math.cos(angle), math.sin(angle)], atol=1e-9
        )


@pytest.mark.parametrize("orientation", list(HexOrientation))
@pytest.mark.parametrize("invert", [(False, False), (True, False), (False, True)])
def test_world_roundtrip(orientation: HexOrientation, invert: tuple[bool, bool]):
    layout = HexLayout(
        orientation=orientation,
        origin=(12.5, -3.0),
        hex_size=(2.0, 3.0),
        invert_x=invert[0],
        invert_y=invert[1],
    )
    for h in spiral(Hex(3, -7), 4):
        pos = layout.hex_to_world_pos(h)
        assert layout.world_pos_to_hex(pos) == h
        frac = layout.world_pos_to_fractional(pos)
        assert (frac.x, frac.y) == pytest.approx((h.x, h.y))


@pytest.mark.parametrize("orientation", list(HexOrientation))
def test_corners_resolve_to_adjacent_cells(orientation: HexOrientation):
    layout = HexLayout(orientation=orientation, hex_size=(4.0, 4.0))
    h = Hex(1, 2)
    center = layout.hex_to_world_pos(h)
    for corner in layout.hex_corners(h):
        assert np.linalg.norm(corner - center) == pytest.approx(4.0)
        inside = center + (corner - center) * 0.9
        assert layout.world_pos_to_hex(inside) == h


def test_flat_corners():
    layout = HexLayout(orientation=HexOrientation.FLAT, hex_size=(10.0, 10.0))
    corners = layout.hex_corners(Hex.ZERO)
    expected = [(10.0, 0.0), (5.0, H), (-5.0, H), (-10.0, 0.0), (-5.0, -H), (5.0, -H)]
    np.testing.assert_allclose(corners, expected, atol=1e-9)


def test_pointy_corners():
    layout = HexLayout(orientation=HexOrientation.POINTY, hex_size=(10.0, 10.0))
    corners = layout.hex_corners(Hex.ZERO)
    expected = [(H, 5.0), (0.0, 10.0), (-H, 5.0), (-H, -5.0), (0.0, -10.0), (H, -5.0)]
    np.testing.assert_allclose(corners, expected, atol=1e-9)


def test_origin_offsets_positions():
    layout = HexLayout(origin=(1.0, 2.0))
    np.testing.assert_allclose(layout.hex_to_world_pos(Hex.ZERO), [1.0, 2.0])
    assert layout.world_pos_to_hex((1.1, 2.1)) == Hex.ZERO


def test_rect_size():
    pointy = HexLayout(orientation=HexOrientation.POINTY, hex_size=(2.0, 2.0))
    flat = HexLayout(orientation="flat", hex_size=(2.0, 2.0))
    np.testing.assert_allclose(pointy.rect_size, [2.0 * math.sqrt(3.0), 4.0])
    np.testing.assert_allclose(flat.rect_size, [4.0, 2.0 * math.sqrt(3.0)])


def test_layout_validation():
    with pytest.raises(ValidationError, match="non-zero"):
        HexLayout(hex_size=(0.0, 1.0))
    with pytest.raises(ValidationError):
        HexLayout(scale=2.0)


def test_layout_is_frozen():
    layout = HexLayout()
    with pytest.raises(ValidationError):
        layout.invert_x = True
