import numpy as np
import pytest

from mars_rover.codec import check_parity, parity_ok, pack_cell, unpack_cells, encode_map
from mars_rover.models import GridMap


def test_parity_accepts_exactly_half_of_all_bytes():
    accepted = [b for b in range(256) if check_parity(b)]
    assert len(accepted) == 128
    for b in range(256):
        expected = bin(b & 0x7F).count("1") % 2 == (b >> 7)
        assert check_parity(b) == expected


def test_vectorised_parity_matches_scalar():
    values = np.arange(256, dtype=np.uint8).reshape(16, 16)
    ok = parity_ok(values)
    assert ok.shape == (16, 16)
    assert [bool(v) for v in ok.ravel()] == [check_parity(b) for b in range(256)]


def test_check_parity_rejects_non_bytes():
    with pytest.raises(ValueError):
        check_parity(256)


def test_pack_cell_layout():
    byte = pack_cell(height=5, terrain=2, is_goal=True, is_rover=False)
    assert check_parity(byte)
    assert byte & 0x07 == 5
    assert (byte >> 3) & 0x03 == 2
    assert byte & 0x20
    assert not byte & 0x40

    height, terrain, is_goal, is_rover = unpack_cells(np.array([byte], dtype=np.uint8))
    assert (height[0], terrain[0], bool(is_goal[0]), bool(is_rover[0])) == (5, 2, True, False)


def test_pack_cell_rejects_out_of_range_fields():
    with pytest.raises(ValueError):
        pack_cell(height=8, terrain=0)
    with pytest.raises(ValueError):
        pack_cell(height=0, terrain=4)


def test_encode_map_header_and_payload():
    grid = GridMap.blank(size=4, rover_origin=(3, 1))
    grid.height[1, 2] = 6
    grid.terrain[1, 2] = 1
    grid.is_rover_origin[1, 3] = True
    data = encode_map(grid)

    assert len(data) == 2 + 16
    assert data[:2] == bytes([3, 1])
    payload = data[2:]
    assert all(check_parity(b) for b in payload)
    assert payload[1 * 4 + 2] == pack_cell(6, 1)
    assert payload[1 * 4 + 3] == pack_cell(0, 0, is_rover=True)
    assert payload[0] == pack_cell(0, 0)
