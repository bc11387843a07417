# codec.py
# --------
# Bit layout of one map payload byte:
#
#   bit 7     parity of bits 0..6
#   bit 6     rover origin flag
#   bit 5     science goal flag
#   bits 4-3  terrain class (0..3)
#   bits 2-0  height (0..7)
#
# Exposes:
#   - check_parity(byte)          scalar check
#   - parity_ok(payload)          vectorised check over a uint8 array
#   - unpack_cells(payload)       -> (height, terrain, is_goal, is_rover)
#   - pack_cell(...)              parity-correct byte for one cell
#   - encode_map(grid)            header + payload bytes for a GridMap

from __future__ import annotations
from typing import Tuple
import numpy as np

from mars_rover.models import GridMap

PARITY_BIT = 0x80
ROVER_BIT = 0x40
GOAL_BIT = 0x20
TERRAIN_MASK = 0x18
HEIGHT_MASK = 0x07


# region Parity
def parity_ok(payload: np.ndarray) -> np.ndarray:
    """True where the count of set bits 0..6 has the parity stored in bit 7."""
    payload = np.asarray(payload, dtype=np.uint8)
    # unpackbits is big-endian: column 0 is bit 7
    bits = np.unpackbits(payload[..., np.newaxis], axis=-1)
    count = bits[..., 1:].sum(axis=-1)
    return (count % 2) == bits[..., 0]


def check_parity(byte: int) -> bool:
    if not 0 <= int(byte) <= 0xFF:
        raise ValueError(f"not a byte value: {byte}")
    return bool(parity_ok(np.uint8(byte)))
# endregion


# region Unpack / Pack
def unpack_cells(payload: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    payload = np.asarray(payload, dtype=np.uint8)
    height = payload & HEIGHT_MASK
    terrain = (payload & TERRAIN_MASK) >> 3
    is_goal = (payload & GOAL_BIT) != 0
    is_rover = (payload & ROVER_BIT) != 0
    return height.astype(np.uint8), terrain.astype(np.uint8), is_goal, is_rover


def pack_cell(height: int, terrain: int, is_goal: bool = False, is_rover: bool = False) -> int:
    if not 0 <= height <= 7:
        raise ValueError(f"height out of range: {height}")
    if not 0 <= terrain <= 3:
        raise ValueError(f"terrain out of range: {terrain}")
    low = height | (terrain << 3) | (GOAL_BIT if is_goal else 0) | (ROVER_BIT if is_rover else 0)
    parity = bin(low).count("1") % 2
    return low | (PARITY_BIT if parity else 0)


def encode_map(grid: GridMap) -> bytes:
    """Serialise a GridMap into the binary map format (header then row-major payload)."""
    rx, ry = grid.rover_origin
    if not (0 <= rx <= 0xFF and 0 <= ry <= 0xFF):
        raise ValueError(f"rover origin does not fit the header: {grid.rover_origin}")

    low = (
        grid.height.astype(np.uint8)
        | (grid.terrain.astype(np.uint8) << 3)
        | np.where(grid.is_goal, GOAL_BIT, 0).astype(np.uint8)
        | np.where(grid.is_rover_origin, ROVER_BIT, 0).astype(np.uint8)
    ).astype(np.uint8)
    bits = np.unpackbits(low[..., np.newaxis], axis=-1)
    parity = (bits.sum(axis=-1) % 2).astype(np.uint8)
    payload = low | (parity << 7)
    return bytes([rx, ry]) + payload.astype(np.uint8).tobytes(order="C")
# endregion
