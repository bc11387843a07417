# synthetic.py
# ------------
# Random map streams in the binary map format, for tests and demos.

from __future__ import annotations
from typing import Tuple
import numpy as np

from mars_rover.config import MAP_SIZE, HEADER_SIZE
from mars_rover.models import GridMap
from mars_rover.codec import encode_map, PARITY_BIT
from mars_rover.grid import idx_to_xy


def make_synthetic_grid(
    seed: int = 0,
    size: int = MAP_SIZE,
    rover_origin: Tuple[int, int] = (64, 64),
    n_goals: int = 10,
    impassable_fraction: float = 0.05,
) -> GridMap:
    """
    Gently rolling height field (0..7) with scattered terrain classes, a few
    impassable cells and `n_goals` goal cells placed at random.
    """
    rng = np.random.default_rng(seed)
    yy, xx = np.meshgrid(np.linspace(0, 2 * np.pi, size), np.linspace(0, 2 * np.pi, size), indexing="ij")
    base = 3.5 + 2.5 * np.sin(xx) * np.cos(0.7 * yy)
    height = np.clip(np.rint(base + rng.normal(0, 0.3, (size, size))), 0, 7).astype(np.uint8)

    terrain = rng.choice(3, size=(size, size), p=[0.6, 0.3, 0.1]).astype(np.uint8)
    terrain[rng.random((size, size)) < impassable_fraction] = 3

    grid = GridMap.blank(size=size, rover_origin=rover_origin)
    grid.height[:] = height
    grid.terrain[:] = terrain

    rx, ry = rover_origin
    if grid.in_bounds(rx, ry):
        grid.is_rover_origin[ry, rx] = True
        grid.terrain[ry, rx] = 0

    for i in rng.choice(size * size, size=min(n_goals, size * size), replace=False):
        gx, gy = idx_to_xy(int(i), size)
        grid.is_goal[gy, gx] = True
    return grid


def corrupt_stream(data: bytes, n_cells: int, seed: int = 0, header_size: int = HEADER_SIZE) -> bytes:
    """Flip the parity bit of `n_cells` distinct payload bytes."""
    rng = np.random.default_rng(seed)
    buf = bytearray(data)
    n_payload = len(buf) - header_size
    for i in rng.choice(n_payload, size=min(n_cells, n_payload), replace=False):
        buf[header_size + int(i)] ^= PARITY_BIT
    return bytes(buf)


def make_synthetic_stream(seed: int = 0, n_corrupted: int = 0, **kwargs) -> bytes:
    data = encode_map(make_synthetic_grid(seed=seed, **kwargs))
    if n_corrupted:
        data = corrupt_stream(data, n_corrupted, seed=seed + 1)
    return data
