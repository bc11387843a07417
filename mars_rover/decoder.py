# decoder.py
import logging
import numpy as np

from mars_rover.config import MAP_SIZE, HEADER_SIZE, MAX_GOALS
from mars_rover.models import GridMap
from mars_rover.codec import parity_ok, unpack_cells
from mars_rover.repair import apply_mode_filter
from mars_rover.exceptions import MapReadError

logger = logging.getLogger(__name__)

PAYLOAD_SIZE = MAP_SIZE * MAP_SIZE


def decode_bytes(data: bytes, source: str = "<bytes>") -> GridMap:
    """
    Build a repaired, read-only GridMap from a raw map stream.

    Cells failing the parity check are left at height/terrain 0 with no flags
    and marked corrupted, then filled in by the mode filter.
    """
    expected = HEADER_SIZE + PAYLOAD_SIZE
    if len(data) < expected:
        raise MapReadError(source, f"stream truncated at {len(data)} of {expected} bytes")
    if len(data) > expected:
        logger.warning("ignoring %d trailing bytes in %s", len(data) - expected, source)

    rover_x, rover_y = data[0], data[1]
    payload = np.frombuffer(data, dtype=np.uint8, count=PAYLOAD_SIZE, offset=HEADER_SIZE)
    payload = payload.reshape(MAP_SIZE, MAP_SIZE)

    valid = parity_ok(payload)
    height, terrain, is_goal, is_rover = unpack_cells(payload)

    grid = GridMap(
        height=np.where(valid, height, 0).astype(np.uint8),
        terrain=np.where(valid, terrain, 0).astype(np.uint8),
        is_rover_origin=is_rover & valid,
        is_goal=is_goal & valid,
        corrupted=~valid,
        rover_origin=(int(rover_x), int(rover_y)),
    )

    # argwhere walks row-major, i.e. raster discovery order
    for y, x in np.argwhere(grid.is_goal)[:MAX_GOALS]:
        grid.goals.append((int(x), int(y)))

    n_corrupted = int(grid.corrupted.sum())
    logger.info(
        "decoded %s: rover at %s, %d goals (%d flagged), %d corrupted cells",
        source, grid.rover_origin, len(grid.goals), int(grid.is_goal.sum()), n_corrupted,
    )

    apply_mode_filter(grid)
    return grid.freeze()


def decode_map(path) -> GridMap:
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise MapReadError(path, str(e)) from e
    return decode_bytes(data, source=str(path))
