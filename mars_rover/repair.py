# region Imports
import logging
import numpy as np

from mars_rover.models import GridMap
from mars_rover.grid import neighbors_8
# endregion

logger = logging.getLogger(__name__)

HEIGHT_LEVELS = 8
TERRAIN_CLASSES = 4

# region Mode Selection
def mode_value(counts: np.ndarray) -> int:
    # argmax returns the first maximum, so ties go to the lowest value
    # and an all-zero tally gives 0
    return int(np.argmax(counts))
# endregion

# region 3x3 Mode Filter
def apply_mode_filter(grid: GridMap) -> int:
    """
    Single raster-order pass replacing each corrupted cell with the mode of its
    non-corrupted 3x3 neighbours, height and terrain voted separately.

    Cells are repaired in place as the pass reaches them, so a cell repaired
    earlier in the pass votes for its later neighbours while a corrupted cell
    not yet reached does not. Returns the number of cells repaired.
    """
    size = grid.size
    repaired = 0
    # np.argwhere is row-major: y ascending, then x ascending
    for y, x in np.argwhere(grid.corrupted):
        height_counts = np.zeros(HEIGHT_LEVELS, dtype=np.int32)
        terrain_counts = np.zeros(TERRAIN_CLASSES, dtype=np.int32)

        for nx, ny in neighbors_8((int(x), int(y)), size):
            if grid.corrupted[ny, nx]:
                continue
            height_counts[grid.height[ny, nx]] += 1
            terrain_counts[grid.terrain[ny, nx]] += 1

        grid.height[y, x] = mode_value(height_counts)
        grid.terrain[y, x] = mode_value(terrain_counts)
        grid.corrupted[y, x] = False
        repaired += 1

    logger.debug("mode filter repaired %d cells", repaired)
    return repaired
# endregion
