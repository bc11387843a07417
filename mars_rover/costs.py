# region Imports
from typing import Tuple, Optional
from mars_rover.models import GridMap
from mars_rover.config import IMPASSABLE, MAX_SLOPE
# endregion

BOUNDS = "bounds"
TERRAIN = "terrain"
SLOPE = "slope"

# region Admissibility
def step_violation(grid: GridMap, u: Tuple[int, int], v: Tuple[int, int]) -> Optional[str]:
    """
    First rule a unit step u -> v breaks, checked as bounds, terrain, slope.
    None when the step is admissible. A step from a cell off the grid is
    always refused as out of bounds.
    """
    x1, y1 = v
    if not grid.in_bounds(x1, y1):
        return BOUNDS
    if grid.terrain[y1, x1] == IMPASSABLE:
        return TERRAIN
    x0, y0 = u
    if not grid.in_bounds(x0, y0):
        return BOUNDS
    if abs(int(grid.height[y0, x0]) - int(grid.height[y1, x1])) > MAX_SLOPE:
        return SLOPE
    return None
# endregion
