# region Imports
from collections import deque
from typing import Tuple
import numpy as np

from mars_rover.models import GridMap
from mars_rover.grid import neighbors_4
from mars_rover.costs import step_violation
from mars_rover.exceptions import InputValidationError
# endregion

# region Breadth-first Reachability
def is_reachable(grid: GridMap, start: Tuple[int, int], end: Tuple[int, int]) -> bool:
    """
    True if end can be reached from start over 4-connected admissible steps.
    Only the answer is computed; no route is kept.
    """
    for name, (x, y) in (("start", start), ("end", end)):
        if not grid.in_bounds(x, y):
            raise InputValidationError(f"{name} cell {(x, y)} is off the map")

    size = grid.size
    visited = np.zeros((size, size), dtype=bool)
    visited[start[1], start[0]] = True
    queue = deque([tuple(start)])

    while queue:
        u = queue.popleft()
        if u == tuple(end):
            return True
        for v in neighbors_4(u, size):
            vx, vy = v
            if visited[vy, vx]:
                continue
            if step_violation(grid, u, v) is not None:
                continue
            visited[vy, vx] = True
            queue.append(v)

    return False
# endregion
