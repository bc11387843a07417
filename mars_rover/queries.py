# region Imports
from __future__ import annotations
from typing import Any, Dict, Iterable, Union

from mars_rover.models import GridMap, Command
from mars_rover.connectivity import is_reachable
from mars_rover.simulator import simulate_path
from mars_rover.commands import tokenize, as_int
from mars_rover.exceptions import InputValidationError
# endregion

# region Validation Helpers
def _checked_cell(grid: GridMap, x: Any, y: Any):
    x, y = as_int(x, "x"), as_int(y, "y")
    if not grid.in_bounds(x, y):
        raise InputValidationError(f"cell {(x, y)} is off the map")
    return x, y
# endregion

# region Queries
def cell_info(grid: GridMap, x: Any, y: Any) -> Dict[str, Any]:
    x, y = _checked_cell(grid, x, y)
    return {
        "x": x,
        "y": y,
        "height": int(grid.height[y, x]),
        "terrain": int(grid.terrain[y, x]),
        "is_goal": bool(grid.is_goal[y, x]),
        "is_rover_origin": bool(grid.is_rover_origin[y, x]),
    }


def goal_feasibility(grid: GridMap, goal_index: Any) -> Dict[str, Any]:
    """Is goal number `goal_index` reachable from the rover origin?"""
    i = as_int(goal_index, "goal index")
    if not 0 <= i < len(grid.goals):
        raise InputValidationError(f"goal index {i} outside 0..{len(grid.goals) - 1}")
    gx, gy = grid.goals[i]
    ox, oy = grid.rover_origin
    # a header origin off the grid cannot reach any cell on it
    feasible = grid.in_bounds(ox, oy) and is_reachable(grid, (ox, oy), (gx, gy))
    return {"goal": {"x": gx, "y": gy}, "feasible": feasible}


def run_commands(grid: GridMap, commands: Union[str, Iterable[Union[Command, str]]]) -> Dict[str, Any]:
    if isinstance(commands, str):
        commands = tokenize(commands)
    result = simulate_path(grid, commands)
    fx, fy = result.final_position
    return {
        "feasible": result.feasible,
        "final": {"x": fx, "y": fy},
        "energy": result.energy,
        "halt_reason": result.halt_reason,
    }
# endregion
