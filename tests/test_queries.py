import pytest

from mars_rover.exceptions import InputValidationError
from mars_rover.models import GridMap
from mars_rover.queries import cell_info, goal_feasibility, run_commands


def test_cell_info(flat_grid):
    flat_grid.height[4, 9] = 6
    flat_grid.terrain[4, 9] = 2
    flat_grid.is_goal[4, 9] = True
    assert cell_info(flat_grid, "9", "4") == {
        "x": 9, "y": 4, "height": 6, "terrain": 2, "is_goal": True, "is_rover_origin": False,
    }


@pytest.mark.parametrize("x,y", [(-1, 0), (0, 128), ("a", 0), (None, 3), (True, 1)])
def test_cell_info_rejects_bad_coordinates(flat_grid, x, y):
    with pytest.raises(InputValidationError):
        cell_info(flat_grid, x, y)


def test_goal_feasibility(flat_grid):
    flat_grid.goals.extend([(3, 3), (20, 0)])
    flat_grid.terrain[:, 10] = 3
    assert goal_feasibility(flat_grid, 0) == {"goal": {"x": 3, "y": 3}, "feasible": True}
    assert goal_feasibility(flat_grid, "1")["feasible"] is False


@pytest.mark.parametrize("index", [-1, 1, "x", 0.5])
def test_goal_index_out_of_range(flat_grid, index):
    flat_grid.goals.append((1, 1))
    with pytest.raises(InputValidationError):
        goal_feasibility(flat_grid, index)


def test_goal_from_off_map_origin_is_not_reachable():
    grid = GridMap.blank(rover_origin=(130, 0))
    grid.goals.append((127, 0))
    assert goal_feasibility(grid, 0) == {"goal": {"x": 127, "y": 0}, "feasible": False}


def test_run_commands_from_text(flat_grid):
    out = run_commands(flat_grid, "forward 1 end")
    assert out == {"feasible": True, "final": {"x": 0, "y": 1}, "energy": 1, "halt_reason": None}


def test_run_commands_reports_last_feasible_position(flat_grid):
    flat_grid.terrain[0, 2] = 3
    out = run_commands(flat_grid, ["right", "90", "forward", "4"])
    assert out["feasible"] is False
    assert out["final"] == {"x": 1, "y": 0}
    assert out["halt_reason"] == "terrain"
