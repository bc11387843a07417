import pytest

from mars_rover.models import GridMap
from mars_rover.app import app as flask_app


@pytest.fixture
def flat_grid():
    """Full-size map, height 0, terrain 0 everywhere, rover at (0, 0)."""
    return GridMap.blank()


@pytest.fixture
def client(flat_grid):
    flat_grid.goals.extend([(0, 5), (10, 10)])
    flat_grid.is_goal[5, 0] = True
    flat_grid.is_goal[10, 10] = True
    # wall of impassable terrain around (10, 10)
    for x, y in ((9, 10), (11, 10), (10, 9), (10, 11)):
        flat_grid.terrain[y, x] = 3

    saved = dict(flask_app.config)
    flask_app.config.update(TESTING=True, GRID_MAP=flat_grid)
    yield flask_app.test_client()
    flask_app.config.clear()
    flask_app.config.update(saved)
