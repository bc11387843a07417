# region Imports
from dataclasses import dataclass, field
from typing import Dict, Tuple
from mars_rover.models import GridMap
from mars_rover.config import TERRAIN_ENERGY, SLOPE_ENERGY_FACTOR
# endregion

# region Energy Parameters
@dataclass
class EnergyParams:
    terrain_energy: Dict[int, int] = field(default_factory=lambda: dict(TERRAIN_ENERGY))
    slope_factor: int = SLOPE_ENERGY_FACTOR
# endregion

# region Energy Computation
def step_energy(
    grid: GridMap,
    u: Tuple[int, int],
    v: Tuple[int, int],
    P: EnergyParams,
) -> int:
    """Energy of one admissible unit step: terrain cost of v plus slope penalty."""
    (x0, y0), (x1, y1) = u, v
    slope = abs(int(grid.height[y0, x0]) - int(grid.height[y1, x1]))
    return P.terrain_energy[int(grid.terrain[y1, x1])] + slope * P.slope_factor
# endregion
