# models.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple, Optional
import numpy as np

from mars_rover.config import MAP_SIZE

# region Grid Map
@dataclass
class GridMap:
    """
    Decoded terrain map. Every layer is a (size, size) array indexed [y, x].

    height:          uint8 elevation 0..7
    terrain:         uint8 terrain class 0..3 (3 = impassable)
    is_rover_origin: bool, rover flag as stored in the payload
    is_goal:         bool, science goal flag
    corrupted:       bool, parity failures; all False once repair has run
    goals:           (x, y) goal cells in raster discovery order
    rover_origin:    (x, y) from the stream header; traversal starts here
    """
    height: np.ndarray
    terrain: np.ndarray
    is_rover_origin: np.ndarray
    is_goal: np.ndarray
    corrupted: np.ndarray
    goals: List[Tuple[int, int]] = field(default_factory=list)
    rover_origin: Tuple[int, int] = (0, 0)

    @classmethod
    def blank(cls, size: int = MAP_SIZE, rover_origin: Tuple[int, int] = (0, 0)) -> "GridMap":
        return cls(
            height=np.zeros((size, size), dtype=np.uint8),
            terrain=np.zeros((size, size), dtype=np.uint8),
            is_rover_origin=np.zeros((size, size), dtype=bool),
            is_goal=np.zeros((size, size), dtype=bool),
            corrupted=np.zeros((size, size), dtype=bool),
            rover_origin=rover_origin,
        )

    @property
    def size(self) -> int:
        return int(self.height.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def freeze(self) -> "GridMap":
        for arr in (self.height, self.terrain, self.is_rover_origin, self.is_goal, self.corrupted):
            arr.flags.writeable = False
        return self
# endregion

# region Rover State
class Heading(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> Tuple[int, int]:
        # North is +y on the map
        return ((0, 1), (1, 0), (0, -1), (-1, 0))[self]

    def rotated(self, quarter_turns: int) -> "Heading":
        return Heading((self + quarter_turns) % 4)


@dataclass(frozen=True)
class Command:
    verb: str
    value: Optional[int] = None


@dataclass
class SimulationResult:
    final_position: Tuple[int, int]
    energy: int
    feasible: bool
    # Set only when a step was refused: "bounds", "terrain" or "slope"
    halt_reason: Optional[str] = None
# endregion
