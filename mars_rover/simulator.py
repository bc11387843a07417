# simulator.py
# ------------
# Dead-reckoning simulator for explicit rover command sequences.
#
# The rover starts at the header origin facing North and executes commands in
# order. Every unit step of a move is checked for bounds, terrain and slope;
# the first refused step ends the simulation and the rover stays on the last
# cell it reached.

from __future__ import annotations
import logging
from itertools import chain
from typing import Iterable, Optional, Union

from mars_rover.models import GridMap, Heading, Command, SimulationResult
from mars_rover.commands import iter_commands, quarter_turns
from mars_rover.costs import step_violation
from mars_rover.energy import EnergyParams, step_energy
from mars_rover.exceptions import InputValidationError

logger = logging.getLogger(__name__)


def _as_commands(commands: Iterable[Union[Command, str]]):
    it = iter(commands)
    first = next(it, None)
    if first is None:
        return
    if isinstance(first, Command):
        yield first
        for item in it:
            if not isinstance(item, Command):
                raise InputValidationError(f"cannot mix Command records with raw token {item!r}")
            yield item
    else:
        yield from iter_commands(chain([first], it))


def simulate_path(
    grid: GridMap,
    commands: Iterable[Union[Command, str]],
    params: Optional[EnergyParams] = None,
) -> SimulationResult:
    """
    Run commands from grid.rover_origin and report where the rover ends up.

    `commands` is either parsed Command records or raw tokens
    (e.g. "forward", "3", "left", "90", "end").
    """
    params = params or EnergyParams()
    # the header origin may lie off the grid; every step from there is refused
    x, y = grid.rover_origin

    heading = Heading.NORTH
    energy = 0
    for n, cmd in enumerate(_as_commands(commands)):
        if cmd.verb == "end":
            break
        if cmd.value is None:
            raise InputValidationError(f"{cmd.verb!r} is missing its argument")
        if cmd.verb == "left":
            heading = heading.rotated(-quarter_turns(cmd.value))
            continue
        if cmd.verb == "right":
            heading = heading.rotated(quarter_turns(cmd.value))
            continue

        dx, dy = heading.delta
        if cmd.verb == "backwards":
            dx, dy = -dx, -dy
        elif cmd.verb != "forward":
            raise InputValidationError(f"unknown command {cmd.verb!r}")

        for _ in range(cmd.value):
            u, v = (x, y), (x + dx, y + dy)
            reason = step_violation(grid, u, v)
            if reason is not None:
                logger.info("command %d (%s %d) halted at %s: %s check failed",
                            n, cmd.verb, cmd.value, u, reason)
                return SimulationResult((x, y), energy, False, halt_reason=reason)
            energy += step_energy(grid, u, v, params)
            x, y = v

    return SimulationResult((x, y), energy, True)
