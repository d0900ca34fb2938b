"""Plain-text rendering of a vacuum world."""

from __future__ import annotations

from vacuum_agents.domain.entity import Agent, Dirt
from vacuum_agents.vacuum.world import VacuumEnvironment

EMPTY = "."
AGENT = "A"
DIRT = "*"
AGENT_ON_DIRT = "@"


def render(env: VacuumEnvironment) -> str:
    """Draw the world one row per line (first axis across, second axis down).

    Worlds of more than two dimensions are flattened along the trailing axes.
    """
    grid = env.space.to_array(EMPTY)
    if grid is None or grid.size == 0:
        return ""
    for thing, location in env.get_objects().items():
        if len(location) != env.space.dimension() or not env.space.contains(location):
            continue
        index = env.space.index_of(location)
        current = grid[index]
        if isinstance(thing, Agent):
            grid[index] = AGENT_ON_DIRT if current in (DIRT, AGENT_ON_DIRT) else AGENT
        elif isinstance(thing, Dirt):
            grid[index] = AGENT_ON_DIRT if current in (AGENT, AGENT_ON_DIRT) else DIRT

    rows = grid.reshape(grid.shape[0], -1).T
    return "\n".join("".join(row) for row in rows)
