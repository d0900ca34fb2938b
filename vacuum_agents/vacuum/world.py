"""Vacuum-world task: actions, percepts and the concrete environment.

AIMA3e, pg 58: the world has a number of squares, each of which may contain
dirt, and an agent that can move between squares and suck up dirt. The
classic version has exactly two squares, ``LEFT`` and ``RIGHT``; any
N-dimensional grid works here, with ``moveLeft``/``moveRight`` acting on the
first axis and ``moveUp``/``moveDown`` on the second.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from random import Random

from vacuum_agents.config.constants import TWO_CELL_WIDTH
from vacuum_agents.domain.entity import Agent, Dirt
from vacuum_agents.domain.space import Location, Space
from vacuum_agents.simulation.environment import Environment

LEFT: Location = (0,)
RIGHT: Location = (1,)


class VacuumAction(Enum):
    """Actuator commands understood by the vacuum environment."""

    NO_OP = "noOp"
    SUCK = "suck"
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    MOVE_UP = "moveUp"
    MOVE_DOWN = "moveDown"


TWO_CELL_ACTIONS: tuple[VacuumAction, ...] = (
    VacuumAction.SUCK,
    VacuumAction.MOVE_LEFT,
    VacuumAction.MOVE_RIGHT,
)

# action -> (axis, delta)
_MOVES: dict[VacuumAction, tuple[int, int]] = {
    VacuumAction.MOVE_LEFT: (0, -1),
    VacuumAction.MOVE_RIGHT: (0, 1),
    VacuumAction.MOVE_UP: (1, -1),
    VacuumAction.MOVE_DOWN: (1, 1),
}


@dataclass(frozen=True)
class VacuumPercept:
    """What a vacuum agent senses: where it is and whether that square is dirty."""

    location: Location
    dirty: bool


class ChangeKind(Enum):
    """Environment changes a judge can observe after an action."""

    NO_OP = "noOp"
    MOVED = "moved"
    BUMPED = "bumped"
    DIRT_REMOVED = "dirtRemoved"


@dataclass(frozen=True)
class ChangePercept:
    """One change to the world caused by an agent's action."""

    kind: ChangeKind
    location: Location


def destination(location: Location, action: VacuumAction) -> Location | None:
    """Square reached by a move action, or None when the axis does not exist."""
    axis, delta = _MOVES[action]
    if axis >= len(location):
        return None
    moved = list(location)
    moved[axis] += delta
    return tuple(moved)


class VacuumEnvironment(Environment[VacuumPercept, VacuumAction, ChangePercept]):
    """Squares, dirt and vacuum agents; ``suck`` is always 100% effective."""

    def __init__(self, space: Space | None = None, rng: Random | None = None) -> None:
        super().__init__(space if space is not None else Space.from_shape(TWO_CELL_WIDTH), rng)

    def _location_of(self, agent: Agent) -> Location:
        location = self.get_location(agent)
        if location is None:
            raise KeyError(f"{agent!r} has no location in this environment")
        return location

    def get_percept_seen_by(self, agent: Agent) -> VacuumPercept:
        location = self._location_of(agent)
        return VacuumPercept(location=location, dirty=self.is_dirty(location))

    def execute_action(self, agent: Agent, action: VacuumAction) -> list[ChangePercept]:
        if not isinstance(action, VacuumAction):
            raise TypeError(f"expected VacuumAction, got {action!r}")
        location = self._location_of(agent)

        if action is VacuumAction.NO_OP:
            return [ChangePercept(ChangeKind.NO_OP, location)]

        if action is VacuumAction.SUCK:
            dirt = [thing for thing in self.get_objects(at=location) if isinstance(thing, Dirt)]
            for thing in dirt:
                self.remove_object(thing)
            kind = ChangeKind.DIRT_REMOVED if dirt else ChangeKind.NO_OP
            return [ChangePercept(kind, location)]

        target = destination(location, action)
        if target is None or not self.space.contains(target):
            return [ChangePercept(ChangeKind.BUMPED, location)]
        self.move_object(agent, target)
        return [ChangePercept(ChangeKind.MOVED, target)]

    def is_dirty(self, location: Location) -> bool:
        return any(isinstance(thing, Dirt) for thing in self.get_objects(at=location))

    def dirt_count(self) -> int:
        return sum(1 for thing in self.get_objects() if isinstance(thing, Dirt))
