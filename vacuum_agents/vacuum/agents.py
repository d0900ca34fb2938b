"""Agent programs for the two-square vacuum world.

AIMA3e, Figure 2.8::

    function REFLEX-VACUUM-AGENT([location, status]) returns an action
      if status = Dirty then return Suck
      else if location = A then return Right
      else if location = B then return Left
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from random import Random

from vacuum_agents.domain.entity import Agent
from vacuum_agents.domain.space import Location
from vacuum_agents.vacuum.world import LEFT, RIGHT, TWO_CELL_ACTIONS, VacuumAction, VacuumPercept

REFLEX_RULES: dict[VacuumPercept, VacuumAction] = {
    VacuumPercept(LEFT, dirty=False): VacuumAction.MOVE_RIGHT,
    VacuumPercept(LEFT, dirty=True): VacuumAction.SUCK,
    VacuumPercept(RIGHT, dirty=False): VacuumAction.MOVE_LEFT,
    VacuumPercept(RIGHT, dirty=True): VacuumAction.SUCK,
}
"""Figure 2.3 tabulated: (location, status) -> action."""


def _check_percept(percept: object) -> VacuumPercept:
    if not isinstance(percept, VacuumPercept):
        raise TypeError(f"expected VacuumPercept, got {percept!r}")
    return percept


def reflex_action(percept: VacuumPercept) -> VacuumAction:
    """REFLEX-VACUUM-AGENT for the two-square world."""
    if percept.dirty:
        return VacuumAction.SUCK
    if percept.location == LEFT:
        return VacuumAction.MOVE_RIGHT
    if percept.location == RIGHT:
        return VacuumAction.MOVE_LEFT
    raise ValueError(f"reflex vacuum agent only knows {LEFT} and {RIGHT}, got {percept.location}")


class ReflexAgent(Agent[VacuumPercept, VacuumAction]):
    """Simple reflex agent; ``rule_based`` picks the lookup-table encoding."""

    def __init__(self, rule_based: bool = False) -> None:
        super().__init__()
        self.rule_based = rule_based

    def execute(self, percept: VacuumPercept) -> VacuumAction:
        percept = _check_percept(percept)
        if not self.rule_based:
            return reflex_action(percept)
        try:
            return REFLEX_RULES[percept]
        except KeyError as exc:
            raise ValueError(f"no rule matches percept {percept}") from exc


class ModelBasedAgent(Agent[VacuumPercept, VacuumAction]):
    """Reflex agent with a model of which squares it has seen clean.

    Memory holds one slot per tracked square: None until seen, then the last
    observed dirt status. Once every square is believed clean the agent
    stops acting and returns ``noOp``.
    """

    def __init__(self, locations: Iterable[Location] = (LEFT, RIGHT)) -> None:
        super().__init__()
        self.model: dict[Location, bool | None] = {tuple(loc): None for loc in locations}
        if not self.model:
            raise ValueError("model-based agent needs at least one location to track")

    def execute(self, percept: VacuumPercept) -> VacuumAction:
        percept = _check_percept(percept)
        if percept.location not in self.model:
            raise ValueError(f"location {percept.location} is not tracked by this agent")
        self.model[percept.location] = percept.dirty
        if all(dirty is False for dirty in self.model.values()):
            return VacuumAction.NO_OP
        return reflex_action(percept)


class RandomAgent(Agent[VacuumPercept, VacuumAction]):
    """Ignores its percept and picks uniformly among ``actions``."""

    def __init__(
        self,
        rng: Random | None = None,
        actions: Sequence[VacuumAction] = TWO_CELL_ACTIONS,
    ) -> None:
        super().__init__()
        if not actions:
            raise ValueError("actions must not be empty")
        self.rng = rng if rng is not None else Random()
        self.actions = tuple(actions)

    def execute(self, percept: VacuumPercept) -> VacuumAction:
        _check_percept(percept)
        return self.rng.choice(self.actions)
