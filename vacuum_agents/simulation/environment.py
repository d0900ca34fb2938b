"""Generic agent/judge simulation loop over a bounded space.

An ``Environment`` owns the space, the placement of every entity, the
per-agent score table and the observers. Task environments subclass it and
supply two hooks:

- ``get_percept_seen_by(agent)``: what the agent senses at its location;
- ``execute_action(agent, action)``: apply the action and return the list of
  change percepts describing what actually happened.

Judges never occupy a location. They are registered against every agent's
score row and score each change percept the agent's action produced.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from random import Random
from typing import Generic, TypeVar

from vacuum_agents.domain.entity import Agent, Entity, Judge
from vacuum_agents.domain.observer import Observer
from vacuum_agents.domain.space import Location, Space

logger = logging.getLogger(__name__)

P = TypeVar("P")
A = TypeVar("A")
C = TypeVar("C")


class Environment(ABC, Generic[P, A, C]):
    """Discrete-time environment driving agents and scoring them with judges."""

    def __init__(self, space: Space, rng: Random | None = None) -> None:
        self.space = space
        self.rng = rng if rng is not None else Random()
        self._objects: dict[Entity, Location] = {}
        self._judges: dict[Judge[C], None] = {}
        self._scores: dict[Agent[P, A], dict[Judge[C], float]] = {}
        self._observers: list[Observer] = []

    # ------------------------------------------------------------------
    # Task hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def execute_action(self, agent: Agent[P, A], action: A) -> list[C]:
        """Apply ``action`` for ``agent`` and return the resulting changes."""

    @abstractmethod
    def get_percept_seen_by(self, agent: Agent[P, A]) -> P:
        """Synthesize the percept ``agent`` receives at its current location."""

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    def add_object(self, thing: Entity, location: Location | None = None) -> None:
        """Add ``thing`` at ``location``, or at a random location if none is given.

        Judges are not placed; they join every agent's score row instead.
        Adding an entity that is already present does nothing.
        """
        if isinstance(thing, Judge):
            if thing in self._judges:
                return
            self._judges[thing] = None
            for row in self._scores.values():
                row.setdefault(thing, 0.0)
            logger.debug("registered %r against %d agent(s)", thing, len(self._scores))
            return

        if thing in self._objects:
            return
        position = tuple(location) if location is not None else self.space.random_location(self.rng)
        self._objects[thing] = position
        logger.debug("placed %r at %s", thing, position)
        if isinstance(thing, Agent):
            self._scores[thing] = {judge: 0.0 for judge in self._judges}
            for observer in list(self._observers):
                observer.agent_added(thing, self)

    def remove_object(self, thing: Entity) -> None:
        """Remove ``thing`` and any score entries keyed by it; unknown entities are ignored."""
        if isinstance(thing, Judge):
            if thing in self._judges:
                del self._judges[thing]
                for row in self._scores.values():
                    row.pop(thing, None)
            return
        self._objects.pop(thing, None)
        if isinstance(thing, Agent):
            self._scores.pop(thing, None)

    def get_objects(self, at: Location | None = None) -> dict[Entity, Location]:
        """Snapshot of placed entities, optionally only those at ``at``."""
        if at is None:
            return dict(self._objects)
        target = tuple(at)
        return {thing: loc for thing, loc in self._objects.items() if loc == target}

    def get_location(self, thing: Entity) -> Location | None:
        return self._objects.get(thing)

    def move_object(self, thing: Entity, location: Location) -> None:
        """Relocate an entity that is already placed."""
        if thing not in self._objects:
            raise KeyError(f"{thing!r} is not in this environment")
        self._objects[thing] = tuple(location)

    def get_agents(self) -> list[Agent[P, A]]:
        return list(self._scores)

    def get_judges(self) -> list[Judge[C]]:
        return list(self._judges)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step(self, count: int = 1) -> None:
        """Advance the clock ``count`` ticks.

        Each tick, every live agent in turn perceives, acts, is scored by its
        judges and is reported to observers before the next agent moves.
        """
        if count < 1:
            raise ValueError("count must be >= 1")
        for _ in range(count):
            self._tick()

    def _tick(self) -> None:
        for agent in list(self._scores):
            if not agent.alive or agent not in self._scores:
                continue
            percept = self.get_percept_seen_by(agent)
            action = agent.execute(percept)
            changes = self.execute_action(agent, action)
            row = self._scores[agent]
            for change in changes:
                for judge in row:
                    row[judge] += judge.execute(change)
            logger.debug("%r: %s -> %s, changes=%s", agent, percept, action, changes)
            for observer in list(self._observers):
                observer.agent_acted(agent, percept, action, self)

    def is_done(self) -> bool:
        """True iff no agent in the environment is alive."""
        return not any(agent.alive for agent in self._scores)

    def step_until_done(self, max_steps: int) -> int:
        """Step until ``is_done()`` or ``max_steps`` ticks; return ticks taken."""
        if max_steps < 1:
            raise ValueError("max_steps must be >= 1")
        taken = 0
        while taken < max_steps and not self.is_done():
            self._tick()
            taken += 1
        return taken

    # ------------------------------------------------------------------
    # Performance
    # ------------------------------------------------------------------

    def get_scores(self, agent: Agent[P, A]) -> dict[Judge[C], float] | None:
        """Snapshot of ``agent``'s judge -> cumulative score, or None if unknown."""
        row = self._scores.get(agent)
        return dict(row) if row is not None else None

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, message: str) -> None:
        """Broadcast a free-text message to every observer."""
        for observer in list(self._observers):
            observer.notify(message)
