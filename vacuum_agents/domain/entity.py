"""Entities that live in an environment: agents, judges and inert objects.

Entities compare by identity. Every instance receives a unique integer
``entity_id`` at creation and equality/hashing use only that id, so two
agents running the same program are still distinct score-table keys.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

P = TypeVar("P")
A = TypeVar("A")
C = TypeVar("C")

_entity_ids = itertools.count()


class Entity:
    """Base class for anything that can be added to an environment."""

    def __init__(self) -> None:
        self.entity_id: int = next(_entity_ids)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.entity_id == other.entity_id

    def __hash__(self) -> int:
        return hash(self.entity_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entity_id={self.entity_id})"


class Agent(Entity, ABC, Generic[P, A]):
    """Maps each percept to an action.

    Subclasses may keep private memory between calls (model-based agents);
    reflex agents look only at the current percept.
    """

    def __init__(self) -> None:
        super().__init__()
        self.alive = True

    @abstractmethod
    def execute(self, percept: P) -> A:
        """Return the action chosen in response to ``percept``."""

    def die(self) -> None:
        """Exclude this agent from all future steps."""
        self.alive = False


class Judge(Entity, ABC, Generic[C]):
    """Performance measure: scores one environment change at a time.

    Judges are stateless; the environment sums their scores per agent.
    """

    @abstractmethod
    def execute(self, percept: C) -> float:
        """Return the score for one change percept."""


class Dirt(Entity):
    """Inert object removed by a vacuum agent's ``suck`` action."""
