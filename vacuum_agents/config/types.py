"""Configuration dataclasses for scenario and judge setup.

All frozen dataclasses that parameterise a vacuum-world run live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from vacuum_agents.config.constants import (
    BUMP_SCORE,
    DIRT_REMOVED_SCORE,
    MOVED_SCORE,
    NO_OP_SCORE,
    NUM_STEPS,
    TWO_CELL_WIDTH,
)

__all__ = [
    "AgentKind",
    "JudgeConfig",
    "ScenarioConfig",
]


class AgentKind(Enum):
    """Agent programs available to scenario runs."""

    REFLEX = "reflex"
    REFLEX_RULES = "reflex_rules"
    MODEL_BASED = "model_based"
    RANDOM = "random"


@dataclass(frozen=True)
class JudgeConfig:
    """Per-change scores used by the vacuum performance judge."""

    moved_score: float = MOVED_SCORE
    dirt_removed_score: float = DIRT_REMOVED_SCORE
    bump_score: float = BUMP_SCORE
    """Score for a rejected move. Some textbook variants use 0.0 here."""
    no_op_score: float = NO_OP_SCORE


@dataclass(frozen=True)
class ScenarioConfig:
    """One vacuum-world run: world shape, initial dirt, agent and step count."""

    agent_kind: AgentKind = AgentKind.REFLEX
    grid_shape: tuple[int, ...] = (TWO_CELL_WIDTH,)
    """Cells per dimension; ``(2,)`` is the classic left/right world."""
    start: tuple[int, ...] | None = (0,)
    """Agent start location, or None for a random one."""
    dirty: tuple[tuple[int, ...], ...] = ()
    """Locations that start with one piece of dirt each."""
    steps: int = NUM_STEPS
    seed: int | None = None
    judge: JudgeConfig = field(default_factory=JudgeConfig)

    def __post_init__(self) -> None:
        if not self.grid_shape:
            raise ValueError("grid_shape must have at least one dimension")
        if any(size < 1 for size in self.grid_shape):
            raise ValueError("grid_shape sizes must be >= 1")
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if self.start is not None and not self._inside(self.start):
            raise ValueError(f"start {self.start} lies outside grid {self.grid_shape}")
        for location in self.dirty:
            if not self._inside(location):
                raise ValueError(f"dirty location {location} lies outside grid {self.grid_shape}")
        if len(set(self.dirty)) != len(self.dirty):
            raise ValueError("dirty locations must be distinct")
        if self.agent_kind is not AgentKind.RANDOM and self.grid_shape != (TWO_CELL_WIDTH,):
            raise ValueError(
                f"{self.agent_kind.value} agents require the two-square world "
                f"grid_shape=({TWO_CELL_WIDTH},)"
            )

    def _inside(self, location: tuple[int, ...]) -> bool:
        if len(location) != len(self.grid_shape):
            return False
        return all(0 <= x < size for x, size in zip(location, self.grid_shape, strict=True))
