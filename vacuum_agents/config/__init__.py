"""Configuration layer: constants and typed config dataclasses."""

from vacuum_agents.config.constants import (
    ACTION_SEPARATOR,
    BUMP_SCORE,
    DIRT_REMOVED_SCORE,
    MISSING_SCORE,
    MOVED_SCORE,
    NO_OP_SCORE,
    NUM_STEPS,
    TWO_CELL_WIDTH,
)
from vacuum_agents.config.types import AgentKind, JudgeConfig, ScenarioConfig

__all__ = [
    "ACTION_SEPARATOR",
    "AgentKind",
    "BUMP_SCORE",
    "DIRT_REMOVED_SCORE",
    "JudgeConfig",
    "MISSING_SCORE",
    "MOVED_SCORE",
    "NO_OP_SCORE",
    "NUM_STEPS",
    "ScenarioConfig",
    "TWO_CELL_WIDTH",
]
