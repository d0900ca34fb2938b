"""Vacuum-world task binding: environment, agent programs, judge and rendering."""

from vacuum_agents.vacuum.agents import (
    REFLEX_RULES,
    ModelBasedAgent,
    RandomAgent,
    ReflexAgent,
    reflex_action,
)
from vacuum_agents.vacuum.judges import PerformanceJudge
from vacuum_agents.vacuum.render import render
from vacuum_agents.vacuum.world import (
    LEFT,
    RIGHT,
    TWO_CELL_ACTIONS,
    ChangeKind,
    ChangePercept,
    VacuumAction,
    VacuumEnvironment,
    VacuumPercept,
)

__all__ = [
    "ChangeKind",
    "ChangePercept",
    "LEFT",
    "ModelBasedAgent",
    "PerformanceJudge",
    "REFLEX_RULES",
    "RIGHT",
    "RandomAgent",
    "ReflexAgent",
    "TWO_CELL_ACTIONS",
    "VacuumAction",
    "VacuumEnvironment",
    "VacuumPercept",
    "reflex_action",
    "render",
]
