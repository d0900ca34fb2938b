"""Experiment orchestration: scenario runs, batch comparisons and the CLI."""

from vacuum_agents.experiments.scenario import (
    ScenarioResult,
    build_environment,
    run_batch,
    run_scenario,
    summarize_scores,
    two_cell_scenarios,
)

__all__ = [
    "ScenarioResult",
    "build_environment",
    "run_batch",
    "run_scenario",
    "summarize_scores",
    "two_cell_scenarios",
]
