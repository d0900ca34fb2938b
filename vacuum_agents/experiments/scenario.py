"""Scenario orchestration: build a vacuum world from config, run it, report results."""

from __future__ import annotations

import itertools
import logging
import statistics
from dataclasses import dataclass
from random import Random

from vacuum_agents.config.constants import MISSING_SCORE, NUM_STEPS, TWO_CELL_WIDTH
from vacuum_agents.config.types import AgentKind, JudgeConfig, ScenarioConfig
from vacuum_agents.domain.entity import Agent, Dirt
from vacuum_agents.domain.observer import ActionTracker
from vacuum_agents.domain.space import Space
from vacuum_agents.vacuum.agents import ModelBasedAgent, RandomAgent, ReflexAgent
from vacuum_agents.vacuum.judges import PerformanceJudge
from vacuum_agents.vacuum.render import render
from vacuum_agents.vacuum.world import LEFT, RIGHT, VacuumEnvironment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of one scenario run."""

    config: ScenarioConfig
    actions: str
    score: float
    dirt_remaining: int
    grid: str
    """Final world drawn by ``render``."""


def build_agent(kind: AgentKind, space: Space, rng: Random) -> Agent:
    """Instantiate the agent program named by ``kind``."""
    if kind is AgentKind.REFLEX:
        return ReflexAgent()
    if kind is AgentKind.REFLEX_RULES:
        return ReflexAgent(rule_based=True)
    if kind is AgentKind.MODEL_BASED:
        return ModelBasedAgent(space.locations())
    return RandomAgent(rng)


def build_environment(config: ScenarioConfig) -> tuple[VacuumEnvironment, Agent, PerformanceJudge]:
    """Set up the world: agent first, then judge, then one dirt per dirty square."""
    rng = Random(config.seed)
    space = Space.from_shape(*config.grid_shape)
    env = VacuumEnvironment(space, rng=rng)
    agent = build_agent(config.agent_kind, space, rng)
    judge = PerformanceJudge(config.judge)
    env.add_object(agent, config.start)
    env.add_object(judge)
    for location in config.dirty:
        env.add_object(Dirt(), location)
    return env, agent, judge


def run_scenario(config: ScenarioConfig) -> ScenarioResult:
    """Run one scenario for ``config.steps`` ticks."""
    env, agent, judge = build_environment(config)
    start = env.get_location(agent)
    tracker = ActionTracker()
    env.add_observer(tracker)
    env.step(config.steps)

    scores = env.get_scores(agent) or {}
    score = scores.get(judge, MISSING_SCORE)
    logger.info(
        "%s start=%s dirty=%s -> %s (score %.1f)",
        config.agent_kind.value,
        start,
        list(config.dirty),
        tracker.get_actions(),
        score,
    )
    return ScenarioResult(
        config=config,
        actions=tracker.get_actions(),
        score=score,
        dirt_remaining=env.dirt_count(),
        grid=render(env),
    )


def run_batch(configs: list[ScenarioConfig]) -> list[ScenarioResult]:
    """Run independent scenarios one after another."""
    return [run_scenario(config) for config in configs]


def two_cell_scenarios(
    agent_kind: AgentKind,
    steps: int = NUM_STEPS,
    seed: int | None = None,
    judge: JudgeConfig | None = None,
) -> list[ScenarioConfig]:
    """All eight starting states of the two-square world (2 starts x 4 dirt layouts)."""
    judge_config = judge if judge is not None else JudgeConfig()
    configs: list[ScenarioConfig] = []
    for start, (left_dirty, right_dirty) in itertools.product(
        (LEFT, RIGHT), itertools.product((False, True), repeat=TWO_CELL_WIDTH)
    ):
        dirty = tuple(
            loc for loc, is_dirty in ((LEFT, left_dirty), (RIGHT, right_dirty)) if is_dirty
        )
        configs.append(
            ScenarioConfig(
                agent_kind=agent_kind,
                start=start,
                dirty=dirty,
                steps=steps,
                seed=seed,
                judge=judge_config,
            )
        )
    return configs


def summarize_scores(results: list[ScenarioResult]) -> dict[str, float | int]:
    """Return count, mean, min and max score over ``results``."""
    if not results:
        raise ValueError("results must not be empty")
    scores = [result.score for result in results]
    return {
        "runs": len(scores),
        "mean": statistics.mean(scores),
        "min": min(scores),
        "max": max(scores),
    }
