"""Tests for vacuum_agents.config.types module."""

from __future__ import annotations

import dataclasses

import pytest

from vacuum_agents.config.types import AgentKind, JudgeConfig, ScenarioConfig


class TestJudgeConfig:
    def test_defaults(self) -> None:
        config = JudgeConfig()
        assert config.moved_score == -1.0
        assert config.dirt_removed_score == 10.0
        assert config.bump_score == -1.0
        assert config.no_op_score == 0.0

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            JudgeConfig().bump_score = 0.0  # type: ignore[misc]


class TestScenarioConfig:
    def test_defaults_describe_two_square_world(self) -> None:
        config = ScenarioConfig()
        assert config.grid_shape == (2,)
        assert config.start == (0,)
        assert config.dirty == ()
        assert config.steps == 7
        assert config.agent_kind is AgentKind.REFLEX

    def test_steps_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="steps"):
            ScenarioConfig(steps=0)

    def test_empty_grid_rejected(self) -> None:
        with pytest.raises(ValueError, match="grid_shape"):
            ScenarioConfig(grid_shape=())

    def test_zero_sized_dimension_rejected(self) -> None:
        with pytest.raises(ValueError, match="grid_shape"):
            ScenarioConfig(agent_kind=AgentKind.RANDOM, grid_shape=(3, 0))

    def test_start_outside_grid_rejected(self) -> None:
        with pytest.raises(ValueError, match="start"):
            ScenarioConfig(start=(2,))

    def test_start_with_wrong_dimension_rejected(self) -> None:
        with pytest.raises(ValueError, match="start"):
            ScenarioConfig(start=(0, 0))

    def test_random_start_allowed(self) -> None:
        assert ScenarioConfig(start=None).start is None

    def test_dirty_outside_grid_rejected(self) -> None:
        with pytest.raises(ValueError, match="dirty"):
            ScenarioConfig(dirty=((5,),))

    def test_duplicate_dirty_rejected(self) -> None:
        with pytest.raises(ValueError, match="distinct"):
            ScenarioConfig(dirty=((0,), (0,)))

    def test_reflex_agents_need_two_square_world(self) -> None:
        with pytest.raises(ValueError, match="two-square"):
            ScenarioConfig(agent_kind=AgentKind.MODEL_BASED, grid_shape=(3, 3), start=(0, 0))

    def test_random_agent_accepts_any_grid(self) -> None:
        config = ScenarioConfig(
            agent_kind=AgentKind.RANDOM, grid_shape=(3, 3), start=(1, 1), dirty=((0, 2),)
        )
        assert config.grid_shape == (3, 3)

    def test_agent_kind_values(self) -> None:
        assert {kind.value for kind in AgentKind} == {
            "reflex",
            "reflex_rules",
            "model_based",
            "random",
        }
