"""Tests for vacuum_agents.vacuum.judges module."""

from __future__ import annotations

import pytest

from vacuum_agents.config.types import JudgeConfig
from vacuum_agents.vacuum.judges import PerformanceJudge
from vacuum_agents.vacuum.world import LEFT, ChangeKind, ChangePercept


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (ChangeKind.NO_OP, 0.0),
        (ChangeKind.MOVED, -1.0),
        (ChangeKind.BUMPED, -1.0),
        (ChangeKind.DIRT_REMOVED, 10.0),
    ],
)
def test_default_scores(kind: ChangeKind, expected: float) -> None:
    assert PerformanceJudge().execute(ChangePercept(kind, LEFT)) == expected


def test_bump_score_is_configurable() -> None:
    judge = PerformanceJudge(JudgeConfig(bump_score=0.0))
    assert judge.execute(ChangePercept(ChangeKind.BUMPED, LEFT)) == 0.0
    assert judge.execute(ChangePercept(ChangeKind.MOVED, LEFT)) == -1.0


def test_unrecognised_input_scores_zero() -> None:
    judge = PerformanceJudge()
    assert judge.execute("dirtRemoved") == 0.0  # type: ignore[arg-type]
    assert judge.execute(None) == 0.0  # type: ignore[arg-type]


def test_judge_is_stateless() -> None:
    judge = PerformanceJudge()
    change = ChangePercept(ChangeKind.DIRT_REMOVED, LEFT)
    assert judge.execute(change) == judge.execute(change) == 10.0
