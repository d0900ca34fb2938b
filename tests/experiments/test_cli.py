"""Tests for experiments/cli.py: argument parsing and subcommand dispatch."""

from __future__ import annotations

import json
import sys
from unittest.mock import patch

import pytest

from vacuum_agents.config.types import AgentKind
from vacuum_agents.experiments.cli import (
    _parse_agent_kind,
    _parse_agent_kinds,
    _parse_dirty,
    _parse_grid_shape,
    _parse_start,
    main,
)


def test_parse_agent_kind_valid() -> None:
    assert _parse_agent_kind("model_based") is AgentKind.MODEL_BASED


def test_parse_agent_kind_invalid() -> None:
    with pytest.raises(ValueError, match="agent must be one of"):
        _parse_agent_kind("genius")


def test_parse_agent_kinds_rejects_duplicates() -> None:
    with pytest.raises(ValueError, match="distinct"):
        _parse_agent_kinds("reflex,reflex")


def test_parse_agent_kinds_rejects_empty() -> None:
    with pytest.raises(ValueError, match="empty"):
        _parse_agent_kinds(" , ")


def test_parse_grid_shape() -> None:
    assert _parse_grid_shape("2") == (2,)
    assert _parse_grid_shape("3x4") == (3, 4)


def test_parse_grid_shape_invalid() -> None:
    with pytest.raises(ValueError):
        _parse_grid_shape("3xfoo")
    with pytest.raises(ValueError):
        _parse_grid_shape("0x2")


def test_parse_start() -> None:
    assert _parse_start("random") is None
    assert _parse_start("1") == (1,)
    assert _parse_start("2, 0") == (2, 0)


def test_parse_dirty() -> None:
    assert _parse_dirty("") == ()
    assert _parse_dirty("0;1") == ((0,), (1,))
    assert _parse_dirty("0,0;2,1") == ((0, 0), (2, 1))


def test_main_no_subcommand_exits() -> None:
    with patch.object(sys, "argv", ["vacuum-agents"]):
        with pytest.raises(SystemExit):
            main()


def test_main_run_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["vacuum-agents", "run", "--agent", "model_based", "--start", "1", "--dirty", "0;1"]
    with patch.object(sys, "argv", argv):
        main()
    summary = json.loads(capsys.readouterr().out)
    assert summary["mode"] == "run"
    assert summary["actions"] == "suck, moveLeft, suck, noOp, noOp, noOp, noOp"
    assert summary["score"] == 19.0
    assert summary["dirt_remaining"] == 0
    assert "grid" not in summary


def test_main_run_with_render(capsys: pytest.CaptureFixture[str]) -> None:
    main(["run", "--start", "0", "--dirty", "1", "--steps", "1", "--render"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["grid"] == [".@"]


def test_main_run_bad_agent_exits() -> None:
    with pytest.raises(SystemExit):
        main(["run", "--agent", "genius"])


def test_main_run_bad_config_exits() -> None:
    with pytest.raises(SystemExit):
        main(["run", "--start", "7"])


def test_main_compare(capsys: pytest.CaptureFixture[str]) -> None:
    main(["compare", "--agents", "reflex,model_based", "--steps", "7"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["mode"] == "compare"
    assert set(summary["agents"]) == {"reflex", "model_based"}
    assert summary["agents"]["reflex"]["runs"] == 8
    assert summary["agents"]["model_based"]["mean"] > summary["agents"]["reflex"]["mean"]
