"""Tests for vacuum_agents.domain.observer module."""

from __future__ import annotations

import logging

import pytest

from vacuum_agents.domain.observer import ActionTracker, LoggingObserver, Observer, action_name
from vacuum_agents.vacuum.agents import ReflexAgent
from vacuum_agents.vacuum.world import LEFT, VacuumAction, VacuumEnvironment, VacuumPercept


def test_action_name_uses_enum_value() -> None:
    assert action_name(VacuumAction.MOVE_LEFT) == "moveLeft"


def test_action_name_falls_back_to_str() -> None:
    assert action_name("jump") == "jump"


def test_base_observer_hooks_are_no_ops() -> None:
    env = VacuumEnvironment()
    agent = ReflexAgent()
    observer = Observer()
    observer.notify("hello")
    observer.agent_added(agent, env)
    observer.agent_acted(agent, VacuumPercept(LEFT, False), VacuumAction.SUCK, env)


def test_action_tracker_joins_in_order() -> None:
    env = VacuumEnvironment()
    agent = ReflexAgent()
    tracker = ActionTracker()
    percept = VacuumPercept(LEFT, False)
    for action in (VacuumAction.SUCK, VacuumAction.MOVE_RIGHT, VacuumAction.NO_OP):
        tracker.agent_acted(agent, percept, action, env)
    assert tracker.get_actions() == "suck, moveRight, noOp"


def test_action_tracker_empty() -> None:
    assert ActionTracker().get_actions() == ""


def test_logging_observer_emits_events(caplog: pytest.LogCaptureFixture) -> None:
    env = VacuumEnvironment()
    agent = ReflexAgent()
    env.add_observer(LoggingObserver())
    with caplog.at_level(logging.INFO, logger="vacuum_agents.domain.observer"):
        env.add_object(agent, LEFT)
        env.step()
        env.notify("done")
    messages = [record.getMessage() for record in caplog.records]
    assert any("added at (0,)" in message for message in messages)
    assert any("moveRight" in message for message in messages)
    assert "done" in messages
