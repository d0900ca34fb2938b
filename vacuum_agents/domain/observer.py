"""Passive listeners notified by an environment as the simulation runs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from vacuum_agents.config.constants import ACTION_SEPARATOR

if TYPE_CHECKING:
    from vacuum_agents.domain.entity import Agent
    from vacuum_agents.simulation.environment import Environment

logger = logging.getLogger(__name__)


def action_name(action: Any) -> str:
    """Display name of an action: the enum value when there is one."""
    return str(getattr(action, "value", action))


class Observer:
    """Base observer; every hook is a no-op until overridden."""

    def notify(self, message: str) -> None:
        pass

    def agent_added(self, agent: Agent, source: Environment) -> None:
        pass

    def agent_acted(self, agent: Agent, percept: Any, action: Any, source: Environment) -> None:
        pass


class ActionTracker(Observer):
    """Records every action performed, in order."""

    def __init__(self) -> None:
        self.actions: list[str] = []

    def agent_acted(self, agent: Agent, percept: Any, action: Any, source: Environment) -> None:
        self.actions.append(action_name(action))

    def get_actions(self) -> str:
        """Comma-separated action names, e.g. ``"suck, moveLeft"``."""
        return ACTION_SEPARATOR.join(self.actions)


class LoggingObserver(Observer):
    """Forwards environment events to ``logging``."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def notify(self, message: str) -> None:
        logger.log(self.level, "%s", message)

    def agent_added(self, agent: Agent, source: Environment) -> None:
        logger.log(self.level, "%r added at %s", agent, source.get_location(agent))

    def agent_acted(self, agent: Agent, percept: Any, action: Any, source: Environment) -> None:
        logger.log(self.level, "%r perceived %s -> %s", agent, percept, action_name(action))
