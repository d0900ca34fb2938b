"""Domain layer: space, entities and observers."""

from vacuum_agents.domain.entity import Agent, Dirt, Entity, Judge
from vacuum_agents.domain.observer import ActionTracker, LoggingObserver, Observer, action_name
from vacuum_agents.domain.space import Interval, Location, Space

__all__ = [
    "ActionTracker",
    "Agent",
    "Dirt",
    "Entity",
    "Interval",
    "Judge",
    "Location",
    "LoggingObserver",
    "Observer",
    "Space",
    "action_name",
]
