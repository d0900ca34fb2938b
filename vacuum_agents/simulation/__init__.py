"""Simulation engine: the generic environment step loop."""

from vacuum_agents.simulation.environment import Environment

__all__ = ["Environment"]
