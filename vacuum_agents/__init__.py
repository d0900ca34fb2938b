"""Agents, judges and environments for the textbook vacuum world."""

__version__ = "0.1.0"
