"""Simulation engine: motion, pursuer AI, the tick step and headless runs."""

from maze_chase.simulation.engine import GameEngine
from maze_chase.simulation.modes import ModeController
from maze_chase.simulation.runner import run_sessions
from maze_chase.simulation.session import Session
from maze_chase.simulation.step import EventKind, GameEvent, TickResult, step

__all__ = [
    "EventKind",
    "GameEngine",
    "GameEvent",
    "ModeController",
    "Session",
    "TickResult",
    "run_sessions",
    "step",
]
