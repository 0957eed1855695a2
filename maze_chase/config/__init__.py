"""Configuration layer: constants, typed config dataclasses and level data."""

from maze_chase.config.constants import (
    CAPTURE_THRESHOLD,
    CORNER_CLEARANCE,
    FLUSH_THRESHOLD,
    MAX_RUN_TICKS,
    MAX_TICK_MS,
    PROBE_DISTANCE,
    SUBSTEP,
)
from maze_chase.config.levels import default_level, level_from_dict, load_level
from maze_chase.config.types import LevelConfig, ModePhase, PursuerSpec, RunConfig

__all__ = [
    "CAPTURE_THRESHOLD",
    "CORNER_CLEARANCE",
    "FLUSH_THRESHOLD",
    "LevelConfig",
    "MAX_RUN_TICKS",
    "MAX_TICK_MS",
    "ModePhase",
    "PROBE_DISTANCE",
    "PursuerSpec",
    "RunConfig",
    "SUBSTEP",
    "default_level",
    "level_from_dict",
    "load_level",
]
