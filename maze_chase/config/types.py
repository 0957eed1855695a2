"""Configuration dataclasses for levels and headless runs.

All frozen dataclasses that parameterise a level and a batch of headless
sessions live here. Level data is validated once, up front, so the engine
can treat it as well-formed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

from maze_chase.config.constants import (
    CAPTURE_THRESHOLD,
    CORNER_CLEARANCE,
    DEFAULT_LIVES,
    DOT_POINTS,
    FRIGHT_DURATION_MS,
    MAX_RUN_TICKS,
    MAX_TICK_MS,
    POWER_PELLET_POINTS,
    PURSUER_POINTS,
    SUBSTEP,
)
from maze_chase.domain.agents import Archetype, BehaviorMode
from maze_chase.domain.grid import CellKind, Direction, Position

__all__ = [
    "MAX_RUN_TICKS",
    "LevelConfig",
    "ModePhase",
    "PursuerSpec",
    "RunConfig",
    "SessionResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SessionResult:
    """Top-level result for one headless session."""

    run_id: str
    seed: int
    ticks_run: int
    score: int
    lives: int
    remaining_consumables: int
    pellets_eaten: int
    pursuers_eaten: int
    lives_lost: int
    game_over: bool
    cleared: bool


# ---------------------------------------------------------------------------
# Level data
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModePhase:
    """One entry of the scripted pursuit/scatter timetable."""

    mode: BehaviorMode
    duration_ms: float

    def __post_init__(self) -> None:
        if self.mode is BehaviorMode.FRIGHTENED:
            raise ValueError("mode cycle cannot contain the frightened mode")
        if not self.duration_ms > 0:
            raise ValueError("mode phase duration_ms must be > 0")

    @property
    def is_terminal(self) -> bool:
        return math.isinf(self.duration_ms)


@dataclass(frozen=True)
class PursuerSpec:
    """Spawn and corner data for one pursuer."""

    pursuer_id: str
    archetype: Archetype
    spawn: Position
    spawn_direction: Direction
    scatter_corner: Position
    home: Position


@dataclass(frozen=True)
class LevelConfig:
    """Immutable description of the single static level."""

    grid: tuple[tuple[int, ...], ...]
    player_spawn: Position
    pursuers: tuple[PursuerSpec, ...]
    mode_cycle: tuple[ModePhase, ...]
    player_speed: float = 3.5
    pursuer_speed: float = 2.0
    dot_points: int = DOT_POINTS
    power_pellet_points: int = POWER_PELLET_POINTS
    pursuer_points: int = PURSUER_POINTS
    fright_duration_ms: float = FRIGHT_DURATION_MS
    lives: int = DEFAULT_LIVES
    max_tick_ms: float = MAX_TICK_MS
    substep: float = SUBSTEP
    corner_clearance: float = CORNER_CLEARANCE
    capture_threshold: float = CAPTURE_THRESHOLD
    seed: int = 0

    def __post_init__(self) -> None:
        if not self.grid or not self.grid[0]:
            raise ValueError("grid must not be empty")
        width = len(self.grid[0])
        if any(len(row) != width for row in self.grid):
            raise ValueError("grid rows must all have the same length")
        codes = {kind.value for kind in CellKind}
        if any(cell not in codes for row in self.grid for cell in row):
            raise ValueError(f"grid cells must be one of {sorted(codes)}")
        self._require_open_cell(self.player_spawn, "player_spawn")

        archetypes = [spec.archetype for spec in self.pursuers]
        if sorted(a.value for a in archetypes) != sorted(a.value for a in Archetype):
            raise ValueError("pursuers must contain exactly one spec per archetype")
        ids = [spec.pursuer_id for spec in self.pursuers]
        if len(set(ids)) != len(ids):
            raise ValueError("pursuer ids must be unique")
        for spec in self.pursuers:
            self._require_open_cell(spec.spawn, f"{spec.pursuer_id}.spawn")
            self._require_open_cell(spec.home, f"{spec.pursuer_id}.home")

        if not self.mode_cycle:
            raise ValueError("mode_cycle must not be empty")
        if not self.mode_cycle[-1].is_terminal:
            raise ValueError("the last mode_cycle entry must have an infinite duration")
        if any(phase.is_terminal for phase in self.mode_cycle[:-1]):
            raise ValueError("only the last mode_cycle entry may be infinite")

        if self.player_speed <= 0 or self.pursuer_speed <= 0:
            raise ValueError("speeds must be > 0")
        if min(self.dot_points, self.power_pellet_points, self.pursuer_points) < 0:
            raise ValueError("point values must be >= 0")
        if self.fright_duration_ms <= 0:
            raise ValueError("fright_duration_ms must be > 0")
        if self.lives < 1:
            raise ValueError("lives must be >= 1")
        if self.max_tick_ms <= 0:
            raise ValueError("max_tick_ms must be > 0")
        if self.substep <= 0:
            raise ValueError("substep must be > 0")
        if self.corner_clearance < 0:
            raise ValueError("corner_clearance must be >= 0")
        if self.capture_threshold <= 0:
            raise ValueError("capture_threshold must be > 0")

    def _require_open_cell(self, position: Position, label: str) -> None:
        x, y = position.cell()
        if not (0 <= y < len(self.grid) and 0 <= x < len(self.grid[0])):
            raise ValueError(f"{label} is outside the grid")
        if self.grid[y][x] == CellKind.WALL.value:
            raise ValueError(f"{label} is on a wall")

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)


# ---------------------------------------------------------------------------
# Headless runs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Settings for a batch of headless autopilot sessions."""

    n_sessions: int = 1
    ticks: int = 600
    tick_ms: float = 1000.0 / 60.0
    seed: int = 0
    autopilot_interval: int = 30
    """Ticks between two autopilot direction requests."""
    out_dir: Path = field(default_factory=lambda: Path("data"))
    write_trace: bool = True

    def __post_init__(self) -> None:
        if self.n_sessions < 1:
            raise ValueError("n_sessions must be >= 1")
        if self.ticks < 1:
            raise ValueError("ticks must be >= 1")
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be > 0")
        if self.autopilot_interval < 1:
            raise ValueError("autopilot_interval must be >= 1")
        if self.n_sessions * self.ticks > MAX_RUN_TICKS:
            raise ValueError("run workload exceeds safety threshold; reduce n_sessions/ticks")
