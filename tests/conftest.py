"""Shared level builders for engine tests."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable
from typing import Any

import pytest

from maze_chase.config.types import LevelConfig, ModePhase, PursuerSpec
from maze_chase.domain.agents import Archetype, BehaviorMode
from maze_chase.domain.grid import Direction, Position

# Row 1 holds four sealed one-cell pockets for the pursuers; row 3 is the
# player's corridor: dots at x=1,2,4,5, a power pellet at x=3, empty x=6..9.
POCKET_GRID: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 1, 0, 1, 0, 1, 0, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 2, 2, 3, 2, 2, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)

POCKET_CELLS = ((1, 1), (3, 1), (5, 1), (7, 1))

ARCHETYPE_ORDER = (Archetype.DIRECT, Archetype.AMBUSH, Archetype.PINCER, Archetype.SHY)


def build_level(
    grid: tuple[tuple[int, ...], ...] = POCKET_GRID,
    *,
    player_spawn: tuple[int, int] = (6, 3),
    pursuer_cells: tuple[tuple[int, int], ...] = POCKET_CELLS,
    **overrides: Any,
) -> LevelConfig:
    """Build a small level; pursuers spawn (and live) at ``pursuer_cells``."""
    pursuers = tuple(
        PursuerSpec(
            pursuer_id=f"p{i + 1}",
            archetype=archetype,
            spawn=Position.of(cell),
            spawn_direction=Direction.NONE,
            scatter_corner=Position(0.0, 0.0),
            home=Position.of(cell),
        )
        for i, (archetype, cell) in enumerate(zip(ARCHETYPE_ORDER, pursuer_cells, strict=True))
    )
    level = LevelConfig(
        grid=grid,
        player_spawn=Position.of(player_spawn),
        pursuers=pursuers,
        mode_cycle=(
            ModePhase(BehaviorMode.PURSUIT, 20_000.0),
            ModePhase(BehaviorMode.SCATTER, 5_000.0),
            ModePhase(BehaviorMode.PURSUIT, math.inf),
        ),
    )
    return dataclasses.replace(level, **overrides) if overrides else level


@pytest.fixture
def level_factory() -> Callable[..., LevelConfig]:
    return build_level


@pytest.fixture
def pocket_level() -> LevelConfig:
    return build_level()
