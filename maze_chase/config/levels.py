"""Built-in level data and JSON level loading.

Level files are JSON objects whose keys mirror ``LevelConfig`` fields.
Any key left out falls back to the built-in level. Positions are
``[x, y]`` pairs, directions are names (``"RIGHT"``), modes and archetypes
are their enum values, and an infinite mode duration is written as
``null``.
"""

from __future__ import annotations

import dataclasses
import json
import math
from pathlib import Path
from typing import Any

from maze_chase.config.types import LevelConfig, ModePhase, PursuerSpec
from maze_chase.domain.agents import Archetype, BehaviorMode
from maze_chase.domain.grid import Direction, Position

# 0 = empty, 1 = wall, 2 = dot, 3 = power pellet
LEVEL_1_GRID: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 3, 1, 1, 2, 1, 1, 1, 2, 1, 2, 1, 1, 1, 2, 1, 1, 3, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 2, 1, 2, 1, 1, 1, 1, 1, 2, 1, 2, 1, 1, 2, 1),
    (1, 2, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 2, 1),
    (1, 1, 1, 1, 2, 1, 1, 1, 0, 1, 0, 1, 1, 1, 2, 1, 1, 1, 1),
    (0, 0, 0, 1, 2, 1, 0, 0, 0, 0, 0, 0, 0, 1, 2, 1, 0, 0, 0),
    (1, 1, 1, 1, 2, 1, 0, 1, 1, 0, 1, 1, 0, 1, 2, 1, 1, 1, 1),
    (0, 0, 0, 0, 2, 0, 0, 1, 0, 0, 0, 1, 0, 0, 2, 0, 0, 0, 0),
    (1, 1, 1, 1, 2, 1, 0, 1, 1, 1, 1, 1, 0, 1, 2, 1, 1, 1, 1),
    (0, 0, 0, 1, 2, 1, 0, 0, 0, 0, 0, 0, 0, 1, 2, 1, 0, 0, 0),
    (1, 1, 1, 1, 2, 1, 0, 1, 1, 1, 1, 1, 0, 1, 2, 1, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 2, 1, 1, 1, 2, 1, 2, 1, 1, 1, 2, 1, 1, 2, 1),
    (1, 3, 2, 1, 2, 2, 2, 2, 2, 0, 2, 2, 2, 2, 2, 1, 2, 3, 1),
    (1, 1, 2, 1, 2, 1, 2, 1, 1, 1, 1, 1, 2, 1, 2, 1, 2, 1, 1),
    (1, 2, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 1, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 1, 1, 1, 1, 2, 1, 2, 1, 1, 1, 1, 1, 1, 2, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)

LEVEL_1_MODE_CYCLE: tuple[ModePhase, ...] = (
    ModePhase(BehaviorMode.PURSUIT, 15_000.0),
    ModePhase(BehaviorMode.SCATTER, 5_000.0),
    ModePhase(BehaviorMode.PURSUIT, 15_000.0),
    ModePhase(BehaviorMode.SCATTER, 5_000.0),
    ModePhase(BehaviorMode.PURSUIT, 15_000.0),
    ModePhase(BehaviorMode.SCATTER, 5_000.0),
    ModePhase(BehaviorMode.PURSUIT, math.inf),
)

LEVEL_1_PURSUERS: tuple[PursuerSpec, ...] = (
    PursuerSpec(
        pursuer_id="pursuer-1",
        archetype=Archetype.DIRECT,
        spawn=Position(1.0, 1.0),
        spawn_direction=Direction.RIGHT,
        scatter_corner=Position(18.0, 0.0),
        home=Position(9.0, 8.0),
    ),
    PursuerSpec(
        pursuer_id="pursuer-2",
        archetype=Archetype.AMBUSH,
        spawn=Position(17.0, 1.0),
        spawn_direction=Direction.LEFT,
        scatter_corner=Position(0.0, 0.0),
        home=Position(9.0, 9.0),
    ),
    PursuerSpec(
        pursuer_id="pursuer-3",
        archetype=Archetype.PINCER,
        spawn=Position(1.0, 19.0),
        spawn_direction=Direction.RIGHT,
        scatter_corner=Position(18.0, 20.0),
        home=Position(10.0, 9.0),
    ),
    PursuerSpec(
        pursuer_id="pursuer-4",
        archetype=Archetype.SHY,
        spawn=Position(17.0, 19.0),
        spawn_direction=Direction.LEFT,
        scatter_corner=Position(0.0, 20.0),
        home=Position(8.0, 9.0),
    ),
)


def default_level(seed: int = 0) -> LevelConfig:
    """Return the built-in 19x21 level."""
    return LevelConfig(
        grid=LEVEL_1_GRID,
        player_spawn=Position(9.0, 15.0),
        pursuers=LEVEL_1_PURSUERS,
        mode_cycle=LEVEL_1_MODE_CYCLE,
        seed=seed,
    )


# ---------------------------------------------------------------------------
# JSON parsing helpers
# ---------------------------------------------------------------------------


def _parse_position(raw: Any, label: str) -> Position:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{label} must be an [x, y] pair")
    try:
        return Position(float(raw[0]), float(raw[1]))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must contain numbers") from exc


def _parse_direction(raw: Any, label: str) -> Direction:
    try:
        return Direction[str(raw).upper()]
    except KeyError as exc:
        valid = ", ".join(d.name for d in Direction)
        raise ValueError(f"{label} must be one of {valid}") from exc


def _require_list(raw: Any, label: str) -> list[Any]:
    if not isinstance(raw, list):
        raise ValueError(f"{label} must be a JSON array")
    return raw


def _parse_grid(raw: Any) -> tuple[tuple[int, ...], ...]:
    rows = _require_list(raw, "grid")
    try:
        return tuple(
            tuple(int(cell) for cell in _require_list(row, "grid rows")) for row in rows
        )
    except (TypeError, ValueError) as exc:
        raise ValueError(f"grid must contain integer cell codes: {exc}") from exc


def _parse_mode_phase(raw: Any) -> ModePhase:
    if not isinstance(raw, dict):
        raise ValueError("mode_cycle entries must be JSON objects")
    try:
        mode = BehaviorMode(raw["mode"])
    except (KeyError, ValueError) as exc:
        raise ValueError("mode_cycle entries need a mode of 'pursuit' or 'scatter'") from exc
    duration = raw.get("duration_ms")
    if duration is None:
        return ModePhase(mode, math.inf)
    try:
        duration_ms = float(duration)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"mode_cycle duration_ms must be a number or null: {exc}") from exc
    return ModePhase(mode, duration_ms)


def _parse_pursuer(raw: Any) -> PursuerSpec:
    if not isinstance(raw, dict):
        raise ValueError("pursuer entries must be JSON objects")
    try:
        pursuer_id = str(raw["id"])
        archetype = Archetype(raw["archetype"])
    except (KeyError, ValueError) as exc:
        raise ValueError("pursuer entries need an id and a valid archetype") from exc
    return PursuerSpec(
        pursuer_id=pursuer_id,
        archetype=archetype,
        spawn=_parse_position(raw.get("spawn"), f"{pursuer_id}.spawn"),
        spawn_direction=_parse_direction(
            raw.get("spawn_direction", "NONE"), f"{pursuer_id}.spawn_direction"
        ),
        scatter_corner=_parse_position(raw.get("scatter_corner"), f"{pursuer_id}.scatter_corner"),
        home=_parse_position(raw.get("home"), f"{pursuer_id}.home"),
    )


_SCALAR_FIELDS = {
    "player_speed": float,
    "pursuer_speed": float,
    "dot_points": int,
    "power_pellet_points": int,
    "pursuer_points": int,
    "fright_duration_ms": float,
    "lives": int,
    "max_tick_ms": float,
    "substep": float,
    "corner_clearance": float,
    "capture_threshold": float,
    "seed": int,
}


def level_from_dict(data: dict[str, Any]) -> LevelConfig:
    """Build a level from a decoded JSON object, defaulting to the built-in level."""
    unknown = set(data) - set(_SCALAR_FIELDS) - {"grid", "player_spawn", "pursuers", "mode_cycle"}
    if unknown:
        raise ValueError(f"unknown level keys: {', '.join(sorted(unknown))}")

    overrides: dict[str, Any] = {}
    if "grid" in data:
        overrides["grid"] = _parse_grid(data["grid"])
    if "player_spawn" in data:
        overrides["player_spawn"] = _parse_position(data["player_spawn"], "player_spawn")
    if "pursuers" in data:
        pursuers = _require_list(data["pursuers"], "pursuers")
        overrides["pursuers"] = tuple(_parse_pursuer(raw) for raw in pursuers)
    if "mode_cycle" in data:
        phases = _require_list(data["mode_cycle"], "mode_cycle")
        overrides["mode_cycle"] = tuple(_parse_mode_phase(raw) for raw in phases)
    for key, cast in _SCALAR_FIELDS.items():
        if key in data:
            try:
                overrides[key] = cast(data[key])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{key} must be {cast.__name__}") from exc
    return dataclasses.replace(default_level(), **overrides)


def load_level(path: Path) -> LevelConfig:
    """Load a JSON level file."""
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"level file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"level file must contain a JSON object: {path}")
    return level_from_dict(data)
