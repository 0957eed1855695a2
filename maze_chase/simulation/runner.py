"""Headless autopilot sessions with Parquet trace output."""

from __future__ import annotations

import dataclasses
import logging
from random import Random
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from maze_chase.config.constants import FLUSH_THRESHOLD
from maze_chase.config.types import LevelConfig, RunConfig, SessionResult
from maze_chase.domain.grid import MOVES
from maze_chase.domain.snapshot import SessionSnapshot
from maze_chase.io.paths import event_log_path, logs_dir, session_summary_path, tick_log_path
from maze_chase.io.schemas import (
    EVENT_LOG_SCHEMA,
    PLAYER_AGENT_ID,
    SESSION_SUMMARY_SCHEMA,
    SESSION_SUMMARY_SCHEMA_VERSION,
    TICK_LOG_SCHEMA,
)
from maze_chase.simulation.engine import GameEngine
from maze_chase.simulation.persistence import empty_columns, flush_columns
from maze_chase.simulation.step import EventKind, GameEvent

logger = logging.getLogger(__name__)

# Offset between the level seed and the autopilot seed of one session.
_AUTOPILOT_SEED_OFFSET = 1_000_003


def _deterministic_run_id(seed: int) -> str:
    """Build reproducible run ID stable across runs for identical seeds."""
    return f"s{seed}"


def _append_agents(columns: dict[str, list[Any]], run_id: str, snapshot: SessionSnapshot) -> None:
    player = snapshot.player
    columns["run_id"].append(run_id)
    columns["tick"].append(snapshot.tick)
    columns["agent_id"].append(PLAYER_AGENT_ID)
    columns["x"].append(player.position.x)
    columns["y"].append(player.position.y)
    columns["direction"].append(player.direction.name)
    columns["mode"].append(None)
    for pursuer in snapshot.pursuers:
        columns["run_id"].append(run_id)
        columns["tick"].append(snapshot.tick)
        columns["agent_id"].append(pursuer.pursuer_id)
        columns["x"].append(pursuer.position.x)
        columns["y"].append(pursuer.position.y)
        columns["direction"].append(pursuer.direction.name)
        columns["mode"].append(pursuer.mode.value)


def _append_events(
    columns: dict[str, list[Any]], run_id: str, tick: int, events: tuple[GameEvent, ...]
) -> None:
    for event in events:
        columns["run_id"].append(run_id)
        columns["tick"].append(tick)
        columns["kind"].append(event.kind.value)
        columns["points"].append(event.points)
        columns["pursuer_id"].append(event.pursuer_id)
        columns["cell_x"].append(event.cell[0] if event.cell is not None else None)
        columns["cell_y"].append(event.cell[1] if event.cell is not None else None)


def run_sessions(level: LevelConfig, config: RunConfig) -> list[SessionResult]:
    """Play ``config.n_sessions`` autopilot sessions and persist their traces.

    Session ``i`` uses seed ``config.seed + i`` for the level RNG and a
    derived seed for the autopilot, so identical configs replay identically.
    A session stops early once it reaches a terminal state.
    """
    out_dir = config.out_dir
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    tick_writer: pq.ParquetWriter | None = None
    event_writer: pq.ParquetWriter | None = None
    tick_columns = empty_columns(TICK_LOG_SCHEMA)
    event_columns = empty_columns(EVENT_LOG_SCHEMA)
    results: list[SessionResult] = []

    try:
        for i in range(config.n_sessions):
            seed = config.seed + i
            run_id = _deterministic_run_id(seed)
            autopilot = Random(seed + _AUTOPILOT_SEED_OFFSET)
            counts = {"pellets": 0, "pursuers": 0, "lives": 0}

            engine = GameEngine(dataclasses.replace(level, seed=seed))
            snapshot = engine.start()
            if config.write_trace:
                _append_agents(tick_columns, run_id, snapshot)

            for tick in range(config.ticks):
                if tick % config.autopilot_interval == 0:
                    engine.request_direction(autopilot.choice(MOVES))
                snapshot = engine.tick(config.tick_ms)
                for event in engine.events:
                    if event.kind in (EventKind.DOT_EATEN, EventKind.POWER_PELLET_EATEN):
                        counts["pellets"] += 1
                    elif event.kind is EventKind.PURSUER_EATEN:
                        counts["pursuers"] += 1
                    elif event.kind is EventKind.LIFE_LOST:
                        counts["lives"] += 1
                if config.write_trace:
                    _append_agents(tick_columns, run_id, snapshot)
                    _append_events(event_columns, run_id, snapshot.tick, engine.events)
                    if len(tick_columns["run_id"]) >= FLUSH_THRESHOLD:
                        tick_writer = flush_columns(
                            tick_columns, tick_log_path(out_dir), tick_writer, TICK_LOG_SCHEMA
                        )
                    if len(event_columns["run_id"]) >= FLUSH_THRESHOLD:
                        event_writer = flush_columns(
                            event_columns, event_log_path(out_dir), event_writer, EVENT_LOG_SCHEMA
                        )
                if snapshot.game_over or snapshot.cleared:
                    break

            result = SessionResult(
                run_id=run_id,
                seed=seed,
                ticks_run=snapshot.tick,
                score=snapshot.score,
                lives=snapshot.lives,
                remaining_consumables=snapshot.remaining_consumables,
                pellets_eaten=counts["pellets"],
                pursuers_eaten=counts["pursuers"],
                lives_lost=counts["lives"],
                game_over=snapshot.game_over,
                cleared=snapshot.cleared,
            )
            logger.info(
                "%s: %d ticks, score %d, lives %d",
                run_id,
                result.ticks_run,
                result.score,
                result.lives,
            )
            results.append(result)

        if config.write_trace:
            tick_writer = flush_columns(
                tick_columns, tick_log_path(out_dir), tick_writer, TICK_LOG_SCHEMA
            )
            event_writer = flush_columns(
                event_columns, event_log_path(out_dir), event_writer, EVENT_LOG_SCHEMA
            )
            if event_writer is None:
                pq.write_table(EVENT_LOG_SCHEMA.empty_table(), event_log_path(out_dir))
    finally:
        if tick_writer is not None:
            tick_writer.close()
        if event_writer is not None:
            event_writer.close()

    summary_rows = [
        {"schema_version": SESSION_SUMMARY_SCHEMA_VERSION, **dataclasses.asdict(result)}
        for result in results
    ]
    pq.write_table(
        pa.Table.from_pylist(summary_rows, schema=SESSION_SUMMARY_SCHEMA),
        session_summary_path(out_dir),
    )
    return results
