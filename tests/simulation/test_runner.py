"""Tests for headless autopilot sessions and their Parquet artifacts."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from pathlib import Path

import pyarrow.parquet as pq

from maze_chase.config.levels import default_level
from maze_chase.config.types import LevelConfig, RunConfig
from maze_chase.io.schemas import (
    EVENT_LOG_SCHEMA,
    PLAYER_AGENT_ID,
    SESSION_SUMMARY_SCHEMA,
    SESSION_SUMMARY_SCHEMA_VERSION,
    TICK_LOG_SCHEMA,
)
from maze_chase.simulation.runner import run_sessions


class TestRunSessions:
    def test_writes_all_artifacts(self, tmp_path: Path) -> None:
        run_sessions(default_level(), RunConfig(n_sessions=2, ticks=50, out_dir=tmp_path))
        logs = tmp_path / "logs"
        assert (logs / "tick_log.parquet").exists()
        assert (logs / "event_log.parquet").exists()
        assert (logs / "session_summary.parquet").exists()

    def test_columns_match_schemas(self, tmp_path: Path) -> None:
        run_sessions(default_level(), RunConfig(n_sessions=1, ticks=50, out_dir=tmp_path))
        logs = tmp_path / "logs"
        for name, schema in (
            ("tick_log.parquet", TICK_LOG_SCHEMA),
            ("event_log.parquet", EVENT_LOG_SCHEMA),
            ("session_summary.parquet", SESSION_SUMMARY_SCHEMA),
        ):
            table = pq.read_table(logs / name)
            assert table.column_names == schema.names

    def test_tick_log_has_one_row_per_agent_per_tick(self, tmp_path: Path) -> None:
        results = run_sessions(
            default_level(), RunConfig(n_sessions=2, ticks=40, out_dir=tmp_path)
        )
        table = pq.read_table(tmp_path / "logs" / "tick_log.parquet")
        expected = sum((r.ticks_run + 1) * 5 for r in results)
        assert table.num_rows == expected
        agent_ids = set(table.column("agent_id").to_pylist())
        assert agent_ids == {PLAYER_AGENT_ID, "pursuer-1", "pursuer-2", "pursuer-3", "pursuer-4"}

    def test_player_rows_have_no_mode(self, tmp_path: Path) -> None:
        run_sessions(default_level(), RunConfig(n_sessions=1, ticks=10, out_dir=tmp_path))
        rows = pq.read_table(tmp_path / "logs" / "tick_log.parquet").to_pylist()
        for row in rows:
            if row["agent_id"] == PLAYER_AGENT_ID:
                assert row["mode"] is None
            else:
                assert row["mode"] in {"pursuit", "scatter", "frightened"}

    def test_deterministic_run_ids(self, tmp_path: Path) -> None:
        results = run_sessions(
            default_level(), RunConfig(n_sessions=3, ticks=5, seed=10, out_dir=tmp_path)
        )
        assert [r.run_id for r in results] == ["s10", "s11", "s12"]
        assert [r.seed for r in results] == [10, 11, 12]

    def test_identical_configs_replay_identically(self, tmp_path: Path) -> None:
        config = RunConfig(n_sessions=2, ticks=300, seed=4, out_dir=tmp_path / "a")
        first = run_sessions(default_level(), config)
        second = run_sessions(default_level(), dataclasses.replace(config, out_dir=tmp_path / "b"))
        assert first == second
        a = pq.read_table(tmp_path / "a" / "logs" / "tick_log.parquet")
        b = pq.read_table(tmp_path / "b" / "logs" / "tick_log.parquet")
        assert a.equals(b)

    def test_summary_rows(self, tmp_path: Path) -> None:
        results = run_sessions(
            default_level(), RunConfig(n_sessions=2, ticks=20, out_dir=tmp_path)
        )
        rows = pq.read_table(tmp_path / "logs" / "session_summary.parquet").to_pylist()
        assert len(rows) == 2
        for row, result in zip(rows, results):
            assert row["schema_version"] == SESSION_SUMMARY_SCHEMA_VERSION
            assert row["run_id"] == result.run_id
            assert row["score"] == result.score

    def test_score_matches_event_points(self, tmp_path: Path) -> None:
        results = run_sessions(
            default_level(), RunConfig(n_sessions=1, ticks=600, out_dir=tmp_path)
        )
        events = pq.read_table(tmp_path / "logs" / "event_log.parquet")
        assert sum(events.column("points").to_pylist()) == results[0].score

    def test_no_trace_writes_summary_only(self, tmp_path: Path) -> None:
        run_sessions(
            default_level(),
            RunConfig(n_sessions=1, ticks=10, out_dir=tmp_path, write_trace=False),
        )
        logs = tmp_path / "logs"
        assert not (logs / "tick_log.parquet").exists()
        assert not (logs / "event_log.parquet").exists()
        assert (logs / "session_summary.parquet").exists()

    def test_stops_at_terminal_state(
        self, tmp_path: Path, level_factory: Callable[..., LevelConfig]
    ) -> None:
        level = level_factory(
            grid=(
                (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
                (1, 0, 1, 0, 1, 0, 1, 0, 1, 1, 1),
                (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
                (1, 0, 0, 0, 0, 0, 2, 0, 0, 0, 1),
                (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
            )
        )
        results = run_sessions(level, RunConfig(n_sessions=1, ticks=100, out_dir=tmp_path))
        assert results[0].cleared
        assert results[0].ticks_run == 1
        assert results[0].remaining_consumables == 0
