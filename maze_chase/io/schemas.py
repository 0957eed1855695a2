"""Parquet schema definitions for headless session artifacts.

All Arrow schemas used for persisting tick traces, event logs and session
summaries are centralised here so that the runner and its tests work
against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

SESSION_SUMMARY_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Per-tick traces
# ---------------------------------------------------------------------------

TICK_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("agent_id", pa.string()),
        ("x", pa.float64()),
        ("y", pa.float64()),
        ("direction", pa.string()),
        ("mode", pa.string()),
    ]
)

EVENT_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("kind", pa.string()),
        ("points", pa.int64()),
        ("pursuer_id", pa.string()),
        ("cell_x", pa.int64()),
        ("cell_y", pa.int64()),
    ]
)

# ---------------------------------------------------------------------------
# Session summaries
# ---------------------------------------------------------------------------

SESSION_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("seed", pa.int64()),
        ("ticks_run", pa.int64()),
        ("score", pa.int64()),
        ("lives", pa.int64()),
        ("remaining_consumables", pa.int64()),
        ("pellets_eaten", pa.int64()),
        ("pursuers_eaten", pa.int64()),
        ("lives_lost", pa.int64()),
        ("game_over", pa.bool_()),
        ("cleared", pa.bool_()),
    ]
)

PLAYER_AGENT_ID = "player"
"""``agent_id`` used for the player in tick logs."""
