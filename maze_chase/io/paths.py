"""Path construction helpers for headless run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def tick_log_path(out_dir: Path) -> Path:
    """Return path to the per-agent tick trace Parquet file."""
    return logs_dir(out_dir) / "tick_log.parquet"


def event_log_path(out_dir: Path) -> Path:
    """Return path to the event log Parquet file."""
    return logs_dir(out_dir) / "event_log.parquet"


def session_summary_path(out_dir: Path) -> Path:
    """Return path to the per-session summary Parquet file."""
    return logs_dir(out_dir) / "session_summary.parquet"
