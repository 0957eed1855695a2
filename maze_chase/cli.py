"""CLI entrypoint for headless autopilot runs.

This module owns CLI argument parsing only. All domain logic lives in the
package modules:

- ``maze_chase.config``             – level data and configuration dataclasses
- ``maze_chase.simulation.runner``  – ``run_sessions`` headless driver
- ``maze_chase.io.schemas``         – Parquet schemas for the written traces
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from maze_chase.config.levels import default_level, load_level
from maze_chase.config.types import RunConfig
from maze_chase.simulation.runner import run_sessions

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run headless maze-chase sessions")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--level", type=Path, default=None, help="JSON level file")
    parser.add_argument("--n-sessions", type=int, default=None)
    parser.add_argument("--ticks", type=int, default=None)
    parser.add_argument("--tick-ms", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--autopilot-interval", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--trace",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write per-tick agent and event logs (default: on)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=list(_LOG_LEVELS),
        default=None,
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for headless runs.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING").upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        level_raw = _get_val(args.level, "level", file_cfg, None)
        run_config = RunConfig(
            n_sessions=_get_int(args.n_sessions, "n_sessions", file_cfg, 1),
            ticks=_get_int(args.ticks, "ticks", file_cfg, 600),
            tick_ms=_get_float(args.tick_ms, "tick_ms", file_cfg, 1000.0 / 60.0),
            seed=_get_int(args.seed, "seed", file_cfg, 0),
            autopilot_interval=_get_int(
                args.autopilot_interval, "autopilot_interval", file_cfg, 30
            ),
            out_dir=Path(_get_str(args.out_dir, "out_dir", file_cfg, "data")),
            write_trace=_get_bool(args.trace, "write_trace", file_cfg, True),
        )
        level = (
            default_level()
            if level_raw is None
            else load_level(Path(_coerce_str(level_raw, "level")))
        )
    except FileNotFoundError as exc:
        parser.error(f"Level file not found: {exc.filename}")
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    results = run_sessions(level, run_config)
    summary = {
        "sessions": len(results),
        "ticks": run_config.ticks,
        "out_dir": str(run_config.out_dir),
        "mean_score": sum(r.score for r in results) / len(results),
        "best_score": max(r.score for r in results),
        "game_over": sum(1 for r in results if r.game_over),
        "cleared": sum(1 for r in results if r.cleared),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
