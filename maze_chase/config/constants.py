"""Centralized tunables for the chase simulation.

All magic numbers shared by the resolver, the pursuer AI and the engine
are defined here. Consuming modules should import from this module rather
than defining their own inline literals.
"""

from __future__ import annotations

MAX_TICK_MS = 100.0
"""Upper bound on the elapsed time consumed by a single tick."""

SUBSTEP = 0.1
"""Largest sub-step (grid units) used when integrating motion."""

CORNER_CLEARANCE = 0.3
"""Minimum distance the player keeps from a wall-occupied grid corner."""

PROBE_DISTANCE = 0.5
"""Look-ahead used to decide whether a pursuer is about to hit a wall."""

CAPTURE_THRESHOLD = 0.5
"""Per-axis distance below which a pursuer and the player collide."""

AMBUSH_LOOKAHEAD = 4
"""Cells ahead of the player targeted by the ambush archetype."""

PINCER_LOOKAHEAD = 2
"""Cells ahead of the player used as the pincer reflection pivot."""

SHY_RADIUS = 8.0
"""Distance inside which the shy archetype retreats to its corner."""

DEFAULT_LIVES = 3
"""Lives granted at session start."""

DOT_POINTS = 10
"""Default score for a dot."""

POWER_PELLET_POINTS = 50
"""Default score for a power pellet."""

PURSUER_POINTS = 200
"""Default score for catching a frightened pursuer."""

FRIGHT_DURATION_MS = 8000.0
"""Default length of the frightened override."""

FLUSH_THRESHOLD = 8_192
"""Flush buffered trace rows to Parquet once this in-memory row count is reached."""

MAX_RUN_TICKS = 10_000_000
"""Safety cap on total ticks across all sessions of one headless run."""
