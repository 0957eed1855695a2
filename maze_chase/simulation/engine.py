"""Engine surface consumed by input, rendering and score/lives collaborators.

The engine owns exactly one ``Session``. Collaborators write a single
requested direction, read snapshots, and receive score and life-lost
callbacks; ``start``/``reset`` replace the session wholesale. Scheduling
is left to the host: call ``tick`` with an elapsed time, or ``frame``
with a monotonically increasing timestamp.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from maze_chase.config.types import LevelConfig
from maze_chase.domain.grid import Direction
from maze_chase.domain.snapshot import SessionSnapshot
from maze_chase.simulation.session import Session
from maze_chase.simulation.step import EventKind, GameEvent, step

logger = logging.getLogger(__name__)

ScoreCallback = Callable[[int], None]
LifeLostCallback = Callable[[], None]


class GameEngine:
    """Drives a session one tick at a time and fans events out to callbacks."""

    def __init__(
        self,
        level: LevelConfig,
        on_score: ScoreCallback | None = None,
        on_life_lost: LifeLostCallback | None = None,
    ) -> None:
        self.level = level
        self.on_score = on_score
        self.on_life_lost = on_life_lost
        self.session = Session.create(level)
        self.events: tuple[GameEvent, ...] = ()
        self._requested: Direction | None = None
        self._last_timestamp: float | None = None

    def start(self) -> SessionSnapshot:
        """Begin a new game from the level data."""
        return self.reset()

    def reset(self) -> SessionSnapshot:
        """Atomically replace the session with a fresh one."""
        self.session = Session.create(self.level)
        self.events = ()
        self._requested = None
        self._last_timestamp = None
        logger.debug("session reset")
        return self.snapshot()

    def request_direction(self, direction: Direction) -> None:
        """Record the latest directional input; later calls overwrite earlier ones."""
        self._requested = direction

    def tick(self, elapsed_ms: float) -> SessionSnapshot:
        """Advance one tick and notify callbacks."""
        requested, self._requested = self._requested, None
        result = step(self.session, elapsed_ms, requested)
        self.events = result.events
        for event in result.events:
            if event.points > 0 and self.on_score is not None:
                self.on_score(event.points)
            if event.kind is EventKind.LIFE_LOST and self.on_life_lost is not None:
                self.on_life_lost()
        return self.snapshot()

    def frame(self, timestamp_ms: float) -> SessionSnapshot:
        """Tick using the time since the previous frame; the first frame moves nothing."""
        last, self._last_timestamp = self._last_timestamp, timestamp_ms
        elapsed = 0.0 if last is None else timestamp_ms - last
        return self.tick(elapsed)

    def snapshot(self) -> SessionSnapshot:
        return self.session.snapshot()

    @property
    def game_over(self) -> bool:
        return self.session.game_over
