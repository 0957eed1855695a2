"""Timed pursuit/scatter cycle shared by all pursuers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from maze_chase.config.types import ModePhase
from maze_chase.domain.agents import BehaviorMode

logger = logging.getLogger(__name__)


@dataclass
class ModeController:
    """Walks a fixed ``(mode, duration)`` table; the last entry never ends.

    The engine stops calling ``advance`` while power mode is active, which
    freezes both the index and the accumulator.
    """

    table: tuple[ModePhase, ...]
    index: int = 0
    elapsed_ms: float = 0.0

    def __post_init__(self) -> None:
        if not self.table:
            raise ValueError("mode table must not be empty")

    @property
    def current(self) -> ModePhase:
        return self.table[self.index]

    @property
    def current_mode(self) -> BehaviorMode:
        return self.current.mode

    def advance(self, elapsed_ms: float) -> BehaviorMode | None:
        """Accumulate time; return the new mode when a phase boundary is crossed."""
        if self.current.is_terminal:
            return None
        self.elapsed_ms += elapsed_ms
        if self.elapsed_ms < self.current.duration_ms:
            return None
        self.elapsed_ms = 0.0
        self.index = (self.index + 1) % len(self.table)
        logger.debug("mode phase %d: %s", self.index, self.current_mode.value)
        return self.current_mode

    def reset(self) -> None:
        self.index = 0
        self.elapsed_ms = 0.0
