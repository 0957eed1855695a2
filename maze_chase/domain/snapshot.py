"""Read-only views of session state published after every tick.

Renderers and other consumers only ever see these frozen dataclasses; the
mutable agents and maze stay owned by the session.
"""

from __future__ import annotations

from dataclasses import dataclass

from maze_chase.domain.agents import Archetype, BehaviorMode
from maze_chase.domain.grid import Direction, Position


@dataclass(frozen=True)
class PlayerView:
    """Immutable snapshot of the player at one tick."""

    position: Position
    direction: Direction
    is_eating: bool


@dataclass(frozen=True)
class PursuerView:
    """Immutable snapshot of a single pursuer at one tick."""

    pursuer_id: str
    archetype: Archetype
    position: Position
    direction: Direction
    mode: BehaviorMode
    target: Position | None


@dataclass(frozen=True)
class SessionSnapshot:
    """Full session state at one tick."""

    tick: int
    grid: tuple[tuple[int, ...], ...]
    player: PlayerView
    pursuers: tuple[PursuerView, ...]
    score: int
    lives: int
    power_mode: bool
    power_mode_timer: float | None
    mode_index: int
    remaining_consumables: int
    game_over: bool
    cleared: bool
