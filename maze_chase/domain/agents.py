"""Mutable agent state for the player and the four pursuers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from maze_chase.domain.grid import Direction, Position


class Archetype(Enum):
    """Pursuer targeting personality."""

    DIRECT = "direct"
    AMBUSH = "ambush"
    PINCER = "pincer"
    SHY = "shy"


class BehaviorMode(Enum):
    """Per-pursuer behavior mode."""

    PURSUIT = "pursuit"
    SCATTER = "scatter"
    FRIGHTENED = "frightened"


@dataclass
class PlayerAgent:
    """The player-controlled agent."""

    position: Position
    spawn: Position
    speed: float
    direction: Direction = Direction.NONE
    requested_direction: Direction = Direction.NONE
    is_eating: bool = False

    def respawn(self) -> None:
        self.position = self.spawn
        self.direction = Direction.NONE
        self.requested_direction = Direction.NONE
        self.is_eating = False


@dataclass
class PursuerAgent:
    """One AI-controlled pursuer."""

    pursuer_id: str
    archetype: Archetype
    position: Position
    direction: Direction
    mode: BehaviorMode
    scatter_corner: Position
    home: Position
    spawn: Position
    spawn_direction: Direction
    speed: float
    target: Position | None = None

    def respawn(self, mode: BehaviorMode) -> None:
        self.position = self.spawn
        self.direction = self.spawn_direction
        self.mode = mode
        self.target = None

    def reverse(self) -> None:
        self.direction = self.direction.opposite
