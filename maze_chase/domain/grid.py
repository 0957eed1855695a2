"""Grid primitives: directions, cell kinds and continuous positions.

Coordinates are ``(x, y)`` in grid units with ``y`` growing downwards, so
``UP`` decreases ``y``. Fractional values mean an agent is in transit
between two cells.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Heading of an agent. ``NONE`` is the stopped state."""

    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NONE: Direction.NONE,
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}

MOVES: tuple[Direction, ...] = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
"""Movement directions in tie-break order."""


class CellKind(Enum):
    """Contents of one maze cell. Values are the level-file codes."""

    EMPTY = 0
    WALL = 1
    DOT = 2
    POWER_PELLET = 3


CONSUMABLE_KINDS = (CellKind.DOT, CellKind.POWER_PELLET)


def snap(value: float) -> int:
    """Round half-up to the nearest grid index (``2.5 -> 3``, ``-0.5 -> 0``)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Position:
    """Continuous position in grid units."""

    x: float
    y: float

    def cell(self) -> tuple[int, int]:
        """Return the integer cell this position rounds to."""
        return snap(self.x), snap(self.y)

    def snapped(self) -> Position:
        x, y = self.cell()
        return Position(float(x), float(y))

    def offset(self, direction: Direction, distance: float = 1.0) -> Position:
        dx, dy = direction.delta
        return Position(self.x + dx * distance, self.y + dy * distance)

    def distance_to(self, other: Position) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    @classmethod
    def of(cls, cell: tuple[int, int]) -> Position:
        return cls(float(cell[0]), float(cell[1]))
