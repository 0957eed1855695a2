"""Greedy next-direction selection for pursuers.

Decisions are made from the snapped position: a direction is a candidate
when the adjacent cell in that direction is open.
"""

from __future__ import annotations

from random import Random

from maze_chase.domain.grid import MOVES, Direction, Position
from maze_chase.domain.maze import Maze
from maze_chase.simulation.motion import can_turn, next_cell


def valid_directions(maze: Maze, position: Position, *, clearance: float = 0.0) -> list[Direction]:
    """Return open directions from ``position`` in ``UP, RIGHT, DOWN, LEFT`` order."""
    return [d for d in MOVES if can_turn(maze, position, d, clearance=clearance)]


def choose_direction(
    position: Position,
    target: Position,
    maze: Maze,
    current_direction: Direction,
    *,
    clearance: float = 0.0,
) -> Direction:
    """Pick the open direction whose next cell is closest to ``target``.

    Reversing is excluded unless it is the only open direction. Ties go to
    the earlier direction in ``MOVES``; ``NONE`` means nothing is open.
    """
    options = valid_directions(maze, position, clearance=clearance)
    if not options:
        return Direction.NONE
    reverse = current_direction.opposite
    candidates = [d for d in options if d is not reverse or len(options) == 1]
    # min() keeps the first of equal keys, which is the enumeration order.
    return min(candidates, key=lambda d: next_cell(position, d).distance_to(target))


def random_direction(maze: Maze, position: Position, rng: Random) -> Direction:
    """Pick uniformly among the open directions, or ``NONE`` if there are none."""
    options = valid_directions(maze, position)
    if not options:
        return Direction.NONE
    return rng.choice(options)
