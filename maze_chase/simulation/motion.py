"""Continuous motion over the grid with wall-collision resolution.

Motion is integrated in sub-steps no longer than ``substep`` grid units so
a fast agent cannot tunnel through a one-cell wall. Any position whose
rounded cell is a wall (or lies outside the maze) is invalid; the player
additionally keeps ``clearance`` away from wall-occupied grid corners.

Invariant: after every call the agent's rounded cell is not a wall.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from maze_chase.config.constants import PROBE_DISTANCE
from maze_chase.domain.agents import PlayerAgent, PursuerAgent
from maze_chase.domain.grid import Direction, Position, snap
from maze_chase.domain.maze import Maze

_EPSILON = 1e-9


@dataclass(frozen=True)
class MoveResult:
    """Outcome of integrating one agent's motion for one tick."""

    position: Position
    blocked: bool


def is_valid_position(maze: Maze, position: Position, *, clearance: float = 0.0) -> bool:
    """Return True when ``position`` may be occupied.

    With ``clearance == 0`` this is a pure occupancy test on the rounded
    cell. A positive clearance also rejects positions closer than
    ``clearance`` to any wall among the four surrounding grid corners.
    """
    x, y = position.cell()
    if not maze.in_bounds(x, y) or maze.is_wall(x, y):
        return False
    if clearance <= 0:
        return True
    xs = {math.floor(position.x), math.ceil(position.x)}
    ys = {math.floor(position.y), math.ceil(position.y)}
    for cx in xs:
        for cy in ys:
            if maze.is_wall(cx, cy) and position.distance_to(Position(cx, cy)) < clearance:
                return False
    return True


def next_cell(position: Position, direction: Direction) -> Position:
    """Return the cell one step from the snapped ``position``."""
    return position.snapped().offset(direction)


def can_turn(
    maze: Maze, position: Position, direction: Direction, *, clearance: float = 0.0
) -> bool:
    """Snap-before-turn test: is the next cell from the snapped position open?"""
    if direction is Direction.NONE:
        return False
    return is_valid_position(maze, next_cell(position, direction), clearance=clearance)


def heading_blocked(maze: Maze, position: Position, direction: Direction) -> bool:
    """Return True when a short probe ahead of ``position`` lands in a wall."""
    if direction is Direction.NONE:
        return True
    return not is_valid_position(maze, position.offset(direction, PROBE_DISTANCE))


def advance(
    maze: Maze,
    position: Position,
    direction: Direction,
    distance: float,
    *,
    substep: float,
    clearance: float = 0.0,
) -> MoveResult:
    """Move ``distance`` grid units along ``direction`` without entering a wall.

    A rejected sub-step snaps the farthest safe position to the grid and
    reports ``blocked``. A completed move has its lateral coordinate
    forced to the nearest integer so agents never drift off a corridor.
    """
    if direction is Direction.NONE or distance <= 0:
        return MoveResult(position, blocked=False)

    current = position
    remaining = distance
    while remaining > _EPSILON:
        increment = min(substep, remaining)
        candidate = current.offset(direction, increment)
        if not is_valid_position(maze, candidate, clearance=clearance):
            return MoveResult(current.snapped(), blocked=True)
        current = candidate
        remaining -= increment

    if direction.is_horizontal:
        current = Position(current.x, float(snap(position.y)))
    else:
        current = Position(float(snap(position.x)), current.y)
    return MoveResult(current, blocked=False)


def resolve_player(
    maze: Maze,
    player: PlayerAgent,
    elapsed_ms: float,
    *,
    substep: float,
    clearance: float,
) -> bool:
    """Apply the direction-change protocol and move the player.

    A pending request that differs from the current heading is honored
    only when the snapped position's next cell is open; the player then
    snaps, turns and consumes the request without travelling this tick.
    Returns True when the player ran into a wall.
    """
    requested = player.requested_direction
    if requested is not Direction.NONE and requested is not player.direction:
        if can_turn(maze, player.position, requested, clearance=clearance):
            player.position = player.position.snapped()
            player.direction = requested
            player.requested_direction = Direction.NONE
            player.is_eating = True
            return False

    if player.direction is Direction.NONE:
        player.is_eating = False
        return False

    result = advance(
        maze,
        player.position,
        player.direction,
        player.speed * elapsed_ms / 1000.0,
        substep=substep,
        clearance=clearance,
    )
    player.position = result.position
    if result.blocked:
        player.direction = Direction.NONE
        player.is_eating = False
        return True
    player.is_eating = True
    return False


def move_pursuer(maze: Maze, pursuer: PursuerAgent, elapsed_ms: float, *, substep: float) -> bool:
    """Move a pursuer along its heading with the strict occupancy test.

    Returns True when the pursuer was stopped by a wall.
    """
    result = advance(
        maze,
        pursuer.position,
        pursuer.direction,
        pursuer.speed * elapsed_ms / 1000.0,
        substep=substep,
    )
    pursuer.position = result.position
    return result.blocked
