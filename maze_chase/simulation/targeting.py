"""Per-archetype aim points for pursuers.

``compute_target`` is the only entry point. Scatter and frightened modes
override the archetype; in pursuit mode the archetype's strategy is looked
up in ``_STRATEGIES``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from random import Random

from maze_chase.config.constants import AMBUSH_LOOKAHEAD, PINCER_LOOKAHEAD, SHY_RADIUS
from maze_chase.domain.agents import Archetype, BehaviorMode, PursuerAgent
from maze_chase.domain.grid import Direction, Position
from maze_chase.domain.maze import Maze


@dataclass(frozen=True)
class TargetView:
    """The slice of session state the strategies may read."""

    maze: Maze
    player_position: Position
    player_direction: Direction
    direct_position: Position | None
    """Live position of the direct-archetype pursuer, if there is one."""


def _target_direct(pursuer: PursuerAgent, view: TargetView) -> Position:
    return view.player_position


def _target_ambush(pursuer: PursuerAgent, view: TargetView) -> Position:
    return view.player_position.offset(view.player_direction, AMBUSH_LOOKAHEAD)


def _target_pincer(pursuer: PursuerAgent, view: TargetView) -> Position:
    if view.direct_position is None:
        return view.player_position
    ahead = view.player_position.offset(view.player_direction, PINCER_LOOKAHEAD)
    pivot = view.direct_position
    return Position(2 * ahead.x - pivot.x, 2 * ahead.y - pivot.y)


def _target_shy(pursuer: PursuerAgent, view: TargetView) -> Position:
    if pursuer.position.distance_to(view.player_position) > SHY_RADIUS:
        return view.player_position
    return pursuer.scatter_corner


_STRATEGIES: dict[Archetype, Callable[[PursuerAgent, TargetView], Position]] = {
    Archetype.DIRECT: _target_direct,
    Archetype.AMBUSH: _target_ambush,
    Archetype.PINCER: _target_pincer,
    Archetype.SHY: _target_shy,
}


def random_reachable_cell(maze: Maze, position: Position, rng: Random) -> Position:
    """Pick a uniformly random cell connected to ``position``'s cell."""
    cells = maze.reachable_cells(position.cell())
    if not cells:
        return position
    return Position.of(rng.choice(cells))


def compute_target(pursuer: PursuerAgent, view: TargetView, rng: Random) -> Position:
    """Return the position ``pursuer`` steers toward in its current mode."""
    if pursuer.mode is BehaviorMode.FRIGHTENED:
        return random_reachable_cell(view.maze, pursuer.position, rng)
    if pursuer.mode is BehaviorMode.SCATTER:
        return pursuer.scatter_corner
    return _STRATEGIES[pursuer.archetype](pursuer, view)
