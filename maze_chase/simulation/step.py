"""One simulation tick.

Within a tick the player moves strictly before the pursuers, and
collisions are resolved strictly after both, so every collision outcome
reflects the fully updated positions of that tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from maze_chase.domain.agents import BehaviorMode, PursuerAgent
from maze_chase.domain.grid import CellKind, Direction
from maze_chase.simulation.motion import heading_blocked, move_pursuer, resolve_player
from maze_chase.simulation.pathing import choose_direction, random_direction
from maze_chase.simulation.session import Session
from maze_chase.simulation.targeting import compute_target

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Things that can happen during a tick."""

    DOT_EATEN = "dot_eaten"
    POWER_PELLET_EATEN = "power_pellet_eaten"
    PURSUER_EATEN = "pursuer_eaten"
    LIFE_LOST = "life_lost"
    PLAYER_BLOCKED = "player_blocked"
    MODE_CHANGED = "mode_changed"
    POWER_MODE_ENDED = "power_mode_ended"
    GAME_OVER = "game_over"
    MAZE_CLEARED = "maze_cleared"


@dataclass(frozen=True)
class GameEvent:
    """A single tick event. Scoring events carry positive ``points``."""

    kind: EventKind
    points: int = 0
    pursuer_id: str | None = None
    cell: tuple[int, int] | None = None
    mode: BehaviorMode | None = None


@dataclass(frozen=True)
class TickResult:
    """The mutated session plus what happened during the tick."""

    session: Session
    events: tuple[GameEvent, ...]
    elapsed_ms: float

    @property
    def score_delta(self) -> int:
        return sum(event.points for event in self.events)

    def of_kind(self, kind: EventKind) -> list[GameEvent]:
        return [event for event in self.events if event.kind is kind]


def clamp_elapsed(elapsed_ms: float, max_tick_ms: float) -> float:
    """Bound a frame's elapsed time to ``[0, max_tick_ms]``."""
    return min(max(elapsed_ms, 0.0), max_tick_ms)


def step(
    session: Session,
    elapsed_ms: float,
    requested: Direction | None = None,
) -> TickResult:
    """Advance ``session`` by one tick of ``elapsed_ms`` milliseconds.

    ``requested`` overwrites the player's pending direction request when
    given. A session that has already ended is returned untouched.
    """
    if session.terminal:
        return TickResult(session=session, events=(), elapsed_ms=0.0)

    level = session.level
    dt = clamp_elapsed(elapsed_ms, level.max_tick_ms)
    if requested is not None:
        session.player.requested_direction = requested
    session.tick += 1
    events: list[GameEvent] = []

    blocked = resolve_player(
        session.maze,
        session.player,
        dt,
        substep=level.substep,
        clearance=level.corner_clearance,
    )
    if blocked:
        events.append(GameEvent(EventKind.PLAYER_BLOCKED, cell=session.player.position.cell()))

    for pursuer in session.pursuers:
        _steer(session, pursuer)
        if move_pursuer(session.maze, pursuer, dt, substep=level.substep):
            _steer(session, pursuer, force=True)

    if not session.power_mode:
        new_mode = session.modes.advance(dt)
        if new_mode is not None:
            for pursuer in session.pursuers:
                pursuer.mode = new_mode
                pursuer.reverse()
            events.append(GameEvent(EventKind.MODE_CHANGED, mode=new_mode))

    if session.power_timer is not None:
        session.power_timer -= dt
        if session.power_timer <= 0:
            session.power_timer = None
            restored = session.modes.current_mode
            for pursuer in session.pursuers:
                pursuer.mode = restored
            logger.debug("power mode ended at tick %d", session.tick)
            events.append(GameEvent(EventKind.POWER_MODE_ENDED, mode=restored))

    _resolve_pellet(session, events)
    _resolve_captures(session, events)

    if not session.game_over and session.remaining_consumables == 0:
        session.cleared = True
        logger.info("maze cleared at tick %d with score %d", session.tick, session.score)
        events.append(GameEvent(EventKind.MAZE_CLEARED))

    return TickResult(session=session, events=tuple(events), elapsed_ms=dt)


def _steer(session: Session, pursuer: PursuerAgent, *, force: bool = False) -> None:
    """Recompute a pursuer's heading when it is stopped or facing a wall."""
    maze = session.maze
    if not force and pursuer.direction is not Direction.NONE:
        if not heading_blocked(maze, pursuer.position, pursuer.direction):
            return
    pursuer.target = compute_target(pursuer, session.target_view(), session.rng)
    if pursuer.mode is BehaviorMode.FRIGHTENED:
        direction = random_direction(maze, pursuer.position, session.rng)
    else:
        direction = choose_direction(pursuer.position, pursuer.target, maze, pursuer.direction)
    if direction is not pursuer.direction:
        pursuer.position = pursuer.position.snapped()
    pursuer.direction = direction


def _start_power_mode(session: Session) -> None:
    session.power_timer = session.level.fright_duration_ms
    for pursuer in session.pursuers:
        pursuer.mode = BehaviorMode.FRIGHTENED
        pursuer.reverse()
    logger.debug("power mode started at tick %d", session.tick)


def _resolve_pellet(session: Session, events: list[GameEvent]) -> None:
    x, y = session.player.position.cell()
    eaten = session.maze.consume(x, y)
    if eaten is None:
        return
    session.remaining_consumables = session.maze.remaining_consumables()
    level = session.level
    if eaten is CellKind.DOT:
        session.score += level.dot_points
        events.append(GameEvent(EventKind.DOT_EATEN, points=level.dot_points, cell=(x, y)))
        return
    session.score += level.power_pellet_points
    events.append(
        GameEvent(EventKind.POWER_PELLET_EATEN, points=level.power_pellet_points, cell=(x, y))
    )
    _start_power_mode(session)


def _resolve_captures(session: Session, events: list[GameEvent]) -> None:
    threshold = session.level.capture_threshold
    player = session.player.position
    for pursuer in session.pursuers:
        if abs(player.x - pursuer.position.x) >= threshold:
            continue
        if abs(player.y - pursuer.position.y) >= threshold:
            continue
        if pursuer.mode is BehaviorMode.FRIGHTENED:
            if session.power_mode:
                points = session.level.pursuer_points
                session.score += points
                pursuer.position = pursuer.home
                pursuer.direction = Direction.NONE
                pursuer.target = None
                events.append(
                    GameEvent(EventKind.PURSUER_EATEN, points=points, pursuer_id=pursuer.pursuer_id)
                )
            continue

        session.lives -= 1
        events.append(GameEvent(EventKind.LIFE_LOST, pursuer_id=pursuer.pursuer_id))
        logger.info(
            "life lost to %s at tick %d (%d left)", pursuer.pursuer_id, session.tick, session.lives
        )
        session.respawn_all()
        if session.lives <= 0:
            session.game_over = True
            logger.info("game over at tick %d with score %d", session.tick, session.score)
            events.append(GameEvent(EventKind.GAME_OVER))
        return
