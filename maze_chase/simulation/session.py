"""Session state: the single owned value mutated by the tick function."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from maze_chase.config.types import LevelConfig
from maze_chase.domain.agents import Archetype, PlayerAgent, PursuerAgent
from maze_chase.domain.maze import Maze
from maze_chase.domain.snapshot import PlayerView, PursuerView, SessionSnapshot
from maze_chase.simulation.modes import ModeController
from maze_chase.simulation.targeting import TargetView


@dataclass
class Session:
    """Everything that changes while a game is played."""

    level: LevelConfig
    maze: Maze
    player: PlayerAgent
    pursuers: list[PursuerAgent]
    modes: ModeController
    rng: Random
    lives: int
    remaining_consumables: int
    score: int = 0
    power_timer: float | None = None
    tick: int = 0
    game_over: bool = False
    cleared: bool = False

    @classmethod
    def create(cls, level: LevelConfig) -> Session:
        """Build a fresh session from the static level data."""
        maze = Maze.from_rows(level.grid)
        modes = ModeController(level.mode_cycle)
        player = PlayerAgent(
            position=level.player_spawn,
            spawn=level.player_spawn,
            speed=level.player_speed,
        )
        pursuers = [
            PursuerAgent(
                pursuer_id=spec.pursuer_id,
                archetype=spec.archetype,
                position=spec.spawn,
                direction=spec.spawn_direction,
                mode=modes.current_mode,
                scatter_corner=spec.scatter_corner,
                home=spec.home,
                spawn=spec.spawn,
                spawn_direction=spec.spawn_direction,
                speed=level.pursuer_speed,
            )
            for spec in level.pursuers
        ]
        return cls(
            level=level,
            maze=maze,
            player=player,
            pursuers=pursuers,
            modes=modes,
            rng=Random(level.seed),
            lives=level.lives,
            remaining_consumables=maze.remaining_consumables(),
        )

    @property
    def power_mode(self) -> bool:
        return self.power_timer is not None

    @property
    def terminal(self) -> bool:
        return self.game_over or self.cleared

    def pursuer(self, archetype: Archetype) -> PursuerAgent | None:
        return next((p for p in self.pursuers if p.archetype is archetype), None)

    def target_view(self) -> TargetView:
        direct = self.pursuer(Archetype.DIRECT)
        return TargetView(
            maze=self.maze,
            player_position=self.player.position,
            player_direction=self.player.direction,
            direct_position=direct.position if direct is not None else None,
        )

    def respawn_all(self) -> None:
        """Send every agent back to spawn and restart the mode cycle."""
        self.modes.reset()
        self.power_timer = None
        self.player.respawn()
        for pursuer in self.pursuers:
            pursuer.respawn(self.modes.current_mode)

    def snapshot(self) -> SessionSnapshot:
        player = self.player
        return SessionSnapshot(
            tick=self.tick,
            grid=self.maze.rows(),
            player=PlayerView(
                position=player.position,
                direction=player.direction,
                is_eating=player.is_eating,
            ),
            pursuers=tuple(
                PursuerView(
                    pursuer_id=p.pursuer_id,
                    archetype=p.archetype,
                    position=p.position,
                    direction=p.direction,
                    mode=p.mode,
                    target=p.target,
                )
                for p in self.pursuers
            ),
            score=self.score,
            lives=self.lives,
            power_mode=self.power_mode,
            power_mode_timer=self.power_timer,
            mode_index=self.modes.index,
            remaining_consumables=self.remaining_consumables,
            game_over=self.game_over,
            cleared=self.cleared,
        )
