"""Domain layer: grid primitives, the maze, agents and typed snapshots."""

from maze_chase.domain.agents import Archetype, BehaviorMode, PlayerAgent, PursuerAgent
from maze_chase.domain.grid import MOVES, CellKind, Direction, Position, snap
from maze_chase.domain.maze import Maze
from maze_chase.domain.snapshot import PlayerView, PursuerView, SessionSnapshot

__all__ = [
    "Archetype",
    "BehaviorMode",
    "CellKind",
    "Direction",
    "MOVES",
    "Maze",
    "PlayerAgent",
    "PlayerView",
    "Position",
    "PursuerAgent",
    "PursuerView",
    "SessionSnapshot",
    "snap",
]
