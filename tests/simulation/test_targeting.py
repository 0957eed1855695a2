"""Tests for per-archetype target selection."""

from __future__ import annotations

from random import Random

import pytest

from maze_chase.domain.agents import Archetype, BehaviorMode, PursuerAgent
from maze_chase.domain.grid import Direction, Position
from maze_chase.domain.maze import Maze
from maze_chase.simulation.targeting import TargetView, compute_target, random_reachable_cell

OPEN = Maze.from_rows([[0] * 12 for _ in range(12)])

SPLIT = Maze.from_rows(
    [
        [0, 0, 1, 0],
        [0, 0, 1, 0],
    ]
)


def _pursuer(
    archetype: Archetype,
    position: Position = Position(0.0, 0.0),
    mode: BehaviorMode = BehaviorMode.PURSUIT,
) -> PursuerAgent:
    return PursuerAgent(
        pursuer_id=archetype.value,
        archetype=archetype,
        position=position,
        direction=Direction.NONE,
        mode=mode,
        scatter_corner=Position(11.0, 0.0),
        home=position,
        spawn=position,
        spawn_direction=Direction.NONE,
        speed=2.0,
    )


def _view(
    player: Position,
    heading: Direction,
    direct: Position | None = Position(0.0, 0.0),
) -> TargetView:
    return TargetView(
        maze=OPEN, player_position=player, player_direction=heading, direct_position=direct
    )


class TestPursuitTargets:
    def test_direct_targets_player(self) -> None:
        target = compute_target(
            _pursuer(Archetype.DIRECT), _view(Position(5.0, 5.0), Direction.UP), Random(0)
        )
        assert target == Position(5.0, 5.0)

    def test_ambush_leads_the_player(self) -> None:
        target = compute_target(
            _pursuer(Archetype.AMBUSH), _view(Position(5.0, 5.0), Direction.RIGHT), Random(0)
        )
        assert target == Position(9.0, 5.0)

    def test_ambush_on_stopped_player(self) -> None:
        target = compute_target(
            _pursuer(Archetype.AMBUSH), _view(Position(5.0, 5.0), Direction.NONE), Random(0)
        )
        assert target == Position(5.0, 5.0)

    def test_pincer_reflects_direct_pursuer(self) -> None:
        view = _view(Position(5.0, 5.0), Direction.UP, direct=Position(3.0, 7.0))
        target = compute_target(_pursuer(Archetype.PINCER), view, Random(0))
        # Two cells ahead is (5, 3); reflecting (3, 7) through it lands off-grid.
        assert target == Position(7.0, -1.0)

    def test_pincer_without_direct_pursuer_targets_player(self) -> None:
        view = _view(Position(5.0, 5.0), Direction.UP, direct=None)
        target = compute_target(_pursuer(Archetype.PINCER), view, Random(0))
        assert target == Position(5.0, 5.0)

    def test_shy_chases_when_far(self) -> None:
        pursuer = _pursuer(Archetype.SHY, position=Position(0.0, 0.0))
        target = compute_target(pursuer, _view(Position(10.0, 0.0), Direction.LEFT), Random(0))
        assert target == Position(10.0, 0.0)

    def test_shy_retreats_when_close(self) -> None:
        pursuer = _pursuer(Archetype.SHY, position=Position(5.0, 5.0))
        target = compute_target(pursuer, _view(Position(6.0, 6.0), Direction.LEFT), Random(0))
        assert target == pursuer.scatter_corner

    def test_shy_radius_is_exclusive(self) -> None:
        pursuer = _pursuer(Archetype.SHY, position=Position(0.0, 0.0))
        target = compute_target(pursuer, _view(Position(8.0, 0.0), Direction.LEFT), Random(0))
        assert target == pursuer.scatter_corner


class TestModeOverrides:
    @pytest.mark.parametrize("archetype", list(Archetype))
    def test_scatter_targets_corner(self, archetype: Archetype) -> None:
        pursuer = _pursuer(archetype, mode=BehaviorMode.SCATTER)
        target = compute_target(pursuer, _view(Position(5.0, 5.0), Direction.UP), Random(0))
        assert target == Position(11.0, 0.0)

    @pytest.mark.parametrize("archetype", list(Archetype))
    def test_frightened_targets_reachable_cell(self, archetype: Archetype) -> None:
        pursuer = _pursuer(archetype, mode=BehaviorMode.FRIGHTENED)
        rng = Random(3)
        for _ in range(20):
            target = compute_target(pursuer, _view(Position(5.0, 5.0), Direction.UP), rng)
            assert OPEN.in_bounds(*target.cell())


class TestRandomReachableCell:
    def test_stays_in_component(self) -> None:
        rng = Random(0)
        cells = {random_reachable_cell(SPLIT, Position(0.0, 0.0), rng).cell() for _ in range(100)}
        assert cells == {(0, 0), (1, 0), (0, 1), (1, 1)}

    def test_deterministic_for_seed(self) -> None:
        first = random_reachable_cell(OPEN, Position(3.0, 3.0), Random(11))
        second = random_reachable_cell(OPEN, Position(3.0, 3.0), Random(11))
        assert first == second
