"""Tests for the maze grid and its consumable bookkeeping."""

from __future__ import annotations

import pytest

from maze_chase.domain.grid import CellKind
from maze_chase.domain.maze import Maze

ROWS = (
    (1, 1, 1, 1, 1, 1),
    (1, 2, 0, 3, 1, 0),
    (1, 1, 1, 1, 1, 0),
)


@pytest.fixture
def maze() -> Maze:
    return Maze.from_rows(ROWS)


class TestMazeConstruction:
    def test_dimensions(self, maze: Maze) -> None:
        assert (maze.width, maze.height) == (6, 3)

    def test_rows_round_trip(self, maze: Maze) -> None:
        assert maze.rows() == ROWS

    def test_rejects_ragged_rows(self) -> None:
        with pytest.raises(ValueError):
            Maze.from_rows([[1, 1], [1]])

    def test_rejects_unknown_codes(self) -> None:
        with pytest.raises(ValueError, match="maze cells"):
            Maze.from_rows([[1, 9]])

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            Maze.from_rows([])


class TestMazeQueries:
    def test_kind_at(self, maze: Maze) -> None:
        assert maze.kind_at(0, 0) is CellKind.WALL
        assert maze.kind_at(1, 1) is CellKind.DOT
        assert maze.kind_at(3, 1) is CellKind.POWER_PELLET
        assert maze.kind_at(2, 1) is CellKind.EMPTY

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (6, 0), (0, 3)])
    def test_kind_at_out_of_bounds_is_none(self, maze: Maze, cell: tuple[int, int]) -> None:
        assert maze.kind_at(*cell) is None
        assert not maze.is_wall(*cell)

    def test_remaining_consumables(self, maze: Maze) -> None:
        assert maze.remaining_consumables() == 2


class TestMazeMutation:
    def test_consume_clears_once(self, maze: Maze) -> None:
        assert maze.consume(1, 1) is CellKind.DOT
        assert maze.kind_at(1, 1) is CellKind.EMPTY
        assert maze.consume(1, 1) is None
        assert maze.remaining_consumables() == 1

    def test_consume_ignores_walls_and_empty(self, maze: Maze) -> None:
        assert maze.consume(0, 0) is None
        assert maze.consume(2, 1) is None
        assert maze.kind_at(0, 0) is CellKind.WALL

    @pytest.mark.parametrize(
        ("cell", "kind"),
        [
            ((0, 0), CellKind.EMPTY),
            ((2, 1), CellKind.WALL),
            ((1, 1), CellKind.WALL),
            ((2, 1), CellKind.DOT),
        ],
    )
    def test_set_kind_rejects_illegal_writes(
        self, maze: Maze, cell: tuple[int, int], kind: CellKind
    ) -> None:
        with pytest.raises(ValueError, match="illegal cell write"):
            maze.set_kind(*cell, kind)

    def test_copy_is_independent(self, maze: Maze) -> None:
        clone = maze.copy()
        clone.consume(3, 1)
        assert maze.kind_at(3, 1) is CellKind.POWER_PELLET


class TestReachability:
    def test_walls_are_not_nodes(self, maze: Maze) -> None:
        graph = maze.walkable_graph()
        assert (0, 0) not in graph
        assert (1, 1) in graph

    def test_reachable_cells_respects_walls(self, maze: Maze) -> None:
        assert maze.reachable_cells((1, 1)) == [(1, 1), (2, 1), (3, 1)]
        assert maze.reachable_cells((5, 1)) == [(5, 1), (5, 2)]

    def test_reachable_from_wall_is_empty(self, maze: Maze) -> None:
        assert maze.reachable_cells((0, 0)) == []

    def test_graph_cache_is_not_a_constructor_argument(self, maze: Maze) -> None:
        with pytest.raises(TypeError):
            Maze(grid=maze.grid, _graph=maze.walkable_graph())  # type: ignore[call-arg]

    def test_copy_reuses_cached_graph(self, maze: Maze) -> None:
        graph = maze.walkable_graph()
        assert maze.copy().walkable_graph() is graph
