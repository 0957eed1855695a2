from __future__ import annotations

import pytest

from maze_chase.domain.grid import MOVES, Direction, Position, snap


class TestSnap:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (2.49, 2), (-0.5, 0), (-0.51, -1), (3.0, 3), (0.0, 0)],
    )
    def test_rounds_half_up(self, value: float, expected: int) -> None:
        assert snap(value) == expected


class TestDirection:
    def test_moves_are_in_tie_break_order(self) -> None:
        assert MOVES == (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

    def test_up_decreases_y(self) -> None:
        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)

    def test_opposites_are_involutions(self) -> None:
        for direction in Direction:
            assert direction.opposite.opposite is direction
        assert Direction.NONE.opposite is Direction.NONE

    def test_axes(self) -> None:
        assert Direction.LEFT.is_horizontal and not Direction.LEFT.is_vertical
        assert Direction.UP.is_vertical and not Direction.UP.is_horizontal
        assert not Direction.NONE.is_horizontal and not Direction.NONE.is_vertical


class TestPosition:
    def test_cell_and_snapped(self) -> None:
        position = Position(2.5, 3.49)
        assert position.cell() == (3, 3)
        assert position.snapped() == Position(3.0, 3.0)

    def test_offset(self) -> None:
        assert Position(5.0, 5.0).offset(Direction.RIGHT, 4) == Position(9.0, 5.0)
        assert Position(5.0, 5.0).offset(Direction.UP) == Position(5.0, 4.0)
        assert Position(5.0, 5.0).offset(Direction.NONE, 4) == Position(5.0, 5.0)

    def test_distance_is_euclidean(self) -> None:
        assert Position(0.0, 0.0).distance_to(Position(3.0, 4.0)) == pytest.approx(5.0)

    def test_of_cell(self) -> None:
        assert Position.of((2, 7)) == Position(2.0, 7.0)
