"""Static maze grid with consumable cells.

Walls never change once a maze is built. The only legal mutation is
clearing a dot or power pellet, which happens exactly once per cell.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import networkx as nx
import numpy as np

from maze_chase.domain.grid import CONSUMABLE_KINDS, CellKind

_CONSUMABLE_CODES = [kind.value for kind in CONSUMABLE_KINDS]


@dataclass(eq=False)
class Maze:
    """Rectangular grid of cell kinds, indexed ``grid[y, x]``."""

    grid: np.ndarray
    _graph: nx.Graph | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> Maze:
        """Build a maze from row-major integer codes (see ``CellKind``)."""
        grid = np.array([list(row) for row in rows], dtype=np.int8)
        if grid.ndim != 2 or grid.size == 0:
            raise ValueError("maze rows must form a non-empty rectangle")
        valid = {kind.value for kind in CellKind}
        if not set(np.unique(grid).tolist()) <= valid:
            raise ValueError(f"maze cells must be one of {sorted(valid)}")
        return cls(grid=grid)

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, x: int, y: int) -> CellKind | None:
        """Return the cell kind at ``(x, y)``, or ``None`` when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return CellKind(int(self.grid[y, x]))

    def is_wall(self, x: int, y: int) -> bool:
        return self.kind_at(x, y) is CellKind.WALL

    def set_kind(self, x: int, y: int, kind: CellKind) -> None:
        """Write a cell. Only clearing a consumable is allowed."""
        current = self.kind_at(x, y)
        if current not in CONSUMABLE_KINDS or kind is not CellKind.EMPTY:
            raise ValueError(f"illegal cell write at ({x}, {y}): {current} -> {kind}")
        self.grid[y, x] = kind.value

    def consume(self, x: int, y: int) -> CellKind | None:
        """Clear a dot or power pellet and return what was eaten."""
        current = self.kind_at(x, y)
        if current not in CONSUMABLE_KINDS:
            return None
        self.set_kind(x, y, CellKind.EMPTY)
        return current

    def remaining_consumables(self) -> int:
        return int(np.isin(self.grid, _CONSUMABLE_CODES).sum())

    def walkable_graph(self) -> nx.Graph:
        """Return the 4-connected graph of non-wall cells, keyed ``(x, y)``."""
        if self._graph is None:
            graph = nx.grid_2d_graph(self.width, self.height)
            walls = [(int(x), int(y)) for y, x in np.argwhere(self.grid == CellKind.WALL.value)]
            graph.remove_nodes_from(walls)
            self._graph = graph
        return self._graph

    def reachable_cells(self, cell: tuple[int, int]) -> list[tuple[int, int]]:
        """Return the cells connected to ``cell``, sorted; empty if ``cell`` is a wall."""
        graph = self.walkable_graph()
        if cell not in graph:
            return []
        return sorted(nx.node_connected_component(graph, cell))

    def rows(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(int(v) for v in row) for row in self.grid)

    def copy(self) -> Maze:
        # Walls are immutable, so the cached graph stays valid.
        clone = Maze(grid=self.grid.copy())
        clone._graph = self._graph
        return clone
