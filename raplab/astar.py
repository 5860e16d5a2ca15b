"""A* search, and A* on grids with a Manhattan heuristic."""

from __future__ import annotations

from raplab.dijkstra import Dijkstra
from raplab.grid2d import Grid2d
from raplab.search import SearchError


class Astar(Dijkstra):
    """Dijkstra with a weighted heuristic added to the open-list priority.

    The base heuristic is zero; subclasses supply a useful one.
    """

    def __init__(self) -> None:
        super().__init__()
        self._wh = 1.0

    def set_heu_weight(self, w: float) -> None:
        """Weight the heuristic by ``w``, which must be at least 1."""
        if w < 1.0:
            raise ValueError(f"heuristic weight {w} < 1")
        self._wh = w

    def _heuristic(self, v: int) -> float:
        return 0.0

    def _add_open(self, u: int, dist_u: float) -> None:
        self._push(u, dist_u, self._wh * self._heuristic(u))


class AstarGrid2d(Astar):
    """A* on a ``Grid2d`` using the Manhattan distance to the goal."""

    def __init__(self) -> None:
        super().__init__()
        self._vd_r = 0
        self._vd_c = 0

    def _grid(self) -> Grid2d:
        graph = self._require_graph()
        if not isinstance(graph, Grid2d):
            raise SearchError(f"{type(self).__name__} needs a Grid2d graph")
        return graph

    def _heuristic(self, v: int) -> float:
        grid = self._grid()
        return float(abs(grid.k2r(v) - self._vd_r) + abs(grid.k2c(v) - self._vd_c))

    def _init_more(self) -> None:
        grid = self._grid()
        self._vd_r = grid.k2r(self._vg)
        self._vd_c = grid.k2c(self._vg)