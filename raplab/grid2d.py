"""A 4- or 8-connected grid graph over an occupancy matrix."""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from raplab.graph_base import GraphError, PlannerGraph
from raplab.vecops import CostVec

STRAIGHT_COST = 1.0
DIAGONAL_COST = 1.4

# (row offset, column offset): left, right, up, down, then the diagonals.
_ACTIONS_4 = ((0, -1), (0, 1), (-1, 0), (1, 0))
_ACTIONS_8 = _ACTIONS_4 + ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Grid2d(PlannerGraph):
    """Grid graph whose vertex ``k`` is the cell ``(k // cols, k % cols)``.

    Cells with a value greater than zero are obstacles. The occupancy
    matrix is kept by reference, so later changes to it are seen.
    """

    def __init__(self, occupancy: Sequence[Sequence[float]] | Any = None) -> None:
        self.occupancy: Any = []
        self._actions = _ACTIONS_4
        self._cost_scale = 1.0
        if occupancy is not None:
            self.set_occupancy_grid(occupancy)

    # ----- geometry -----

    @property
    def rows(self) -> int:
        return len(self.occupancy)

    @property
    def cols(self) -> int:
        return len(self.occupancy[0]) if self.rows else 0

    def _require_cols(self) -> int:
        cols = self.cols
        if cols == 0:
            raise GraphError("Grid2d has no occupancy grid")
        return cols

    def rc2k(self, r: int, c: int) -> int:
        """Vertex id of cell ``(r, c)``."""
        return r * self._require_cols() + c

    def k2r(self, k: int) -> int:
        """Row of vertex ``k``."""
        return k // self._require_cols()

    def k2c(self, k: int) -> int:
        """Column of vertex ``k``."""
        return k % self._require_cols()

    def is_within_border(self, row: int, col: int) -> bool:
        """Whether ``(row, col)`` lies inside the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _blocked(self, r: int, c: int) -> bool:
        return self.occupancy[r][c] > 0

    def _free_neighbours(self, v: int) -> Iterator[tuple[int, int, int]]:
        r, c = self.k2r(v), self.k2c(v)
        for idx, (dr, dc) in enumerate(self._actions):
            nr, nc = r + dr, c + dc
            if self.is_within_border(nr, nc) and not self._blocked(nr, nc):
                yield idx, nr, nc

    def _step_cost(self, diagonal: bool) -> CostVec:
        return [(DIAGONAL_COST if diagonal else STRAIGHT_COST) * self._cost_scale]

    # ----- configuration -----

    def set_occupancy_grid(self, grid: Sequence[Sequence[float]] | Any) -> None:
        """Use ``grid`` (row first) as the occupancy matrix."""
        self.occupancy = grid

    def set_k_neighbor(self, k: int) -> None:
        """Choose 4- or 8-connectivity."""
        if k == 4:
            self._actions = _ACTIONS_4
        elif k == 8:
            self._actions = _ACTIONS_8
        else:
            raise ValueError(f"Grid2d supports 4 or 8 neighbours, got {k}")

    def set_cost_scale_factor(self, factor: float) -> None:
        """Multiply every step cost by ``factor``."""
        self._cost_scale = factor

    # ----- graph interface -----

    def has_vertex(self, v: int) -> bool:
        return 0 <= v < self.num_vertex()

    def has_arc(self, v: int, u: int) -> bool:
        """Whether ``u`` is one move away from ``v``; obstacles are not checked."""
        r1, c1, r2, c2 = self.k2r(v), self.k2c(v), self.k2r(u), self.k2c(u)
        return any(r2 == r1 + dr and c2 == c1 + dc for dr, dc in self._actions)

    def succs(self, v: int) -> list[int]:
        return [self.rc2k(nr, nc) for _, nr, nc in self._free_neighbours(v)]

    def preds(self, v: int) -> list[int]:
        return self.succs(v)

    def cost(self, u: int, v: int) -> CostVec:
        """Step cost from ``u`` to ``v``: diagonal when both row and column change."""
        diagonal = self.k2r(u) != self.k2r(v) and self.k2c(u) != self.k2c(v)
        return self._step_cost(diagonal)

    def succ_costs(self, u: int) -> list[CostVec]:
        return [
            self._step_cost(idx >= len(_ACTIONS_4))
            for idx, _, _ in self._free_neighbours(u)
        ]

    def pred_costs(self, u: int) -> list[CostVec]:
        return self.succ_costs(u)

    def num_vertex(self) -> int:
        return self.rows * self.cols

    def num_arc(self) -> int:
        """Number of moves between free cells."""
        return sum(
            len(self.succs(v))
            for v in range(self.num_vertex())
            if not self._blocked(self.k2r(v), self.k2c(v))
        )

    def num_edge(self) -> int:
        n_arc = self.num_arc()
        if n_arc % 2 != 0:
            raise GraphError("Grid2d.num_edge is not an integer but a fraction")
        return n_arc // 2

    def cost_dim(self) -> int:
        return 1

    def all_vertex(self) -> list[int]:
        return list(range(self.num_vertex()))