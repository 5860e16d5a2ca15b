"""Graph stored as a full matrix of arc cost vectors."""

from __future__ import annotations

from itertools import chain
from typing import Sequence

from raplab.graph_base import GraphError, PlannerGraph
from raplab.vecops import CostVec, vec_to_str


class DenseGraph(PlannerGraph):
    """Directed graph as a cost matrix; an empty cost vector means no arc.

    Without an id map, vertex ids are matrix indices ``0..n-1``. With
    ``use_id_map`` any integer ids are allowed and are given indices in
    order of first appearance.
    """

    def __init__(self, use_id_map: bool = False) -> None:
        self.use_id_map = use_id_map
        self._id2ind: dict[int, int] = {}
        self._ind2id: list[int] = []
        self._cost_mat: list[list[CostVec]] = []

    # ----- id mapping -----

    def _index(self, v: int) -> int:
        if not self.has_vertex(v):
            raise GraphError(f"DenseGraph has no vertex {v}")
        return self._id2ind[v] if self.use_id_map else v

    def _id(self, i: int) -> int:
        return self._ind2id[i] if self.use_id_map else i

    # ----- graph interface -----

    def has_vertex(self, v: int) -> bool:
        if self.use_id_map:
            return v in self._id2ind
        return 0 <= v < len(self._cost_mat)

    def has_arc(self, v: int, u: int) -> bool:
        if not (self.has_vertex(v) and self.has_vertex(u)):
            return False
        return bool(self._cost_mat[self._index(v)][self._index(u)])

    def succs(self, v: int) -> list[int]:
        if not self.has_vertex(v):
            return []
        row = self._cost_mat[self._index(v)]
        return [self._id(i) for i, c in enumerate(row) if c and self._id(i) != v]

    def preds(self, v: int) -> list[int]:
        if not self.has_vertex(v):
            return []
        j = self._index(v)
        return [
            self._id(i)
            for i, row in enumerate(self._cost_mat)
            if row[j] and self._id(i) != v
        ]

    def cost(self, u: int, v: int) -> CostVec:
        """Cost of arc ``(u, v)``; an empty list when there is no arc."""
        return list(self._cost_mat[self._index(u)][self._index(v)])

    def succ_costs(self, u: int) -> list[CostVec]:
        row = self._cost_mat[self._index(u)]
        return [list(c) for i, c in enumerate(row) if c and self._id(i) != u]

    def pred_costs(self, u: int) -> list[CostVec]:
        j = self._index(u)
        return [
            list(row[j])
            for i, row in enumerate(self._cost_mat)
            if row[j] and self._id(i) != u
        ]

    def num_vertex(self) -> int:
        return len(self._cost_mat)

    def num_arc(self) -> int:
        """Arc count of a complete directed graph on the vertices."""
        n = len(self._cost_mat)
        return n * n - n

    def num_edge(self) -> int:
        return self.num_arc() // 2

    def cost_dim(self) -> int:
        return next((len(c) for row in self._cost_mat for c in row if c), 0)

    def all_vertex(self) -> list[int]:
        return [self._id(i) for i in range(len(self._cost_mat))]

    # ----- construction -----

    def _create(self, sources, targets, costs, both_ways: bool) -> None:
        sources, targets, costs = list(sources), list(targets), list(costs)
        if not len(sources) == len(targets) == len(costs):
            raise ValueError("sources, targets and costs must have the same length")
        self._id2ind = {}
        self._ind2id = []
        if self.use_id_map:
            for v in chain(sources, targets):
                if v not in self._id2ind:
                    self._id2ind[v] = len(self._ind2id)
                    self._ind2id.append(v)
            n = len(self._ind2id)
        else:
            if any(v < 0 for v in chain(sources, targets)):
                raise ValueError("vertex ids must be non-negative without an id map")
            n = max(chain(sources, targets), default=-1) + 1
        self._cost_mat = [[[] for _ in range(n)] for _ in range(n)]
        for u, v, c in zip(sources, targets, costs):
            i, j = self._index(u), self._index(v)
            self._cost_mat[i][j] = [float(x) for x in c]
            if both_ways:
                self._cost_mat[j][i] = [float(x) for x in c]

    def create_from_edges(
        self,
        sources: Sequence[int],
        targets: Sequence[int],
        costs: Sequence[Sequence[float]],
    ) -> None:
        """Replace the graph with undirected edges ``sources[i] - targets[i]``."""
        self._create(sources, targets, costs, both_ways=True)

    def create_from_arcs(
        self,
        sources: Sequence[int],
        targets: Sequence[int],
        costs: Sequence[Sequence[float]],
    ) -> None:
        """Replace the graph with directed arcs ``sources[i] -> targets[i]``."""
        self._create(sources, targets, costs, both_ways=False)

    def __str__(self) -> str:
        n = len(self._cost_mat)
        parts = [f"=== DenseGraph Begin === |V| = {n} \n", " All Vertices: "]
        parts += [f"{i}({self._id(i)}) " for i in range(n)]
        parts.append("\n Cost Mat: \n")
        parts += [
            "".join(vec_to_str(c) + " " for c in row) + "\n" for row in self._cost_mat
        ]
        parts.append("=== DenseGraph End ===")
        return "".join(parts)