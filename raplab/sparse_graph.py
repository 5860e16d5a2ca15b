"""Adjacency-list graph with vector arc costs."""

from __future__ import annotations

from itertools import chain
from typing import Sequence

from raplab.graph_base import GraphError, PlannerGraph
from raplab.vecops import CostVec, vec_to_str


class SparseGraph(PlannerGraph):
    """Directed graph stored as successor and predecessor lists.

    Vertex ids run from 0 to ``num_vertex() - 1``; adding an arc to an
    unknown vertex grows the graph to include it.
    """

    def __init__(self) -> None:
        self._to: list[list[int]] = []
        self._to_cost: list[list[CostVec]] = []
        self._from: list[list[int]] = []
        self._from_cost: list[list[CostVec]] = []
        self._n_arc = 0
        self._cdim = 0

    # ----- queries -----

    def has_vertex(self, v: int) -> bool:
        return 0 <= v < len(self._to)

    def has_arc(self, v: int, u: int) -> bool:
        return self.has_vertex(v) and u in self._to[v]

    def succs(self, v: int) -> list[int]:
        return list(self._to[v]) if self.has_vertex(v) else []

    def preds(self, v: int) -> list[int]:
        return list(self._from[v]) if self.has_vertex(v) else []

    def cost(self, u: int, v: int) -> CostVec:
        """Cost of arc ``(u, v)``; an empty list when there is no such arc."""
        if not self.has_vertex(u):
            return []
        for target, c in zip(self._to[u], self._to_cost[u]):
            if target == v:
                return list(c)
        return []

    def succ_costs(self, u: int) -> list[CostVec]:
        if not self.has_vertex(u):
            return []
        return [list(c) for c in self._to_cost[u]]

    def pred_costs(self, u: int) -> list[CostVec]:
        if not self.has_vertex(u):
            return []
        return [list(c) for c in self._from_cost[u]]

    def num_vertex(self) -> int:
        return len(self._to)

    def num_arc(self) -> int:
        return self._n_arc

    def num_edge(self) -> int:
        if self._n_arc % 2 != 0:
            raise GraphError("SparseGraph.num_edge is not an integer but a fraction")
        return self._n_arc // 2

    def cost_dim(self) -> int:
        return self._cdim

    def all_vertex(self) -> list[int]:
        return list(range(len(self._to)))

    # ----- construction -----

    def add_vertex(self, v: int) -> None:
        """Make sure vertices ``0..v`` exist."""
        if v < 0:
            raise ValueError(f"vertex id must be non-negative, got {v}")
        missing = v + 1 - len(self._to)
        for _ in range(missing):
            self._to.append([])
            self._to_cost.append([])
            self._from.append([])
            self._from_cost.append([])

    def add_edge(self, u: int, v: int, c: Sequence[float]) -> None:
        """Add arcs ``(u, v)`` and ``(v, u)`` with the same cost."""
        self.add_arc(u, v, c)
        self.add_arc(v, u, c)

    def add_arc(self, u: int, v: int, c: Sequence[float]) -> None:
        """Add arc ``(u, v)``, or replace its cost when it already exists."""
        cost = list(c)
        if self._cdim == 0:
            self._cdim = len(cost)
        elif self._cdim != len(cost):
            raise GraphError(
                f"SparseGraph.add_arc cdim does not match: {self._cdim} != {len(cost)}"
            )
        self.add_vertex(max(u, v))
        self.add_vertex(min(u, v))

        if v in self._to[u]:
            self._to_cost[u][self._to[u].index(v)] = cost
        else:
            self._to[u].append(v)
            self._to_cost[u].append(cost)
            self._n_arc += 1

        if u in self._from[v]:
            self._from_cost[v][self._from[v].index(u)] = list(cost)
        else:
            self._from[v].append(u)
            self._from_cost[v].append(list(cost))

    def _reset(self) -> None:
        self.__init__()

    def _create(self, sources, targets, costs, both_ways: bool) -> None:
        sources, targets, costs = list(sources), list(targets), list(costs)
        if not len(sources) == len(targets) == len(costs):
            raise ValueError("sources, targets and costs must have the same length")
        self._reset()
        self.add_vertex(max(chain(sources, targets), default=0))
        for u, v, c in zip(sources, targets, costs):
            if both_ways:
                self.add_edge(u, v, c)
            else:
                self.add_arc(u, v, c)

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

    def change_cost_dim(self, new_cdim: int, default_value: float = 0.0) -> None:
        """Truncate or pad every arc cost to ``new_cdim`` components."""

        def resized(c: CostVec) -> CostVec:
            return c[:new_cdim] + [default_value] * max(new_cdim - len(c), 0)

        self._to_cost = [[resized(c) for c in row] for row in self._to_cost]
        self._from_cost = [[resized(c) for c in row] for row in self._from_cost]
        self._cdim = new_cdim

    def set_arc_cost(self, u: int, v: int, new_cost: Sequence[float]) -> None:
        """Replace the cost of an existing arc ``(u, v)``."""
        cost = list(new_cost)
        if len(cost) != self._cdim:
            raise GraphError(
                "SparseGraph.set_arc_cost new edge cost dimension does not match! "
                "Maybe call change_cost_dim() at first."
            )
        if not (self.has_vertex(u) and self.has_vertex(v)):
            raise GraphError("SparseGraph.set_arc_cost vertex does not exist!")
        if v not in self._to[u] or u not in self._from[v]:
            raise GraphError("SparseGraph.set_arc_cost arc does not exist!")
        self._to_cost[u][self._to[u].index(v)] = cost
        self._from_cost[v][self._from[v].index(u)] = list(cost)

    def __str__(self) -> str:
        def block(targets, costs) -> list[str]:
            return [
                f" -- {v}:["
                + "".join(f"{u}({vec_to_str(c)})," for u, c in zip(ts, cs))
                + "]\n"
                for v, (ts, cs) in enumerate(zip(targets, costs))
            ]

        parts = [f"=== SparseGraph Begin ===\n |V| = {len(self._to)} outgoing edges \n"]
        parts += block(self._to, self._to_cost)
        parts.append(" incoming edges \n")
        parts += block(self._from, self._from_cost)
        parts.append("=== SparseGraph End ===")
        return "".join(parts)