"""A graph made of several grids and roadmaps joined by extra arcs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from raplab.graph_base import GraphError, PlannerGraph
from raplab.grid2d import Grid2d
from raplab.sparse_graph import SparseGraph
from raplab.vecops import CostVec


@dataclass(frozen=True)
class _Part:
    start: int
    end: int
    graph: PlannerGraph

    def __contains__(self, v: int) -> bool:
        return self.start <= v < self.end


@dataclass(frozen=True)
class _ExtraArc:
    source: int
    target: int
    cost: CostVec


class HybridGraph2d(PlannerGraph):
    """Sub-graphs laid out one after another in a single vertex id range.

    Each added grid or roadmap takes the next block of global ids, sized by
    its vertex count at the time it is added. Arcs between different
    sub-graphs are added with ``add_extra_edge``.
    """

    def __init__(self) -> None:
        self._parts: list[_Part] = []
        self._extra: list[_ExtraArc] = []

    # ----- internals -----

    def _locate(self, v: int) -> Optional[_Part]:
        return next((part for part in self._parts if v in part), None)

    def _append(self, g: PlannerGraph) -> None:
        start = self._parts[-1].end if self._parts else 0
        self._parts.append(_Part(start, start + g.num_vertex(), g))

    # ----- construction -----

    def add_grid2d(self, g: Grid2d) -> None:
        """Append a grid as the next block of vertex ids."""
        self._append(g)

    def add_sparse_graph(self, g: SparseGraph) -> None:
        """Append a roadmap as the next block of vertex ids."""
        self._append(g)

    def add_extra_edge(self, u: int, v: int, c: Sequence[float]) -> None:
        """Add a directed arc ``(u, v)`` given in global ids."""
        self._extra.append(_ExtraArc(u, v, list(c)))

    # ----- graph interface -----

    def has_vertex(self, v: int) -> bool:
        return bool(self._parts) and 0 <= v < self._parts[-1].end

    def has_arc(self, v: int, u: int) -> bool:
        """True for any two vertices of one sub-graph, or for an extra arc."""
        if not (self.has_vertex(v) and self.has_vertex(u)):
            return False
        if self._locate(v) is self._locate(u):
            return True
        return any(a.source == v and a.target == u for a in self._extra)

    def succs(self, v: int) -> list[int]:
        part = self._locate(v)
        if part is None:
            return []
        out = [w + part.start for w in part.graph.succs(v - part.start)]
        out += [a.target for a in self._extra if a.source == v]
        return out

    def preds(self, v: int) -> list[int]:
        part = self._locate(v)
        if part is None:
            return []
        out = [w + part.start for w in part.graph.preds(v - part.start)]
        out += [a.source for a in self._extra if a.target == v]
        return out

    def cost(self, u: int, v: int) -> CostVec:
        """Cost of arc ``(u, v)``; an empty list when none is known."""
        pu, pv = self._locate(u), self._locate(v)
        if pu is None or pv is None:
            return []
        if pu is pv:
            return pu.graph.cost(u - pu.start, v - pu.start)
        for a in self._extra:
            if a.source == u and a.target == v:
                return list(a.cost)
        return []

    def succ_costs(self, u: int) -> list[CostVec]:
        part = self._locate(u)
        if part is None:
            return []
        out = part.graph.succ_costs(u - part.start)
        out += [list(a.cost) for a in self._extra if a.source == u]
        return out

    def pred_costs(self, u: int) -> list[CostVec]:
        part = self._locate(u)
        if part is None:
            return []
        out = part.graph.pred_costs(u - part.start)
        out += [list(a.cost) for a in self._extra if a.target == u]
        return out

    def num_vertex(self) -> int:
        return self._parts[-1].end if self._parts else 0

    def num_arc(self) -> int:
        return sum(p.graph.num_arc() for p in self._parts) + len(self._extra)

    def num_edge(self) -> int:
        n_arc = self.num_arc()
        if n_arc % 2 != 0:
            raise GraphError("HybridGraph2d.num_edge is not an integer but a fraction")
        return n_arc // 2

    def cost_dim(self) -> int:
        """Cost dimension of the first grid, else the first roadmap, else an extra arc."""
        grids = [p.graph for p in self._parts if isinstance(p.graph, Grid2d)]
        others = [p.graph for p in self._parts if not isinstance(p.graph, Grid2d)]
        for g in grids + others:
            return g.cost_dim()
        for a in self._extra:
            return len(a.cost)
        return 0

    def all_vertex(self) -> list[int]:
        return list(range(self.num_vertex()))