"""Dijkstra's algorithm over a planner graph, on one chosen cost dimension."""

from __future__ import annotations

import heapq
import math
import time
from itertools import count
from typing import Iterable, Iterator

from raplab.search import GraphSearch, SearchError, SearchMode
from raplab.vecops import CostVec, vec_add


class Dijkstra(GraphSearch):
    """Shortest paths from a start, to a goal, or between a start and a goal.

    Vertex ids must lie in ``0..num_vertex()-1``. Open entries are ordered
    by ``f = g + h`` and, on equal ``f``, by smaller ``g``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._cdim = 0
        self._parent: list[int] = []
        self._v2d: list[float] = []
        self._cvec: list[CostVec] = []
        self._open: list[tuple[float, float, int, int]] = []
        self._tiebreak = count()

    # ----- public API -----

    def path_finding(
        self, vs: int, vg: int, time_limit: float = math.inf, cdim: int = 0
    ) -> list[int]:
        """Search from ``vs`` until ``vg`` is reached; return the path start-first."""
        self._vg = vg
        self._run(SearchMode.PATH_FINDING, vs, time_limit, cdim)
        return self.get_path(vg)

    def solution_cost(self) -> list[float]:
        """Cost vector of the path to the goal of the last ``path_finding``."""
        if not self._cvec:
            raise SearchError("no search has been run")
        return list(self._cvec[self._vg])

    def exhaustive_backwards(
        self, vg: int, time_limit: float = math.inf, cdim: int = 0
    ) -> None:
        """Compute the cost-to-go from every vertex to ``vg``."""
        self._run(SearchMode.EXHAUSTIVE_BACKWARDS, vg, time_limit, cdim)

    def exhaustive_forwards(
        self, vs: int, time_limit: float = math.inf, cdim: int = 0
    ) -> None:
        """Compute the cost-to-come from ``vs`` to every vertex."""
        self._run(SearchMode.EXHAUSTIVE_FORWARDS, vs, time_limit, cdim)

    def get_path(self, v: int, do_reverse: bool = True) -> list[int]:
        """Follow parents from ``v`` back to the search root.

        The path ends at ``v`` when ``do_reverse`` is true, else starts there.
        """
        if not self._parent or not 0 <= v < len(self._parent):
            return []
        out = [v]
        while self._parent[v] != -1:
            v = self._parent[v]
            out.append(v)
        return out[::-1] if do_reverse else out

    def dist_all(self) -> list[float]:
        """Distance of every vertex from the search root; inf when unreached."""
        return list(self._v2d)

    def dist_value(self, v: int) -> float:
        """Distance of ``v`` from the search root."""
        if v < 0:
            raise IndexError(f"vertex {v} is out of range")
        return self._v2d[v]

    def path_cost(self, v: int) -> list[float]:
        """Cost vector of the path between the search root and ``v``."""
        if v < 0:
            raise IndexError(f"vertex {v} is out of range")
        return list(self._cvec[v])

    # ----- search machinery -----

    def _run(self, mode: SearchMode, root: int, time_limit: float, cdim: int) -> bool:
        self._mode = mode
        self._cdim = cdim
        self._vs = root
        self._time_limit = time_limit
        return self._search()

    def _push(self, vid: int, g: float, h: float = 0.0) -> None:
        heapq.heappush(self._open, (g + h, g, next(self._tiebreak), vid))

    def _pop(self) -> tuple[int, float]:
        _, g, _, vid = heapq.heappop(self._open)
        return vid, g

    def _neighbours(self, v: int) -> Iterator[tuple[int, CostVec]]:
        graph = self._require_graph()
        if self._mode is SearchMode.EXHAUSTIVE_BACKWARDS:
            pairs: Iterable = zip(graph.preds(v), graph.pred_costs(v))
        else:
            pairs = zip(graph.succs(v), graph.succ_costs(v))
        yield from pairs

    def _search(self) -> bool:
        graph = self._require_graph()
        name = type(self).__name__
        if not graph.has_vertex(self._vs):
            raise SearchError(f"{name}, input v_start {self._vs} does not exist")
        if self._mode is SearchMode.PATH_FINDING and not graph.has_vertex(self._vg):
            raise SearchError(f"{name}, input v_goal {self._vg} does not exist")

        tstart = time.monotonic()
        n = graph.num_vertex()
        self._v2d = [math.inf] * n
        self._parent = [-1] * n
        self._cvec = [[] for _ in range(n)]
        self._open = []
        self._push(self._vs, 0.0)
        self._v2d[self._vs] = 0.0
        self._cvec[self._vs] = [0.0] * graph.cost_dim()

        self._init_more()

        while self._open:
            if time.monotonic() - tstart > self._time_limit:
                break
            v, g = self._pop()
            if g > self._v2d[v]:
                continue
            if self._mode is SearchMode.PATH_FINDING and v == self._vg:
                return True
            for u, cvec in self._neighbours(v):
                c = cvec[self._cdim]
                if c < 0:
                    raise SearchError(
                        f"{name}, negative edge cost {c} on arc ({v},{u}) with costs {cvec}"
                    )
                dist_u = g + c
                if dist_u < self._v2d[u]:
                    self._v2d[u] = dist_u
                    self._cvec[u] = vec_add(self._cvec[v], cvec)
                    self._parent[u] = v
                    self._add_open(u, dist_u)
        return False

    def _add_open(self, u: int, dist_u: float) -> None:
        self._push(u, dist_u)

    def _init_more(self) -> None:
        """Hook for subclasses, run once the search state is initialised."""