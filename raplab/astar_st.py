"""Space-time A* on grids with vertex and edge constraints at given time steps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from raplab.astar import AstarGrid2d
from raplab.avltree import AVLTree
from raplab.dijkstra import Dijkstra
from raplab.graph_base import PlannerGraph
from raplab.grid2d import Grid2d
from raplab.search import SearchError
from raplab.timer import SimpleTimer
from raplab.vecops import CostVec

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class StateST:
    """A vertex ``v`` occupied at time step ``t``; ``id`` labels it within a search."""

    v: int
    t: int
    id: int = -1

    def key(self) -> str:
        """Identity of the space-time state, independent of its label id."""
        return f"{self.v},{self.t}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateST):
            return NotImplemented
        return self.v == other.v and self.t == other.t

    def __hash__(self) -> int:
        return hash((self.v, self.t))

    def __str__(self) -> str:
        return f"{{id:{self.id},v:{self.v},t:{self.t}}}"


class StateSpaceST(Grid2d):
    """A grid whose states are extended with time; waiting in place is allowed."""

    def st_succs(self, s: StateST) -> list[tuple[StateST, CostVec]]:
        """Successor states of ``s`` one time step later, each with a unit cost."""
        out: list[tuple[StateST, CostVec]] = []
        for u in [*self.succs(s.v), s.v]:
            r, c = self.k2r(u), self.k2c(u)
            if not self.is_within_border(r, c) or self.occupancy[r][c] != 0:
                continue
            out.append((StateST(v=u, t=s.t + 1), [1.0]))
        return out


class AstarSTGrid2d(AstarGrid2d):
    """A* over (vertex, time) states avoiding vertex and edge constraints.

    The heuristic is the exact cost-to-go on the static grid, computed by a
    backwards Dijkstra search. The goal only counts as reached after the
    last vertex constraint's time step.
    """

    def __init__(self) -> None:
        super().__init__()
        self._dijk = Dijkstra()
        self._ts = 0
        self._g_all: dict[str, float] = {}
        self._states: list[StateST] = []
        self._st_parent: list[int] = []
        self._reached_goal_state_id = -1
        self._last_nc_t = -1
        self._avl_node: dict[int, AVLTree[int]] = {}
        self._avl_edge: dict[int, dict[int, AVLTree[int]]] = {}
        self.n_expanded = 0
        self.n_generated = 0

    # ----- constraints -----

    def add_node_cstr(self, nid: int, t: int) -> None:
        """Forbid being at vertex ``nid`` at time ``t``."""
        self._avl_node.setdefault(nid, AVLTree()).add(t)
        if t > self._last_nc_t:
            self._last_nc_t = t

    def add_edge_cstr(self, u: int, v: int, t: int) -> None:
        """Forbid moving from ``u`` at time ``t`` to ``v`` at time ``t + 1``."""
        self._avl_edge.setdefault(u, {}).setdefault(v, AVLTree()).add(t)

    # ----- results -----

    def get_path(self, v: int = -1, do_reverse: bool = True) -> list[int]:
        """Vertices of the path to the reached goal state, one per time step.

        ``v`` is ignored; the path always ends at the goal state found.
        """
        if self._reached_goal_state_id < 0:
            return []
        out: list[int] = []
        sid = self._reached_goal_state_id
        while sid != -1:
            out.append(self._states[sid].v)
            sid = self._st_parent[sid]
        return out[::-1] if do_reverse else out

    def solution_cost(self) -> list[float]:
        """Cost of the path to the reached goal state."""
        if self._reached_goal_state_id < 0:
            raise SearchError("no goal state has been reached")
        goal = self._states[self._reached_goal_state_id]
        return [self._g_all[goal.key()]]

    # ----- search -----

    def _space(self) -> StateSpaceST:
        graph = self._require_graph()
        if not isinstance(graph, StateSpaceST):
            raise SearchError(f"{type(self).__name__} needs a StateSpaceST graph")
        return graph

    def _search(self) -> bool:
        space = self._space()
        name = type(self).__name__
        if not space.has_vertex(self._vs):
            raise SearchError(f"{name}, input v_start {self._vs} does not exist")
        if not space.has_vertex(self._vg):
            raise SearchError(f"{name}, input v_goal {self._vg} does not exist")

        self._init_more()

        timer = SimpleTimer().start()
        self._states = []
        self._st_parent = []
        self._g_all = {}
        self._open = []
        self._reached_goal_state_id = -1

        s0 = StateST(v=self._vs, t=self._ts, id=0)
        self._states.append(s0)
        self._st_parent.append(-1)
        self._g_all[s0.key()] = 0.0
        self._push(s0.id, 0.0, self._heuristic(s0.v))

        n_exp = 0
        n_gen = 0
        while self._open:
            if timer.duration_seconds() > self._time_limit:
                logger.info("%s search timeout", name)
                break
            sid, _ = self._pop()
            s = self._states[sid]
            g_s = self._g_all[s.key()]

            if self._check_terminate(s):
                self._reached_goal_state_id = s.id
                break

            n_exp += 1
            for s2, cvec in space.st_succs(s):
                if self._collide_check(s.v, s2.v, s.t):
                    continue
                g2 = g_s + cvec[0]
                key = s2.key()
                known = self._g_all.get(key)
                if known is not None and known < g2:
                    continue
                s2.id = len(self._states)
                self._states.append(s2)
                self._st_parent.append(s.id)
                self._g_all[key] = g2
                n_gen += 1
                self._push(s2.id, g2, self._wh * self._heuristic(s2.v))

        self.n_expanded = n_exp
        self.n_generated = n_gen
        logger.info(
            "%s search exit after %s seconds with n_exp=%d n_gen=%d",
            name,
            timer.duration_seconds(),
            n_exp,
            n_gen,
        )
        return self._reached_goal_state_id >= 0

    def _check_terminate(self, s: StateST) -> bool:
        return s.v == self._vg and s.t > self._last_nc_t

    def _heuristic(self, v: int) -> float:
        out = self._dijk.dist_value(v)
        if out < 0:
            raise SearchError("unavailable heuristic")
        return out

    def _init_more(self) -> None:
        super()._init_more()
        self._dijk.set_graph(self._require_graph())
        self._dijk.exhaustive_backwards(self._vg)

    def _collide_check(self, v1: int, v2: int, t: int) -> bool:
        """True when moving from ``v1`` at ``t`` to ``v2`` at ``t + 1`` is forbidden."""
        node_tree = self._avl_node.get(v2)
        if node_tree is not None and (t + 1) in node_tree:
            return True
        edge_tree = self._avl_edge.get(v1, {}).get(v2)
        return edge_tree is not None and t in edge_tree


def run_astar_st_grid2d(
    g: PlannerGraph,
    vo: int,
    vd: int,
    time_limit: float,
    ncs: Sequence[Sequence[int]],
    ecs: Sequence[Sequence[int]],
) -> list[int]:
    """Plan on the occupancy of grid ``g`` under node constraints ``(v, t)``
    and edge constraints ``(u, v, t)``; return the path (empty if none)."""
    if not isinstance(g, Grid2d):
        raise SearchError("run_astar_st_grid2d needs a Grid2d graph")
    space = StateSpaceST(g.occupancy)
    planner = AstarSTGrid2d()
    planner.set_graph(space)
    for nid, t, *_ in ncs:
        planner.add_node_cstr(nid, t)
    for u, v, t, *_ in ecs:
        planner.add_edge_cstr(u, v, t)
    return planner.path_finding(vo, vd, time_limit)


__all__: Optional[list[str]] = [
    "StateST",
    "StateSpaceST",
    "AstarSTGrid2d",
    "run_astar_st_grid2d",
]