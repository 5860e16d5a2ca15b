"""The graph interface that every planner searches over."""

from __future__ import annotations

from abc import ABC, abstractmethod

from raplab.vecops import CostVec


class GraphError(RuntimeError):
    """Raised when a graph is queried or modified inconsistently."""


class PlannerGraph(ABC):
    """A directed graph G=(V,E,C) as seen by planners.

    Vertices are non-negative integers and every arc carries a cost
    vector (a list of floats) of the same dimension.
    """

    @abstractmethod
    def has_vertex(self, v: int) -> bool:
        """Whether ``v`` is a vertex of the graph."""

    @abstractmethod
    def has_arc(self, v: int, u: int) -> bool:
        """Whether the arc ``(v, u)`` exists."""

    @abstractmethod
    def succs(self, v: int) -> list[int]:
        """Successors of ``v``."""

    @abstractmethod
    def preds(self, v: int) -> list[int]:
        """Predecessors of ``v``."""

    @abstractmethod
    def cost(self, u: int, v: int) -> CostVec:
        """Cost vector of the arc ``(u, v)``."""

    @abstractmethod
    def succ_costs(self, u: int) -> list[CostVec]:
        """Cost vectors of the arcs leaving ``u``, aligned with ``succs(u)``."""

    @abstractmethod
    def pred_costs(self, u: int) -> list[CostVec]:
        """Cost vectors of the arcs entering ``u``, aligned with ``preds(u)``."""

    @abstractmethod
    def num_vertex(self) -> int:
        """Number of vertices."""

    @abstractmethod
    def num_arc(self) -> int:
        """Number of directed arcs."""

    @abstractmethod
    def num_edge(self) -> int:
        """Number of undirected edges; half of ``num_arc()``."""

    @abstractmethod
    def cost_dim(self) -> int:
        """Length of the cost vectors."""

    @abstractmethod
    def all_vertex(self) -> list[int]:
        """Every vertex id."""

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and self.has_vertex(v)