"""The interface of single-agent graph search planners."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional

from raplab.graph_base import PlannerGraph


class SearchError(RuntimeError):
    """Raised when a search cannot be carried out on its input."""


class SearchMode(IntEnum):
    """What a search computes."""

    PATH_FINDING = 0
    EXHAUSTIVE_BACKWARDS = 1
    EXHAUSTIVE_FORWARDS = 2


class GraphSearch(ABC):
    """A planner that searches a ``PlannerGraph``."""

    def __init__(self) -> None:
        self._graph: Optional[PlannerGraph] = None
        self._mode = SearchMode.PATH_FINDING
        self._vs = -1
        self._vg = -1
        self._time_limit = -1.0

    @property
    def graph(self) -> Optional[PlannerGraph]:
        return self._graph

    @property
    def start(self) -> int:
        return self._vs

    @property
    def goal(self) -> int:
        return self._vg

    @property
    def mode(self) -> SearchMode:
        return self._mode

    @property
    def time_limit(self) -> float:
        return self._time_limit

    def set_graph(self, g: PlannerGraph) -> None:
        """Search ``g`` from now on; start, goal and mode are reset."""
        self._graph = g
        self._vs = -1
        self._vg = -1
        self._mode = SearchMode.PATH_FINDING

    def _require_graph(self) -> PlannerGraph:
        if self._graph is None:
            raise SearchError(f"{type(self).__name__} has no graph to search")
        return self._graph

    @abstractmethod
    def path_finding(self, vs: int, vg: int, time_limit: float, cdim: int) -> list[int]:
        """Find a path from ``vs`` to ``vg`` using cost dimension ``cdim``."""

    @abstractmethod
    def solution_cost(self) -> list[float]:
        """Cost vector of the path found by the last ``path_finding`` call."""