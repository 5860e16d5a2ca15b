"""Path-set helpers and the interface of multi-agent path finders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from raplab.graph_base import PlannerGraph
from raplab.vecops import CostVec

logger = logging.getLogger(__name__)

PathSet = list[list[int]]


def format_path_set(ps: Sequence[Sequence[int]]) -> str:
    """Render one path per agent as ``{agent:i,path:{v,...,};...}.``."""
    body = "".join(
        f"agent:{i},path:{{" + "".join(f"{v}," for v in path) + "};"
        for i, path in enumerate(ps)
    )
    return "{" + body + "}."


def joint_path_to_path_set(jp: Sequence[Sequence[int]]) -> PathSet:
    """Transpose per-agent paths into per-step joint positions.

    All paths must have the same length; an empty input gives an empty result.
    """
    if not jp:
        logger.warning("joint_path_to_path_set input joint path has size zero!")
        return []
    return [list(step) for step in zip(*jp, strict=True)]


class MAPFPlanner(ABC):
    """Interface of multi-agent path finding planners."""

    def __init__(self) -> None:
        self._graph: Optional[PlannerGraph] = None
        self._starts: list[int] = []
        self._goals: list[int] = []
        self._time_limit = 0.0

    @property
    def graph(self) -> Optional[PlannerGraph]:
        return self._graph

    @property
    def starts(self) -> list[int]:
        return list(self._starts)

    @property
    def goals(self) -> list[int]:
        return list(self._goals)

    def set_graph(self, g: PlannerGraph) -> None:
        """Use ``g`` for planning and forget previous starts and goals."""
        self._graph = g
        self._starts = []
        self._goals = []

    @abstractmethod
    def solve(
        self,
        starts: Sequence[int],
        goals: Sequence[int],
        time_limit: float,
        eps: float,
    ) -> int:
        """Plan paths from ``starts`` to ``goals``."""

    @abstractmethod
    def get_plan(self, nid: int = -1) -> PathSet:
        """The planned paths."""

    @abstractmethod
    def get_plan_cost(self, nid: int = -1) -> CostVec:
        """Cost of the planned paths."""

    @abstractmethod
    def get_stats(self) -> dict[str, float]:
        """Statistics gathered while planning."""