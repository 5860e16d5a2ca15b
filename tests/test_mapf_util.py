import pytest

from raplab.mapf_util import MAPFPlanner, format_path_set, joint_path_to_path_set
from raplab.sparse_graph import SparseGraph


class _FixedPlanner(MAPFPlanner):
    def solve(self, starts, goals, time_limit, eps):
        self._starts = list(starts)
        self._goals = list(goals)
        self._time_limit = time_limit
        return 1

    def get_plan(self, nid=-1):
        return [[s, g] for s, g in zip(self._starts, self._goals)]

    def get_plan_cost(self, nid=-1):
        return [float(len(self._starts))]

    def get_stats(self):
        return {"n_agents": float(len(self._starts))}


def test_format_path_set_value():
    assert format_path_set([[1, 2], [3]]) == "{agent:0,path:{1,2,};agent:1,path:{3,};}."


def test_format_path_set_lists_every_agent():
    ps = [[0], [4, 5], [7, 8, 9]]
    text = format_path_set(ps)
    assert text.count("agent:") == len(ps)
    assert text.startswith("{") and text.endswith("}.")


def test_joint_path_transpose():
    assert joint_path_to_path_set([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_joint_path_round_trip():
    jp = [[0, 1, 2, 3], [9, 8, 7, 6], [5, 5, 5, 5]]
    assert joint_path_to_path_set(joint_path_to_path_set(jp)) == jp


def test_joint_path_empty():
    assert joint_path_to_path_set([]) == []


def test_joint_path_ragged_raises():
    with pytest.raises(ValueError):
        joint_path_to_path_set([[1, 2], [3]])


def test_set_graph_clears_starts_and_goals():
    planner = _FixedPlanner()
    planner.solve([1, 2], [3, 4], 1.0, 0.0)
    assert planner.starts == [1, 2]
    g = SparseGraph()
    planner.set_graph(g)
    assert planner.graph is g
    assert planner.starts == []
    assert planner.goals == []


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        MAPFPlanner()