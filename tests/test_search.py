import pytest

from raplab.search import GraphSearch, SearchError, SearchMode
from raplab.sparse_graph import SparseGraph


class _Dummy(GraphSearch):
    def path_finding(self, vs, vg, time_limit=1.0, cdim=0):
        self._require_graph()
        self._vs = vs
        self._vg = vg
        self._time_limit = time_limit
        self._mode = SearchMode.EXHAUSTIVE_FORWARDS
        return [vs, vg]

    def solution_cost(self):
        return [float(self._vg - self._vs)]


def test_set_graph_resets_start_goal_and_mode():
    s = _Dummy()
    s.set_graph(SparseGraph())
    s.path_finding(2, 5, 3.0)
    assert (s.start, s.goal, s.time_limit) == (2, 5, 3.0)
    assert s.mode is SearchMode.EXHAUSTIVE_FORWARDS
    g = SparseGraph()
    s.set_graph(g)
    assert s.graph is g
    assert s.start == -1
    assert s.goal == -1
    assert s.mode is SearchMode.PATH_FINDING


def test_missing_graph_raises():
    with pytest.raises(SearchError):
        GraphSearch._require_graph(_Dummy())


def test_mode_values_follow_source_numbering():
    assert SearchMode(0) is SearchMode.PATH_FINDING
    assert SearchMode(1) is SearchMode.EXHAUSTIVE_BACKWARDS
    assert SearchMode(2) is SearchMode.EXHAUSTIVE_FORWARDS


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        GraphSearch()