import math

import pytest

from raplab.dense_graph import DenseGraph
from raplab.dijkstra import Dijkstra
from raplab.grid2d import Grid2d
from raplab.hybrid_graph import HybridGraph2d
from raplab.search import SearchError, SearchMode
from raplab.sparse_graph import SparseGraph


def _sample_sparse(c34=16.0):
    g = SparseGraph()
    for v in range(5):
        g.add_vertex(v)
    g.add_arc(0, 1, [11.3])
    g.add_arc(1, 0, [0.3])
    g.add_edge(1, 2, [15.5])
    g.add_arc(2, 3, [15.5])
    g.add_edge(3, 4, [c34])
    g.add_edge(4, 1, [17.6])
    return g


@pytest.fixture
def sparse():
    g = _sample_sparse()
    g.add_edge(1, 7, [9.9])
    g.add_arc(0, 3, [6])
    return g


def test_path_finding_on_sparse_graph(sparse):
    dijk = Dijkstra()
    dijk.set_graph(sparse)
    assert dijk.path_finding(0, 4) == [0, 3, 4]
    assert dijk.dist_all() == pytest.approx(
        [0, 11.3, 26.8, 6, 22, math.inf, math.inf, 21.2]
    )
    assert dijk.solution_cost() == pytest.approx([22.0])


def test_exhaustive_backwards_on_sparse_graph(sparse):
    dijk = Dijkstra()
    dijk.set_graph(sparse)
    dijk.exhaustive_backwards(4)
    assert dijk.mode is SearchMode.EXHAUSTIVE_BACKWARDS
    assert dijk.dist_all() == pytest.approx(
        [22, 17.6, 31.5, 16, 0, math.inf, math.inf, 27.5]
    )


def test_exhaustive_forwards_on_sparse_graph(sparse):
    dijk = Dijkstra()
    dijk.set_graph(sparse)
    dijk.exhaustive_forwards(4)
    assert dijk.dist_all() == pytest.approx(
        [17.9, 17.6, 33.1, 16, 0, math.inf, math.inf, 27.5]
    )
    assert dijk.get_path(2) == [4, 1, 2]
    assert dijk.get_path(2, do_reverse=False) == [2, 1, 4]
    assert dijk.path_cost(2) == pytest.approx([33.1])


def test_dijkstra_on_hybrid_graph():
    g = _sample_sparse(c34=15.9)
    occupancy = [[0.0] * 10 for _ in range(10)]
    occupancy[0][2] = 1
    gg = Grid2d(occupancy)
    gg.set_cost_scale_factor(10.0)

    hg = HybridGraph2d()
    hg.add_grid2d(gg)
    hg.add_grid2d(gg)
    hg.add_sparse_graph(g)
    hg.add_sparse_graph(g)
    hg.add_extra_edge(10, 104, [100.0])
    hg.add_extra_edge(104, 10, [100.0])
    hg.add_extra_edge(193, 200, [100.0])
    hg.add_extra_edge(204, 207, [100.0])

    dijk = Dijkstra()
    dijk.set_graph(hg)
    dijk.exhaustive_backwards(207)
    d_all = dijk.dist_all()
    assert len(d_all) == 210
    assert d_all[207] == 0
    assert d_all[204] == pytest.approx(100)
    assert d_all[206] == pytest.approx(15.5)
    assert d_all[200] == pytest.approx(121.9)
    assert d_all[193] == pytest.approx(221.9)

    p = dijk.path_finding(0, 209)
    assert p[:3] == [0, 10, 104]
    assert p[-7:] == [193, 200, 203, 204, 207, 208, 209]
    assert len(p) == 19
    assert dijk.dist_value(209) == pytest.approx(463.3)
    assert dijk.solution_cost() == pytest.approx([463.3])


def test_dijkstra_on_dense_graph():
    g = DenseGraph()
    g.create_from_edges([0, 1, 2, 3], [1, 2, 3, 4], [[10], [20], [30], [40]])
    dijk = Dijkstra()
    dijk.set_graph(g)
    dijk.exhaustive_backwards(3)
    assert dijk.dist_all() == pytest.approx([60, 50, 30, 0, 40])
    assert dijk.path_finding(1, 3) == [1, 2, 3]
    assert dijk.solution_cost() == pytest.approx([50])


def test_path_is_made_of_arcs_and_sums_to_distance(sparse):
    dijk = Dijkstra()
    dijk.set_graph(sparse)
    dijk.exhaustive_forwards(0)
    for v in (2, 4, 7):
        path = dijk.get_path(v)
        assert path[0] == 0 and path[-1] == v
        total = sum(sparse.cost(a, b)[0] for a, b in zip(path, path[1:]))
        assert total == pytest.approx(dijk.dist_value(v))


def test_missing_start_raises(sparse):
    dijk = Dijkstra()
    dijk.set_graph(sparse)
    with pytest.raises(SearchError):
        dijk.path_finding(50, 0)


def test_missing_goal_raises(sparse):
    dijk = Dijkstra()
    dijk.set_graph(sparse)
    with pytest.raises(SearchError):
        dijk.path_finding(0, 50)


def test_negative_cost_raises():
    g = SparseGraph()
    g.add_arc(0, 1, [-1.0])
    dijk = Dijkstra()
    dijk.set_graph(g)
    with pytest.raises(SearchError):
        dijk.exhaustive_forwards(0)


def test_no_graph_raises():
    with pytest.raises(SearchError):
        Dijkstra().path_finding(0, 1)