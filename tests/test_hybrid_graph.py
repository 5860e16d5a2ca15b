import pytest

from raplab.graph_base import GraphError
from raplab.grid2d import Grid2d
from raplab.hybrid_graph import HybridGraph2d
from raplab.sparse_graph import SparseGraph


def _sparse():
    g = SparseGraph()
    for v in range(5):
        g.add_vertex(v)
    g.add_arc(0, 1, [11.3])
    g.add_arc(1, 0, [0.3])
    g.add_edge(1, 2, [15.5])
    g.add_arc(2, 3, [15.5])
    g.add_edge(3, 4, [15.9])
    g.add_edge(4, 1, [17.6])
    return g


def _grid():
    occ = [[0.0] * 10 for _ in range(10)]
    occ[0][2] = 1
    gg = Grid2d(occ)
    gg.set_cost_scale_factor(10.0)
    return gg


@pytest.fixture
def parts():
    g, gg = _sparse(), _grid()
    hg = HybridGraph2d()
    hg.add_grid2d(gg)
    hg.add_grid2d(gg)
    hg.add_sparse_graph(g)
    hg.add_sparse_graph(g)
    return hg, gg, g


def test_empty_graph():
    hg = HybridGraph2d()
    assert hg.num_vertex() == 0
    assert hg.has_vertex(0) is False
    assert hg.cost_dim() == 0
    assert hg.succs(0) == []


def test_vertex_count(parts):
    hg, gg, g = parts
    assert hg.num_vertex() == 2 * gg.num_vertex() + 2 * g.num_vertex()
    assert hg.all_vertex() == list(range(hg.num_vertex()))
    assert hg.has_vertex(hg.num_vertex() - 1)
    assert not hg.has_vertex(hg.num_vertex())
    assert not hg.has_vertex(-1)


def test_grid_succs_are_offset(parts):
    hg, gg, _ = parts
    n = gg.num_vertex()
    assert hg.succs(4) == gg.succs(4)
    assert hg.succs(104) == [w + n for w in gg.succs(4)]
    assert hg.succ_costs(104) == gg.succ_costs(4)


def test_sparse_succs_and_preds_are_offset(parts):
    hg, gg, g = parts
    base = 2 * gg.num_vertex()
    assert hg.succs(base) == [w + base for w in g.succs(0)]
    second = base + g.num_vertex()
    assert hg.succs(second) == [w + second for w in g.succs(0)]
    assert hg.preds(base + 1) == [w + base for w in g.preds(1)]
    assert hg.pred_costs(base + 1) == g.pred_costs(1)


def test_cost_within_subgraph(parts):
    hg, gg, g = parts
    base = 2 * gg.num_vertex()
    assert hg.cost(base, base + 1) == [11.3]
    assert hg.cost(4, 5) == gg.cost(4, 5)


def test_extra_edges(parts):
    hg, _, _ = parts
    assert hg.cost(10, 104) == []
    assert not hg.has_arc(10, 104)
    hg.add_extra_edge(10, 104, [100.0])
    hg.add_extra_edge(104, 10, [100.0])
    hg.add_extra_edge(193, 200, [100.0])
    hg.add_extra_edge(204, 207, [100.0])
    assert 104 in hg.succs(10)
    assert 10 in hg.preds(104)
    assert hg.cost(10, 104) == [100.0]
    assert hg.has_arc(193, 200)
    assert not hg.has_arc(200, 193)
    assert hg.succ_costs(204)[-1] == [100.0]
    assert len(hg.succ_costs(10)) == len(hg.succs(10))
    assert len(hg.pred_costs(207)) == len(hg.preds(207))


def test_same_subgraph_counts_as_arc(parts):
    hg, _, _ = parts
    assert hg.has_arc(0, 99)
    assert not hg.has_arc(0, 150)


def test_out_of_range_queries(parts):
    hg, _, _ = parts
    assert hg.succs(-1) == []
    assert hg.preds(10_000) == []
    assert hg.succ_costs(10_000) == []
    assert hg.cost(0, 10_000) == []


def test_num_arc_sums_parts(parts):
    hg, gg, g = parts
    hg.add_extra_edge(10, 104, [100.0])
    assert hg.num_arc() == 2 * gg.num_arc() + 2 * g.num_arc() + 1


def test_num_edge_odd_raises():
    g = SparseGraph()
    g.add_edge(0, 1, [1.0])
    hg = HybridGraph2d()
    hg.add_sparse_graph(g)
    assert hg.num_edge() == g.num_arc() // 2
    hg.add_extra_edge(0, 1, [1.0])
    with pytest.raises(GraphError):
        hg.num_edge()


def test_cost_dim_prefers_grid():
    g = SparseGraph()
    g.add_edge(0, 1, [1.0, 2.0])
    hg = HybridGraph2d()
    hg.add_sparse_graph(g)
    assert hg.cost_dim() == g.cost_dim()
    hg.add_grid2d(_grid())
    assert hg.cost_dim() == 1