"""Graph search and path planning on sparse, dense, grid and hybrid graphs."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "astar",
    "astar_st",
    "avltree",
    "dense_graph",
    "dijkstra",
    "graph_base",
    "grid2d",
    "hybrid_graph",
    "mapf_util",
    "movingai",
    "search",
    "sparse_graph",
    "timer",
    "vecops",
]