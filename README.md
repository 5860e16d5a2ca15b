# raplab

Graph search and path planning in plain Python.

raplab provides a few graph types behind one planner interface, the classic
shortest-path searches on top of them, a space-time A* that respects vertex
and edge constraints, readers for the MovingAI grid benchmark format, and
two small commands that animate a planned path.

## Installation

```
pip install raplab
```

To run the test suite as well:

```
pip install "raplab[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `raplab.vecops` | Cost-vector helpers: `vec_add`, `vec_sub`, `scale`, `norm_l2`, `normalize`, `inner_product`, `lex_compare`, `eps_dom`, `elementwise_min`, `elementwise_max`, `take_combination`, `vec_to_str` |
| `raplab.movingai` | `GridMap`, `ScenarioManager`, `Experiment`, `GridMapParser`, `traversable`, and the errors `MapParseError` and `ScenarioParseError` |
| `raplab.avltree` | `AVLTree` with `find`, `find_max_less`, `find_min_more`, `delete`, `to_sorted` and `verify` |
| `raplab.graph_base` | The abstract `PlannerGraph` interface and `GraphError` |
| `raplab.sparse_graph` | `SparseGraph`, an adjacency-list graph with vector costs |
| `raplab.grid2d` | `Grid2d`, a 4- or 8-connected occupancy grid |
| `raplab.hybrid_graph` | `HybridGraph2d`, several grids and roadmaps joined by extra arcs |
| `raplab.dense_graph` | `DenseGraph`, a cost-matrix graph, optionally with arbitrary vertex ids |
| `raplab.search` | The abstract `GraphSearch` interface, `SearchMode` and `SearchError` |
| `raplab.dijkstra` | `Dijkstra`: start-goal search plus exhaustive forward and backward sweeps |
| `raplab.astar` | `Astar` (weighted, zero heuristic) and `AstarGrid2d` (Manhattan heuristic) |
| `raplab.astar_st` | `StateST`, `StateSpaceST`, `AstarSTGrid2d` and `run_astar_st_grid2d` |
| `raplab.animation` | Drawing helpers on numpy images and the two animation commands |
| `raplab.mapf_util` | The abstract `MAPFPlanner` interface, `format_path_set`, `joint_path_to_path_set` |
| `raplab.timer` | `SimpleTimer`, a processor-time stopwatch |

Vertices are integers. On a grid, the vertex of row `r` and column `c` is
`r * width + c`; cells with a value greater than zero are obstacles. Arc
costs are lists of floats, so a graph may carry several cost criteria and a
search picks one of them with `cdim`.

## Shortest paths on a sparse graph

```python
from raplab.sparse_graph import SparseGraph
from raplab.dijkstra import Dijkstra

g = SparseGraph()
g.add_arc(0, 1, [11.3])
g.add_arc(1, 0, [0.3])
g.add_edge(1, 2, [15.5])
g.add_arc(2, 3, [15.5])
g.add_edge(3, 4, [16])
g.add_arc(0, 3, [6])

dijk = Dijkstra()
dijk.set_graph(g)
path = dijk.path_finding(0, 4)     # [0, 3, 4]
print(dijk.solution_cost())        # [22.0]

dijk.exhaustive_backwards(4)       # cost-to-go from every vertex to 4
print(dijk.dist_all())             # math.inf for vertices that cannot reach 4
```

`exhaustive_forwards(vs)` computes the cost-to-come from `vs` instead;
`get_path(v)` and `path_cost(v)` then give the path and cost vector between
the search root and any reached vertex. Searches raise `SearchError` for an
unknown start or goal and for negative arc costs.

## A* on a grid

```python
from raplab.grid2d import Grid2d
from raplab.astar import AstarGrid2d

occupancy = [[0.0] * 10 for _ in range(10)]
for col in range(10):
    if col != 5:
        occupancy[5][col] = 1.0     # a wall with a single gap

grid = Grid2d(occupancy)
planner = AstarGrid2d()
planner.set_graph(grid)
path = planner.path_finding(0, 99)
print(path, planner.dist_value(99))
```

`Grid2d.set_k_neighbor(8)` switches to 8-connectivity (diagonal steps cost
1.4), and `set_cost_scale_factor` scales every step cost. The grid keeps a
reference to the occupancy matrix, so later changes to it are seen.
`Astar.set_heu_weight(w)` turns the search into weighted A* for any
`w >= 1`; smaller weights raise `ValueError`.

## Planning around moving obstacles

`AstarSTGrid2d` searches over (cell, time) pairs: every step either moves to
a neighbouring free cell or waits in place, and takes one time unit. Its
heuristic is the exact cost-to-go on the static grid, from a backwards
Dijkstra sweep.

```python
from raplab.astar_st import StateSpaceST, AstarSTGrid2d

space = StateSpaceST(occupancy)
planner = AstarSTGrid2d()
planner.set_graph(space)
planner.add_node_cstr(3, 3)         # cell 3 is taken at t = 3
planner.add_edge_cstr(24, 25, 6)    # the move 24 -> 25 leaving at t = 6 is forbidden
planner.add_node_cstr(99, 20)       # the goal is occupied at t = 20
path = planner.path_finding(0, 99, 10)
```

The goal is only accepted after the last node constraint's time step, so the
path above reaches cell 99 no earlier than t = 21; the path lists one cell
per time step. An empty list means no path was found within the time limit.
`run_astar_st_grid2d(grid, start, goal, time_limit, node_constraints,
edge_constraints)` does the same set-up in one call from a `Grid2d`, with
node constraints as `(v, t)` and edge constraints as `(u, v, t)`.

## MovingAI benchmarks

```python
from raplab.movingai import GridMap, ScenarioManager

grid_map = GridMap.from_file("arena.map")
scenarios = ScenarioManager()
scenarios.load_scenario("arena.map.scen")

for i in range(scenarios.num_experiments()):
    exp = scenarios.get_experiment(i)
    print(exp.startx, exp.starty, exp.goalx, exp.goaly, exp.distance)
```

Only `octile` maps are accepted; an unreadable or malformed map raises
`MapParseError`. Scenario files of version 0 (no version line) or 1 are read;
a missing file or another version number raises `ScenarioParseError`.
Terrain `S`, `W`, `T`, `@` and `O` counts as an obstacle, everything else as
free, and `is_obstacle` is also true outside the map.

## Animations

Two commands draw a map, plan a path on it and step an agent along the path
in a matplotlib window:

```
MAPFILE=arena.map SCENFILE=arena.map.scen raplab-animate-astar
MAPFILE=arena.map SCENFILE=arena.map.scen raplab-animate-astar-time
```

The map and scenario may also be given as the two positional arguments.
`--experiment N` picks the scenario query (55 for `raplab-animate-astar`,
159 for `raplab-animate-astar-time` by default), and `--no-display` plans
and draws without opening a window.

`raplab-animate-astar` runs `AstarGrid2d` on the map.
`raplab-animate-astar-time` runs the space-time planner on an obstacle-free
grid of the map's size, with a few fixed constraints and heuristic weight
1.2, and keeps the window open at the end. Obstacles are drawn black, free
cells white, the path green, the start magenta, the goal yellow and the
agent red. Both exit with status 1 if no map or scenario is given, a file
cannot be read, the scenario index does not exist or no path is found;
`raplab-animate-astar-time` also refuses a start or goal on an obstacle.

The drawing helpers (`new_canvas`, `draw_grid`, `draw_path`, `draw_agent`,
`draw_start_and_goal`, `convert_path`) work on plain numpy RGB arrays and
can be used without any window.

## What it does not do

`MAPFPlanner` in `raplab.mapf_util` is only an interface: the package ships
no multi-agent path finding solver that implements it. Grid maps are 2D
only, and `GridMap` has no editor or writer for `.map` files.