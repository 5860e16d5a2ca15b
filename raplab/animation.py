"""Drawing grid maps and planned paths, and animating an agent along them."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, Optional, Sequence

import numpy as np

from raplab.astar import AstarGrid2d
from raplab.astar_st import AstarSTGrid2d, StateSpaceST
from raplab.grid2d import Grid2d
from raplab.movingai import (
    Experiment,
    GridMap,
    MapParseError,
    ScenarioManager,
    ScenarioParseError,
    State,
)

CELL_SIZE = 10
OBSTACLE_COLOR = (0, 0, 0)
EMPTY_COLOR = (255, 255, 255)
PATH_COLOR = (0, 255, 0)
AGENT_COLOR = (255, 0, 0)
START_COLOR = (255, 0, 255)
GOAL_COLOR = (255, 255, 0)
_BORDER_COLOR = (0, 0, 0)

WINDOW_TITLE = "Pathfinding Animation"


def new_canvas(grid_map: GridMap) -> np.ndarray:
    """A black RGB image with one ``CELL_SIZE`` square per map cell."""
    return np.zeros(
        (grid_map.height * CELL_SIZE, grid_map.width * CELL_SIZE, 3), dtype=np.uint8
    )


def _cell_slices(img: np.ndarray, cell: State) -> Optional[tuple[slice, slice]]:
    h, w = img.shape[:2]
    x0, y0 = cell.x * CELL_SIZE, cell.y * CELL_SIZE
    if cell.x < 0 or cell.y < 0 or x0 >= w or y0 >= h:
        return None
    return slice(y0, y0 + CELL_SIZE), slice(x0, x0 + CELL_SIZE)


def _fill_cell(img: np.ndarray, cell: State, color) -> None:
    region = _cell_slices(img, cell)
    if region is not None:
        img[region] = color


def _outline_cell(img: np.ndarray, cell: State, color) -> None:
    region = _cell_slices(img, cell)
    if region is None:
        return
    block = img[region]
    block[0, :] = color
    block[-1, :] = color
    block[:, 0] = color
    block[:, -1] = color


def draw_grid(grid_map: GridMap, img: np.ndarray) -> None:
    """Paint obstacle cells black and free cells white."""
    mask = np.array(grid_map.db, dtype=bool).reshape(grid_map.height, grid_map.width)
    big = np.repeat(np.repeat(mask, CELL_SIZE, axis=0), CELL_SIZE, axis=1)
    region = img[: big.shape[0], : big.shape[1]]
    region[big] = OBSTACLE_COLOR
    region[~big] = EMPTY_COLOR


def draw_path(
    path: Iterable[State], img: np.ndarray, start: State, goal: State
) -> None:
    """Paint the cells of ``path``, leaving the start and goal cells alone."""
    for state in path:
        if state in (start, goal):
            continue
        _fill_cell(img, state, PATH_COLOR)


def draw_agent(agent: State, img: np.ndarray) -> None:
    """Paint the agent's cell."""
    _fill_cell(img, agent, AGENT_COLOR)


def convert_path(path: Sequence[int], width: int) -> list[State]:
    """Turn row-major vertex ids into cell coordinates."""
    return [State(v % width, v // width) for v in path]


def draw_start_and_goal(start: State, goal: State, img: np.ndarray) -> None:
    """Paint the start and goal cells, each with a one-pixel black border."""
    _fill_cell(img, start, START_COLOR)
    _outline_cell(img, start, _BORDER_COLOR)
    _fill_cell(img, goal, GOAL_COLOR)
    _outline_cell(img, goal, _BORDER_COLOR)


# ----- commands -----


def _parse_args(argv: Optional[Sequence[str]], prog: str, experiment: int):
    parser = argparse.ArgumentParser(prog=prog, description="Animate a planned path.")
    parser.add_argument("map", nargs="?", help="map file (default: $MAPFILE)")
    parser.add_argument("scen", nargs="?", help="scenario file (default: $SCENFILE)")
    parser.add_argument("--experiment", type=int, default=experiment)
    parser.add_argument(
        "--no-display", action="store_true", help="plan and draw without showing"
    )
    args = parser.parse_args(argv)
    args.map = args.map or os.environ.get("MAPFILE")
    args.scen = args.scen or os.environ.get("SCENFILE")
    return args


def _load(args) -> Optional[tuple[GridMap, Experiment]]:
    if not args.map or not args.scen:
        print("Error: MAPFILE or SCENFILE environment variable is not set!", file=sys.stderr)
        return None
    try:
        grid_map = GridMap.from_file(args.map)
        scenarios = ScenarioManager()
        scenarios.load_scenario(args.scen)
    except (MapParseError, ScenarioParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    expr = scenarios.get_experiment(args.experiment)
    if expr is None:
        print("Error: expr is null!", file=sys.stderr)
        return None
    return grid_map, expr


def _render(grid_map: GridMap, grid_path: list[State], start: State, goal: State):
    img = new_canvas(grid_map)
    draw_grid(grid_map, img)
    draw_path(grid_path, img, start, goal)
    draw_start_and_goal(start, goal, img)
    return img


def _animate(img: np.ndarray, grid_path: list[State], delay: float, hold: bool) -> None:
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(num=WINDOW_TITLE)
    ax.set_axis_off()
    shown = ax.imshow(img)
    plt.pause(0.1)
    for state in grid_path:
        frame = img.copy()
        draw_agent(state, frame)
        shown.set_data(frame)
        plt.pause(delay)
    if hold:
        plt.show()
    else:
        plt.pause(1.0)
    plt.close(fig)


def main_astar(argv: Optional[Sequence[str]] = None) -> int:
    """Plan one scenario query with grid A* and animate the result."""
    args = _parse_args(argv, "animation_astar", 55)
    loaded = _load(args)
    if loaded is None:
        return 1
    grid_map, expr = loaded

    occupancy = [
        [1.0 if grid_map.is_obstacle(State(x, y)) else 0.0 for x in range(grid_map.width)]
        for y in range(grid_map.height)
    ]
    planner = AstarGrid2d()
    planner.set_graph(Grid2d(occupancy))
    start_id = expr.starty * grid_map.width + expr.startx
    goal_id = expr.goaly * grid_map.width + expr.goalx
    path = planner.path_finding(start_id, goal_id)
    grid_path = convert_path(path, grid_map.width)

    start = State(expr.startx, expr.starty)
    goal = State(expr.goalx, expr.goaly)
    img = _render(grid_map, grid_path, start, goal)

    if not grid_path:
        print("No path found between start and goal!", file=sys.stderr)
        return 1
    if not args.no_display:
        _animate(img, grid_path, 0.1, hold=False)
    return 0


def main_astar_time(argv: Optional[Sequence[str]] = None) -> int:
    """Plan one scenario query with space-time A* under fixed constraints and animate it."""
    args = _parse_args(argv, "animation_astar_time", 159)
    loaded = _load(args)
    if loaded is None:
        return 1
    grid_map, expr = loaded

    print(f"Start Position: ({expr.startx}, {expr.starty})")
    print(f"Goal Position: ({expr.goalx}, {expr.goaly})")
    start = State(expr.startx, expr.starty)
    goal = State(expr.goalx, expr.goaly)
    if grid_map.is_obstacle(start):
        print("Error: Start position is an obstacle!", file=sys.stderr)
        return 1
    if grid_map.is_obstacle(goal):
        print("Error: Goal position is an obstacle!", file=sys.stderr)
        return 1

    occupancy = [[0.0] * grid_map.width for _ in range(grid_map.height)]
    planner = AstarSTGrid2d()
    planner.set_graph(StateSpaceST(occupancy))
    print("Graph initialized with occupancy grid.")
    planner.add_node_cstr(3, 3)
    planner.add_node_cstr(12, 3)
    planner.add_edge_cstr(24, 25, 6)
    planner.add_node_cstr(99, 20)
    planner.set_heu_weight(1.2)

    start_id = expr.starty * grid_map.width + expr.startx
    goal_id = expr.goaly * grid_map.width + expr.goalx
    print(f"Start ID: {start_id}, Goal ID: {goal_id}")
    path = planner.path_finding(start_id, goal_id)
    if not path:
        print("Pathfinding failed: No path found!", file=sys.stderr)
        return 1
    grid_path = convert_path(path, grid_map.width)

    img = _render(grid_map, grid_path, start, goal)
    if not args.no_display:
        _animate(img, grid_path, 0.5, hold=True)
    return 0