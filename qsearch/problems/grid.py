# qsearch/problems/grid.py
from __future__ import annotations
import os
from typing import Iterable, Tuple, Set, Optional

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridProblem:
    """
    4-neighbour grid pathfinding with unit costs.

    - State: (row, col) tuple
    - ACTIONS(s): the moves among Up/Down/Left/Right that stay in bounds and off walls
    - RESULT(s,a): next (row, col)
    - IS-GOAL(s): s == goal
    - c(s,a,s'): 1.0
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Optional[Coord],
                 walls: Set[Coord] | None = None):
        self.rows = rows
        self.cols = cols
        self.start = start
        self.goal = goal
        self.walls = walls or set()

    def in_bounds(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def initial_state(self) -> Coord:
        return self.start

    def is_goal(self, state: Coord) -> bool:
        return state == self.goal

    def actions(self, state: Coord) -> Iterable[str]:
        r, c = state
        for name, (dr, dc) in _MOVES.items():
            if self.in_bounds((r + dr, c + dc)):
                yield name

    def result(self, state: Coord, action: str) -> Coord:
        r, c = state
        dr, dc = _MOVES[action]
        return (r + dr, c + dc)

    def step_cost(self, state: Coord, action: str, next_state: Coord) -> float:
        return 1.0

def make_grid_problem() -> GridProblem:
    # default 5x7 grid with an L-shaped wall; size overridable for benchmarks
    rows = int(os.getenv("GRID_ROWS", "5"))
    cols = int(os.getenv("GRID_COLS", "7"))
    walls = {(1,3), (2,3), (3,3), (3,4)}
    walls = {w for w in walls if w[0] < rows and w[1] < cols}
    start, goal = (0, 0), (rows - 1, cols - 1)
    walls -= {start, goal}
    return GridProblem(rows=rows, cols=cols, start=start, goal=goal, walls=walls)
