"""
Tests for GraphSearchBFS: duplicate-state suppression, the explored /
frontier-state bookkeeping, metrics, and breadth-first minimality.
"""
import random
from collections import deque

import pytest

from qsearch.algorithms.graph_bfs import GraphSearchBFS
from qsearch.core.errors import FAILURE, SearchExhausted, is_failure
from qsearch.core.frontiers import FIFOQueue
from qsearch.problems.graph import GraphProblem
from qsearch.problems.grid import GridProblem
from qsearch.problems.romania import romania_problem


class CheckedBFS(GraphSearchBFS):
    """Asserts the bookkeeping invariants around every hook call."""

    def __init__(self):
        super().__init__()
        self.expanded_states = []

    def _check(self):
        in_frontier = [n.state for n in self.frontier]
        assert len(in_frontier) == len(set(in_frontier))
        assert set(in_frontier) == self.frontier_states
        assert not (self.explored & self.frontier_states)

    def add_to_frontier(self, node):
        super().add_to_frontier(node)
        self._check()

    def remove_from_frontier(self):
        node = super().remove_from_frontier()
        self._check()
        self.expanded_states.append(node.state)
        return node


def _replay(problem, actions):
    s = problem.initial_state()
    for a in actions:
        s = problem.result(s, a)
    return s


def _shortest_action_count(problem):
    """Independent reference: plain BFS over states, no Node machinery."""
    start = problem.initial_state()
    dist = {start: 0}
    q = deque([start])
    while q:
        s = q.popleft()
        if problem.is_goal(s):
            return dist[s]
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            if s2 not in dist:
                dist[s2] = dist[s] + 1
                q.append(s2)
    return None


def test_diamond_scenario(diamond, counting_fifo):
    search = CheckedBFS()
    actions = search.search(diamond, counting_fifo)

    assert actions in (["B", "D"], ["C", "D"])
    assert actions == ["B", "D"]  # actions are enumerated B before C
    assert search.metrics.nodes_expanded == 3
    assert counting_fifo.pushed.count("D") == 1
    assert counting_fifo.pushed == ["A", "B", "C", "D"]
    assert search.metrics.max_frontier_size == 2
    assert search.metrics.path_cost == 2.0


def test_initial_state_goal_returns_empty_solution(counting_fifo):
    problem = GraphProblem({"A": ["B"]}, "A", "A")
    search = GraphSearchBFS()
    actions = search.search(problem, counting_fifo)

    assert actions == []
    assert not is_failure(actions)
    assert search.metrics.nodes_expanded == 0
    assert counting_fifo.pushed == []


def test_unreachable_goal_exhausts_every_state_once(cyclic_unreachable):
    search = CheckedBFS()
    result = search.search(cyclic_unreachable, FIFOQueue())

    assert result is FAILURE
    assert isinstance(result, SearchExhausted)
    assert sorted(search.expanded_states) == ["A", "B", "C"]
    assert search.explored == {"A", "B", "C"}
    assert search.frontier_states == set()
    assert search.metrics.nodes_expanded == 3


def test_duplicates_are_dropped_silently(counting_fifo):
    # every vertex points at every other one, plus a self-loop
    names = "ABCDE"
    problem = GraphProblem({u: list(names) for u in names}, "A", "Z")
    search = CheckedBFS()
    assert search.search(problem, counting_fifo) is FAILURE
    assert sorted(counting_fifo.pushed) == list(names)
    assert len(search.expanded_states) == len(set(search.expanded_states)) == 5


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_solution_length_is_minimal_on_unit_cost_grids(seed):
    rng = random.Random(seed)
    rows, cols = 8, 9
    walls = {(r, c) for r in range(rows) for c in range(cols) if rng.random() < 0.25}
    walls -= {(0, 0), (rows - 1, cols - 1)}
    problem = GridProblem(rows, cols, (0, 0), (rows - 1, cols - 1), walls)

    search = CheckedBFS()
    result = search.search(problem, FIFOQueue())
    expected = _shortest_action_count(problem)

    if expected is None:
        assert result is FAILURE
    else:
        assert len(result) == expected
        assert problem.is_goal(_replay(problem, result))
    assert len(search.expanded_states) == len(set(search.expanded_states))


def test_open_grid_solution(open_grid):
    search = GraphSearchBFS()
    actions = search.search(open_grid, FIFOQueue())
    assert len(actions) == 3 + 4
    assert _replay(open_grid, actions) == (3, 4)
    assert search.metrics.path_cost == 7.0


def test_fewest_actions_is_not_cheapest_on_weighted_graphs():
    problem = romania_problem()
    search = GraphSearchBFS()
    actions = search.search(problem, FIFOQueue())
    assert actions == ["Sibiu", "Fagaras", "Bucharest"]
    assert search.metrics.path_cost == 450.0  # the cheapest route costs 418


def test_instance_reuse_starts_from_a_clean_slate(diamond, cyclic_unreachable):
    search = GraphSearchBFS()
    assert search.search(cyclic_unreachable, FIFOQueue()) is FAILURE
    assert search.explored == {"A", "B", "C"}

    # the second problem shares state names; nothing may leak across calls
    actions = search.search(diamond, FIFOQueue())
    assert actions == ["B", "D"]
    assert search.metrics.nodes_expanded == 3
    assert "D" in search.explored


def test_problem_errors_propagate():
    class Broken(GraphProblem):
        def result(self, s, a):
            raise KeyError(a)

    search = GraphSearchBFS()
    with pytest.raises(KeyError):
        search.search(Broken({"A": ["B"]}, "A", "B"), FIFOQueue())
    # the root was being expanded when the error surfaced
    assert search.metrics.nodes_expanded == 1


def test_tuple_states_with_a_single_tuple_goal():
    problem = GraphProblem({(0, 0): [(0, 1), (1, 1)], (0, 1): [], (1, 1): []}, (0, 0), (1, 1))
    assert problem.goals == frozenset([(1, 1)])
    assert GraphSearchBFS().search(problem, FIFOQueue()) == [(1, 1)]
