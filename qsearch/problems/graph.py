# qsearch/problems/graph.py
# Route-finding over an explicit adjacency map. Handy for small hand-drawn graphs in tests and demos.
from __future__ import annotations
from typing import Dict, Iterable, Mapping, Optional, Collection, Hashable, Union

Edges = Union[Mapping[Hashable, float], Iterable[Hashable]]


class GraphProblem:
    """
    Directed graph problem.

    - State: a vertex
    - ACTIONS(s): the successors of s, in the order they were given
    - RESULT(s, a): a (the action *is* the successor vertex)
    - IS-GOAL(s): s in goals
    - c(s, a, s'): edge weight, 1.0 when the edges were given as a plain list
    """
    def __init__(self, graph: Mapping[Hashable, Edges], start: Hashable,
                 goals: Union[Hashable, Collection[Hashable], None] = None):
        # a tuple is one (composite) goal state; pass a set or list for several goals
        self.graph: Dict[Hashable, Dict[Hashable, float]] = {}
        for u, edges in graph.items():
            if isinstance(edges, Mapping):
                self.graph[u] = {v: float(w) for v, w in edges.items()}
            else:
                self.graph[u] = {v: 1.0 for v in edges}
        self.start = start
        if goals is None:
            self.goals = frozenset()
        elif isinstance(goals, (set, frozenset, list)):
            self.goals = frozenset(goals)
        else:
            self.goals = frozenset([goals])

    @classmethod
    def undirected(cls, edges: Iterable[tuple], start, goals=None) -> "GraphProblem":
        """Build from (u, v) or (u, v, w) triples, adding both directions."""
        graph: Dict[Hashable, Dict[Hashable, float]] = {}
        for e in edges:
            u, v = e[0], e[1]
            w = float(e[2]) if len(e) > 2 else 1.0
            graph.setdefault(u, {})[v] = w
            graph.setdefault(v, {})[u] = w
        return cls(graph, start, goals)

    def initial_state(self):
        return self.start

    def is_goal(self, state) -> bool:
        return state in self.goals

    def actions(self, state) -> Iterable[Hashable]:
        return list(self.graph.get(state, {}))

    def result(self, state, action):
        return action

    def step_cost(self, state, action, next_state) -> float:
        return self.graph[state][next_state]

    def weight(self, u, v) -> Optional[float]:
        return self.graph.get(u, {}).get(v)
