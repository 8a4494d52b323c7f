# qsearch/problems/romania.py
# The AIMA Romania road map (Fig. 3.1) as a weighted route-finding problem.
from __future__ import annotations
from typing import Dict, Iterable

from .graph import GraphProblem


# Road distances (bidirectional) from AIMA Fig. 3.1
_GRAPH: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Arad": 75, "Oradea": 71},
    "Oradea": {"Zerind": 71, "Sibiu": 151},
    "Sibiu": {"Arad": 140, "Oradea": 151, "Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Arad": 118, "Lugoj": 111},
    "Lugoj": {"Timisoara": 111, "Mehadia": 70},
    "Mehadia": {"Lugoj": 70, "Drobeta": 75},
    "Drobeta": {"Mehadia": 75, "Craiova": 120},
    "Craiova": {"Drobeta": 120, "Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Sibiu": 80, "Craiova": 146, "Pitesti": 97},
    "Fagaras": {"Sibiu": 99, "Bucharest": 211},
    "Pitesti": {"Rimnicu Vilcea": 97, "Craiova": 138, "Bucharest": 101},
    "Bucharest": {"Fagaras": 211, "Pitesti": 101, "Giurgiu": 90, "Urziceni": 85},
    "Giurgiu": {"Bucharest": 90},
    "Urziceni": {"Bucharest": 85, "Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Urziceni": 98, "Eforie": 86},
    "Eforie": {"Hirsova": 86},
    "Vaslui": {"Urziceni": 142, "Iasi": 92},
    "Iasi": {"Vaslui": 92, "Neamt": 87},
    "Neamt": {"Iasi": 87},
}


class RomaniaProblem(GraphProblem):
    """States are city names; ACTIONS(s) are the neighbouring cities and the
    step cost is the road distance in km."""

    def __init__(self, start: str = "Arad", goal: str = "Bucharest"):
        if start not in _GRAPH or goal not in _GRAPH:
            raise ValueError(f"unknown city: {start if start not in _GRAPH else goal!r}")
        super().__init__(_GRAPH, start, goal)
        self.goal = goal

    def actions(self, state) -> Iterable[str]:
        return sorted(self.graph[state])


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> RomaniaProblem:
    return RomaniaProblem(start=start, goal=goal)
