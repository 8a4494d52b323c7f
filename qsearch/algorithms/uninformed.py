# qsearch/algorithms/uninformed.py
# One-call BFS / DFS / UCS: pick the strategy and frontier, time the run, and package a SearchResult.
from __future__ import annotations
from typing import Callable
from ..core.errors import is_failure
from ..core.frontiers import FIFOQueue, LIFOStack, PriorityQueue, Frontier
from ..core.metrics import SearchResult, MeasuredRun
from ..core.node import Node
from ..core.problem import Problem
from .graph_bfs import GraphSearchBFS
from .graph_search import GraphSearch
from .queue_search import QueueSearch


def run_search(name: str, strategy: QueueSearch, problem: Problem,
               make_frontier: Callable[[], Frontier[Node]]) -> SearchResult:
    with MeasuredRun() as meter:
        outcome = strategy.search(problem, make_frontier())
    m = strategy.metrics
    if is_failure(outcome):
        return SearchResult(name, False, [], float("inf"), m.nodes_expanded,
                            meter.elapsed, meter.peak_kb, m.max_frontier_size)
    return SearchResult(name, True, outcome, m.path_cost, m.nodes_expanded,
                        meter.elapsed, meter.peak_kb, m.max_frontier_size)


def breadth_first_search(problem: Problem) -> SearchResult:
    return run_search("BFS", GraphSearchBFS(), problem, FIFOQueue)


def depth_first_search(problem: Problem) -> SearchResult:
    # graph version: complete on finite spaces, never optimal
    return run_search("DFS", GraphSearch(), problem, LIFOStack)


def uniform_cost_search(problem: Problem) -> SearchResult:
    return run_search("UCS", GraphSearch(), problem,
                      lambda: PriorityQueue(key=lambda n: n.path_cost))
