# qsearch/algorithms/queue_search.py
# The generic frontier-driven search loop. Subclasses decide how nodes enter and leave the frontier.
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Union
from ..core.errors import FAILURE, SearchExhausted
from ..core.expander import NodeExpander
from ..core.frontiers import Frontier
from ..core.metrics import SearchMetrics
from ..core.node import Node
from ..core.problem import Problem, Action

logger = logging.getLogger(__name__)

SearchOutcome = Union[List[Action], SearchExhausted]


class QueueSearch(ABC):
    """
    Template for tree and graph search (AIMA Fig. 3.7):

        root := MAKE-NODE(problem.INITIAL-STATE)
        if root is a goal: return its (empty) solution
        add root to the frontier
        loop:
            if the frontier is empty: return failure
            node := remove a node from the frontier
            if node is a goal: return SOLUTION(node)
            add every child of EXPAND(node) to the frontier

    The three hooks add_to_frontier / remove_from_frontier / is_frontier_empty
    are the only things a strategy overrides. They work on `self.frontier`,
    the container handed to the current search() call.

    One instance runs one search at a time; it keeps the frontier and metrics
    of the running call on itself.
    """

    def __init__(self, node_expander: Optional[NodeExpander] = None):
        self.node_expander = node_expander or NodeExpander()
        self.frontier: Optional[Frontier[Node]] = None
        self.metrics = SearchMetrics()

    def search(self, problem: Problem, frontier: Frontier[Node]) -> SearchOutcome:
        self.frontier = frontier
        self.metrics = SearchMetrics()
        self.node_expander.reset_metrics()
        expander = self.node_expander
        logger.debug("%s: starting search", type(self).__name__)

        root = expander.make_root_node(problem)
        if expander.is_goal_node(root, problem):
            return self._solution(root)

        self.add_to_frontier(root)
        while not self.is_frontier_empty():
            node = self.remove_from_frontier()
            if expander.is_goal_node(node, problem):
                return self._solution(node)
            children = expander.expand(node, problem)
            self.metrics.nodes_expanded = expander.nodes_expanded
            for child in children:
                self.add_to_frontier(child)

        logger.debug("%s: frontier exhausted after %d expansions",
                     type(self).__name__, self.metrics.nodes_expanded)
        return FAILURE

    def _solution(self, node: Node) -> List[Action]:
        self.metrics.nodes_expanded = self.node_expander.nodes_expanded
        self.metrics.path_cost = node.path_cost
        return self.node_expander.create_action_sequence(node)

    def update_metrics(self, frontier_size: int) -> None:
        self.metrics.record_frontier_size(frontier_size)

    @abstractmethod
    def add_to_frontier(self, node: Node) -> None:
        """Offer `node` to the frontier; the strategy may drop it."""

    @abstractmethod
    def remove_from_frontier(self) -> Node:
        """Take the next node to examine out of the frontier."""

    @abstractmethod
    def is_frontier_empty(self) -> bool:
        """True when no node is left to examine."""
