# qsearch/algorithms/graph_search.py
# General graph search for any frontier order (LIFO, priority, ...): an explored set, checked when nodes leave the frontier.
from __future__ import annotations
from typing import Optional, Set
from ..core.expander import NodeExpander
from ..core.frontiers import Frontier
from ..core.node import Node
from ..core.problem import Problem, State
from .queue_search import QueueSearch, SearchOutcome


class GraphSearch(QueueSearch):
    """
    Nodes for unexplored states are always pushed, so the frontier may hold
    several nodes for one state. The frontier's order picks which of them is
    popped first; the rest are thrown away when they surface later. With a
    path-cost priority frontier this is uniform-cost search.
    """

    def __init__(self, node_expander: Optional[NodeExpander] = None):
        super().__init__(node_expander)
        self.explored: Set[State] = set()

    def search(self, problem: Problem, frontier: Frontier[Node]) -> SearchOutcome:
        self.explored = set()
        return super().search(problem, frontier)

    def add_to_frontier(self, node: Node) -> None:
        if node.state not in self.explored:
            self.frontier.push(node)
            self.update_metrics(len(self.frontier))

    def remove_from_frontier(self) -> Node:
        self._drop_explored_heads()
        node = self.frontier.pop()
        self.explored.add(node.state)
        self.update_metrics(len(self.frontier))
        return node

    def is_frontier_empty(self) -> bool:
        self._drop_explored_heads()
        return len(self.frontier) == 0

    def _drop_explored_heads(self) -> None:
        while len(self.frontier) and self.frontier.peek().state in self.explored:
            self.frontier.pop()
        self.update_metrics(len(self.frontier))
