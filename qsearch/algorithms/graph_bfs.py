# qsearch/algorithms/graph_bfs.py
# Breadth-first graph search: each distinct state enters the frontier at most once and is expanded at most once.
from __future__ import annotations
from typing import Optional, Set
from ..core.expander import NodeExpander
from ..core.frontiers import Frontier
from ..core.node import Node
from ..core.problem import Problem, State
from .queue_search import QueueSearch, SearchOutcome


class GraphSearchBFS(QueueSearch):
    """
    GRAPH-SEARCH specialised for breadth-first order.

    A node is pushed only if its state is neither explored nor already held
    by a node in the frontier; otherwise it is dropped without notice. Popping
    moves the state from the frontier-state index into the explored set.

    With a FIFO frontier the first goal popped has the fewest actions of any
    solution. It is not the cheapest one when step costs differ. Pairing this
    class with a priority or LIFO frontier is a misuse: the shortest-path
    guarantee is lost and nothing here detects or repairs that.
    """

    def __init__(self, node_expander: Optional[NodeExpander] = None):
        super().__init__(node_expander)
        self.explored: Set[State] = set()
        self.frontier_states: Set[State] = set()

    def search(self, problem: Problem, frontier: Frontier[Node]) -> SearchOutcome:
        self.explored = set()
        self.frontier_states = set()
        return super().search(problem, frontier)

    def add_to_frontier(self, node: Node) -> None:
        s = node.state
        if s in self.explored or s in self.frontier_states:
            return
        self.frontier.push(node)
        self.frontier_states.add(s)
        self.update_metrics(len(self.frontier))

    def remove_from_frontier(self) -> Node:
        node = self.frontier.pop()
        self.frontier_states.discard(node.state)
        self.explored.add(node.state)
        self.update_metrics(len(self.frontier))
        return node

    def is_frontier_empty(self) -> bool:
        return len(self.frontier) == 0
