# qsearch/algorithms/tree_search.py
# Tree-like search: no memory of visited states, so repeated states are searched again.
from __future__ import annotations
from ..core.node import Node
from .queue_search import QueueSearch


class TreeSearch(QueueSearch):
    """Pushes every node it is given. Only terminates on finite acyclic spaces
    unless a goal turns up first."""

    def add_to_frontier(self, node: Node) -> None:
        self.frontier.push(node)
        self.update_metrics(len(self.frontier))

    def remove_from_frontier(self) -> Node:
        node = self.frontier.pop()
        self.update_metrics(len(self.frontier))
        return node

    def is_frontier_empty(self) -> bool:
        return len(self.frontier) == 0
