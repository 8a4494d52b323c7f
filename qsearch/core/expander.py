# qsearch/core/expander.py
# Builds root/child nodes for a problem, counts expansions and turns a goal node back into its action list.
from __future__ import annotations
import logging
from numbers import Real
from typing import Callable, Iterator, List
from .node import Node
from .problem import Problem, Action

logger = logging.getLogger(__name__)

NodeListener = Callable[[Node], None]


class NodeExpander:
    def __init__(self) -> None:
        self.nodes_expanded = 0
        self._listeners: List[NodeListener] = []

    def add_node_listener(self, listener: NodeListener) -> None:
        """`listener(node)` is called for every node handed to expand()."""
        self._listeners.append(listener)

    def reset_metrics(self) -> None:
        self.nodes_expanded = 0

    def make_root_node(self, problem: Problem) -> Node:
        return Node(problem.initial_state())

    def is_goal_node(self, node: Node, problem: Problem) -> bool:
        return bool(problem.is_goal(node.state))

    def expand(self, node: Node, problem: Problem) -> Iterator[Node]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost.

        The expansion is counted here, when expand() is called, not as the
        children are pulled. The returned iterator is lazy and single-pass.
        """
        self.nodes_expanded += 1
        for listener in self._listeners:
            listener(node)
        return self._children(node, problem)

    def _children(self, node: Node, problem: Problem) -> Iterator[Node]:
        s = node.state
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if not isinstance(cost, Real) or not cost >= 0:
                raise ValueError(
                    f"step_cost returned {cost!r} for (s={s!r}, a={a!r}, s'={s2!r}); "
                    "step costs must be numbers >= 0."
                )
            yield node.child(s2, a, cost)

    def create_action_sequence(self, node: Node) -> List[Action]:
        actions = []
        cur = node
        while cur.parent is not None:
            actions.append(cur.action)
            cur = cur.parent
        actions.reverse()
        logger.debug("solution of %d action(s), cost %s", len(actions), node.path_cost)
        return actions
