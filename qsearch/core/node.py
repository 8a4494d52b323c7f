# qsearch/core/node.py
# A Node is one entry of the search tree: a state plus the path (parent links) used to reach it.
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from .problem import State, Action


@dataclass(frozen=True, eq=False)
class Node:
    state: State
    parent: Optional["Node"] = None
    action: Optional[Action] = None  # None only for the root
    path_cost: float = 0.0
    depth: int = 0

    def is_root(self) -> bool:
        return self.parent is None

    def child(self, state: State, action: Action, step_cost: float) -> "Node":
        return Node(
            state=state,
            parent=self,
            action=action,
            path_cost=self.path_cost + float(step_cost),
            depth=self.depth + 1,
        )

    def __repr__(self) -> str:
        return f"Node(state={self.state!r}, action={self.action!r}, g={self.path_cost}, d={self.depth})"
