# Defines the interface every search problem must offer to the search framework (states, actions, goals, costs).
# qsearch/core/problem.py
from __future__ import annotations
from typing import Iterable, Protocol, Hashable

Action = Hashable
State = Hashable

class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view).

    The framework never looks inside a State or an Action; it only needs
    states to be hashable and comparable so they can live in sets.
    """
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...
