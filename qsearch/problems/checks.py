# qsearch/problems/checks.py
from __future__ import annotations
from collections import deque
from numbers import Real


def sanity_check_problem(problem, max_states: int = 10_000) -> str:
    """Walks up to `max_states` states breadth-first and checks that every
    step cost is a real number >= 0 and every state is hashable."""
    seen = set()
    q = deque([problem.initial_state()])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if not isinstance(cost, Real) or cost < 0:
                raise AssertionError(f"bad step_cost {cost!r} for (s={s!r}, a={a!r}, s'={s2!r})")
            hash(s2)
            q.append(s2)
    return f"OK: visited {len(seen)} states; all step costs are numbers >= 0."
