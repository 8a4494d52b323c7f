import pytest

from qsearch.problems.graph import GraphProblem
from qsearch.problems.grid import GridProblem


class CountingFIFO:
    """FIFO frontier that remembers every state ever pushed."""

    def __init__(self):
        from collections import deque
        self.q = deque()
        self.pushed = []

    def push(self, node):
        self.pushed.append(node.state)
        self.q.append(node)

    def pop(self):
        return self.q.popleft()

    def peek(self):
        return self.q[0]

    def __len__(self):
        return len(self.q)

    def __iter__(self):
        return iter(self.q)


@pytest.fixture
def counting_fifo():
    return CountingFIFO()


@pytest.fixture
def diamond():
    """A->B, A->C, B->D, C->D with goal D."""
    return GraphProblem({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}, "A", "D")


@pytest.fixture
def cyclic_unreachable():
    """A, B, C form cycles; D exists but nothing leads to it."""
    return GraphProblem({"A": ["B"], "B": ["A", "C"], "C": ["A", "B"], "D": ["A"]}, "A", "D")


@pytest.fixture
def open_grid():
    return GridProblem(rows=4, cols=5, start=(0, 0), goal=(3, 4))
