# qsearch/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque
from typing import Callable, Iterator, Protocol, TypeVar

T = TypeVar("T")


class Frontier(Protocol[T]):
    """What the search strategies need from a frontier container.
    The container alone decides which element pop() hands back."""
    def push(self, x: T) -> None: ...
    def pop(self) -> T: ...
    def peek(self) -> T: ...
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[T]: ...


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)
    def peek(self): return self.q[0]

class LIFOStack:
    def __init__(self):
        self.q = []
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)
    def __iter__(self): return reversed(self.q)
    def peek(self): return self.q[-1]

class PriorityQueue:
    """Min-heap by key(x). Equal keys come out in insertion order."""
    def __init__(self, key: Callable[[T], float]):
        self.key = key
        self.h = []
        self.counter = 0
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self):
        return heapq.heappop(self.h)[2]
    def __len__(self): return len(self.h)
    def __iter__(self):
        return (entry[2] for entry in self.h)
    def peek(self):
        return self.h[0][2]
