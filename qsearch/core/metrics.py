# qsearch/core/metrics.py
# Per-call search counters, plus the timing/memory wrapper used by the convenience wrappers and benchmarks.
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional
import time, tracemalloc

@dataclass
class SearchMetrics:
    """Counters for a single search() call; a fresh instance is made per call."""
    nodes_expanded: int = 0
    frontier_size: int = 0
    max_frontier_size: int = 0
    path_cost: float = 0.0

    def record_frontier_size(self, size: int) -> None:
        self.frontier_size = size
        if size > self.max_frontier_size:
            self.max_frontier_size = size

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    max_frontier_size: int = 0
    error: Optional[str] = None

class MeasuredRun:
    """
    Context manager for wall time and (approximate) peak memory.
    .elapsed and .peak_kb can be read inside the with-block too.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_tracer: bool = False

    def __enter__(self) -> "MeasuredRun":
        # an outer tracer (e.g. a profiler) stays in charge if one is running
        self._owns_tracer = not tracemalloc.is_tracing()
        if self._owns_tracer:
            tracemalloc.start()
        self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        _, peak = tracemalloc.get_traced_memory()
        if self._owns_tracer:
            tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
