# qsearch/benchmarks/run_all.py
# Runs every uninformed strategy on the sample problems and saves results.json for plot_results.py.
from __future__ import annotations

import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

from ..algorithms.uninformed import breadth_first_search, depth_first_search, uniform_cost_search
from ..problems.grid import make_grid_problem
from ..problems.romania import romania_problem

# ---- Tunables (overridable via environment variables) -----------------------
LOG_LEVEL = os.getenv("QSEARCH_LOG_LEVEL", "WARNING")

ALGOS: List[Tuple[str, Callable[[Any], Any]]] = [
    ("BFS", breadth_first_search),
    ("DFS", depth_first_search),
    ("UCS", uniform_cost_search),
]

def _fmt_time(x):
    if isinstance(x, (int, float)):
        return f"{float(x):.4f}"
    return "n/a"

def _problems() -> List[Tuple[str, Any]]:
    return [("romania", romania_problem()), ("grid", make_grid_problem())]

def _run_one(problem_name: str, name: str, fn, problem) -> Dict[str, Any]:
    print(f"→ Running {name} on {problem_name} ...")
    try:
        r = fn(problem)
    except Exception as e:  # a broken problem must not stop the other runs
        print(f"  {name}: ERROR {e!r}")
        return {
            "problem": problem_name, "algo": name, "success": False, "error": repr(e),
            "actions": None, "cost": None, "nodes_expanded": None,
            "max_frontier_size": None, "time_s": None, "peak_kb": None,
        }
    print(
        f"  {r.algo}: {'OK' if r.success else 'FAIL'} "
        f"cost={r.cost} expanded={r.nodes_expanded}, "
        f"max_frontier={r.max_frontier_size}, time={_fmt_time(r.time_s)}s"
    )
    return {
        "problem": problem_name,
        "algo": r.algo,
        "success": r.success,
        "actions": [str(a) for a in r.actions],
        "cost": r.cost if r.success else None,
        "nodes_expanded": r.nodes_expanded,
        "max_frontier_size": r.max_frontier_size,
        "time_s": r.time_s,
        "peak_kb": r.peak_kb,
        "error": r.error,
    }

def run_all() -> Dict[str, Any]:
    rows = []
    for problem_name, problem in _problems():
        for name, fn in ALGOS:
            rows.append(_run_one(problem_name, name, fn, problem))
    return {"results": rows, "ts": time.time()}

def main():
    logging.basicConfig(level=LOG_LEVEL.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    out = run_all()
    print(json.dumps(out, indent=2))

    out_path = Path(__file__).with_name("results.json")
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")

if __name__ == "__main__":
    main()
