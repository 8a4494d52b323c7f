# qsearch/benchmarks/plot_results.py
# Turns results.json into bar charts (one PNG per metric and problem) and a markdown table.
from __future__ import annotations
import io
import json
import math
from collections import defaultdict
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

METRICS = [
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes"),
    ("max_frontier_size", "Max Frontier Size (lower is better)", "nodes"),
    ("cost", "Path Cost (lower is better)", "cost"),
    ("time_s", "Wall Time (lower is better)", "seconds"),
]

def load_rows(path: Path | None = None):
    path = path or RESULTS_JSON
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m qsearch.benchmarks.run_all")
    rows = json.loads(path.read_text()).get("results", [])
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        return math.inf if v is None else v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]
    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")
    top = max(vals) or 1
    for xi, v in zip(x, vals):
        label = f"{v:.4f}" if isinstance(v, float) and v < 0.01 else (f"{v:.3f}" if isinstance(v, float) else f"{v}")
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def fmt_table(rows) -> str:
    lines = [
        "| Problem | Algorithm | Actions | Cost | Nodes Expanded | Max Frontier | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        n_actions = len(r["actions"]) if r.get("actions") is not None else None
        lines.append(
            f"| {r.get('problem', '')} | {r['algo']} | {fnum(n_actions)} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('max_frontier_size'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def main():
    rows = load_rows()

    md_path = OUT_DIR / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    by_problem = defaultdict(list)
    for r in rows:
        by_problem[r.get("problem", "problem")].append(r)

    for problem, prow in by_problem.items():
        for metric, title, ylabel in METRICS:
            fig, ax = plt.subplots(figsize=(6, 4))
            _bar(ax, _sorted(prow, metric), metric, f"{problem}: {title}", ylabel)
            fig.tight_layout()
            out = OUT_DIR / f"{problem}_{metric}.png"
            out.write_bytes(fig_to_png_bytes(fig))
            plt.close(fig)
            print(f"Wrote {out}")

if __name__ == "__main__":
    main()
