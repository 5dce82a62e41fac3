# unit_pathfinder/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE


def load_rows(path: Path = RESULTS_JSON) -> List[dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m unit_pathfinder.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful scenario to plot.")
    return rows


def _sorted(rows, key):
    return sorted(rows, key=lambda r: math.inf if r.get(key) is None else r[key])


def _bar(ax, rows, metric, title, ylabel):
    names = [r["scenario"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]
    x = list(range(len(names)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(names, rotation=20, ha="right")
    top = max(vals) or 1
    for xi, v in zip(x, vals):
        label = f"{v:.4f}" if isinstance(v, float) else f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def fmt_table(rows) -> str:
    lines = [
        "| Scenario | Steps | Turns | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    for r in rows:
        lines.append(
            f"| {r['scenario']} | {r['steps']} | {r['turns']} | {r['nodes_expanded']} | "
            f"{r['time_s']:.6f} | {r['peak_kb']} |"
        )
    return "\n".join(lines)


def compare_figure(rows, title="Path finder scenarios"):
    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    axs = axs.ravel()
    _bar(axs[0], _sorted(rows, "nodes_expanded"), "nodes_expanded", "Nodes Expanded", "nodes")
    _bar(axs[1], _sorted(rows, "turns"), "turns", "Turns to Destination", "turns")
    _bar(axs[2], _sorted(rows, "time_s"), "time_s", "Wall Time", "seconds")
    _bar(axs[3], _sorted(rows, "peak_kb"), "peak_kb", "Peak Memory", "KB")
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


def main():
    rows = load_rows()

    md_path = OUT_DIR / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    fig = compare_figure(rows)
    png_path = OUT_DIR / "scenarios.png"
    png_path.write_bytes(fig_to_png_bytes(fig))
    plt.close(fig)
    print(f"Wrote {png_path}")


if __name__ == "__main__":
    main()
