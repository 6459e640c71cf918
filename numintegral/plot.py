from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd

OUT_PNG = "integral_timing.png"


def _pick_col(cols, candidates):
    """Pick the first matching column name from candidates (case-insensitive)."""
    lower_map = {c.lower(): c for c in cols}
    for cand in candidates:
        if cand.lower() in lower_map:
            return lower_map[cand.lower()]
    return None


def load_sweep(path: str) -> pd.DataFrame:
    df = pd.read_csv(path)

    # hand-edited CSVs spell the headers in different ways
    col_fn = _pick_col(df.columns, ["function", "Function", "func"])
    col_n = _pick_col(df.columns, ["n", "N", "samples"])
    col_time = _pick_col(df.columns, ["time_ms", "elapsed_ms", "time"])

    if col_n is None or col_time is None:
        raise ValueError(
            f"Cannot find required columns in {path}. "
            f"Found columns: {list(df.columns)}"
        )

    out = pd.DataFrame(
        {
            "function": df[col_fn].astype(str) if col_fn is not None else "f",
            "n": pd.to_numeric(df[col_n], errors="coerce"),
            "time_ms": pd.to_numeric(df[col_time], errors="coerce"),
        }
    )
    return out.dropna().sort_values(["function", "n"]).reset_index(drop=True)


def plot_sweep(frame: pd.DataFrame, out_png: str = OUT_PNG) -> str:
    fig, ax = plt.subplots()
    for label, group in frame.groupby("function", sort=True):
        ax.plot(group["n"], group["time_ms"], marker="o", label=label)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("sample count n")
    ax.set_ylabel("integration time (ms)")
    ax.set_title("Midpoint rule timing")
    ax.legend()
    fig.tight_layout()
    fig.savefig(out_png, dpi=200)
    plt.close(fig)
    return out_png
