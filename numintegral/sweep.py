"""Time the midpoint rule over a range of sample counts.

    numintegral-sweep --function-id 1 3 --lower 0 --upper 3.14159 --csv out.csv --png out.png
    numintegral-sweep --from-csv out.csv --png replot.png
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Any, Dict, List, Optional

import pandas as pd

from numintegral.errors import IntegralError
from numintegral.integral_core import N_VALUES, compute_integrals
from numintegral.plot import OUT_PNG, load_sweep, plot_sweep

logger = logging.getLogger(__name__)


def sweep_frame(payload: Dict[str, Any]) -> pd.DataFrame:
    """Flatten a ``compute_integrals`` payload into one row per sample count."""
    frame = pd.DataFrame(payload["results"], columns=["n", "value", "time_ms"])
    frame.insert(0, "function_id", payload["function_id"])
    frame.insert(1, "function", payload["function"])
    frame["intensity"] = payload["intensity"]
    return frame


def run_sweep(function_ids, lower: float, upper: float, intensity: int = 0, n_values=N_VALUES) -> pd.DataFrame:
    frames: List[pd.DataFrame] = []
    for function_id in function_ids:
        logger.info("sweeping f%d over [%g, %g]", function_id, lower, upper)
        payload = compute_integrals(function_id, lower, upper, intensity, n_values)
        frames.append(sweep_frame(payload))
    return pd.concat(frames, ignore_index=True)


def _finite_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"must be a finite number, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Midpoint rule timing sweep")
    parser.add_argument("--function-id", type=int, nargs="+",
                        help="one or more function ids (1-4)")
    parser.add_argument("--lower", type=_finite_float, help="lower bound of the integral")
    parser.add_argument("--upper", type=_finite_float, help="upper bound of the integral")
    parser.add_argument("--intensity", type=int, default=0, help="per-sample cost knob")
    parser.add_argument("--n", type=int, nargs="+", default=N_VALUES, help="sample counts to time")
    parser.add_argument("--csv", help="write the results table here")
    parser.add_argument("--png", help="write a timing plot here")
    parser.add_argument("--from-csv", metavar="PATH",
                        help="skip the sweep and plot a previously saved table")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def replot(csv_path: str, out_png: str = OUT_PNG) -> str:
    frame = load_sweep(csv_path)
    plot_sweep(frame, out_png)
    logger.info("saved plot: %s", out_png)
    return out_png


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(message)s",
        stream=sys.stderr,
    )

    if args.from_csv:
        try:
            replot(args.from_csv, args.png or OUT_PNG)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return -1
        return 0

    if args.function_id is None or args.lower is None or args.upper is None:
        parser.error("--function-id, --lower and --upper are required unless --from-csv is given")

    try:
        frame = run_sweep(args.function_id, args.lower, args.upper, args.intensity, args.n)
    except IntegralError as e:
        print(f"Error: {e}", file=sys.stderr)
        return -1

    print(frame.to_string(index=False))

    if args.csv:
        frame.to_csv(args.csv, index=False)
        logger.info("saved table: %s", args.csv)
    if args.png:
        plot_sweep(frame, args.png)
        logger.info("saved plot: %s", args.png)
    return 0


if __name__ == "__main__":
    sys.exit(main())
