"""
Empirical comparison of the search algorithms against their theoretical
complexity.
"""
import logging
import math
from typing import Dict, List, Any

import numpy as np
import pandas as pd

from profit_finder.config import Config
from profit_finder.data import generate_price_series
from profit_finder.timing import time_algorithm

__all__ = ["theoretical_ops", "run_benchmark", "complexity_fit"]

log = logging.getLogger(__name__)

BENCHMARK_COLUMNS = ["algorithm", "size", "elapsed_ns", "profit", "theoretical_ops", "ns_per_op"]


def theoretical_ops(algorithm: str, size: int) -> float:
    """Operation count predicted by the algorithm's complexity class."""
    if algorithm == "exhaustive":
        return float(size * size)
    if algorithm == "divide_and_conquer":
        return size * math.log2(size)
    raise KeyError(f"Unknown algorithm '{algorithm}'.")


def run_benchmark(config: Config) -> pd.DataFrame:
    """
    Times every configured algorithm on a generated series of each size.

    Each (algorithm, size) cell is run `benchmark.repeats` times and the
    median elapsed time is kept. The series for a size is seeded with
    `run.seed + size`, so every algorithm sees the same prices.

    Returns:
        A DataFrame with one row per (algorithm, size) and the columns
        algorithm, size, elapsed_ns, profit, theoretical_ops, ns_per_op.

    Raises:
        RuntimeError: If the algorithms disagree on the maximum profit.
    """
    bench = config.benchmark
    rows: List[Dict[str, Any]] = []

    for size in bench.sizes:
        series = generate_price_series(
            size, config.data.price_low, config.data.price_high, config.run.seed + size
        )
        profits = {}
        for algorithm in bench.algorithms:
            timings = [time_algorithm(algorithm, series) for _ in range(bench.repeats)]
            elapsed_ns = int(np.median([t.elapsed_ns for t in timings]))
            profits[algorithm] = timings[0].result.profit
            ops = theoretical_ops(algorithm, size)
            rows.append({
                "algorithm": algorithm,
                "size": size,
                "elapsed_ns": elapsed_ns,
                "profit": timings[0].result.profit,
                "theoretical_ops": ops,
                "ns_per_op": elapsed_ns / ops,
            })

        if len(set(profits.values())) > 1:
            raise RuntimeError(f"Algorithms disagree on the maximum profit for size {size}: {profits}")
        log.info(f"Benchmarked size {size}: {profits}")

    log.info(f"Benchmark complete. {len(rows)} measurements.")
    return pd.DataFrame(rows, columns=BENCHMARK_COLUMNS)


def complexity_fit(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Fits the growth exponent of elapsed time against series size.

    For each algorithm the slope of log(elapsed_ns) over log(size) is compared
    with the slope of log(theoretical_ops) over the same sizes: about 2.0 for
    the exhaustive scan and slightly above 1.0 for divide and conquer.
    Algorithms measured at fewer than two sizes get NaN exponents.
    """
    columns = ["algorithm", "empirical_exponent", "theoretical_exponent"]
    if frame.empty:
        return pd.DataFrame(columns=columns)

    rows = []
    for algorithm, group in frame.groupby("algorithm", sort=False):
        if group["size"].nunique() < 2:
            rows.append({"algorithm": algorithm, "empirical_exponent": np.nan, "theoretical_exponent": np.nan})
            continue
        log_size = np.log(group["size"].to_numpy(dtype=float))
        # Clamp to 1 ns so a too-fast measurement cannot produce log(0).
        log_elapsed = np.log(np.maximum(group["elapsed_ns"].to_numpy(dtype=float), 1.0))
        log_ops = np.log(group["theoretical_ops"].to_numpy(dtype=float))
        rows.append({
            "algorithm": algorithm,
            "empirical_exponent": float(np.polyfit(log_size, log_elapsed, 1)[0]),
            "theoretical_exponent": float(np.polyfit(log_size, log_ops, 1)[0]),
        })
    return pd.DataFrame(rows, columns=columns)
