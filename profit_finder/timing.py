"""
Wall-clock timing of the search algorithms.
"""
import time
from typing import Callable, Dict, Sequence

from profit_finder.search import divide_and_conquer_search, exhaustive_search
from profit_finder.types import AlgorithmTiming, PricePoint, TradeResult

__all__ = ["ALGORITHMS", "time_algorithm"]

ALGORITHMS: Dict[str, Callable[[Sequence[PricePoint]], TradeResult]] = {
    "exhaustive": exhaustive_search,
    "divide_and_conquer": divide_and_conquer_search,
}


def time_algorithm(name: str, series: Sequence[PricePoint]) -> AlgorithmTiming:
    """
    Runs one search algorithm on `series` and measures its elapsed time.

    Raises:
        KeyError: If `name` is not a known algorithm.
    """
    if name not in ALGORITHMS:
        raise KeyError(f"Unknown algorithm '{name}'. Choose from: {', '.join(ALGORITHMS)}")
    search = ALGORITHMS[name]

    start = time.perf_counter_ns()
    result = search(series)
    elapsed_ns = time.perf_counter_ns() - start

    return AlgorithmTiming(algorithm=name, size=len(series), elapsed_ns=elapsed_ns, result=result)
