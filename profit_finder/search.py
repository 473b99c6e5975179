"""
Maximum-profit search over a daily price series.

Two pure functions solve the same problem: find the buy day and the later
sell day that maximize ``price[sell] - price[buy]``. The profit may be
negative when prices only fall.

- ``exhaustive_search`` checks every pair, Theta(n^2).
- ``divide_and_conquer_search`` splits the series in half, solves each half
  and the best trade crossing the midpoint, Theta(n log n).

Both share one tie-break rule: among trades with equal profit the one with the
earliest buy day wins, then the earliest sell day. Under that rule the two
functions return identical results for every valid input.
"""
from typing import Sequence

from profit_finder.errors import InvalidInputError
from profit_finder.types import PricePoint, TradeResult

__all__ = ["exhaustive_search", "divide_and_conquer_search"]

# Sub-ranges at or below this length are searched exhaustively.
BASE_CASE_SIZE = 3


def _validate_series(series: Sequence[PricePoint]) -> None:
    """Rejects series that cannot hold a trade or whose days are out of order."""
    if len(series) < 2:
        raise InvalidInputError(
            f"A price series needs at least 2 points to form a trade, got {len(series)}."
        )
    for i in range(1, len(series)):
        prev, point = series[i - 1], series[i]
        if point.day <= prev.day:
            raise InvalidInputError(
                f"Days must be strictly increasing: day {point.day} follows day {prev.day}."
            )


def _is_better(candidate: TradeResult, best: TradeResult) -> bool:
    """True if `candidate` should replace `best` under the shared tie-break rule."""
    if candidate.profit != best.profit:
        return candidate.profit > best.profit
    return (candidate.buy_day, candidate.sell_day) < (best.buy_day, best.sell_day)


def _trade(buy: PricePoint, sell: PricePoint) -> TradeResult:
    return TradeResult(buy_day=buy.day, sell_day=sell.day, profit=sell.price - buy.price)


def _exhaustive(series: Sequence[PricePoint], start: int, end: int) -> TradeResult:
    """Pairwise scan of series[start:end]. The first maximal pair in scan order wins."""
    # Seeded with the first pair so the result is defined when every profit is negative.
    best = _trade(series[start], series[start + 1])
    for buy in range(start, end):
        buy_price = series[buy].price
        for sell in range(buy + 1, end):
            if series[sell].price - buy_price > best.profit:
                best = _trade(series[buy], series[sell])
    return best


def _minimum_of(series: Sequence[PricePoint], start: int, end: int) -> PricePoint:
    """Lowest-priced point in series[start:end]; first occurrence wins on ties."""
    minimum = series[start]
    for i in range(start + 1, end):
        if series[i].price < minimum.price:
            minimum = series[i]
    return minimum


def _maximum_of(series: Sequence[PricePoint], start: int, end: int) -> PricePoint:
    """Highest-priced point in series[start:end]; first occurrence wins on ties."""
    maximum = series[start]
    for i in range(start + 1, end):
        if series[i].price > maximum.price:
            maximum = series[i]
    return maximum


def _divide_and_conquer(series: Sequence[PricePoint], start: int, end: int) -> TradeResult:
    size = end - start
    if size <= BASE_CASE_SIZE:
        return _exhaustive(series, start, end)

    mid = start + size // 2
    left_best = _divide_and_conquer(series, start, mid)
    right_best = _divide_and_conquer(series, mid, end)

    # Best trade that buys in the left half and sells in the right half.
    cross = _trade(_minimum_of(series, start, mid), _maximum_of(series, mid, end))

    best = left_best
    for candidate in (cross, right_best):
        if _is_better(candidate, best):
            best = candidate
    return best


def exhaustive_search(series: Sequence[PricePoint]) -> TradeResult:
    """
    Finds the maximum-profit trade by checking every (buy, sell) pair.

    Args:
        series: Price points ordered by strictly increasing day, at least 2 long.
            The series is only read, never modified.

    Returns:
        The best TradeResult. Among equal profits the earliest buy day wins,
        then the earliest sell day.

    Raises:
        InvalidInputError: If the series is too short or its days are unordered.
    """
    _validate_series(series)
    return _exhaustive(series, 0, len(series))


def divide_and_conquer_search(series: Sequence[PricePoint]) -> TradeResult:
    """
    Finds the maximum-profit trade by recursive halving.

    The series is searched through index ranges, so no sub-series is copied.
    Ranges of 3 points or fewer fall back to the exhaustive scan. Otherwise the
    answer is the best of the left half, the right half, and the trade buying
    at the left minimum and selling at the right maximum.

    Args:
        series: Price points ordered by strictly increasing day, at least 2 long.

    Returns:
        The same TradeResult ``exhaustive_search`` returns for this series.

    Raises:
        InvalidInputError: If the series is too short or its days are unordered.
    """
    _validate_series(series)
    return _divide_and_conquer(series, 0, len(series))
