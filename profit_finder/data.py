"""
Price file loading, writing, and synthetic series generation.

A price file is whitespace-separated text: the number of days first, then one
integer price per day. Day numbers are assigned from the position in the file.
"""
import logging
from pathlib import Path
from typing import List, Sequence

import numpy as np

from profit_finder.errors import InvalidInputError
from profit_finder.types import PricePoint

__all__ = ["parse_price_text", "load_price_series", "write_price_file", "generate_price_series"]

log = logging.getLogger(__name__)


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise InvalidInputError(f"Expected an integer {what}, got {token!r}.") from e


def parse_price_text(text: str) -> List[PricePoint]:
    """
    Parses price file content into a list of PricePoint with day == index.

    Raises:
        InvalidInputError: On an empty file, a negative or non-integer count,
            a non-integer price, or fewer prices than the count declares.
    """
    tokens = text.split()
    if not tokens:
        raise InvalidInputError("Price file is empty; expected a day count.")

    count = _parse_int(tokens[0], "day count")
    if count < 0:
        raise InvalidInputError(f"Day count must not be negative, got {count}.")

    values = tokens[1:]
    if len(values) < count:
        raise InvalidInputError(f"Expected {count} prices but found only {len(values)}.")
    if len(values) > count:
        log.debug(f"Ignoring {len(values) - count} tokens after the declared {count} prices.")

    return [PricePoint(day=day, price=_parse_int(token, "price")) for day, token in enumerate(values[:count])]


# impure
def load_price_series(path: Path) -> List[PricePoint]:
    """
    Loads a price series from a price file.
    #impure: Reads from the filesystem.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Price file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Price file {path} is not UTF-8 text: {e}") from e

    series = parse_price_text(text)
    log.info(f"Loaded {len(series)} prices from {path}.")
    return series


# impure
def write_price_file(prices: Sequence[int], path: Path) -> None:
    """
    Writes prices in the price file format: the count, then one price per line.
    #impure: Writes to the filesystem.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [str(len(prices))] + [str(int(p)) for p in prices]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    log.info(f"Wrote {len(prices)} prices to {path}.")


def generate_price_series(size: int, low: int, high: int, seed: int) -> List[PricePoint]:
    """
    Generates a reproducible random price series.

    Args:
        size: Number of days.
        low: Smallest possible price (inclusive).
        high: Largest possible price (inclusive).
        seed: Seed for numpy's default generator.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}.")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high}).")

    rng = np.random.default_rng(seed)
    prices = rng.integers(low, high, size=size, endpoint=True)
    return [PricePoint(day=day, price=int(price)) for day, price in enumerate(prices)]
