"""
Shared data structures for the application.
"""
from pydantic import BaseModel, ConfigDict, Field

__all__ = ["PricePoint", "TradeResult", "AlgorithmTiming"]


class PricePoint(BaseModel):
    """
    The price of the asset recorded on a given day.
    """

    model_config = ConfigDict(frozen=True)

    day: int = Field(..., ge=0, description="The day index of the observation.")
    price: int = Field(..., description="The recorded price. May be any sign.")


class TradeResult(BaseModel):
    """
    Represents the best trade found: buy on one day, sell on a later one.
    """

    model_config = ConfigDict(frozen=True)

    buy_day: int = Field(..., description="The day the asset is bought.")
    sell_day: int = Field(..., description="The day the asset is sold.")
    profit: int = Field(..., description="Sell price minus buy price. May be negative.")

    def __str__(self) -> str:
        return (
            f"Buy Date:   {self.buy_day}\n"
            f"Sell Date:  {self.sell_day}\n"
            f"Profit:     {self.profit}"
        )


class AlgorithmTiming(BaseModel):
    """The outcome of a single timed search call."""

    model_config = ConfigDict(frozen=True)

    algorithm: str
    size: int = Field(..., ge=0)
    elapsed_ns: int = Field(..., ge=0)
    result: TradeResult
