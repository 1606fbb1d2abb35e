"""
Price series metrics: simple returns, realized volatility, price ranges
and period percent change.

Prices stay Decimal wherever they reach the report. Returns are floats;
the statistics built on them do not need exact decimal arithmetic.
"""
import math
import logging
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .errors import CalculationError
from .models.metrics import PriceAnalysis, PriceRange, VolatilitySummary
from .models.prices import PriceBar

logger = logging.getLogger(__name__)

MIN_BARS_PCT_CHANGE = 2
MIN_BARS_VOLATILITY = 3


def calc_returns(bars: Sequence[PriceBar]) -> List[float]:
    """
    Per-period simple returns, one fewer than the number of bars.
    Empty or single-bar input gives an empty list.
    """
    returns: List[float] = []
    for prev, cur in zip(bars, bars[1:]):
        prev_close = float(prev.close)
        if prev_close == 0:
            raise CalculationError(
                "Cannot compute return from a zero close",
                {"date": prev.day.isoformat()},
            )
        returns.append((float(cur.close) - prev_close) / prev_close)
    return returns


def estimate_volatility(returns: Sequence[float], periods_per_year: int) -> VolatilitySummary:
    """
    Sample mean and sample standard deviation (n - 1) of the returns,
    annualized by sqrt(periods_per_year) and expressed as a percentage.
    """
    if len(returns) < 2:
        raise CalculationError(
            "At least two returns are needed to estimate volatility",
            {"returns": len(returns)},
        )

    series = pd.Series(list(returns), dtype="float64")
    mean_return = float(series.mean())
    std_dev = float(series.std(ddof=1))
    annualized = std_dev * math.sqrt(periods_per_year) * 100.0

    return VolatilitySummary(
        mean_return=mean_return,
        std_dev=std_dev,
        annualized_volatility_pct=annualized,
    )


def extract_price_ranges(bars: Sequence[PriceBar]) -> Optional[Tuple[PriceRange, PriceRange]]:
    """
    (intraday, closing) ranges in one pass, or None for an empty series.
    """
    if not bars:
        return None

    first = bars[0]
    intraday_low, intraday_high = first.low, first.high
    closing_low = closing_high = first.close
    for bar in bars[1:]:
        intraday_low = min(intraday_low, bar.low)
        intraday_high = max(intraday_high, bar.high)
        closing_low = min(closing_low, bar.close)
        closing_high = max(closing_high, bar.close)

    return (
        PriceRange(low=intraday_low, high=intraday_high),
        PriceRange(low=closing_low, high=closing_high),
    )


def pct_change(bars: Sequence[PriceBar]) -> Decimal:
    """First-to-last close change in percent, in exact decimal arithmetic."""
    if len(bars) < MIN_BARS_PCT_CHANGE:
        raise CalculationError(
            "At least two bars are needed for a percent change",
            {"bars": len(bars)},
        )

    first = bars[0].close
    last = bars[-1].close
    if first == 0:
        raise CalculationError(
            "Cannot compute percent change from a zero first close",
            {"date": bars[0].day.isoformat()},
        )
    return Decimal(100) * (last - first) / first


def analyze(bars: Sequence[PriceBar], periods_per_year: int) -> PriceAnalysis:
    """
    Run every metric whose length precondition the series meets.
    Short series leave the corresponding fields as None.
    """
    returns = calc_returns(bars)

    change = None
    if len(bars) >= MIN_BARS_PCT_CHANGE:
        change = pct_change(bars)

    volatility = None
    if len(bars) >= MIN_BARS_VOLATILITY:
        volatility = estimate_volatility(returns, periods_per_year)
    else:
        logger.info(f"Skipping volatility: {len(bars)} bars, need {MIN_BARS_VOLATILITY}")

    intraday = closing = None
    ranges = extract_price_ranges(bars)
    if ranges:
        intraday, closing = ranges

    return PriceAnalysis(
        returns=returns,
        pct_change=change,
        volatility=volatility,
        intraday_range=intraday,
        closing_range=closing,
    )
