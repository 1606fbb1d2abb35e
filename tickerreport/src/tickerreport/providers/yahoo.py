import logging
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, List, Optional

import pandas as pd
import yfinance as yf

from ..config import DEFAULT_INTERVAL, DEFAULT_PERIOD
from ..errors import MissingDataError, ProviderError
from ..models.fundamentals import CashFlowRow, CompanyInfo
from ..models.prices import PriceBar, ensure_chronological

logger = logging.getLogger(__name__)

_FREE_CASH_FLOW_ROW = "Free Cash Flow"
_EARNINGS_DATE_KEY = "Earnings Date"


def _to_decimal(value: Any) -> Decimal:
    # via str so the float's binary noise is not carried into the Decimal
    return Decimal(str(value))


def _to_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if hasattr(value, "to_pydatetime"):
        return value.to_pydatetime().date()
    try:
        parsed = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError):
        return None
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime().date()


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if hasattr(value, "to_pydatetime"):
        return value.to_pydatetime()
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    return None


def fetch_prices(
    ticker: str,
    period: str = DEFAULT_PERIOD,
    interval: str = DEFAULT_INTERVAL,
    lookback_days: Optional[int] = None,
) -> List[PriceBar]:
    """
    Fetch daily price history as an ordered list of bars.
    With lookback_days the window starts that many calendar days ago,
    otherwise the fixed provider period is used.
    """
    try:
        t = yf.Ticker(ticker)
        if lookback_days:
            start = date.today() - timedelta(days=lookback_days)
            df = t.history(start=start.isoformat(), interval=interval)
        else:
            df = t.history(period=period, interval=interval)
    except Exception as e:
        logger.error(f"Failed to fetch prices for {ticker}: {e}")
        raise ProviderError(f"Yahoo prices failed: {e}", {"ticker": ticker})

    if df is None or df.empty:
        raise ProviderError(f"No price data for {ticker}", {"ticker": ticker})

    bars = []
    # df.index is a timezone-aware DatetimeIndex
    for ts, row in df.iterrows():
        volume = row.get("Volume")
        if volume is None or pd.isna(volume):
            raise MissingDataError(
                f"Missing volume for {ticker}",
                {"ticker": ticker, "date": ts.date().isoformat()},
            )
        bars.append(PriceBar(
            timestamp=ts.to_pydatetime(),
            open=_to_decimal(row["Open"]),
            high=_to_decimal(row["High"]),
            low=_to_decimal(row["Low"]),
            close=_to_decimal(row["Close"]),
            volume=int(volume),
        ))

    return ensure_chronological(bars)


def fetch_earnings_dates(ticker: str) -> List[datetime]:
    """Fetch upcoming earnings dates from the calendar, earliest first."""
    try:
        calendar = yf.Ticker(ticker).calendar or {}
    except Exception as e:
        logger.error(f"Failed to fetch calendar for {ticker}: {e}")
        raise ProviderError(f"Yahoo calendar failed: {e}", {"ticker": ticker})

    raw = calendar.get(_EARNINGS_DATE_KEY) or []
    dates = [d for d in (_to_datetime(v) for v in raw) if d is not None]
    return sorted(dates)


def fetch_company_info(ticker: str) -> CompanyInfo:
    """Fetch quick company metadata."""
    try:
        info = yf.Ticker(ticker).info or {}
    except Exception as e:
        logger.error(f"Failed to fetch metadata for {ticker}: {e}")
        raise ProviderError(f"Yahoo metadata failed: {e}", {"ticker": ticker})

    return CompanyInfo(
        symbol=info.get("symbol", ticker),
        name=info.get("longName") or info.get("shortName"),
        exchange=info.get("exchange"),
        currency=info.get("currency"),
    )


def fetch_cash_flow(ticker: str) -> List[CashFlowRow]:
    """
    Fetch annual free cash flow, one row per statement column.
    Cells the provider leaves empty become None.
    """
    try:
        df = yf.Ticker(ticker).cashflow
    except Exception as e:
        logger.error(f"Failed to fetch cash flow for {ticker}: {e}")
        raise ProviderError(f"Yahoo cash flow failed: {e}", {"ticker": ticker})

    if df is None or getattr(df, "empty", True):
        return []

    rows = []
    for col in df.columns:
        value = None
        if _FREE_CASH_FLOW_ROW in df.index:
            cell = df.at[_FREE_CASH_FLOW_ROW, col]
            if not pd.isna(cell):
                value = int(cell)
        rows.append(CashFlowRow(period_end=_to_date(col), free_cash_flow=value))
    return rows
