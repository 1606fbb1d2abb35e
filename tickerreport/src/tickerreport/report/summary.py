from datetime import datetime
from typing import List, Optional, Sequence

from ..models.fundamentals import CompanyInfo
from ..models.metrics import PriceAnalysis, PriceRange

EARNINGS_FORMAT = "%Y-%m-%d %H:%M"


def format_header(company: Optional[CompanyInfo]) -> Optional[str]:
    """Company name line, or None when the provider had no name."""
    if company is None or not company.name:
        return None
    header = f"{company.name} ({company.symbol})"
    extras = [v for v in (company.exchange, company.currency) if v]
    if extras:
        header += " - " + ", ".join(extras)
    return header


def _format_range(label: str, price_range: PriceRange) -> str:
    return f"{label}: {price_range.low:.2f} - {price_range.high:.2f}"


def next_earnings_date(dates: Optional[Sequence[datetime]]) -> Optional[datetime]:
    if not dates:
        return None
    return min(dates)


def summary_lines(analysis: PriceAnalysis, earnings_dates: Optional[Sequence[datetime]] = None) -> List[str]:
    """
    Price-analysis lines in report order. A line is left out when its
    metric was not computed.
    """
    lines = []
    if analysis.pct_change is not None:
        lines.append(f"pct change over period: {analysis.pct_change:.2f}")

    if analysis.volatility is not None:
        lines.append(f"std dev of returns: {analysis.volatility.std_dev:.4f}")
        lines.append(f"annualized volatility: {analysis.volatility.annualized_volatility_pct:.2f}")

    if analysis.intraday_range is not None:
        lines.append(_format_range("intraday range", analysis.intraday_range))
    if analysis.closing_range is not None:
        lines.append(_format_range("closing range", analysis.closing_range))

    earnings = next_earnings_date(earnings_dates)
    if earnings is not None:
        lines.append(f"earnings date: {earnings.strftime(EARNINGS_FORMAT)}")

    return lines
