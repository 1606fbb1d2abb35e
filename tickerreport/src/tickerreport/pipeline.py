"""
Report orchestration: fetch every input concurrently, join, then compute
metrics and assemble the text report.
"""
import logging
import concurrent.futures
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .config import DEFAULT_PERIOD, MAX_FETCH_WORKERS, ReportOptions
from .errors import TickerReportError
from .metrics import analyze
from .models.fundamentals import CashFlowRow, CompanyInfo
from .models.prices import PriceBar
from .providers import yahoo
from .report.chart import render_chart
from .report.summary import format_header, summary_lines
from .report.tables import build_cash_flow_table, build_quote_table, render

logger = logging.getLogger(__name__)


class ReportInputs(BaseModel):
    """
    Joined provider results for one report. None marks data that was not
    requested, or (for earnings) could not be fetched.
    """
    symbol: str
    bars: List[PriceBar] = Field(default_factory=list)
    earnings_dates: Optional[List[datetime]] = None
    company: Optional[CompanyInfo] = None
    cash_flow: Optional[List[CashFlowRow]] = None


def _earnings_or_none(future: concurrent.futures.Future, symbol: str) -> Optional[List[datetime]]:
    try:
        return future.result()
    except TickerReportError as e:
        logger.warning(f"No earnings data for {symbol}: {e.message}")
        return None


def fetch_inputs(symbol: str, options: ReportOptions) -> ReportInputs:
    """
    Issue the provider requests in parallel and wait for all of them.
    Price history failures propagate. Earnings failures become None.
    Metadata and cash flow are fetched only when their section is on,
    and then their failures propagate too.
    """
    logger.info(f"Fetching report inputs for {symbol}")
    with concurrent.futures.ThreadPoolExecutor(max_workers=MAX_FETCH_WORKERS) as executor:
        fut_prices = executor.submit(
            yahoo.fetch_prices, symbol, DEFAULT_PERIOD, options.interval, options.lookback_days
        )
        fut_earnings = executor.submit(yahoo.fetch_earnings_dates, symbol)
        fut_company = None
        if options.include_header:
            fut_company = executor.submit(yahoo.fetch_company_info, symbol)
        fut_cash = None
        if options.include_cashflow:
            fut_cash = executor.submit(yahoo.fetch_cash_flow, symbol)
        # leaving the executor block waits for every request

    bars = fut_prices.result()
    logger.info(f"Fetched {len(bars)} price bars for {symbol}")

    return ReportInputs(
        symbol=symbol,
        bars=bars,
        earnings_dates=_earnings_or_none(fut_earnings, symbol),
        company=fut_company.result() if fut_company else None,
        cash_flow=fut_cash.result() if fut_cash else None,
    )


def build_report(inputs: ReportInputs, options: ReportOptions) -> str:
    """
    Assemble the report text: header, quote table, blank line, chart,
    price analysis, cash-flow table. Disabled or empty sections are left
    out.
    """
    analysis = analyze(inputs.bars, options.periods_per_year)

    sections = []
    if options.include_header:
        header = format_header(inputs.company)
        if header:
            sections.append(header)

    sections.append(render(build_quote_table(inputs.bars, analysis.returns), options.table_width))
    sections.append("")

    if options.include_chart and inputs.bars:
        closes = [bar.close for bar in inputs.bars]
        sections.append(render_chart(closes, options.chart_width, options.chart_height))

    sections.extend(summary_lines(analysis, inputs.earnings_dates))

    if options.include_cashflow and inputs.cash_flow:
        complete = [row for row in inputs.cash_flow if row.is_complete]
        if complete:
            sections.append(render(build_cash_flow_table(complete), options.table_width))

    return "\n".join(sections)


def run(symbol: str, options: ReportOptions) -> str:
    """Fetch everything for symbol and return the finished report."""
    inputs = fetch_inputs(symbol, options)
    return build_report(inputs, options)
