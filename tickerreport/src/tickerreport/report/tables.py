"""
Tabular sections of the report: the daily quote table and the
free-cash-flow table.
"""
import io
from decimal import Decimal
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from ..config import TABLE_WIDTH
from ..models.fundamentals import CashFlowRow
from ..models.prices import PriceBar

QUOTE_HEADERS = ["Date", "Volume", "Open", "High", "Low", "Close", "Return %"]
CASH_FLOW_HEADERS = ["Year End", "Free Cash Flow"]


def format_grouped(value: int) -> str:
    """Thousands grouped with commas (en locale)."""
    return f"{value:,}"


def format_price(value: Decimal) -> str:
    return f"{value:.2f}"


def format_return_pct(pct: float) -> str:
    """
    Two decimals; non-negative values get a leading space so they line
    up with the minus sign of negative ones.
    """
    if pct < 0:
        return f"{pct:.2f}"
    return f" {pct:.2f}"


def _new_table(headers: Sequence[str], right_from: int) -> Table:
    table = Table(box=box.SQUARE, show_edge=True, pad_edge=True)
    for idx, header in enumerate(headers):
        table.add_column(header, justify="right" if idx >= right_from else "left", no_wrap=True)
    return table


def build_quote_table(bars: Sequence[PriceBar], returns: Sequence[float]) -> Table:
    """
    One row per bar. Row 0 has a blank return; row i shows returns[i - 1].
    """
    table = _new_table(QUOTE_HEADERS, right_from=1)
    for idx, bar in enumerate(bars):
        ret_fmt = ""
        if idx > 0:
            ret_fmt = format_return_pct(returns[idx - 1] * 100.0)
        table.add_row(
            bar.day.isoformat(),
            format_grouped(bar.volume),
            format_price(bar.open),
            format_price(bar.high),
            format_price(bar.low),
            format_price(bar.close),
            ret_fmt,
        )
    return table


def build_cash_flow_table(rows: Sequence[CashFlowRow]) -> Table:
    """Year-end date and free cash flow; incomplete rows are skipped."""
    table = _new_table(CASH_FLOW_HEADERS, right_from=1)
    for row in rows:
        if not row.is_complete:
            continue
        table.add_row(row.period_end.isoformat(), format_grouped(row.free_cash_flow))
    return table


def render(renderable: Any, width: int = TABLE_WIDTH) -> str:
    """Render a rich renderable to plain text without colour codes."""
    buf = io.StringIO()
    console = Console(
        file=buf,
        width=width,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )
    console.print(renderable)
    return buf.getvalue().rstrip("\n")
