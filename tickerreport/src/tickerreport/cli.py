import sys
import logging
import click
from .config import ReportOptions
from .errors import format_error
from .logging import configure_logging
from . import pipeline

logger = logging.getLogger(__name__)


def _normalize_ticker(ctx, param, value):
    ticker = (value or "").strip().upper()
    if not ticker:
        raise click.BadParameter("ticker must be a non-empty symbol.")
    return ticker


@click.command()
@click.option("-t", "--ticker", required=True, callback=_normalize_ticker, help="Ticker symbol such as MSFT")
@click.option("--days", type=int, default=None, help="Lookback window in calendar days (default: one month)")
@click.option("--no-chart", is_flag=True, help="Omit the price chart")
@click.option("--no-cashflow", is_flag=True, help="Omit the free cash flow table")
@click.option("--no-header", is_flag=True, help="Omit the company header")
@click.option("--verbose", is_flag=True, help="Log fetch progress to stderr")
def cli(ticker, days, no_chart, no_cashflow, no_header, verbose):
    """
    Print a price history report for TICKER: quotes with daily returns,
    volatility, price ranges, next earnings date and free cash flow.
    """
    configure_logging(verbose=verbose)
    if days is not None and days < 1:
        raise click.BadParameter("--days must be >= 1.")

    options = ReportOptions(
        include_chart=not no_chart,
        include_cashflow=not no_cashflow,
        include_header=not no_header,
        lookback_days=days,
    )
    logger.info(f"Building report for {ticker}")
    click.echo(pipeline.run(ticker, options))


def main():
    """Entry point for the CLI."""
    try:
        cli(standalone_mode=False)
    except Exception as e:
        if isinstance(e, click.exceptions.Exit):
            sys.exit(e.exit_code)
        if isinstance(e, click.exceptions.Abort):
            sys.exit(130)

        click.echo(format_error(e), err=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
