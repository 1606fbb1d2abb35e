"""
Named constants and the report configuration object.

Calculation and formatting code never reads these directly; the
orchestrator passes them in through ReportOptions.
"""
from typing import Optional
from pydantic import BaseModel, Field

TRADING_DAYS_PER_YEAR = 252

# Provider request shape
DEFAULT_PERIOD = "1mo"
DEFAULT_INTERVAL = "1d"
MAX_FETCH_WORKERS = 4

# Output canvas
CHART_WIDTH = 60
CHART_HEIGHT = 15
TABLE_WIDTH = 120


class ReportOptions(BaseModel):
    """
    Which optional sections to render and how to size them.
    """
    include_chart: bool = True
    include_cashflow: bool = True
    include_header: bool = True

    # None means the fixed DEFAULT_PERIOD range
    lookback_days: Optional[int] = Field(None, ge=1)
    interval: str = DEFAULT_INTERVAL

    chart_width: int = Field(CHART_WIDTH, ge=2)
    chart_height: int = Field(CHART_HEIGHT, ge=2)
    table_width: int = TABLE_WIDTH
    periods_per_year: int = TRADING_DAYS_PER_YEAR

    class Config:
        frozen = True
