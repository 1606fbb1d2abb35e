from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

class PriceRange(BaseModel):
    """Low/high span of a price series."""
    low: Decimal
    high: Decimal

    class Config:
        frozen = True


class VolatilitySummary(BaseModel):
    """Return dispersion statistics; annualized figure is in percent."""
    mean_return: float
    std_dev: float
    annualized_volatility_pct: float

    class Config:
        frozen = True


class PriceAnalysis(BaseModel):
    """
    Derived metrics for one price series. Optional fields are None when
    the series is too short for them.
    """
    returns: List[float] = Field(default_factory=list)
    pct_change: Optional[Decimal] = None
    volatility: Optional[VolatilitySummary] = None
    intraday_range: Optional[PriceRange] = None
    closing_range: Optional[PriceRange] = None
