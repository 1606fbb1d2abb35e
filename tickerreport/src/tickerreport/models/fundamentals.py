from datetime import date
from typing import Optional
from pydantic import BaseModel

class CompanyInfo(BaseModel):
    """
    Quick company metadata used for the report header.
    """
    symbol: str
    name: Optional[str] = None
    exchange: Optional[str] = None
    currency: Optional[str] = None


class CashFlowRow(BaseModel):
    """
    One reporting year of the cash-flow statement.
    """
    period_end: Optional[date] = None
    free_cash_flow: Optional[int] = None

    class Config:
        frozen = True

    @property
    def is_complete(self) -> bool:
        return self.period_end is not None and self.free_cash_flow is not None
